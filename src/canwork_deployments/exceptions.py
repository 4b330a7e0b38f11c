"""Custom exception classes for canwork-deployments library."""


class DeploymentConfigError(Exception):
    """Base exception for deployment configuration errors."""

    pass


class NetworkNotFoundError(DeploymentConfigError, ValueError):
    """Raised when requested network profile is not defined."""

    pass


class MissingEnvironmentError(DeploymentConfigError, ValueError):
    """Raised when a provider is invoked without a required environment variable."""

    pass


class InvalidMnemonicError(DeploymentConfigError, ValueError):
    """Raised when a wallet mnemonic has an invalid word count."""

    pass


class ProviderConnectionError(DeploymentConfigError, RuntimeError):
    """Raised when the RPC endpoint cannot be reached or answers with a non-200 status."""

    pass


class RPCResponseError(DeploymentConfigError, ValueError):
    """Raised when the RPC endpoint returns a JSON-RPC error."""

    pass


class ChainMismatchError(DeploymentConfigError, ValueError):
    """Raised when the connected chain does not match the profile's network id."""

    pass
