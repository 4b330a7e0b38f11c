"""Data types and dataclasses for canwork-deployments library."""

import string
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from .constants import ANY_NETWORK, DEFAULT_RPC_TIMEOUT, WALLET_MNEMONIC_ENV
from .exceptions import MissingEnvironmentError, NetworkNotFoundError
from .providers import HDWalletProvider, HTTPProvider

NetworkId = Union[int, str]  # chain id, or "*" for any chain


def template_variables(template: str) -> List[str]:
    """
    List the environment variable names referenced by an RPC URL template.

    Args:
        template: URL template with {ENV_NAME} placeholders

    Returns:
        Placeholder names in order of appearance
    """
    return [
        name
        for _, name, _, _ in string.Formatter().parse(template)
        if name
    ]


@dataclass(frozen=True)
class HostEndpoint:
    """Fixed host/port endpoint of a local node."""

    host: str
    port: int

    @property
    def url(self) -> str:
        return f"http://{self.host}:{self.port}"

    def connect(self, timeout: int = DEFAULT_RPC_TIMEOUT) -> HTTPProvider:
        return HTTPProvider(self.url, timeout)


@dataclass(frozen=True)
class ProviderFactory:
    """
    Lazy construction of a wallet-backed provider for a remote node.

    Holds the RPC URL template and a snapshot of the environment variables it
    depends on, taken when the configuration was built. Nothing is
    instantiated, and nothing is validated, until the factory is called.
    """

    rpc_url_template: str
    # Pairs of (name, value); values are None for variables unset at build time
    environ: Tuple[Tuple[str, Optional[str]], ...] = field(default=(), repr=False)

    @classmethod
    def from_environ(cls, rpc_url_template: str, environ: Mapping[str, str]) -> "ProviderFactory":
        """
        Snapshot the variables a remote provider needs from an environment.

        Args:
            rpc_url_template: URL template with {ENV_NAME} placeholders
            environ: Environment mapping (e.g. os.environ)

        Returns:
            ProviderFactory capturing the wallet mnemonic and template variables
        """
        names = [WALLET_MNEMONIC_ENV] + template_variables(rpc_url_template)
        return cls(
            rpc_url_template=rpc_url_template,
            environ=tuple((name, environ.get(name)) for name in names),
        )

    def _lookup(self, name: str) -> str:
        value = dict(self.environ).get(name)
        if not value:
            raise MissingEnvironmentError(
                f"Environment variable ${name} is required to build this provider"
            )
        return value

    def rpc_url(self) -> str:
        """
        Resolve the RPC URL template against the captured environment.

        Raises:
            MissingEnvironmentError: If a referenced variable was unset
        """
        values = {
            name: self._lookup(name)
            for name in template_variables(self.rpc_url_template)
        }
        return self.rpc_url_template.format(**values)

    def connect(self, timeout: int = DEFAULT_RPC_TIMEOUT) -> HDWalletProvider:
        """
        Construct the wallet-backed provider.

        Raises:
            MissingEnvironmentError: If the mnemonic or a URL variable was unset
            InvalidMnemonicError: If the mnemonic has an invalid word count
        """
        return HDWalletProvider(self._lookup(WALLET_MNEMONIC_ENV), self.rpc_url(), timeout)

    def __call__(self) -> HDWalletProvider:
        return self.connect()


Endpoint = Union[HostEndpoint, ProviderFactory]


@dataclass(frozen=True)
class NetworkProfile:
    """Named bundle of network connection and fee parameters."""

    name: str  # "ganache", "ropsten" or "mainnet"
    network_id: NetworkId
    endpoint: Endpoint
    gas_limit: Optional[int] = None
    gas_price: Optional[int] = None  # wei

    @property
    def is_local(self) -> bool:
        return isinstance(self.endpoint, HostEndpoint)

    def matches_chain(self, chain_id: int) -> bool:
        """Check whether a chain id is acceptable for this profile."""
        return self.network_id == ANY_NETWORK or self.network_id == chain_id

    def to_dict(self) -> Dict[str, Any]:
        """
        Render the profile with the key names the external build tool expects.

        Optional gas fields are omitted when unset. Remote profiles expose the
        uninvoked factory under "provider".
        """
        result: Dict[str, Any] = {"network_id": self.network_id}

        if self.gas_limit is not None:
            result["gas"] = self.gas_limit
        if self.gas_price is not None:
            result["gasPrice"] = self.gas_price

        match self.endpoint:
            case HostEndpoint(host=host, port=port):
                result["host"] = host
                result["port"] = port
            case ProviderFactory():
                result["provider"] = self.endpoint

        return result


@dataclass(frozen=True)
class OptimizerSettings:
    """Solc optimizer switch and run count."""

    enabled: bool
    runs: int


@dataclass(frozen=True)
class CompilerSettings:
    optimizer: OptimizerSettings


@dataclass(frozen=True)
class DeploymentConfig:
    """Network profiles keyed by name plus the global compiler setting."""

    networks: Mapping[str, NetworkProfile]
    compiler: CompilerSettings

    def __post_init__(self) -> None:
        # Read-only view over a private copy
        object.__setattr__(self, "networks", MappingProxyType(dict(self.networks)))

    def __hash__(self) -> int:
        return hash((frozenset(self.networks.items()), self.compiler))

    def has_network(self, name: str) -> bool:
        return name in self.networks

    def network_names(self) -> List[str]:
        return list(self.networks.keys())

    def network(self, name: str) -> NetworkProfile:
        """
        Select a single network profile.

        Args:
            name: Profile name

        Returns:
            NetworkProfile

        Raises:
            NetworkNotFoundError: If no profile has that name
        """
        if name not in self.networks:
            raise NetworkNotFoundError(
                f"Network '{name}' not defined; available: {', '.join(self.networks)}"
            )
        return self.networks[name]

    def to_dict(self) -> Dict[str, Any]:
        """Render the configuration in the schema consumed by the external build tool."""
        return {
            "networks": {name: profile.to_dict() for name, profile in self.networks.items()},
            "solc": {
                "optimizer": {
                    "enabled": self.compiler.optimizer.enabled,
                    "runs": self.compiler.optimizer.runs,
                }
            },
        }
