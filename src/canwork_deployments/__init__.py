"""
canwork-deployments: network profiles and compiler settings for deploying the CanWork job contracts
"""

from importlib.metadata import PackageNotFoundError, version

from .config import build_config, select_network
from .exceptions import (
    ChainMismatchError,
    DeploymentConfigError,
    InvalidMnemonicError,
    MissingEnvironmentError,
    NetworkNotFoundError,
    ProviderConnectionError,
    RPCResponseError,
)
from .providers import HDWalletProvider, HTTPProvider
from .types import (
    CompilerSettings,
    DeploymentConfig,
    HostEndpoint,
    NetworkProfile,
    OptimizerSettings,
    ProviderFactory,
)

try:
    __version__ = version("canwork-deployments")
except PackageNotFoundError:
    __version__ = None

__all__ = [
    "build_config",
    "select_network",
    "DeploymentConfig",
    "NetworkProfile",
    "HostEndpoint",
    "ProviderFactory",
    "CompilerSettings",
    "OptimizerSettings",
    "HTTPProvider",
    "HDWalletProvider",
    "DeploymentConfigError",
    "NetworkNotFoundError",
    "MissingEnvironmentError",
    "InvalidMnemonicError",
    "ProviderConnectionError",
    "RPCResponseError",
    "ChainMismatchError",
]
