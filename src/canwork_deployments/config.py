"""Main API for canwork-deployments library."""

import logging
import os
from typing import Any, Dict, Mapping, Optional

from .constants import (
    DEFAULT_NETWORK,
    DEPLOY_NETWORK_ENV,
    NETWORK_CONFIG,
    OPTIMIZER_ENABLED,
    OPTIMIZER_RUNS,
)
from .types import (
    CompilerSettings,
    DeploymentConfig,
    Endpoint,
    HostEndpoint,
    NetworkProfile,
    OptimizerSettings,
    ProviderFactory,
)

logger = logging.getLogger(__name__)


def _build_endpoint(network_config: Dict[str, Any], environ: Mapping[str, str]) -> Endpoint:
    # Local profiles pin host/port; everything else goes through a lazy provider
    if "host" in network_config:
        return HostEndpoint(host=network_config["host"], port=network_config["port"])
    return ProviderFactory.from_environ(network_config["rpc_url"], environ)


def build_config(environ: Optional[Mapping[str, str]] = None) -> DeploymentConfig:
    """
    Assemble the deployment configuration.

    Missing environment variables are not an error here: remote profiles only
    need them when their provider factory is invoked.

    Args:
        environ: Environment mapping (defaults to os.environ)

    Returns:
        DeploymentConfig with every profile from NETWORK_CONFIG and the
        global optimizer setting
    """
    if environ is None:
        environ = os.environ

    networks: Dict[str, NetworkProfile] = {}
    for name, network_config in NETWORK_CONFIG.items():
        networks[name] = NetworkProfile(
            name=name,
            network_id=network_config["network_id"],
            endpoint=_build_endpoint(network_config, environ),
            gas_limit=network_config.get("gas_limit"),
            gas_price=network_config.get("gas_price"),
        )

    compiler = CompilerSettings(
        optimizer=OptimizerSettings(enabled=OPTIMIZER_ENABLED, runs=OPTIMIZER_RUNS)
    )

    logger.debug("Built deployment config with networks: %s", ", ".join(networks))
    return DeploymentConfig(networks=networks, compiler=compiler)


def select_network(
    name: Optional[str] = None, environ: Optional[Mapping[str, str]] = None
) -> NetworkProfile:
    """
    Build the configuration and select the one profile for this run.

    Args:
        name: Profile name (defaults to $DEPLOY_NETWORK, then "ganache")
        environ: Environment mapping (defaults to os.environ)

    Returns:
        The selected NetworkProfile

    Raises:
        NetworkNotFoundError: If the name matches no profile
    """
    if environ is None:
        environ = os.environ
    if name is None:
        name = environ.get(DEPLOY_NETWORK_ENV) or DEFAULT_NETWORK

    profile = build_config(environ).network(name)
    logger.info("Selected network '%s' (network_id=%s)", profile.name, profile.network_id)
    return profile
