"""Shared pytest fixtures for canwork-deployments tests."""

from typing import Dict

import pytest

from canwork_deployments.config import build_config
from canwork_deployments.types import DeploymentConfig

# Standard BIP-39 test vector, not a funded wallet
TEST_MNEMONIC = (
    "abandon abandon abandon abandon abandon abandon "
    "abandon abandon abandon abandon abandon about"
)


@pytest.fixture
def test_mnemonic() -> str:
    """Return a 12-word mnemonic."""
    return TEST_MNEMONIC


@pytest.fixture
def full_environ(test_mnemonic: str) -> Dict[str, str]:
    """Environment with every variable the remote profiles need."""
    return {
        "WALLET_MNEMONIC": test_mnemonic,
        "INFURA_ADMIN_API_KEY": "test-infura-key",
        "MAINNET_RPC_URL": "http://mainnet-rpc.example.com",
    }


@pytest.fixture
def empty_environ() -> Dict[str, str]:
    """Environment with none of the variables set."""
    return {}


@pytest.fixture
def config(full_environ: Dict[str, str]) -> DeploymentConfig:
    """Deployment config built from the full environment."""
    return build_config(full_environ)
