"""Configuration constants for canwork-deployments library."""

from .units import to_wei

# Environment variables read when the configuration is built
WALLET_MNEMONIC_ENV = "WALLET_MNEMONIC"
INFURA_API_KEY_ENV = "INFURA_ADMIN_API_KEY"
MAINNET_RPC_ENV = "MAINNET_RPC_URL"
DEPLOY_NETWORK_ENV = "DEPLOY_NETWORK"

DEFAULT_NETWORK = "ganache"

# Wildcard network id: the profile accepts whatever chain the node reports
ANY_NETWORK = "*"

DEFAULT_GAS_PRICE = to_wei(20, "gwei")

DEFAULT_RPC_TIMEOUT = 30

# BIP-39 mnemonic lengths
MNEMONIC_WORD_COUNTS = (12, 15, 18, 21, 24)

# Global solc optimizer setting, shared by every profile
OPTIMIZER_ENABLED = True
OPTIMIZER_RUNS = 200

# Network profiles
# Local profiles carry host/port; remote profiles carry an RPC URL template
# whose {placeholders} are environment variable names.
NETWORK_CONFIG = {
    "ganache": {
        "network_id": ANY_NETWORK,
        "gas_limit": 5_000_000,
        "gas_price": None,
        "host": "localhost",
        "port": 8545,
    },
    "ropsten": {
        "network_id": 3,
        "gas_limit": 2_000_000,
        "gas_price": DEFAULT_GAS_PRICE,
        "rpc_url": "https://ropsten.infura.io/v3/{" + INFURA_API_KEY_ENV + "}",
    },
    "mainnet": {
        "network_id": 1,
        "gas_limit": None,
        "gas_price": to_wei(6, "gwei"),
        "rpc_url": "{" + MAINNET_RPC_ENV + "}",
    },
}
