"""JSON-RPC providers for canwork-deployments library."""

import itertools
import logging
from typing import Any, List, Optional, Union
from urllib.parse import urlsplit

import requests

from .constants import ANY_NETWORK, DEFAULT_RPC_TIMEOUT, MNEMONIC_WORD_COUNTS, WALLET_MNEMONIC_ENV
from .exceptions import (
    ChainMismatchError,
    InvalidMnemonicError,
    MissingEnvironmentError,
    ProviderConnectionError,
    RPCResponseError,
)
from .units import from_hex

logger = logging.getLogger(__name__)


def redact_url(url: str) -> str:
    """Strip path, query and credentials from an RPC URL (API keys live there)."""
    try:
        parts = urlsplit(url)
        port = f":{parts.port}" if parts.port else ""
    except ValueError:
        return "<unparseable url>"
    if not parts.scheme or not parts.hostname:
        return "<unparseable url>"
    return f"{parts.scheme}://{parts.hostname}{port}"


class HTTPProvider:
    """Plain JSON-RPC 2.0 provider speaking to a node over HTTP."""

    def __init__(self, rpc_url: str, timeout: int = DEFAULT_RPC_TIMEOUT):
        self.rpc_url = rpc_url
        self.timeout = timeout
        self._request_ids = itertools.count(1)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(rpc_url={redact_url(self.rpc_url)!r})"

    def make_request(self, method: str, params: Optional[List[Any]] = None) -> Any:
        """
        Send a JSON-RPC request and return its result.

        Args:
            method: JSON-RPC method name, e.g. "eth_chainId"
            params: Positional parameters (defaults to [])

        Returns:
            The "result" member of the response

        Raises:
            ProviderConnectionError: If a network error occurs, status is not 200
                or the body is not JSON
            RPCResponseError: If the node returns a JSON-RPC error or a malformed response
        """
        request_id = next(self._request_ids)
        logger.debug("RPC %s (id=%d) -> %s", method, request_id, redact_url(self.rpc_url))

        try:
            response = requests.post(
                self.rpc_url,
                json={
                    "jsonrpc": "2.0",
                    "method": method,
                    "params": params if params is not None else [],
                    "id": request_id,
                },
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise ProviderConnectionError(f"Network error during RPC call: {e}") from e

        if response.status_code != 200:
            raise ProviderConnectionError(
                f"RPC request failed with status {response.status_code}"
            )

        try:
            result = response.json()
        except ValueError as e:
            raise ProviderConnectionError(f"RPC response is not valid JSON: {e}") from e

        if not isinstance(result, dict):
            raise RPCResponseError(f"Malformed RPC response: {result!r}")

        if "error" in result:
            raise RPCResponseError(f"RPC error: {result['error']}")

        if "result" not in result:
            raise RPCResponseError("Malformed RPC response: missing 'result'")

        return result["result"]

    def _quantity(self, method: str) -> int:
        # Quantities come back as 0x-prefixed hex strings
        value = self.make_request(method)
        try:
            return from_hex(value)
        except ValueError as e:
            raise RPCResponseError(f"Invalid quantity from {method}: {value!r}") from e

    def chain_id(self) -> int:
        """Return the chain id reported by the node."""
        return self._quantity("eth_chainId")

    def block_number(self) -> int:
        """Return the latest block number reported by the node."""
        return self._quantity("eth_blockNumber")

    def verify_network(self, network_id: Union[int, str]) -> int:
        """
        Check that the node is on the expected chain.

        Args:
            network_id: Expected chain id, or "*" to accept any chain

        Returns:
            The chain id reported by the node

        Raises:
            ChainMismatchError: If the node reports a different chain
        """
        chain_id = self.chain_id()
        if network_id != ANY_NETWORK and chain_id != network_id:
            raise ChainMismatchError(
                f"Connected to chain {chain_id}, expected {network_id}"
            )
        return chain_id


class HDWalletProvider(HTTPProvider):
    """
    Wallet-backed provider: an RPC endpoint plus the mnemonic of the deploying wallet.

    The mnemonic is only checked for presence and BIP-39 word count; this
    class neither derives keys nor signs transactions.
    """

    def __init__(
        self,
        mnemonic: Optional[str],
        rpc_url: str,
        timeout: int = DEFAULT_RPC_TIMEOUT,
    ):
        """
        Initialize the provider.

        Args:
            mnemonic: Wallet mnemonic (whitespace separated words)
            rpc_url: RPC endpoint URL
            timeout: Request timeout in seconds

        Raises:
            MissingEnvironmentError: If mnemonic is empty or None
            InvalidMnemonicError: If mnemonic word count is not a BIP-39 length
        """
        if not mnemonic:
            raise MissingEnvironmentError(
                f"Wallet mnemonic required: set ${WALLET_MNEMONIC_ENV}"
            )

        words = mnemonic.split()
        if len(words) not in MNEMONIC_WORD_COUNTS:
            raise InvalidMnemonicError(
                f"Mnemonic has {len(words)} words, expected one of {MNEMONIC_WORD_COUNTS}"
            )

        super().__init__(rpc_url, timeout)
        self._mnemonic = " ".join(words)
        logger.debug("Created wallet provider for %s", redact_url(rpc_url))

    @property
    def mnemonic(self) -> str:
        return self._mnemonic
