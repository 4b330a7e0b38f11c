"""Ether denomination helpers for canwork-deployments library."""

from decimal import Decimal
from typing import Union

UNITS = {
    "wei": 1,
    "gwei": 10**9,
    "ether": 10**18,
}


def to_wei(amount: Union[int, str, Decimal], unit: str = "wei") -> int:
    """
    Convert an amount in the given denomination to wei.

    Args:
        amount: Amount to convert (int, decimal string or Decimal)
        unit: One of "wei", "gwei", "ether" (case-insensitive)

    Returns:
        Integer amount in wei

    Raises:
        ValueError: If unit is unknown or the result is not a whole number of wei
    """
    multiplier = UNITS.get(unit.lower())
    if multiplier is None:
        raise ValueError(f"Unknown unit: {unit}")

    value = Decimal(amount) * multiplier
    if value != value.to_integral_value():
        raise ValueError(f"{amount} {unit} is not a whole number of wei")

    return int(value)


def from_hex(value: str) -> int:
    """Decode a 0x-prefixed JSON-RPC quantity."""
    if not isinstance(value, str) or not value.startswith("0x"):
        raise ValueError(f"Not a hex quantity: {value}")
    return int(value, 16)
