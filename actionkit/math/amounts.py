"""Exact conversion between raw token integers and decimal strings.

Amounts are handled as base-10 digit strings so values far beyond the
53-bit float range (and beyond uint256 when needed) never lose precision.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from actionkit.models.types import normalize_address

_DECIMAL_RE = re.compile(r"^(\d*)(?:\.(\d*))?$")


def to_decimal_string(raw: int, decimals: int) -> str:
    """Format a raw integer amount as a decimal string.

    Args:
        raw: Non-negative raw amount (e.g. 1500000)
        decimals: Token decimals (e.g. 6)

    Returns:
        Decimal string with exactly ``decimals`` fractional digits
        (e.g. "1.500000"), or the plain digit string when decimals is 0.

    Raises:
        ValueError: If raw or decimals is negative
    """
    if raw < 0:
        raise ValueError(f"Raw amount cannot be negative: {raw}")
    if decimals < 0:
        raise ValueError(f"Decimals cannot be negative: {decimals}")

    digits = str(raw)
    if decimals == 0:
        return digits
    if len(digits) <= decimals:
        return "0." + digits.rjust(decimals, "0")
    split = len(digits) - decimals
    return f"{digits[:split]}.{digits[split:]}"


def to_raw_amount(value: str, decimals: int) -> int:
    """Parse a decimal string into a raw integer amount.

    Fractional digits beyond ``decimals`` are truncated, missing ones are
    zero-padded.

    Raises:
        ValueError: If the string is not a plain non-negative decimal number
    """
    if decimals < 0:
        raise ValueError(f"Decimals cannot be negative: {decimals}")

    match = _DECIMAL_RE.match(value.strip())
    if match is None or not (match.group(1) or match.group(2)):
        raise ValueError(f"Invalid decimal amount: '{value}'")

    whole = match.group(1) or "0"
    fraction = (match.group(2) or "")[:decimals].ljust(decimals, "0")
    return int(whole + fraction)


def format_signed_amount(raw: int, decimals: int) -> str:
    """Format a signed raw value (e.g. an oracle answer) as a decimal string."""
    if raw < 0:
        return "-" + to_decimal_string(-raw, decimals)
    return to_decimal_string(raw, decimals)


@dataclass(frozen=True)
class AssetAmount:
    """A raw token amount that always travels with its precision."""

    address: str
    raw: int
    decimals: int

    def __post_init__(self) -> None:
        if self.raw < 0:
            raise ValueError(f"Raw amount cannot be negative: {self.raw}")
        if self.decimals < 0:
            raise ValueError(f"Decimals cannot be negative: {self.decimals}")
        object.__setattr__(self, "address", normalize_address(self.address))

    @classmethod
    def from_decimal(cls, address: str, value: str, decimals: int) -> AssetAmount:
        """Create from a human-readable decimal string."""
        return cls(address=address, raw=to_raw_amount(value, decimals), decimals=decimals)

    @property
    def formatted(self) -> str:
        """Decimal string representation (e.g. "1.500000")."""
        return to_decimal_string(self.raw, self.decimals)


__all__ = [
    "AssetAmount",
    "to_decimal_string",
    "to_raw_amount",
    "format_signed_amount",
]
