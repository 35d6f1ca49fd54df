"""Canonical Uniswap V4 pool keys and pool id derivation."""

from __future__ import annotations

from dataclasses import dataclass

from eth_abi import encode  # type: ignore[attr-defined]
from eth_utils import keccak

from actionkit.constants import DEFAULT_FEE, DEFAULT_TICK_SPACING, ZERO_ADDRESS
from actionkit.models.types import address_to_bytes, normalize_address

# abi.encode layout hashed into PoolId: (currency0, currency1, fee, tickSpacing, hooks)
POOL_KEY_ABI_TYPES = ["address", "address", "uint24", "int24", "address"]


def order_currencies(source: str, destination: str) -> tuple[str, str, bool]:
    """Sort two assets into (currency0, currency1) and derive the swap direction.

    Addresses compare case-insensitively, so the lowercase hex string order
    matches the numeric order the pool manager enforces.

    Args:
        source: Asset the swap consumes
        destination: Asset the swap produces

    Returns:
        Tuple of (currency0, currency1, zero_for_one) where zero_for_one is
        True exactly when the source asset is currency0.

    Raises:
        ValueError: If both assets are the same
    """
    source_norm = normalize_address(source)
    destination_norm = normalize_address(destination)
    if source_norm == destination_norm:
        raise ValueError(f"Source and destination must differ: {source}")

    if source_norm < destination_norm:
        return source_norm, destination_norm, True
    return destination_norm, source_norm, False


def pool_id(
    currency0: str,
    currency1: str,
    fee: int,
    tick_spacing: int,
    hooks: str = ZERO_ADDRESS,
) -> bytes:
    """Compute the 32-byte pool id for a pool key.

    The two currencies are put in canonical order first, so swapping them in
    the call yields the same id.
    """
    c0, c1, _ = order_currencies(currency0, currency1)
    encoded = encode(
        POOL_KEY_ABI_TYPES,
        [address_to_bytes(c0), address_to_bytes(c1), fee, tick_spacing, address_to_bytes(hooks)],
    )
    return keccak(encoded)


@dataclass(frozen=True)
class PoolKey:
    """Identifies a V4 pool: ordered currency pair, fee, tick spacing and hooks.

    Construct through PoolKey.create() or PoolKey.for_swap() to get the
    canonical ordering; the constructor rejects unordered pairs.
    """

    currency0: str
    currency1: str
    fee: int = DEFAULT_FEE  # Fee in pips (3000 = 0.3%)
    tick_spacing: int = DEFAULT_TICK_SPACING
    hooks: str = ZERO_ADDRESS

    def __post_init__(self) -> None:
        c0 = normalize_address(self.currency0, validate=True)
        c1 = normalize_address(self.currency1, validate=True)
        if c0 >= c1:
            raise ValueError(f"currency0 must sort below currency1: {c0} >= {c1}")
        if self.tick_spacing <= 0:
            raise ValueError(f"Tick spacing must be positive: {self.tick_spacing}")
        if not 0 <= self.fee < 2**24:
            raise ValueError(f"Fee does not fit uint24: {self.fee}")
        object.__setattr__(self, "currency0", c0)
        object.__setattr__(self, "currency1", c1)
        object.__setattr__(self, "hooks", normalize_address(self.hooks, validate=True))

    @classmethod
    def create(
        cls,
        token_a: str,
        token_b: str,
        fee: int = DEFAULT_FEE,
        tick_spacing: int = DEFAULT_TICK_SPACING,
        hooks: str = ZERO_ADDRESS,
    ) -> PoolKey:
        """Build a key from two assets in any order."""
        c0, c1, _ = order_currencies(token_a, token_b)
        return cls(c0, c1, fee, tick_spacing, hooks)

    @classmethod
    def for_swap(
        cls,
        source: str,
        destination: str,
        fee: int = DEFAULT_FEE,
        tick_spacing: int = DEFAULT_TICK_SPACING,
        hooks: str = ZERO_ADDRESS,
    ) -> tuple[PoolKey, bool]:
        """Build a key for a swap and return it with the zero_for_one flag."""
        c0, c1, zero_for_one = order_currencies(source, destination)
        return cls(c0, c1, fee, tick_spacing, hooks), zero_for_one

    @property
    def id(self) -> bytes:
        """keccak256 of the ABI-encoded key."""
        return pool_id(self.currency0, self.currency1, self.fee, self.tick_spacing, self.hooks)

    @property
    def id_hex(self) -> str:
        return "0x" + self.id.hex()

    def as_abi_tuple(self) -> tuple[bytes, bytes, int, int, bytes]:
        """Key as an (address, address, uint24, int24, address) tuple for eth_abi."""
        return (
            address_to_bytes(self.currency0),
            address_to_bytes(self.currency1),
            self.fee,
            self.tick_spacing,
            address_to_bytes(self.hooks),
        )

    def is_currency0(self, token: str) -> bool:
        return normalize_address(token) == self.currency0


__all__ = ["PoolKey", "order_currencies", "pool_id", "POOL_KEY_ABI_TYPES"]
