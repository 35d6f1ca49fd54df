"""Uniswap V4 PositionManager unlock data for minting a position."""

from __future__ import annotations

from eth_abi import encode  # type: ignore[attr-defined]

from actionkit.models.types import address_to_bytes, hex_to_bytes
from actionkit.pools.pool_key import PoolKey

# PositionManager action codes
MINT_POSITION = 0x02
CLOSE_CURRENCY = 0x12

UINT128_MAX = 2**128 - 1

MINT_POSITION_TYPES = [
    "(address,address,uint24,int24,address)",
    "int24",
    "int24",
    "uint256",
    "uint128",
    "uint128",
    "address",
    "bytes",
]


def encode_mint_position(
    pool_key: PoolKey,
    tick_lower: int,
    tick_upper: int,
    liquidity: int,
    recipient: str,
    amount0_max: int = UINT128_MAX,
    amount1_max: int = UINT128_MAX,
    hook_data: bytes | str = b"",
) -> bytes:
    """Encode modifyLiquidities unlock data: MINT_POSITION then settle both currencies.

    Returns:
        abi.encode(bytes actions, bytes[] params)
    """
    actions = bytes([MINT_POSITION, CLOSE_CURRENCY, CLOSE_CURRENCY])
    mint_params = encode(
        MINT_POSITION_TYPES,
        [
            pool_key.as_abi_tuple(),
            tick_lower,
            tick_upper,
            liquidity,
            amount0_max,
            amount1_max,
            address_to_bytes(recipient),
            hex_to_bytes(hook_data),
        ],
    )
    close0_params = encode(["address"], [address_to_bytes(pool_key.currency0)])
    close1_params = encode(["address"], [address_to_bytes(pool_key.currency1)])
    return encode(["bytes", "bytes[]"], [actions, [mint_params, close0_params, close1_params]])


__all__ = ["encode_mint_position", "MINT_POSITION", "CLOSE_CURRENCY", "UINT128_MAX"]
