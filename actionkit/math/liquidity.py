"""Concentrated liquidity sizing.

Given a tick range, the current pool price and the token amounts a caller
is willing to deposit, compute the largest liquidity that can be minted
without exceeding either amount. All values are Q64.96 sqrt prices and raw
integers; nothing passes through floating point.
"""

from __future__ import annotations

from actionkit.constants import Q96

from .tick_math import get_sqrt_ratio_at_tick


def _ordered(sqrt_a: int, sqrt_b: int) -> tuple[int, int]:
    if sqrt_a > sqrt_b:
        return sqrt_b, sqrt_a
    if sqrt_a == sqrt_b:
        raise ValueError("Sqrt price bounds must differ")
    return sqrt_a, sqrt_b


def liquidity_for_amount0(
    sqrt_a: int,
    sqrt_b: int,
    amount0: int,
    *,
    use_full_precision: bool = True,
) -> int:
    """Liquidity supplied by amount0 across [sqrt_a, sqrt_b].

    L = amount0 * sqrt_a * sqrt_b / (Q96 * (sqrt_b - sqrt_a))

    With use_full_precision=False the product sqrt_a * sqrt_b is divided
    by Q96 first, matching the SDK's imprecise variant.
    """
    sqrt_a, sqrt_b = _ordered(sqrt_a, sqrt_b)
    if use_full_precision:
        return (amount0 * sqrt_a * sqrt_b) // (Q96 * (sqrt_b - sqrt_a))
    intermediate = (sqrt_a * sqrt_b) // Q96
    return (amount0 * intermediate) // (sqrt_b - sqrt_a)


def liquidity_for_amount1(sqrt_a: int, sqrt_b: int, amount1: int) -> int:
    """Liquidity supplied by amount1 across [sqrt_a, sqrt_b].

    L = amount1 * Q96 / (sqrt_b - sqrt_a)
    """
    sqrt_a, sqrt_b = _ordered(sqrt_a, sqrt_b)
    return (amount1 * Q96) // (sqrt_b - sqrt_a)


def max_liquidity_for_sqrt_prices(
    sqrt_price: int,
    sqrt_a: int,
    sqrt_b: int,
    amount0: int,
    amount1: int,
    *,
    use_full_precision: bool = True,
) -> int:
    """Maximum liquidity for the given amounts, current price and bounds.

    Below the range only token0 is consumed, above it only token1, and in
    range the smaller of the two independently computed liquidities wins.
    """
    if sqrt_price <= 0:
        raise ValueError(f"Current sqrt price must be positive: {sqrt_price}")
    if amount0 < 0 or amount1 < 0:
        raise ValueError("Desired amounts cannot be negative")
    sqrt_a, sqrt_b = _ordered(sqrt_a, sqrt_b)

    if sqrt_price <= sqrt_a:
        return liquidity_for_amount0(
            sqrt_a, sqrt_b, amount0, use_full_precision=use_full_precision
        )
    if sqrt_price < sqrt_b:
        liquidity0 = liquidity_for_amount0(
            sqrt_price, sqrt_b, amount0, use_full_precision=use_full_precision
        )
        liquidity1 = liquidity_for_amount1(sqrt_a, sqrt_price, amount1)
        return min(liquidity0, liquidity1)
    return liquidity_for_amount1(sqrt_a, sqrt_b, amount1)


def max_liquidity_for_amounts(
    tick_lower: int,
    tick_upper: int,
    current_sqrt_price: int,
    amount0_desired: int,
    amount1_desired: int,
    *,
    use_full_precision: bool = True,
) -> int:
    """Maximum liquidity deployable in [tick_lower, tick_upper].

    Args:
        tick_lower: Lower tick of the position
        tick_upper: Upper tick of the position
        current_sqrt_price: Pool sqrtPriceX96
        amount0_desired: Maximum token0 to deposit (raw)
        amount1_desired: Maximum token1 to deposit (raw)
        use_full_precision: Keep the full product when sizing from amount0

    Returns:
        Liquidity as a raw integer
    """
    return max_liquidity_for_sqrt_prices(
        current_sqrt_price,
        get_sqrt_ratio_at_tick(tick_lower),
        get_sqrt_ratio_at_tick(tick_upper),
        amount0_desired,
        amount1_desired,
        use_full_precision=use_full_precision,
    )


def amount0_for_liquidity(sqrt_a: int, sqrt_b: int, liquidity: int) -> int:
    """Token0 held by liquidity across [sqrt_a, sqrt_b], rounded down."""
    sqrt_a, sqrt_b = _ordered(sqrt_a, sqrt_b)
    return ((liquidity << 96) * (sqrt_b - sqrt_a) // sqrt_b) // sqrt_a


def amount1_for_liquidity(sqrt_a: int, sqrt_b: int, liquidity: int) -> int:
    """Token1 held by liquidity across [sqrt_a, sqrt_b], rounded down."""
    sqrt_a, sqrt_b = _ordered(sqrt_a, sqrt_b)
    return liquidity * (sqrt_b - sqrt_a) // Q96


def amounts_for_liquidity(
    sqrt_price: int,
    sqrt_a: int,
    sqrt_b: int,
    liquidity: int,
) -> tuple[int, int]:
    """Token amounts (amount0, amount1) represented by a position."""
    sqrt_a, sqrt_b = _ordered(sqrt_a, sqrt_b)
    if sqrt_price <= sqrt_a:
        return amount0_for_liquidity(sqrt_a, sqrt_b, liquidity), 0
    if sqrt_price < sqrt_b:
        return (
            amount0_for_liquidity(sqrt_price, sqrt_b, liquidity),
            amount1_for_liquidity(sqrt_a, sqrt_price, liquidity),
        )
    return 0, amount1_for_liquidity(sqrt_a, sqrt_b, liquidity)


__all__ = [
    "liquidity_for_amount0",
    "liquidity_for_amount1",
    "max_liquidity_for_sqrt_prices",
    "max_liquidity_for_amounts",
    "amount0_for_liquidity",
    "amount1_for_liquidity",
    "amounts_for_liquidity",
]
