"""sqrtPriceLimitX96 selection for directional swaps.

A swap needs a limit one unit past the current price on the side it moves
towards, or the pool reverts with PriceLimitAlreadyExceeded. The limit must
also stay strictly inside the protocol's absolute price bounds.
"""

from __future__ import annotations

import structlog

from actionkit.constants import MAX_SQRT_PRICE, MIN_SQRT_PRICE
from actionkit.errors import PoolUninitialized, PriceAtBound

logger = structlog.get_logger()


def compute_sqrt_price_limit(
    current_sqrt_price: int,
    zero_for_one: bool,
    min_bound: int = MIN_SQRT_PRICE,
    max_bound: int = MAX_SQRT_PRICE,
) -> int:
    """Limit just past the current price in the swap direction.

    Args:
        current_sqrt_price: Pool sqrtPriceX96 read from state
        zero_for_one: True when the price is expected to fall
        min_bound: Absolute minimum sqrt price
        max_bound: Absolute maximum sqrt price

    Returns:
        sqrtPriceLimitX96 to encode in the swap

    Raises:
        PoolUninitialized: If the current price is zero
        PriceAtBound: If the price cannot rise any further
    """
    if current_sqrt_price == 0:
        raise PoolUninitialized()

    if zero_for_one:
        limit = current_sqrt_price - 1
        if limit <= min_bound:
            limit = min_bound + 1
        return limit

    limit = current_sqrt_price + 1
    if limit >= max_bound:
        raise PriceAtBound(current_sqrt_price, zero_for_one)
    return limit


def fallback_sqrt_price_limit(
    zero_for_one: bool,
    min_bound: int = MIN_SQRT_PRICE,
    max_bound: int = MAX_SQRT_PRICE,
) -> int:
    """Most permissive limit, used when no pool state can be read.

    This disables price-limit protection for the swap.
    """
    limit = min_bound + 1 if zero_for_one else max_bound - 1
    logger.warning(
        "sqrt_price_limit_fallback",
        zero_for_one=zero_for_one,
        sqrt_price_limit_x96=limit,
        message="No pool state source configured; price limit protection disabled",
    )
    return limit


__all__ = ["compute_sqrt_price_limit", "fallback_sqrt_price_limit"]
