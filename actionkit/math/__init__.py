"""Mathematical utilities for action workflows.

This package provides exact integer primitives:
- Raw amount <-> decimal string scaling
- Tick to sqrt price conversion (Q64.96)
- Concentrated liquidity sizing
"""

from actionkit.math.amounts import (
    AssetAmount,
    format_signed_amount,
    to_decimal_string,
    to_raw_amount,
)
from actionkit.math.liquidity import amounts_for_liquidity, max_liquidity_for_amounts
from actionkit.math.tick_math import MAX_TICK, MIN_TICK, get_sqrt_ratio_at_tick

__all__ = [
    "AssetAmount",
    "format_signed_amount",
    "to_decimal_string",
    "to_raw_amount",
    "amounts_for_liquidity",
    "max_liquidity_for_amounts",
    "MIN_TICK",
    "MAX_TICK",
    "get_sqrt_ratio_at_tick",
]
