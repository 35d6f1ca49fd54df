"""Pool identification and swap price limits."""

from actionkit.pools.pool_key import PoolKey, order_currencies, pool_id
from actionkit.pools.price_limits import compute_sqrt_price_limit, fallback_sqrt_price_limit

__all__ = [
    "PoolKey",
    "order_currencies",
    "pool_id",
    "compute_sqrt_price_limit",
    "fallback_sqrt_price_limit",
]
