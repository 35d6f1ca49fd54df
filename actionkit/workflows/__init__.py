"""Workflow entry points: one function per action, each returning a result."""

from actionkit.feeds import read_feeds
from actionkit.workflows.aave_lending import run_aave_lending
from actionkit.workflows.lifi_swap import run_lifi_swap
from actionkit.workflows.liquidity import plan_liquidity_position
from actionkit.workflows.ostium_trade import open_ostium_position
from actionkit.workflows.uniswap_swap import run_uniswap_swap

__all__ = [
    "read_feeds",
    "run_uniswap_swap",
    "run_aave_lending",
    "run_lifi_swap",
    "open_ostium_position",
    "plan_liquidity_position",
]
