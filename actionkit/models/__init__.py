"""Pydantic models for workflow configuration and results."""

from actionkit.models.config import (
    AaveLendingConfig,
    FeedConfig,
    LifiSwapConfig,
    LiquidityPositionConfig,
    OstiumTradeConfig,
    ReadFeedsConfig,
    UniswapSwapConfig,
    merge_config,
)
from actionkit.models.results import (
    ActionResult,
    FeedFailure,
    LiquidityPlan,
    OracleReading,
    ReadFeedsResult,
)
from actionkit.models.types import Address, Bytes, Uint256, normalize_address

__all__ = [
    # Types
    "Address",
    "Bytes",
    "Uint256",
    "normalize_address",
    # Configs
    "ReadFeedsConfig",
    "FeedConfig",
    "UniswapSwapConfig",
    "AaveLendingConfig",
    "LifiSwapConfig",
    "OstiumTradeConfig",
    "LiquidityPositionConfig",
    "merge_config",
    # Results
    "ActionResult",
    "OracleReading",
    "FeedFailure",
    "ReadFeedsResult",
    "LiquidityPlan",
]
