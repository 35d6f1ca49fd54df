"""Pydantic models for workflow configuration, and typed override merging.

Field names are snake_case in Python and camelCase on the wire, so the
JSON config files of the deployed workflows load unchanged.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal, TypeVar

from pydantic import BaseModel, Field

ConfigT = TypeVar("ConfigT", bound=BaseModel)


class ConfigModel(BaseModel):
    model_config = {"populate_by_name": True, "extra": "ignore"}


class TokenInfo(ConfigModel):
    address: str
    symbol: str | None = None
    decimals: int | None = None
    a_token_address: str | None = Field(default=None, alias="aTokenAddress")


class FeedConfig(ConfigModel):
    name: str  # e.g. "BTC/USD"
    address: str  # aggregator proxy


class ReadFeedsConfig(ConfigModel):
    schedule: str = ""
    chain_name: str = Field(alias="chainName")
    feeds: list[FeedConfig]
    # If set, updatedAt must be within this many seconds of now
    stale_after_seconds: int | None = Field(default=None, alias="staleAfterSeconds", gt=0)


class PoolConfig(ConfigModel):
    fee: int | None = None
    tick_spacing: int | None = Field(default=None, alias="tickSpacing")
    hooks: str | None = None


class SwapInputConfig(ConfigModel):
    source_token: TokenInfo = Field(alias="sourceToken")
    destination_token: TokenInfo = Field(alias="destinationToken")
    amount: str  # raw amount
    swap_type: Literal["EXACT_INPUT", "EXACT_OUTPUT"] = Field(alias="swapType")
    wallet_address: str = Field(alias="walletAddress")
    slippage_tolerance: float | None = Field(default=None, alias="slippageTolerance")
    deadline: int | None = None
    amount_out_minimum: str | None = Field(default=None, alias="amountOutMinimum")


class UniswapSwapConfig(ConfigModel):
    schedule: str = ""
    chain: str
    chain_selector_name: str = Field(alias="chainSelectorName")
    provider: Literal["UNISWAP"] = "UNISWAP"
    swap_receiver_address: str = Field(default="", alias="swapReceiverAddress")
    pool_swap_test_address: str = Field(default="", alias="poolSwapTestAddress")
    pool_manager_address: str = Field(default="", alias="poolManagerAddress")
    state_view_address: str | None = Field(default=None, alias="stateViewAddress")
    gas_limit: str = Field(alias="gasLimit")
    input_config: SwapInputConfig = Field(alias="inputConfig")
    pool_config: PoolConfig | None = Field(default=None, alias="poolConfig")
    # Deprecated: use pool_config.fee
    fee_tier: int | None = Field(default=None, alias="feeTier")


class LendingInputConfig(ConfigModel):
    operation: Literal[
        "SUPPLY", "WITHDRAW", "BORROW", "REPAY", "ENABLE_COLLATERAL", "DISABLE_COLLATERAL"
    ]
    asset: TokenInfo
    amount: str
    wallet_address: str = Field(alias="walletAddress")
    interest_rate_mode: Literal["STABLE", "VARIABLE"] | None = Field(
        default=None, alias="interestRateMode"
    )
    on_behalf_of: str | None = Field(default=None, alias="onBehalfOf")
    referral_code: int | None = Field(default=None, alias="referralCode")


class AaveLendingConfig(ConfigModel):
    schedule: str = ""
    chain: str
    chain_selector_name: str = Field(alias="chainSelectorName")
    provider: Literal["AAVE"] = "AAVE"
    aave_receiver_address: str = Field(default="", alias="aaveReceiverAddress")
    pool_address: str = Field(default="", alias="poolAddress")
    gas_limit: str = Field(alias="gasLimit")
    input_config: LendingInputConfig = Field(alias="inputConfig")


class LifiSwapConfig(ConfigModel):
    schedule: str = ""
    chain: str
    chain_selector_name: str = Field(alias="chainSelectorName")
    provider: Literal["LIFI"] = "LIFI"
    swap_receiver_address: str = Field(default="", alias="swapReceiverAddress")
    gas_limit: str = Field(alias="gasLimit")
    input_config: SwapInputConfig = Field(alias="inputConfig")


class OstiumTradeConfig(ConfigModel):
    schedule: str = ""
    network: Literal["testnet", "mainnet"]
    market: str
    side: Literal["long", "short"]
    collateral: float
    leverage: float
    trader_address: str = Field(alias="traderAddress")
    service_url: str = Field(alias="serviceUrl")
    sl_price: float | None = Field(default=None, alias="slPrice")
    tp_price: float | None = Field(default=None, alias="tpPrice")


class LiquidityPositionConfig(ConfigModel):
    chain: str = ""
    token_a: TokenInfo = Field(alias="tokenA")
    token_b: TokenInfo = Field(alias="tokenB")
    amount_a: str = Field(alias="amountA")  # raw amount of token_a
    amount_b: str = Field(alias="amountB")  # raw amount of token_b
    tick_lower: int = Field(alias="tickLower")
    tick_upper: int = Field(alias="tickUpper")
    recipient: str = ""
    pool_config: PoolConfig | None = Field(default=None, alias="poolConfig")
    state_view_address: str | None = Field(default=None, alias="stateViewAddress")


def _deep_merge(base: dict[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if value is None:
            continue
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, Mapping):
            merged[key] = _deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def merge_config(base: ConfigT, override: Mapping[str, Any] | None) -> ConfigT:
    """Apply a partial override to a base config and re-validate.

    Precedence, per field:
    - a key present in the override with a non-None value wins;
    - nested objects merge recursively, so overriding one nested field keeps
      its siblings from the base;
    - lists are replaced wholesale;
    - keys absent (or None) in the override keep the base value.

    Override keys may use either the wire (camelCase) or Python names.

    Raises:
        pydantic.ValidationError: If the merged config is invalid
    """
    if not override:
        return base
    base_data = base.model_dump(by_alias=True)
    merged = _deep_merge(base_data, _to_aliases(type(base), override))
    return type(base).model_validate(merged)


def _to_aliases(model: type[BaseModel], data: Mapping[str, Any]) -> dict[str, Any]:
    """Rewrite Python field names in data to aliases, recursing into nested models."""
    by_name = {name: info for name, info in model.model_fields.items()}
    by_alias = {info.alias: name for name, info in model.model_fields.items() if info.alias}
    result: dict[str, Any] = {}
    for key, value in data.items():
        name = by_alias.get(key, key)
        info = by_name.get(name)
        if info is None:
            result[key] = value
            continue
        wire_key = info.alias or name
        nested = _nested_model(info.annotation)
        if nested is not None and isinstance(value, Mapping):
            value = _to_aliases(nested, value)
        result[wire_key] = value
    return result


def _nested_model(annotation: Any) -> type[BaseModel] | None:
    if isinstance(annotation, type) and issubclass(annotation, BaseModel):
        return annotation
    for arg in getattr(annotation, "__args__", ()):
        if isinstance(arg, type) and issubclass(arg, BaseModel):
            return arg
    return None


__all__ = [
    "TokenInfo",
    "FeedConfig",
    "ReadFeedsConfig",
    "PoolConfig",
    "SwapInputConfig",
    "UniswapSwapConfig",
    "LendingInputConfig",
    "AaveLendingConfig",
    "LifiSwapConfig",
    "OstiumTradeConfig",
    "LiquidityPositionConfig",
    "merge_config",
]
