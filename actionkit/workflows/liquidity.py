"""Size a concentrated-liquidity position and build its mint unlock data."""

from __future__ import annotations

import structlog

from actionkit.capabilities import Capabilities
from actionkit.constants import (
    DEFAULT_FEE,
    DEFAULT_TICK_SPACING,
    SQRT_PRICE_1_1,
    TESTNET_STATE_VIEW_ADDRESS,
    ZERO_ADDRESS,
    is_testnet,
)
from actionkit.encoding import encode_mint_position
from actionkit.encoding.calls import decode_slot0, encode_get_slot0_call
from actionkit.encoding.positions import UINT128_MAX
from actionkit.errors import ActionError, MissingConfiguration
from actionkit.math.liquidity import amounts_for_liquidity, max_liquidity_for_amounts
from actionkit.math.tick_math import get_sqrt_ratio_at_tick, validate_tick_range
from actionkit.models.config import LiquidityPositionConfig
from actionkit.models.results import LiquidityPlan
from actionkit.models.types import validate_uint256
from actionkit.pools import PoolKey

from .base import require

logger = structlog.get_logger()


def resolve_position_pool_key(config: LiquidityPositionConfig) -> PoolKey:
    pool_config = config.pool_config
    fee = DEFAULT_FEE
    tick_spacing = DEFAULT_TICK_SPACING
    hooks = ZERO_ADDRESS
    if pool_config is not None:
        fee = pool_config.fee if pool_config.fee is not None else fee
        tick_spacing = pool_config.tick_spacing or tick_spacing
        hooks = pool_config.hooks or hooks
    return PoolKey.create(config.token_a.address, config.token_b.address, fee, tick_spacing, hooks)


def current_sqrt_price(
    config: LiquidityPositionConfig,
    capabilities: Capabilities,
    pool_key: PoolKey,
) -> int:
    """Pool sqrtPriceX96 from StateView, or the 1:1 price when it cannot be read.

    An uninitialized pool (price 0) also sizes at 1:1, the price it would be
    created with.
    """
    state_view = config.state_view_address
    if not state_view and is_testnet(config.chain):
        state_view = TESTNET_STATE_VIEW_ADDRESS
    if not state_view or capabilities.reader is None:
        logger.info("pool_price_default", pool_id=pool_key.id_hex, sqrt_price_x96=SQRT_PRICE_1_1)
        return SQRT_PRICE_1_1

    slot0 = decode_slot0(capabilities.reader.call(state_view, encode_get_slot0_call(pool_key.id)))
    if slot0.sqrt_price_x96 == 0:
        logger.info("pool_uninitialized_default_price", pool_id=pool_key.id_hex)
        return SQRT_PRICE_1_1
    return slot0.sqrt_price_x96


def plan_liquidity_position(
    config: LiquidityPositionConfig,
    capabilities: Capabilities,
) -> LiquidityPlan:
    """Order the pair, size liquidity for the desired amounts, encode the mint.

    Never raises; failures come back as LiquidityPlan(success=False).
    """
    try:
        recipient = require(config.recipient, "recipient", "position owner address")
        pool_key = resolve_position_pool_key(config)
        validate_tick_range(config.tick_lower, config.tick_upper, pool_key.tick_spacing)

        amount_a = int(validate_uint256(config.amount_a))
        amount_b = int(validate_uint256(config.amount_b))
        for field, amount in (("amountA", amount_a), ("amountB", amount_b)):
            if amount > UINT128_MAX:
                raise MissingConfiguration(field, f"must fit in uint128, got {amount}")
        if pool_key.is_currency0(config.token_a.address):
            amount0, amount1 = amount_a, amount_b
        else:
            amount0, amount1 = amount_b, amount_a

        sqrt_price = current_sqrt_price(config, capabilities, pool_key)
        # Imprecise sizing matches what the PositionManager accepts
        liquidity = max_liquidity_for_amounts(
            config.tick_lower,
            config.tick_upper,
            sqrt_price,
            amount0,
            amount1,
            use_full_precision=False,
        )
        if liquidity == 0:
            raise MissingConfiguration("amountA/amountB", "desired amounts size to zero liquidity")
        used0, used1 = amounts_for_liquidity(
            sqrt_price,
            get_sqrt_ratio_at_tick(config.tick_lower),
            get_sqrt_ratio_at_tick(config.tick_upper),
            liquidity,
        )
        unlock_data = encode_mint_position(
            pool_key,
            config.tick_lower,
            config.tick_upper,
            liquidity,
            recipient,
            amount0_max=amount0,
            amount1_max=amount1,
        )
    except ActionError as e:
        logger.warning("liquidity_plan_failed", error=str(e), error_kind=e.kind.value)
        return LiquidityPlan(success=False, error=str(e), error_kind=e.kind)
    except ValueError as e:
        logger.warning("liquidity_plan_invalid", error=str(e))
        return LiquidityPlan(success=False, error=str(e))
    except Exception as e:
        logger.exception("liquidity_plan_error", message="Collaborator raised, returning failed plan")
        return LiquidityPlan(success=False, error=f"{type(e).__name__}: {e}")

    logger.info(
        "liquidity_planned",
        pool_id=pool_key.id_hex,
        liquidity=liquidity,
        amount0=used0,
        amount1=used1,
    )
    return LiquidityPlan(
        success=True,
        pool_id=pool_key.id_hex,
        currency0=pool_key.currency0,
        currency1=pool_key.currency1,
        tick_lower=config.tick_lower,
        tick_upper=config.tick_upper,
        sqrt_price_x96=str(sqrt_price),
        liquidity=str(liquidity),
        amount0=str(used0),
        amount1=str(used1),
        unlock_data="0x" + unlock_data.hex(),
    )


__all__ = ["plan_liquidity_position", "resolve_position_pool_key", "current_sqrt_price"]
