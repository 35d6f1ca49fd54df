"""Uniswap V4 single-pool swap through the SwapReceiver contract."""

from __future__ import annotations

import structlog

from actionkit.capabilities import Capabilities
from actionkit.constants import (
    DEFAULT_DEADLINE_SECONDS,
    DEFAULT_FEE,
    DEFAULT_TICK_SPACING,
    TESTNET_STATE_VIEW_ADDRESS,
    ZERO_ADDRESS,
    is_testnet,
)
from actionkit.encoding import SwapReport, encode_action
from actionkit.encoding.calls import decode_slot0, encode_get_slot0_call
from actionkit.errors import MissingConfiguration, PoolUninitialized
from actionkit.models.config import UniswapSwapConfig
from actionkit.models.results import ActionResult
from actionkit.models.types import validate_uint256
from actionkit.pools import PoolKey, compute_sqrt_price_limit, fallback_sqrt_price_limit
from actionkit.settlement import classify_outcome

from .base import parse_gas_limit, require, run_guarded, submit_report

logger = structlog.get_logger()


def resolve_pool_key(config: UniswapSwapConfig) -> tuple[PoolKey, bool]:
    """Pool key and zero_for_one for the configured source/destination pair.

    Fee falls back to the deprecated feeTier, then to 3000; tick spacing to
    60; hooks to the zero address.
    """
    pool_config = config.pool_config
    fee = pool_config.fee if pool_config and pool_config.fee is not None else None
    if fee is None:
        fee = config.fee_tier if config.fee_tier is not None else DEFAULT_FEE
    tick_spacing = DEFAULT_TICK_SPACING
    if pool_config and pool_config.tick_spacing is not None:
        tick_spacing = pool_config.tick_spacing
    hooks = (pool_config.hooks if pool_config else None) or ZERO_ADDRESS

    return PoolKey.for_swap(
        config.input_config.source_token.address,
        config.input_config.destination_token.address,
        fee=fee,
        tick_spacing=tick_spacing,
        hooks=hooks,
    )


def state_view_for(config: UniswapSwapConfig) -> str | None:
    """StateView address: configured, else the testnet default, else None."""
    if config.state_view_address:
        return config.state_view_address
    if is_testnet(config.chain):
        return TESTNET_STATE_VIEW_ADDRESS
    return None


def resolve_sqrt_price_limit(
    config: UniswapSwapConfig,
    capabilities: Capabilities,
    pool_key: PoolKey,
    zero_for_one: bool,
) -> int:
    """Price limit from the pool's current price, or the permissive fallback.

    Raises:
        PoolUninitialized: If the pool has no price
        PriceAtBound: If the pool cannot move further in the swap direction
    """
    state_view = state_view_for(config)
    if not state_view:
        return fallback_sqrt_price_limit(zero_for_one)
    if capabilities.reader is None:
        raise MissingConfiguration("reader", "stateViewAddress is set but no contract reader")

    slot0 = decode_slot0(capabilities.reader.call(state_view, encode_get_slot0_call(pool_key.id)))
    logger.debug(
        "pool_slot0_read",
        pool_id=pool_key.id_hex,
        sqrt_price_x96=slot0.sqrt_price_x96,
        tick=slot0.tick,
    )
    if slot0.sqrt_price_x96 == 0:
        raise PoolUninitialized(pool_key.id_hex)
    return compute_sqrt_price_limit(slot0.sqrt_price_x96, zero_for_one)


def build_swap_report(config: UniswapSwapConfig, capabilities: Capabilities) -> SwapReport:
    """Validate config, derive pool parameters and price limit, build the report."""
    require(
        config.swap_receiver_address,
        "swapReceiverAddress",
        "deploy SwapReceiver and set in config",
    )
    pool_swap_test = require(
        config.pool_swap_test_address,
        "poolSwapTestAddress",
        "Uniswap V4 PoolSwapTest address",
    )
    pool_manager = require(
        config.pool_manager_address,
        "poolManagerAddress",
        "Uniswap V4 PoolManager address",
    )
    input_config = config.input_config

    pool_key, zero_for_one = resolve_pool_key(config)

    amount_out_min = "0"
    if input_config.swap_type == "EXACT_INPUT":
        amount_out_min = input_config.amount_out_minimum or "0"
        if amount_out_min == "0":
            logger.warning(
                "amount_out_minimum_unset",
                message="Using 0 (no slippage protection); set amountOutMinimum in config",
            )

    deadline = input_config.deadline or capabilities.clock() + DEFAULT_DEADLINE_SECONDS
    sqrt_price_limit = resolve_sqrt_price_limit(config, capabilities, pool_key, zero_for_one)

    return SwapReport(
        currency0=pool_key.currency0,
        currency1=pool_key.currency1,
        fee=pool_key.fee,
        tick_spacing=pool_key.tick_spacing,
        hooks=pool_key.hooks,
        zero_for_one=zero_for_one,
        amount_in=int(validate_uint256(input_config.amount)),
        amount_out_min=int(validate_uint256(amount_out_min)),
        hook_data=b"",
        recipient=require(input_config.wallet_address, "walletAddress"),
        deadline=deadline,
        pool_swap_test_address=pool_swap_test,
        pool_manager_address=pool_manager,
        sqrt_price_limit_x96=sqrt_price_limit,
    )


def run_uniswap_swap(config: UniswapSwapConfig, capabilities: Capabilities) -> ActionResult:
    """Execute a V4 swap: derive, encode, sign, submit and classify.

    Never raises; failures come back as ActionResult(success=False).
    """
    amount_in = config.input_config.amount

    def _swap() -> ActionResult:
        report = build_swap_report(config, capabilities)
        payload = encode_action(report)
        logger.info(
            "v4_swap",
            currency0=report.currency0,
            currency1=report.currency1,
            zero_for_one=report.zero_for_one,
            amount_in=report.amount_in,
            amount_out_min=report.amount_out_min,
            recipient=report.recipient,
            deadline=report.deadline,
            sqrt_price_limit_x96=report.sqrt_price_limit_x96,
        )
        outcome = submit_report(
            capabilities,
            config.swap_receiver_address,
            payload,
            parse_gas_limit(config.gas_limit),
        )
        return classify_outcome(
            outcome,
            amount_in=amount_in,
            amount_out=str(report.amount_out_min),
        )

    return run_guarded("uniswap_swap", _swap, amount_in=amount_in)


__all__ = [
    "run_uniswap_swap",
    "build_swap_report",
    "resolve_pool_key",
    "resolve_sqrt_price_limit",
    "state_view_for",
]
