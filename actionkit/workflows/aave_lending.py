"""Aave V3 supply / withdraw / borrow / repay through the AaveReceiver contract."""

from __future__ import annotations

import structlog

from actionkit.capabilities import Capabilities
from actionkit.constants import (
    AAVE_POOL_ADDRESSES,
    INTEREST_RATE_STABLE,
    INTEREST_RATE_VARIABLE,
    LENDING_OPERATION_CODES,
    ZERO_ADDRESS,
)
from actionkit.encoding import LendingReport, encode_action
from actionkit.encoding.calls import decode_reserve_a_token, encode_get_reserve_data_call
from actionkit.errors import MissingConfiguration
from actionkit.models.config import AaveLendingConfig
from actionkit.models.results import ActionResult
from actionkit.models.types import normalize_address, validate_uint256
from actionkit.settlement import classify_outcome

from .base import parse_gas_limit, require, run_guarded, submit_report

logger = structlog.get_logger()

# Collateral toggles act on msg.sender, so they cannot go through the receiver.
# They fail as MissingConfiguration: the config must name a submittable operation.
COLLATERAL_OPERATIONS = {"ENABLE_COLLATERAL", "DISABLE_COLLATERAL"}


def interest_rate_mode_code(mode: str | None) -> int:
    """STABLE -> 1; anything else (including unset) -> VARIABLE (2)."""
    if mode == "STABLE":
        return INTEREST_RATE_STABLE
    return INTEREST_RATE_VARIABLE


def resolve_pool_address(config: AaveLendingConfig) -> str:
    pool_address = config.pool_address or AAVE_POOL_ADDRESSES.get(config.chain)
    if not pool_address:
        raise MissingConfiguration("poolAddress", f"not configured for chain: {config.chain}")
    return pool_address


def resolve_a_token(
    config: AaveLendingConfig,
    capabilities: Capabilities,
    pool_address: str,
) -> str:
    """aToken for the asset; WITHDRAW looks it up from the pool when unset."""
    a_token = config.input_config.asset.a_token_address or ZERO_ADDRESS
    if config.input_config.operation != "WITHDRAW":
        return a_token
    if normalize_address(a_token) != ZERO_ADDRESS:
        return a_token
    if capabilities.reader is None:
        raise MissingConfiguration(
            "aTokenAddress", "set asset.aTokenAddress or provide a contract reader"
        )
    call = encode_get_reserve_data_call(config.input_config.asset.address)
    a_token = decode_reserve_a_token(capabilities.reader.call(pool_address, call))
    logger.debug("a_token_resolved", asset=config.input_config.asset.address, a_token=a_token)
    return a_token


def build_lending_report(config: AaveLendingConfig, capabilities: Capabilities) -> LendingReport:
    """Validate config and build the lending report descriptor."""
    input_config = config.input_config
    require(
        config.aave_receiver_address,
        "aaveReceiverAddress",
        "deploy AaveReceiver and set in config",
    )
    if input_config.operation in COLLATERAL_OPERATIONS:
        # setUserUseReserveAsCollateral uses msg.sender as the user
        raise MissingConfiguration(
            "operation",
            "ENABLE_COLLATERAL and DISABLE_COLLATERAL must be called directly by the user; "
            "use Pool.setUserUseReserveAsCollateral(asset, useAsCollateral)",
        )

    pool_address = resolve_pool_address(config)
    wallet = require(input_config.wallet_address, "walletAddress")

    return LendingReport(
        operation=LENDING_OPERATION_CODES[input_config.operation],
        pool_address=pool_address,
        asset=require(input_config.asset.address, "asset.address"),
        amount=int(validate_uint256(input_config.amount)),
        wallet_address=wallet,
        on_behalf_of=input_config.on_behalf_of or wallet,
        interest_rate_mode=interest_rate_mode_code(input_config.interest_rate_mode),
        referral_code=input_config.referral_code or 0,
        a_token_address=resolve_a_token(config, capabilities, pool_address),
    )


def run_aave_lending(config: AaveLendingConfig, capabilities: Capabilities) -> ActionResult:
    """Execute one Aave operation. Never raises."""
    operation = config.input_config.operation
    amount = config.input_config.amount

    def _lend() -> ActionResult:
        report = build_lending_report(config, capabilities)
        payload = encode_action(report)
        logger.info(
            "aave_operation",
            operation=operation,
            asset=report.asset,
            amount=amount,
            wallet=report.wallet_address,
            on_behalf_of=report.on_behalf_of,
        )
        outcome = submit_report(
            capabilities,
            config.aave_receiver_address,
            payload,
            parse_gas_limit(config.gas_limit),
        )
        return classify_outcome(outcome, amount_in=amount, operation=operation)

    return run_guarded("aave_lending", _lend, amount_in=amount, operation=operation)


__all__ = [
    "run_aave_lending",
    "build_lending_report",
    "interest_rate_mode_code",
    "resolve_pool_address",
    "resolve_a_token",
]
