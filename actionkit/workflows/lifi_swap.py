"""Aggregated swap: fetch a LI.FI route and forward it through the LifiReceiver."""

from __future__ import annotations

import json
from typing import Any
from urllib.parse import urlencode

import structlog

from actionkit.capabilities import Capabilities, HttpRequest
from actionkit.constants import (
    EXPLORER_TX_URLS,
    LIFI_CHAIN_IDS,
    LIFI_DEFAULT_CHAIN_ID,
    LIFI_DEFAULT_SLIPPAGE_PERCENT,
    LIFI_INTEGRATOR,
    LIFI_QUOTE_URL,
    NATIVE_TOKEN_PLACEHOLDER,
    ZERO_ADDRESS,
)
from actionkit.encoding import GenericCallReport, encode_action
from actionkit.errors import InvalidCollaboratorResponse, MissingConfiguration
from actionkit.models.config import LifiSwapConfig
from actionkit.models.results import ActionResult
from actionkit.models.types import hex_to_bytes, normalize_address, validate_uint256
from actionkit.settlement import classify_outcome

from .base import parse_gas_limit, require, run_guarded, submit_report

logger = structlog.get_logger()


def lifi_chain_id(chain: str) -> int:
    return LIFI_CHAIN_IDS.get(chain, LIFI_DEFAULT_CHAIN_ID)


def build_quote_request(config: LifiSwapConfig) -> HttpRequest:
    """GET request for a same-chain LI.FI quote.

    Slippage is configured in percent (0.5 = 0.5%) and sent as a fraction.
    """
    input_config = config.input_config
    chain_id = lifi_chain_id(config.chain)
    slippage = (input_config.slippage_tolerance or LIFI_DEFAULT_SLIPPAGE_PERCENT) / 100
    params = {
        "fromChain": chain_id,
        "toChain": chain_id,
        "fromToken": input_config.source_token.address,
        "toToken": input_config.destination_token.address,
        "fromAmount": input_config.amount,
        "fromAddress": input_config.wallet_address,
        "slippage": slippage,
        "integrator": LIFI_INTEGRATOR,
    }
    return HttpRequest(
        url=f"{LIFI_QUOTE_URL}?{urlencode(params)}",
        method="GET",
        headers={"Accept": "application/json"},
    )


def fetch_quote(config: LifiSwapConfig, capabilities: Capabilities) -> dict[str, Any]:
    """Fetch and parse a quote.

    Raises:
        InvalidCollaboratorResponse: If the response is not a JSON object
    """
    if capabilities.http is None:
        raise MissingConfiguration("http", "an HTTP sender is needed to fetch quotes")
    logger.info("lifi_quote_fetching", chain=config.chain)
    response = capabilities.http.send(build_quote_request(config))
    try:
        quote = json.loads(response.text)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise InvalidCollaboratorResponse(f"Failed to fetch quote: {e}") from e
    if not isinstance(quote, dict):
        raise InvalidCollaboratorResponse("Failed to fetch quote: response is not an object")
    return quote


def source_token_for_receiver(address: str) -> str:
    """Native-asset placeholders are sent to the receiver as the zero address."""
    normalized = normalize_address(address)
    if normalized in (ZERO_ADDRESS, NATIVE_TOKEN_PLACEHOLDER):
        return ZERO_ADDRESS
    return normalized


def build_call_report(config: LifiSwapConfig, quote: dict[str, Any]) -> GenericCallReport:
    """Generic call report from the quote's transactionRequest.

    Raises:
        InvalidCollaboratorResponse: If the quote has no usable transactionRequest
    """
    tx_request = quote.get("transactionRequest")
    if not isinstance(tx_request, dict) or not tx_request.get("to") or not tx_request.get("data"):
        raise InvalidCollaboratorResponse(
            "LI.FI response did not include valid transactionRequest data. Check token config."
        )
    value = tx_request.get("value") or "0"
    try:
        target = normalize_address(str(tx_request["to"]), validate=True)
        call_data = hex_to_bytes(str(tx_request["data"]))
        value = int(value, 16) if str(value).startswith("0x") else int(value)
    except ValueError as e:
        raise InvalidCollaboratorResponse(f"LI.FI transactionRequest is malformed: {e}") from e
    return GenericCallReport(
        target=target,
        call_data=call_data,
        value=value,
        token_in=source_token_for_receiver(config.input_config.source_token.address),
        amount_in=int(validate_uint256(config.input_config.amount)),
        recipient=require(config.input_config.wallet_address, "walletAddress"),
    )


def explorer_link(chain: str, tx_hash: str) -> str:
    base = EXPLORER_TX_URLS.get(chain, EXPLORER_TX_URLS["ARBITRUM_SEPOLIA"])
    return base + tx_hash


def run_lifi_swap(config: LifiSwapConfig, capabilities: Capabilities) -> ActionResult:
    """Quote, encode, sign, submit and classify an aggregated swap. Never raises."""
    amount_in = config.input_config.amount

    def _swap() -> ActionResult:
        require(
            config.swap_receiver_address,
            "swapReceiverAddress",
            "deploy LifiReceiver and set in config",
        )
        quote = fetch_quote(config, capabilities)
        report = build_call_report(config, quote)
        estimate = quote.get("estimate") if isinstance(quote.get("estimate"), dict) else {}
        expected_out = str(estimate.get("toAmount") or "0")
        logger.info("lifi_quote_received", expected_amount_out=expected_out, target=report.target)

        outcome = submit_report(
            capabilities,
            config.swap_receiver_address,
            encode_action(report),
            parse_gas_limit(config.gas_limit),
        )
        result = classify_outcome(outcome, amount_in=amount_in, amount_out=expected_out)
        if result.success and result.transaction_hash:
            logger.info(
                "lifi_swap_executed",
                tx_hash=result.transaction_hash,
                explorer=explorer_link(config.chain, result.transaction_hash),
            )
        return result

    return run_guarded("lifi_swap", _swap, amount_in=amount_in)


__all__ = [
    "run_lifi_swap",
    "build_quote_request",
    "build_call_report",
    "fetch_quote",
    "lifi_chain_id",
    "source_token_for_receiver",
    "explorer_link",
]
