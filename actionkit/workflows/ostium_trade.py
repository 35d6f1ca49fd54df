"""Open a perpetuals position through the HMAC-authenticated Ostium service."""

from __future__ import annotations

import json
from typing import Any

import structlog

from actionkit.capabilities import Capabilities, HttpRequest
from actionkit.constants import OSTIUM_OPEN_POSITION_PATH, OSTIUM_SECRET_ID
from actionkit.models.config import OstiumTradeConfig
from actionkit.models.results import ActionResult
from actionkit.signing import signed_headers

logger = structlog.get_logger()


def _number(value: float) -> int | float:
    # Whole numbers serialize without a fraction ("100", not "100.0")
    return int(value) if float(value).is_integer() else value


def build_position_body(config: OstiumTradeConfig) -> str:
    """Compact JSON body for an open-position request; SL/TP only when set."""
    body: dict[str, Any] = {
        "network": config.network,
        "market": config.market,
        "side": config.side,
        "collateral": _number(config.collateral),
        "leverage": _number(config.leverage),
        "traderAddress": config.trader_address,
    }
    if config.sl_price is not None:
        body["slPrice"] = _number(config.sl_price)
    if config.tp_price is not None:
        body["tpPrice"] = _number(config.tp_price)
    return json.dumps(body, separators=(",", ":"))


def build_position_request(config: OstiumTradeConfig, secret: str, timestamp_ms: int) -> HttpRequest:
    """Signed POST request for the open-position endpoint."""
    body = build_position_body(config)
    return HttpRequest(
        url=f"{config.service_url.rstrip('/')}{OSTIUM_OPEN_POSITION_PATH}",
        method="POST",
        headers=signed_headers(secret, "POST", OSTIUM_OPEN_POSITION_PATH, body, str(timestamp_ms)),
        body=body.encode("utf-8"),
    )


def parse_position_response(data: Any) -> ActionResult:
    """Map the service response to an ActionResult."""
    if not isinstance(data, dict):
        return ActionResult.failure("Unknown error occurred from Ostium Service")

    if data.get("success"):
        payload = data.get("data") if isinstance(data.get("data"), dict) else {}
        result = payload.get("result") if isinstance(payload.get("result"), dict) else {}
        receipt = result.get("receipt") if isinstance(result.get("receipt"), dict) else {}
        tx_hash = receipt.get("transactionHash") or payload.get("txHash") or "unknown"
        return ActionResult(success=True, transaction_hash=tx_hash)

    error = data.get("error") if isinstance(data.get("error"), dict) else {}
    return ActionResult.failure(error.get("message") or "Unknown error occurred from Ostium Service")


def open_ostium_position(config: OstiumTradeConfig, capabilities: Capabilities) -> ActionResult:
    """Sign and send an open-position request. Never raises."""
    logger.info(
        "ostium_position_opening",
        side=config.side,
        market=config.market,
        collateral=config.collateral,
        leverage=config.leverage,
    )
    secret = capabilities.secrets.get_secret(OSTIUM_SECRET_ID) if capabilities.secrets else None
    if not secret:
        logger.warning("ostium_secret_missing", secret_id=OSTIUM_SECRET_ID)
        return ActionResult.failure(f"Missing {OSTIUM_SECRET_ID}")
    if capabilities.http is None:
        return ActionResult.failure("Failed to execute request: no HTTP sender configured")

    request = build_position_request(config, secret, capabilities.clock() * 1000)
    try:
        response = capabilities.http.send(request)
        logger.debug("ostium_response", status_code=response.status_code, body=response.text)
        data = json.loads(response.text)
    except Exception as e:
        logger.warning("ostium_request_failed", error=str(e))
        return ActionResult.failure(f"Failed to execute request: {e}")

    result = parse_position_response(data)
    if result.success:
        logger.info("ostium_position_opened", tx_hash=result.transaction_hash)
    else:
        logger.warning("ostium_position_rejected", error=result.error)
    return result


__all__ = [
    "open_ostium_position",
    "build_position_body",
    "build_position_request",
    "parse_position_response",
]
