"""Error classes raised by the numeric and encoding core.

Every error carries an ErrorKind tag so workflow boundaries can turn the
first failure they meet into a terminal ActionResult without losing the
category of what went wrong.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Categories of action failures."""

    STALE_READING = "stale_reading"
    PRICE_AT_BOUND = "price_at_bound"
    POOL_UNINITIALIZED = "pool_uninitialized"
    MISSING_CONFIGURATION = "missing_configuration"
    INVALID_COLLABORATOR_RESPONSE = "invalid_collaborator_response"
    NON_SUCCESS_SETTLEMENT = "non_success_settlement"


class ActionError(Exception):
    """Base error for action computation and settlement."""

    kind: ErrorKind


class StaleReading(ActionError):
    """Oracle reading is older than the configured window, or was never updated."""

    kind = ErrorKind.STALE_READING

    def __init__(
        self,
        feed: str,
        address: str,
        updated_at: int,
        now: int,
        max_age_seconds: int,
    ) -> None:
        self.feed = feed
        self.address = address
        self.updated_at = updated_at
        self.now = now
        self.max_age_seconds = max_age_seconds
        super().__init__(
            f"Stale price | feed={feed} address={address} updatedAt={updated_at} "
            f"now={now} staleAfterSeconds={max_age_seconds}"
        )


class PriceAtBound(ActionError):
    """Pool price is saturated against the requested swap direction."""

    kind = ErrorKind.PRICE_AT_BOUND

    def __init__(self, current_sqrt_price: int, zero_for_one: bool) -> None:
        self.current_sqrt_price = current_sqrt_price
        self.zero_for_one = zero_for_one
        direction = "token0->token1" if zero_for_one else "token1->token0"
        bound = "minimum" if zero_for_one else "maximum"
        super().__init__(
            f"Pool price at {bound}; cannot swap {direction} "
            f"(sqrtPriceX96={current_sqrt_price})"
        )


class PoolUninitialized(ActionError):
    """No price state found for a pool expected to exist."""

    kind = ErrorKind.POOL_UNINITIALIZED

    def __init__(self, pool_id: str | None = None) -> None:
        self.pool_id = pool_id
        message = "Pool not initialized; create the pool first"
        if pool_id:
            message = f"{message} (poolId={pool_id})"
        super().__init__(message)


class MissingConfiguration(ActionError):
    """A required address or parameter is absent."""

    kind = ErrorKind.MISSING_CONFIGURATION

    def __init__(self, field: str, hint: str | None = None) -> None:
        self.field = field
        message = f"{field} is required"
        if hint:
            message = f"{message}; {hint}"
        super().__init__(message)


class InvalidCollaboratorResponse(ActionError):
    """A contract read or HTTP call returned data of an unexpected shape."""

    kind = ErrorKind.INVALID_COLLABORATOR_RESPONSE


class NonSuccessSettlement(ActionError):
    """Submission completed but reported a non-success status."""

    kind = ErrorKind.NON_SUCCESS_SETTLEMENT


__all__ = [
    "ErrorKind",
    "ActionError",
    "StaleReading",
    "PriceAtBound",
    "PoolUninitialized",
    "MissingConfiguration",
    "InvalidCollaboratorResponse",
    "NonSuccessSettlement",
]
