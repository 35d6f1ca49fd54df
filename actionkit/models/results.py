"""Pydantic models for caller-facing action results.

Results serialize with camelCase aliases and without None fields, the
shape callers of the workflows consume.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, computed_field

from actionkit.errors import ActionError, ErrorKind


class ActionResult(BaseModel):
    """Terminal record of one write action (swap, lending operation, trade).

    Exactly one is produced per invocation; failures are reported here
    rather than raised.
    """

    success: bool
    transaction_hash: str | None = Field(default=None, alias="txHash")
    operation: str | None = None
    amount_in: str | None = Field(default=None, alias="amountIn")
    amount_out: str | None = Field(default=None, alias="amountOut")
    error: str | None = None
    error_kind: ErrorKind | None = Field(default=None, alias="errorKind")

    model_config = {"populate_by_name": True}

    @classmethod
    def failure(
        cls,
        error: str | ActionError,
        *,
        amount_in: str | None = None,
        operation: str | None = None,
        kind: ErrorKind | None = None,
    ) -> ActionResult:
        """Create a failed result from a message or an ActionError."""
        if isinstance(error, ActionError):
            kind = kind or error.kind
            error = str(error)
        return cls(
            success=False,
            error=error,
            error_kind=kind,
            amount_in=amount_in,
            operation=operation,
        )

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True)


class OracleReading(BaseModel):
    """One price feed read, with the raw answer and its scaled form."""

    provider: Literal["CHAINLINK"] = "CHAINLINK"
    chain: str
    aggregator_address: str = Field(alias="aggregatorAddress")
    description: str | None = None
    decimals: int
    round_id: str = Field(alias="roundId")
    answered_in_round: str = Field(alias="answeredInRound")
    started_at: int = Field(alias="startedAt")
    updated_at: int = Field(alias="updatedAt")
    answer: str
    formatted_answer: str = Field(alias="formattedAnswer")

    model_config = {"populate_by_name": True}


class FeedFailure(BaseModel):
    """A feed whose read or validation failed."""

    name: str
    address: str
    error: str
    error_kind: ErrorKind | None = Field(default=None, alias="errorKind")

    model_config = {"populate_by_name": True}


class ReadFeedsResult(BaseModel):
    """Outcome of a multi-feed read; failures are isolated per feed."""

    readings: list[OracleReading] = Field(default_factory=list)
    failures: list[FeedFailure] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def success(self) -> bool:
        return not self.failures

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True)


class LiquidityPlan(BaseModel):
    """A sized liquidity position and its PositionManager unlock data."""

    success: bool
    pool_id: str | None = Field(default=None, alias="poolId")
    currency0: str | None = None
    currency1: str | None = None
    tick_lower: int | None = Field(default=None, alias="tickLower")
    tick_upper: int | None = Field(default=None, alias="tickUpper")
    sqrt_price_x96: str | None = Field(default=None, alias="sqrtPriceX96")
    liquidity: str | None = None
    amount0: str | None = None
    amount1: str | None = None
    unlock_data: str | None = Field(default=None, alias="unlockData")
    error: str | None = None
    error_kind: ErrorKind | None = Field(default=None, alias="errorKind")

    model_config = {"populate_by_name": True}

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True)


__all__ = [
    "ActionResult",
    "OracleReading",
    "FeedFailure",
    "ReadFeedsResult",
    "LiquidityPlan",
]
