"""Classification of report submissions into action results."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import structlog

from actionkit.errors import ErrorKind, NonSuccessSettlement
from actionkit.models.results import ActionResult

logger = structlog.get_logger()


class TxStatus(str, Enum):
    """Status reported by the submission capability."""

    SUCCESS = "SUCCESS"
    REVERTED = "REVERTED"
    FATAL = "FATAL"


@dataclass(frozen=True)
class TxOutcome:
    """What the submission capability reported for one report.

    status may be a TxStatus or any raw value the provider returned.
    """

    status: TxStatus | str | int
    tx_hash: bytes | str | None = None
    error_message: str | None = None

    @property
    def succeeded(self) -> bool:
        return _status_name(self.status) == TxStatus.SUCCESS.value

    @property
    def tx_hash_hex(self) -> str | None:
        if self.tx_hash is None or len(self.tx_hash) == 0:
            return None
        if isinstance(self.tx_hash, bytes):
            return "0x" + self.tx_hash.hex()
        return self.tx_hash if self.tx_hash.startswith("0x") else "0x" + self.tx_hash

    def raise_for_status(self) -> None:
        """Raise NonSuccessSettlement unless the submission succeeded."""
        if not self.succeeded:
            raise NonSuccessSettlement(_failure_message(self))


def _status_name(status: TxStatus | str | int) -> str:
    if isinstance(status, TxStatus):
        return status.value
    return str(status)


def _failure_message(outcome: TxOutcome) -> str:
    if outcome.error_message:
        return outcome.error_message
    return f"tx status: {_status_name(outcome.status)}"


def classify_outcome(
    outcome: TxOutcome,
    *,
    amount_in: str | None = None,
    amount_out: str | None = None,
    operation: str | None = None,
) -> ActionResult:
    """Map a submission outcome to a terminal ActionResult.

    A successful outcome keeps the transaction hash (when the provider gave
    one) and amount_out. Anything else is a failure whose error is the
    provider message, or "tx status: <status>" when it sent none.
    Never raises.
    """
    tx_hash = outcome.tx_hash_hex
    if outcome.succeeded:
        logger.info("settlement_succeeded", tx_hash=tx_hash, operation=operation)
        return ActionResult(
            success=True,
            transaction_hash=tx_hash,
            amount_in=amount_in,
            amount_out=amount_out,
            operation=operation,
        )

    error = _failure_message(outcome)
    logger.warning(
        "settlement_failed",
        status=_status_name(outcome.status),
        tx_hash=tx_hash,
        error=error,
        operation=operation,
    )
    return ActionResult(
        success=False,
        amount_in=amount_in,
        operation=operation,
        error=error,
        error_kind=ErrorKind.NON_SUCCESS_SETTLEMENT,
    )


__all__ = ["TxStatus", "TxOutcome", "classify_outcome"]
