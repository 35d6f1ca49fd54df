"""Shared plumbing for write workflows: required fields, submission, guarding."""

from __future__ import annotations

from collections.abc import Callable

import structlog

from actionkit.capabilities import Capabilities
from actionkit.errors import ActionError, MissingConfiguration
from actionkit.models.results import ActionResult
from actionkit.settlement import TxOutcome

logger = structlog.get_logger()


def require(value: str | None, field: str, hint: str | None = None) -> str:
    """Return value, or raise MissingConfiguration if it is unset or blank."""
    if value is None or value.strip() == "":
        raise MissingConfiguration(field, hint)
    return value


def parse_gas_limit(gas_limit: str) -> int:
    try:
        value = int(gas_limit)
    except ValueError as e:
        raise MissingConfiguration("gasLimit", f"not an integer: '{gas_limit}'") from e
    if value <= 0:
        raise MissingConfiguration("gasLimit", f"must be positive, got {value}")
    return value


def submit_report(
    capabilities: Capabilities,
    receiver: str,
    payload: bytes,
    gas_limit: int,
) -> TxOutcome:
    """Sign an encoded payload into a report and submit it to the receiver."""
    if capabilities.signer is None:
        raise MissingConfiguration("signer", "a report signer is needed to submit actions")
    if capabilities.writer is None:
        raise MissingConfiguration("writer", "a report writer is needed to submit actions")

    report = capabilities.signer.sign_report(payload)
    logger.info("report_submitting", receiver=receiver, payload_size=len(payload), gas_limit=gas_limit)
    return capabilities.writer.write_report(receiver, report, gas_limit)


def run_guarded(
    workflow: str,
    action: Callable[[], ActionResult],
    *,
    amount_in: str | None = None,
    operation: str | None = None,
) -> ActionResult:
    """Run a workflow body, converting any failure into a failed ActionResult.

    ActionErrors carry their kind into the result; any other exception from a
    collaborator is logged with its traceback and reported by message.
    """
    try:
        return action()
    except ActionError as e:
        logger.warning(f"{workflow}_failed", error=str(e), error_kind=e.kind.value)
        return ActionResult.failure(e, amount_in=amount_in, operation=operation)
    except Exception as e:
        logger.exception(f"{workflow}_error", message="Collaborator raised, returning failed result")
        return ActionResult.failure(
            f"{type(e).__name__}: {e}", amount_in=amount_in, operation=operation
        )


__all__ = ["require", "parse_gas_limit", "submit_report", "run_guarded"]
