"""Collaborator interfaces injected into each workflow invocation.

The core never talks to a chain, a consensus network or an HTTP service
directly; workflows receive these capabilities and call them sequentially.
Each interface can be replaced by a test double.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Protocol

from actionkit.settlement import TxOutcome
from actionkit.signing import SecretProvider


class ContractReader(Protocol):
    """Performs one read-only contract call and returns the raw return data."""

    def call(self, to: str, data: bytes) -> bytes:
        ...


class ReportSigner(Protocol):
    """Turns an encoded payload into a signed consensus report."""

    def sign_report(self, payload: bytes) -> Any:
        ...


class ReportWriter(Protocol):
    """Submits a signed report to a receiver contract."""

    def write_report(self, receiver: str, report: Any, gas_limit: int) -> TxOutcome:
        ...


@dataclass(frozen=True)
class HttpRequest:
    url: str
    method: str = "GET"
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes | None = None


@dataclass(frozen=True)
class HttpResponse:
    status_code: int
    body: bytes

    @property
    def text(self) -> str:
        return self.body.decode("utf-8")


class HttpSender(Protocol):
    """Sends one HTTP request to an off-chain service."""

    def send(self, request: HttpRequest) -> HttpResponse:
        ...


def system_clock() -> int:
    """Current unix time in seconds."""
    return int(time.time())


@dataclass
class Capabilities:
    """Collaborators available to a workflow invocation.

    Attributes:
        reader: Read-only contract calls (state reads); None disables them
        signer: Consensus report signing
        writer: Report submission
        http: Off-chain HTTP transport
        secrets: Secret lookup by id
        clock: Returns the current unix time in seconds
    """

    reader: ContractReader | None = None
    signer: ReportSigner | None = None
    writer: ReportWriter | None = None
    http: HttpSender | None = None
    secrets: SecretProvider | None = None
    clock: Callable[[], int] = system_clock


__all__ = [
    "ContractReader",
    "ReportSigner",
    "ReportWriter",
    "HttpRequest",
    "HttpResponse",
    "HttpSender",
    "Capabilities",
    "system_clock",
]
