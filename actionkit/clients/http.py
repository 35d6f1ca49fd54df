"""HTTP transport for off-chain service calls."""

from __future__ import annotations

import httpx
import structlog

from actionkit.capabilities import HttpRequest, HttpResponse

logger = structlog.get_logger()


class HttpxSender:
    """HttpSender backed by an httpx client.

    Non-2xx responses are returned, not raised: the calling workflow reads
    the service's error body and classifies it.
    """

    def __init__(
        self,
        timeout_seconds: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ):
        self.client = httpx.Client(timeout=timeout_seconds, transport=transport)

    def send(self, request: HttpRequest) -> HttpResponse:
        response = self.client.request(
            request.method,
            request.url,
            headers=request.headers,
            content=request.body,
        )
        logger.debug(
            "http_request_sent",
            method=request.method,
            url=request.url,
            status_code=response.status_code,
        )
        return HttpResponse(status_code=response.status_code, body=response.content)

    def close(self) -> None:
        self.client.close()


__all__ = ["HttpxSender"]
