"""FastAPI application that triggers actionkit workflows.

Note: Authentication and rate limiting are left to the infrastructure layer
(reverse proxy / load balancer).
"""

import os

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from actionkit import __version__
from actionkit.api.endpoints import router

# Configuration from environment variables with sensible defaults
HOST = os.environ.get("ACTIONKIT_HOST", "0.0.0.0")
PORT = int(os.environ.get("ACTIONKIT_PORT", "8000"))
DEBUG = os.environ.get("ACTIONKIT_DEBUG", "false").lower() in ("true", "1", "yes")

# Maximum request body size (1 MB); overrides are small JSON objects
MAX_REQUEST_SIZE = 1024 * 1024

app = FastAPI(
    title="actionkit",
    description="HTTP triggers for DeFi action workflows",
    version=__version__,
)


@app.middleware("http")
async def limit_request_size(request: Request, call_next):  # type: ignore[no-untyped-def]
    """Reject requests with body larger than MAX_REQUEST_SIZE."""
    content_length = request.headers.get("content-length")
    if content_length and int(content_length) > MAX_REQUEST_SIZE:
        return JSONResponse(status_code=413, content={"detail": "Request too large"})
    return await call_next(request)


app.include_router(router)


@app.get("/health")
async def health() -> dict[str, object]:
    """Health check endpoint."""
    return {"status": "ok", "version": __version__}


def run() -> None:
    """Run the API server.

    Configuration via environment variables:
    - ACTIONKIT_HOST: Host to bind to (default: 0.0.0.0)
    - ACTIONKIT_PORT: Port to bind to (default: 8000)
    - ACTIONKIT_DEBUG: Enable debug/reload mode (default: false)
    - ACTIONKIT_CONFIG_DIR: Directory of <workflow>.json configs (default: config)
    - ACTIONKIT_RPC_URL: JSON-RPC endpoint for contract reads (optional)
    """
    uvicorn.run(
        "actionkit.api.main:app",
        host=HOST,
        port=PORT,
        reload=DEBUG,
    )


if __name__ == "__main__":
    run()
