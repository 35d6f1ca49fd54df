"""API endpoints that trigger configured workflows over HTTP."""

import asyncio
import json
import os
from collections.abc import Callable, Iterator
from functools import lru_cache
from pathlib import Path
from typing import Any

import structlog
from fastapi import APIRouter, Body, Depends, HTTPException
from pydantic import BaseModel, ValidationError

from actionkit.capabilities import Capabilities
from actionkit.clients import HttpxSender, Web3ContractReader
from actionkit.models.config import (
    AaveLendingConfig,
    LifiSwapConfig,
    LiquidityPositionConfig,
    OstiumTradeConfig,
    ReadFeedsConfig,
    UniswapSwapConfig,
    merge_config,
)
from actionkit.signing import EnvSecretProvider
from actionkit.workflows import (
    open_ostium_position,
    plan_liquidity_position,
    read_feeds,
    run_aave_lending,
    run_lifi_swap,
    run_uniswap_swap,
)

logger = structlog.get_logger()

router = APIRouter()

# Directory holding one <workflow>.json config per workflow
CONFIG_DIR = os.environ.get("ACTIONKIT_CONFIG_DIR", "config")

# Optional JSON-RPC endpoint for contract reads
RPC_URL = os.environ.get("ACTIONKIT_RPC_URL", "")

# Workflow name -> (config model, runner)
WORKFLOWS: dict[str, tuple[type[BaseModel], Callable[[Any, Capabilities], BaseModel]]] = {
    "read-feeds": (ReadFeedsConfig, read_feeds),
    "uniswap-swap": (UniswapSwapConfig, run_uniswap_swap),
    "aave-lending": (AaveLendingConfig, run_aave_lending),
    "lifi-swap": (LifiSwapConfig, run_lifi_swap),
    "ostium-trading": (OstiumTradeConfig, open_ostium_position),
    "liquidity-position": (LiquidityPositionConfig, plan_liquidity_position),
}


def load_workflow_configs(config_dir: str | Path) -> dict[str, BaseModel]:
    """Load <workflow>.json files from a directory.

    Missing files are skipped; a file that does not validate is logged and
    skipped so the remaining workflows stay available.
    """
    configs: dict[str, BaseModel] = {}
    directory = Path(config_dir)
    for name, (model, _) in WORKFLOWS.items():
        path = directory / f"{name}.json"
        if not path.is_file():
            continue
        try:
            configs[name] = model.model_validate(json.loads(path.read_text()))
        except (json.JSONDecodeError, ValidationError) as e:
            logger.warning("workflow_config_invalid", workflow=name, path=str(path), error=str(e))
    logger.info("workflow_configs_loaded", config_dir=str(directory), workflows=sorted(configs))
    return configs


@lru_cache(maxsize=1)
def get_workflow_configs() -> dict[str, BaseModel]:
    """Dependency provider for base workflow configs.

    Override this in tests:
        app.dependency_overrides[get_workflow_configs] = lambda: {...}
    """
    return load_workflow_configs(CONFIG_DIR)


def get_capabilities() -> Iterator[Capabilities]:
    """Dependency provider for workflow collaborators.

    Report signing and submission are supplied by the hosting runtime; this
    default provides contract reads (when ACTIONKIT_RPC_URL is set), HTTP
    and environment secrets. The HTTP client is closed once the request is
    done.
    """
    http = HttpxSender()
    try:
        yield Capabilities(
            reader=Web3ContractReader(RPC_URL) if RPC_URL else None,
            http=http,
            secrets=EnvSecretProvider(),
        )
    finally:
        http.close()


@router.post("/workflows/{workflow}", response_model_exclude_none=True)
async def trigger_workflow(
    workflow: str,
    override: dict[str, Any] | None = Body(default=None),
    configs: dict[str, BaseModel] = Depends(get_workflow_configs),
    capabilities: Capabilities = Depends(get_capabilities),
) -> dict[str, Any]:
    """Run one workflow with its base config merged with the request body.

    Error Handling:
        - Unknown or unconfigured workflow: 404
        - Override that makes the config invalid: 422
        - Workflow failures: 200 with success=false in the result
    """
    if workflow not in WORKFLOWS:
        raise HTTPException(status_code=404, detail=f"Unknown workflow: {workflow}")
    base = configs.get(workflow)
    if base is None:
        raise HTTPException(status_code=404, detail=f"Workflow not configured: {workflow}")

    try:
        config = merge_config(base, override)
    except ValidationError as e:
        logger.warning("workflow_override_invalid", workflow=workflow, error=str(e))
        raise HTTPException(status_code=422, detail=json.loads(e.json())) from e

    logger.info("workflow_triggered", workflow=workflow, has_override=bool(override))
    _, runner = WORKFLOWS[workflow]
    loop = asyncio.get_running_loop()
    result = await loop.run_in_executor(None, runner, config, capabilities)
    return result.model_dump(mode="json", by_alias=True, exclude_none=True)


@router.get("/workflows")
async def list_workflows(
    configs: dict[str, BaseModel] = Depends(get_workflow_configs),
) -> dict[str, list[str]]:
    """Known workflows and the subset with a loaded config."""
    return {"workflows": list(WORKFLOWS), "configured": sorted(configs)}
