"""Command-line utilities for pool ids, amount scaling, liquidity sizing and signing.

Examples:
  actionkit pool-id 0xTokenA 0xTokenB --fee 3000 --tick-spacing 60
  actionkit scale 1500000 --decimals 6
  actionkit scale 1.5 --decimals 6 --to-raw
  actionkit liquidity --tick-lower -120 --tick-upper 120 --amount0 1000000 --amount1 1000000
  actionkit sign --secret s3cret --method POST --path /v1/positions/open --body '{}'
  actionkit run read-feeds --config config/read-feeds.json --rpc-url https://...
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

import structlog

from actionkit.constants import DEFAULT_FEE, DEFAULT_TICK_SPACING, SQRT_PRICE_1_1, ZERO_ADDRESS
from actionkit.math import amounts_for_liquidity, get_sqrt_ratio_at_tick, max_liquidity_for_amounts
from actionkit.math.amounts import to_decimal_string, to_raw_amount
from actionkit.pools import PoolKey
from actionkit.signing import sign_request

logger = structlog.get_logger()


def _pool_id(args: argparse.Namespace) -> int:
    key = PoolKey.create(args.token_a, args.token_b, args.fee, args.tick_spacing, args.hooks)
    print(f"currency0: {key.currency0}")
    print(f"currency1: {key.currency1}")
    print(f"poolId:    {key.id_hex}")
    return 0


def _scale(args: argparse.Namespace) -> int:
    if args.to_raw:
        print(to_raw_amount(args.value, args.decimals))
    else:
        print(to_decimal_string(int(args.value), args.decimals))
    return 0


def _liquidity(args: argparse.Namespace) -> int:
    sqrt_price = args.sqrt_price if args.sqrt_price is not None else SQRT_PRICE_1_1
    liquidity = max_liquidity_for_amounts(
        args.tick_lower,
        args.tick_upper,
        sqrt_price,
        args.amount0,
        args.amount1,
        use_full_precision=not args.imprecise,
    )
    amount0, amount1 = amounts_for_liquidity(
        sqrt_price,
        get_sqrt_ratio_at_tick(args.tick_lower),
        get_sqrt_ratio_at_tick(args.tick_upper),
        liquidity,
    )
    print(json.dumps({"liquidity": str(liquidity), "amount0": str(amount0), "amount1": str(amount1)}))
    return 0


def _sign(args: argparse.Namespace) -> int:
    print(sign_request(args.secret, args.method, args.path, args.body, args.timestamp))
    return 0


def _run(args: argparse.Namespace) -> int:
    # Imported here so the offline commands do not pull in the HTTP stack
    from actionkit.api.endpoints import WORKFLOWS
    from actionkit.capabilities import Capabilities
    from actionkit.clients import HttpxSender, Web3ContractReader
    from actionkit.models.config import merge_config
    from actionkit.signing import EnvSecretProvider

    model, runner = WORKFLOWS[args.workflow]
    config = model.model_validate(json.loads(Path(args.config).read_text()))
    if args.override:
        config = merge_config(config, json.loads(args.override))

    http = HttpxSender()
    capabilities = Capabilities(
        reader=Web3ContractReader(args.rpc_url) if args.rpc_url else None,
        http=http,
        secrets=EnvSecretProvider(),
    )
    try:
        result = runner(config, capabilities)
    finally:
        http.close()
    print(result.model_dump_json(by_alias=True, exclude_none=True, indent=2))
    return 0 if getattr(result, "success", False) else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="actionkit",
        description="Utilities for DeFi action workflows",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    pool = subparsers.add_parser("pool-id", help="Order a token pair and compute its V4 pool id")
    pool.add_argument("token_a")
    pool.add_argument("token_b")
    pool.add_argument("--fee", type=int, default=DEFAULT_FEE, help="Fee in pips (default: 3000)")
    pool.add_argument("--tick-spacing", type=int, default=DEFAULT_TICK_SPACING)
    pool.add_argument("--hooks", default=ZERO_ADDRESS)
    pool.set_defaults(handler=_pool_id)

    scale = subparsers.add_parser("scale", help="Convert between raw and decimal amounts")
    scale.add_argument("value")
    scale.add_argument("--decimals", type=int, required=True)
    scale.add_argument(
        "--to-raw", action="store_true", help="Convert a decimal string to a raw integer"
    )
    scale.set_defaults(handler=_scale)

    liquidity = subparsers.add_parser("liquidity", help="Size liquidity for desired amounts")
    liquidity.add_argument("--tick-lower", type=int, required=True)
    liquidity.add_argument("--tick-upper", type=int, required=True)
    liquidity.add_argument("--amount0", type=int, required=True)
    liquidity.add_argument("--amount1", type=int, required=True)
    liquidity.add_argument(
        "--sqrt-price", type=int, default=None, help="Pool sqrtPriceX96 (default: 1:1)"
    )
    liquidity.add_argument(
        "--imprecise", action="store_true", help="Size amount0 the way PositionManager does"
    )
    liquidity.set_defaults(handler=_liquidity)

    sign = subparsers.add_parser("sign", help="HMAC-sign a service request")
    sign.add_argument("--secret", required=True)
    sign.add_argument("--method", default="POST")
    sign.add_argument("--path", required=True)
    sign.add_argument("--body", default="")
    sign.add_argument("--timestamp", required=True, help="Milliseconds since epoch")
    sign.set_defaults(handler=_sign)

    run = subparsers.add_parser("run", help="Run a workflow once from a JSON config file")
    run.add_argument(
        "workflow",
        choices=[
            "read-feeds",
            "uniswap-swap",
            "aave-lending",
            "lifi-swap",
            "ostium-trading",
            "liquidity-position",
        ],
    )
    run.add_argument("--config", type=Path, required=True)
    run.add_argument("--override", default=None, help="JSON object merged over the config")
    run.add_argument("--rpc-url", default=None, help="JSON-RPC endpoint for contract reads")
    run.set_defaults(handler=_run)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for the actionkit command."""
    args = build_parser().parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.WARNING
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
    )

    try:
        return int(args.handler(args))
    except ValueError as e:
        logger.error("command_failed", command=args.command, error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
