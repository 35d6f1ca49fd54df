"""Factory functions for configs and collaborator responses.

Usage:
    from tests.helpers import make_swap_config, slot0_response

    config = make_swap_config(amount="2000000")
"""

from typing import Any

from eth_abi import encode

from actionkit.models.config import (
    AaveLendingConfig,
    LifiSwapConfig,
    LiquidityPositionConfig,
    OstiumTradeConfig,
    ReadFeedsConfig,
    UniswapSwapConfig,
)
from actionkit.models.types import address_to_bytes
from tests.helpers.constants import (
    AAVE_RECEIVER,
    ETH_USD_FEED,
    LIFI_RECEIVER,
    POOL_MANAGER,
    POOL_SWAP_TEST,
    SWAP_RECEIVER,
    USDC,
    USDC_SEPOLIA,
    WALLET,
    WETH,
    WETH_SEPOLIA,
)

# =============================================================================
# Configs
# =============================================================================


def make_feeds_config(
    feeds: list[dict[str, str]] | None = None,
    stale_after_seconds: int | None = None,
    chain_name: str = "ethereum-mainnet-arbitrum-1",
) -> ReadFeedsConfig:
    """Create a feed-read config (default: a single ETH/USD feed)."""
    data: dict[str, Any] = {
        "schedule": "0 */10 * * * *",
        "chainName": chain_name,
        "feeds": feeds if feeds is not None else [{"name": "ETH/USD", "address": ETH_USD_FEED}],
    }
    if stale_after_seconds is not None:
        data["staleAfterSeconds"] = stale_after_seconds
    return ReadFeedsConfig.model_validate(data)


def make_swap_config(
    source: str = USDC_SEPOLIA,
    destination: str = WETH_SEPOLIA,
    amount: str = "1000000",
    chain: str = "ARBITRUM_SEPOLIA",
    **overrides: Any,
) -> UniswapSwapConfig:
    """Create a V4 swap config with all required addresses set.

    Keyword overrides are applied to the top level of the wire dict, using
    camelCase keys (e.g. stateViewAddress="", poolConfig={...}).
    """
    data: dict[str, Any] = {
        "schedule": "0 */10 * * * *",
        "chain": chain,
        "chainSelectorName": "ethereum-testnet-sepolia-arbitrum-1",
        "provider": "UNISWAP",
        "swapReceiverAddress": SWAP_RECEIVER,
        "poolSwapTestAddress": POOL_SWAP_TEST,
        "poolManagerAddress": POOL_MANAGER,
        "gasLimit": "500000",
        "inputConfig": {
            "sourceToken": {"address": source, "symbol": "SRC", "decimals": 6},
            "destinationToken": {"address": destination, "symbol": "DST", "decimals": 18},
            "amount": amount,
            "swapType": "EXACT_INPUT",
            "walletAddress": WALLET,
            "amountOutMinimum": "1",
        },
    }
    data.update(overrides)
    return UniswapSwapConfig.model_validate(data)


def make_lending_config(
    operation: str = "SUPPLY",
    amount: str = "1000000",
    asset: dict[str, Any] | None = None,
    **input_overrides: Any,
) -> AaveLendingConfig:
    """Create an Aave lending config on Arbitrum One."""
    input_config: dict[str, Any] = {
        "operation": operation,
        "asset": asset or {"address": USDC, "symbol": "USDC", "decimals": 6},
        "amount": amount,
        "walletAddress": WALLET,
    }
    input_config.update(input_overrides)
    return AaveLendingConfig.model_validate(
        {
            "schedule": "0 0 * * * *",
            "chain": "ARBITRUM",
            "chainSelectorName": "ethereum-mainnet-arbitrum-1",
            "provider": "AAVE",
            "aaveReceiverAddress": AAVE_RECEIVER,
            "gasLimit": "600000",
            "inputConfig": input_config,
        }
    )


def make_lifi_config(
    source: str = USDC,
    destination: str = WETH,
    amount: str = "1000000",
    **overrides: Any,
) -> LifiSwapConfig:
    """Create a LI.FI swap config on Arbitrum One."""
    data: dict[str, Any] = {
        "schedule": "0 */30 * * * *",
        "chain": "ARBITRUM",
        "chainSelectorName": "ethereum-mainnet-arbitrum-1",
        "provider": "LIFI",
        "swapReceiverAddress": LIFI_RECEIVER,
        "gasLimit": "1500000",
        "inputConfig": {
            "sourceToken": {"address": source, "symbol": "USDC", "decimals": 6},
            "destinationToken": {"address": destination, "symbol": "WETH", "decimals": 18},
            "amount": amount,
            "swapType": "EXACT_INPUT",
            "walletAddress": WALLET,
            "slippageTolerance": 1.0,
        },
    }
    data.update(overrides)
    return LifiSwapConfig.model_validate(data)


def make_ostium_config(**overrides: Any) -> OstiumTradeConfig:
    """Create an Ostium trade config (10 USDC long BTC-USD at 5x)."""
    data: dict[str, Any] = {
        "schedule": "0 0 * * * *",
        "network": "testnet",
        "market": "BTC-USD",
        "side": "long",
        "collateral": 10,
        "leverage": 5,
        "traderAddress": WALLET,
        "serviceUrl": "https://ostium.example.com",
    }
    data.update(overrides)
    return OstiumTradeConfig.model_validate(data)


def make_liquidity_config(
    token_a: str = USDC_SEPOLIA,
    token_b: str = WETH_SEPOLIA,
    amount_a: str = "1000000",
    amount_b: str = "1000000",
    tick_lower: int = -120,
    tick_upper: int = 120,
    **overrides: Any,
) -> LiquidityPositionConfig:
    """Create a liquidity position config on a 0.3% / spacing 10 pool."""
    data: dict[str, Any] = {
        "chain": "ARBITRUM",
        "tokenA": {"address": token_a},
        "tokenB": {"address": token_b},
        "amountA": amount_a,
        "amountB": amount_b,
        "tickLower": tick_lower,
        "tickUpper": tick_upper,
        "recipient": WALLET,
        "poolConfig": {"fee": 3000, "tickSpacing": 10},
    }
    data.update(overrides)
    return LiquidityPositionConfig.model_validate(data)


# =============================================================================
# Contract call responses
# =============================================================================


def decimals_response(decimals: int) -> bytes:
    return encode(["uint8"], [decimals])


def description_response(description: str) -> bytes:
    return encode(["string"], [description])


def latest_round_response(
    answer: int,
    updated_at: int,
    round_id: int = 110680464442257320000,
    started_at: int | None = None,
    answered_in_round: int | None = None,
) -> bytes:
    return encode(
        ["uint80", "int256", "uint256", "uint256", "uint80"],
        [
            round_id,
            answer,
            updated_at if started_at is None else started_at,
            updated_at,
            round_id if answered_in_round is None else answered_in_round,
        ],
    )


def slot0_response(sqrt_price_x96: int, tick: int = 0, lp_fee: int = 3000) -> bytes:
    return encode(["uint160", "int24", "uint24", "uint24"], [sqrt_price_x96, tick, 0, lp_fee])


def reserve_data_response(a_token: str) -> bytes:
    zero = address_to_bytes("0x" + "00" * 20)
    reserve = (0, 0, 0, 0, 0, 0, 0, 1, address_to_bytes(a_token), zero, zero, zero, 0, 0, 0)
    return encode(
        [
            "(uint256,uint128,uint128,uint128,uint128,uint128,uint40,uint16,"
            "address,address,address,address,uint128,uint128,uint128)"
        ],
        [reserve],
    )
