"""Shared token and contract constants for tests.

All addresses are lowercase for consistency with normalize_address().

Usage:
    from tests.helpers import WETH, USDC
    # or
    from tests.helpers.constants import WETH, USDC
"""

# =============================================================================
# Arbitrum One tokens
# =============================================================================

WETH = "0x82af49447d8a07e3bd95bd0d56f35241523fbab1"  # Wrapped Ether (18 decimals)
USDC = "0xaf88d065e77c8cc2239327c5edb3a432268e5831"  # USD Coin (6 decimals)

# =============================================================================
# Arbitrum Sepolia tokens (ordering is reversed relative to mainnet)
# =============================================================================

WETH_SEPOLIA = "0x980b62da83eff3d4576c647993b0c1d7faf17c73"
USDC_SEPOLIA = "0x75faf114eafb1bdbe2f0316df893fd58ce46aa4d"

# =============================================================================
# Contracts
# =============================================================================

ETH_USD_FEED = "0x639fe6ab55c921f74e7fac1ee960c0b6293ba612"  # Chainlink ETH/USD
BTC_USD_FEED = "0x6ce185860a4963106506c203335a2910413708e9"  # Chainlink BTC/USD
STATE_VIEW = "0x9d467fa9062b6e9b1a46e26007ad82db116c67cb"
POOL_SWAP_TEST = "0x9140a78c1a137c7ff1c151ec8231272af78a99a4"
POOL_MANAGER = "0xfb3e0c6f74eb1a21cc1da29aec80d2dfe6c9a317"
SWAP_RECEIVER = "0x1111111111111111111111111111111111111111"
AAVE_RECEIVER = "0x2222222222222222222222222222222222222222"
LIFI_RECEIVER = "0x3333333333333333333333333333333333333333"
LIFI_DIAMOND = "0x1231deb6f5749ef6ce6943a275a1d3e7486f4eae"
AAVE_POOL = "0x794a61358d6845594f94dc1db02a252b5b4814ad"
A_USDC = "0x724dc807b04555b71ed48a6896b6f41593b8c637"

# =============================================================================
# Wallets
# =============================================================================

WALLET = "0x4444444444444444444444444444444444444444"
OTHER_WALLET = "0x5555555555555555555555555555555555555555"

# Fixed clock used by mock capabilities (2025-01-01T00:00:00Z)
NOW = 1_735_689_600

TOKEN_DECIMALS = {
    WETH: 18,
    USDC: 6,
    WETH_SEPOLIA: 18,
    USDC_SEPOLIA: 6,
}


__all__ = [
    "WETH",
    "USDC",
    "WETH_SEPOLIA",
    "USDC_SEPOLIA",
    "ETH_USD_FEED",
    "BTC_USD_FEED",
    "STATE_VIEW",
    "POOL_SWAP_TEST",
    "POOL_MANAGER",
    "SWAP_RECEIVER",
    "AAVE_RECEIVER",
    "LIFI_RECEIVER",
    "LIFI_DIAMOND",
    "AAVE_POOL",
    "A_USDC",
    "WALLET",
    "OTHER_WALLET",
    "NOW",
    "TOKEN_DECIMALS",
]
