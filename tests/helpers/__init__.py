"""Test helpers module for shared test utilities.

- constants: Token, contract and wallet addresses
- factories: Workflow configs and encoded contract responses
- mocks: Collaborator test doubles
"""

from tests.helpers.constants import (
    NOW,
    TOKEN_DECIMALS,
    USDC,
    USDC_SEPOLIA,
    WALLET,
    WETH,
    WETH_SEPOLIA,
)
from tests.helpers.factories import (
    make_feeds_config,
    make_lending_config,
    make_lifi_config,
    make_liquidity_config,
    make_ostium_config,
    make_swap_config,
)
from tests.helpers.mocks import MockHttp, MockReader, MockSigner, MockWriter

__all__ = [
    # Constants
    "WETH",
    "USDC",
    "WETH_SEPOLIA",
    "USDC_SEPOLIA",
    "WALLET",
    "NOW",
    "TOKEN_DECIMALS",
    # Factories
    "make_feeds_config",
    "make_swap_config",
    "make_lending_config",
    "make_lifi_config",
    "make_ostium_config",
    "make_liquidity_config",
    # Mocks
    "MockReader",
    "MockSigner",
    "MockWriter",
    "MockHttp",
]
