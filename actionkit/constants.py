"""Protocol constants shared by the action workflows.

Centralizes sentinel addresses, Uniswap V4 price bounds and defaults,
Aave operation codes and per-chain well-known addresses.
"""

from actionkit.models.types import is_valid_address

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"

# Placeholder some aggregators use for the chain's native asset
NATIVE_TOKEN_PLACEHOLDER = "0xeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeee"

# 2^96 fixed point for sqrt price representation
Q96 = 2**96

# Absolute sqrt price bounds (TickMath.MIN_SQRT_RATIO / MAX_SQRT_RATIO)
MIN_SQRT_PRICE = 4295128739
MAX_SQRT_PRICE = 1461446703485210103287273052203988822378723970342

# sqrt(1) * 2^96, used when a pool has no readable price yet
SQRT_PRICE_1_1 = Q96

# Uniswap V4 pool defaults (0.3% fee tier)
DEFAULT_FEE = 3000
DEFAULT_TICK_SPACING = 60

# Swap deadline offset applied at execution time
DEFAULT_DEADLINE_SECONDS = 20 * 60

# Aave receiver operation codes (order matches the receiver contract)
OP_SUPPLY = 0
OP_WITHDRAW = 1
OP_BORROW = 2
OP_REPAY = 3

LENDING_OPERATION_CODES = {
    "SUPPLY": OP_SUPPLY,
    "WITHDRAW": OP_WITHDRAW,
    "BORROW": OP_BORROW,
    "REPAY": OP_REPAY,
}

INTEREST_RATE_STABLE = 1
INTEREST_RATE_VARIABLE = 2


def _validate_address(name: str, address: str) -> str:
    """Validate and return a well-known address.

    Raises:
        ValueError: If the address is invalid
    """
    if not is_valid_address(address):
        raise ValueError(f"Invalid {name} address: {address} (must be 0x + 40 hex chars)")
    return address


# Aave V3 Pool per chain
AAVE_POOL_ADDRESSES = {
    "ARBITRUM": _validate_address("Aave pool", "0x794a61358D6845594F94dc1DB02A252b5b4814aD"),
    "ARBITRUM_SEPOLIA": _validate_address(
        "Aave pool", "0xBfC91D59fdAA134A4ED45f7B584cAf96D7792Eff"
    ),
}

# Uniswap V4 StateView used when a testnet swap config omits one
TESTNET_STATE_VIEW_ADDRESS = _validate_address(
    "StateView", "0x9d467fa9062b6e9b1a46e26007ad82db116c67cb"
)

# LI.FI chain ids
LIFI_CHAIN_IDS = {
    "ARBITRUM": 42161,
    "ARBITRUM_SEPOLIA": 421614,
}
LIFI_DEFAULT_CHAIN_ID = 42161
LIFI_QUOTE_URL = "https://li.quest/v1/quote"
LIFI_INTEGRATOR = "flowforge-cre-template"
LIFI_DEFAULT_SLIPPAGE_PERCENT = 0.5

EXPLORER_TX_URLS = {
    "ARBITRUM": "https://arbiscan.io/tx/",
    "ARBITRUM_SEPOLIA": "https://sepolia.arbiscan.io/tx/",
}

OSTIUM_OPEN_POSITION_PATH = "/v1/positions/open"
OSTIUM_SECRET_ID = "OSTIUM_HMAC_SECRET"


def is_testnet(chain: str) -> bool:
    """True for chain names that refer to a test network."""
    lowered = chain.lower()
    return chain == "ARBITRUM_SEPOLIA" or "sepolia" in lowered or "testnet" in lowered
