"""Report schemas for the receiver contracts.

Each action kind maps to one ordered list of fields. The order and the ABI
width of every field is the wire contract with the receiving contract,
which decodes the payload positionally: changing a schema is a breaking
protocol change.

Defaults are declared per field. A field without a default is required, and
encoding fails with MissingConfiguration instead of silently sending a zero
target, recipient or amount.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from actionkit.constants import INTEREST_RATE_VARIABLE, ZERO_ADDRESS


class ActionKind(str, Enum):
    """Kinds of report payloads accepted by the receiver contracts."""

    LENDING_REPORT = "lending_report"  # AaveReceiver
    V4_SWAP_REPORT = "v4_swap_report"  # SwapReceiver (Uniswap V4)
    GENERIC_CALL_REPORT = "generic_call_report"  # LifiReceiver


class _Required:
    def __repr__(self) -> str:
        return "REQUIRED"


REQUIRED: Any = _Required()


@dataclass(frozen=True)
class SchemaField:
    """One positional field of a report payload.

    Attributes:
        name: Attribute name on the action descriptor
        abi_type: Solidity ABI type (fixes the encoded width)
        wire_name: Parameter name in the receiver contract
        default: Value used when the descriptor leaves the field unset,
            or REQUIRED
    """

    name: str
    abi_type: str
    wire_name: str
    default: Any = REQUIRED

    @property
    def required(self) -> bool:
        return self.default is REQUIRED

    @property
    def is_address(self) -> bool:
        return self.abi_type == "address"

    @property
    def is_bytes(self) -> bool:
        return self.abi_type == "bytes"


LENDING_REPORT_SCHEMA: tuple[SchemaField, ...] = (
    SchemaField("operation", "uint8", "operation"),
    SchemaField("pool_address", "address", "poolAddress"),
    SchemaField("asset", "address", "asset"),
    SchemaField("amount", "uint256", "amount"),
    SchemaField("wallet_address", "address", "walletAddress"),
    SchemaField("on_behalf_of", "address", "onBehalfOf"),
    SchemaField("interest_rate_mode", "uint256", "interestRateMode", INTEREST_RATE_VARIABLE),
    SchemaField("referral_code", "uint16", "referralCode", 0),
    SchemaField("a_token_address", "address", "aTokenAddress", ZERO_ADDRESS),
)

V4_SWAP_REPORT_SCHEMA: tuple[SchemaField, ...] = (
    SchemaField("currency0", "address", "currency0"),
    SchemaField("currency1", "address", "currency1"),
    SchemaField("fee", "uint24", "fee"),
    SchemaField("tick_spacing", "int24", "tickSpacing"),
    SchemaField("hooks", "address", "hooks", ZERO_ADDRESS),
    SchemaField("zero_for_one", "bool", "zeroForOne"),
    SchemaField("amount_in", "uint256", "amountIn"),
    SchemaField("amount_out_min", "uint256", "amountOutMin", 0),
    SchemaField("hook_data", "bytes", "hookData", b""),
    SchemaField("recipient", "address", "recipient"),
    SchemaField("deadline", "uint256", "deadline"),
    SchemaField("pool_swap_test_address", "address", "poolSwapTestAddress"),
    SchemaField("pool_manager_address", "address", "poolManagerAddress"),
    SchemaField("sqrt_price_limit_x96", "uint160", "sqrtPriceLimitX96"),
)

GENERIC_CALL_REPORT_SCHEMA: tuple[SchemaField, ...] = (
    SchemaField("target", "address", "target"),
    SchemaField("call_data", "bytes", "callData"),
    SchemaField("value", "uint256", "value", 0),
    # Zero address marks the native asset
    SchemaField("token_in", "address", "tokenIn", ZERO_ADDRESS),
    SchemaField("amount_in", "uint256", "amountIn"),
    SchemaField("recipient", "address", "recipient"),
)

SCHEMAS: dict[ActionKind, tuple[SchemaField, ...]] = {
    ActionKind.LENDING_REPORT: LENDING_REPORT_SCHEMA,
    ActionKind.V4_SWAP_REPORT: V4_SWAP_REPORT_SCHEMA,
    ActionKind.GENERIC_CALL_REPORT: GENERIC_CALL_REPORT_SCHEMA,
}


def schema_for(kind: ActionKind) -> tuple[SchemaField, ...]:
    """Ordered field list for an action kind."""
    return SCHEMAS[kind]


def abi_types_for(kind: ActionKind) -> list[str]:
    """ABI type list for an action kind, in wire order."""
    return [f.abi_type for f in schema_for(kind)]


def signature_for(kind: ActionKind) -> str:
    """Human-readable parameter list, e.g. 'uint8 operation, address poolAddress, ...'."""
    return ", ".join(f"{f.abi_type} {f.wire_name}" for f in schema_for(kind))


__all__ = [
    "ActionKind",
    "SchemaField",
    "REQUIRED",
    "SCHEMAS",
    "LENDING_REPORT_SCHEMA",
    "V4_SWAP_REPORT_SCHEMA",
    "GENERIC_CALL_REPORT_SCHEMA",
    "schema_for",
    "abi_types_for",
    "signature_for",
]
