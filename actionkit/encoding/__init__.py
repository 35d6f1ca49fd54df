"""Report payload encoding for receiver contracts.

This package provides:
- Schema registry (ActionKind -> ordered fields with ABI widths)
- Action descriptors (LendingReport, SwapReport, GenericCallReport)
- A single schema-driven encoder and its reference decoder
- Calldata helpers for the read-only calls workflows make
- PositionManager unlock data for liquidity provisioning
"""

from .actions import (
    DESCRIPTOR_TYPES,
    ActionDescriptor,
    GenericCallReport,
    LendingReport,
    SwapReport,
)
from .encoder import decode_action, encode_action, encode_action_hex
from .positions import encode_mint_position
from .schema import SCHEMAS, ActionKind, SchemaField, abi_types_for, schema_for, signature_for

__all__ = [
    # Schemas
    "ActionKind",
    "SchemaField",
    "SCHEMAS",
    "schema_for",
    "abi_types_for",
    "signature_for",
    # Descriptors
    "ActionDescriptor",
    "LendingReport",
    "SwapReport",
    "GenericCallReport",
    "DESCRIPTOR_TYPES",
    # Encoding
    "encode_action",
    "encode_action_hex",
    "decode_action",
    "encode_mint_position",
]
