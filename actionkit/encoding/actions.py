"""Action descriptors: one frozen record per report kind.

Attribute names match the SchemaField names of the kind's schema. Unset
optional attributes stay None and are filled from the schema defaults at
encoding time.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import ClassVar

from actionkit.models.types import hex_to_bytes, normalize_address

from .schema import ActionKind, schema_for


@dataclass(frozen=True)
class ActionDescriptor:
    """Base for report descriptors.

    Normalizes address fields to lowercase and hex blobs to bytes so that
    two descriptors describing the same payload compare equal.
    """

    kind: ClassVar[ActionKind]

    def __post_init__(self) -> None:
        for schema_field in schema_for(self.kind):
            value = getattr(self, schema_field.name)
            if value is None:
                continue
            if schema_field.is_address:
                object.__setattr__(self, schema_field.name, normalize_address(value))
            elif schema_field.is_bytes:
                object.__setattr__(self, schema_field.name, hex_to_bytes(value))

    def values(self) -> dict[str, object]:
        """Field values by attribute name (None for unset fields)."""
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class LendingReport(ActionDescriptor):
    """Aave operation executed by the lending receiver."""

    kind: ClassVar[ActionKind] = ActionKind.LENDING_REPORT

    operation: int | None = None
    pool_address: str | None = None
    asset: str | None = None
    amount: int | None = None
    wallet_address: str | None = None
    on_behalf_of: str | None = None
    interest_rate_mode: int | None = None
    referral_code: int | None = None
    a_token_address: str | None = None


@dataclass(frozen=True)
class SwapReport(ActionDescriptor):
    """Uniswap V4 single-pool swap executed by the swap receiver."""

    kind: ClassVar[ActionKind] = ActionKind.V4_SWAP_REPORT

    currency0: str | None = None
    currency1: str | None = None
    fee: int | None = None
    tick_spacing: int | None = None
    hooks: str | None = None
    zero_for_one: bool | None = None
    amount_in: int | None = None
    amount_out_min: int | None = None
    hook_data: bytes | str | None = None
    recipient: str | None = None
    deadline: int | None = None
    pool_swap_test_address: str | None = None
    pool_manager_address: str | None = None
    sqrt_price_limit_x96: int | None = None


@dataclass(frozen=True)
class GenericCallReport(ActionDescriptor):
    """Arbitrary call (e.g. an aggregator route) forwarded by the receiver."""

    kind: ClassVar[ActionKind] = ActionKind.GENERIC_CALL_REPORT

    target: str | None = None
    call_data: bytes | str | None = None
    value: int | None = None
    token_in: str | None = None
    amount_in: int | None = None
    recipient: str | None = None


DESCRIPTOR_TYPES: dict[ActionKind, type[ActionDescriptor]] = {
    ActionKind.LENDING_REPORT: LendingReport,
    ActionKind.V4_SWAP_REPORT: SwapReport,
    ActionKind.GENERIC_CALL_REPORT: GenericCallReport,
}


__all__ = [
    "ActionDescriptor",
    "LendingReport",
    "SwapReport",
    "GenericCallReport",
    "DESCRIPTOR_TYPES",
]
