"""Schema-driven ABI encoding of action descriptors."""

from __future__ import annotations

from typing import Any

from eth_abi import decode, encode  # type: ignore[attr-defined]

from actionkit.errors import MissingConfiguration
from actionkit.models.types import address_to_bytes, normalize_address

from .actions import DESCRIPTOR_TYPES, ActionDescriptor
from .schema import ActionKind, SchemaField, abi_types_for, schema_for


def _wire_value(schema_field: SchemaField, value: Any) -> Any:
    if schema_field.is_address:
        return address_to_bytes(value)
    return value


def resolve_fields(descriptor: ActionDescriptor) -> list[Any]:
    """Field values in schema order with defaults applied.

    Raises:
        MissingConfiguration: If a field without a default is unset
    """
    resolved: list[Any] = []
    for schema_field in schema_for(descriptor.kind):
        value = getattr(descriptor, schema_field.name)
        if value is None:
            if schema_field.required:
                raise MissingConfiguration(
                    schema_field.wire_name,
                    f"no default for {descriptor.kind.value} field",
                )
            value = schema_field.default
        resolved.append(_wire_value(schema_field, value))
    return resolved


def encode_action(descriptor: ActionDescriptor) -> bytes:
    """ABI-encode a descriptor as the flat parameter list of its schema.

    Args:
        descriptor: Lending, swap or generic call report

    Returns:
        Encoded payload (abi.encode of the schema's parameters)

    Raises:
        MissingConfiguration: If a required field is unset
        ValueError: If an address is malformed
    """
    return encode(abi_types_for(descriptor.kind), resolve_fields(descriptor))


def encode_action_hex(descriptor: ActionDescriptor) -> str:
    """encode_action() as a 0x-prefixed hex string."""
    return "0x" + encode_action(descriptor).hex()


def decode_action(kind: ActionKind, data: bytes) -> ActionDescriptor:
    """Decode a payload back into the descriptor of the given kind.

    Mirrors what the receiver contract does; every field comes back set.
    """
    schema = schema_for(kind)
    decoded = decode(abi_types_for(kind), data)
    values: dict[str, Any] = {}
    for schema_field, value in zip(schema, decoded, strict=True):
        if schema_field.is_address:
            value = normalize_address(value)
        values[schema_field.name] = value
    return DESCRIPTOR_TYPES[kind](**values)


__all__ = ["encode_action", "encode_action_hex", "decode_action", "resolve_fields"]
