"""Calldata and return decoding for the read-only contract calls.

Covers the Chainlink aggregator, the Uniswap V4 StateView and the Aave V3
Pool reserve lookup. Decoding failures become InvalidCollaboratorResponse.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from eth_abi import decode, encode  # type: ignore[attr-defined]
from eth_abi.exceptions import DecodingError
from eth_utils import function_signature_to_4byte_selector

from actionkit.errors import InvalidCollaboratorResponse
from actionkit.models.types import address_to_bytes, normalize_address

DECIMALS_SELECTOR = function_signature_to_4byte_selector("decimals()")
DESCRIPTION_SELECTOR = function_signature_to_4byte_selector("description()")
LATEST_ROUND_DATA_SELECTOR = function_signature_to_4byte_selector("latestRoundData()")
GET_SLOT0_SELECTOR = function_signature_to_4byte_selector("getSlot0(bytes32)")
GET_RESERVE_DATA_SELECTOR = function_signature_to_4byte_selector("getReserveData(address)")

LATEST_ROUND_DATA_TYPES = ["uint80", "int256", "uint256", "uint256", "uint80"]
SLOT0_TYPES = ["uint160", "int24", "uint24", "uint24"]

# DataTypes.ReserveData; aTokenAddress is at index 8
RESERVE_DATA_TYPE = (
    "(uint256,uint128,uint128,uint128,uint128,uint128,uint40,uint16,"
    "address,address,address,address,uint128,uint128,uint128)"
)
RESERVE_DATA_A_TOKEN_INDEX = 8


@dataclass(frozen=True)
class PriceReading:
    """One latestRoundData() answer from an aggregator."""

    round_id: int
    answer: int  # signed
    started_at: int
    updated_at: int
    answered_in_round: int
    decimals: int


@dataclass(frozen=True)
class Slot0:
    """Pool price state returned by StateView.getSlot0."""

    sqrt_price_x96: int
    tick: int
    protocol_fee: int
    lp_fee: int


def _decode(types: list[str], data: bytes, what: str) -> tuple[Any, ...]:
    try:
        return decode(types, data)
    except (DecodingError, OverflowError, ValueError) as e:
        raise InvalidCollaboratorResponse(f"Cannot decode {what} response: {e}") from e


def encode_decimals_call() -> bytes:
    return DECIMALS_SELECTOR


def encode_description_call() -> bytes:
    return DESCRIPTION_SELECTOR


def encode_latest_round_data_call() -> bytes:
    return LATEST_ROUND_DATA_SELECTOR


def encode_get_slot0_call(pool_id: bytes) -> bytes:
    if len(pool_id) != 32:
        raise ValueError(f"Pool id must be 32 bytes, got {len(pool_id)}")
    return GET_SLOT0_SELECTOR + encode(["bytes32"], [pool_id])


def encode_get_reserve_data_call(asset: str) -> bytes:
    return GET_RESERVE_DATA_SELECTOR + encode(["address"], [address_to_bytes(asset)])


def decode_decimals(data: bytes) -> int:
    (decimals,) = _decode(["uint8"], data, "decimals()")
    return int(decimals)


def decode_description(data: bytes) -> str:
    (description,) = _decode(["string"], data, "description()")
    return str(description)


def decode_latest_round_data(data: bytes, decimals: int) -> PriceReading:
    round_id, answer, started_at, updated_at, answered_in_round = _decode(
        LATEST_ROUND_DATA_TYPES, data, "latestRoundData()"
    )
    return PriceReading(
        round_id=round_id,
        answer=answer,
        started_at=started_at,
        updated_at=updated_at,
        answered_in_round=answered_in_round,
        decimals=decimals,
    )


def decode_slot0(data: bytes) -> Slot0:
    sqrt_price_x96, tick, protocol_fee, lp_fee = _decode(SLOT0_TYPES, data, "getSlot0()")
    return Slot0(sqrt_price_x96, tick, protocol_fee, lp_fee)


def decode_reserve_a_token(data: bytes) -> str:
    (reserve,) = _decode([RESERVE_DATA_TYPE], data, "getReserveData()")
    return normalize_address(reserve[RESERVE_DATA_A_TOKEN_INDEX])


__all__ = [
    "PriceReading",
    "Slot0",
    "encode_decimals_call",
    "encode_description_call",
    "encode_latest_round_data_call",
    "encode_get_slot0_call",
    "encode_get_reserve_data_call",
    "decode_decimals",
    "decode_description",
    "decode_latest_round_data",
    "decode_slot0",
    "decode_reserve_a_token",
    "LATEST_ROUND_DATA_TYPES",
    "SLOT0_TYPES",
    "RESERVE_DATA_TYPE",
]
