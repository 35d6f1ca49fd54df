"""Chainlink price feed reads."""

from __future__ import annotations

import structlog

from actionkit.capabilities import Capabilities, ContractReader
from actionkit.encoding.calls import (
    decode_decimals,
    decode_description,
    decode_latest_round_data,
    encode_decimals_call,
    encode_description_call,
    encode_latest_round_data_call,
)
from actionkit.errors import ActionError, InvalidCollaboratorResponse, MissingConfiguration
from actionkit.math.amounts import format_signed_amount
from actionkit.models.config import FeedConfig, ReadFeedsConfig
from actionkit.models.results import FeedFailure, OracleReading, ReadFeedsResult

from .staleness import check_staleness

logger = structlog.get_logger()


def _read_description(reader: ContractReader, address: str) -> str | None:
    # description() is optional; some aggregators do not implement it
    try:
        return decode_description(reader.call(address, encode_description_call()))
    except Exception as e:
        logger.debug("feed_description_unavailable", address=address, error=str(e))
        return None


def read_feed(
    reader: ContractReader,
    chain: str,
    feed: FeedConfig,
    now: int,
    stale_after_seconds: int | None = None,
) -> OracleReading:
    """Read one aggregator and return its latest answer, raw and scaled.

    Raises:
        StaleReading: If a staleness window is set and the answer is too old
        InvalidCollaboratorResponse: If a call returns undecodable data
    """
    decimals = decode_decimals(reader.call(feed.address, encode_decimals_call()))
    description = _read_description(reader, feed.address)
    reading = decode_latest_round_data(
        reader.call(feed.address, encode_latest_round_data_call()), decimals
    )

    check_staleness(
        reading.updated_at,
        now,
        stale_after_seconds,
        feed=feed.name,
        address=feed.address,
    )

    formatted = format_signed_amount(reading.answer, decimals)
    logger.info(
        "price_feed_read",
        chain=chain,
        feed=feed.name,
        address=feed.address,
        decimals=decimals,
        answer_raw=str(reading.answer),
        answer_scaled=formatted,
    )

    return OracleReading(
        chain=chain,
        aggregator_address=feed.address,
        description=description,
        decimals=decimals,
        round_id=str(reading.round_id),
        answered_in_round=str(reading.answered_in_round),
        started_at=reading.started_at,
        updated_at=reading.updated_at,
        answer=str(reading.answer),
        formatted_answer=formatted,
    )


def read_feeds(config: ReadFeedsConfig, capabilities: Capabilities) -> ReadFeedsResult:
    """Read every configured feed, isolating failures per feed.

    A stale or unreadable feed is reported in ``failures`` and does not
    prevent the remaining feeds from being read. Never raises.
    """
    if capabilities.reader is None:
        error = MissingConfiguration("reader", "a contract reader is needed to read feeds")
        return ReadFeedsResult(
            failures=[
                FeedFailure(name=f.name, address=f.address, error=str(error), error_kind=error.kind)
                for f in config.feeds
            ]
        )

    now = capabilities.clock()
    result = ReadFeedsResult()
    for feed in config.feeds:
        try:
            result.readings.append(
                read_feed(
                    capabilities.reader,
                    config.chain_name,
                    feed,
                    now,
                    config.stale_after_seconds,
                )
            )
        except ActionError as e:
            logger.warning("price_feed_rejected", feed=feed.name, address=feed.address, error=str(e))
            result.failures.append(
                FeedFailure(name=feed.name, address=feed.address, error=str(e), error_kind=e.kind)
            )
        except Exception as e:
            logger.exception("price_feed_read_failed", feed=feed.name, address=feed.address)
            failure = InvalidCollaboratorResponse(f"Failed to read feed: {e}")
            result.failures.append(
                FeedFailure(
                    name=feed.name,
                    address=feed.address,
                    error=str(failure),
                    error_kind=failure.kind,
                )
            )
    return result


__all__ = ["read_feed", "read_feeds"]
