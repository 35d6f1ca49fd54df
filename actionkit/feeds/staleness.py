"""Recency check for oracle readings."""

from __future__ import annotations

from actionkit.errors import StaleReading


def check_staleness(
    updated_at: int,
    now: int,
    max_age_seconds: int | None = None,
    *,
    feed: str = "",
    address: str = "",
) -> None:
    """Reject readings older than max_age_seconds.

    With no window configured every reading passes. With a window, a
    reading fails when it was never updated (updated_at == 0) or when
    now - updated_at exceeds the window; a reading exactly at the window
    edge passes.

    Raises:
        StaleReading: If the reading is too old
    """
    if max_age_seconds is None:
        return
    if updated_at == 0 or now - updated_at > max_age_seconds:
        raise StaleReading(
            feed=feed,
            address=address,
            updated_at=updated_at,
            now=now,
            max_age_seconds=max_age_seconds,
        )


__all__ = ["check_staleness"]
