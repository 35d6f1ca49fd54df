"""Oracle price feed reads and staleness checks."""

from actionkit.feeds.reader import read_feed, read_feeds
from actionkit.feeds.staleness import check_staleness

__all__ = ["check_staleness", "read_feed", "read_feeds"]
