"""UTC clock for the business layer.

Timestamps set by services (updated_at on every write) are timezone-aware UTC.
"""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """Return the current UTC datetime with timezone info."""
    return datetime.now(UTC)
