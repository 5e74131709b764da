"""UTC datetime utilities. Every timestamp in the domain is timezone-aware UTC."""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Return timezone-aware UTC now."""
    return datetime.now(timezone.utc)
