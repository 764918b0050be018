"""Time helpers."""

from datetime import UTC, datetime


def utcnow() -> datetime:
    return datetime.now(UTC)


def utcnow_iso() -> str:
    """Current UTC time as ISO-8601 with millisecond precision and a Z suffix."""
    return utcnow().isoformat(timespec="milliseconds").replace("+00:00", "Z")
