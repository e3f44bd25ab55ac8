"""ISO-8601 timestamp helpers for stored records ("2025-01-27T12:00:00.123000Z")."""

from datetime import datetime, timezone


def parse_timestamp(value: str) -> datetime:
    # fromisoformat() only accepts a trailing "Z" from Python 3.11 on
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_timestamp(value: datetime) -> str:
    return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")
