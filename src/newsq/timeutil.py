from __future__ import annotations

import re
from datetime import UTC, datetime, timedelta

_DURATION_RE = re.compile(r"^\s*(\d+)\s*([smhdw])\s*$", re.IGNORECASE)

# Full date-time with seconds and an explicit zone; a bare date is not RFC 3339.
_RFC3339_RE = re.compile(
    r"(\d{4}-\d{2}-\d{2})T(\d{2}:\d{2}:\d{2})(?:\.(\d+))?(Z|[+-]\d{2}:\d{2})"
)


def parse_duration(value: str) -> timedelta:
    """Parse a short duration like '30s', '15m', '24h', '7d', '2w'."""
    match = _DURATION_RE.match(value)
    if not match:
        raise ValueError(f"invalid duration: {value!r} (expected e.g. 30s, 15m, 24h, 7d)")

    amount = int(match.group(1))
    unit = match.group(2).lower()
    if unit == "s":
        return timedelta(seconds=amount)
    if unit == "m":
        return timedelta(minutes=amount)
    if unit == "h":
        return timedelta(hours=amount)
    if unit == "d":
        return timedelta(days=amount)
    if unit == "w":
        return timedelta(days=amount * 7)

    raise ValueError(f"invalid duration unit: {unit!r}")


def parse_rfc3339(value: str) -> datetime:
    """Parse an RFC 3339 timestamp such as '2024-01-02T15:04:05Z' into an aware datetime."""
    match = _RFC3339_RE.fullmatch(value)
    if not match:
        raise ValueError(f"invalid RFC 3339 timestamp: {value!r}")

    date_part, time_part, fraction, zone = match.groups()
    if zone == "Z":
        zone = "+00:00"
    text = f"{date_part}T{time_part}"
    if fraction:
        # datetime keeps microseconds only
        text = f"{text}.{fraction[:6].ljust(6, '0')}"
    try:
        return datetime.fromisoformat(f"{text}{zone}")
    except ValueError as e:
        raise ValueError(f"invalid RFC 3339 timestamp: {value!r}") from e


def format_rfc3339(moment: datetime) -> str:
    return moment.astimezone(UTC).replace(microsecond=0).isoformat().replace("+00:00", "Z")


def rfc3339_ago(duration: timedelta, *, now: datetime | None = None) -> str:
    current = now or datetime.now(tz=UTC)
    return format_rfc3339(current - duration)
