from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

import pytest

from newsq.timeutil import format_rfc3339, parse_duration, parse_rfc3339, rfc3339_ago


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("30s", timedelta(seconds=30)),
        ("15m", timedelta(minutes=15)),
        ("24h", timedelta(hours=24)),
        ("7d", timedelta(days=7)),
        ("2w", timedelta(days=14)),
        ("  5D  ", timedelta(days=5)),
    ],
)
def test_parse_duration(value: str, expected: timedelta) -> None:
    assert parse_duration(value) == expected


def test_parse_duration_rejects_invalid() -> None:
    with pytest.raises(ValueError):
        parse_duration("bogus")


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("2024-01-02T00:00:00Z", datetime(2024, 1, 2, tzinfo=UTC)),
        (
            "2024-01-02T03:04:05+02:00",
            datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone(timedelta(hours=2))),
        ),
        ("2024-01-02T00:00:00.123456789Z", datetime(2024, 1, 2, 0, 0, 0, 123456, tzinfo=UTC)),
    ],
)
def test_parse_rfc3339(value: str, expected: datetime) -> None:
    assert parse_rfc3339(value) == expected


@pytest.mark.parametrize(
    "value",
    [
        "2024-01-05",
        "2024-01-05T15:04:05",
        "2024-01-05 15:04:05Z",
        "2024-13-05T15:04:05Z",
        "2024-01-05T15:04:05Z\n",
        " 2024-01-05T15:04:05Z",
        "",
    ],
)
def test_parse_rfc3339_rejects_invalid(value: str) -> None:
    with pytest.raises(ValueError):
        parse_rfc3339(value)


def test_rfc3339_ago() -> None:
    now = datetime(2024, 1, 8, 12, 30, 15, 999, tzinfo=UTC)
    assert rfc3339_ago(timedelta(days=7), now=now) == "2024-01-01T12:30:15Z"
    assert format_rfc3339(now) == "2024-01-08T12:30:15Z"
