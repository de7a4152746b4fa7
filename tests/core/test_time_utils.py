from datetime import datetime, timezone

import pytest

from core.utils.time import days_ago, parse_timestamp, utc_now, utc_now_iso


def test_utc_now_is_aware() -> None:
    assert utc_now().tzinfo is not None


def test_utc_now_iso_has_offset() -> None:
    assert utc_now_iso().endswith("+00:00")


def test_days_ago() -> None:
    now = datetime(2024, 1, 10, tzinfo=timezone.utc)

    assert days_ago(7, now=now) == datetime(2024, 1, 3, tzinfo=timezone.utc)


class TestParseTimestamp:
    def test_zulu(self) -> None:
        assert parse_timestamp("2024-01-15T10:42:31Z") == datetime(
            2024, 1, 15, 10, 42, 31, tzinfo=timezone.utc
        )

    def test_naive_is_utc(self) -> None:
        assert parse_timestamp("2024-01-15T10:42:31").tzinfo == timezone.utc

    @pytest.mark.parametrize("value", [None, "", "yesterday", 12345])
    def test_unparseable(self, value) -> None:
        assert parse_timestamp(value) is None
