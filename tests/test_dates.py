# tests/test_dates.py

from __future__ import annotations

from datetime import datetime

import pytest

from chatterbox.core.dates import parse_date_only, parse_flexible_datetime
from chatterbox.core.errors import CommandError, DateParseError


def test_flexible_accepts_date_and_time() -> None:
    assert parse_flexible_datetime("2019-12-02 1800") == datetime(2019, 12, 2, 18, 0)


def test_flexible_date_only_means_midnight() -> None:
    assert parse_flexible_datetime(" 2019-12-02 ") == datetime(2019, 12, 2, 0, 0)


@pytest.mark.parametrize("raw", ["02/12/2019", "2019-12-02 18:00", "2019-13-01", "tomorrow"])
def test_flexible_error_names_both_formats(raw: str) -> None:
    with pytest.raises(DateParseError) as exc:
        parse_flexible_datetime(raw)

    err = exc.value
    assert isinstance(err, CommandError)
    assert err.accepted_formats == ("yyyy-MM-dd HHmm", "yyyy-MM-dd")
    assert str(err) == (
        "Invalid date format. Please use yyyy-MM-dd HHmm (e.g., 2019-12-02 1800) "
        "or yyyy-MM-dd (e.g., 2019-12-02)"
    )


def test_date_only_rejects_time() -> None:
    assert parse_date_only("2024-01-27") == datetime(2024, 1, 27)
    with pytest.raises(DateParseError) as exc:
        parse_date_only("2024-01-27 1200")
    assert str(exc.value) == "Invalid date format. Please use yyyy-MM-dd (e.g., 2019-12-02)"


@pytest.mark.parametrize(
    "raw",
    [
        "2019-12-2 1800",  # unpadded day
        "2019-1-02",  # unpadded month
        "2019-12-02 800",  # three-digit time
        "2019-12-02 123",  # would otherwise read as 12:03
        "2019-12-02 18000",
        "19-12-02",
    ],
)
def test_flexible_requires_zero_padded_fields(raw: str) -> None:
    with pytest.raises(DateParseError):
        parse_flexible_datetime(raw)


def test_date_only_requires_zero_padded_fields() -> None:
    with pytest.raises(DateParseError):
        parse_date_only("2024-1-27")
