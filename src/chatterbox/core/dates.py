# src/chatterbox/core/dates.py

"""
Date parsing for interactive input.

Candidates are tried in order; the first that matches wins. A date-only
match means midnight of that day. Input must be zero-padded exactly like the
pattern: strptime alone would take "2019-12-2" or "800".
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Final, NamedTuple

from .errors import DateParseError


class DateFormat(NamedTuple):
    strptime_pattern: str
    shape: re.Pattern[str]
    human: str
    example: str


DATETIME_FORMAT: Final = DateFormat(
    "%Y-%m-%d %H%M", re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2} [0-9]{4}"),
    "yyyy-MM-dd HHmm", "2019-12-02 1800",
)
DATE_ONLY_FORMAT: Final = DateFormat(
    "%Y-%m-%d", re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}"),
    "yyyy-MM-dd", "2019-12-02",
)

FLEXIBLE_FORMATS: Final = (DATETIME_FORMAT, DATE_ONLY_FORMAT)


def _describe(formats: tuple[DateFormat, ...]) -> str:
    return " or ".join(f"{f.human} (e.g., {f.example})" for f in formats)


def _parse_first(raw: str, formats: tuple[DateFormat, ...]) -> datetime:
    text = raw.strip()
    for fmt in formats:
        if not fmt.shape.fullmatch(text):
            continue
        try:
            return datetime.strptime(text, fmt.strptime_pattern)
        except ValueError:
            # right shape, impossible value (month 13, hour 25)
            continue
    raise DateParseError(
        f"Invalid date format. Please use {_describe(formats)}",
        accepted_formats=tuple(f.human for f in formats),
    )


def parse_flexible_datetime(raw: str) -> datetime:
    """Accept 'yyyy-MM-dd HHmm' or 'yyyy-MM-dd' (midnight)."""
    return _parse_first(raw, FLEXIBLE_FORMATS)


def parse_date_only(raw: str) -> datetime:
    """Accept only 'yyyy-MM-dd'; returns midnight of that day."""
    return _parse_first(raw, (DATE_ONLY_FORMAT,))
