from __future__ import annotations

import re

from .errors import StructuralViolation

YEAR_RE = re.compile(r"\s*(\d+)年")
SINGLE_DAY_RE = re.compile(r"\s*(\d+)月(\d+)日")
TWO_DAY_RE = re.compile(r"\s*(\d+)月(\d+)・(\d+)日")


def format_date(year: int, month: int, day: int) -> str:
    return f"{year}/{month:02d}/{day:02d}"


def parse_year(text: str) -> int:
    """Year from the page heading, e.g. "2018年4月" -> 2018."""
    m = YEAR_RE.match(text)
    if not m:
        raise StructuralViolation(f"year heading not recognised: {text!r}")
    return int(m.group(1))


def parse_date_range(text: str, year: int) -> tuple[str, str]:
    """Parse a date header such as "4月10日" or "4月10・11日" into (begin, end).

    Text after the closing 日 (a weekday, for instance) is ignored. Two-day
    headers never cross a month boundary on the results pages.
    """
    m = SINGLE_DAY_RE.match(text)
    if m:
        month, day = int(m.group(1)), int(m.group(2))
        date = format_date(year, month, day)
        return date, date
    m = TWO_DAY_RE.match(text)
    if m:
        month, begin_day, end_day = int(m.group(1)), int(m.group(2)), int(m.group(3))
        return format_date(year, month, begin_day), format_date(year, month, end_day)
    raise StructuralViolation(f"date header not recognised: {text!r}")
