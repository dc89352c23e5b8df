from __future__ import annotations

import os
import pathlib
import re
from datetime import date
from typing import Iterator

import orjson

MONTH_RE = re.compile(r"^(\d{4})(\d{2})$")


def ensure_dir(p: str | pathlib.Path) -> None:
    pathlib.Path(p).mkdir(parents=True, exist_ok=True)


def write_json(path: str | pathlib.Path, data) -> None:
    ensure_dir(pathlib.Path(path).parent)
    with open(path, "wb") as f:
        f.write(orjson.dumps(data, option=orjson.OPT_INDENT_2))


def read_env(name: str, default: str | None = None) -> str | None:
    return os.environ.get(name, default)


def parse_month(value: str) -> tuple[int, int]:
    """Split "201804" into (2018, 4)."""
    m = MONTH_RE.match(value.strip())
    if not m or not 1 <= int(m.group(2)) <= 12:
        raise ValueError(f"expected a month like 201804, got {value!r}")
    return int(m.group(1)), int(m.group(2))


def months_between(start_year: int, start_month: int, until: date) -> Iterator[tuple[int, int]]:
    # Inclusive of the month containing `until`.
    year, month = start_year, start_month
    while (year, month) <= (until.year, until.month):
        yield year, month
        year, month = (year + 1, 1) if month == 12 else (year, month + 1)


def month_key(year: int, month: int) -> str:
    return f"{year}{month:02d}"
