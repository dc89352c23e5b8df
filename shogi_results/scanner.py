from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Union

from selectolax.parser import HTMLParser, Node

from .dates import parse_date_range, parse_year
from .errors import StructuralViolation
from .extract import parse_match
from .models import Match
from .rows import DateRow, MatchNameRow, classify_row, element_children

logger = logging.getLogger(__name__)

YEAR_HEADING_SELECTOR = ".headingElementsA01"
RESULTS_TABLE_SELECTOR = ".tableElements01 tbody"


@dataclass
class ScanContext:
    """State carried from row to row while walking one results table."""

    year: int
    match_name: str = ""
    begin_date: str = ""
    end_date: str = ""

    def step(self, node: Node) -> Optional[Match]:
        row = classify_row(node)
        if isinstance(row, DateRow):
            self.begin_date, self.end_date = parse_date_range(row.text(), self.year)
            return None
        if isinstance(row, MatchNameRow):
            self.match_name = row.match_name()
        return parse_match(row.node, self.match_name, self.begin_date, self.end_date)


def read_year(doc: HTMLParser) -> int:
    headings = doc.css(YEAR_HEADING_SELECTOR)
    if not headings:
        raise StructuralViolation(f"no {YEAR_HEADING_SELECTOR} heading on the page")
    return parse_year("".join(h.text() for h in headings))


def result_rows(doc: HTMLParser) -> List[Node]:
    table = doc.css_first(RESULTS_TABLE_SELECTOR)
    if table is None:
        raise StructuralViolation(f"no {RESULTS_TABLE_SELECTOR} table on the page")
    return element_children(table)


def scan(html: Union[str, bytes, HTMLParser]) -> List[Match]:
    """Turn one monthly results page into matches, in table order."""
    if isinstance(html, bytes):
        html = html.decode("utf-8", errors="replace")
    doc = html if isinstance(html, HTMLParser) else HTMLParser(html)
    ctx = ScanContext(year=read_year(doc))
    matches: List[Match] = []
    for node in result_rows(doc):
        match = ctx.step(node)
        if match is not None:
            matches.append(match)
    logger.debug("scanned %d matches for %d", len(matches), ctx.year)
    return matches
