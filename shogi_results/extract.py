from __future__ import annotations

import logging
import re
from typing import Optional
from urllib.parse import quote, urlsplit, urlunsplit

from selectolax.parser import Node

from .errors import StructuralViolation
from .models import NO_PLAYER_ID, Match, Player, Result
from .rows import element_children

logger = logging.getLogger(__name__)

JSA_HOST = "www.shogi.or.jp"
PLAYER_HREF_PREFIX = "/player/"
PLAYER_HREF_SUFFIX = ".html"

# Result glyphs as printed in the results table.
RESULT_GLYPHS: dict[str, Result] = {
    "○": "win",
    "●": "lose",
    "□": "win without playing",
    "■": "lose without playing",
}

MATCH_CELL_SELECTOR = "td.tac"
MATCH_CELL_COUNT = 4

# Control characters, or a "%" that does not start a two-digit hex escape.
BAD_URL_RE = re.compile(r"[\x00-\x1f\x7f]|%(?![0-9A-Fa-f]{2})")
URL_SAFE_CHARS = "/%:@!$&'()*+,;=~"


def _href(node: Node) -> Optional[str]:
    anchor = node.css_first("a")
    if anchor is None or "href" not in anchor.attributes:
        return None
    return anchor.attributes["href"] or ""


def parse_result(glyph: str) -> Result:
    result = RESULT_GLYPHS.get(glyph)
    if result is None:
        logger.debug("unknown result glyph %r", glyph)
        return "unknown"
    return result


def parse_player(cell: Node, result: Result) -> Player:
    href = _href(cell)
    if href is None:
        player_id = NO_PLAYER_ID
    else:
        player_id = href.removeprefix(PLAYER_HREF_PREFIX).removesuffix(PLAYER_HREF_SUFFIX)
    return Player(id=player_id, name=cell.text(), result=result)


def sanitize_url(href: str, host: str = JSA_HOST) -> str:
    """Make a note link absolute; site-relative links point at the JSA host over https."""
    if BAD_URL_RE.search(href):
        raise StructuralViolation(f"invalid note link {href!r}")
    try:
        parts = urlsplit(href)
    except ValueError as e:
        raise StructuralViolation(f"invalid note link {href!r}: {e}") from e
    if parts.scheme:
        return href
    path = quote(parts.path, safe=URL_SAFE_CHARS)
    fragment = quote(parts.fragment, safe=URL_SAFE_CHARS + "?")
    return urlunsplit(("https", host, path, parts.query, fragment))


def parse_note(row: Node) -> str:
    cell = element_children(row)[-1]
    note = cell.text()
    href = _href(cell)
    if href is not None:
        note = f"{note} {sanitize_url(href)}"
    return note


def parse_match(row: Node, match_name: str, begin_date: str, end_date: str) -> Match:
    cells = row.css(MATCH_CELL_SELECTOR)
    if len(cells) != MATCH_CELL_COUNT:
        raise StructuralViolation(
            f"expected {MATCH_CELL_COUNT} result cells in a match row, got {len(cells)}"
        )

    # Left glyph, left player, right player, right glyph.
    first_player = parse_player(cells[1], parse_result(cells[0].text()))
    second_player = parse_player(cells[2], parse_result(cells[3].text()))

    return Match(
        match_name=match_name,
        begin_date=begin_date,
        end_date=end_date,
        first_player=first_player,
        second_player=second_player,
        note=parse_note(row),
    )
