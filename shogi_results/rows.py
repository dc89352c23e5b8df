from __future__ import annotations

from dataclasses import dataclass
from typing import List, Union

from selectolax.parser import Node

# A row whose only cell is the date header, e.g. "4月10日(火)".
DATE_ROW_CELLS = 1
# A row that opens a new competition block; its first cell is the match name.
MATCH_NAME_ROW_CELLS = 6


def element_children(node: Node) -> List[Node]:
    # Text and comment nodes are tagged "-text" / "_comment" by the parser.
    return [child for child in node.iter(include_text=False) if not child.tag.startswith(("-", "_"))]


@dataclass(frozen=True)
class DateRow:
    node: Node

    def text(self) -> str:
        return self.node.text()


@dataclass(frozen=True)
class MatchNameRow:
    node: Node

    def match_name(self) -> str:
        return element_children(self.node)[0].text().strip()


@dataclass(frozen=True)
class ContinuationRow:
    node: Node


Row = Union[DateRow, MatchNameRow, ContinuationRow]


def classify_row(node: Node) -> Row:
    """Tell the three row shapes of the results table apart by their direct cell count."""
    count = len(element_children(node))
    if count == DATE_ROW_CELLS:
        return DateRow(node)
    if count == MATCH_NAME_ROW_CELLS:
        return MatchNameRow(node)
    return ContinuationRow(node)
