"""
Shared fixtures: small results pages in the layout of the JSA monthly tables.
"""
import pytest
from selectolax.parser import HTMLParser


def page(*rows, heading="2010年4月"):
    return (
        "<html><body>"
        f'<h2 class="headingElementsA01">{heading}</h2>'
        f'<table class="tableElements01"><tbody>{"".join(rows)}</tbody></table>'
        "</body></html>"
    )


def date_row(text):
    return f'<tr><th colspan="6">{text}</th></tr>'


def player_cell(name, player_id=None):
    if player_id is None:
        return f'<td class="tac">{name}</td>'
    return f'<td class="tac"><a href="/player/{player_id}.html">{name}</a></td>'


def match_cells(left, right, first=("Taro Yamada", "abc123"), second=("Jiro Sato", "def456")):
    return (
        f'<td class="tac">{left}</td>'
        + player_cell(*first)
        + player_cell(*second)
        + f'<td class="tac">{right}</td>'
    )


def name_row(name, left="○", right="●", note="", **kw):
    return f'<tr><td rowspan="2">{name}</td>{match_cells(left, right, **kw)}<td>{note}</td></tr>'


def continuation_row(left="○", right="●", note="", **kw):
    return f"<tr>{match_cells(left, right, **kw)}<td>{note}</td></tr>"


def row_node(tr):
    return HTMLParser(f"<table><tbody>{tr}</tbody></table>").css_first("tr")


def cell_node(td):
    return row_node(f"<tr>{td}</tr>").css_first("td")


@pytest.fixture
def april_2010():
    """Date row, one name row with ○/●, one continuation row with □/■."""
    return page(
        date_row("4月10日"),
        name_row("A League", "○", "●"),
        continuation_row("□", "■", first=("Hanako Suzuki", "ghi789"), second=("Ichiro Tanaka", None)),
    )
