from __future__ import annotations

import logging
import pathlib
from typing import List

import httpx
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from ..models import Match
from ..scanner import scan
from ..utils import ensure_dir, month_key

logger = logging.getLogger(__name__)


def result_url(config: dict, year: int, month: int) -> str:
    base = config.get("base_url", "https://www.shogi.or.jp").rstrip("/")
    path = config.get("result_path", "/game/result/{key}.html")
    return base + path.format(key=month_key(year, month))


# Only transport failures are retried; bad status codes and unparseable pages are not.
@retry(
    wait=wait_exponential(multiplier=0.5, min=0.5, max=4),
    stop=stop_after_attempt(3),
    retry=retry_if_exception_type(httpx.TransportError),
    reraise=True,
)
def fetch_html(client: httpx.Client, url: str) -> str:
    r = client.get(url)
    r.raise_for_status()
    return r.text


def _client(config: dict) -> httpx.Client:
    headers = {"User-Agent": config.get("user_agent", "shogi-results/0.1")}
    return httpx.Client(headers=headers, timeout=float(config.get("timeout", 20)))


def fetch_month(config: dict, year: int, month: int, client: httpx.Client | None = None) -> List[Match]:
    url = result_url(config, year, month)
    if client is None:
        with _client(config) as own:
            html = fetch_html(own, url)
    else:
        html = fetch_html(client, url)

    if config.get("save_snapshots", False):
        cache = pathlib.Path(config.get("cache_dir", ".cache"))
        ensure_dir(cache)
        (cache / f"snapshot_{month_key(year, month)}.html").write_text(html, encoding="utf-8")

    matches = scan(html)
    logger.info("%s: %d matches", url, len(matches))
    return matches
