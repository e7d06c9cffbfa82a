"""Wiz Research IOC feed ingestion helpers."""

from __future__ import annotations

import csv
import io
from collections.abc import Iterable

import requests
import structlog
from requests import Response
from tenacity import retry, stop_after_attempt, wait_fixed

from ..errors import FeedError

WIZ_FEED_URL = (
    "https://raw.githubusercontent.com/wiz-sec-public/"
    "wiz-research-iocs/main/reports/shai-hulud-2-packages.csv"
)

USER_AGENT = "npm-checker (+https://github.com/wiz-sec-public/wiz-research-iocs)"

DEFAULT_TIMEOUT = 30.0

log = structlog.get_logger("npm_checker.ingestion")


@retry(reraise=True, stop=stop_after_attempt(3), wait=wait_fixed(2))
def _http_get(url: str, timeout: float) -> Response:
    return requests.get(url, headers={"User-Agent": USER_AGENT}, timeout=timeout)


def fetch_wiz_feed(url: str = WIZ_FEED_URL, timeout: float = DEFAULT_TIMEOUT) -> bytes:
    """Return the raw Wiz IOC CSV payload."""
    log.info("ingestion.fetching", url=url)
    try:
        response = _http_get(url, timeout)
    except requests.RequestException as exc:
        raise FeedError(f"Failed to fetch packages: {exc}") from exc

    if response.status_code != 200:
        raise FeedError(f"Unexpected status code {response.status_code} fetching {url}")

    return response.content


def _iter_rows(payload: bytes) -> Iterable[list[str]]:
    text = payload.decode("utf-8", errors="replace")
    reader = csv.reader(io.StringIO(text))
    next(reader, None)  # header
    yield from reader


def parse_package_names(payload: bytes) -> list[str]:
    """Return package names from the first CSV column, in first-seen order.

    Blank rows are skipped and repeated names are kept once, so the same
    package is never searched for twice.
    """
    names: dict[str, None] = {}
    for row in _iter_rows(payload):
        if not row:
            continue
        name = row[0].strip()
        if name:
            names.setdefault(name, None)

    if not names:
        raise FeedError("Feed returned no package names")

    log.info("ingestion.loaded", packages=len(names))
    return list(names)
