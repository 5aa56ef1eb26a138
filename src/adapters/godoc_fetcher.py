"""Plain-text documentation lookup adapter."""

from __future__ import annotations

import logging
from typing import List

import requests

from core.errors import TransportError

LOGGER = logging.getLogger(__name__)

# The synopsis block starts after the page's header lines.
SYNOPSIS_FIRST_LINE = 5


def extract_synopsis(text: str) -> str:
    """Return the indented synopsis block of a plain-text doc page.

    Lines are taken from index 5 on until the first non-empty line that does
    not start with a space.
    """

    kept: List[str] = []
    for line in text.split("\n")[SYNOPSIS_FIRST_LINE:]:
        if line and not line.startswith(" "):
            break
        kept.append(line.strip())
    return "\n".join(kept).strip()


class GoDocFetcher:
    """DocFetcherPort that asks the doc site for its plain-text rendering."""

    def __init__(self, session: requests.Session, user_agent: str, timeout: float) -> None:
        self._session = session
        self._headers = {"User-Agent": user_agent, "Accept": "text/plain"}
        self._timeout = timeout

    def fetch_summary(self, url: str) -> str:
        try:
            response = self._session.get(url, headers=self._headers, timeout=self._timeout)
        except requests.RequestException as exc:
            raise TransportError(f"GET {url} failed: {exc}") from exc

        if response.status_code != 200:
            LOGGER.info("Doc lookup %s returned %s", url, response.status_code)
            return ""
        return extract_synopsis(response.text)
