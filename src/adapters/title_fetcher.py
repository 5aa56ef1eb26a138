"""HTML title lookup adapter.

Fetches a page with ``requests`` and extracts its ``<title>`` with
BeautifulSoup. A first latin-1 pass only looks for the charset the page
declares; the document is then parsed again in that charset.
"""

from __future__ import annotations

import codecs
import logging
from typing import Optional

import requests
from bs4 import BeautifulSoup, Tag

from core.errors import TransportError

LOGGER = logging.getLogger(__name__)

HTML_CONTENT_TYPES = ("text/html", "application/xhtml+xml")
DEFAULT_CHARSET = "utf-8"
# Decodes any byte sequence; attribute values of interest are ASCII.
_SNIFF_ENCODING = "latin-1"


def charset_from_meta(tag: Tag) -> Optional[str]:
    """Return the charset a ``<meta>`` element declares, if any.

    Handles both ``http-equiv="content-type" content="...; charset=X"`` and
    ``charset="X"``; a direct ``charset`` attribute takes precedence.
    """

    attrs = {str(key).lower(): str(value).lower() for key, value in tag.attrs.items()}
    charset = None
    if attrs.get("http-equiv") == "content-type" and "content" in attrs:
        for part in attrs["content"].split(";"):
            pieces = part.strip().split("=")
            if len(pieces) == 2 and pieces[0] == "charset":
                charset = pieces[1]
                break
    if "charset" in attrs:
        charset = attrs["charset"]
    return charset


def declared_charset(content: bytes) -> Optional[str]:
    """Return the first charset declared by a ``<meta>`` before ``<title>``.

    Elements are visited depth-first in document order; later declarations
    are ignored.
    """

    soup = BeautifulSoup(content, "html.parser", from_encoding=_SNIFF_ENCODING)
    for node in soup.descendants:
        if not isinstance(node, Tag):
            continue
        if node.name == "title":
            return None
        if node.name == "meta":
            charset = charset_from_meta(node)
            if charset is not None:
                return charset
    return None


def resolve_charset(charset: Optional[str]) -> str:
    if charset is None:
        return DEFAULT_CHARSET
    try:
        codecs.lookup(charset)
    except LookupError:
        LOGGER.info("Unknown charset %r, decoding title as %s", charset, DEFAULT_CHARSET)
        return DEFAULT_CHARSET
    return charset


def extract_title(content: bytes) -> str:
    """Return the text of the first ``<title>``, decoded with the declared charset."""

    charset = resolve_charset(declared_charset(content))
    soup = BeautifulSoup(content, "html.parser", from_encoding=charset)
    title = soup.find("title")
    if title is None:
        return ""
    return title.get_text()


def is_html(content_type: str) -> bool:
    return content_type.startswith(HTML_CONTENT_TYPES)


class HtmlTitleFetcher:
    """TitleFetcherPort backed by a shared ``requests`` session."""

    def __init__(self, session: requests.Session, timeout: float) -> None:
        self._session = session
        self._timeout = timeout

    def fetch_title(self, url: str) -> str:
        try:
            response = self._session.get(url, timeout=self._timeout)
        except requests.RequestException as exc:
            raise TransportError(f"GET {url} failed: {exc}") from exc

        content_type = response.headers.get("Content-Type", "")
        if not is_html(content_type):
            LOGGER.debug("Skipping %s with content type %r", url, content_type)
            return ""
        return extract_title(response.content).strip()
