"""Shared ``requests`` session factory for outbound fetches."""

from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter

from core.config import HttpConfig


def build_session(config: HttpConfig) -> requests.Session:
    """Create a session with the bot's User-Agent and retries disabled."""

    session = requests.Session()
    session.headers.update({"User-Agent": config.user_agent})
    session.mount("https://", HTTPAdapter(max_retries=0))
    session.mount("http://", HTTPAdapter(max_retries=0))
    return session
