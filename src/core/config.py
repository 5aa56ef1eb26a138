"""Core configuration dataclasses.

We keep config parsing outside the core, but these dataclasses define the
shape the core expects so adapters and app layers can build safely.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ReplyConfig:
    """Reply assembly settings for the dispatcher and doc handler."""

    max_chars: int = 1000
    godoc_url: str = "http://godoc.org"
    not_found_text: str = "No such documents"


@dataclass(frozen=True)
class HttpConfig:
    """Outbound HTTP settings consumed by the fetcher adapters."""

    timeout_seconds: float
    user_agent: str
