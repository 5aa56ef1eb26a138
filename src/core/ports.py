"""Ports (interfaces) used by the reply handlers.

Ports define the minimal contracts for the counter store and the outbound
HTTP collaborators so that the core can be reused with different backends.
"""

from __future__ import annotations

from typing import Protocol

from core.models import CounterLookup, CounterRecord


class CounterStorePort(Protocol):
    """Key-value counter store keyed by nickname.

    ``get`` returns ``Absent`` for unknown nicknames; both methods raise
    ``CounterStoreError`` for any other failure.
    """

    def get(self, nickname: str) -> CounterLookup:
        ...

    def put(self, record: CounterRecord) -> None:
        ...


class TitleFetcherPort(Protocol):
    """Fetch a page and return its decoded ``<title>``, or ``""``."""

    def fetch_title(self, url: str) -> str:
        ...


class DocFetcherPort(Protocol):
    """Fetch a plain-text documentation page and return its synopsis."""

    def fetch_summary(self, url: str) -> str:
        ...


class CodeRunnerPort(Protocol):
    """Submit a snippet to the code-run service and return its output."""

    def run(self, code: str) -> str:
        ...
