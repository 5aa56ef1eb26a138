"""Error taxonomy shared by the core and adapters."""

from __future__ import annotations


class BatchDecodeError(ValueError):
    """The inbound webhook body is not a valid event batch."""


class TransportError(Exception):
    """An outbound fetch or post failed."""


class FormatError(TransportError):
    """An outbound service answered with an unexpected shape."""


class CounterStoreError(Exception):
    """The counter store failed for a reason other than a missing record."""
