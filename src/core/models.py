"""Core domain models.

These dataclasses are shared across the core and adapters to avoid tight
coupling to the webhook payload or any storage-specific types.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class Message:
    """A single chat message as delivered by the room webhook."""

    id: str = ""
    room: str = ""
    public_session_id: str = ""
    icon_url: str = ""
    type: str = ""
    speaker_id: str = ""
    nickname: str = ""
    text: str = ""


@dataclass(frozen=True)
class Event:
    """One webhook event. Events without a message are skipped."""

    event_id: int
    message: Optional[Message]


@dataclass(frozen=True)
class EventBatch:
    """Events of one webhook call, in arrival order."""

    events: Tuple[Event, ...]


@dataclass(frozen=True)
class CounterRecord:
    """Persisted tally for a single nickname."""

    nickname: str
    count: int


@dataclass(frozen=True)
class Found:
    record: CounterRecord


@dataclass(frozen=True)
class Absent:
    nickname: str


CounterLookup = Union[Found, Absent]


def record_or_zero(lookup: CounterLookup) -> CounterRecord:
    """Collapse a store lookup into a record, starting absent nicknames at zero."""

    if isinstance(lookup, Found):
        return lookup.record
    return CounterRecord(nickname=lookup.nickname, count=0)
