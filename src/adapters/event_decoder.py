"""Webhook-payload-to-core mapping adapter.

This keeps the JSON wire shape out of the core dispatcher.
"""

from __future__ import annotations

import json
from typing import Any, Optional

from core.errors import BatchDecodeError
from core.models import Event, EventBatch, Message

_MESSAGE_FIELDS = (
    "id",
    "room",
    "public_session_id",
    "icon_url",
    "type",
    "speaker_id",
    "nickname",
    "text",
)


def _build_message(raw: Any) -> Optional[Message]:
    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise BatchDecodeError("message must be an object")

    values: dict[str, str] = {}
    for field in _MESSAGE_FIELDS:
        value = raw.get(field)
        if value is None:
            continue
        if not isinstance(value, str):
            raise BatchDecodeError(f"message.{field} must be a string")
        values[field] = value
    return Message(**values)


def _build_event(raw: Any) -> Event:
    if not isinstance(raw, dict):
        raise BatchDecodeError("event must be an object")

    event_id = raw.get("event_id", 0)
    # bool is an int subclass but never a valid event id
    if not isinstance(event_id, int) or isinstance(event_id, bool):
        raise BatchDecodeError("event_id must be an integer")
    return Event(event_id=event_id, message=_build_message(raw.get("message")))


def decode_batch(body: bytes) -> EventBatch:
    """Decode a webhook body into an EventBatch.

    Missing ``events`` or message fields decode to empty values; anything of
    the wrong type raises ``BatchDecodeError``.
    """

    try:
        payload = json.loads(body)
    except (UnicodeDecodeError, ValueError) as exc:
        raise BatchDecodeError(f"invalid JSON: {exc}") from exc

    if not isinstance(payload, dict):
        raise BatchDecodeError("payload must be an object")

    raw_events = payload.get("events")
    if raw_events is None:
        raw_events = []
    if not isinstance(raw_events, list):
        raise BatchDecodeError("events must be a list")
    return EventBatch(events=tuple(_build_event(raw) for raw in raw_events))
