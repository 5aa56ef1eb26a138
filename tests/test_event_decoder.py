from __future__ import annotations

import pytest

from adapters.event_decoder import decode_batch
from core.errors import BatchDecodeError
from core.models import Event, Message


def test_decode_full_message() -> None:
    body = (
        b'{"events":[{"event_id":7,"message":{"id":"m1","room":"go","public_session_id":"s",'
        b'"icon_url":"http://i","type":"user","speaker_id":"sp","nickname":"nick","text":"hi"}}]}'
    )
    batch = decode_batch(body)
    assert batch.events == (
        Event(
            event_id=7,
            message=Message(
                id="m1",
                room="go",
                public_session_id="s",
                icon_url="http://i",
                type="user",
                speaker_id="sp",
                nickname="nick",
                text="hi",
            ),
        ),
    )


def test_decode_missing_fields_default_empty() -> None:
    batch = decode_batch('{"events":[{"event_id":1,"message":{"text":"foo++"}},{"event_id":2}]}'.encode())
    assert batch.events[0].message == Message(text="foo++")
    assert batch.events[1].message is None


def test_decode_keeps_unicode_text() -> None:
    batch = decode_batch('{"events":[{"event_id":1,"message":{"text":"突然の死"}}]}'.encode("utf-8"))
    assert batch.events[0].message.text == "突然の死"


def test_decode_without_events() -> None:
    assert decode_batch(b"{}").events == ()


@pytest.mark.parametrize(
    "body",
    [
        b"",
        b"{",
        b"[]",
        b'{"events": 1}',
        b'{"events": [1]}',
        b'{"events": [{"event_id": "1"}]}',
        b'{"events": [{"event_id": true}]}',
        b'{"events": [{"event_id": 1, "message": "text"}]}',
        b'{"events": [{"event_id": 1, "message": {"text": 5}}]}',
        b"\xff\xfe",
    ],
)
def test_decode_rejects_malformed(body: bytes) -> None:
    with pytest.raises(BatchDecodeError):
        decode_batch(body)
