"""Webhook event dispatcher.

This module is transport-agnostic. It turns one request body into one reply
text, relying on an injected decoder and the reply handlers for everything
else.

Per request:
1) Decode the event batch (soft failure: empty reply)
2) Skip events without a message
3) Classify each message and run exactly one handler
4) Concatenate in event order, strip trailing newlines, truncate
"""

from __future__ import annotations

import logging
from typing import Callable, List, Tuple

from core.classifier import classify
from core.config import ReplyConfig
from core.errors import BatchDecodeError
from core.handlers import ReplyHandlers
from core.models import EventBatch, Message

LOGGER = logging.getLogger(__name__)

STATUS_OK = 200


def truncate_reply(text: str, max_chars: int) -> str:
    """Clip ``text`` when it is longer than ``max_chars`` code points.

    Longer text keeps ``max_chars - 1`` code points, matching the behavior
    chat rooms have always seen from this bot.
    """

    if len(text) > max_chars:
        return text[: max_chars - 1]
    return text


class EventDispatcher:
    """Builds the reply for one webhook call."""

    def __init__(
        self,
        decoder: Callable[[bytes], EventBatch],
        handlers: ReplyHandlers,
        config: ReplyConfig,
    ) -> None:
        self._decoder = decoder
        self._handlers = handlers
        self._config = config

    def handle(self, body: bytes) -> Tuple[int, str]:
        """Return ``(status, reply_text)`` for one request body."""

        try:
            batch = self._decoder(body)
        except BatchDecodeError as exc:
            LOGGER.warning("Dropping undecodable event batch: %s", exc)
            return STATUS_OK, ""

        replies: List[str] = []
        for event in batch.events:
            if event.message is None:
                continue
            try:
                replies.append(self.reply_to(event.message))
            except Exception:
                # One broken message must not cost its siblings their replies.
                LOGGER.exception("Error while handling event %s", event.event_id)

        reply = "".join(replies)
        if not reply:
            return STATUS_OK, ""
        return STATUS_OK, truncate_reply(reply.rstrip("\n"), self._config.max_chars)

    def reply_to(self, message: Message) -> str:
        """Classify one message and return its reply text (possibly empty)."""

        return self._handlers.reply(classify(message.text))
