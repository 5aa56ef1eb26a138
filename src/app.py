"""Application entry point for the lingrbot webhook."""

from __future__ import annotations

import argparse
import json
import logging
from typing import Optional

from art import tprint
from flask import Flask

import settings
from adapters.event_decoder import decode_batch
from adapters.godoc_fetcher import GoDocFetcher
from adapters.http_session import build_session
from adapters.playground_runner import PlaygroundRunner
from adapters.sqlite_counter_store import SQLiteCounterStore
from adapters.title_fetcher import HtmlTitleFetcher
from adapters.webhook_server import create_app
from core.config import HttpConfig, ReplyConfig
from core.errors import CounterStoreError
from core.dispatcher import EventDispatcher
from core.handlers import ReplyHandlers
from log_config import configure_logging

NAME = "LINGRBOT"
FONT = "tarty-1"


def _print_banner() -> None:
    tprint(NAME, FONT, space=1)


def _build_store() -> SQLiteCounterStore:
    store = SQLiteCounterStore(settings.COUNTER_DB_PATH)
    store.init_db()
    return store


def build_dispatcher(store: SQLiteCounterStore) -> EventDispatcher:
    """Wire the adapters into a dispatcher using the loaded settings."""

    http_config = HttpConfig(
        timeout_seconds=settings.HTTP_TIMEOUT_SECONDS,
        user_agent=settings.HTTP_USER_AGENT,
    )
    reply_config = ReplyConfig(
        max_chars=settings.REPLY_MAX_CHARS,
        godoc_url=settings.GODOC_URL,
        not_found_text=settings.NOT_FOUND_TEXT,
    )
    session = build_session(http_config)
    handlers = ReplyHandlers(
        counter_store=store,
        title_fetcher=HtmlTitleFetcher(session, http_config.timeout_seconds),
        doc_fetcher=GoDocFetcher(session, settings.GODOC_USER_AGENT, http_config.timeout_seconds),
        code_runner=PlaygroundRunner(session, settings.PLAYGROUND_URL, http_config.timeout_seconds),
        config=reply_config,
    )
    return EventDispatcher(decoder=decode_batch, handlers=handlers, config=reply_config)


def build_app() -> Flask:
    """Build the Flask app, e.g. for a WSGI server (``app:build_app()``)."""

    configure_logging(settings.LOGGING, settings.PROJECT_ROOT)
    return create_app(build_dispatcher(_build_store()), settings.INDEX_PATH)


def _run(host: Optional[str], port: Optional[int]) -> None:
    _print_banner()
    configure_logging(settings.LOGGING, settings.PROJECT_ROOT)
    logger = logging.getLogger(__name__)

    store = _build_store()
    logger.info("Counter store at %s", settings.COUNTER_DB_PATH)
    app = create_app(build_dispatcher(store), settings.INDEX_PATH)

    host = host or settings.HOST
    port = port or settings.PORT
    logger.info("Listening for webhook events on %s:%s", host, port)
    app.run(host=host, port=port)


def _reply(texts: list[str]) -> None:
    configure_logging(settings.LOGGING, settings.PROJECT_ROOT)
    batch = {
        "events": [
            {"event_id": index, "message": {"nickname": "cli", "text": text}}
            for index, text in enumerate(texts, start=1)
        ]
    }
    dispatcher = build_dispatcher(_build_store())
    _, reply = dispatcher.handle(json.dumps(batch).encode("utf-8"))
    print(reply)


def _list_counters() -> None:
    try:
        records = _build_store().list_records()
    except CounterStoreError as exc:
        raise SystemExit(f"Cannot read counters: {exc}") from exc
    if not records:
        print("No counters recorded yet.")
        return
    for record in records:
        print(f"{record.nickname} ({record.count})")


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(prog="lingrbot")
    subparsers = parser.add_subparsers(dest="command")

    run_parser = subparsers.add_parser("run", help="Start the webhook server")
    run_parser.add_argument("--host", default=None)
    run_parser.add_argument("--port", type=int, default=None)
    reply_parser = subparsers.add_parser(
        "reply",
        help="Run messages through the bot as one batch and print the reply.",
    )
    reply_parser.add_argument("texts", nargs="+", metavar="TEXT")
    subparsers.add_parser("counters", help="List every nickname tally.")

    args = parser.parse_args(argv)
    if args.command == "reply":
        _reply(args.texts)
        return
    if args.command == "counters":
        _list_counters()
        return
    _run(getattr(args, "host", None), getattr(args, "port", None))


if __name__ == "__main__":
    main()
