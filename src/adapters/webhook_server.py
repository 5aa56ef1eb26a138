"""Flask webhook adapter.

POST / feeds the request body to the dispatcher; any other method on / serves
the static landing page. Flask answers 404 for every other path.
"""

from __future__ import annotations

import logging

from flask import Flask, Response, request

from core.dispatcher import EventDispatcher

LOGGER = logging.getLogger(__name__)

TEXT_CONTENT_TYPE = "text/plain; charset=utf8"
HTML_CONTENT_TYPE = "text/html; charset=utf8"
ROOT_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def _read_landing_page(index_path: str) -> bytes:
    try:
        with open(index_path, "rb") as handle:
            return handle.read()
    except OSError as exc:
        LOGGER.warning("Landing page %s unavailable: %s", index_path, exc)
        return b""


def create_app(dispatcher: EventDispatcher, index_path: str) -> Flask:
    """Build the Flask app serving the webhook and the landing page."""

    app = Flask(__name__)

    @app.route("/", methods=ROOT_METHODS, provide_automatic_options=False)
    def root() -> Response:
        if request.method != "POST":
            return Response(_read_landing_page(index_path), content_type=HTML_CONTENT_TYPE)

        status, text = dispatcher.handle(request.get_data())
        return Response(text.encode("utf-8"), status=status, content_type=TEXT_CONTENT_TYPE)

    return app
