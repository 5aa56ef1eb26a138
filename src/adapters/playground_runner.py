"""Code-run adapter for the Go playground compile endpoint."""

from __future__ import annotations

import requests

from core.errors import FormatError, TransportError

PLAYGROUND_VERSION = "2"


def parse_playground_result(payload: object) -> str:
    """Return compile errors when present, else the first output event's text.

    Raises ``FormatError`` when the payload does not have the expected shape.
    """

    if not isinstance(payload, dict):
        raise FormatError("playground response is not an object")

    errors = payload.get("Errors") or ""
    if not isinstance(errors, str):
        raise FormatError("playground Errors is not a string")
    if errors:
        return errors

    events = payload.get("Events")
    if not isinstance(events, list) or not events:
        raise FormatError("playground response has no events")
    first = events[0]
    if not isinstance(first, dict) or not isinstance(first.get("Message"), str):
        raise FormatError("playground event has no message")
    return first["Message"]


class PlaygroundRunner:
    """CodeRunnerPort posting form-encoded source to the playground."""

    def __init__(self, session: requests.Session, compile_url: str, timeout: float) -> None:
        self._session = session
        self._compile_url = compile_url
        self._timeout = timeout

    def run(self, code: str) -> str:
        try:
            response = self._session.post(
                self._compile_url,
                data={"version": PLAYGROUND_VERSION, "body": code},
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            raise TransportError(f"POST {self._compile_url} failed: {exc}") from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise FormatError(f"playground response is not JSON: {exc}") from exc
        return parse_playground_result(payload)
