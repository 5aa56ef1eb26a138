"""Message classification (core domain).

A message is tested against a fixed, ordered list of rules and the first
rule that fires wins. Each result variant carries exactly what its reply
handler needs.
"""

from __future__ import annotations

from dataclasses import dataclass
import re
from typing import Optional, Tuple, Union

GO_COMMAND = "!go"
GODOC_COMMAND = "!godoc"

URL_PATTERN = re.compile(
    r"(?:^|[^a-zA-Z0-9])"
    r"(https?://[a-zA-Z][a-zA-Z0-9_-]*(?:\.[a-zA-Z0-9][a-zA-Z0-9_-]*)*"
    r"(?::[0-9]+)?(?:/[a-zA-Z0-9_/.\-+%#?&=;@$,!*~]*)?)"
)
SUDDEN_DEATH_PATTERN = re.compile(r"突然の.+")
QUOTED_ECHO_PATTERN = re.compile(r"(>+)([^<]+)(<+)")

_NAME = r"([a-zA-Z0-9_{^}]+)"
PLUS_PATTERN = re.compile(rf"\s*{_NAME}\+\+\s*", re.ASCII)
MINUS_PATTERN = re.compile(rf"\s*{_NAME}--\s*", re.ASCII)
PLUS_EQ_PATTERN = re.compile(rf"\s*{_NAME}\+=([0-9])\s*", re.ASCII)
MINUS_EQ_PATTERN = re.compile(rf"\s*{_NAME}-=([0-9])\s*", re.ASCII)


@dataclass(frozen=True)
class NoMatch:
    """No rule fired; the message gets no reply."""


@dataclass(frozen=True)
class CommandGo:
    code: str


@dataclass(frozen=True)
class CommandGoDoc:
    package: str


@dataclass(frozen=True)
class DecorativeBox:
    text: str
    repeat: int = 1


@dataclass(frozen=True)
class UrlList:
    urls: Tuple[str, ...]


@dataclass(frozen=True)
class CounterOp:
    nickname: str
    delta: int


Classification = Union[NoMatch, CommandGo, CommandGoDoc, DecorativeBox, UrlList, CounterOp]


def split_command(text: str) -> Tuple[str, Optional[str]]:
    """Split text on the first space into (verb, rest); rest is None without a space."""

    verb, sep, rest = text.partition(" ")
    if not sep:
        return verb, None
    return verb, rest


def find_urls(text: str) -> Tuple[str, ...]:
    """Return every HTTP(S) URL in ``text`` in order of appearance."""

    return tuple(match.group(1) for match in URL_PATTERN.finditer(text))


def parse_counter(text: str) -> Optional[CounterOp]:
    """Parse the NAME++ / NAME-- / NAME+=D / NAME-=D shorthand."""

    match = PLUS_PATTERN.fullmatch(text)
    if match:
        return CounterOp(nickname=match.group(1), delta=1)
    match = MINUS_PATTERN.fullmatch(text)
    if match:
        return CounterOp(nickname=match.group(1), delta=-1)
    match = PLUS_EQ_PATTERN.fullmatch(text)
    if match:
        return CounterOp(nickname=match.group(1), delta=int(match.group(2)))
    match = MINUS_EQ_PATTERN.fullmatch(text)
    if match:
        return CounterOp(nickname=match.group(1), delta=-int(match.group(2)))
    return None


def _match_decoration(text: str) -> Optional[DecorativeBox]:
    if SUDDEN_DEATH_PATTERN.fullmatch(text):
        return DecorativeBox(text=text)

    match = QUOTED_ECHO_PATTERN.fullmatch(text)
    if match and len(match.group(1)) == len(match.group(3)):
        return DecorativeBox(text=match.group(2), repeat=len(match.group(1)))
    return None


def classify(text: str) -> Classification:
    """Classify one message text.

    Rule order:
    1. ``!go <code>``
    2. ``!godoc <package>``
    3. sudden-death line, then quoted echo with balanced markers
    4. URLs anywhere in the text
    5. counter shorthand, only when the text holds no URL
    """

    verb, rest = split_command(text)
    if rest is not None:
        if verb == GO_COMMAND:
            return CommandGo(code=rest)
        if verb == GODOC_COMMAND:
            return CommandGoDoc(package=rest)

    decoration = _match_decoration(text)
    if decoration is not None:
        return decoration

    urls = find_urls(text)
    if urls:
        return UrlList(urls=urls)

    counter = parse_counter(text)
    if counter is not None:
        return counter
    return NoMatch()
