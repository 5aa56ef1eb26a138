"""Decorative "sudden death" box rendering (core domain).

Widths follow terminal conventions: East-Asian wide and fullwidth code
points take two columns, everything else one.
"""

from __future__ import annotations

from typing import List

TOP_LEFT = "＿"
TOP_FILL = "人"
TOP_RIGHT = "＿"
BODY_LEFT = "＞　"
BODY_RIGHT = "　＜"
BOTTOM_LEFT = "￣"
BOTTOM_FILL = "Ｙ"
BOTTOM_RIGHT = "￣"

# Inclusive (start, end) bounds of double-width code points.
_WIDE_RANGES = (
    (0x1100, 0x115F),
    (0x2329, 0x232A),
    (0x2E80, 0x303E),
    (0x3040, 0xA4CF),
    (0xAC00, 0xD7A3),
    (0xF900, 0xFAFF),
    (0xFE30, 0xFE6F),
    (0xFF00, 0xFF60),
    (0xFFE0, 0xFFE6),
    (0x20000, 0x2FFFD),
    (0x30000, 0x3FFFD),
)


def char_width(char: str) -> int:
    """Return the display width (1 or 2) of a single character."""

    code = ord(char)
    for start, end in _WIDE_RANGES:
        if start <= code <= end:
            return 2
    return 1


def display_width(text: str) -> int:
    return sum(char_width(char) for char in text)


def render_box(text: str) -> str:
    """Wrap every line of ``text`` in a decorative frame.

    The result always ends with a newline. The border repeat count is
    ``max_width // 2 + 2`` so a border glyph (two columns) spans the widest
    line plus the body markers.
    """

    lines = text.split("\n")
    widths = [display_width(line) for line in lines]
    max_width = max(widths)
    span = max_width // 2 + 2

    parts: List[str] = [f"{TOP_LEFT}{TOP_FILL * span}{TOP_RIGHT}\n"]
    for line, width in zip(lines, widths):
        padding = " " * (max_width - width)
        parts.append(f"{BODY_LEFT}{line}{padding}{BODY_RIGHT}\n")
    parts.append(f"{BOTTOM_LEFT}{BOTTOM_FILL * span}{BOTTOM_RIGHT}\n")
    return "".join(parts)


def render_nested_box(text: str, repeat: int) -> str:
    """Box ``text`` ``repeat`` times, each pass framing the previous box."""

    result = text
    for _ in range(repeat):
        result = render_box(result.rstrip("\n"))
    return result
