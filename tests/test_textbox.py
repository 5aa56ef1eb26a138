from __future__ import annotations

from core.textbox import (
    BODY_LEFT,
    BODY_RIGHT,
    BOTTOM_FILL,
    TOP_FILL,
    char_width,
    display_width,
    render_box,
    render_nested_box,
)


def test_char_width_ranges() -> None:
    assert char_width("a") == 1
    assert char_width("あ") == 2
    assert char_width("한") == 2
    assert char_width("Ａ") == 2
    assert char_width("〿") == 1
    assert char_width("\U00020000") == 2
    assert display_width("aあb") == 4


def test_single_line_box() -> None:
    box = render_box("abcd")
    top, body, bottom = box.rstrip("\n").split("\n")

    assert top == "＿" + TOP_FILL * 4 + "＿"
    assert body == f"{BODY_LEFT}abcd{BODY_RIGHT}"
    assert bottom == "￣" + BOTTOM_FILL * 4 + "￣"
    assert box.endswith("\n")


def test_border_spans_widest_line() -> None:
    width = 7
    top = render_box("x" * width).split("\n")[0]
    fill = top.count(TOP_FILL)
    assert fill == width // 2 + 2
    # Corners and fill glyphs are all double width.
    assert display_width(top) == 2 * (width // 2 + 2) + 4


def test_multi_line_padding_uses_display_width() -> None:
    lines = render_box("突然の死\nab").split("\n")
    assert lines[1] == f"{BODY_LEFT}突然の死{BODY_RIGHT}"
    assert lines[2] == f"{BODY_LEFT}ab{' ' * 6}{BODY_RIGHT}"
    assert display_width(lines[1]) == display_width(lines[2])


def test_nested_box_reboxes_previous_output() -> None:
    once = render_box("hello")
    twice = render_nested_box("hello", 2)
    assert twice == render_box(once.rstrip("\n"))
    assert len(twice.rstrip("\n").split("\n")) == 5
