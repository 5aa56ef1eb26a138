from __future__ import annotations

import pytest

from core.classifier import (
    CommandGo,
    CommandGoDoc,
    CounterOp,
    DecorativeBox,
    NoMatch,
    UrlList,
    classify,
    find_urls,
    parse_counter,
    split_command,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("foo++", CounterOp("foo", 1)),
        ("  foo++  ", CounterOp("foo", 1)),
        ("foo--", CounterOp("foo", -1)),
        ("foo+=3", CounterOp("foo", 3)),
        ("foo-=9", CounterOp("foo", -9)),
        ("a_{b^c}++", CounterOp("a_{b^c}", 1)),
    ],
)
def test_counter_syntax(text: str, expected: CounterOp) -> None:
    assert parse_counter(text) == expected
    assert classify(text) == expected


@pytest.mark.parametrize(
    "text", ["foo+=10", "foo ++", "foo++ bar", "++", "foo-bar--", "foo++\u3000", "\xa0foo--", "foo+=3\xa0"]
)
def test_counter_syntax_rejects(text: str) -> None:
    assert parse_counter(text) is None


def test_split_command() -> None:
    assert split_command("!go fmt.Println(1)") == ("!go", "fmt.Println(1)")
    assert split_command("!godoc") == ("!godoc", None)
    assert split_command("!godoc ") == ("!godoc", "")


def test_commands_need_an_argument() -> None:
    assert classify("!go package main") == CommandGo(code="package main")
    assert classify("!godoc net/http") == CommandGoDoc(package="net/http")
    assert classify("!go") == NoMatch()
    assert classify("!godoc") == NoMatch()


def test_command_wins_over_urls() -> None:
    assert classify("!godoc http://example.com") == CommandGoDoc(package="http://example.com")


def test_sudden_death_line() -> None:
    assert classify("突然の死") == DecorativeBox(text="突然の死", repeat=1)
    assert classify("これは突然の死") == NoMatch()
    assert classify("突然の死\n二行目") == NoMatch()


def test_quoted_echo_needs_balanced_markers() -> None:
    assert classify(">>hello<<") == DecorativeBox(text="hello", repeat=2)
    assert classify(">hello<") == DecorativeBox(text="hello", repeat=1)
    assert classify(">hello<<") == NoMatch()


def test_unbalanced_echo_falls_through_to_urls() -> None:
    assert classify(">http://example.com<<") == UrlList(urls=("http://example.com",))


def test_find_urls_in_order_without_dedup() -> None:
    text = "see http://a.example/x and https://b.example:8080/p?q=1 then http://a.example/x"
    assert find_urls(text) == (
        "http://a.example/x",
        "https://b.example:8080/p?q=1",
        "http://a.example/x",
    )


def test_find_urls_requires_boundary() -> None:
    assert find_urls("xhttp://example.com") == ()
    assert find_urls("(http://example.com)") == ("http://example.com",)


def test_url_list_takes_precedence_over_nothing() -> None:
    assert classify("hello world") == NoMatch()
    assert classify("look http://example.com") == UrlList(urls=("http://example.com",))


def test_ascii_whitespace_around_counter() -> None:
    assert parse_counter("\tfoo++\r\n") == CounterOp("foo", 1)
