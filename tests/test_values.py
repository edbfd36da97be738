"""Tests for value extraction from update instructions."""

from __future__ import annotations

import pytest

from src.resolver.values import extract_value


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("change the color to #112233", "#112233"),
        ("set it as dark mode", "dark mode"),
        ("set primary color to X", "X"),
        ("set the daily limit = 50", "50"),
        ("rename the bot as Support Bot", "Support Bot"),
        ("set the launcher to bottom-right.", "bottom-right"),
        ("Set   the popup   TO   Welcome  back", "Welcome back"),
    ],
)
def test_extract_value(text: str, expected: str) -> None:
    assert extract_value(text) == expected


def test_patterns_are_tried_in_order() -> None:
    # " to " is tried before " as ", wherever each appears in the text.
    assert extract_value("save it as draft to archive") == "archive"
    assert extract_value("x = 5 as well") == "5 as well"


@pytest.mark.parametrize("text", ["turn off the chat input box", "enable the popup", "", "set it to !!"])
def test_extract_value_none(text: str) -> None:
    assert extract_value(text) is None


def test_extract_value_has_no_last_word_fallback() -> None:
    assert extract_value("set the font size 14") is None
