"""Tests for oracle output cleanup."""

import pytest

from zairk.gen.sanitizer import clean, first_line


class TestClean:
    """Line filtering and fence removal."""

    def test_fenced_block_is_unwrapped(self):
        raw = "```\nroom_0 north room_1\nroom_1 east room_2\n```"
        assert clean(raw) == "room_0 north room_1\nroom_1 east room_2"

    def test_fence_language_tag_is_dropped(self):
        raw = "```text\nGreat Hall\n```"
        assert clean(raw) == "Great Hall"

    @pytest.mark.parametrize("raw,expected", [
        ("```Rusty Key```", "Rusty Key"),
        ("```  Rusty Key  ```", "Rusty Key"),
        ("```python\nroom_0 up room_3\n```", "room_0 up room_3"),
        ("```json\r\nGreat Hall\r\n```", "Great Hall"),
        ("```room_0 north room_1\nroom_1 east room_2```", "room_0 north room_1\nroom_1 east room_2"),
        ("Rooms:\n```1. Crypt\n2. Tower```", "Rooms:\n1. Crypt\n2. Tower"),
    ])
    def test_fence_content_kept(self, raw, expected):
        assert clean(raw) == expected

    def test_fenced_single_name(self):
        assert first_line("```Rusty Key```") == "Rusty Key"

    def test_stray_backticks_removed(self):
        assert clean("the `brass` key") == "the brass key"

    def test_blank_lines_dropped(self):
        assert clean("one\n\n   \ntwo") == "one\ntwo"

    @pytest.mark.parametrize("line", [
        "# Rooms",
        "* bullet",
        "- bullet",
        "> quoted",
        "Note: these are suggestions",
        "Design: a circular layout",
        "Would you like more rooms?",
        "I can add more rooms if you want?",
        "Let me know if you need changes.",
    ])
    def test_meta_lines_dropped(self, line):
        assert clean(f"keep me\n{line}") == "keep me"

    def test_surviving_lines_untouched(self):
        raw = "  1. Great Hall  \n2. Crypt"
        assert clean(raw) == "  1. Great Hall  \n2. Crypt"

    def test_empty_input(self):
        assert clean("") == ""
        assert clean(None) == ""

    @pytest.mark.parametrize("raw", [
        "```json\n# heading\nvalue\n```\nWould you like more?",
        "plain text",
        "\n\n- a\n* b\n1. c\n",
        "``` ``` text ```",
        "Note: x\r\nrow\r\n\r\n",
        "",
    ])
    def test_idempotent(self, raw):
        once = clean(raw)
        assert clean(once) == once


class TestFirstLine:
    """Single-name answers."""

    def test_quotes_and_period_stripped(self):
        assert first_line('"Rusty Key".') == "Rusty Key"

    def test_only_first_content_line(self):
        assert first_line("# Name\nSilver Dagger\nA fine blade") == "Silver Dagger"

    def test_nothing_left(self):
        assert first_line("Would you like another?") == ""
