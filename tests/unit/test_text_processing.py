from __future__ import annotations

from hireiq.core.text_processing import (
    bullet_lines,
    find_terms,
    has_bullet_at_line_start,
    non_blank_lines,
    split_lines,
)


def test_non_blank_lines_ignores_whitespace_only_lines() -> None:
    text = "one\n\n   \n\ttwo\r\nthree"
    assert non_blank_lines(text) == ["one", "\ttwo\r", "three"]
    assert non_blank_lines("") == []


def test_split_lines_empty() -> None:
    assert split_lines("") == []


def test_bullet_at_line_start_requires_column_zero() -> None:
    assert has_bullet_at_line_start("Intro\n- item") is True
    assert has_bullet_at_line_start("Intro\n• item") is True
    assert has_bullet_at_line_start("* item") is True
    assert has_bullet_at_line_start("Intro\n   - indented item") is False


def test_bullet_lines_are_stripped_and_include_indented() -> None:
    text = "Header\n- one.\n   • two\n* three \nplain - not a bullet"
    assert bullet_lines(text) == ["- one.", "• two", "* three"]


def test_find_terms_preserves_given_order_and_is_substring_based() -> None:
    text = "Focused on delivery. Helped the team."
    assert find_terms(text, ["worked", "helped", "used"]) == ["helped", "used"]
    assert find_terms("", ["x"]) == []
