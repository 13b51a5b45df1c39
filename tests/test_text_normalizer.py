import pytest

from ai_translator.domain.text_normalizer import count_words, normalize_text


def test_normalize_text_collapses_line_breaks_and_spaces() -> None:
    assert normalize_text("a\r\n\r\nb   c") == "a b c"


def test_normalize_text_trims_and_handles_tabs() -> None:
    assert normalize_text("  \tHello\n\nworld \t ") == "Hello world"


def test_normalize_text_empty_values() -> None:
    assert normalize_text("") == ""
    assert normalize_text(None) == ""
    assert normalize_text(" \r\n ") == ""


@pytest.mark.parametrize(
    "text",
    ["a\r\n\r\nb   c", "  lead and trail  ", "line1\nline2\r\nline3", "", "x\t\ty"],
)
def test_normalize_text_is_idempotent(text: str) -> None:
    once = normalize_text(text)
    assert normalize_text(once) == once


def test_count_words_skips_empty_tokens() -> None:
    assert count_words("  one  two\nthree ") == 3
    assert count_words("") == 0
    assert count_words(None) == 0
