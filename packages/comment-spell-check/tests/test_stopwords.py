from __future__ import annotations

import pytest

from comment_spell_check.stopwords import Stopwords, is_code_like, parse_directive


@pytest.mark.parametrize(
    "token",
    ["snake_case", "os.path", "https://example.com", "getValue", "HTTPServer", "JSON", "v2", "a->b", "call()", "user@host", "x=1"],
)
def test_code_like_tokens(token: str) -> None:
    assert is_code_like(token)


@pytest.mark.parametrize("token", ["hello", "Hello", "thsi", "don't", "I"])
def test_prose_tokens(token: str) -> None:
    assert not is_code_like(token)


def test_strip_removes_code_and_listed_words() -> None:
    words = Stopwords(["Frobnicate"], use_defaults=False)
    assert words.strip("Call frobnicate() then frobnicate, see os.path and thsi.") == "Call then see and thsi."


def test_wordlist_is_case_insensitive_and_possessive_tolerant() -> None:
    words = Stopwords(["kubectl"], use_defaults=False)
    assert "Kubectl" in words
    assert "kubectl's" in words
    assert "kepe" not in words


def test_defaults_can_be_disabled() -> None:
    assert "stdout" in Stopwords()
    assert "stdout" not in Stopwords(use_defaults=False)


def test_copy_is_independent() -> None:
    base = Stopwords(use_defaults=False)
    clone = base.copy()
    clone.learn(["kepe"])
    assert "kepe" in clone
    assert "kepe" not in base


def test_parse_directive() -> None:
    assert parse_directive("stopwords: kepe, bsaic thsi") == ["kepe", "bsaic", "thsi"]
    assert parse_directive("Stopwords:") == []
    assert parse_directive("these stopwords: no") is None
