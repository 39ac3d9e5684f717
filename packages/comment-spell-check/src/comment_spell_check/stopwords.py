from __future__ import annotations

import re
from typing import Iterable

DEFAULT_STOPWORDS: frozenset[str] = frozenset(
    """
    api apis args argv async await bool boolean cli config configs const csv dict dicts
    env eof enum etc fd init json kwargs lang len namespace noqa param params pragma
    pytest regex repo repos stderr stdin stdout str subcommand subprocess toml tuple
    tuples url urls utf utils yaml
    """.split()
)

DIRECTIVE_RE = re.compile(r"^\s*stopwords\s*:\s*(?P<words>.*)$", re.IGNORECASE)

_URL_RE = re.compile(r"^(?:[a-z][a-z0-9+.-]*://|www\.)", re.IGNORECASE)
_CODE_CHARS_RE = re.compile(r"[_0-9@=<>{}\[\]\\/|`$%^~]|::|->|\(\)")
_DOTTED_RE = re.compile(r"^\w+(?:\.\w+)+$")
_CAMEL_RE = re.compile(r"^[a-z]+[A-Z]|^[A-Z]+[a-z]+[A-Z]|^[A-Z]{2,}[a-z]")
_ALLCAPS_RE = re.compile(r"^[A-Z]{2,}s?$")
_EDGE_PUNCT = "\"'.,;:!?()[]{}<>*"
_POSSESSIVE_RE = re.compile(r"(?:'s|’s)$", re.IGNORECASE)


def parse_directive(text: str) -> list[str] | None:
    """Return the words of a ``stopwords: a b c`` comment, or ``None`` for ordinary comments."""
    match = DIRECTIVE_RE.match(text)
    if match is None:
        return None
    return match.group("words").replace(",", " ").split()


def is_code_like(token: str) -> bool:
    return bool(
        _URL_RE.match(token)
        or _CODE_CHARS_RE.search(token)
        or _DOTTED_RE.match(token)
        or _CAMEL_RE.match(token)
        or _ALLCAPS_RE.match(token)
    )


class Stopwords:
    def __init__(self, words: Iterable[str] = (), use_defaults: bool = True) -> None:
        self._words: set[str] = set(DEFAULT_STOPWORDS) if use_defaults else set()
        self.learn(words)

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        key = _POSSESSIVE_RE.sub("", word).lower()
        return key in self._words or word.lower() in self._words

    def learn(self, words: Iterable[str]) -> None:
        self._words.update(word.strip().lower() for word in words if word.strip())

    def copy(self) -> "Stopwords":
        clone = Stopwords(use_defaults=False)
        clone._words = set(self._words)
        return clone

    def strip(self, text: str) -> str:
        kept: list[str] = []
        for raw in text.split():
            if is_code_like(raw):
                continue
            token = raw.strip(_EDGE_PUNCT)
            if not token or token in self or is_code_like(token):
                continue
            kept.append(raw)
        return " ".join(kept)
