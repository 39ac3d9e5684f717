"""Structured scan output."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping

WordCounts = Mapping[str, int]


def count_words(words: Iterable[str]) -> dict[str, int]:
    """Count occurrences case-sensitively, exactly as the engine reported them."""
    return dict(Counter(words))


@dataclass(frozen=True)
class CommentFailure:
    line: int
    counts: WordCounts

    def to_dict(self) -> dict[str, object]:
        return {"line": self.line, "counts": dict(self.counts)}


@dataclass(frozen=True)
class ScanResult:
    fails: tuple[CommentFailure, ...] = ()
    counts: WordCounts = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.fails

    def to_dict(self) -> dict[str, object]:
        return {
            "counts": dict(self.counts),
            "fails": [fail.to_dict() for fail in self.fails],
        }


class ScanAccumulator:
    """Scan-scoped counters; created fresh for each document and frozen into a ``ScanResult``."""

    def __init__(self) -> None:
        self._fails: list[CommentFailure] = []
        self._counts: Counter[str] = Counter()

    @property
    def counts(self) -> Mapping[str, int]:
        return MappingProxyType(self._counts)

    def record(self, line: int, words: Iterable[str]) -> CommentFailure | None:
        local = count_words(words)
        if not local:
            return None
        self._counts.update(local)
        fail = CommentFailure(line=line, counts=MappingProxyType(local))
        self._fails.append(fail)
        return fail

    def freeze(self) -> ScanResult:
        return ScanResult(fails=tuple(self._fails), counts=MappingProxyType(dict(self._counts)))
