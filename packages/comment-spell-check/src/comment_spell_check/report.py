"""Word-wrapped text rendering of scan results."""

from __future__ import annotations

import sys
import textwrap
from collections import defaultdict
from io import StringIO
from typing import Mapping, Protocol, TextIO

WRAP_WIDTH = 75
LINE_LABEL_FORMAT = "line %6s: "
LINE_INDENT = " " * 13
SUMMARY_LABEL_FORMAT = "%6s: "
SUMMARY_INDENT = " " * 10
SUMMARY_HEADER = "\nAll incorrect words, by number of occurrences:\n"


class OutputSink(Protocol):
    def write(self, text: str) -> None:
        ...

    def flush(self) -> None:
        ...


class StreamSink:
    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdout

    def write(self, text: str) -> None:
        self.stream.write(text)

    def flush(self) -> None:
        self.stream.flush()


class StringSink:
    def __init__(self) -> None:
        self._buf = StringIO()

    def write(self, text: str) -> None:
        self._buf.write(text)

    def flush(self) -> None:
        return None

    def getvalue(self) -> str:
        return self._buf.getvalue()


def wrap(label: str, indent: str, text: str, width: int = WRAP_WIDTH) -> str:
    """Wrap ``text`` after ``label`` with a hanging ``indent``; overlong words overflow instead of splitting."""
    lines = textwrap.wrap(
        text,
        width=width,
        initial_indent=label,
        subsequent_indent=indent,
        break_long_words=False,
        break_on_hyphens=False,
    )
    return "\n".join(lines) if lines else label.rstrip()


def format_word(word: str, count: int) -> str:
    return f"{word}(x{count})" if count > 1 else word


def render_comment_line(line_number: int, counts: Mapping[str, int], width: int = WRAP_WIDTH) -> str:
    label = LINE_LABEL_FORMAT % f"#{line_number}"
    body = " ".join(format_word(word, counts[word]) for word in sorted(counts))
    return wrap(label, LINE_INDENT, body, width) + "\n"


def group_by_frequency(counts: Mapping[str, int]) -> dict[int, list[str]]:
    grouped: dict[int, list[str]] = defaultdict(list)
    for word, count in counts.items():
        grouped[count].append(word)
    return {freq: sorted(grouped[freq]) for freq in sorted(grouped)}


def render_summary(counts: Mapping[str, int], width: int = WRAP_WIDTH) -> str:
    if not counts:
        return ""
    blocks = [
        wrap(SUMMARY_LABEL_FORMAT % freq, SUMMARY_INDENT, ", ".join(words), width)
        for freq, words in group_by_frequency(counts).items()
    ]
    return SUMMARY_HEADER + "\n".join(blocks) + "\n"
