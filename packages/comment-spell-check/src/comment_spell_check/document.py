"""Source documents as ordered sequences of line-attributed comments."""

from __future__ import annotations

import io
import re
import tokenize
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Literal, Protocol

from .core.errors import SpellCheckError
from .core.exit_codes import ERR_VALIDATION

Syntax = Literal["python", "hash", "c", "line"]

PYTHON_SUFFIXES = {".py", ".pyi"}
HASH_SUFFIXES = {
    ".sh", ".bash", ".zsh", ".ksh", ".yaml", ".yml", ".toml", ".cfg", ".ini", ".conf",
    ".mk", ".cmake", ".rb", ".pl", ".pm", ".r", ".tf", ".nix",
}
HASH_FILENAMES = {"Makefile", "GNUmakefile", "makefile", "Dockerfile", "CMakeLists.txt", "Gemfile", "Rakefile"}
C_SUFFIXES = {
    ".c", ".h", ".cc", ".cpp", ".cxx", ".hh", ".hpp", ".hxx", ".m", ".mm", ".go", ".rs", ".java",
    ".kt", ".kts", ".scala", ".swift", ".cs", ".js", ".jsx", ".mjs", ".ts", ".tsx", ".dart",
    ".proto", ".css", ".scss", ".less",
}

# (line markers, block comments allowed)
_STYLES: dict[str, tuple[tuple[str, ...], bool]] = {
    "hash": (("#",), False),
    "c": (("//",), True),
    "line": (("#", "//"), True),
}

_MARKER_RE = re.compile(r"^\s*(?:#+|//+|/\*+|\*+(?!/))\s?")
_TRAILER_RE = re.compile(r"\s*\*+/\s*$")
_BLOCK_END_RE = re.compile(r"^(?P<body>.*?)\*/")
_QUOTES = "\"'`"
_OPENER_PREFIX = ";{}(),"


@dataclass(frozen=True)
class Comment:
    line_number: int
    raw_text: str

    @property
    def text(self) -> str:
        """Comment body without comment markers."""
        body = _TRAILER_RE.sub("", self.raw_text)
        return _MARKER_RE.sub("", body).strip()


class Document(Protocol):
    def index_locations(self) -> None:
        ...

    def comments(self) -> Iterable[Comment]:
        ...


def syntax_for_path(path: Path) -> Syntax:
    suffix = path.suffix.lower()
    if suffix in PYTHON_SUFFIXES:
        return "python"
    if suffix in HASH_SUFFIXES or path.name in HASH_FILENAMES:
        return "hash"
    if suffix in C_SUFFIXES:
        return "c"
    return "line"


def _python_comments(source: str) -> list[Comment]:
    out: list[Comment] = []
    readline = io.StringIO(source).readline
    try:
        for tok in tokenize.generate_tokens(readline):
            if tok.type == tokenize.COMMENT:
                out.append(Comment(line_number=tok.start[0], raw_text=tok.string))
    except (tokenize.TokenError, IndentationError, SyntaxError) as exc:
        raise SpellCheckError(f"unable to tokenize source: {exc}", ERR_VALIDATION, kind="parse_error") from exc
    return out


def _find_opener(line: str, markers: tuple[str, ...], blocks: bool) -> tuple[str, int] | None:
    """First comment opener outside a string literal that starts a token."""
    quote = ""
    i = 0
    while i < len(line):
        ch = line[i]
        if quote:
            if ch == "\\":
                i += 2
                continue
            if ch == quote:
                quote = ""
        elif ch in _QUOTES:
            quote = ch
        elif i == 0 or line[i - 1].isspace() or line[i - 1] in _OPENER_PREFIX:
            if blocks and line.startswith("/*", i):
                return "/*", i
            for marker in markers:
                if line.startswith(marker, i):
                    return marker, i
        i += 1
    return None


def _marked_comments(source: str, syntax: Syntax) -> list[Comment]:
    markers, blocks = _STYLES[syntax]
    out: list[Comment] = []
    in_block = False
    for lineno, line in enumerate(source.splitlines(), start=1):
        if in_block:
            end = _BLOCK_END_RE.search(line)
            if end:
                in_block = False
                out.append(Comment(lineno, end.group("body")))
            else:
                out.append(Comment(lineno, line))
            continue
        found = _find_opener(line, markers, blocks)
        if found is None:
            continue
        opener, col = found
        if opener == "/*":
            body = line[col + 2:]
            end = _BLOCK_END_RE.search(body)
            if end:
                out.append(Comment(lineno, end.group("body")))
            else:
                in_block = True
                out.append(Comment(lineno, body))
        else:
            out.append(Comment(lineno, line[col:]))
    return out


class SourceDocument:
    def __init__(self, source: str, syntax: Syntax = "python", path: Path | None = None) -> None:
        self.source = source
        self.syntax = syntax
        self.path = path
        self._comments: list[Comment] | None = None

    @classmethod
    def from_file(cls, path: str | Path, syntax: Syntax | None = None) -> "SourceDocument":
        target = Path(path)
        resolved: Syntax = syntax or syntax_for_path(target)
        return cls(target.read_text(encoding="utf-8", errors="replace"), resolved, path=target)

    def index_locations(self) -> None:
        if self.syntax == "python":
            self._comments = _python_comments(self.source)
        else:
            self._comments = _marked_comments(self.source, self.syntax)

    def comments(self) -> list[Comment]:
        if self._comments is None:
            raise RuntimeError("document locations are not indexed; call index_locations() first")
        return list(self._comments)
