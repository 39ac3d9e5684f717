"""Check comment words against a system spell checker.

Typical use::

    checker = CommentSpellChecker(executable="aspell", extra_args=["--lang=en_GB"])
    buf = checker.set_output_string()
    result = checker.parse_from_file("path/to/module.py")
    # buf.getvalue() holds the text report, result.to_dict() the structured counts
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence, TextIO

from .core.context import RunContext
from .core.logging import log_event
from .document import Document, SourceDocument, Syntax
from .driver import DocumentDriver
from .engine import SpellEngineConfig, resolve_engine
from .hooks import ReportHooks, ScanHooks
from .invoker import DEFAULT_TIMEOUT_SECONDS, SpellEngine, SubprocessSpellEngine
from .models import ScanResult
from .processor import CommentProcessor
from .report import OutputSink, StreamSink, StringSink
from .stopwords import Stopwords


class CommentSpellChecker:
    def __init__(
        self,
        executable: str | None = None,
        extra_args: Sequence[str] = (),
        stopwords: Stopwords | None = None,
        sink: OutputSink | None = None,
        ctx: RunContext | None = None,
        engine: SpellEngine | None = None,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self.executable = executable
        self.extra_args = tuple(extra_args)
        self.stopwords = stopwords if stopwords is not None else Stopwords()
        self.sink: OutputSink = sink if sink is not None else StreamSink()
        self.ctx = ctx if ctx is not None else RunContext.from_args()
        self.timeout_seconds = timeout_seconds
        self._engine = engine
        self._engine_config: SpellEngineConfig | None = None

    @property
    def engine_config(self) -> SpellEngineConfig:
        """Resolved once per checker; raises ``ConfigurationError`` when no engine is usable."""
        if self._engine_config is None:
            self._engine_config = resolve_engine(self.executable, self.extra_args)
            if self.ctx.verbose:
                log_event(self.ctx, "info", "engine", "resolved", command=" ".join(self._engine_config.command))
        return self._engine_config

    @property
    def engine(self) -> SpellEngine:
        if self._engine is None:
            self._engine = SubprocessSpellEngine(self.engine_config, self.ctx, self.timeout_seconds)
        return self._engine

    def set_output_string(self) -> StringSink:
        sink = StringSink()
        self.sink = sink
        return sink

    def set_output_stream(self, stream: TextIO) -> StreamSink:
        sink = StreamSink(stream)
        self.sink = sink
        return sink

    def parse_from_document(self, document: Document, hooks: ScanHooks | None = None) -> ScanResult:
        engine = self.engine
        scan_hooks = hooks if hooks is not None else ReportHooks(self.sink)
        processor = CommentProcessor(engine, self.stopwords, scan_hooks)
        result = DocumentDriver(processor, scan_hooks).scan(document)
        if self.ctx.verbose:
            log_event(
                self.ctx,
                "info",
                "checker",
                "scan-complete",
                fails=len(result.fails),
                words=sum(result.counts.values()),
            )
        return result

    def parse_from_file(self, path: str | Path, syntax: Syntax | None = None, hooks: ScanHooks | None = None) -> ScanResult:
        return self.parse_from_document(SourceDocument.from_file(path, syntax), hooks)

    def parse_from_string(self, source: str, syntax: Syntax = "python", hooks: ScanHooks | None = None) -> ScanResult:
        return self.parse_from_document(SourceDocument(source, syntax), hooks)
