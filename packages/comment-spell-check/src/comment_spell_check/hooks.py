"""Scan lifecycle hooks invoked by the document driver."""

from __future__ import annotations

from typing import Protocol

from .document import Document
from .models import CommentFailure, ScanResult
from .report import OutputSink, render_comment_line, render_summary


class ScanHooks(Protocol):
    def on_document_start(self, document: Document) -> None:
        ...

    def on_comment_failure(self, failure: CommentFailure) -> None:
        ...

    def on_document_end(self, result: ScanResult) -> None:
        ...


class NullHooks:
    def on_document_start(self, document: Document) -> None:
        return None

    def on_comment_failure(self, failure: CommentFailure) -> None:
        return None

    def on_document_end(self, result: ScanResult) -> None:
        return None


class ReportHooks:
    """Streams one line per failing comment, then the frequency summary."""

    def __init__(self, sink: OutputSink, header: str | None = None) -> None:
        self.sink = sink
        self.header = header

    def on_document_start(self, document: Document) -> None:
        if self.header:
            self.sink.write(self.header)

    def on_comment_failure(self, failure: CommentFailure) -> None:
        self.sink.write(render_comment_line(failure.line, failure.counts))

    def on_document_end(self, result: ScanResult) -> None:
        if result.counts:
            self.sink.write(render_summary(result.counts))
        self.sink.flush()
