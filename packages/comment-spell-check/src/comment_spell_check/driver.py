from __future__ import annotations

from .document import Document
from .hooks import ScanHooks
from .models import ScanAccumulator, ScanResult
from .processor import CommentProcessor
from .stopwords import parse_directive


class DocumentDriver:
    def __init__(self, processor: CommentProcessor, hooks: ScanHooks) -> None:
        self.processor = processor
        self.hooks = hooks

    def scan(self, document: Document) -> ScanResult:
        document.index_locations()
        acc = ScanAccumulator()
        stopwords = self.processor.stopwords.copy()
        self.hooks.on_document_start(document)
        for comment in document.comments():
            learned = parse_directive(comment.text)
            if learned is not None:
                stopwords.learn(learned)
                continue
            self.processor.process(comment, acc, stopwords)
        result = acc.freeze()
        self.hooks.on_document_end(result)
        return result
