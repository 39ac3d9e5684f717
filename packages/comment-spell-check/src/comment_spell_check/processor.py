from __future__ import annotations

from .core.result import Err
from .document import Comment
from .hooks import ScanHooks
from .invoker import SpellEngine
from .models import CommentFailure, ScanAccumulator
from .stopwords import Stopwords


class CommentProcessor:
    def __init__(self, engine: SpellEngine, stopwords: Stopwords, hooks: ScanHooks) -> None:
        self.engine = engine
        self.stopwords = stopwords
        self.hooks = hooks

    def process(self, comment: Comment, acc: ScanAccumulator, stopwords: Stopwords | None = None) -> CommentFailure | None:
        text = (stopwords or self.stopwords).strip(comment.text)
        outcome = self.engine.check_text(text)
        if isinstance(outcome, Err):
            # Already logged by the engine; this comment contributes no words.
            return None
        fail = acc.record(comment.line_number, outcome.value)
        if fail is not None:
            self.hooks.on_comment_failure(fail)
        return fail
