from __future__ import annotations

from comment_spell_check.core.errors import EngineInvocationError
from comment_spell_check.document import Comment
from comment_spell_check.core.result import Err, Ok
from comment_spell_check.invoker import CheckResult

MISSPELLED = {"abstraktion", "bsaic", "hmubug", "incpetion", "kepe", "ssshtuff", "thsi", "tset", "voreflow", "warppying", "wrods"}


class FakeEngine:
    """Reports tokens found in ``misspelled``; texts containing a ``failing`` marker yield an engine error."""

    def __init__(self, misspelled: set[str] | None = None, failing: tuple[str, ...] = ()) -> None:
        self.misspelled = misspelled if misspelled is not None else set(MISSPELLED)
        self.failing = failing
        self.calls: list[str] = []

    def check_text(self, text: str) -> CheckResult:
        self.calls.append(text)
        if any(marker in text for marker in self.failing):
            return Err(EngineInvocationError("spellchecker had errors: boom", reason="stderr"))
        words = [token.strip(".,;:!?") for token in text.split()]
        return Ok([word for word in words if word in self.misspelled])


class ScriptedEngine:
    """Returns canned word lists in call order."""

    def __init__(self, outputs: list[list[str]]) -> None:
        self.outputs = list(outputs)
        self.calls: list[str] = []

    def check_text(self, text: str) -> CheckResult:
        self.calls.append(text)
        return Ok(list(self.outputs.pop(0)) if self.outputs else [])


class ListDocument:
    """In-memory document; counts how often the driver indexes it."""

    def __init__(self, comments: list[Comment]) -> None:
        self._comments = comments
        self.indexed = 0

    def index_locations(self) -> None:
        self.indexed += 1

    def comments(self) -> list[Comment]:
        return list(self._comments)
