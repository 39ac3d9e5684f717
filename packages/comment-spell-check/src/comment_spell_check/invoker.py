from __future__ import annotations

from typing import Protocol

from .core.context import RunContext
from .core.errors import EngineInvocationError
from .core.logging import log_event
from .core.process import run_command
from .core.result import Err, Ok, Result
from .engine import SpellEngineConfig

DEFAULT_TIMEOUT_SECONDS = 10

CheckResult = Result[list[str], EngineInvocationError]


class SpellEngine(Protocol):
    def check_text(self, text: str) -> CheckResult:
        ...


def parse_engine_output(stdout: str) -> list[str]:
    words: list[str] = []
    for line in stdout.splitlines():
        word = line.rstrip()
        if word:
            words.append(word)
    return words


class SubprocessSpellEngine:
    def __init__(
        self,
        config: SpellEngineConfig,
        ctx: RunContext,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self.config = config
        self.ctx = ctx
        self.timeout_seconds = timeout_seconds

    def check_text(self, text: str) -> CheckResult:
        if not text.strip():
            return Ok([])
        result = run_command(self.config.command, input_text=text, timeout_seconds=self.timeout_seconds)
        if result.timed_out:
            return self._fail("timeout", result.stderr, result.duration_ms)
        if result.launch_failed:
            return self._fail("launch-failed", result.stderr, result.duration_ms)
        if result.stderr:
            # stdout may hold valid words here; they are discarded with the rest of the call.
            return self._fail("stderr", f"spellchecker had errors: {result.stderr.strip()}", result.duration_ms)
        words = parse_engine_output(result.stdout)
        if self.ctx.verbose:
            log_event(
                self.ctx,
                "info",
                "engine",
                "check-text",
                executable=self.config.executable,
                code=result.code,
                words=len(words),
                duration_ms=result.duration_ms,
            )
        return Ok(words)

    def _fail(self, reason: str, message: str, duration_ms: int) -> CheckResult:
        log_event(
            self.ctx,
            "warn",
            "engine",
            "check-text-failed",
            executable=self.config.executable,
            reason=reason,
            error=message,
            duration_ms=duration_ms,
        )
        return Err(EngineInvocationError(message, reason=reason))
