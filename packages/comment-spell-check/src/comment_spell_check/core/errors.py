from __future__ import annotations

from dataclasses import dataclass

from .exit_codes import ERR_CONFIG, ERR_ENGINE


@dataclass
class SpellCheckError(Exception):
    message: str
    code: int
    kind: str = "generic_error"

    def __str__(self) -> str:
        return self.message


class ConfigurationError(SpellCheckError):
    def __init__(self, message: str, code: int = ERR_CONFIG, kind: str = "configuration_error") -> None:
        super().__init__(message, code, kind)


class EngineInvocationError(SpellCheckError):
    """Per-call engine failure; carried in an ``Err`` rather than raised through a scan."""

    def __init__(self, message: str, reason: str, code: int = ERR_ENGINE, kind: str = "engine_invocation_error") -> None:
        super().__init__(message, code, kind)
        self.reason = reason
