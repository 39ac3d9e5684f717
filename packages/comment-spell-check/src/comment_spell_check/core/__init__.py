"""comment_spell_check core package."""
from .context import RunContext
from .clock import utc_now_iso
from .errors import ConfigurationError, EngineInvocationError, SpellCheckError
from .logging import log_event
from .process import CommandResult, run_command
from .result import Err, Ok, Result
from .serialize import dumps_json

__all__ = [
    "RunContext",
    "utc_now_iso",
    "ConfigurationError",
    "EngineInvocationError",
    "SpellCheckError",
    "log_event",
    "CommandResult",
    "run_command",
    "Err",
    "Ok",
    "Result",
    "dumps_json",
]
