"""Spell-check engine discovery and command assembly."""

from __future__ import annotations

import os
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Sequence

from .core.errors import ConfigurationError

Which = Callable[[str], "str | None"]

CANDIDATES: tuple[str, ...] = ("spell", "aspell", "ispell", "hunspell")

BASE_ARGS: dict[str, tuple[str, ...]] = {
    "spell": (),
    # aspell reads a personal wordlist by default; point it at the null device so runs are reproducible.
    "aspell": ("list", "-l", "en", "-p", os.devnull),
    "ispell": ("-l",),
    "hunspell": ("-l",),
}


@dataclass(frozen=True)
class SpellEngineConfig:
    executable: str
    base_args: tuple[str, ...] = ()
    extra_args: tuple[str, ...] = ()

    @property
    def args(self) -> tuple[str, ...]:
        return (*self.base_args, *self.extra_args)

    @property
    def command(self) -> list[str]:
        return [self.executable, *self.args]

    def to_dict(self) -> dict[str, object]:
        return {"executable": self.executable, "args": list(self.args)}


def resolve_executable(candidates: Sequence[str] = CANDIDATES, which: Which = shutil.which) -> str:
    for candidate in candidates:
        if which(candidate):
            return candidate
    raise ConfigurationError(f"cannot determine a spell checker automatically (tried: {', '.join(candidates)})")


def resolve_base_args(executable: str) -> tuple[str, ...]:
    return BASE_ARGS.get(Path(executable).name, ())


def resolve_engine(
    executable: str | None = None,
    extra_args: Sequence[str] = (),
    which: Which = shutil.which,
) -> SpellEngineConfig:
    if executable:
        if not which(executable):
            raise ConfigurationError(f"spell checker `{executable}` is not on PATH")
        resolved = executable
    else:
        resolved = resolve_executable(which=which)
    return SpellEngineConfig(
        executable=resolved,
        base_args=resolve_base_args(resolved),
        extra_args=tuple(extra_args),
    )
