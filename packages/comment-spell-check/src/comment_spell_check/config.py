"""Layered configuration: files, environment, then explicit overrides."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Mapping

import yaml

try:
    import tomllib  # type: ignore[attr-defined]
except ModuleNotFoundError:  # pragma: no cover - python<3.11
    import tomli as tomllib  # type: ignore[no-redef]

from .contracts import validate
from .core.env import getenv
from .core.errors import ConfigurationError, SpellCheckError
from .invoker import DEFAULT_TIMEOUT_SECONDS

CONFIG_SCHEMA = "comment-spell-check.config.v1"
PYPROJECT_TABLE = "comment-spell-check"
YAML_CONFIG_NAMES: tuple[str, ...] = (".comment-spell-check.yaml", ".comment-spell-check.yml")
ENV_EXECUTABLE = "COMMENT_SPELL_CHECK_EXECUTABLE"
ENV_TIMEOUT = "COMMENT_SPELL_CHECK_TIMEOUT"


@dataclass(frozen=True)
class CheckerConfig:
    executable: str | None = None
    args: tuple[str, ...] = ()
    stopwords: tuple[str, ...] = ()
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    sources: tuple[str, ...] = field(default=(), compare=False)

    def merged(self, raw: Mapping[str, Any], source: str) -> "CheckerConfig":
        return replace(
            self,
            executable=raw.get("executable", self.executable),
            args=tuple(raw.get("args", self.args)),
            stopwords=(*self.stopwords, *raw.get("stopwords", ())),
            timeout_seconds=float(raw.get("timeout_seconds", self.timeout_seconds)),
            sources=(*self.sources, source),
        )


def _validated(raw: Any, origin: str) -> dict[str, Any]:
    if raw is None:
        return {}
    try:
        validate(CONFIG_SCHEMA, raw)
    except SpellCheckError as exc:
        raise ConfigurationError(f"invalid configuration in {origin}: {exc}") from exc
    return dict(raw)


def load_pyproject(path: Path) -> dict[str, Any] | None:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise ConfigurationError(f"invalid TOML in {path}: {exc}") from exc
    table = data.get("tool", {}).get(PYPROJECT_TABLE)
    if table is None:
        return None
    return _validated(table, f"{path} [tool.{PYPROJECT_TABLE}]")


def load_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"invalid YAML in {path}: {exc}") from exc
    return _validated(data, str(path))


def load_config_file(path: Path) -> dict[str, Any]:
    if not path.is_file():
        raise ConfigurationError(f"config file not found: {path}")
    if path.suffix == ".toml":
        return load_pyproject(path) or {}
    return load_yaml(path)


def discover_config_file(root: Path) -> Path | None:
    for name in YAML_CONFIG_NAMES:
        candidate = root / name
        if candidate.is_file():
            return candidate
    pyproject = root / "pyproject.toml"
    if pyproject.is_file() and load_pyproject(pyproject) is not None:
        return pyproject
    return None


def _env_overrides() -> dict[str, Any]:
    raw: dict[str, Any] = {}
    executable = getenv(ENV_EXECUTABLE)
    if executable:
        raw["executable"] = executable
    timeout = getenv(ENV_TIMEOUT)
    if timeout:
        try:
            raw["timeout_seconds"] = float(timeout)
        except ValueError as exc:
            raise ConfigurationError(f"{ENV_TIMEOUT} must be a number, got `{timeout}`") from exc
    return _validated(raw, "environment")


def load_config(
    config_path: str | Path | None = None,
    root: str | Path | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> CheckerConfig:
    config = CheckerConfig()
    path = Path(config_path) if config_path else discover_config_file(Path(root) if root else Path.cwd())
    if path is not None:
        config = config.merged(load_config_file(path), str(path))
    env = _env_overrides()
    if env:
        config = config.merged(env, "environment")
    explicit = {
        key: list(value) if isinstance(value, tuple) else value
        for key, value in (overrides or {}).items()
        if value not in (None, (), [])
    }
    if explicit:
        config = config.merged(_validated(explicit, "command line"), "command line")
    return config
