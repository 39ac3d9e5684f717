from __future__ import annotations

from pathlib import Path

import pytest

from comment_spell_check.config import DEFAULT_TIMEOUT_SECONDS, discover_config_file, load_config
from comment_spell_check.core.errors import ConfigurationError


def test_defaults_without_any_config(tmp_path: Path) -> None:
    config = load_config(root=tmp_path)
    assert config.executable is None
    assert config.args == ()
    assert config.stopwords == ()
    assert config.timeout_seconds == DEFAULT_TIMEOUT_SECONDS
    assert config.sources == ()


def test_yaml_config_is_discovered(tmp_path: Path) -> None:
    (tmp_path / ".comment-spell-check.yaml").write_text(
        "executable: hunspell\nargs: ['-d', 'en_GB']\nstopwords: [kubectl, helm]\ntimeout_seconds: 3\n",
        encoding="utf-8",
    )
    config = load_config(root=tmp_path)
    assert config.executable == "hunspell"
    assert config.args == ("-d", "en_GB")
    assert config.stopwords == ("kubectl", "helm")
    assert config.timeout_seconds == 3.0


def test_pyproject_table_is_used_when_present(tmp_path: Path) -> None:
    pyproject = tmp_path / "pyproject.toml"
    pyproject.write_text('[tool.comment-spell-check]\nexecutable = "aspell"\nargs = ["--lang=en_GB"]\n', encoding="utf-8")
    assert discover_config_file(tmp_path) == pyproject
    config = load_config(root=tmp_path)
    assert config.executable == "aspell"
    assert config.args == ("--lang=en_GB",)


def test_pyproject_without_table_is_ignored(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text('[project]\nname = "x"\n', encoding="utf-8")
    assert discover_config_file(tmp_path) is None


def test_environment_and_overrides_take_precedence(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    cfg = tmp_path / "speller.yaml"
    cfg.write_text("executable: hunspell\nstopwords: [helm]\n", encoding="utf-8")
    monkeypatch.setenv("COMMENT_SPELL_CHECK_EXECUTABLE", "ispell")
    monkeypatch.setenv("COMMENT_SPELL_CHECK_TIMEOUT", "2.5")
    config = load_config(cfg, overrides={"executable": "aspell", "args": ["-x"], "stopwords": ["kepe"], "timeout_seconds": None})
    assert config.executable == "aspell"
    assert config.args == ("-x",)
    assert config.stopwords == ("helm", "kepe")
    assert config.timeout_seconds == 2.5
    assert config.sources == (str(cfg), "environment", "command line")


def test_unknown_keys_are_rejected(tmp_path: Path) -> None:
    cfg = tmp_path / "bad.yaml"
    cfg.write_text("executable: aspell\ndictionary: en\n", encoding="utf-8")
    with pytest.raises(ConfigurationError, match="invalid configuration"):
        load_config(cfg)


def test_invalid_types_are_rejected(tmp_path: Path) -> None:
    cfg = tmp_path / "bad.yaml"
    cfg.write_text("timeout_seconds: -1\n", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_config(cfg)


def test_malformed_yaml_and_missing_files(tmp_path: Path) -> None:
    cfg = tmp_path / "broken.yaml"
    cfg.write_text("args: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigurationError, match="invalid YAML"):
        load_config(cfg)
    with pytest.raises(ConfigurationError, match="not found"):
        load_config(tmp_path / "nope.yaml")


def test_non_numeric_timeout_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COMMENT_SPELL_CHECK_TIMEOUT", "soon")
    with pytest.raises(ConfigurationError, match="must be a number"):
        load_config(root=tmp_path)
