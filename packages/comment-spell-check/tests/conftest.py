from __future__ import annotations

import os
import socket
import stat
import sys
from pathlib import Path

import pytest
from hypothesis import settings

from comment_spell_check.core.context import RunContext

from helpers import MISSPELLED, FakeEngine

_ALLOWED_MARKERS = {"unit", "integration", "slow"}

settings.register_profile("comment-spell-check", deadline=None, max_examples=60)
settings.load_profile("comment-spell-check")

FAKE_ENGINE_SCRIPT = """\
#!{python}
import sys
import time

BAD = {bad!r}

text = sys.stdin.read()
if "SLEEPY" in text:
    time.sleep(30)
if "NOISY" in text:
    print("thsi")
    sys.stderr.write("Error: engine hiccup\\n")
    sys.exit(0)
if "latinate" in text:
    sys.stdout.buffer.write(b"caf\\xe9\\n")
    sys.exit(0)
for token in text.split():
    word = token.strip(".,;:!?")
    if word in BAD:
        print(word)
if "EXITCODE" in text:
    sys.exit(1)
"""


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        names = {mark.name for mark in item.iter_markers()}
        if not names.intersection(_ALLOWED_MARKERS):
            item.add_marker("unit")


@pytest.fixture(autouse=True)
def no_network_for_unit(request: pytest.FixtureRequest, monkeypatch: pytest.MonkeyPatch) -> None:
    if request.node.get_closest_marker("integration") or request.node.get_closest_marker("slow"):
        return

    def _blocked(*_args: object, **_kwargs: object) -> socket.socket:
        raise RuntimeError("network disabled in unit tests")

    monkeypatch.setattr(socket, "create_connection", _blocked)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("RUN_ID", "COMMENT_SPELL_CHECK_EXECUTABLE", "COMMENT_SPELL_CHECK_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fake_engine() -> FakeEngine:
    return FakeEngine()


@pytest.fixture
def ctx() -> RunContext:
    return RunContext.from_args("pytest-run")


@pytest.fixture
def fake_bin(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Directory holding a scripted ``aspell`` stand-in, placed first on PATH."""
    if os.name != "posix":
        pytest.skip("fake executables need a POSIX shebang")
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    script = bin_dir / "aspell"
    script.write_text(FAKE_ENGINE_SCRIPT.format(python=sys.executable, bad=sorted(MISSPELLED)), encoding="utf-8")
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    monkeypatch.setenv("PATH", f"{bin_dir}{os.pathsep}{os.environ.get('PATH', '')}")
    return bin_dir


@pytest.fixture
def empty_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    empty = tmp_path / "empty-bin"
    empty.mkdir()
    monkeypatch.setenv("PATH", str(empty))
    return empty
