from __future__ import annotations

import subprocess
import time
from dataclasses import dataclass

TIMEOUT_CODE = 124
LAUNCH_FAILED_CODE = 127


@dataclass(frozen=True)
class CommandResult:
    code: int
    stdout: str
    stderr: str
    duration_ms: int
    timed_out: bool = False
    launch_failed: bool = False


def run_command(cmd: list[str], input_text: str = "", timeout_seconds: float = 0) -> CommandResult:
    started = time.monotonic()
    try:
        proc = subprocess.run(
            cmd,
            input=input_text,
            encoding="utf-8",
            errors="replace",
            capture_output=True,
            check=False,
            timeout=(timeout_seconds if timeout_seconds > 0 else None),
        )
    except subprocess.TimeoutExpired:
        # subprocess.run kills the child before re-raising; partial output is dropped.
        return CommandResult(
            code=TIMEOUT_CODE,
            stdout="",
            stderr=f"command timed out after {timeout_seconds}s",
            duration_ms=int((time.monotonic() - started) * 1000),
            timed_out=True,
        )
    except OSError as exc:
        return CommandResult(
            code=LAUNCH_FAILED_CODE,
            stdout="",
            stderr=f"failed to launch {cmd[0]}: {exc}",
            duration_ms=int((time.monotonic() - started) * 1000),
            launch_failed=True,
        )
    except UnicodeError as exc:
        return CommandResult(
            code=1,
            stdout="",
            stderr=f"unable to exchange text with {cmd[0]}: {exc}",
            duration_ms=int((time.monotonic() - started) * 1000),
        )
    return CommandResult(
        code=proc.returncode,
        stdout=proc.stdout or "",
        stderr=proc.stderr or "",
        duration_ms=int((time.monotonic() - started) * 1000),
    )
