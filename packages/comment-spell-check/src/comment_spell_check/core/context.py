from __future__ import annotations

from dataclasses import dataclass

from .clock import utc_now
from .env import getenv


@dataclass(frozen=True)
class RunContext:
    run_id: str
    log_json: bool = False
    quiet: bool = False
    verbose: bool = False

    @classmethod
    def from_args(
        cls,
        run_id: str | None = None,
        log_json: bool = False,
        quiet: bool = False,
        verbose: bool = False,
    ) -> "RunContext":
        default_run = f"css-{utc_now().strftime('%Y%m%d-%H%M%S')}"
        resolved_run_id = run_id or getenv("RUN_ID", default_run) or default_run
        return cls(
            run_id=resolved_run_id,
            log_json=log_json,
            quiet=quiet,
            verbose=verbose,
        )
