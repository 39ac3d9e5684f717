from __future__ import annotations

import inspect
import sys
from typing import TYPE_CHECKING

from .clock import utc_now_iso
from .serialize import dumps_json

if TYPE_CHECKING:
    from .context import RunContext

_ALWAYS_EMITTED = {"warn", "error"}


def log_event(ctx: RunContext, level: str, component: str, action: str, **fields: object) -> None:
    if ctx.quiet and level not in _ALWAYS_EMITTED:
        return
    caller = inspect.stack()[1]
    payload = {
        "ts": utc_now_iso(),
        "level": level,
        "run_id": ctx.run_id,
        "component": component,
        "action": action,
        "file": caller.filename,
        "line": caller.lineno,
        **fields,
    }
    if ctx.log_json:
        sys.stderr.write(dumps_json(payload) + "\n")
        return
    core = f"ts={payload['ts']} level={level} run_id={ctx.run_id} component={component} action={action}"
    extras = " ".join(f"{key}={value}" for key, value in sorted(fields.items()))
    sys.stderr.write((core if not extras else f"{core} {extras}") + "\n")
