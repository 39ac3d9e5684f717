from __future__ import annotations

import argparse
import sys
from pathlib import Path

from . import __version__
from .checker import CommentSpellChecker
from .config import load_config
from .contracts import validate
from .core.context import RunContext
from .core.errors import SpellCheckError
from .core.exit_codes import ERR_FINDINGS, ERR_INTERNAL, ERR_USAGE, OK
from .core.logging import log_event
from .core.serialize import dumps_json
from .hooks import NullHooks, ReportHooks
from .report import StreamSink
from .stopwords import Stopwords

TOOL = "comment-spell-check"
REPORT_SCHEMA = "comment-spell-check.report.v1"


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog=TOOL, description="Spell-check source comments with a system spell checker.")
    p.add_argument("--version", action="version", version=f"{TOOL} {__version__}")
    p.add_argument("files", nargs="+", help="source files to check")
    p.add_argument("--config", help="config file (.comment-spell-check.yaml or pyproject.toml)")
    p.add_argument("--executable", help="spell checker to run instead of the auto-detected one")
    p.add_argument("--arg", dest="args", action="append", default=[], help="extra argument for the spell checker (repeatable; use --arg=-d for dash-leading values)")
    p.add_argument("--stopword", dest="stopwords", action="append", default=[], help="word to never report (repeatable)")
    p.add_argument("--timeout", dest="timeout_seconds", type=float, help="per-comment engine timeout in seconds")
    p.add_argument("--syntax", choices=["auto", "python", "hash", "c", "line"], default="auto", help="comment syntax of the inputs (auto picks by file name)")
    p.add_argument("--json", action="store_true", help="emit a JSON report instead of text")
    p.add_argument("--log-json", action="store_true", help="emit structured logs as JSON lines")
    p.add_argument("--run-id", help="run identifier for log events")
    vg = p.add_mutually_exclusive_group()
    vg.add_argument("--verbose", action="store_true", help="enable verbose diagnostics")
    vg.add_argument("--quiet", action="store_true", help="only emit warnings and errors")
    return p


def render_error(*, as_json: bool, message: str, code: int, kind: str = "generic_error") -> str:
    if as_json:
        return dumps_json(
            {
                "schema_version": 1,
                "tool": TOOL,
                "status": "error",
                "errors": [{"code": code, "kind": kind, "message": message}],
            }
        )
    return f"{TOOL}: {message}"


def _run(ctx: RunContext, ns: argparse.Namespace) -> int:
    config = load_config(
        ns.config,
        overrides={
            "executable": ns.executable,
            "args": ns.args,
            "stopwords": ns.stopwords,
            "timeout_seconds": ns.timeout_seconds,
        },
    )
    checker = CommentSpellChecker(
        executable=config.executable,
        extra_args=config.args,
        stopwords=Stopwords(config.stopwords),
        sink=StreamSink(sys.stdout),
        ctx=ctx,
        timeout_seconds=config.timeout_seconds,
    )
    syntax = None if ns.syntax == "auto" else ns.syntax
    files: list[dict[str, object]] = []
    for raw in ns.files:
        path = Path(raw)
        if not path.is_file():
            print(render_error(as_json=ns.json, message=f"no such file: {raw}", code=ERR_USAGE, kind="usage_error"), file=sys.stderr)
            return ERR_USAGE
        if ns.json:
            hooks = NullHooks()
        else:
            hooks = ReportHooks(checker.sink, header=(f"==> {raw} <==\n" if len(ns.files) > 1 else None))
        result = checker.parse_from_file(path, syntax, hooks)
        files.append({"path": raw, **result.to_dict()})
    failed = any(row["fails"] for row in files)
    if ns.json:
        payload = {
            "schema_version": 1,
            "tool": TOOL,
            "status": "fail" if failed else "ok",
            "run_id": ctx.run_id,
            "files": files,
        }
        validate(REPORT_SCHEMA, payload)
        print(dumps_json(payload))
    return ERR_FINDINGS if failed else OK


def main(argv: list[str] | None = None) -> int:
    ns = build_parser().parse_args(argv)
    ctx = RunContext.from_args(ns.run_id, ns.log_json, ns.quiet, ns.verbose)
    try:
        return _run(ctx, ns)
    except SpellCheckError as exc:
        log_event(ctx, "error", "cli", "failed", kind=exc.kind, code=exc.code)
        print(render_error(as_json=ns.json, message=str(exc), code=exc.code, kind=exc.kind), file=sys.stderr)
        return exc.code
    except Exception as exc:  # pragma: no cover
        print(render_error(as_json=ns.json, message=f"internal error: {exc}", code=ERR_INTERNAL), file=sys.stderr)
        return ERR_INTERNAL


if __name__ == "__main__":
    raise SystemExit(main())
