"""JSON encoding shared by the CLI payloads and structured log lines."""

from __future__ import annotations

import json
from typing import Any


def dumps_json(payload: Any) -> str:
    """One-line, key-sorted JSON; misspelled words keep their original characters."""
    return json.dumps(payload, sort_keys=True, ensure_ascii=False, default=str)
