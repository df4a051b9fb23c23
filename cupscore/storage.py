"""JSON document helpers shared by the game and tournament stores."""

from __future__ import annotations

import json
import os
import re
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Any

SAFE_ID_RE = re.compile(r"^[A-Za-z0-9_-]+$")


def sanitize_id(value: str, *, kind: str = "id") -> str:
    """Restrict document ids to filesystem-safe characters."""

    if not SAFE_ID_RE.match(value or ""):
        raise ValueError(f"Invalid {kind} for filesystem usage: {value!r}")
    return value


def write_json_atomic(path: Path, payload: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with NamedTemporaryFile(
        "w", dir=path.parent, delete=False, encoding="utf-8", suffix=".tmp"
    ) as tmp:
        json.dump(payload, tmp, indent=2, sort_keys=True)
        tmp.flush()
        os.fsync(tmp.fileno())
        temp_name = tmp.name
    os.replace(temp_name, path)


def read_json(path: Path) -> Any | None:
    if not path.exists():
        return None
    return json.loads(path.read_text(encoding="utf-8"))


__all__ = ["SAFE_ID_RE", "read_json", "sanitize_id", "write_json_atomic"]
