from __future__ import annotations

import json
from pathlib import Path
from typing import Any, NoReturn

from .errors import MalformedDocumentError


def read_json(path: Path) -> Any:
    """
    Read and parse a whole JSON file.

    OSError (missing file included) propagates. Content that is not valid
    JSON, an empty file among it, raises MalformedDocumentError. So do the
    NaN / Infinity / -Infinity literals json.loads would otherwise accept.
    """
    raw = path.read_text(encoding="utf-8")

    def _reject_constant(name: str) -> NoReturn:
        raise MalformedDocumentError(path, f"invalid JSON: non-standard literal {name}")

    try:
        return json.loads(raw, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise MalformedDocumentError(path, f"invalid JSON: {exc}") from exc


def dump_json(payload: Any, *, indent: int = 4) -> str:
    return json.dumps(payload, indent=indent, ensure_ascii=False, allow_nan=False) + "\n"


def atomic_write_json(path: Path, payload: Any, *, indent: int = 4) -> None:
    """
    Atomically write JSON to disk by writing to a temp file then replacing.

    The payload is serialized before the temp file is opened, so an
    unserializable value leaves both files untouched.
    """
    text = dump_json(payload, indent=indent)
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    with tmp_path.open("w", encoding="utf-8") as f:
        f.write(text)
    tmp_path.replace(path)
