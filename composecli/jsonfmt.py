"""JSON rendering of values, with optional indentation."""

from __future__ import annotations

import dataclasses
import json
from datetime import date, datetime, timedelta
from typing import Any

STANDARD_INDENTATION = "    "


def _default(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    if isinstance(obj, (datetime, date)):
        return obj.isoformat()
    if isinstance(obj, timedelta):
        return obj.total_seconds()
    if isinstance(obj, (set, frozenset)):
        return list(obj)
    raise TypeError(f"object of type {type(obj).__name__} is not JSON serializable")


def to_json(obj: Any, prefix: str, indentation: str) -> str:
    """Render the value as JSON followed by a newline.

    With an empty prefix and indentation the output is compact; otherwise each
    nested element starts a new line made of the prefix and the indentation.
    HTML characters and non-ASCII text are written as they are.
    """
    indented = bool(prefix or indentation)
    text = json.dumps(
        obj,
        default=_default,
        ensure_ascii=False,
        indent=indentation if indented else None,
        separators=(",", ": ") if indented else (",", ":"),
    )
    if prefix:
        text = text.replace("\n", "\n" + prefix)
    return text + "\n"


def to_standard_json(obj: Any) -> str:
    """Render the value as JSON indented with four spaces."""
    return to_json(obj, "", STANDARD_INDENTATION)