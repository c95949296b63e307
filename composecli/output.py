"""Printing of lists in pretty, JSON or legacy template JSON form."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any, TextIO

from composecli.errors import ParsingFailedError
from composecli.jsonfmt import to_json, to_standard_json
from composecli.tabwriter import TabWriter, print_pretty_section

JSON = "json"
"""JSON output of list commands."""
TEMPLATE_LEGACY_JSON = "{{json.}}"
"""The older template form asking for one JSON object per line."""
PRETTY = "pretty"
"""Default tabular output of list commands."""


def print_formatted(
    obj: Any,
    fmt: str,
    out: TextIO,
    writer_fn: Callable[[TabWriter], None],
    *args: str,
) -> None:
    """Print ``obj`` in the named format.

    The pretty format prints the headers in ``args`` and the rows written by
    ``writer_fn``. Raises ParsingFailedError for an unknown format.
    """
    kind = fmt.lower()
    is_list = isinstance(obj, (list, tuple))
    if kind in (PRETTY, ""):
        print_pretty_section(out, writer_fn, *args)
    elif kind == TEMPLATE_LEGACY_JSON:
        if is_list:
            for item in obj:
                out.write(to_json(item, "", ""))
        else:
            out.write(to_standard_json(obj) + "\n")
    elif kind == JSON:
        if is_list:
            out.write(to_json(list(obj), "", ""))
        else:
            out.write(to_standard_json(obj) + "\n")
    else:
        raise ParsingFailedError(f"format value {json.dumps(fmt)} could not be parsed")