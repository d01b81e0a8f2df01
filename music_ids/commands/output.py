"""Report rendering for the parse and scan commands."""

from __future__ import annotations

import json
from typing import Callable, Iterable

from music_ids.core.identifier import json_default

SCHEMA_VERSION = "v1"


def render_json(command: str, payload: dict) -> str:
    """Compact, key-sorted JSON envelope; identifiers serialize as their canonical string."""
    return json.dumps(
        {"schema_version": SCHEMA_VERSION, "command": command, "data": payload},
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=True,
        default=json_default,
    )


def emit_output(
    *,
    command: str,
    payload: dict,
    json_output: bool,
    output_sink: Callable[[str], object] = print,
    human_lines: Iterable[str] = (),
) -> None:
    """Write one JSON envelope, or the human-readable lines, to `output_sink`."""
    lines = [render_json(command, payload)] if json_output else human_lines
    for line in lines:
        output_sink(line)
