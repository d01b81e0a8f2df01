"""Scan command - read ISRC tags from audio files and check them."""

from __future__ import annotations

from argparse import Namespace
import logging
from pathlib import Path

from music_ids.commands.output import emit_output
from music_ids.commands.parse import resolve_relaxed
from music_ids.errors import IOFailure, InvalidFormat, ValidationError
from music_ids.services.tag_reader import (
    TagReader,
    get_tag_reader,
    iter_audio_files,
    read_track_isrcs,
)
from music_ids.settings import Settings

logger = logging.getLogger(__name__)


def run_scan(
    args: Namespace,
    *,
    settings: Settings | None = None,
    reader: TagReader | None = None,
    output_sink=print,
) -> int:
    """Scan audio files for ISRC tags and report their well-formedness."""
    settings = settings or Settings()
    reader = reader or get_tag_reader(settings.tag_reader_backend)
    relaxed = resolve_relaxed(args, settings)
    output_format = getattr(args, "format", None) or settings.output_format
    json_output = getattr(args, "json", False)
    roots = [Path(path) for path in args.paths]

    items: list[dict] = []
    human_lines: list[str] = []
    files = 0
    tagged = 0
    malformed = 0
    errors = 0

    present = []
    for root in roots:
        if root.is_symlink() or root.exists():
            present.append(root)
            continue
        exc = IOFailure(f"Path does not exist: {root}")
        logger.warning("Skipping %s: %s", root, exc)
        errors += 1
        items.append({"path": str(root), "status": "ERROR", "error": str(exc)})
        human_lines.append(f"scan: {root} error={exc}")

    for path in iter_audio_files(present):
        files += 1
        try:
            results = read_track_isrcs(path, reader, relaxed=relaxed)
        except IOFailure as exc:
            logger.warning("Skipping %s: %s", path, exc)
            errors += 1
            items.append({"path": str(path), "status": "ERROR", "error": str(exc)})
            human_lines.append(f"scan: {path} error={exc}")
            continue
        except InvalidFormat as exc:
            malformed += 1
            items.append({"path": str(path), "status": "INVALID", "error": str(exc)})
            human_lines.append(f"scan: {path} error={exc}")
            continue

        if results:
            tagged += 1
        for result in results:
            status = "OK" if result.well_formed else "MALFORMED"
            if not result.well_formed:
                malformed += 1
            rendered = result.isrc.format_as(output_format)
            items.append(
                {
                    "path": str(path),
                    "status": status,
                    "raw": result.raw,
                    "value": result.isrc,
                    "rendered": rendered,
                }
            )
            suffix = "" if result.well_formed else " (not well-formed)"
            human_lines.append(f"scan: {path} {rendered}{suffix}")

    payload = {
        "mode": "relaxed" if relaxed else "strict",
        "files": files,
        "tagged": tagged,
        "malformed": malformed,
        "errors": errors,
        "items": items,
    }
    human_lines.append(
        f"scan: files={files} tagged={tagged} malformed={malformed} errors={errors}"
    )
    emit_output(
        command="scan",
        payload=payload,
        json_output=json_output,
        output_sink=output_sink,
        human_lines=human_lines,
    )
    if errors:
        return IOFailure.exit_code
    if malformed and not relaxed:
        return ValidationError.exit_code
    return 0
