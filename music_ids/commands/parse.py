"""Parse command - parse identifiers given on the command line."""

from __future__ import annotations

from argparse import Namespace

from music_ids.commands.output import emit_output
from music_ids.core.identifier import Identifier
from music_ids.core.kinds import identifier_kind
from music_ids.errors import InvalidFormat, ValidationError
from music_ids.settings import Settings


def resolve_relaxed(args: Namespace, settings: Settings) -> bool:
    """CLI flag wins over settings."""
    relaxed = getattr(args, "relaxed", None)
    if relaxed is None:
        return settings.relaxed
    return relaxed


def identifier_payload(identifier: Identifier, output_format: str) -> dict:
    return {
        "kind": identifier.grammar.prefix,
        "value": identifier,
        "well_formed": identifier.well_formed,
        "rendered": identifier.format_as(output_format),
        "components": identifier.components(),
    }


def run_parse(
    args: Namespace,
    *,
    settings: Settings | None = None,
    output_sink=print,
) -> int:
    """Parse each value and emit its rendering."""
    settings = settings or Settings()
    kind = identifier_kind(args.kind)
    relaxed = resolve_relaxed(args, settings)
    output_format = getattr(args, "format", None) or settings.output_format
    json_output = getattr(args, "json", False)

    items: list[dict] = []
    human_lines: list[str] = []
    malformed = 0
    for raw in args.values:
        try:
            identifier = kind.parse(raw, relaxed=relaxed)
        except InvalidFormat as exc:
            malformed += 1
            items.append({"input": raw, "status": "INVALID", "error": str(exc)})
            human_lines.append(f"parse: error={exc}")
            continue

        item = {"input": raw, "status": "OK" if identifier.well_formed else "MALFORMED"}
        item.update(identifier_payload(identifier, output_format))
        items.append(item)
        if identifier.well_formed:
            human_lines.append(f"parse: {item['rendered']}")
        else:
            malformed += 1
            human_lines.append(f"parse: {item['rendered']} (not well-formed)")

    payload = {
        "kind": kind.grammar.prefix,
        "mode": "relaxed" if relaxed else "strict",
        "format": output_format,
        "parsed": len(items),
        "malformed": malformed,
        "items": items,
    }
    emit_output(
        command="parse",
        payload=payload,
        json_output=json_output,
        output_sink=output_sink,
        human_lines=human_lines,
    )
    if malformed and not relaxed:
        return ValidationError.exit_code
    return 0
