"""Lookup of identifier kinds by name."""

from __future__ import annotations

from music_ids.core.grid import GRid
from music_ids.core.identifier import Identifier
from music_ids.core.isrc import ISRC
from music_ids.errors import ValidationError

KINDS: dict[str, type[Identifier]] = {
    "isrc": ISRC,
    "grid": GRid,
}


def identifier_kind(name: str) -> type[Identifier]:
    """Resolve a kind name (case-insensitive) to its identifier class."""
    try:
        return KINDS[name.lower()]
    except KeyError:
        raise ValidationError(
            f"Unknown identifier kind: {name!r} (expected one of {sorted(KINDS)})"
        ) from None
