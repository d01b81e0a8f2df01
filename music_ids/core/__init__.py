"""Identifier grammars, the shared parsing engine, and concrete kinds."""

from .grammar import Block, CharClass, Grammar
from .identifier import Identifier, OutputFormat, json_default
from .isrc import ISRC
from .grid import GRid
from .kinds import KINDS, identifier_kind

__all__ = [
    "Block",
    "CharClass",
    "Grammar",
    "Identifier",
    "OutputFormat",
    "json_default",
    "ISRC",
    "GRid",
    "KINDS",
    "identifier_kind",
]
