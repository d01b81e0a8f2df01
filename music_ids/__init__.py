"""Well-formedness parsing and canonical rendering of ISRC and GRid codes."""

__version__ = "0.1.0"

from .core import (
    Block,
    CharClass,
    GRid,
    Grammar,
    ISRC,
    Identifier,
    OutputFormat,
    identifier_kind,
    json_default,
)
from .errors import InvalidFormat, MusicIdsError, UnsupportedFormat

__all__ = [
    "__version__",
    "Block",
    "CharClass",
    "GRid",
    "Grammar",
    "ISRC",
    "Identifier",
    "OutputFormat",
    "identifier_kind",
    "json_default",
    "InvalidFormat",
    "MusicIdsError",
    "UnsupportedFormat",
]
