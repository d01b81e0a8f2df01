"""Fixed-width block grammars for music identifiers.

A grammar is a prefix token (e.g. "ISRC") plus an ordered tuple of blocks.
Each block has a fixed width and is either constrained to a character class
or pinned to a literal. From that declaration a grammar derives:

- the anchored matcher accepting `TOKEN:` (optional) followed by the blocks
  either fully hyphenated or not hyphenated at all
- the canonicalizer (prefix stripped, hyphens stripped, uppercased)
- block offsets for slicing a canonical string into components
- the hyphenated display rendering and a shape description for errors

All functions are pure.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from functools import cached_property
from typing import Optional


class CharClass(str, Enum):
    """Character classes a block may be constrained to."""

    ALPHA = "[A-Z]"
    ALNUM = "[A-Z0-9]"
    DIGIT = "[0-9]"


_SHAPE_SYMBOLS = {
    CharClass.ALPHA: "A",
    CharClass.ALNUM: "X",
    CharClass.DIGIT: "9",
}


@dataclass(frozen=True)
class Block:
    """One fixed-width segment of an identifier."""

    name: str
    width: int
    charset: CharClass = CharClass.ALNUM
    literal: Optional[str] = None

    def __post_init__(self) -> None:
        if self.width < 1:
            raise ValueError(f"Block {self.name!r} must be at least one character wide")
        if self.literal is not None and len(self.literal) != self.width:
            raise ValueError(
                f"Literal {self.literal!r} for block {self.name!r} must be {self.width} characters"
            )

    @property
    def pattern(self) -> str:
        """Regex fragment matching exactly this block (uppercase input)."""
        if self.literal is not None:
            return re.escape(self.literal.upper())
        return f"{self.charset.value}{{{self.width}}}"

    @property
    def shape(self) -> str:
        if self.literal is not None:
            return self.literal.upper()
        return _SHAPE_SYMBOLS[self.charset] * self.width


@dataclass(frozen=True)
class Grammar:
    """Prefix token plus ordered blocks for one identifier kind."""

    prefix: str
    blocks: tuple[Block, ...]

    def __post_init__(self) -> None:
        if not self.blocks:
            raise ValueError(f"Grammar {self.prefix!r} needs at least one block")
        names = [block.name for block in self.blocks]
        if len(set(names)) != len(names):
            raise ValueError(f"Grammar {self.prefix!r} has duplicate block names: {names}")

    @property
    def width(self) -> int:
        """Length of a canonical string."""
        return sum(block.width for block in self.blocks)

    @cached_property
    def matcher(self) -> re.Pattern[str]:
        """Anchored pattern; the `body` group holds everything after the prefix."""
        fragments = [block.pattern for block in self.blocks]
        hyphenated = "-".join(fragments)
        compact = "".join(fragments)
        prefix = re.escape(self.prefix.upper())
        return re.compile(rf"(?:{prefix}:)?(?P<body>{hyphenated}|{compact})")

    @cached_property
    def offsets(self) -> dict[str, tuple[int, int]]:
        """Map block name to its (start, end) slice of the canonical string."""
        offsets: dict[str, tuple[int, int]] = {}
        start = 0
        for block in self.blocks:
            offsets[block.name] = (start, start + block.width)
            start += block.width
        return offsets

    @property
    def shape(self) -> str:
        """Hyphenated shape, e.g. "AA-XXX-99-99999" for ISRC."""
        return "-".join(block.shape for block in self.blocks)

    def describe(self) -> str:
        """Human-readable description of the accepted input."""
        return (
            f"{self.width} characters shaped {self.shape} "
            f"(hyphens all or none, optional '{self.prefix}:' prefix)"
        )

    def canonicalize(self, text: str) -> Optional[str]:
        """Return the canonical form of `text`, or None if it is not well-formed.

        Only ASCII input is considered; the uppercase fold happens before
        matching, so the prefix token and the blocks are case-insensitive.
        """
        if not text.isascii():
            return None
        match = self.matcher.fullmatch(text.upper())
        if match is None:
            return None
        return match.group("body").replace("-", "")

    def split(self, canonical: str) -> tuple[str, ...]:
        """Slice a canonical string into its blocks in declared order."""
        return tuple(canonical[start:end] for start, end in self.offsets.values())

    def hyphenate(self, canonical: str) -> str:
        return "-".join(self.split(canonical))
