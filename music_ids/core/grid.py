"""Global Release Identifier.

GRids identify releases of recorded music, as distinct from products. The
canonical form is 18 characters: the `A1` identifier scheme, a five-character
issuer code, a ten-character release number and a check character. The
display form hyphenates the four blocks (21 characters).

The check character is carried as declared but not verified.

See https://en.wikipedia.org/wiki/Global_Release_Identifier and the IFPI
GRid Standard v2.1 §5.
"""

from __future__ import annotations

from music_ids.core.grammar import Block, CharClass, Grammar
from music_ids.core.identifier import Identifier


class GRid(Identifier):
    """A parsed GRid.

    Components: `scheme`, `issuer`, `release`, `check`.
    """

    grammar = Grammar(
        prefix="GRID",
        blocks=(
            Block("scheme", 2, literal="A1"),
            Block("issuer", 5, CharClass.ALNUM),
            Block("release", 10, CharClass.ALNUM),
            Block("check", 1, CharClass.ALNUM),
        ),
    )
