"""International Standard Recording Code.

An ISRC identifies one audio or video recording (two recordings of the same
song get different ISRCs). It has four blocks: a two-letter country code, a
three-character registrant code, a two-digit year of reference and a
five-digit designation code. The canonical form is 12 characters; the
display form inserts hyphens between the blocks (15 characters).

See https://en.wikipedia.org/wiki/International_Standard_Recording_Code and
the IFPI ISRC handbook §3.5.
"""

from __future__ import annotations

from typing import Optional

from music_ids.core.grammar import Block, CharClass, Grammar
from music_ids.core.identifier import Identifier

# Two-digit years from here up belong to the twentieth century (handbook §4.8)
_CENTURY_PIVOT = 40


class ISRC(Identifier):
    """A parsed ISRC.

    Components: `country`, `registrant`, `year`, `designation`.
    """

    grammar = Grammar(
        prefix="ISRC",
        blocks=(
            Block("country", 2, CharClass.ALPHA),
            Block("registrant", 3, CharClass.ALNUM),
            Block("year", 2, CharClass.DIGIT),
            Block("designation", 5, CharClass.DIGIT),
        ),
    )

    @property
    def reference_year(self) -> Optional[int]:
        """Four-digit year of reference: 40-99 are 19YY, 00-39 are 20YY."""
        year = self.component("year")
        if year is None:
            return None
        two_digit = int(year)
        century = 1900 if two_digit >= _CENTURY_PIVOT else 2000
        return century + two_digit
