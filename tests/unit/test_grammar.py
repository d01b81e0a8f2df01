"""Unit tests for block grammars."""

from __future__ import annotations

import pytest

from music_ids.core.grammar import Block, CharClass, Grammar
from music_ids.core.grid import GRid
from music_ids.core.isrc import ISRC


class TestBlock:

    def test_pattern_for_char_class(self):
        assert Block("year", 2, CharClass.DIGIT).pattern == "[0-9]{2}"

    def test_pattern_for_literal(self):
        assert Block("scheme", 2, literal="a1").pattern == "A1"

    def test_shape(self):
        assert Block("country", 2, CharClass.ALPHA).shape == "AA"
        assert Block("code", 3).shape == "XXX"
        assert Block("scheme", 2, literal="A1").shape == "A1"

    def test_rejects_zero_width(self):
        with pytest.raises(ValueError):
            Block("empty", 0)

    def test_rejects_literal_of_wrong_width(self):
        with pytest.raises(ValueError):
            Block("scheme", 3, literal="A1")


class TestGrammar:

    def test_width_is_sum_of_blocks(self):
        assert ISRC.grammar.width == 12
        assert GRid.grammar.width == 18

    def test_offsets(self):
        assert ISRC.grammar.offsets == {
            "country": (0, 2),
            "registrant": (2, 5),
            "year": (5, 7),
            "designation": (7, 12),
        }

    def test_shape_and_description(self):
        assert ISRC.grammar.shape == "AA-XXX-99-99999"
        description = ISRC.grammar.describe()
        assert "12 characters" in description
        assert "AA-XXX-99-99999" in description
        assert "ISRC:" in description

    def test_canonicalize(self):
        grammar = ISRC.grammar
        assert grammar.canonicalize("isrc:fr-z03-98-00212") == "FRZ039800212"
        assert grammar.canonicalize("FR-Z0398-00212") is None
        assert grammar.canonicalize("") is None

    def test_split_and_hyphenate(self):
        assert GRid.grammar.split("A12425GABC1234002M") == ("A1", "2425G", "ABC1234002", "M")
        assert GRid.grammar.hyphenate("A12425GABC1234002M") == "A1-2425G-ABC1234002-M"

    def test_rejects_empty_block_list(self):
        with pytest.raises(ValueError):
            Grammar("EMPTY", ())

    def test_rejects_duplicate_block_names(self):
        with pytest.raises(ValueError):
            Grammar("DUP", (Block("a", 1), Block("a", 2)))

    def test_single_block_grammar(self):
        grammar = Grammar("UPC", (Block("digits", 12, CharClass.DIGIT),))
        assert grammar.canonicalize("upc:012345678905") == "012345678905"
        assert grammar.canonicalize("01234567890") is None
