import pytest
from pychord import Chord as PyChord

from chord_shapes import from_pychord, to_harte, to_pychord
from chord_shapes.errors import InvalidNoteName, UnknownChordQuality
from chord_shapes.parser import parse_chord
from chord_shapes.pitch_class import PitchClass
from chord_shapes.quality import ChordQuality


class TestFromPychord:
    def test_simple_major(self):
        chord = from_pychord("C")
        assert chord.root == PitchClass.C
        assert chord.quality is ChordQuality.MAJOR

    def test_minor_seventh(self):
        chord = from_pychord("Gm7")
        assert chord.root == PitchClass.G
        assert chord.quality is ChordQuality.MINOR_SEVENTH

    def test_flat_root(self):
        chord = from_pychord("Bbm7")
        assert chord.root == PitchClass.A_SHARP
        assert chord.name == "Bbm7"

    def test_sharp_root(self):
        chord = from_pychord("F#dim7")
        assert chord.root == PitchClass.F_SHARP
        assert chord.quality is ChordQuality.DIMINISHED_SEVENTH

    def test_alternate_spelling(self):
        assert from_pychord("Cm7-5") == parse_chord("Cm7b5")

    def test_extended_chord(self):
        assert from_pychord("C9").quality is ChordQuality.DOMINANT_NINTH

    def test_matches_own_parser(self):
        for name in ["C", "Cm", "C7", "Cmaj7", "Cdim", "Caug", "Csus4", "Csus2", "C6", "Cm6"]:
            assert from_pychord(name) == parse_chord(name)

    def test_slash_chord_rejected(self):
        with pytest.raises(UnknownChordQuality):
            from_pychord("C/E")

    def test_unknown_quality(self):
        with pytest.raises(UnknownChordQuality):
            from_pychord("Cx9z")

    def test_invalid_root(self):
        with pytest.raises(InvalidNoteName):
            from_pychord("H7")


class TestToPychord:
    def test_simple(self):
        assert to_pychord(parse_chord("C")) == "C"

    def test_minor_seventh(self):
        assert to_pychord(parse_chord("Bbm7")) == "Bbm7"

    def test_renamed_quality(self):
        assert to_pychord(parse_chord("CmMaj7")) == "Cmmaj7"
        assert to_pychord(parse_chord("Cm7b5")) == "Cm7-5"

    @pytest.mark.parametrize("name", ["C", "Gm7", "F#dim7", "Ebmaj7", "Am7b5", "CmMaj7"])
    def test_pychord_accepts_output(self, name):
        assert from_pychord(to_pychord(parse_chord(name))) == parse_chord(name)


class TestToHarte:
    @pytest.mark.parametrize(
        ("name", "harte"),
        [
            ("C", "C:maj"),
            ("Gm7", "G:min7"),
            ("Bbmaj7", "Bb:maj7"),
            ("F#m7b5", "F#:hdim7"),
            ("Cadd9", "C:maj(9)"),
        ],
    )
    def test_to_harte(self, name, harte):
        assert to_harte(parse_chord(name)) == harte


class TestFormulasAgreeWithPychord:
    """Our interval formulas match pychord's for the qualities both know."""

    @pytest.mark.parametrize(
        "symbol",
        ["", "m", "7", "m7", "maj7", "dim", "dim7", "aug", "sus2", "sus4", "6", "m6", "9", "add9"],
    )
    def test_same_pitch_classes(self, symbol):
        ours = set(ChordQuality.from_symbol(symbol).intervals)
        theirs = {c % 12 for c in PyChord(f"C{symbol}").quality.components}
        assert ours == theirs
