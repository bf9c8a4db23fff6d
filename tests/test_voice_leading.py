"""Tests for voice leading over chord sequences."""

from itertools import pairwise, product

import pytest

from chord_shapes.config import ShapeConfig
from chord_shapes.errors import EmptyChordSequence, NoShapeFound, UnknownChordQuality
from chord_shapes.models import ChordShape
from chord_shapes.parser import parse_chord
from chord_shapes.shapes import find_shape, iter_shapes
from chord_shapes.tuning import Tuning
from chord_shapes.voice_leading import (
    VoicedSequence,
    parse_chord_sequence,
    shape_distance,
    transpose_sequence,
    voice_lead,
)

NEAR_NUT = ShapeConfig(max_fret=4)


@pytest.fixture
def progression() -> list:
    return parse_chord_sequence("C Am F G")


class TestParseChordSequence:
    def test_splits_on_whitespace(self) -> None:
        chords = parse_chord_sequence("  C\tAm  F G7\n")
        assert [c.name for c in chords] == ["C", "Am", "F", "G7"]

    def test_keeps_flat_spelling(self) -> None:
        assert [c.name for c in parse_chord_sequence("Bb Eb")] == ["Bb", "Eb"]

    @pytest.mark.parametrize("text", ["", "   ", "\n"])
    def test_empty(self, text: str) -> None:
        with pytest.raises(EmptyChordSequence):
            parse_chord_sequence(text)

    def test_invalid_chord(self) -> None:
        with pytest.raises(UnknownChordQuality):
            parse_chord_sequence("C Cx9z G")


class TestTransposeSequence:
    def test_up_a_tone(self, progression: list) -> None:
        assert [c.name for c in transpose_sequence(progression, 2)] == ["D", "Bm", "G", "A"]

    def test_zero_is_identity(self, progression: list) -> None:
        assert transpose_sequence(progression, 0) == progression


class TestShapeDistance:
    @pytest.mark.parametrize(
        ("a", "b", "distance"),
        [
            ((0, 0, 0, 3), (0, 0, 0, 3), 0),
            ((0, 0, 0, 3), (2, 0, 0, 0), 5),
            ((0, 0, 0, 3), (2, 0, 1, 0), 6),
            ((5, 4, 3, 3), (0, 0, 0, 3), 12),
        ],
    )
    def test_distance(self, a: tuple, b: tuple, distance: int) -> None:
        assert shape_distance(ChordShape(a), ChordShape(b)) == distance

    def test_symmetric(self) -> None:
        a, b = ChordShape((2, 2, 2, 0)), ChordShape((0, 2, 3, 2))
        assert shape_distance(a, b) == shape_distance(b, a)


class TestVoiceLead:
    def test_single_chord_is_best_shape(self) -> None:
        voiced = voice_lead([parse_chord("Cm7")])
        assert voiced.shapes == (find_shape("Cm7", "C", 0),)
        assert voiced.distance == 0

    def test_repeated_chord_stays_put(self) -> None:
        voiced = voice_lead(parse_chord_sequence("C C C"))
        assert voiced.shapes == (ChordShape((0, 0, 0, 3)),) * 3
        assert voiced.distance == 0

    def test_prefers_close_shape_over_best_ranked(self) -> None:
        voiced = voice_lead(parse_chord_sequence("C Am"), NEAR_NUT)
        # The best-ranked Am on its own is 2000
        assert find_shape("Am", "C", 0).frets == (2, 0, 0, 0)
        assert [s.frets for s in voiced.shapes] == [(0, 0, 0, 3), (2, 0, 0, 3)]
        assert voiced.distance == 2

    def test_distance_is_sum_of_steps(self, progression: list) -> None:
        voiced = voice_lead(progression)
        steps = sum(shape_distance(a, b) for a, b in pairwise(voiced.shapes))
        assert voiced.distance == steps

    def test_minimal_over_all_paths(self, progression: list) -> None:
        config = ShapeConfig(max_fret=5)
        voiced = voice_lead(progression, config)
        layers = [list(iter_shapes(chord, config)) for chord in progression]
        best = min(
            sum(shape_distance(a, b) for a, b in pairwise(path)) for path in product(*layers)
        )
        assert voiced.distance == best

    def test_shapes_belong_to_their_chords(self, progression: list) -> None:
        config = ShapeConfig(max_span=3)
        voiced = voice_lead(progression, config)
        for chord, shape in voiced:
            assert shape in list(iter_shapes(chord, config))

    def test_deterministic(self, progression: list) -> None:
        assert voice_lead(progression) == voice_lead(progression)

    def test_other_tuning(self) -> None:
        config = ShapeConfig(tuning=Tuning.G)
        voiced = voice_lead(parse_chord_sequence("G G"), config)
        assert voiced.shapes[0].frets == (0, 0, 0, 3)

    def test_result_type(self, progression: list) -> None:
        voiced = voice_lead(progression)
        assert isinstance(voiced, VoicedSequence)
        assert voiced.chords == tuple(progression)
        assert len(voiced.shapes) == len(progression)

    def test_empty(self) -> None:
        with pytest.raises(EmptyChordSequence):
            voice_lead([])

    def test_unplayable_chord(self) -> None:
        with pytest.raises(NoShapeFound) as excinfo:
            voice_lead(parse_chord_sequence("C C9 G"))
        assert excinfo.value.chord.name == "C9"
