"""Ukulele chord shape finder.

This library resolves chord names such as "Cm7" into playable fingerings on
a four-string instrument, and renders them as text chord charts.

Examples
--------
>>> from chord_shapes import find_shape, parse_chord, required_pitch_classes

>>> # Find the most playable shape of a chord
>>> find_shape("C", "C", 0).frets
(0, 0, 0, 3)

>>> # Ask for a shape further up the neck
>>> find_shape("C", "C", 5).lowest_fret >= 5
True

>>> # Inspect the pitch classes a chord requires
>>> sorted(str(pc) for pc in required_pitch_classes(parse_chord("Cm7")))
['A#', 'C', 'D#', 'G']
"""

from chord_shapes.chart import render_chart
from chord_shapes.config import MAX_FRET, STRING_COUNT, ShapeConfig
from chord_shapes.converter import from_pychord, to_harte, to_pychord
from chord_shapes.errors import (
    ChordShapesError,
    EmptyChordSequence,
    FretOutOfRange,
    InvalidMinFret,
    InvalidNoteName,
    NoShapeFound,
    UnknownChordQuality,
    UnknownTuning,
)
from chord_shapes.models import Chord, ChordShape
from chord_shapes.parser import parse_chord, required_pitch_classes, transpose_chord
from chord_shapes.pitch_class import PitchClass, parse_note
from chord_shapes.quality import ChordQuality
from chord_shapes.shapes import (
    candidate_frets,
    find_shape,
    find_shape_with_config,
    iter_shapes,
    shape_rank_key,
)
from chord_shapes.tuning import Tuning, get_tuning, note_at
from chord_shapes.voice_leading import (
    VoicedSequence,
    parse_chord_sequence,
    shape_distance,
    voice_lead,
)

__all__ = [
    "MAX_FRET",
    "STRING_COUNT",
    "Chord",
    "ChordQuality",
    "ChordShape",
    "ChordShapesError",
    "EmptyChordSequence",
    "FretOutOfRange",
    "InvalidMinFret",
    "InvalidNoteName",
    "NoShapeFound",
    "PitchClass",
    "ShapeConfig",
    "Tuning",
    "UnknownChordQuality",
    "UnknownTuning",
    "VoicedSequence",
    "candidate_frets",
    "find_shape",
    "find_shape_with_config",
    "from_pychord",
    "get_tuning",
    "iter_shapes",
    "note_at",
    "parse_chord",
    "parse_chord_sequence",
    "parse_note",
    "render_chart",
    "required_pitch_classes",
    "shape_distance",
    "shape_rank_key",
    "to_harte",
    "to_pychord",
    "transpose_chord",
    "voice_lead",
]
