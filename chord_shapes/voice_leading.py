"""Voice leading for chord sequences.

Each chord of a sequence gets the shape that keeps the total finger movement
across the whole sequence as small as possible. The movement between two
shapes is the sum, over the strings, of the distance between their frets.

The search is a Viterbi pass over the ranked shapes of every chord: a
forward pass keeps the cheapest way of reaching each shape, and a backtrack
recovers the path. Ties go to the better-ranked shape.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from chord_shapes.config import ShapeConfig
from chord_shapes.errors import EmptyChordSequence, NoShapeFound
from chord_shapes.models import Chord, ChordShape
from chord_shapes.parser import parse_chord, transpose_chord
from chord_shapes.shapes import iter_shapes

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

_LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class VoicedSequence:
    """A chord sequence together with the shape chosen for each chord."""

    chords: tuple[Chord, ...]
    shapes: tuple[ChordShape, ...]
    distance: int

    def __iter__(self) -> Iterator[tuple[Chord, ChordShape]]:
        return iter(zip(self.chords, self.shapes))


def parse_chord_sequence(text: str) -> list[Chord]:
    """Parse a whitespace-separated sequence of chord names.

    Raises
    ------
    EmptyChordSequence
        If ``text`` holds no chord names.
    InvalidNoteName, UnknownChordQuality
        If a chord name cannot be parsed.

    Examples
    --------
    >>> [chord.name for chord in parse_chord_sequence("C  Am F G7")]
    ['C', 'Am', 'F', 'G7']
    """
    names = text.split()
    if not names:
        raise EmptyChordSequence(text)
    return [parse_chord(name) for name in names]


def transpose_sequence(chords: Sequence[Chord], semitones: int) -> list[Chord]:
    """Transpose every chord of a sequence by the same number of semitones."""
    return [transpose_chord(chord, semitones) for chord in chords]


def _fret_matrix(shapes: Sequence[ChordShape]) -> np.ndarray:
    # Strings that are not played count as open
    return np.array([[0 if f is None else f for f in shape.frets] for shape in shapes], dtype=int)


def shape_distance(a: ChordShape, b: ChordShape) -> int:
    """Total fret movement needed to go from one shape to another.

    Examples
    --------
    >>> shape_distance(ChordShape((0, 0, 0, 3)), ChordShape((2, 0, 1, 0)))
    6
    """
    return int(np.abs(_fret_matrix([a]) - _fret_matrix([b])).sum())


def voice_lead(chords: Sequence[Chord], config: ShapeConfig | None = None) -> VoicedSequence:
    """Choose one shape per chord so that the total movement is minimal.

    Parameters
    ----------
    chords : Sequence[Chord]
        The chords in playing order.
    config : ShapeConfig | None
        Tuning and search window shared by every chord. Defaults to
        ``ShapeConfig()``.

    Returns
    -------
    VoicedSequence
        The chosen shapes and the sum of ``shape_distance`` between
        consecutive shapes.

    Raises
    ------
    EmptyChordSequence
        If ``chords`` is empty.
    NoShapeFound
        If a chord has no shape within the search window.

    Examples
    --------
    >>> voiced = voice_lead(parse_chord_sequence("C Am"), ShapeConfig(max_fret=4))
    >>> [shape.to_pattern() for shape in voiced.shapes], voiced.distance
    (['0003', '2003'], 2)
    """
    if not chords:
        raise EmptyChordSequence()
    if config is None:
        config = ShapeConfig()

    layers: list[list[ChordShape]] = []
    for chord in chords:
        shapes = list(iter_shapes(chord, config))
        if not shapes:
            raise NoShapeFound(chord, config.tuning, config.min_fret)
        layers.append(shapes)
    _LOG.debug("Shape counts per chord: %s", [len(shapes) for shapes in layers])

    # Forward pass
    cost = np.zeros(len(layers[0]), dtype=int)
    backpointers: list[np.ndarray] = []
    prev_frets = _fret_matrix(layers[0])
    for shapes in layers[1:]:
        frets = _fret_matrix(shapes)
        # total[i, j]: cheapest path ending in previous shape i, then shape j
        moves = np.abs(prev_frets[:, np.newaxis, :] - frets[np.newaxis, :, :]).sum(axis=2)
        total = cost[:, np.newaxis] + moves
        best_prev = total.argmin(axis=0)
        backpointers.append(best_prev)
        cost = total[best_prev, np.arange(len(shapes))]
        prev_frets = frets

    # Backtrack
    last = int(cost.argmin())
    path = [last]
    for best_prev in reversed(backpointers):
        path.append(int(best_prev[path[-1]]))
    path.reverse()

    chosen = tuple(layer[i] for layer, i in zip(layers, path))
    distance = int(cost[last])
    _LOG.debug(
        "Voice leading for %s: %s (distance %d)",
        " ".join(chord.name for chord in chords),
        " ".join(shape.to_pattern() for shape in chosen),
        distance,
    )
    return VoicedSequence(tuple(chords), chosen, distance)
