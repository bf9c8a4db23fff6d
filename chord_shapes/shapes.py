"""Chord shape enumeration and ranking.

For each string, the frets inside the search window that sound a chord tone
are collected. Their cartesian product is filtered down to the combinations
that sound exactly the chord's pitch classes, and the survivors are ranked
by playability:

1. smallest span between the pressed frets (open strings do not count),
2. lowest highest fret,
3. lexicographic order of the frets.
"""

from __future__ import annotations

import logging
from itertools import product
from typing import TYPE_CHECKING

from chord_shapes.config import MAX_FRET, STRING_COUNT, ShapeConfig
from chord_shapes.errors import FretOutOfRange, InvalidMinFret, NoShapeFound
from chord_shapes.models import Chord, ChordShape
from chord_shapes.parser import parse_chord, required_pitch_classes
from chord_shapes.tuning import Tuning, get_tuning, note_at

if TYPE_CHECKING:
    from collections.abc import Iterator

_LOG = logging.getLogger(__name__)


def _check_window(config: ShapeConfig) -> None:
    if not 0 <= config.max_fret <= MAX_FRET:
        raise FretOutOfRange(config.max_fret, MAX_FRET)
    if not 0 <= config.min_fret <= config.max_fret:
        raise InvalidMinFret(config.min_fret, config.max_fret)
    if config.max_span is not None and config.max_span < 0:
        msg = f"Maximal span must not be negative, got {config.max_span}"
        raise ValueError(msg)


def candidate_frets(
    chord: Chord,
    tuning: Tuning,
    string: int,
    min_fret: int = 0,
    max_fret: int = MAX_FRET,
) -> tuple[int, ...]:
    """Return the frets on one string that sound a tone of the chord.

    Parameters
    ----------
    chord : Chord
        The chord to play.
    tuning : Tuning
        The instrument tuning.
    string : int
        String index, 0 to 3.
    min_fret : int
        Lowest fret to consider. The open string (fret 0) is only a
        candidate when this is 0.
    max_fret : int
        Highest fret to consider.

    Returns
    -------
    tuple[int, ...]
        Matching frets in ascending order.

    Examples
    --------
    >>> from chord_shapes.parser import parse_chord
    >>> candidate_frets(parse_chord("C"), Tuning.C, 3)
    (3, 7, 10)
    >>> candidate_frets(parse_chord("C"), Tuning.C, 0, min_fret=1)
    (5, 9, 12)
    """
    required = required_pitch_classes(chord)
    return tuple(
        fret for fret in range(min_fret, max_fret + 1) if note_at(tuning, string, fret) in required
    )


def shape_rank_key(shape: ChordShape) -> tuple[int, int, tuple[int, ...]]:
    """Sort key ranking shapes from most to least playable.

    Strings that are not played sort before open strings in the final
    tiebreak.
    """
    frets = tuple(-1 if f is None else f for f in shape.frets)
    return (shape.span, shape.highest_fret, frets)


def iter_shapes(chord: Chord, config: ShapeConfig | None = None) -> Iterator[ChordShape]:
    """Return every shape of a chord within the search window, best first.

    Parameters
    ----------
    chord : Chord
        The chord to play.
    config : ShapeConfig | None
        Tuning and search window. Defaults to ``ShapeConfig()``.

    Returns
    -------
    Iterator[ChordShape]
        Valid shapes ordered by ``shape_rank_key``. Each shape sounds every
        pitch class of the chord and nothing else.

    Raises
    ------
    InvalidMinFret
        If ``min_fret`` is negative or above ``max_fret``.
    FretOutOfRange
        If ``max_fret`` is outside ``[0, MAX_FRET]``.

    Examples
    --------
    >>> from chord_shapes.parser import parse_chord
    >>> [s.to_pattern() for s in iter_shapes(parse_chord("C"))][:2]
    ['0003', '0007']
    """
    if config is None:
        config = ShapeConfig()
    _check_window(config)

    required = required_pitch_classes(chord)
    if len(required) > STRING_COUNT:
        _LOG.debug(
            "%s needs %d pitch classes but only %d strings exist",
            chord.name,
            len(required),
            STRING_COUNT,
        )
        return iter(())

    # Note sounded at each candidate fret, per string
    string_notes = [
        {
            fret: note_at(config.tuning, string, fret)
            for fret in candidate_frets(chord, config.tuning, string, config.min_fret, config.max_fret)
        }
        for string in range(STRING_COUNT)
    ]
    _LOG.debug(
        "Candidate frets for %s in tuning %s: %s",
        chord.name,
        config.tuning.name,
        [sorted(notes) for notes in string_notes],
    )
    if not all(string_notes):
        return iter(())

    shapes: list[ChordShape] = []
    for frets in product(*string_notes):
        sounded = {string_notes[string][fret] for string, fret in enumerate(frets)}
        if sounded != required or chord.root not in sounded:
            continue
        shape = ChordShape(frets)
        if config.max_span is not None and shape.span > config.max_span:
            continue
        shapes.append(shape)

    _LOG.debug("Found %d shapes for %s", len(shapes), chord.name)
    return iter(sorted(shapes, key=shape_rank_key))


def find_shape_with_config(chord: Chord, config: ShapeConfig) -> ChordShape:
    """Return the best-ranked shape of a chord for a search configuration.

    Raises
    ------
    NoShapeFound
        If no shape exists within the window.
    """
    best = next(iter_shapes(chord, config), None)
    if best is None:
        raise NoShapeFound(chord, config.tuning, config.min_fret)
    _LOG.debug("Best shape for %s: %s", chord.name, best)
    return best


def find_shape(chord: Chord | str, tuning: Tuning | str, min_fret: int = 0) -> ChordShape:
    """Return the best-ranked shape of a chord at or above a fret.

    Parameters
    ----------
    chord : Chord | str
        The chord, or a chord symbol to parse (e.g. ``"Cm7"``).
    tuning : Tuning | str
        The tuning, or a tuning name (e.g. ``"C"``).
    min_fret : int
        Lowest fret any string may be pressed at. Open strings are only
        used when this is 0.

    Returns
    -------
    ChordShape
        The most playable shape; see ``shape_rank_key``.

    Raises
    ------
    InvalidMinFret
        If ``min_fret`` is negative or above ``MAX_FRET``.
    NoShapeFound
        If the chord cannot be played within the window.
    InvalidNoteName, UnknownChordQuality, UnknownTuning
        If a name cannot be parsed.

    Examples
    --------
    >>> find_shape("C", "C", 0).frets
    (0, 0, 0, 3)
    >>> find_shape("Cm7", "C", 0).frets
    (3, 3, 3, 3)
    """
    if isinstance(chord, str):
        chord = parse_chord(chord)
    if isinstance(tuning, str):
        tuning = get_tuning(tuning)
    return find_shape_with_config(chord, ShapeConfig(tuning=tuning, min_fret=min_fret))
