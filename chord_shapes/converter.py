"""Chord notation converter for pychord and Harte formats.

This module converts between chord-shapes' ``Chord`` and pychord's chord
notation (e.g., "Gm7"), and renders chords in Harte notation
(e.g., "G:min7").
"""

from __future__ import annotations

from chord_shapes.config import PITCH_CLASS_COUNT
from chord_shapes.errors import UnknownChordQuality
from chord_shapes.models import Chord
from chord_shapes.parser import split_chord_name
from chord_shapes.pitch_class import parse_note
from chord_shapes.quality import ChordQuality

# Qualities whose pychord name differs from the canonical symbol
QUALITY_TO_PYCHORD: dict[ChordQuality, str] = {
    ChordQuality.MINOR_MAJOR_SEVENTH: "mmaj7",
    ChordQuality.HALF_DIMINISHED_SEVENTH: "m7-5",
}


def from_pychord(chord_str: str) -> Chord:
    """Parse a pychord notation string into a Chord.

    The quality pychord reports is matched against the quality registry by
    its pitch classes, so any spelling pychord accepts for a registered
    quality (e.g. "m7-5" and "m7b5") yields the same Chord.

    Parameters
    ----------
    chord_str : str
        Chord in pychord notation (e.g., "Gm7", "C", "F#dim7").

    Returns
    -------
    Chord
        The parsed chord.

    Raises
    ------
    InvalidNoteName
        If the root note is malformed.
    UnknownChordQuality
        If pychord rejects the quality, the quality is not registered, or
        the chord has a bass note.

    Examples
    --------
    >>> chord = from_pychord("Gm7")
    >>> chord.name
    'Gm7'
    >>> chord.quality.name
    'MINOR_SEVENTH'
    """
    from pychord import Chord as PyChord

    root_name, suffix = split_chord_name(chord_str)
    root = parse_note(root_name)

    try:
        pc = PyChord(chord_str)
    except ValueError:
        raise UnknownChordQuality(chord_str, suffix) from None

    if pc.on:
        raise UnknownChordQuality(chord_str, suffix)

    intervals = tuple(sorted({c % PITCH_CLASS_COUNT for c in pc.quality.components}))
    quality = ChordQuality.from_intervals(intervals)
    if quality is None:
        raise UnknownChordQuality(chord_str, str(pc.quality))

    return Chord(root=root, quality=quality, spelling=root_name)


def to_pychord(chord: Chord) -> str:
    """Convert a Chord to pychord notation.

    Examples
    --------
    >>> from chord_shapes.parser import parse_chord
    >>> to_pychord(parse_chord("Bbm7"))
    'Bbm7'
    >>> to_pychord(parse_chord("Cm7b5"))
    'Cm7-5'
    """
    symbol = QUALITY_TO_PYCHORD.get(chord.quality, chord.quality.symbol)
    return f"{chord.root_name}{symbol}"


def to_harte(chord: Chord) -> str:
    """Convert a Chord to Harte notation.

    Examples
    --------
    >>> from chord_shapes.parser import parse_chord
    >>> to_harte(parse_chord("Gm7"))
    'G:min7'
    >>> to_harte(parse_chord("C"))
    'C:maj'
    """
    return f"{chord.root_name}:{chord.quality.harte}"
