"""Chord name parsing and pitch-class derivation.

This module turns chord symbols such as ``"Cm7"`` into ``Chord`` values and
derives the set of pitch classes a chord requires.
"""

from __future__ import annotations

from chord_shapes.errors import InvalidNoteName, UnknownChordQuality
from chord_shapes.models import Chord
from chord_shapes.pitch_class import ACCIDENTALS, PitchClass, parse_note
from chord_shapes.quality import ChordQuality


def split_chord_name(name: str) -> tuple[str, str]:
    """Split a chord symbol into its root note name and quality suffix.

    Examples
    --------
    >>> split_chord_name("C#m7")
    ('C#', 'm7')
    >>> split_chord_name("C")
    ('C', '')
    """
    if not name:
        raise InvalidNoteName(name)
    root_len = 2 if len(name) > 1 and name[1] in ACCIDENTALS else 1
    return name[:root_len], name[root_len:]


def parse_chord(name: str) -> Chord:
    """Parse a chord symbol into a Chord.

    Parameters
    ----------
    name : str
        Root note followed by an optional quality suffix (e.g. ``"C"``,
        ``"Cm"``, ``"Bb7"``, ``"F#m7b5"``).

    Returns
    -------
    Chord
        The parsed chord.

    Raises
    ------
    InvalidNoteName
        If the root note is malformed.
    UnknownChordQuality
        If the suffix is not a registered chord quality.

    Examples
    --------
    >>> chord = parse_chord("Cm7")
    >>> chord.root, chord.quality.name
    (<PitchClass.C: 0>, 'MINOR_SEVENTH')
    >>> parse_chord("Bb").name
    'Bb'
    """
    root_name, suffix = split_chord_name(name)
    root = parse_note(root_name)
    quality = ChordQuality.from_symbol(suffix)
    if quality is None:
        raise UnknownChordQuality(name, suffix)
    return Chord(root=root, quality=quality, spelling=root_name)


def required_pitch_classes(chord: Chord) -> frozenset[PitchClass]:
    """Return the pitch classes a chord is made of.

    Parameters
    ----------
    chord : Chord
        The chord.

    Returns
    -------
    frozenset[PitchClass]
        One pitch class per interval of the chord's formula, root included.

    Examples
    --------
    >>> sorted(required_pitch_classes(parse_chord("C")))
    [<PitchClass.C: 0>, <PitchClass.E: 4>, <PitchClass.G: 7>]
    """
    return frozenset(chord.notes)


def transpose_chord(chord: Chord, semitones: int) -> Chord:
    """Transpose a chord by a number of semitones.

    Parameters
    ----------
    chord : Chord
        The chord to transpose.
    semitones : int
        Number of semitones to transpose (positive = up).

    Returns
    -------
    Chord
        Transposed chord. The new root keeps the sharp or flat preference of
        the original spelling.

    Examples
    --------
    >>> transpose_chord(parse_chord("Cm"), 1).name
    'C#m'
    >>> transpose_chord(parse_chord("Cmaj7"), -2).name
    'A#maj7'
    >>> transpose_chord(parse_chord("Ab"), 12).name
    'Ab'
    """
    if semitones % 12 == 0:
        return chord
    root = chord.root + semitones
    return Chord(root=root, quality=chord.quality, spelling=root.spell(chord.prefers_flats))
