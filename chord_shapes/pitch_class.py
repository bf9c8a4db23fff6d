"""Pitch class algebra.

This module provides the twelve equal-tempered pitch classes as an
``IntEnum`` with modulo-12 transposition, plus note-name parsing that
accepts enharmonic spellings.
"""

from __future__ import annotations

from enum import IntEnum

from chord_shapes.config import PITCH_CLASS_COUNT
from chord_shapes.errors import InvalidNoteName

# Note name to pitch class (0-11, where C=0). Fb, E#, Cb and B# are valid
# enharmonic spellings and resolve across the E-F and B-C boundaries.
NOTE_TO_PC: dict[str, int] = {
    "C": 0,
    "C#": 1,
    "Db": 1,
    "D": 2,
    "D#": 3,
    "Eb": 3,
    "E": 4,
    "Fb": 4,
    "E#": 5,
    "F": 5,
    "F#": 6,
    "Gb": 6,
    "G": 7,
    "G#": 8,
    "Ab": 8,
    "A": 9,
    "A#": 10,
    "Bb": 10,
    "B": 11,
    "Cb": 11,
    "B#": 0,
}

SHARP_NAMES: tuple[str, ...] = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")
FLAT_NAMES: tuple[str, ...] = ("C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B")

NOTE_LETTERS = "ABCDEFG"
ACCIDENTALS = "#b"


class PitchClass(IntEnum):
    """One of the twelve pitch classes, C=0 through B=11.

    Adding or subtracting an integer transposes by that many semitones and
    wraps modulo 12. Subtracting another pitch class gives the upward
    distance in semitones from it.

    Examples
    --------
    >>> PitchClass.A + 3
    <PitchClass.C: 0>
    >>> PitchClass.C - 1
    <PitchClass.B: 11>
    >>> PitchClass.E - PitchClass.C
    4
    >>> str(PitchClass.D_SHARP)
    'D#'
    """

    C = 0
    C_SHARP = 1
    D = 2
    D_SHARP = 3
    E = 4
    F = 5
    F_SHARP = 6
    G = 7
    G_SHARP = 8
    A = 9
    A_SHARP = 10
    B = 11

    def __add__(self, semitones: int) -> PitchClass:
        return PitchClass((int(self) + int(semitones)) % PITCH_CLASS_COUNT)

    __radd__ = __add__

    def __sub__(self, other: int) -> PitchClass | int:  # type: ignore[override]
        if isinstance(other, PitchClass):
            return (int(self) - int(other)) % PITCH_CLASS_COUNT
        return PitchClass((int(self) - int(other)) % PITCH_CLASS_COUNT)

    def spell(self, prefer_flats: bool = False) -> str:
        """Return the display name, e.g. ``"C#"`` or ``"Db"``."""
        names = FLAT_NAMES if prefer_flats else SHARP_NAMES
        return names[self.value]

    def __str__(self) -> str:
        return self.spell()

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)


def parse_note(name: str) -> PitchClass:
    """Convert a note name to its pitch class.

    Parameters
    ----------
    name : str
        A capital letter A-G, optionally followed by ``#`` or ``b``.

    Returns
    -------
    PitchClass
        The pitch class the name denotes.

    Raises
    ------
    InvalidNoteName
        If the letter or accidental is not recognized.

    Examples
    --------
    >>> parse_note("C")
    <PitchClass.C: 0>
    >>> parse_note("Bb") == parse_note("A#")
    True
    >>> parse_note("H")
    Traceback (most recent call last):
    ...
    chord_shapes.errors.InvalidNoteName: Invalid note name: 'H'
    """
    if not 1 <= len(name) <= 2:
        raise InvalidNoteName(name)
    letter, accidental = name[0], name[1:]
    if letter not in NOTE_LETTERS or (accidental and accidental not in ACCIDENTALS):
        raise InvalidNoteName(name)
    return PitchClass(NOTE_TO_PC[name])


def uses_flats(name: str) -> bool:
    """Check whether a note name is spelled with a flat."""
    return name.endswith("b")
