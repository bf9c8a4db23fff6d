"""Tunings and fretboard arithmetic.

A tuning assigns an open pitch class to each of the four strings, string 0
being the one nearest the player's face. The fretboard is not stored: the
note at a fret is the open note transposed by the fret number.
"""

from __future__ import annotations

from enum import Enum

from chord_shapes.config import MAX_FRET, STRING_COUNT
from chord_shapes.errors import FretOutOfRange, UnknownTuning
from chord_shapes.pitch_class import PitchClass


class Tuning(Enum):
    """Named ukulele tunings.

    Examples
    --------
    >>> [str(pc) for pc in Tuning.C.strings]
    ['G', 'C', 'E', 'A']
    """

    # Standard re-entrant tuning
    C = (PitchClass.G, PitchClass.C, PitchClass.E, PitchClass.A)
    D = (PitchClass.A, PitchClass.D, PitchClass.F_SHARP, PitchClass.B)
    # Baritone
    G = (PitchClass.D, PitchClass.G, PitchClass.B, PitchClass.E)

    @property
    def strings(self) -> tuple[PitchClass, ...]:
        """Open pitch class of each string, string 0 first."""
        return self.value

    def __str__(self) -> str:
        return self.name


def tuning_names() -> tuple[str, ...]:
    """Return the names of all registered tunings."""
    return tuple(t.name for t in Tuning)


def get_tuning(name: str) -> Tuning:
    """Look up a tuning by name.

    Parameters
    ----------
    name : str
        Tuning name, case-insensitive (``"C"``, ``"D"`` or ``"G"``).

    Returns
    -------
    Tuning
        The matching tuning.

    Raises
    ------
    UnknownTuning
        If no tuning has that name.

    Examples
    --------
    >>> get_tuning("d").name
    'D'
    """
    try:
        return Tuning[name.upper()]
    except KeyError:
        raise UnknownTuning(name, tuning_names()) from None


def note_at(tuning: Tuning, string: int, fret: int) -> PitchClass:
    """Return the pitch class sounded on a string pressed at a fret.

    Parameters
    ----------
    tuning : Tuning
        The instrument tuning.
    string : int
        String index, 0 to 3.
    fret : int
        Fret number, 0 (open) to ``MAX_FRET``.

    Returns
    -------
    PitchClass
        The sounded pitch class.

    Raises
    ------
    FretOutOfRange
        If the fret is outside ``[0, MAX_FRET]``.
    IndexError
        If the string index does not exist.

    Examples
    --------
    >>> note_at(Tuning.C, 3, 3)
    <PitchClass.C: 0>
    """
    if not 0 <= fret <= MAX_FRET:
        raise FretOutOfRange(fret, MAX_FRET)
    if not 0 <= string < STRING_COUNT:
        msg = f"String index {string} is outside the range 0-{STRING_COUNT - 1}"
        raise IndexError(msg)
    return tuning.strings[string] + fret
