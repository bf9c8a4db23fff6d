"""Chord and chord shape data models.

This module provides the immutable values that flow through the shape
search: a ``Chord`` (root + quality) and a ``ChordShape`` (one fret per
string).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from chord_shapes.pitch_class import PitchClass, uses_flats
from chord_shapes.quality import ChordQuality

if TYPE_CHECKING:
    from chord_shapes.tuning import Tuning


@dataclass(frozen=True)
class Chord:
    """A chord such as C, Cm or Cm7.

    Parameters
    ----------
    root : PitchClass
        The root pitch class.
    quality : ChordQuality
        The chord quality.
    spelling : str
        How the root was written (e.g. ``"Bb"``). Only used for display and
        ignored when comparing chords.

    Examples
    --------
    >>> chord = Chord(root=PitchClass.C, quality=ChordQuality.MINOR_SEVENTH)
    >>> chord.name
    'Cm7'
    >>> [str(pc) for pc in chord.notes]
    ['C', 'D#', 'G', 'A#']
    """

    root: PitchClass
    quality: ChordQuality
    spelling: str = field(default="", compare=False)

    @property
    def prefers_flats(self) -> bool:
        """Whether notes of this chord should be spelled with flats."""
        return uses_flats(self.spelling)

    @property
    def root_name(self) -> str:
        """The root as written, or its sharp spelling."""
        return self.spelling or self.root.spell()

    @property
    def name(self) -> str:
        """The chord symbol, e.g. ``"Bbm7"``."""
        return f"{self.root_name}{self.quality.symbol}"

    @property
    def notes(self) -> tuple[PitchClass, ...]:
        """The chord's pitch classes in formula order."""
        return tuple(self.root + offset for offset in self.quality.intervals)

    def note_names(self) -> list[str]:
        """Return the chord's notes spelled like its root."""
        return [pc.spell(self.prefers_flats) for pc in self.notes]

    def __str__(self) -> str:
        return f"{self.name} - {self.root_name} {self.quality}"


Fret = int | None


@dataclass(frozen=True)
class ChordShape:
    """A fingering: one fret per string, string 0 first.

    A fret of 0 is an open string and None marks a string that is not
    played.

    Parameters
    ----------
    frets : tuple[int | None, ...]
        Fret per string.

    Examples
    --------
    >>> shape = ChordShape((0, 0, 0, 3))
    >>> shape.span, shape.highest_fret
    (0, 3)
    >>> shape.to_pattern()
    '0003'
    """

    frets: tuple[Fret, ...]

    @property
    def fretted(self) -> tuple[int, ...]:
        """Frets of the strings that are pressed down (open strings excluded)."""
        return tuple(f for f in self.frets if f is not None and f > 0)

    @property
    def played(self) -> tuple[int, ...]:
        """Frets of all sounding strings, open strings included."""
        return tuple(f for f in self.frets if f is not None)

    @property
    def lowest_fret(self) -> int:
        """Lowest pressed fret, or 0 if every played string is open."""
        return min(self.fretted, default=0)

    @property
    def highest_fret(self) -> int:
        """Highest pressed fret, or 0 if every played string is open."""
        return max(self.fretted, default=0)

    @property
    def span(self) -> int:
        """Distance between the lowest and highest pressed frets."""
        fretted = self.fretted
        if not fretted:
            return 0
        return max(fretted) - min(fretted)

    def notes(self, tuning: Tuning) -> tuple[PitchClass | None, ...]:
        """Return the pitch class sounded on each string."""
        from chord_shapes.tuning import note_at

        return tuple(
            None if fret is None else note_at(tuning, string, fret)
            for string, fret in enumerate(self.frets)
        )

    def to_pattern(self) -> str:
        """Compact fret pattern, e.g. ``"0003"`` or ``"10-10-10-12"``.

        Frets are joined with dashes when any of them has two digits;
        strings that are not played are shown as ``x``.
        """
        parts = ["x" if f is None else str(f) for f in self.frets]
        sep = "-" if any(len(p) > 1 for p in parts) else ""
        return sep.join(parts)

    def __str__(self) -> str:
        return self.to_pattern()
