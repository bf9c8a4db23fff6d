"""Chord quality registry.

Each quality is a member of a closed enumeration carrying its accepted
suffix symbols, its interval formula (semitone offsets from the root), a
readable description and its Harte shorthand. The registry cannot be
extended at runtime; unknown suffixes are an error, never a fallback.
"""

from __future__ import annotations

from enum import Enum


class ChordQuality(Enum):
    """A chord type such as major, minor or dominant seventh.

    Examples
    --------
    >>> ChordQuality.MINOR_SEVENTH.intervals
    (0, 3, 7, 10)
    >>> ChordQuality.from_symbol("m7") is ChordQuality.MINOR_SEVENTH
    True
    >>> ChordQuality.MAJOR.symbol
    ''
    """

    # Triads
    MAJOR = (("", "maj", "M"), (0, 4, 7), "major", "maj")
    MINOR = (("m", "min"), (0, 3, 7), "minor", "min")
    SUSPENDED_FOURTH = (("sus4", "sus"), (0, 5, 7), "suspended 4th", "sus4")
    SUSPENDED_SECOND = (("sus2",), (0, 2, 7), "suspended 2nd", "sus2")
    # Dominant
    DOMINANT_SEVENTH = (("7", "dom7"), (0, 4, 7, 10), "dominant 7th", "7")
    DOMINANT_SEVENTH_SUSPENDED_FOURTH = (
        ("7sus4",),
        (0, 5, 7, 10),
        "dominant 7th suspended 4th",
        "7sus4",
    )
    DOMINANT_SEVENTH_SUSPENDED_SECOND = (
        ("7sus2",),
        (0, 2, 7, 10),
        "dominant 7th suspended 2nd",
        "7sus2",
    )
    DOMINANT_SEVENTH_FLAT_FIFTH = (("7b5",), (0, 4, 6, 10), "dominant 7th flat 5th", "(3,b5,b7)")
    DOMINANT_SEVENTH_FLAT_NINTH = (("7b9",), (0, 1, 4, 7, 10), "dominant 7th flat 9th", "7(b9)")
    DOMINANT_SEVENTH_SHARP_NINTH = (("7#9",), (0, 3, 4, 7, 10), "dominant 7th sharp 9th", "7(#9)")
    DOMINANT_NINTH = (("9",), (0, 2, 4, 7, 10), "dominant 9th", "9")
    DOMINANT_ELEVENTH = (("11",), (0, 2, 4, 5, 7, 10), "dominant 11th", "11")
    DOMINANT_THIRTEENTH = (("13",), (0, 2, 4, 5, 7, 9, 10), "dominant 13th", "13")
    # Major extensions
    MAJOR_SEVENTH = (("maj7", "M7"), (0, 4, 7, 11), "major 7th", "maj7")
    MAJOR_NINTH = (("maj9",), (0, 2, 4, 7, 11), "major 9th", "maj9")
    MAJOR_ELEVENTH = (("maj11",), (0, 2, 4, 5, 7, 11), "major 11th", "maj11")
    MAJOR_THIRTEENTH = (("maj13",), (0, 2, 4, 5, 7, 9, 11), "major 13th", "maj13")
    MAJOR_SIXTH = (("6",), (0, 4, 7, 9), "major 6th", "maj6")
    SIXTH_NINTH = (("6/9",), (0, 2, 4, 7, 9), "6th/9th", "maj6(9)")
    # Minor
    MINOR_SEVENTH = (("m7", "min7"), (0, 3, 7, 10), "minor 7th", "min7")
    MINOR_MAJOR_SEVENTH = (("mMaj7", "mM7"), (0, 3, 7, 11), "minor/major 7th", "minmaj7")
    MINOR_SIXTH = (("m6",), (0, 3, 7, 9), "minor 6th", "min6")
    MINOR_NINTH = (("m9",), (0, 2, 3, 7, 10), "minor 9th", "min9")
    MINOR_ELEVENTH = (("m11",), (0, 2, 3, 5, 7, 10), "minor 11th", "min11")
    MINOR_THIRTEENTH = (("m13",), (0, 2, 3, 5, 7, 9, 10), "minor 13th", "min13")
    # Diminished
    DIMINISHED = (("dim", "o"), (0, 3, 6), "diminished", "dim")
    DIMINISHED_SEVENTH = (("dim7", "o7"), (0, 3, 6, 9), "diminished 7th", "dim7")
    HALF_DIMINISHED_SEVENTH = (("m7b5", "ø"), (0, 3, 6, 10), "half-diminished 7th", "hdim7")
    # Power chord
    FIFTH = (("5",), (0, 7), "fifth", "5")
    # Augmented
    AUGMENTED = (("aug", "+"), (0, 4, 8), "augmented", "aug")
    AUGMENTED_SEVENTH = (("aug7", "+7"), (0, 4, 8, 10), "augmented 7th", "aug7")
    AUGMENTED_MAJOR_SEVENTH = (("augMaj7", "+M7"), (0, 4, 8, 11), "augmented major 7th", "aug(7)")
    # Added tones
    ADDED_NINTH = (("add9",), (0, 2, 4, 7), "added 9th", "maj(9)")
    ADDED_FOURTH = (("add4",), (0, 4, 5, 7), "added 4th", "maj(4)")

    def __init__(
        self,
        symbols: tuple[str, ...],
        intervals: tuple[int, ...],
        description: str,
        harte: str,
    ) -> None:
        self.symbols = symbols
        self.intervals = intervals
        self.description = description
        self.harte = harte

    @property
    def symbol(self) -> str:
        """The canonical suffix, e.g. ``"m7"``."""
        return self.symbols[0]

    @classmethod
    def from_symbol(cls, symbol: str) -> ChordQuality | None:
        """Look up a quality by one of its suffix symbols.

        Parameters
        ----------
        symbol : str
            Chord suffix, case-sensitive (e.g. ``"m7"``, ``"maj7"``, ``""``).

        Returns
        -------
        ChordQuality | None
            The matching quality, or None if no quality uses that symbol.
        """
        return _SYMBOL_TO_QUALITY.get(symbol)

    @classmethod
    def from_intervals(cls, intervals: tuple[int, ...]) -> ChordQuality | None:
        """Look up a quality by its sorted interval formula."""
        return _INTERVALS_TO_QUALITY.get(intervals)

    def __str__(self) -> str:
        return self.description


_SYMBOL_TO_QUALITY: dict[str, ChordQuality] = {
    symbol: quality for quality in ChordQuality for symbol in quality.symbols
}

_INTERVALS_TO_QUALITY: dict[tuple[int, ...], ChordQuality] = {
    quality.intervals: quality for quality in ChordQuality
}
