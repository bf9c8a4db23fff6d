"""Error types raised by chord-shapes.

Every error derives from ``ValueError`` so callers that only care about bad
input can catch that, and carries the offending value for precise messages.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chord_shapes.models import Chord
    from chord_shapes.tuning import Tuning


class ChordShapesError(ValueError):
    """Base class for all chord-shapes errors."""


class InvalidNoteName(ChordShapesError):
    """A note name is not a letter A-G with an optional ``#``/``b``."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Invalid note name: {name!r}")


class UnknownChordQuality(ChordShapesError):
    """A chord suffix does not match any registered chord quality."""

    def __init__(self, chord_name: str, suffix: str) -> None:
        self.chord_name = chord_name
        self.suffix = suffix
        super().__init__(f"Unknown chord quality {suffix!r} in chord {chord_name!r}")


class UnknownTuning(ChordShapesError):
    """A tuning name is not in the tuning registry."""

    def __init__(self, name: str, known: tuple[str, ...] = ()) -> None:
        self.name = name
        msg = f"Unknown tuning: {name!r}"
        if known:
            msg = f"{msg} (expected one of {', '.join(known)})"
        super().__init__(msg)


class InvalidMinFret(ChordShapesError):
    """The minimum fret lies outside the searchable window."""

    def __init__(self, min_fret: int, max_fret: int) -> None:
        self.min_fret = min_fret
        self.max_fret = max_fret
        super().__init__(f"Minimum fret {min_fret} is outside the range 0-{max_fret}")


class FretOutOfRange(ChordShapesError):
    """A fret number lies outside ``[0, max_fret]``."""

    def __init__(self, fret: int, max_fret: int) -> None:
        self.fret = fret
        self.max_fret = max_fret
        super().__init__(f"Fret {fret} is outside the range 0-{max_fret}")


class EmptyChordSequence(ChordShapesError):
    """A chord sequence contains no chord names."""

    def __init__(self, text: str = "") -> None:
        self.text = text
        super().__init__(f"Chord sequence must contain at least one chord, got {text!r}")


class NoShapeFound(ChordShapesError):
    """No fingering realises the chord within the search window."""

    def __init__(self, chord: Chord, tuning: Tuning, min_fret: int) -> None:
        self.chord = chord
        self.tuning = tuning
        self.min_fret = min_fret
        super().__init__(
            f"No shape found for chord {chord.name!r} in tuning {tuning.name} "
            f"from fret {min_fret}"
        )
