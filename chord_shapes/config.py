"""
chord_shapes.config
~~~~~~~~~~~~~~~~~~~

Instrument constants and the search configuration shared by every submodule.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from chord_shapes.tuning import Tuning

# ── Instrument ──────────────────────────────────────────────────────
STRING_COUNT: Final[int] = 4
"""Number of strings on the instrument."""

PITCH_CLASS_COUNT: Final[int] = 12
"""Number of equal-tempered pitch classes."""

MAX_FRET: Final[int] = 12
"""Highest fret considered by the shape search (0 is the nut)."""

DEFAULT_TUNING_NAME: Final[str] = "C"
"""Tuning used when none is given."""

# ── Command line ────────────────────────────────────────────────────
DEFAULT_MAX_SPAN: Final[int] = 4
"""Span limit the command line applies when ``--max-span`` is not given."""

MAX_SPAN: Final[int] = 5
"""Largest span the command line accepts."""

# ── Chart ───────────────────────────────────────────────────────────
MIN_CHART_WIDTH: Final[int] = 4
"""Minimal number of fret cells drawn in a chord chart."""


def _default_tuning() -> Tuning:
    from chord_shapes.tuning import get_tuning

    return get_tuning(DEFAULT_TUNING_NAME)


@dataclass(frozen=True)
class ShapeConfig:
    """Search window for chord shapes.

    Parameters
    ----------
    tuning : Tuning
        Tuning of the instrument (default ``Tuning.C``).
    min_fret : int
        Lowest fret a string may be pressed at. Open strings are only
        allowed when this is 0.
    max_fret : int
        Highest fret a string may be pressed at.
    max_span : int | None
        Largest allowed distance between the lowest and highest fretted
        strings, or None for no limit.

    Examples
    --------
    >>> config = ShapeConfig(min_fret=5)
    >>> config.tuning.name, config.min_fret, config.max_fret
    ('C', 5, 12)
    """

    tuning: Tuning = field(default_factory=_default_tuning)
    min_fret: int = 0
    max_fret: int = MAX_FRET
    max_span: int | None = None
