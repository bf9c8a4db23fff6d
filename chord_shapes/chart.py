"""Text chord charts.

Renders a ``ChordShape`` as a small fretboard diagram with one row per
string, the highest string on top::

    A   ||---|---|-o-|---|- C
    E  o||---|---|---|---|- E
    C  o||---|---|---|---|- C
    G  o||---|---|---|---|- G
"""

from __future__ import annotations

from chord_shapes.config import MIN_CHART_WIDTH, STRING_COUNT
from chord_shapes.models import Chord, ChordShape
from chord_shapes.tuning import Tuning, note_at

PRESSED_CELL = "-o-|"
EMPTY_CELL = "---|"
NAME_WIDTH = 3


def chart_window(shape: ChordShape) -> tuple[int, int]:
    """Return the first fret and the number of frets drawn for a shape.

    Shapes that fit in the first ``MIN_CHART_WIDTH`` frets are drawn from
    the nut; others start at their lowest pressed fret.

    Examples
    --------
    >>> chart_window(ChordShape((0, 0, 0, 3)))
    (1, 4)
    >>> chart_window(ChordShape((5, 7, 8, 8)))
    (5, 4)
    """
    base = 1 if shape.highest_fret <= MIN_CHART_WIDTH else shape.lowest_fret
    width = max(MIN_CHART_WIDTH, shape.highest_fret - base + 1)
    return base, width


def render_chart(shape: ChordShape, chord: Chord, tuning: Tuning) -> str:
    """Render a chord shape as a text diagram.

    Parameters
    ----------
    shape : ChordShape
        The fingering to draw.
    chord : Chord
        The chord being played; its root spelling decides whether notes are
        written with sharps or flats.
    tuning : Tuning
        The tuning the shape was computed for.

    Returns
    -------
    str
        The diagram, one line per string, followed by the base fret number
        when the diagram does not start at the nut.
    """
    flats = chord.prefers_flats
    base, width = chart_window(shape)
    nut = "||" if base == 1 else "-|"

    lines = []
    for string in reversed(range(STRING_COUNT)):
        fret = shape.frets[string]
        if fret is None:
            marker, note = "x", ""
        else:
            marker = "o" if fret == 0 else " "
            note = note_at(tuning, string, fret).spell(flats)
        cells = "".join(
            PRESSED_CELL if fret == f else EMPTY_CELL for f in range(base, base + width)
        )
        open_name = tuning.strings[string].spell(flats)
        lines.append(f"{open_name:<{NAME_WIDTH}}{marker}{nut}{cells}- {note}".rstrip())

    if base > 1:
        lines.append(f"{' ' * (NAME_WIDTH + 3)}{base:^3}".rstrip())

    return "\n".join(lines)
