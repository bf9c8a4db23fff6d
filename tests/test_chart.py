"""Tests for text chord charts."""

from chord_shapes.chart import chart_window, render_chart
from chord_shapes.models import ChordShape
from chord_shapes.parser import parse_chord
from chord_shapes.tuning import Tuning


class TestChartWindow:
    def test_open_position(self) -> None:
        assert chart_window(ChordShape((0, 0, 0, 3))) == (1, 4)

    def test_fits_first_frets(self) -> None:
        assert chart_window(ChordShape((4, 4, 4, 4))) == (1, 4)

    def test_up_the_neck(self) -> None:
        assert chart_window(ChordShape((5, 4, 3, 3))) == (3, 4)

    def test_wide_span(self) -> None:
        assert chart_window(ChordShape((0, 2, 0, 7))) == (2, 6)


class TestRenderChart:
    """Test chart rendering."""

    def test_open_c(self) -> None:
        chart = render_chart(ChordShape((0, 0, 0, 3)), parse_chord("C"), Tuning.C)
        assert chart.splitlines() == [
            "A   ||---|---|-o-|---|- C",
            "E  o||---|---|---|---|- E",
            "C  o||---|---|---|---|- C",
            "G  o||---|---|---|---|- G",
        ]

    def test_base_fret(self) -> None:
        chart = render_chart(ChordShape((5, 4, 3, 3)), parse_chord("C"), Tuning.C)
        assert chart.splitlines() == [
            "A   -|-o-|---|---|---|- C",
            "E   -|-o-|---|---|---|- G",
            "C   -|---|-o-|---|---|- E",
            "G   -|---|---|-o-|---|- C",
            "       3",
        ]

    def test_flat_spelling(self) -> None:
        chart = render_chart(ChordShape((3, 3, 3, 1)), parse_chord("Eb"), Tuning.C)
        lines = chart.splitlines()
        assert lines[0] == "A   ||-o-|---|---|---|- Bb"
        assert lines[1] == "E   ||---|---|-o-|---|- G"
        assert lines[2] == "C   ||---|---|-o-|---|- Eb"

    def test_not_played_string(self) -> None:
        chart = render_chart(ChordShape((None, 0, 0, 3)), parse_chord("C"), Tuning.C)
        assert chart.splitlines()[-1] == "G  x||---|---|---|---|-"
