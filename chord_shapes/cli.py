"""Command-line interface for chord-shapes.

Examples
--------
    chord-shapes chords
    chord-shapes chart Cm7
    chord-shapes chart --tuning D --min-fret 5 G7
    chord-shapes chart --all --max-span 3 Am
    chord-shapes voice-lead C Am F G7
"""

from __future__ import annotations

import argparse
import logging
import sys

from chord_shapes.chart import render_chart
from chord_shapes.config import (
    DEFAULT_MAX_SPAN,
    DEFAULT_TUNING_NAME,
    MAX_FRET,
    MAX_SPAN,
    ShapeConfig,
)
from chord_shapes.errors import NoShapeFound
from chord_shapes.parser import parse_chord, transpose_chord
from chord_shapes.quality import ChordQuality
from chord_shapes.shapes import find_shape_with_config, iter_shapes
from chord_shapes.tuning import get_tuning, tuning_names
from chord_shapes.voice_leading import parse_chord_sequence, transpose_sequence, voice_lead

_LOG = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NO_SHAPE = 1
EXIT_INVALID_INPUT = 2

NOTE_HELP = """
Enter note names as capital letters A - G.
Add '#' for sharp notes, e.g. D#.
Add 'b' for flat notes, e.g. Eb.
Run "chord-shapes chords" to list the supported chord types and symbols.
"""


def _search_options() -> argparse.ArgumentParser:
    """Options shared by every command that searches for shapes."""
    options = argparse.ArgumentParser(add_help=False)
    options.add_argument(
        "-t", "--tuning",
        default=DEFAULT_TUNING_NAME,
        help=f"Tuning to use, one of {', '.join(tuning_names())} (default: {DEFAULT_TUNING_NAME})",
    )
    options.add_argument(
        "--min-fret",
        type=int,
        default=0,
        help="Minimal fret from which to play the chord (default: 0)",
    )
    options.add_argument(
        "--max-fret",
        type=int,
        default=MAX_FRET,
        help=f"Maximal fret up to which to play the chord (default: {MAX_FRET})",
    )
    options.add_argument(
        "--max-span",
        type=int,
        default=DEFAULT_MAX_SPAN,
        help=(
            "Maximal span between the lowest and highest pressed frets, "
            f"at most {MAX_SPAN} (default: {DEFAULT_MAX_SPAN})"
        ),
    )
    options.add_argument(
        "--transpose",
        type=int,
        default=0,
        help="Number of semitones to add (e.g. 1) or subtract (e.g. -1)",
    )
    return options


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="chord-shapes",
        description="Ukulele chord charts",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log debug output",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    search_options = _search_options()

    subparsers.add_parser("chords", help="List all supported chord types and symbols")

    chart = subparsers.add_parser(
        "chart",
        parents=[search_options],
        help="Chord chart lookup",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=NOTE_HELP,
    )
    chart.add_argument(
        "chord",
        help="Name of the chord to be shown",
    )
    chart.add_argument(
        "-a", "--all",
        action="store_true",
        help="Print all shapes of the chord that fulfill the given conditions",
    )

    voice_lead_cmd = subparsers.add_parser(
        "voice-lead",
        parents=[search_options],
        help="Voice leading for a sequence of chords",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=NOTE_HELP,
    )
    voice_lead_cmd.add_argument(
        "chords",
        nargs="+",
        help='Chord sequence, e.g. C Am F G7 or "C Am F G7"',
    )
    return parser


def list_chords() -> str:
    """Return the table of supported chord types, using C as the root."""
    lines = ["Supported chord types and symbols", "", "The root note C is used as an example.", ""]
    for quality in ChordQuality:
        symbols = ", ".join(f"C{s}" for s in quality.symbols)
        lines.append(f"C {quality} - {symbols}")
    return "\n".join(lines)


def _shape_config(args: argparse.Namespace) -> ShapeConfig:
    if args.max_span > MAX_SPAN:
        msg = f"Maximal span {args.max_span} is outside the range 0-{MAX_SPAN}"
        raise ValueError(msg)
    return ShapeConfig(
        tuning=get_tuning(args.tuning),
        min_fret=args.min_fret,
        max_fret=args.max_fret,
        max_span=args.max_span,
    )


def show_chart(args: argparse.Namespace) -> int:
    """Print the chart(s) of a chord; return the exit code."""
    config = _shape_config(args)
    chord = transpose_chord(parse_chord(args.chord), args.transpose)

    if args.all:
        shapes = list(iter_shapes(chord, config))
        if not shapes:
            raise NoShapeFound(chord, config.tuning, config.min_fret)
    else:
        shapes = [find_shape_with_config(chord, config)]

    print(f"[{chord}]\n")
    for shape in shapes:
        print(render_chart(shape, chord, config.tuning))
        print()
    return EXIT_OK


def show_voice_leading(args: argparse.Namespace) -> int:
    """Print the charts of a voice-led chord sequence; return the exit code."""
    config = _shape_config(args)
    chords = transpose_sequence(parse_chord_sequence(" ".join(args.chords)), args.transpose)

    voiced = voice_lead(chords, config)
    for chord, shape in voiced:
        print(f"[{chord}]\n")
        print(render_chart(shape, chord, config.tuning))
        print()
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "chords":
            print(list_chords())
            return EXIT_OK
        if args.command == "voice-lead":
            return show_voice_leading(args)
        return show_chart(args)
    except NoShapeFound as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_NO_SHAPE
    except ValueError as e:
        _LOG.debug("Invalid input", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return EXIT_INVALID_INPUT


if __name__ == "__main__":
    sys.exit(main())
