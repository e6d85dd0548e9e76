"""Guitar Arranger — command-line entry point.

Reads beats from a text-notation file, a MIDI file (``.mid`` / ``.midi``)
or standard input, computes the easiest fingering arrangements and prints
each one as ASCII tab.

Example
-------
``guitar-arranger song.txt -n 3 --tuning drop_d --capo 2``

Defaults come from the packaged ``configs/arranger.yaml``; command-line
flags override them.  Errors are logged and turn into exit code 1.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from .arrangement import Arrangement, generate_arrangements
from .beats import Beat
from .config import ArrangerConfig
from .errors import ArrangementError
from .midi_parser import parse_midi
from .parser import parse_lines
from .renderer import render_tab

MIDI_SUFFIXES: tuple[str, ...] = (".mid", ".midi")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="guitar-arranger",
        description="Arrange pitches into ranked guitar tablature.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        help="Text notation or MIDI file; reads text from stdin when omitted.",
    )
    parser.add_argument("--config", help="Path to an arranger YAML config.")
    parser.add_argument("--tuning", help="Named tuning preset (e.g. standard, drop_d).")
    parser.add_argument("--frets", type=int, help="Number of frets.")
    parser.add_argument("--capo", type=int, help="Capo position (0 for none).")
    parser.add_argument(
        "-n", "--num-arrangements", type=int, help="Number of arrangements (1-20)."
    )
    parser.add_argument("--width", type=int, help="Tab width in characters.")
    parser.add_argument("--padding", type=int, help="Dashes between tab columns.")
    parser.add_argument(
        "--playback", type=int, help="0-based beat index to mark in the tab."
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser


def read_beats(source: str | None, config: ArrangerConfig) -> list[Beat]:
    """Load beats from *source* (path) or stdin."""
    if source is None:
        return parse_lines(sys.stdin.read())
    path = Path(source)
    if path.suffix.lower() in MIDI_SUFFIXES:
        return parse_midi(path, rest_gap=config.rest_gap_seconds)
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")
    return parse_lines(path.read_text(encoding="utf-8"))


def format_arrangement(rank: int, arrangement: Arrangement, tab: str) -> str:
    header = (
        f"Arrangement {rank} | difficulty {arrangement.difficulty} "
        f"| max fret span {arrangement.max_fret_span}"
    )
    return f"{header}\n{tab}"


def run(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, arrange, and print; returns the process exit code."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    try:
        config = ArrangerConfig(args.config)
        fretboard = config.build_fretboard(args.tuning, args.frets, args.capo)
        beats = read_beats(args.input, config)
        count = config.num_arrangements if args.num_arrangements is None else args.num_arrangements
        arrangements = generate_arrangements(fretboard, beats, count)

        width = config.tab_width if args.width is None else args.width
        padding = config.tab_padding if args.padding is None else args.padding
        for rank, arrangement in enumerate(arrangements, start=1):
            tab = render_tab(arrangement.beats, fretboard, width, padding, args.playback)
            print(format_arrangement(rank, arrangement, tab))
    except (ArrangementError, ValueError, OSError) as exc:
        logging.error(str(exc))
        return 1

    logging.debug("Printed %d arrangement(s)", len(arrangements))
    return 0


def main() -> None:
    """Console-script entry point."""
    sys.exit(run())


if __name__ == "__main__":
    main()
