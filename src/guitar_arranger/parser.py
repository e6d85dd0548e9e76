"""Parser — text notation to beats.

One beat per line:
    (blank)     → Rest
    ``---``     → MeasureBreak (any run of dashes)
    ``A2A3``    → Playable; pitch names may be concatenated or spaced.

Bad lines are collected and reported together as one :class:`ParseError`.
"""

from __future__ import annotations

import re
from typing import Sequence

from .beats import Beat, MeasureBreak, Playable, Rest
from .errors import InvalidInput, ParseError
from .pitch import PITCH_PATTERN, Pitch, split_pitch_names

_MEASURE_BREAK_RE = re.compile(r"-+")
_PLAYABLE_RE = re.compile(rf"(?:\s*{PITCH_PATTERN})+\s*")


def parse_line(line: str) -> Beat:
    """Parse one line of notation.

    Raises:
        ValueError: If *line* is neither blank, dashes, nor pitch names.
    """
    text = line.strip()
    if not text:
        return Rest()
    if _MEASURE_BREAK_RE.fullmatch(text):
        return MeasureBreak()
    if not _PLAYABLE_RE.fullmatch(text):
        raise ValueError(f"Invalid beat: '{text}'")
    return Playable(Pitch.from_name(name) for name in split_pitch_names(text))


def parse_lines(text: str) -> list[Beat]:
    """Parse a whole block of notation.

    Args:
        text: Newline-separated beats.

    Returns:
        Beats in input order.

    Raises:
        ParseError: Listing every line that failed to parse.
    """
    beats: list[Beat] = []
    invalid: list[InvalidInput] = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        try:
            beats.append(parse_line(line))
        except ValueError:
            invalid.append(InvalidInput(value=line.strip(), line_number=line_number))
    if invalid:
        raise ParseError(invalid)
    return beats


def beats_to_text(beats: Sequence[Beat]) -> list[list[str]]:
    """Display names per beat: pitch names, ``REST`` or ``MEASURE_BREAK``."""
    names: list[list[str]] = []
    for beat in beats:
        if isinstance(beat, Playable):
            names.append([str(pitch) for pitch in beat.notes])
        elif isinstance(beat, Rest):
            names.append(["REST"])
        else:
            names.append(["MEASURE_BREAK"])
    return names
