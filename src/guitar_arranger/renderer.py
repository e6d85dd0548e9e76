"""Renderer — ASCII tablature for an arrangement.

Each beat becomes one column spanning every string (string 1 on top):
measure breaks draw ``|``, rests draw ``-``, played beats draw their fret
numbers left-aligned and dash-padded to the widest fret in the column.
Columns are laid out in rows of at most *width* characters and wrap into
further row groups separated by a blank line.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from .beats import ArrangedBeat, MeasureBreak, Playable, Rest
from .constants import (
    MAX_FRET_RENDER_WIDTH,
    MEASURE_BREAK_GLYPH,
    PLAYBACK_BOTTOM_GLYPH,
    PLAYBACK_TOP_GLYPH,
    REST_GLYPH,
)
from .fretboard import Fretboard
from .string_number import StringNumber

logger = logging.getLogger(__name__)


def render_fret(fret: int, column_width: int) -> str:
    return str(fret).ljust(column_width, REST_GLYPH)


def render_column(beat: ArrangedBeat, strings: Sequence[StringNumber]) -> list[str]:
    """Render one beat as one cell per string."""
    if isinstance(beat, MeasureBreak):
        return [MEASURE_BREAK_GLYPH] * len(strings)
    if isinstance(beat, Rest):
        return [REST_GLYPH] * len(strings)
    if not isinstance(beat, Playable):
        raise TypeError(f"Unsupported beat type: {type(beat).__name__}")

    column_width = max(len(str(fingering.fret)) for fingering in beat.notes)
    cells = [REST_GLYPH * column_width] * len(strings)
    row_of = {string: row for row, string in enumerate(strings)}
    for fingering in sorted(beat.notes):
        cells[row_of[fingering.string]] = render_fret(fingering.fret, column_width)
    return cells


def playback_column(beats: Sequence[ArrangedBeat], playback: int) -> Optional[int]:
    """Column index of the *playback*-th (0-based) non-measure-break beat."""
    sonorous = -1
    for column, beat in enumerate(beats):
        if not isinstance(beat, MeasureBreak):
            sonorous += 1
            if sonorous == playback:
                return column
    return None


def _group_columns(columns: Sequence[Sequence[str]], width: int, padding: int) -> list[list[int]]:
    limit = width - padding - MAX_FRET_RENDER_WIDTH
    groups: list[list[int]] = []
    current: list[int] = []
    row_length = padding
    for index, column in enumerate(columns):
        if row_length >= limit:
            groups.append(current)
            current = []
            row_length = padding
        current.append(index)
        row_length += len(column[0]) + padding
    if current:
        groups.append(current)
    return groups


def render_tab(
    beats: Sequence[ArrangedBeat],
    fretboard: Fretboard,
    width: int = 40,
    padding: int = 2,
    playback: Optional[int] = None,
) -> str:
    """Render *beats* as ASCII tab.

    Args:
        beats: Arranged beats, e.g. ``Arrangement.beats``.
        fretboard: Supplies the strings (rows).
        width: Characters per row.
        padding: Dashes before the first column and after every column.
        playback: Optional 0-based index of the current non-measure-break beat;
            its row group is framed by ``▼`` / ``▲`` markers.

    Returns:
        The tab; an empty string for an empty arrangement.

    Raises:
        ValueError: If *width* cannot hold a single column.
    """
    if padding < 0:
        raise ValueError(f"Padding ({padding}) cannot be negative.")
    if width <= 2 * padding + MAX_FRET_RENDER_WIDTH:
        raise ValueError(
            f"Width ({width}) is too small for padding {padding}; "
            f"it must exceed {2 * padding + MAX_FRET_RENDER_WIDTH}."
        )
    if not beats:
        return ""

    strings = fretboard.strings
    columns = [render_column(beat, strings) for beat in beats]

    marked_column: Optional[int] = None
    if playback is not None:
        marked_column = playback_column(beats, playback)
        if marked_column is None:
            logger.debug("Playback index %d is past the end of the arrangement", playback)

    pad = REST_GLYPH * padding
    rendered_groups: list[str] = []
    for group in _group_columns(columns, width, padding):
        lines: list[str] = []
        rows = [
            (pad + "".join(columns[index][row] + pad for index in group)).ljust(width, REST_GLYPH)
            for row in range(len(strings))
        ]
        if marked_column in group:
            offset = padding + sum(
                len(columns[index][0]) + padding
                for index in group[: group.index(marked_column)]
            )
            lines.append(" " * offset + PLAYBACK_TOP_GLYPH)
            lines.extend(rows)
            lines.append(" " * offset + PLAYBACK_BOTTOM_GLYPH)
        else:
            lines.extend(rows)
        rendered_groups.append("\n".join(lines) + "\n")

    return "\n".join(rendered_groups)
