"""Report — tabular summaries of arrangements for the CLI and the UI."""

from __future__ import annotations

from typing import Sequence

import pandas as pd

from .arrangement import Arrangement
from .beats import MeasureBreak, Playable, Rest

SUMMARY_COLUMNS: list[str] = ["rank", "difficulty", "max_fret_span", "num_beats"]
BEAT_COLUMNS: list[str] = ["position", "kind", "pitches", "strings", "frets"]


def arrangements_to_frame(arrangements: Sequence[Arrangement]) -> pd.DataFrame:
    """One row per arrangement, ranked from 1 (easiest)."""
    rows = [
        {
            "rank": rank,
            "difficulty": arrangement.difficulty,
            "max_fret_span": arrangement.max_fret_span,
            "num_beats": len(arrangement.beats),
        }
        for rank, arrangement in enumerate(arrangements, start=1)
    ]
    return pd.DataFrame(rows, columns=SUMMARY_COLUMNS)


def arrangement_to_frame(arrangement: Arrangement) -> pd.DataFrame:
    """One row per beat of *arrangement*.

    Played beats list their pitches, strings and frets as space-separated
    text in string order; other beats leave those cells empty.
    """
    rows = []
    for position, beat in enumerate(arrangement.beats):
        row = {"position": position, "kind": "", "pitches": "", "strings": "", "frets": ""}
        if isinstance(beat, Playable):
            fingerings = sorted(beat.notes, key=lambda f: f.string)
            row["kind"] = "playable"
            row["pitches"] = " ".join(str(f.pitch) for f in fingerings)
            row["strings"] = " ".join(str(f.string) for f in fingerings)
            row["frets"] = " ".join(str(f.fret) for f in fingerings)
        elif isinstance(beat, Rest):
            row["kind"] = "rest"
        elif isinstance(beat, MeasureBreak):
            row["kind"] = "measure_break"
        rows.append(row)
    return pd.DataFrame(rows, columns=BEAT_COLUMNS)
