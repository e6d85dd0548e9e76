"""Constants — global limits and fixed weights for the arrangement engine.

Nothing in here is mutated at runtime.  Limits are validated where the
corresponding value enters the system (string numbers, fretboard build,
arrangement request).
"""

from __future__ import annotations

# ── Instrument limits ─────────────────────────────────────────
MAX_NUM_STRINGS: int = 12
MAX_NUM_FRETS: int = 30
MAX_CAPO: int = 8

# ── Request limits ────────────────────────────────────────────
MAX_NUM_ARRANGEMENTS: int = 20

# ── Transition cost weights ───────────────────────────────────
# Position jumps dominate, stretch is secondary, fretboard height
# only breaks ties.
AVG_FRET_DIFF_WEIGHT: float = 100.0
FRET_SPAN_WEIGHT: float = 10.0
AVG_FRET_WEIGHT: float = 1.0

# A single beat producing more combos than this is logged as a warning.
LARGE_COMBO_COUNT: int = 5_000

# ── Tab rendering ─────────────────────────────────────────────
MAX_FRET_RENDER_WIDTH: int = 2  # two digits cover MAX_NUM_FRETS
MEASURE_BREAK_GLYPH: str = "|"
REST_GLYPH: str = "-"
PLAYBACK_TOP_GLYPH: str = "▼"
PLAYBACK_BOTTOM_GLYPH: str = "▲"
