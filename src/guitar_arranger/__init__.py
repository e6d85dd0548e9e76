"""Guitar Arranger — ranked guitar fingering arrangements for pitch sequences.

Sub-modules:
    pitch          – pitch enumeration and name parsing
    string_number  – validated 1-based string identifiers
    fretboard      – tuning / fret / capo reachability and lookup
    beats          – Rest, MeasureBreak and Playable beat variants
    candidates     – per-beat fingering combinations with metrics
    graph          – layered fingering graph
    cost_model     – transition difficulty between beats
    solver         – Dijkstra and Yen k-shortest-path search
    arrangement    – orchestration and path-to-arrangement assembly
    parser         – text notation to beats
    midi_parser    – MIDI files to beats
    renderer       – ASCII tablature
    report         – pandas summaries
    config         – YAML settings
    main           – command-line entry point
"""

from .arrangement import Arrangement, generate_arrangements
from .beats import MeasureBreak, Playable, Rest
from .errors import (
    ArrangementError,
    FretboardConfigError,
    InvalidPitchError,
    InvalidRequestError,
    NoArrangementsError,
    ParseError,
)
from .fretboard import Fingering, Fretboard, standard_tuning, tuning_from_pitches
from .pitch import Pitch
from .string_number import StringNumber

__all__ = [
    "Arrangement",
    "ArrangementError",
    "Fingering",
    "Fretboard",
    "FretboardConfigError",
    "InvalidPitchError",
    "InvalidRequestError",
    "MeasureBreak",
    "NoArrangementsError",
    "ParseError",
    "Pitch",
    "Playable",
    "Rest",
    "StringNumber",
    "generate_arrangements",
    "standard_tuning",
    "tuning_from_pitches",
]
