"""Guitar Arranger — Streamlit UI.

Minimal interactive application:
    1. Type beats in text notation or upload a MIDI file (.mid / .midi)
    2. Pick tuning, frets, capo and number of arrangements
    3. View the ranked arrangement table and each rendered tab

Constraints:
    - No plotting libraries
    - No audio playback
    - Simple, readable code
"""

from __future__ import annotations

import sys
import tempfile
from pathlib import Path

import streamlit as st

# Ensure the package is importable without installation
_SRC_DIR = Path(__file__).resolve().parents[1] / "src"
if str(_SRC_DIR) not in sys.path:
    sys.path.insert(0, str(_SRC_DIR))

from guitar_arranger.arrangement import generate_arrangements  # noqa: E402
from guitar_arranger.config import ArrangerConfig  # noqa: E402
from guitar_arranger.constants import MAX_CAPO, MAX_NUM_ARRANGEMENTS, MAX_NUM_FRETS  # noqa: E402
from guitar_arranger.errors import ArrangementError  # noqa: E402
from guitar_arranger.midi_parser import parse_midi  # noqa: E402
from guitar_arranger.parser import parse_lines  # noqa: E402
from guitar_arranger.renderer import render_tab  # noqa: E402
from guitar_arranger.report import arrangement_to_frame, arrangements_to_frame  # noqa: E402

# ── Page config ───────────────────────────────────────────────
st.set_page_config(
    page_title="Guitar Arranger",
    page_icon="🎸",
    layout="wide",
)

st.title("🎸 Guitar Arranger")
st.markdown(
    "Enter one beat per line (blank line = rest, `---` = measure break) "
    "or upload a MIDI file, then rank the easiest fingerings."
)
st.divider()

config = ArrangerConfig()

# ── Settings ──────────────────────────────────────────────────
c1, c2, c3, c4 = st.columns(4)
tunings = sorted(config.tunings)
tuning = c1.selectbox("Tuning", tunings, index=tunings.index(config.tuning))
fret_count = c2.number_input("Frets", 0, MAX_NUM_FRETS, config.fret_count)
capo = c3.number_input("Capo", 0, MAX_CAPO, config.capo)
count = c4.number_input("Arrangements", 1, MAX_NUM_ARRANGEMENTS, config.num_arrangements)

# ── Input ─────────────────────────────────────────────────────
text_input = st.text_area("Beats", value="E4\nEb4\nE4\n\nB3\nD4\nC4\n---\nA2A3", height=200)
uploaded_file = st.file_uploader("…or choose a MIDI file", type=["mid", "midi"])

if st.button("▶  Arrange", type="primary"):
    try:
        if uploaded_file is not None:
            # pretty_midi needs a real file path
            with tempfile.NamedTemporaryFile(suffix=".mid", delete=False) as tmp:
                tmp.write(uploaded_file.getvalue())
                tmp_path = Path(tmp.name)
            beats = parse_midi(tmp_path, rest_gap=config.rest_gap_seconds)
        else:
            beats = parse_lines(text_input)

        fretboard = config.build_fretboard(tuning, int(fret_count), int(capo))
        with st.spinner("Searching fingerings …"):
            arrangements = generate_arrangements(fretboard, beats, int(count))
    except (ArrangementError, ValueError, FileNotFoundError) as exc:
        st.error(str(exc))
    else:
        # ── Summary ───────────────────────────────────────────
        st.subheader("Ranking")
        st.dataframe(arrangements_to_frame(arrangements), use_container_width=True)

        # ── Tabs ──────────────────────────────────────────────
        for rank, arrangement in enumerate(arrangements, start=1):
            with st.expander(
                f"Arrangement {rank} — difficulty {arrangement.difficulty}",
                expanded=rank == 1,
            ):
                st.code(
                    render_tab(arrangement.beats, fretboard, config.tab_width, config.tab_padding),
                    language=None,
                )
                st.dataframe(arrangement_to_frame(arrangement), use_container_width=True)
