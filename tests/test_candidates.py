"""Unit tests for fingering candidate generation and combo metrics."""

import numpy as np
import pytest

from guitar_arranger.beats import MeasureBreak, Playable, Rest
from guitar_arranger.candidates import (
    FingeringCombo,
    generate_candidates,
    non_open_avg_fret,
    non_open_fret_span,
)
from guitar_arranger.errors import InvalidInput, InvalidPitchError
from guitar_arranger.fretboard import Fingering, Fretboard
from guitar_arranger.pitch import Pitch
from guitar_arranger.string_number import StringNumber

E4 = Pitch.from_name("E4")
B3 = Pitch.from_name("B3")


def _fingering(string: int, fret: int) -> Fingering:
    return Fingering(pitch=E4, string=StringNumber(string), fret=fret)


def _beat(*names: str) -> Playable:
    return Playable(Pitch.from_name(name) for name in names)


def test_avg_fret_ignores_open_strings() -> None:
    assert non_open_avg_fret([_fingering(1, 0)]) is None
    assert non_open_avg_fret([_fingering(1, 0), _fingering(2, 3), _fingering(3, 5)]) == 4.0


def test_avg_fret_has_32_bit_precision() -> None:
    avg = non_open_avg_fret([_fingering(1, 1), _fingering(2, 2), _fingering(3, 2)])
    assert avg == float(np.float32(5 / 3))


def test_fret_span() -> None:
    assert non_open_fret_span([_fingering(1, 0), _fingering(2, 3), _fingering(3, 7)]) == 4
    assert non_open_fret_span([_fingering(1, 0), _fingering(2, 5)]) == 0
    assert non_open_fret_span([]) == 0


def test_combo_from_fingerings() -> None:
    combo = FingeringCombo.from_fingerings([_fingering(1, 2), _fingering(2, 6)])
    assert combo.avg_fret == 4.0
    assert combo.fret_span == 4
    assert len(combo) == 2


def test_single_pitch_candidates_in_string_order() -> None:
    (combos,) = generate_candidates(Fretboard.standard(18), [_beat("E4")])
    assert [(int(c.fingerings[0].string), c.fingerings[0].fret) for c in combos] == [
        (1, 0), (2, 5), (3, 9), (4, 14),
    ]


def test_two_pitch_candidates_drop_shared_strings() -> None:
    (combos,) = generate_candidates(Fretboard.standard(18), [_beat("E4", "B3")])
    # 4 x 4 products minus the 3 that reuse strings 2, 3 and 4
    assert len(combos) == 13
    first = combos[0].fingerings
    assert [(int(f.string), f.fret) for f in first] == [(1, 0), (2, 0)]
    for combo in combos:
        strings = [f.string for f in combo.fingerings]
        assert len(strings) == len(set(strings))
        assert [f.pitch for f in combo.fingerings] == [E4, B3]


def test_markers_pass_through() -> None:
    candidates = generate_candidates(Fretboard.standard(18), [Rest(), MeasureBreak(), _beat("E4")])
    assert candidates[0] == Rest()
    assert candidates[1] == MeasureBreak()
    assert len(candidates[2]) == 4


def test_invalid_pitches_are_aggregated() -> None:
    beats = [_beat("B9"), Rest(), _beat("E4", "C0")]
    with pytest.raises(InvalidPitchError) as exc:
        generate_candidates(Fretboard.standard(18), beats)
    assert exc.value.invalid_pitches == [
        InvalidInput(value="B9", line_number=1),
        InvalidInput(value="C0", line_number=3),
    ]
    assert str(exc.value).splitlines()[0] == (
        "Pitch B9 on line 1 cannot be played on any strings of the configured guitar."
    )


def test_too_many_pitches_for_strings_is_valid_but_empty() -> None:
    beat = _beat("E2", "A2", "D3", "G3", "B3", "E4", "C4")
    (combos,) = generate_candidates(Fretboard.standard(18), [beat])
    assert combos == []


def test_duplicate_pitches_collapse() -> None:
    beat = _beat("E3", "E3", "E3")
    assert len(beat) == 1
