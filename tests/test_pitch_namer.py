"""Unit tests for pitch spelling and chord quality detection."""

import pytest

from chordstaff.pitch_namer import (
    SPELLINGS,
    Accidental,
    ChordQuality,
    Choice,
    NamedNote,
    Single,
    detect_quality,
    name_pitches,
    octave_of,
    semitone_of,
    tone_class_of,
)


@pytest.mark.parametrize(
    ("raw", "octave"),
    [(0, 4), (2, 4), (3, 5), (-9, 4), (-10, 3), (-21, 3), (-22, 2), (-57, 0), (-58, -1)],
)
def test_octave_floors_below_reference(raw: int, octave: int) -> None:
    assert octave_of(raw) == octave


def test_tone_class_is_relative_to_c() -> None:
    assert tone_class_of(-9) == 0
    assert tone_class_of(0) == 9
    assert tone_class_of(-10) == 11
    assert tone_class_of(-130) == 11


def test_spelling_table_marks_black_keys_as_choices() -> None:
    choices = [i for i, spelling in enumerate(SPELLINGS) if isinstance(spelling, Choice)]
    assert choices == [1, 3, 6, 8, 10]
    assert all(isinstance(SPELLINGS[i], Single) for i in (0, 2, 4, 5, 7, 9, 11))


def test_natural_notes() -> None:
    notes, _ = name_pitches([-9, -7, -5, -4, -2, 0, 2])
    assert [n.letter for n in notes] == list("CDEFGAB")
    assert all(n.accidental is Accidental.NATURAL for n in notes)
    assert all(n.octave == 4 for n in notes)


def test_first_black_key_is_sharp() -> None:
    notes, _ = name_pitches([-8])
    assert notes == [NamedNote(0, Accidental.SHARP, 4)]


def test_large_leap_prefers_sharp_of_letter_below() -> None:
    notes, _ = name_pitches([-9, -3])
    assert notes[1] == NamedNote(3, Accidental.SHARP, 4)  # F#4


def test_small_step_prefers_flat_of_letter_above() -> None:
    notes, _ = name_pitches([-4, -3])
    assert notes[1] == NamedNote(4, Accidental.FLAT, 4)  # Gb4


def test_major_third_counts_as_leap() -> None:
    notes, _ = name_pitches([-9, -5, -1])
    assert notes[2] == NamedNote(4, Accidental.SHARP, 4)  # G#4 four half-tones above E4


def test_every_spelling_maps_back_to_its_raw_value() -> None:
    raw = list(range(-60, 40))
    for start in range(len(raw) - 2):
        chunk = raw[start:start + 3]
        notes, _ = name_pitches(chunk)
        assert [semitone_of(n) for n in notes] == chunk
    spread = [-50, -44, -43, -30, -7, 1, 13, 18, 30]
    notes, _ = name_pitches(spread)
    assert [semitone_of(n) % 12 for n in notes] == [v % 12 for v in spread]


@pytest.mark.parametrize(
    ("raw", "quality"),
    [
        ([0, 4, 7], ChordQuality.MAJOR),
        ([0, 3, 7], ChordQuality.MINOR),
        ([0, 4, 8], ChordQuality.NONE),
        ([4, 7, 12], ChordQuality.NONE),  # first inversion is not recognised
        ([0, 4], ChordQuality.NONE),
        ([0, 4, 7, 12], ChordQuality.NONE),
    ],
)
def test_detect_quality(raw: list[int], quality: ChordQuality) -> None:
    assert detect_quality(raw) is quality


def test_name_pitches_returns_quality() -> None:
    _, quality = name_pitches([-9, -5, -2])
    assert quality is ChordQuality.MAJOR


def test_empty_input() -> None:
    assert name_pitches([]) == ([], ChordQuality.NONE)
