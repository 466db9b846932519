"""Unit tests for the Chord aggregate."""

from fractions import Fraction

import pytest

from chordstaff import Accidental, Chord, ChordQuality


def test_major_triad_name() -> None:
    chord = Chord([-9, -5, -2])
    assert chord.quality is ChordQuality.MAJOR
    assert chord.name == "C4 major"


def test_minor_triad_name() -> None:
    chord = Chord([0, 3, 7])
    assert chord.quality is ChordQuality.MINOR
    assert chord.name == "A4 minor"


def test_unrecognised_chord_lists_every_note() -> None:
    chord = Chord([0, 4, 8])
    assert chord.quality is ChordQuality.NONE
    assert chord.name == "A4, C♯5, F5"


def test_flat_spelling_in_name() -> None:
    assert Chord([0, 1]).name == "A4, B♭4"


def test_html_name_uses_subscript_octaves() -> None:
    assert Chord([-9, -5, -2]).html_name == "C<sub>4</sub> major"
    assert Chord([0, 1]).html_name == "A<sub>4</sub>, B♭<sub>4</sub>"


def test_input_is_sorted_before_naming() -> None:
    chord = Chord([7, 0, 4])
    assert chord.raw == (0, 4, 7)
    assert chord.quality is ChordQuality.MAJOR


def test_overtones_are_removed_from_large_chords() -> None:
    chord = Chord([0, 12, 4, 7])
    assert len(chord) == 3
    assert chord.raw == (0, 4, 7)
    assert chord.name == "A4 major"


def test_notes_are_aligned_with_raw() -> None:
    chord = Chord([-3, -9])
    assert chord.raw == (-9, -3)
    assert [n.letter for n in chord.notes] == ["C", "F"]
    assert chord.notes[1].accidental is Accidental.SHARP


def test_empty_chord() -> None:
    chord = Chord([])
    assert len(chord) == 0
    assert chord.name == ""
    assert chord.html_name == ""
    assert "<svg" in chord.svg()


def test_accessors_are_repeatable() -> None:
    chord = Chord([-13, -8, -3, 1, 2])
    assert chord.name == chord.name
    assert chord.svg() == chord.svg()


def test_integral_values_are_accepted() -> None:
    assert Chord([2.0, Fraction(4), True]).raw == (1, 2, 4)


@pytest.mark.parametrize("value", [1.5, float("nan"), float("inf")])
def test_non_integral_values_are_rejected(value: float) -> None:
    with pytest.raises(ValueError):
        Chord([0, value])


def test_non_numeric_values_are_rejected() -> None:
    with pytest.raises(TypeError):
        Chord(["C4"])


def test_repr() -> None:
    assert repr(Chord([4, 0])) == "Chord([0, 4])"
