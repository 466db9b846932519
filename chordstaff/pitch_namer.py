"""PitchNamer: spells half-tone offsets as letter, accidental and octave."""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Final

from chordstaff.logger_config import logger

SEMITONES_PER_OCTAVE = 12
LETTERS: Final[str] = "CDEFGAB"

#: Offset of C4 from the reference pitch A4.
REFERENCE_OFFSET = -9
REFERENCE_OCTAVE = 4

#: Interval from the previous note at which a black key is spelled as a sharp.
SHARP_LEAP = 4

# Semitone of each natural letter above C.
_LETTER_SEMITONES: Final[tuple[int, ...]] = (0, 2, 4, 5, 7, 9, 11)


class Accidental(IntEnum):
    """Half-tone alteration of a letter (value is the alteration itself)."""

    FLAT = -1
    NATURAL = 0
    SHARP = 1


class ChordQuality(Enum):
    NONE = "none"
    MAJOR = "major"
    MINOR = "minor"


@dataclass(frozen=True)
class NamedNote:
    """
    One spelled note of a chord.

    Attributes:
        letter_class: 0..6 for C, D, E, F, G, A, B.
        accidental:   Flat, natural or sharp.
        octave:       Octave number; the reference A sits in octave 4.
    """

    letter_class: int
    accidental: Accidental
    octave: int

    @property
    def letter(self) -> str:
        return LETTERS[self.letter_class]


@dataclass(frozen=True)
class Single:
    """A tone class with exactly one natural spelling."""

    letter: int


@dataclass(frozen=True)
class Choice:
    """A black-key tone class: sharp of the letter below or flat of the letter above."""

    sharp_letter: int
    flat_letter: int


Spelling = Single | Choice

# Indexed by half-tone above C. C-flat is deliberately absent: spelling B as
# C-flat would also have to move the note into the next octave.
SPELLINGS: Final[tuple[Spelling, ...]] = (
    Single(0),  # C
    Choice(0, 1),  # C# / Db
    Single(1),  # D
    Choice(1, 2),  # D# / Eb
    Single(2),  # E
    Single(3),  # F
    Choice(3, 4),  # F# / Gb
    Single(4),  # G
    Choice(4, 5),  # G# / Ab
    Single(5),  # A
    Choice(5, 6),  # A# / Bb
    Single(6),  # B
)


def octave_of(raw: int) -> int:
    """Octave of a half-tone offset, flooring below the reference pitch."""
    return (raw - REFERENCE_OFFSET) // SEMITONES_PER_OCTAVE + REFERENCE_OCTAVE


def tone_class_of(raw: int) -> int:
    """Half-tones above the C that starts the note's octave (0..11)."""
    return (raw - REFERENCE_OFFSET) % SEMITONES_PER_OCTAVE


def semitone_of(note: NamedNote) -> int:
    """Rebuild the half-tone offset from the reference pitch for a spelled note."""
    tone = _LETTER_SEMITONES[note.letter_class] + int(note.accidental)
    return (
        (note.octave - REFERENCE_OCTAVE) * SEMITONES_PER_OCTAVE + tone + REFERENCE_OFFSET
    )


def detect_quality(raw: Sequence[int]) -> ChordQuality:
    """
    Recognise root-position major and minor triads.

    Only exactly three ascending pitches are considered; inversions and
    other voicings come back as ``ChordQuality.NONE``.
    """
    if len(raw) != 3:
        return ChordQuality.NONE
    intervals = (raw[1] - raw[0], raw[2] - raw[1])
    if intervals == (4, 3):
        return ChordQuality.MAJOR
    if intervals == (3, 4):
        return ChordQuality.MINOR
    return ChordQuality.NONE


def name_pitches(raw: Sequence[int]) -> tuple[list[NamedNote], ChordQuality]:
    """
    Spell an ascending sequence of half-tone offsets.

    Black keys are resolved from the interval to the previous note: the
    first note, and any note at least a major third above its predecessor,
    is spelled as a sharp of the letter below; closer notes are spelled as
    a flat of the letter above. This is a simplification and ignores any key
    context.

    Args:
        raw: Half-tone offsets from the reference pitch, sorted ascending.

    Returns:
        (notes index-aligned with ``raw``, detected chord quality)
    """
    notes: list[NamedNote] = []
    for i, pitch in enumerate(raw):
        spelling = SPELLINGS[tone_class_of(pitch)]
        if isinstance(spelling, Single):
            letter, accidental = spelling.letter, Accidental.NATURAL
        elif i == 0 or pitch - raw[i - 1] >= SHARP_LEAP:
            letter, accidental = spelling.sharp_letter, Accidental.SHARP
        else:
            letter, accidental = spelling.flat_letter, Accidental.FLAT
        notes.append(NamedNote(letter, accidental, octave_of(pitch)))

    quality = detect_quality(raw)
    logger.debug("Spelled %s as %s (%s)", list(raw), notes, quality.value)
    return notes, quality
