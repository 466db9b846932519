"""Human-readable spellings of named notes."""

from collections.abc import Sequence
from typing import Final

from chordstaff.pitch_namer import Accidental, ChordQuality, NamedNote

ACCIDENTAL_GLYPHS: Final[dict[Accidental, str]] = {
    Accidental.FLAT: "♭",
    Accidental.NATURAL: "",
    Accidental.SHARP: "♯",
}


def format_note(note: NamedNote, *, html: bool = False) -> str:
    """Return e.g. ``"E♭4"``, or ``"E♭<sub>4</sub>"`` when ``html`` is set."""
    octave = f"<sub>{note.octave}</sub>" if html else str(note.octave)
    return f"{note.letter}{ACCIDENTAL_GLYPHS[note.accidental]}{octave}"


def format_chord(
    notes: Sequence[NamedNote], quality: ChordQuality, *, html: bool = False
) -> str:
    """Name a recognised triad by its root, otherwise list every note."""
    if quality is not ChordQuality.NONE:
        return f"{format_note(notes[0], html=html)} {quality.value}"
    return ", ".join(format_note(note, html=html) for note in notes)
