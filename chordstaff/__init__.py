"""Spell chords from half-tone offsets and engrave them on a staff."""

from chordstaff.chord import Chord
from chordstaff.pitch_namer import Accidental, ChordQuality, NamedNote

__version__ = "0.1.0"

__all__ = ["Accidental", "Chord", "ChordQuality", "NamedNote", "__version__"]
