"""Chord: raw half-tone offsets turned into spelled notes and staff notation."""

from __future__ import annotations

import math
from collections.abc import Iterable
from numbers import Integral, Real

from chordstaff.note_format import format_chord
from chordstaff.overtone_filter import filter_overtones
from chordstaff.pitch_namer import ChordQuality, NamedNote, name_pitches
from chordstaff.sheet_models import StaffGeometry, StaffLayout
from chordstaff.staff_layout import layout_chord


def _coerce_pitch(value: object) -> int:
    """Accept integers and integral reals; anything else is a caller error."""
    if isinstance(value, Integral):
        return int(value)
    if isinstance(value, Real):
        if not math.isfinite(value):
            raise ValueError(f"Pitch must be finite, got {value!r}.")
        if value != int(value):
            raise ValueError(f"Pitch must be a whole number of half-tones, got {value!r}.")
        return int(value)
    raise TypeError(f"Pitch must be an integer, got {type(value).__name__}.")


class Chord:
    """
    A chord built from half-tone offsets relative to A4 (e.g. C4 is -9).

    Overtones are filtered and the pitches sorted ascending before they are
    spelled, so ``raw``, ``notes`` and the layout are all index-aligned and
    in ascending order. Nothing changes after construction.

    Usage:

        chord = Chord([-9, -5, -2])
        chord.name       # 'C4 major'
        chord.svg()      # standalone SVG document
    """

    __slots__ = ("_raw", "_notes", "_quality")

    def __init__(self, raw: Iterable[object]) -> None:
        pitches = sorted(filter_overtones([_coerce_pitch(value) for value in raw]))
        notes, quality = name_pitches(pitches)
        self._raw: tuple[int, ...] = tuple(pitches)
        self._notes: tuple[NamedNote, ...] = tuple(notes)
        self._quality = quality

    @property
    def raw(self) -> tuple[int, ...]:
        return self._raw

    @property
    def notes(self) -> tuple[NamedNote, ...]:
        return self._notes

    @property
    def quality(self) -> ChordQuality:
        return self._quality

    def __len__(self) -> int:
        return len(self._raw)

    def __repr__(self) -> str:
        return f"Chord({list(self._raw)!r})"

    @property
    def name(self) -> str:
        """Display name, e.g. ``'C4 major'`` or ``'C4, D♭4, G4'``."""
        if not self._notes:
            return ""
        return format_chord(self._notes, self._quality)

    @property
    def html_name(self) -> str:
        """Display name with octave numbers as HTML subscripts."""
        if not self._notes:
            return ""
        return format_chord(self._notes, self._quality, html=True)

    def layout(self, geometry: StaffGeometry | None = None) -> StaffLayout:
        return layout_chord(self._notes, geometry)

    def svg(self, geometry: StaffGeometry | None = None) -> str:
        """Render the chord as a standalone SVG document."""
        from chordstaff.sheet_renderers import SvgRenderer

        return SvgRenderer().render_layout(self.layout(geometry))
