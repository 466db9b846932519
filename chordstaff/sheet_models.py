"""Data models for staff layout outputs."""

from dataclasses import dataclass, field
from enum import Enum


class GlyphKind(Enum):
    """Kinds of glyph the layout engine can place on the canvas."""

    NOTEHEAD = "notehead"
    SHARP = "sharp"
    FLAT = "flat"
    STAFF_LINE = "staff-line"
    LEDGER_LINE = "ledger-line"
    KEY_LABEL = "key-label"


@dataclass(frozen=True)
class GlyphPlacement:
    """A single glyph anchored at ``(x, y)`` in canvas units.

    Noteheads and accidentals are offsets applied to the glyph artwork;
    staff and ledger lines carry the left end of the line.
    """

    kind: GlyphKind
    x: float
    y: float


@dataclass(frozen=True)
class StaffSegment:
    """The vertical stroke joining all noteheads of the chord."""

    x: float
    top: float
    bottom: float

    def contains(self, y: float) -> bool:
        return self.top <= y <= self.bottom


@dataclass(frozen=True)
class StaffGeometry:
    """Tunable constants of the staff layout, in canvas units."""

    # Vertical placement of a note: -(step * letter + octave * (oct - 4) - baseline)
    step_height: int = 15
    octave_height: int = 105
    baseline_offset: int = 75

    flip_shift: int = 38
    accidental_step: int = 22
    # Accidentals stepped left in a row before the offset returns to 0.
    accidental_run_length: int = 3

    base_staff_length: int = 100
    spread_threshold: int = 20
    spread_margin: int = 80
    note_anchor: int = 193
    staff_segment_x: int = 169

    ledger_below_threshold: int = 60
    ledger_below_origin: int = 270
    ledger_above_threshold: int = -90
    ledger_above_reference: int = -60
    ledger_above_origin: int = 90
    ledger_spacing: int = 30
    ledger_x_start: int = 120
    ledger_x_end: int = 180

    staff_line_ys: tuple[int, ...] = (240, 210, 180, 150, 120)
    canvas_width: int = 230
    canvas_height: int = 360
    view_box_width: int = 200


@dataclass(frozen=True)
class StaffLayout:
    """Everything a renderer needs to draw one chord on a staff."""

    geometry: StaffGeometry
    placements: tuple[GlyphPlacement, ...]
    staff_segment: StaffSegment | None = None
    ledger_lines: tuple[GlyphPlacement, ...] = field(default_factory=tuple)

    @property
    def noteheads(self) -> tuple[GlyphPlacement, ...]:
        return tuple(p for p in self.placements if p.kind is GlyphKind.NOTEHEAD)

    @property
    def accidentals(self) -> tuple[GlyphPlacement, ...]:
        return tuple(
            p for p in self.placements if p.kind in (GlyphKind.SHARP, GlyphKind.FLAT)
        )

    @property
    def extent(self) -> tuple[int, int]:
        """Canvas size as ``(width, height)``."""
        return self.geometry.canvas_width, self.geometry.canvas_height
