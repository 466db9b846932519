"""StaffLayout: places the noteheads and accidentals of a chord on a treble staff."""

import math
from collections.abc import Sequence

from chordstaff.logger_config import logger
from chordstaff.pitch_namer import Accidental, NamedNote
from chordstaff.sheet_models import (
    GlyphKind,
    GlyphPlacement,
    StaffGeometry,
    StaffLayout,
    StaffSegment,
)

DEFAULT_GEOMETRY = StaffGeometry()

DIATONIC_STEPS_PER_OCTAVE = 7

_ACCIDENTAL_GLYPHS = {
    Accidental.SHARP: GlyphKind.SHARP,
    Accidental.FLAT: GlyphKind.FLAT,
}


def note_y(note: NamedNote, geometry: StaffGeometry = DEFAULT_GEOMETRY) -> int:
    """Vertical offset of a notehead; higher pitches get smaller values."""
    return -(
        geometry.step_height * note.letter_class
        + geometry.octave_height * (note.octave - 4)
        - geometry.baseline_offset
    )


def _diatonic_step(note: NamedNote) -> int:
    return note.octave * DIATONIC_STEPS_PER_OCTAVE + note.letter_class


def needs_flip(notes: Sequence[NamedNote], i: int) -> bool:
    """True when note ``i`` sits a diatonic second from a neighbour in the chord."""
    step = _diatonic_step(notes[i])
    below = i > 0 and step - _diatonic_step(notes[i - 1]) == 1
    above = i + 1 < len(notes) and _diatonic_step(notes[i + 1]) - step == 1
    return below or above


def _staff_segment(min_y: int, max_y: int, geometry: StaffGeometry) -> StaffSegment:
    length = geometry.base_staff_length
    if max_y - min_y > geometry.spread_threshold:
        length = max_y - min_y + geometry.spread_margin

    anchor = geometry.note_anchor
    if anchor + max_y < length:
        logger.debug("Staff segment grows downward (length %d)", length)
        return StaffSegment(geometry.staff_segment_x, anchor + min_y, anchor + min_y + length)
    logger.debug("Staff segment grows upward (length %d)", length)
    return StaffSegment(geometry.staff_segment_x, anchor + max_y - length, anchor + max_y)


def _ledger_lines(min_y: int, max_y: int, geometry: StaffGeometry) -> list[GlyphPlacement]:
    lines: list[GlyphPlacement] = []

    # Below the staff the count rounds up, above it rounds down.
    if max_y > geometry.ledger_below_threshold:
        count = math.ceil((max_y - geometry.ledger_below_threshold) / geometry.ledger_spacing)
        lines.extend(
            GlyphPlacement(
                GlyphKind.LEDGER_LINE,
                geometry.ledger_x_start,
                geometry.ledger_below_origin + i * geometry.ledger_spacing,
            )
            for i in range(count)
        )

    if min_y < geometry.ledger_above_threshold:
        count = math.floor((geometry.ledger_above_reference - min_y) / geometry.ledger_spacing)
        lines.extend(
            GlyphPlacement(
                GlyphKind.LEDGER_LINE,
                geometry.ledger_x_start,
                geometry.ledger_above_origin - i * geometry.ledger_spacing,
            )
            for i in range(count)
        )

    if lines:
        logger.debug("Added %d ledger line(s)", len(lines))
    return lines


def layout_chord(
    notes: Sequence[NamedNote], geometry: StaffGeometry | None = None
) -> StaffLayout:
    """
    Lay out an ascending sequence of named notes on the staff.

    Algorithm overview
    ------------------
    Notes are visited from the highest down to the lowest.

    1. **Seconds** – A note a diatonic second away from either neighbour is
       "flipped": its notehead alternates between x = 0 and the lateral
       shift, driven by a counter that grows while consecutive notes need
       the flip and resets to 1 otherwise. Greedy, so clusters of three or
       more mutually adjacent seconds are not guaranteed to be collision
       free.

    2. **Accidentals** – Sharps and flats are drawn at their note's height,
       stepping left for each accidental already placed in the current run.
       The run resets after a natural note or after three accidentals in a
       row, so long runs may still overlap.

    3. **Staff segment** – One contiguous vertical stroke covering every
       notehead, grown downward from the highest note when that fits and
       upward from the lowest otherwise.

    4. **Ledger lines** – Extra short lines for notes beyond the staff.
    """
    geometry = geometry or DEFAULT_GEOMETRY

    placements: list[GlyphPlacement] = [GlyphPlacement(GlyphKind.KEY_LABEL, 0, 0)]
    placements.extend(
        GlyphPlacement(GlyphKind.STAFF_LINE, 0, y) for y in geometry.staff_line_ys
    )

    if not notes:
        return StaffLayout(geometry=geometry, placements=tuple(placements))

    min_y = math.inf
    max_y = -math.inf
    flip_count = 1
    accidental_count = 0
    for i in range(len(notes) - 1, -1, -1):
        note = notes[i]
        y = note_y(note, geometry)
        min_y = min(min_y, y)
        max_y = max(max_y, y)

        flip = needs_flip(notes, i)
        x = (flip_count % 2) * geometry.flip_shift if flip else 0
        placements.append(GlyphPlacement(GlyphKind.NOTEHEAD, x, y))
        flip_count = flip_count + 1 if flip else 1

        glyph = _ACCIDENTAL_GLYPHS.get(note.accidental)
        if glyph is not None:
            placements.append(
                GlyphPlacement(glyph, accidental_count * -geometry.accidental_step, y)
            )
        if glyph is not None and accidental_count < geometry.accidental_run_length - 1:
            accidental_count += 1
        else:
            accidental_count = 0

    return StaffLayout(
        geometry=geometry,
        placements=tuple(placements),
        staff_segment=_staff_segment(int(min_y), int(max_y), geometry),
        ledger_lines=tuple(_ledger_lines(int(min_y), int(max_y), geometry)),
    )
