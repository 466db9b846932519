"""Renderer implementations for chord output formats."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING

from chordstaff.glyph_library import GLYPH_IDS, KEY_PATH, glyph_defs
from chordstaff.pitch_namer import Accidental, NamedNote
from chordstaff.sheet_models import GlyphKind, StaffLayout

if TYPE_CHECKING:
    from chordstaff.chord import Chord

_STROKE = 'stroke="#000000" stroke-width="2"'

_MUSIC21_ACCIDENTALS = {
    Accidental.FLAT: "flat",
    Accidental.NATURAL: None,
    Accidental.SHARP: "sharp",
}


def _escape_html(text: str) -> str:
    """Escape the three characters that are unsafe in HTML text content."""
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


class SheetRenderer(ABC):
    """Abstract chord renderer."""

    @property
    @abstractmethod
    def default_extension(self) -> str:
        """Default filename extension for this renderer."""

    @abstractmethod
    def render(self, *, title: str, chords: Sequence[Chord]) -> str:
        """Render chords into a file content string."""


class SvgRenderer(SheetRenderer):
    """Serialize a staff layout into a standalone SVG document."""

    @property
    def default_extension(self) -> str:
        return ".svg"

    def render(self, *, title: str, chords: Sequence[Chord]) -> str:
        if len(chords) != 1:
            raise ValueError("svg output holds exactly one chord; use html for several.")
        return self.render_layout(chords[0].layout())

    def render_layout(self, layout: StaffLayout) -> str:
        """
        Turn the structured placements of one chord into SVG markup.

        Reusable glyphs (noteheads and accidentals) are emitted as ``<use>``
        references into the ``<defs>`` block; lines are drawn as paths.
        """
        geometry = layout.geometry
        width, height = layout.extent
        fragments: list[str] = []
        staff_lines = 0
        for placement in layout.placements:
            if placement.kind is GlyphKind.KEY_LABEL:
                fragments.append(
                    f'<path d="{KEY_PATH}" id="key" fill="#000000" fill-rule="nonzero"></path>'
                )
            elif placement.kind is GlyphKind.STAFF_LINE:
                line_no = len(geometry.staff_line_ys) - staff_lines
                staff_lines += 1
                fragments.append(
                    f'<path d="M{placement.x},{placement.y} L{width},{placement.y}" '
                    f'id="line-{line_no}" {_STROKE} stroke-linecap="square"></path>'
                )
            else:
                fragments.append(
                    f'<use y="{placement.y}" x="{placement.x}" fill="#000000" '
                    f'fill-rule="evenodd" xlink:href="#{GLYPH_IDS[placement.kind]}"></use>'
                )

        segment = layout.staff_segment
        if segment is not None:
            fragments.append(
                f'<path d="M{segment.x},{segment.bottom} L{segment.x},{segment.top}" '
                f'id="staff" {_STROKE}></path>'
            )

        for i, ledger in enumerate(layout.ledger_lines):
            fragments.append(
                f'<path d="M{ledger.x},{ledger.y} L{geometry.ledger_x_end},{ledger.y}" '
                f'id="ledger-{i}" {_STROKE} stroke-linecap="square"></path>'
            )

        body = "\n".join(fragments)
        return f"""<?xml version="1.0" encoding="UTF-8"?>
<svg width="{width}px" height="{height}px" viewBox="0 0 {geometry.view_box_width} {height}" version="1.1" xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink">
<!-- Generator: chordstaff -->
<defs>{glyph_defs()}</defs>
{body}
</svg>"""


class HtmlPageRenderer(SheetRenderer):
    """Render chords into a self-contained HTML page with inline SVG."""

    def __init__(self, svg_renderer: SvgRenderer | None = None) -> None:
        self.svg_renderer = svg_renderer or SvgRenderer()

    @property
    def default_extension(self) -> str:
        return ".html"

    def render(self, *, title: str, chords: Sequence[Chord]) -> str:
        if not chords:
            raise ValueError("at least one chord is required for HTML rendering.")
        figures = [
            (chord.html_name, self.svg_renderer.render_layout(chord.layout()))
            for chord in chords
        ]
        return self.build_html(title, figures)

    def build_html(self, title: str, figures: Sequence[tuple[str, str]]) -> str:
        """
        Wrap ``(caption, svg)`` pairs in a self-contained HTML document.

        Captions are trusted markup (chord names with ``<sub>`` octaves); the
        title is escaped. The XML declaration of each SVG is dropped since
        it is not allowed inside HTML.
        """
        title_safe = _escape_html(title)
        heading = f"  <h1>{title_safe}</h1>\n" if title else ""
        chords = "\n".join(
            f'  <figure class="chord">{svg.split("?>", 1)[-1].strip()}'
            f"<figcaption>{caption}</figcaption></figure>"
            for caption, svg in figures
        )

        return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1.0" />
  <title>{title_safe}</title>
  <style>
    body {{
      font-family: Georgia, serif;
      background: #f0f0f0;
      margin: 0;
      padding: 2rem;
    }}
    h1 {{
      text-align: center;
      font-size: 1.6rem;
      color: #222;
    }}
    .chords {{
      display: flex;
      flex-wrap: wrap;
      gap: 1.5rem;
      justify-content: center;
    }}
    .chord {{
      background: #fff;
      box-shadow: 0 2px 8px rgba(0, 0, 0, 0.15);
      margin: 0;
      padding: 1rem;
      text-align: center;
    }}
    @media print {{
      body {{
        background: #fff;
        padding: 0;
      }}
      .chord {{
        box-shadow: none;
        page-break-inside: avoid;
      }}
    }}
  </style>
</head>
<body>
{heading}<div class="chords">
{chords}
</div>
</body>
</html>"""


class MusicXmlRenderer(SheetRenderer):
    """Render chords as whole-note chords in a MusicXML document via music21."""

    @property
    def default_extension(self) -> str:
        return ".musicxml"

    def render(self, *, title: str, chords: Sequence[Chord]) -> str:
        if not chords:
            raise ValueError("at least one chord is required for MusicXML rendering.")
        return self.render_bytes(title, [chord.notes for chord in chords]).decode("utf-8")

    def render_bytes(self, title: str, chords: Sequence[Sequence[NamedNote]]) -> bytes:
        """
        Build a single-part score with one measure per chord.

        The spelling of every note is passed through unchanged, so music21
        does not re-spell enharmonics.
        """
        from music21 import chord, metadata, note, pitch, stream
        from music21.musicxml.m21ToXml import GeneralObjectExporter

        part = stream.Part()
        for notes in chords:
            pitches = [
                pitch.Pitch(
                    step=n.letter,
                    octave=n.octave,
                    accidental=_MUSIC21_ACCIDENTALS[n.accidental],
                )
                for n in notes
            ]
            if pitches:
                part.append(chord.Chord(pitches, quarterLength=4.0))
            else:
                part.append(note.Rest(quarterLength=4.0))

        score = stream.Score()
        score.metadata = metadata.Metadata()
        score.metadata.title = title
        score.insert(0, part)
        return GeneralObjectExporter(score).parse()
