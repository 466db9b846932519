"""ChordExporter: renders chords to SVG, HTML or MusicXML files."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final

from chordstaff.chord import Chord
from chordstaff.logger_config import logger
from chordstaff.sheet_renderers import (
    HtmlPageRenderer,
    MusicXmlRenderer,
    SheetRenderer,
    SvgRenderer,
)

SUPPORTED_FORMATS: Final[set[str]] = {"svg", "html", "musicxml"}


class ChordExporter:
    """
    Write chords to disk via a pluggable renderer.

    Supported formats:
    - ``svg``: staff notation for a single chord.
    - ``html``: one or more chord SVGs in a self-contained HTML page.
    - ``musicxml``: whole-note chords for notation software, via music21.
    """

    def __init__(self, title: str = "", output_format: str = "svg") -> None:
        self.title = title
        normalized = output_format.strip().lower()
        if normalized not in SUPPORTED_FORMATS:
            supported = ", ".join(sorted(SUPPORTED_FORMATS))
            raise ValueError(f"Unsupported output format '{output_format}'. Use one of: {supported}.")
        self.output_format = normalized
        self.renderer = self._build_renderer(normalized)

    def _build_renderer(self, output_format: str) -> SheetRenderer:
        if output_format == "svg":
            return SvgRenderer()
        if output_format == "html":
            return HtmlPageRenderer()
        return MusicXmlRenderer()

    @property
    def default_extension(self) -> str:
        return self.renderer.default_extension

    def render(self, chords: Sequence[Chord]) -> str:
        """
        Render chords in the selected format.

        Raises:
            ValueError: If the format cannot hold the given chords.
        """
        logger.debug("Rendering %d chord(s) as %s", len(chords), self.output_format)
        return self.renderer.render(title=self.title, chords=chords)

    def export(self, chords: Sequence[Chord], output_path: str) -> None:
        """
        Render chords and write them to ``output_path``.

        Raises:
            ValueError: If rendering fails.
            OSError: If the output file cannot be written.
        """
        content = self.render(chords)
        with open(output_path, "w", encoding="utf-8") as fh:
            fh.write(content)
        logger.debug("Wrote %d characters to %s", len(content), output_path)
