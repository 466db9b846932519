"""Unit tests for the chord renderers."""

import pytest

from chordstaff.chord import Chord
from chordstaff.sheet_renderers import HtmlPageRenderer, MusicXmlRenderer, SvgRenderer


def test_svg_document_header() -> None:
    svg = SvgRenderer().render(title="", chords=[Chord([0])])
    assert svg.startswith('<?xml version="1.0" encoding="UTF-8"?>')
    assert 'width="230px" height="360px" viewBox="0 0 200 360"' in svg
    assert svg.endswith("</svg>")


def test_svg_defines_glyphs_and_draws_staff() -> None:
    svg = Chord([0]).svg()
    for glyph_id in ("note", "flat", "sharp"):
        assert f'<path id="{glyph_id}" d="M' in svg
    assert 'id="key"' in svg
    for line_no in range(1, 6):
        assert f'id="line-{line_no}"' in svg
    assert '<path d="M0,240 L230,240" id="line-5"' in svg
    assert '<path d="M0,120 L230,120" id="line-1"' in svg


def test_svg_uses_one_notehead_per_note() -> None:
    svg = Chord([-9, -5, -2]).svg()
    assert svg.count('xlink:href="#note"') == 3


def test_svg_places_accidentals() -> None:
    svg = Chord([0, 1]).svg()
    assert '<use y="-15" x="38" fill="#000000" fill-rule="evenodd" xlink:href="#note"></use>' in svg
    assert '<use y="-15" x="0" fill="#000000" fill-rule="evenodd" xlink:href="#flat"></use>' in svg
    assert 'xlink:href="#sharp"' not in svg


def test_svg_draws_staff_segment() -> None:
    svg = Chord([0]).svg()
    assert '<path d="M169,193 L169,93" id="staff"' in svg


def test_svg_draws_ledger_lines() -> None:
    svg = Chord([-9]).svg()
    assert '<path d="M120,270 L180,270" id="ledger-0"' in svg


def test_svg_of_empty_chord_has_no_staff_segment() -> None:
    svg = Chord([]).svg()
    assert 'id="staff"' not in svg
    assert "<use" not in svg


def test_svg_renderer_rejects_several_chords() -> None:
    with pytest.raises(ValueError):
        SvgRenderer().render(title="", chords=[Chord([0]), Chord([3])])


def test_html_page_has_one_figure_per_chord() -> None:
    html = HtmlPageRenderer().render(title="Triads", chords=[Chord([0, 4, 7]), Chord([0, 3, 7])])
    assert html.startswith("<!DOCTYPE html>")
    assert html.count('<figure class="chord">') == 2
    assert "<figcaption>A<sub>4</sub> major</figcaption>" in html
    assert "<?xml" not in html


def test_html_title_is_escaped() -> None:
    html = HtmlPageRenderer().render(title="<Cool> & Co", chords=[Chord([0])])
    assert "<h1>&lt;Cool&gt; &amp; Co</h1>" in html


def test_html_without_title_has_no_heading() -> None:
    html = HtmlPageRenderer().build_html("", [("C<sub>4</sub>", "<svg></svg>")])
    assert "<h1>" not in html
    assert "<svg></svg>" in html


def test_html_requires_a_chord() -> None:
    with pytest.raises(ValueError):
        HtmlPageRenderer().render(title="", chords=[])


def test_musicxml_keeps_spelling() -> None:
    xml = MusicXmlRenderer().render(title="Second", chords=[Chord([0, 1])])
    assert "<step>B</step>" in xml
    assert "<alter>-1</alter>" in xml
    assert "<alter>1</alter>" not in xml
    assert "Second" in xml
