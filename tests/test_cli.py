"""Tests for the chordstaff command line."""

from pathlib import Path

from click.testing import CliRunner

from chordstaff import __version__
from chordstaff.cli import main


def test_version() -> None:
    result = CliRunner().invoke(main, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_name_accepts_negative_pitches() -> None:
    result = CliRunner().invoke(main, ["name", "-9", "-5", "-2"])
    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert lines[0] == "C4 major"
    assert "accidental=natural" in lines[1]
    assert len(lines) == 4


def test_name_several_chords() -> None:
    result = CliRunner().invoke(main, ["name", "0", "4", "7", "/", "0", "1"])
    assert result.exit_code == 0, result.output
    assert "A4 major" in result.output
    assert "A4, B♭4" in result.output


def test_name_rejects_non_numeric_pitch() -> None:
    result = CliRunner().invoke(main, ["name", "0", "C4"])
    assert result.exit_code == 2
    assert "not a whole number" in result.output


def test_name_rejects_empty_chord_group() -> None:
    result = CliRunner().invoke(main, ["name", "0", "/"])
    assert result.exit_code == 2


def test_render_svg(tmp_path: Path) -> None:
    out = tmp_path / "triad.svg"
    result = CliRunner().invoke(main, ["render", "-9", "-5", "-2", "-o", str(out)])
    assert result.exit_code == 0, result.output
    assert "C4 major" in result.output
    assert out.read_text(encoding="utf-8").startswith("<?xml")


def test_render_html(tmp_path: Path) -> None:
    out = tmp_path / "page.html"
    result = CliRunner().invoke(
        main,
        ["render", "0", "4", "7", "/", "0", "3", "7", "--format", "html", "--title", "Pair", "-o", str(out)],
    )
    assert result.exit_code == 0, result.output
    assert out.read_text(encoding="utf-8").count('<figure class="chord">') == 2


def test_render_svg_with_several_chords_fails(tmp_path: Path) -> None:
    out = tmp_path / "two.svg"
    result = CliRunner().invoke(main, ["render", "0", "/", "3", "-o", str(out)])
    assert result.exit_code == 1
    assert not out.exists()


def test_render_unwritable_path_fails(tmp_path: Path) -> None:
    out = tmp_path / "missing" / "chord.svg"
    result = CliRunner().invoke(main, ["render", "0", "-o", str(out)])
    assert result.exit_code == 1
