"""chordstaff CLI entry point."""

import sys

import click

from chordstaff import __version__
from chordstaff.chord import Chord
from chordstaff.logger_config import set_verbose
from chordstaff.note_format import format_note
from chordstaff.sheet_exporter import SUPPORTED_FORMATS, ChordExporter

CHORD_SEPARATOR = "/"

# Negative offsets such as -9 must reach the PITCHES argument instead of
# being parsed as unknown short options.
_PITCH_CONTEXT = {"ignore_unknown_options": True}


def _parse_chords(tokens: tuple[str, ...]) -> list[Chord]:
    """Split PITCHES on ``/`` and build one chord per group."""
    groups: list[list[int]] = [[]]
    for token in tokens:
        if token == CHORD_SEPARATOR:
            groups.append([])
            continue
        try:
            groups[-1].append(int(token))
        except ValueError:
            raise click.BadParameter(
                f"'{token}' is not a whole number of half-tones.", param_hint="PITCHES"
            ) from None

    if any(not group for group in groups):
        raise click.BadParameter("every chord needs at least one pitch.", param_hint="PITCHES")
    return [Chord(group) for group in groups]


# ── CLI group ──────────────────────────────────────────────────────────────────

@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="chordstaff")
@click.option("--verbose", "-v", is_flag=True, help="Log layout decisions to stderr.")
def main(verbose: bool) -> None:
    """chordstaff: chord spelling and staff notation from half-tone offsets."""
    set_verbose(verbose)


# ── name subcommand ────────────────────────────────────────────────────────────

@main.command(context_settings=_PITCH_CONTEXT)
@click.argument("pitches", nargs=-1, required=True)
def name(pitches: tuple[str, ...]) -> None:
    """
    Print the spelling of one or more chords.

    PITCHES are half-tone offsets from A4 (C4 is -9). Separate chords with /.

    \b
    Examples:
      chordstaff name -9 -5 -2
      chordstaff name 0 4 7 / 0 3 7
    """
    for chord in _parse_chords(pitches):
        click.echo(chord.name)
        for raw, note in zip(chord.raw, chord.notes):
            click.echo(
                f"  {raw:>4}  {format_note(note):<5} letter={note.letter_class} "
                f"accidental={note.accidental.name.lower()} octave={note.octave}"
            )


# ── render subcommand ──────────────────────────────────────────────────────────

@main.command(context_settings=_PITCH_CONTEXT)
@click.argument("pitches", nargs=-1, required=True)
@click.option(
    "--output",
    "-o",
    default=None,
    metavar="PATH",
    help="Destination file path. Defaults to chord.<ext> based on --format.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(sorted(SUPPORTED_FORMATS), case_sensitive=False),
    default="svg",
    show_default=True,
    help="svg: one chord on a staff. html: page of chords. musicxml: via music21.",
)
@click.option(
    "--title",
    default="",
    metavar="TEXT",
    help="Title for html and musicxml output.",
)
def render(
    pitches: tuple[str, ...],
    output: str | None,
    output_format: str,
    title: str,
) -> None:
    """
    Render chords as staff notation.

    PITCHES are half-tone offsets from A4 (C4 is -9). Separate chords with /.

    \b
    Examples:
      chordstaff render -9 -5 -2
      chordstaff render -9 -5 -2 -o c_major.svg
      chordstaff render -9 -5 -2 / -7 -3 0 --format html --title "Triads"
    """
    chords = _parse_chords(pitches)
    exporter = ChordExporter(title=title, output_format=output_format)
    resolved_output = output if output is not None else f"chord{exporter.default_extension}"

    click.echo(f"chordstaff v{__version__}")
    for chord in chords:
        click.echo(f"  Chord  : {chord.name}")
    click.echo(f"  Format : {exporter.output_format}")
    click.echo(f"  Output : {resolved_output}")

    try:
        exporter.export(chords, resolved_output)
    except OSError as exc:
        click.echo(f"  ERROR: Could not write output file — {exc}", err=True)
        sys.exit(1)
    except ValueError as exc:
        click.echo(f"  ERROR: Could not render chord — {exc}", err=True)
        sys.exit(1)

    click.echo(f"Done!  Wrote '{resolved_output}'.")
