"""chord-sheet CLI entry point.

Works on song workbooks stored as JSON (see
:meth:`chord_sheet.host.MemoryDocument.from_dict`).
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click

from chord_sheet import __version__
from chord_sheet.config import WorkbookConfig
from chord_sheet.errors import ChordSheetError
from chord_sheet.host import MemoryDocument
from chord_sheet.layout import detect_sections, layout_config_for, plan_layout, render_print_sheet
from chord_sheet.spaces import Workbook
from chord_sheet.sync import sync_structure, transpose_all_chords

logger = logging.getLogger(__name__)


def _load(path: str, config: WorkbookConfig) -> tuple[MemoryDocument, Workbook]:
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            msg = f"'{path}' does not hold a workbook object"
            raise ChordSheetError(msg)
        document = MemoryDocument.from_dict(data)
    except (ChordSheetError, ValueError, TypeError, AttributeError) as exc:
        _fail(exc)
    logger.debug("Loaded workbook %s", path)
    return document, Workbook(document, config)


def _save(document: MemoryDocument, path: str) -> None:
    Path(path).write_text(json.dumps(document.to_dict(), indent=2) + "\n", encoding="utf-8")
    click.echo(f"Saved '{path}'")


def _fail(exc: Exception) -> None:
    click.echo(f"  ERROR: {exc}", err=True)
    sys.exit(1)


output_option = click.option(
    "--output",
    "-o",
    default=None,
    metavar="PATH",
    help="Destination workbook. Defaults to overwriting FILE.",
)
workbook_argument = click.argument(
    "file", type=click.Path(exists=True, dir_okay=False, readable=True)
)


# ── CLI group ──────────────────────────────────────────────────────────────────

@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="chord-sheet")
@click.option("--verbose", "-v", is_flag=True, help="Log every step.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, readable=True),
    default=None,
    metavar="PATH",
    help="JSON file overriding sheet names, named ranges and print spacing.",
)
@click.pass_context
def main(ctx: click.Context, verbose: bool, config_path: str | None) -> None:
    """chord-sheet: lyrics and chords song sheets."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        ctx.obj = WorkbookConfig.from_file(config_path) if config_path else WorkbookConfig()
    except (ChordSheetError, json.JSONDecodeError) as exc:
        _fail(exc)


# ── inspection ─────────────────────────────────────────────────────────────────

@main.command()
@workbook_argument
@click.pass_obj
def sections(config: WorkbookConfig, file: str) -> None:
    """List the sections of the chords sheet, relative to its working area."""
    _, book = _load(file, config)
    try:
        found = detect_sections(book.chords.main.get_values())
    except ChordSheetError as exc:
        _fail(exc)
    for number, section in enumerate(found, start=1):
        click.echo(f"{number:>3}  {section.area!r}")
    click.echo(f"{len(found)} section(s)")


@main.command()
@workbook_argument
@click.pass_obj
def layout(config: WorkbookConfig, file: str) -> None:
    """Show how the sections would be laid out on printed pages."""
    _, book = _load(file, config)
    try:
        found = detect_sections(book.chords.main.get_values())
        plan = plan_layout(found, layout_config_for(book.print, config))
    except ChordSheetError as exc:
        _fail(exc)
    for page, columns in enumerate(plan.pages, start=1):
        click.echo(f"Page {page}")
        for number, column in enumerate(columns, start=1):
            placed = ", ".join(f"#{index + 1} at {plan.positions[index]}" for index in column)
            click.echo(f"  column {number}: {placed}")
    click.echo(f"{plan.page_count} page(s)")


# ── editing ────────────────────────────────────────────────────────────────────

@main.command()
@workbook_argument
@click.argument("semitones", type=int)
@output_option
@click.pass_obj
def transpose(config: WorkbookConfig, file: str, semitones: int, output: str | None) -> None:
    """
    Transpose every chord and the key by SEMITONES.

    \b
    Examples:
      chord-sheet transpose song.json 2
      chord-sheet transpose song.json -o lower.json -- -3
    """
    document, book = _load(file, config)
    try:
        transpose_all_chords(book, semitones)
    except ChordSheetError as exc:
        _fail(exc)
    _save(document, output or file)


@main.command(name="print")
@workbook_argument
@output_option
@click.pass_obj
def print_command(config: WorkbookConfig, file: str, output: str | None) -> None:
    """Render the song onto the print sheet."""
    document, book = _load(file, config)
    try:
        pages = render_print_sheet(book)
    except ChordSheetError as exc:
        _fail(exc)
    click.echo(f"{pages} page(s)")
    _save(document, output or file)


@main.command()
@workbook_argument
@output_option
@click.pass_obj
def sync(config: WorkbookConfig, file: str, output: str | None) -> None:
    """Replay row/column edits of the lyrics sheet on the chords sheet."""
    document, book = _load(file, config)
    try:
        sync_structure(book)
    except ChordSheetError as exc:
        _fail(exc)
    _save(document, output or file)
