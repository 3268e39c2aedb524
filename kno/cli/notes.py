"""Note-related CLI commands: open, print and append."""

from __future__ import annotations

from datetime import date

import click

from kno.cli.completion import complete_address
from kno.cli.utils import (
    abort_on_error,
    console,
    ensure_setup,
    get_display_path,
    stderr_console,
)
from kno.config import get_config
from kno.core.address import join_address
from kno.core.notes import append_line, open_note
from kno.core.resolver import resolve_note
from kno.core.store import NoteStore
from kno.utils.dates import parse_fuzzy_date


def register_note_commands(cli: click.Group) -> None:
    """Register all note-related commands with the CLI."""
    cli.add_command(open_cmd)


def parse_date_option(
    ctx: click.Context, param: click.Parameter, value: str | None
) -> date | None:
    """Click callback turning --date text into a date."""
    if value is None:
        return None
    parsed = parse_fuzzy_date(value)
    if parsed is None:
        raise click.BadParameter(f"could not parse date '{value}'")
    return parsed


def note_options(f):
    """Options shared by the root group and `kno open`."""
    f = click.option(
        "--date",
        "-d",
        "day",
        callback=parse_date_option,
        help="Date for daily notes (e.g. yesterday, 2026-02-15, last friday)",
    )(f)
    f = click.option(
        "--print",
        "-p",
        "print_path",
        is_flag=True,
        help="Print the note's path instead of opening the editor",
    )(f)
    f = click.option(
        "--append",
        "-a",
        "append",
        metavar="TEXT",
        help="Append a line to the note instead of opening the editor",
    )(f)
    return f


@click.command("open")
@click.argument("address", nargs=-1, shell_complete=complete_address)
@note_options
@click.pass_context
def open_cmd(
    ctx: click.Context,
    address: tuple[str, ...],
    append: str | None,
    print_path: bool,
    day: date | None,
) -> None:
    """Open a note in the editor (today's daily note by default).

    \b
    Addresses:
      (none)          daily/YYYY/YYYY-MM-DD.md
      sql/joins       sql/joins.md
      work/standup/   work/standup/daily/YYYY/YYYY-MM-DD.md

    Several words are joined with '/', so 'kno sql joins' opens sql/joins.md.
    Use 'kno open NAME' for a note named like a command (list, git, ...).

    \b
    Examples:
      kno                              # Today's daily note
      kno sql/joins                    # Named note
      kno work/standup/ -a "Shipped"   # Append to today's standup
      kno -p -d yesterday              # Path of yesterday's daily note
    """
    # Options given before the address belong to the root group
    parent = ctx.obj or {}
    if append is None:
        append = parent.get("append")
    print_path = print_path or parent.get("print_path", False)
    if day is None:
        day = parent.get("day")

    if append is not None and print_path:
        raise click.UsageError("--append and --print cannot be used together")

    with abort_on_error():
        config = get_config()
        ensure_setup()
        store = NoteStore(config.notes_root)
        note = resolve_note(join_address(address), store=store, today=day)

        if day is not None and not note.is_daily:
            stderr_console.print("[yellow]Warning: --date ignored for named notes[/yellow]")

        if print_path:
            click.echo(str(note.path))
            return

        if append is not None:
            append_line(note.path, append, store)
            console.print(f"[green]Added to {get_display_path(note.path)}[/green]")
            return

        status = open_note(note, store, editor=config.editor)

    if status != 0:
        raise SystemExit(status)
