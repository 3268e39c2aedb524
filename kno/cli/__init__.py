"""CLI package for kno."""

from __future__ import annotations

from datetime import date
from typing import ClassVar

import click
from click.shell_completion import CompletionItem

from kno import __version__
from kno.cli.completion import complete_address, register_completion_commands
from kno.cli.git import register_git_commands
from kno.cli.listing import register_list_commands
from kno.cli.notes import note_options, open_cmd, register_note_commands
from kno.cli.utils import setup_logging


class AddressGroup(click.Group):
    """Click group that treats an unknown first word as a note address.

    `kno sql/joins` runs `kno open sql/joins`; command names and their
    aliases still win, so `kno open list` reaches a note called list.
    """

    DEFAULT_COMMAND = "open"

    ALIASES: ClassVar[dict[str, str]] = {
        "ls": "list",
        "o": "open",
    }

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        rv = super().get_command(ctx, cmd_name)
        if rv is not None:
            return rv
        if cmd_name in self.ALIASES:
            return super().get_command(ctx, self.ALIASES[cmd_name])
        return None

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        if args and self.get_command(ctx, args[0]) is None:
            args = [self.DEFAULT_COMMAND, *args]
        return super().resolve_command(ctx, args)

    def shell_complete(
        self, ctx: click.Context, incomplete: str
    ) -> list[CompletionItem]:
        # Addresses are valid wherever a command name is
        return super().shell_complete(ctx, incomplete) + complete_address(
            ctx, self, incomplete
        )


@click.group(cls=AddressGroup, invoke_without_command=True)
@click.version_option(version=__version__, prog_name="kno")
@note_options
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr")
@click.pass_context
def cli(
    ctx: click.Context,
    append: str | None,
    print_path: bool,
    day: date | None,
    verbose: bool,
) -> None:
    """Short addresses for a plain-text notes tree.

    Run 'kno' without arguments to open today's daily note, or give an
    address such as 'sql/joins' (a note) or 'work/standup/' (today's note
    inside a directory). See 'kno open --help' for the address forms.
    """
    setup_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj.update(append=append, print_path=print_path, day=day)
    if ctx.invoked_subcommand is None:
        # Default action: today's daily note
        ctx.invoke(open_cmd, address=())


# Register all command groups
register_note_commands(cli)
register_list_commands(cli)
register_git_commands(cli)
register_completion_commands(cli)


def main() -> None:
    """Entry point for the CLI."""
    cli()


__all__ = ["cli", "main"]
