"""Shell completion CLI commands and completers."""

from __future__ import annotations

import click
from click.shell_completion import CompletionItem

from kno.config import get_config
from kno.core.address import NOTE_SUFFIX, SEPARATOR
from kno.core.errors import KnoError
from kno.core.resolver import resolve_directory
from kno.core.store import NoteStore
from kno.models import NodeKind


def register_completion_commands(cli: click.Group) -> None:
    """Register all completion-related commands with the CLI."""
    cli.add_command(completion_cmd)


# Shell rc snippets printed by `kno init` and `kno completion --help`
SHELL_SETUP = {
    "bash": ('~/.bashrc', 'eval "$(kno completion -s bash)"'),
    "zsh": ("~/.zshrc", 'eval "$(kno completion -s zsh)"'),
    "fish": (
        "~/.config/fish/completions/kno.fish",
        "kno completion -s fish > ~/.config/fish/completions/kno.fish",
    ),
}


# =============================================================================
# Custom Completers
# =============================================================================


def _complete_from_tree(incomplete: str, include_notes: bool) -> list[CompletionItem]:
    """Complete the last segment of an address from the notes tree.

    Directories complete with a trailing '/', notes without their .md suffix.
    """
    head, sep, prefix = incomplete.rpartition(SEPARATOR)
    base = f"{head}{sep}"

    try:
        config = get_config()
        directory = resolve_directory(head, config.notes_root)
        children = NoteStore(config.notes_root).list_children(directory)
    except (KnoError, OSError):
        return []

    items = []
    for name, kind in children:
        if not name.startswith(prefix):
            continue
        if kind == NodeKind.DIRECTORY:
            items.append(CompletionItem(f"{base}{name}{SEPARATOR}", help="directory"))
        elif include_notes and name.endswith(NOTE_SUFFIX):
            items.append(CompletionItem(f"{base}{name[: -len(NOTE_SUFFIX)]}", help="note"))
    return items


def complete_address(
        ctx: click.Context, param: click.Parameter, incomplete: str
) -> list[CompletionItem]:
    """Complete note and directory addresses."""
    return _complete_from_tree(incomplete, include_notes=True)


def complete_directory(
        ctx: click.Context, param: click.Parameter, incomplete: str
) -> list[CompletionItem]:
    """Complete directory addresses (for `kno list`)."""
    return _complete_from_tree(incomplete, include_notes=False)


@click.command("completion")
@click.option(
    "--shell",
    "-s",
    type=click.Choice(["bash", "zsh", "fish"]),
    default="bash",
    help="Shell to generate completion for",
)
@click.pass_context
def completion_cmd(ctx: click.Context, shell: str) -> None:
    """Generate shell completion script.

    \b
    For Bash, add to ~/.bashrc:
        eval "$(kno completion -s bash)"

    \b
    For Zsh, add to ~/.zshrc:
        eval "$(kno completion -s zsh)"

    \b
    For Fish:
        kno completion -s fish > ~/.config/fish/completions/kno.fish
    """
    import click.shell_completion as shell_completion

    # Get the root CLI from context
    root_cli = ctx.find_root().command

    shell_map = {
        "bash": shell_completion.BashComplete,
        "zsh": shell_completion.ZshComplete,
        "fish": shell_completion.FishComplete,
    }
    cls = shell_map[shell]
    comp = cls(root_cli, {}, "kno", "_KNO_COMPLETE")
    click.echo(comp.source())
