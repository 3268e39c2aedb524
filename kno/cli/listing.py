"""`kno list`: tree view of the notes store."""

from __future__ import annotations

import click
from rich.text import Text
from rich.tree import Tree

from kno.cli.completion import complete_directory
from kno.cli.utils import abort_on_error, console
from kno.config import get_config
from kno.core.resolver import resolve_directory
from kno.core.store import NoteStore
from kno.core.tree import build_tree, count_nodes
from kno.models import NoteTreeNode


def register_list_commands(cli: click.Group) -> None:
    """Register listing commands with the CLI."""
    cli.add_command(list_cmd)


def _node_label(node: NoteTreeNode) -> Text:
    if node.is_dir:
        return Text(f"{node.name}/", style="bold blue")
    return Text(node.name)


def render_tree(node: NoteTreeNode, label: str) -> Tree:
    """Convert a NoteTreeNode into a rich Tree."""
    root = Tree(Text(label, style="bold"))
    pending = [(root, node)]
    while pending:
        branch, current = pending.pop()
        for child in current.children:
            child_branch = branch.add(_node_label(child))
            if child.children:
                pending.append((child_branch, child))
    return root


@click.command("list")
@click.argument("address", required=False, shell_complete=complete_directory)
@click.option(
    "--level",
    "-L",
    "depth",
    type=click.IntRange(min=0),
    default=None,
    help="Levels to show (default 1, 0 = unlimited)",
)
def list_cmd(address: str | None, depth: int | None) -> None:
    """List notes as a tree.

    Lists the notes root, or the directory named by ADDRESS. Entries are
    sorted by name with directories and notes mixed; hidden files are
    skipped.

    \b
    Examples:
      kno list              # Top level of the notes root
      kno list work -L 2    # Two levels below work/
      kno list -L 0         # Everything
    """
    with abort_on_error():
        config = get_config()
        if depth is None:
            depth = config.list_depth
        start = resolve_directory(address, config.notes_root)
        tree = build_tree(start, depth, NoteStore(config.notes_root))

    label = address.rstrip("/") + "/" if address else str(config.notes_root)
    console.print(render_tree(tree, label))

    dirs, files = count_nodes(tree)
    console.print(
        f"\n[dim]{dirs} director{'y' if dirs == 1 else 'ies'}, "
        f"{files} file{'' if files == 1 else 's'}[/dim]"
    )
