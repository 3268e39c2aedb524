"""Git passthrough and first-time setup commands."""

from __future__ import annotations

import click

from kno.cli.completion import SHELL_SETUP
from kno.cli.utils import abort_on_error, console, fail
from kno.config import get_config, init_config


def register_git_commands(cli: click.Group) -> None:
    """Register git and setup commands with CLI."""
    cli.add_command(git_cmd)
    cli.add_command(init_cmd)


@click.command(
    "git",
    context_settings={
        "ignore_unknown_options": True,
        "allow_interspersed_args": False,
        "help_option_names": [],
    },
)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
def git_cmd(args: tuple[str, ...]) -> None:
    """Run git inside the notes root.

    All arguments are passed to git unchanged and git's exit status is
    returned.

    \b
    Examples:
        kno git status
        kno git add -A
        kno git commit -m "notes"
        kno git push
    """
    from kno.core.git import run_git

    with abort_on_error():
        config = get_config()
        status = run_git(args, config.notes_root, git_command=config.git_command)

    if status != 0:
        raise SystemExit(status)


@click.command("init")
@click.option("--remote", "-r", help="Remote repository URL to add")
@click.option("--no-git", is_flag=True, help="Skip creating a git repository")
@click.option(
    "--shell",
    "-s",
    type=click.Choice(sorted(SHELL_SETUP)),
    default="bash",
    help="Shell to show completion setup for",
)
def init_cmd(remote: str | None, no_git: bool, shell: str) -> None:
    """Set up the notes root.

    Creates the notes directory and a default config file, initializes a
    git repository with a .gitignore, and shows how to enable shell
    completion.

    \b
    Examples:
        kno init
        kno init --remote git@github.com:user/notes.git
        KNO_NOTES_ROOT=~/work-notes kno init --no-git
    """
    from kno.core.git import add_remote, create_gitignore, init_repo, is_git_repo

    with abort_on_error():
        notes_root = get_config().notes_root
        try:
            init_config(notes_root)
        except OSError as e:
            fail(f"Cannot create {notes_root}: {e}")
        console.print(f"[green]Notes root:[/green] {notes_root}")

        if no_git:
            console.print("[dim]Skipped git setup[/dim]")
        elif is_git_repo(notes_root):
            console.print(
                f"[yellow]Git repository already exists in:[/yellow] {notes_root}"
            )
        else:
            repo = init_repo(notes_root)
            console.print(f"[green]Initialized git repository in:[/green] {notes_root}")

            if create_gitignore(notes_root):
                console.print("[green]Created .gitignore[/green]")

            if remote:
                add_remote(repo, remote)
                console.print(f"[green]Added remote origin:[/green] {remote}")

    rc_file, line = SHELL_SETUP[shell]
    console.print(f"\n[dim]Enable completion by adding to {rc_file}:[/dim]")
    console.print(f"  {line}", markup=False)
