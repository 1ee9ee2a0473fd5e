"""
skillsync - distribute skill and rule templates to AI coding agents via rulesync.

Usage:
    skillsync install
    skillsync rules
    skillsync skill <name>
    skillsync rule <name>
    skillsync list
"""

from __future__ import annotations

import logging
from typing import Optional

import typer

from skillsync.cli.commands import install, register_commands
from skillsync.cli.helpers import console
from skillsync.core.config import SyncSettings, get_template_root

__version__ = "0.1.0"

app = typer.Typer(
    name="skillsync",
    help="Sync skills and rules to Claude Code, Codex CLI and Factory Droid via rulesync.",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def callback(
    ctx: typer.Context,
    dry_run: bool = typer.Option(
        False, "--dry-run", "-n", envvar="SKILLSYNC_DRY_RUN", help="Preview changes"
    ),
    user: bool = typer.Option(
        False, "--user", "-u", envvar="SKILLSYNC_USER_LEVEL", help="Install to user-level (~/)"
    ),
    template_root: Optional[str] = typer.Option(
        None, "--template-root", help="Directory containing skills/, rules/ and hooks/"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Resolve settings once and run ``install`` when no command is given."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        root = get_template_root(template_root)
    except FileNotFoundError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(1)

    ctx.obj = SyncSettings(template_root=root, dry_run=dry_run, user_level=user)

    if ctx.invoked_subcommand is None:
        install(ctx)


register_commands(app)


def main():
    app()


if __name__ == "__main__":
    main()
