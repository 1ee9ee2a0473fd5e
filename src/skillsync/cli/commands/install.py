"""Commands that stage templates and run the generator."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from skillsync.cli.helpers import console, get_settings, run_sync
from skillsync.detect import detect_languages, format_languages
from skillsync.staging import SyncRequest


def install(ctx: typer.Context) -> None:
    """Install global skills (default command)."""
    settings = get_settings(ctx)
    run_sync(SyncRequest(features=("skills",), global_scope=True), settings)
    console.print()
    console.print(
        "[green]All installed.[/green] Rules are per-project - run 'skillsync rules' inside a project."
    )


def rules(ctx: typer.Context) -> None:
    """Install project rules (auto-detects languages)."""
    settings = get_settings(ctx)
    if settings.user_level:
        run_sync(SyncRequest(features=("rules",), global_scope=True), settings)
        return

    project_root = Path.cwd()
    langs = detect_languages(project_root)
    console.print(f"Detected languages: {format_languages(langs)}")
    request = SyncRequest(features=("rules",), global_scope=False, langs=frozenset(langs))
    run_sync(request, settings, project_root)


def skill(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Skill directory name"),
) -> None:
    """Install one skill."""
    settings = get_settings(ctx)
    run_sync(SyncRequest(features=("skills",), global_scope=True, skill=name), settings)


def rule(
    ctx: typer.Context,
    name: Optional[str] = typer.Argument(None, help="Rule file name without .md"),
) -> None:
    """Install one rule to the project (or user level with --user)."""
    if not name:
        console.print("[red]Usage:[/red] skillsync rule <name>")
        raise typer.Exit(1)

    settings = get_settings(ctx)
    project_root = Path.cwd()
    langs = None if settings.user_level else frozenset(detect_languages(project_root))
    request = SyncRequest(
        features=("rules",),
        global_scope=settings.user_level,
        langs=langs,
        rule=name,
    )
    run_sync(request, settings, project_root)


__all__ = ["install", "rule", "rules", "skill"]
