"""Shared console and error reporting for CLI commands."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from skillsync.core.config import SyncSettings
from skillsync.generator import GeneratorNotFoundError, SyncError, sync
from skillsync.staging import StagingReport, SyncRequest

console = Console()


def get_settings(ctx: typer.Context) -> SyncSettings:
    """Return the settings the root callback stored on the context."""
    settings = ctx.find_root().obj
    if not isinstance(settings, SyncSettings):
        console.print("[red]Error:[/red] CLI settings were not initialised")
        raise typer.Exit(1)
    return settings


def _print_report(report: StagingReport, settings: SyncSettings) -> None:
    prefix = "[yellow]Dry run:[/yellow] " if settings.dry_run else ""
    if report.empty:
        console.print(f"{prefix}[yellow]No matching skills or rules to sync.[/yellow]")
        return
    if report.skills:
        console.print(f"{prefix}[green]Skills synced:[/green] {', '.join(sorted(report.skills))}")
    if report.rules:
        console.print(f"{prefix}[green]Rules synced:[/green] {', '.join(sorted(report.rules))}")


def run_sync(request: SyncRequest, settings: SyncSettings, project_root: Path | None = None) -> StagingReport:
    """Run one sync and turn fatal errors into a red message and exit code 1."""
    root = project_root or Path.cwd()
    try:
        report = sync(root, request, settings)
    except GeneratorNotFoundError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        console.print(f"   {exc.install_hint}")
        raise typer.Exit(1)
    except SyncError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(1)

    _print_report(report, settings)
    return report


__all__ = ["console", "get_settings", "run_sync"]
