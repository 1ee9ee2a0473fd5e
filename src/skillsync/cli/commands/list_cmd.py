"""``skillsync list``: show available templates."""

from __future__ import annotations

import json

import typer
from rich.table import Table

from skillsync.catalog import Catalog, collect_catalog
from skillsync.cli.helpers import console, get_settings

TARGET_LABEL = "claude, codex, factory"


def _print_catalog(catalog: Catalog) -> None:
    skills = Table(title="Skills", show_header=True)
    skills.add_column("Skill", style="cyan")
    skills.add_column("Scope", style="magenta")
    skills.add_column("Langs", style="green")
    skills.add_column("Description")
    for entry in catalog.skills:
        scope = "project" if entry.scope == "project" else "global"
        langs = ",".join(entry.langs) if entry.langs else "all"
        skills.add_row(entry.name, scope, langs, entry.description)
    console.print(skills)
    console.print(f"[dim]Skill targets: {TARGET_LABEL}[/dim]")

    agents = Table(title="Agents (Claude Code only)", show_header=True)
    agents.add_column("Agent", style="cyan")
    agents.add_column("Name")
    for agent in catalog.agents:
        agents.add_row(agent.name, agent.title)
    console.print(agents)

    rules = Table(title="Rules", show_header=True)
    rules.add_column("Rule", style="cyan")
    rules.add_column("Paths", style="green")
    for entry in catalog.rules:
        rules.add_row(entry.name, ", ".join(entry.paths) if entry.paths else "all files")
    console.print(rules)
    console.print(f"[dim]Rule targets: {TARGET_LABEL}[/dim]")

    console.print("[bold]Hooks (Claude Code only):[/bold]")
    if catalog.hooks:
        for hook in catalog.hooks:
            console.print(f"  {hook}")
    else:
        console.print("  [dim](none - add .sh scripts to hooks/)[/dim]")


def list_templates(
    ctx: typer.Context,
    json_output: bool = typer.Option(False, "--json", help="Output machine-readable JSON"),
) -> None:
    """Show available skills, agents, rules and hooks."""
    settings = get_settings(ctx)
    catalog = collect_catalog(settings.template_root)

    if json_output:
        typer.echo(json.dumps(catalog.to_dict(), indent=2))
        return

    _print_catalog(catalog)


__all__ = ["list_templates"]
