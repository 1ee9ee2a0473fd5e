"""CLI command modules for skillsync."""

from __future__ import annotations

import typer

from .install import install, rule, rules, skill
from .list_cmd import list_templates


def register_commands(app: typer.Typer) -> None:
    """Attach every command to the root application."""
    app.command()(install)
    app.command()(rules)
    app.command()(skill)
    app.command()(rule)
    app.command("list")(list_templates)


__all__ = ["install", "list_templates", "register_commands", "rule", "rules", "skill"]
