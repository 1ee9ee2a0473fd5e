"""Run configuration and template root discovery."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from rich.console import Console

from .constants import RULES_DIR, SKILLS_DIR

console = Console()

TEMPLATE_ROOT_ENV = "SKILLSYNC_TEMPLATE_ROOT"


@dataclass(frozen=True)
class SyncSettings:
    """Flags collected once at the CLI entry point.

    Attributes:
        dry_run: Ask the generator to preview instead of writing.
        user_level: Install to the user's home instead of the project.
        template_root: Directory holding ``skills/``, ``rules/`` and ``hooks/``.
    """

    template_root: Path
    dry_run: bool = False
    user_level: bool = False


def _looks_like_template_root(path: Path) -> bool:
    return (path / SKILLS_DIR).is_dir() or (path / RULES_DIR).is_dir()


def get_template_root(override_path: str | None = None) -> Path:
    """Return the directory the templates are read from.

    Resolution order:
    1. ``override_path`` (the ``--template-root`` option)
    2. ``SKILLSYNC_TEMPLATE_ROOT`` environment variable
    3. The repository checkout containing this package

    Raises:
        FileNotFoundError: If no candidate holds ``skills/`` or ``rules/``.
    """
    if override_path:
        override = Path(override_path).expanduser().resolve()
        if _looks_like_template_root(override):
            return override
        console.print(
            f"[yellow]--template-root set to {override}, but no skills/ or rules/ found there. Ignoring.[/yellow]"
        )

    env_root = os.environ.get(TEMPLATE_ROOT_ENV)
    if env_root:
        root_path = Path(env_root).expanduser().resolve()
        if _looks_like_template_root(root_path):
            return root_path
        console.print(
            f"[yellow]{TEMPLATE_ROOT_ENV} set to {root_path}, but no skills/ or rules/ found there. Ignoring.[/yellow]"
        )

    candidate = Path(__file__).resolve().parents[3]
    if _looks_like_template_root(candidate):
        return candidate

    raise FileNotFoundError(
        f"Cannot locate template sources. Pass --template-root or set {TEMPLATE_ROOT_ENV}."
    )


__all__ = ["SyncSettings", "TEMPLATE_ROOT_ENV", "get_template_root"]
