"""Shared names for the template layout, staging tree and generator contract."""

from __future__ import annotations

SKILLS_DIR = "skills"
RULES_DIR = "rules"
HOOKS_DIR = "hooks"
SUBAGENTS_DIR = "subagents"
SKILL_ENTRYPOINT = "SKILL.md"

STAGING_DIR = ".rulesync"
PIPELINE_CONFIG_FILE = "rulesync.jsonc"
PIPELINE_CONFIG_SCHEMA = (
    "https://raw.githubusercontent.com/dyoshikawa/rulesync/refs/heads/main/config-schema.json"
)

GENERATOR_EXECUTABLE = "rulesync"
GENERATOR_INSTALL_HINT = "npm i -g rulesync"

TARGETS: tuple[str, ...] = ("claudecode", "codexcli", "factorydroid")
FEATURES: tuple[str, ...] = ("skills", "rules")

LANGUAGE_MARKERS: dict[str, tuple[str, ...]] = {
    "typescript": ("package.json", "tsconfig.json", "bun.lock", "deno.json"),
    "python": ("pyproject.toml", "setup.py", "requirements.txt", "Pipfile"),
}

__all__ = [
    "FEATURES",
    "GENERATOR_EXECUTABLE",
    "GENERATOR_INSTALL_HINT",
    "HOOKS_DIR",
    "LANGUAGE_MARKERS",
    "PIPELINE_CONFIG_FILE",
    "PIPELINE_CONFIG_SCHEMA",
    "RULES_DIR",
    "SKILLS_DIR",
    "SKILL_ENTRYPOINT",
    "STAGING_DIR",
    "SUBAGENTS_DIR",
    "TARGETS",
]
