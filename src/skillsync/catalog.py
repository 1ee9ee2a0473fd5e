"""Read-only inventory of the available templates (``skillsync list``)."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from pathlib import Path

from skillsync.core.constants import (
    HOOKS_DIR,
    RULES_DIR,
    SKILL_ENTRYPOINT,
    SKILLS_DIR,
    SUBAGENTS_DIR,
)
from skillsync.frontmatter import extract_field, read_frontmatter
from skillsync.metadata import RuleMeta, load_skill_meta

DESCRIPTION_WIDTH = 60
HOOK_SUFFIXES = (".sh", ".bash")


@dataclass(frozen=True)
class SkillEntry:
    name: str
    scope: str
    langs: list[str]
    description: str


@dataclass(frozen=True)
class AgentEntry:
    name: str
    title: str


@dataclass(frozen=True)
class RuleEntry:
    name: str
    paths: list[str] | None


@dataclass
class Catalog:
    skills: list[SkillEntry] = field(default_factory=list)
    agents: list[AgentEntry] = field(default_factory=list)
    rules: list[RuleEntry] = field(default_factory=list)
    hooks: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, object]:
        return {
            "skills": [asdict(entry) for entry in self.skills],
            "agents": [asdict(entry) for entry in self.agents],
            "rules": [asdict(entry) for entry in self.rules],
            "hooks": list(self.hooks),
        }


def _markdown_files(directory: Path) -> list[Path]:
    if not directory.is_dir():
        return []
    return sorted(path for path in directory.iterdir() if path.is_file() and path.suffix == ".md")


def collect_skills(skills_dir: Path) -> list[SkillEntry]:
    entries: list[SkillEntry] = []
    if not skills_dir.is_dir():
        return entries
    for skill_dir in sorted(skills_dir.iterdir()):
        if not skill_dir.is_dir():
            continue
        meta = load_skill_meta(skill_dir)
        if meta is None:
            continue
        text = (skill_dir / SKILL_ENTRYPOINT).read_text(encoding="utf-8", errors="replace")
        entries.append(
            SkillEntry(
                name=skill_dir.name,
                scope=meta.scope,
                langs=list(meta.langs),
                description=extract_field(text, "description")[:DESCRIPTION_WIDTH],
            )
        )
    return entries


def collect_agents(subagents_dir: Path) -> list[AgentEntry]:
    entries: list[AgentEntry] = []
    for path in _markdown_files(subagents_dir):
        text = path.read_text(encoding="utf-8", errors="replace")
        entries.append(AgentEntry(name=path.stem, title=extract_field(text, "name")))
    return entries


def collect_rules(rules_dir: Path) -> list[RuleEntry]:
    entries: list[RuleEntry] = []
    for path in _markdown_files(rules_dir):
        data, _ = read_frontmatter(path)
        meta = RuleMeta.from_metadata(path.stem, data)
        entries.append(RuleEntry(name=path.stem, paths=meta.globs))
    return entries


def collect_hooks(hooks_dir: Path) -> list[str]:
    if not hooks_dir.is_dir():
        return []
    return sorted(
        path.name for path in hooks_dir.iterdir() if path.is_file() and path.suffix in HOOK_SUFFIXES
    )


def collect_catalog(template_root: Path) -> Catalog:
    return Catalog(
        skills=collect_skills(template_root / SKILLS_DIR),
        agents=collect_agents(template_root / SUBAGENTS_DIR),
        rules=collect_rules(template_root / RULES_DIR),
        hooks=collect_hooks(template_root / HOOKS_DIR),
    )


__all__ = [
    "AgentEntry",
    "Catalog",
    "RuleEntry",
    "SkillEntry",
    "collect_catalog",
]
