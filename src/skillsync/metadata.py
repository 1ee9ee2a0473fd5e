"""Typed views over parsed skill and rule frontmatter."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import AbstractSet, Mapping

from skillsync.core.constants import SKILL_ENTRYPOINT
from skillsync.frontmatter import FrontmatterValue, read_frontmatter

logger = logging.getLogger(__name__)

SCOPE_GLOBAL = "global"
SCOPE_PROJECT = "project"
SCOPE_INVALID = "<invalid>"


def _as_list(value: FrontmatterValue | None) -> list[str] | None:
    if isinstance(value, list):
        return list(value)
    return None


def _as_str(value: FrontmatterValue | None) -> str:
    return value if isinstance(value, str) else ""


def _resolve_scope(value: FrontmatterValue | None) -> str:
    # A list-valued scope matches neither mode.
    if value is None:
        return SCOPE_GLOBAL
    if not isinstance(value, str):
        return SCOPE_INVALID
    return value


@dataclass(frozen=True)
class SkillMeta:
    """Resolved fields of a skill's ``SKILL.md``.

    An empty ``langs`` list means the skill applies to every language.
    """

    name: str = ""
    scope: str = SCOPE_GLOBAL
    langs: list[str] = field(default_factory=list)

    @classmethod
    def from_metadata(cls, data: Mapping[str, FrontmatterValue]) -> "SkillMeta":
        return cls(
            name=_as_str(data.get("name")),
            scope=_resolve_scope(data.get("scope")),
            langs=_as_list(data.get("langs")) or [],
        )

    def matches_scope(self, global_scope: bool) -> bool:
        return self.scope == (SCOPE_GLOBAL if global_scope else SCOPE_PROJECT)

    def matches_languages(self, detected: AbstractSet[str] | None) -> bool:
        if detected is None or not self.langs:
            return True
        return any(lang in detected for lang in self.langs)


@dataclass(frozen=True)
class RuleMeta:
    """Resolved fields of a rule document.

    ``globs`` comes from ``paths`` or, failing that, ``globs``; ``None``
    when neither is a list, which makes the rule repo-wide (``root``).
    """

    name: str
    description: str
    globs: list[str] | None = None

    @property
    def root(self) -> bool:
        return self.globs is None

    @classmethod
    def from_metadata(cls, rule_name: str, data: Mapping[str, FrontmatterValue]) -> "RuleMeta":
        globs = _as_list(data.get("paths"))
        if globs is None:
            globs = _as_list(data.get("globs"))
        return cls(
            name=rule_name,
            description=_as_str(data.get("description")) or f"{rule_name} conventions",
            globs=globs,
        )


def load_skill_meta(skill_dir: Path) -> SkillMeta | None:
    """Return metadata for ``skill_dir``, or None when it has no entry point."""
    skill_md = skill_dir / SKILL_ENTRYPOINT
    if not skill_md.is_file():
        logger.debug("No %s in %s", SKILL_ENTRYPOINT, skill_dir)
        return None
    data, _ = read_frontmatter(skill_md)
    return SkillMeta.from_metadata(data)


__all__ = [
    "RuleMeta",
    "SCOPE_GLOBAL",
    "SCOPE_INVALID",
    "SCOPE_PROJECT",
    "SkillMeta",
    "load_skill_meta",
]
