"""Select templates for a sync request and materialize them for the generator.

The staging tree lives inside the target project::

    <project>/.rulesync/skills/<skill>/SKILL.md   (targets injected)
    <project>/.rulesync/rules/<rule>.md           (frontmatter rewritten)
    <project>/rulesync.jsonc                      (pipeline configuration)
"""

from __future__ import annotations

import json
import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path

from skillsync.core.constants import (
    FEATURES,
    PIPELINE_CONFIG_FILE,
    PIPELINE_CONFIG_SCHEMA,
    RULES_DIR,
    SKILL_ENTRYPOINT,
    SKILLS_DIR,
    STAGING_DIR,
    TARGETS,
)
from skillsync.frontmatter import inject_targets, parse_frontmatter, serialize_rule
from skillsync.metadata import RuleMeta, load_skill_meta

logger = logging.getLogger(__name__)

LANGUAGE_RULES: frozenset[str] = frozenset({"typescript", "python"})


@dataclass(frozen=True)
class SyncRequest:
    """One invocation's worth of selection criteria.

    Attributes:
        features: Subset of ``("skills", "rules")`` to stage.
        global_scope: True for user-level installs, False for project installs.
        langs: Detected project languages, or None for no language filter.
        skill: Only stage the skill whose directory has this name.
        rule: Only stage the rule whose file stem has this name.
    """

    features: tuple[str, ...]
    global_scope: bool
    langs: frozenset[str] | None = None
    skill: str | None = None
    rule: str | None = None

    def __post_init__(self) -> None:
        unknown = [feature for feature in self.features if feature not in FEATURES]
        if unknown:
            raise ValueError(f"Unknown feature(s): {', '.join(unknown)}")

    def wants(self, feature: str) -> bool:
        return feature in self.features


@dataclass
class StagingReport:
    """Names of the templates copied into the staging tree."""

    skills: list[str] = field(default_factory=list)
    rules: list[str] = field(default_factory=list)

    @property
    def empty(self) -> bool:
        return not self.skills and not self.rules


def staging_root(project_root: Path) -> Path:
    return project_root / STAGING_DIR


def pipeline_config_path(project_root: Path) -> Path:
    return project_root / PIPELINE_CONFIG_FILE


def stage_skills(project_root: Path, request: SyncRequest, skills_dir: Path) -> list[str]:
    """Copy every applicable skill into ``.rulesync/skills`` and inject targets."""
    staged: list[str] = []
    if not skills_dir.is_dir():
        logger.debug("Skills directory %s not found; nothing to stage", skills_dir)
        return staged

    for skill_dir in skills_dir.iterdir():
        if not skill_dir.is_dir():
            continue
        meta = load_skill_meta(skill_dir)
        if meta is None:
            continue
        if not meta.matches_scope(request.global_scope):
            logger.debug("Skipping skill %s: scope %s", skill_dir.name, meta.scope)
            continue
        if not meta.matches_languages(request.langs):
            logger.debug("Skipping skill %s: langs %s not detected", skill_dir.name, meta.langs)
            continue
        if request.skill and skill_dir.name != request.skill:
            continue

        dest_dir = staging_root(project_root) / SKILLS_DIR / skill_dir.name
        shutil.copytree(skill_dir, dest_dir)
        skill_md = dest_dir / SKILL_ENTRYPOINT
        raw = skill_md.read_text(encoding="utf-8", errors="surrogateescape")
        skill_md.write_text(inject_targets(raw, TARGETS), encoding="utf-8", errors="surrogateescape")
        logger.info("Staged skill %s", skill_dir.name)
        staged.append(skill_dir.name)

    return staged


def rule_excluded_by_language(rule_name: str, request: SyncRequest) -> bool:
    """True when a language-specific rule's language was not detected.

    Only project installs with a language filter exclude anything, and only
    rules named after a language are ever excluded.
    """
    if request.langs is None or request.global_scope:
        return False
    return rule_name in LANGUAGE_RULES and rule_name not in request.langs


def stage_rules(project_root: Path, request: SyncRequest, rules_dir: Path) -> list[str]:
    """Rewrite every applicable rule into ``.rulesync/rules``."""
    staged: list[str] = []
    if not rules_dir.is_dir():
        logger.debug("Rules directory %s not found; nothing to stage", rules_dir)
        return staged

    dest_dir = staging_root(project_root) / RULES_DIR
    dest_dir.mkdir(parents=True, exist_ok=True)

    for rule_path in rules_dir.iterdir():
        if not rule_path.is_file() or rule_path.suffix != ".md":
            continue
        rule_name = rule_path.stem
        if request.rule and rule_name != request.rule:
            continue
        if rule_excluded_by_language(rule_name, request):
            logger.debug("Skipping rule %s: language not detected", rule_name)
            continue

        data, body = parse_frontmatter(rule_path.read_text(encoding="utf-8", errors="surrogateescape"))
        meta = RuleMeta.from_metadata(rule_name, data)
        document = serialize_rule(
            meta.description,
            body,
            root=meta.root,
            globs=meta.globs,
            targets=TARGETS,
        )
        (dest_dir / rule_path.name).write_text(document, encoding="utf-8", errors="surrogateescape")
        logger.info("Staged rule %s", rule_name)
        staged.append(rule_name)

    return staged


def build_pipeline_config(request: SyncRequest) -> dict[str, object]:
    return {
        "$schema": PIPELINE_CONFIG_SCHEMA,
        "targets": list(TARGETS),
        "features": list(request.features),
        "global": request.global_scope,
        "delete": False,
    }


def write_pipeline_config(project_root: Path, request: SyncRequest) -> Path:
    path = pipeline_config_path(project_root)
    path.write_text(json.dumps(build_pipeline_config(request), indent=2), encoding="utf-8")
    return path


def prepare_staging(project_root: Path, request: SyncRequest, template_root: Path) -> StagingReport:
    """Stage skills, then rules, then write the pipeline configuration."""
    report = StagingReport()
    if request.wants("skills"):
        report.skills = stage_skills(project_root, request, template_root / SKILLS_DIR)
    if request.wants("rules"):
        report.rules = stage_rules(project_root, request, template_root / RULES_DIR)
    write_pipeline_config(project_root, request)
    return report


__all__ = [
    "LANGUAGE_RULES",
    "StagingReport",
    "SyncRequest",
    "build_pipeline_config",
    "pipeline_config_path",
    "prepare_staging",
    "rule_excluded_by_language",
    "stage_rules",
    "stage_skills",
    "staging_root",
    "write_pipeline_config",
]
