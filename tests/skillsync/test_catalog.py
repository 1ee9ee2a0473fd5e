from __future__ import annotations

from pathlib import Path

from skillsync.catalog import AgentEntry, RuleEntry, SkillEntry, collect_catalog


def test_collect_catalog(template_root: Path, skill_writer, rule_writer) -> None:
    long_description = "x" * 80
    skill_writer("alpha", f"name: alpha\ndescription: {long_description}\nscope: project\nlangs:\n  - python")
    skill_writer("beta", "name: beta\ndescription: Beta skill")
    (template_root / "skills" / "no-entry").mkdir()
    rule_writer("general", "description: General")
    rule_writer("web", "paths:\n  - src/**")
    agents = template_root / "subagents"
    agents.mkdir()
    (agents / "reviewer.md").write_text("---\nname: Code reviewer\n---\nReview.\n", encoding="utf-8")
    hooks = template_root / "hooks"
    hooks.mkdir()
    (hooks / "format.sh").write_text("#!/bin/sh\n", encoding="utf-8")
    (hooks / "lint.bash").write_text("#!/bin/bash\n", encoding="utf-8")
    (hooks / "notes.txt").write_text("", encoding="utf-8")

    catalog = collect_catalog(template_root)

    assert catalog.skills == [
        SkillEntry(name="alpha", scope="project", langs=["python"], description="x" * 60),
        SkillEntry(name="beta", scope="global", langs=[], description="Beta skill"),
    ]
    assert catalog.agents == [AgentEntry(name="reviewer", title="Code reviewer")]
    assert catalog.rules == [
        RuleEntry(name="general", paths=None),
        RuleEntry(name="web", paths=["src/**"]),
    ]
    assert catalog.hooks == ["format.sh", "lint.bash"]


def test_catalog_of_empty_root(tmp_path: Path) -> None:
    catalog = collect_catalog(tmp_path)

    assert catalog.to_dict() == {"skills": [], "agents": [], "rules": [], "hooks": []}


def test_catalog_tolerates_undecodable_bytes(template_root: Path) -> None:
    skill_dir = template_root / "skills" / "cafe"
    skill_dir.mkdir()
    (skill_dir / "SKILL.md").write_bytes(b"---\nname: cafe\ndescription: Caf\xe9 orders\n---\nBody\n")
    (template_root / "rules" / "menu.md").write_bytes(b"---\npaths:\n  - caf\xe9/**\n---\n")
    agents = template_root / "subagents"
    agents.mkdir()
    (agents / "barista.md").write_bytes(b"---\nname: Barista \xe9\n---\n")

    catalog = collect_catalog(template_root)

    assert catalog.skills[0].description == "Caf� orders"
    assert catalog.rules == [RuleEntry(name="menu", paths=["caf�/**"])]
    assert catalog.agents == [AgentEntry(name="barista", title="Barista �")]
