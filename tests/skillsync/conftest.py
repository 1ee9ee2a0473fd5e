from __future__ import annotations

import json
import subprocess
from pathlib import Path
from typing import Callable

import pytest

from skillsync.core.config import SyncSettings


def write_skill(template_root: Path, name: str, frontmatter: str | None, body: str = "Skill body\n") -> Path:
    skill_dir = template_root / "skills" / name
    skill_dir.mkdir(parents=True, exist_ok=True)
    text = body if frontmatter is None else f"---\n{frontmatter}\n---\n{body}"
    (skill_dir / "SKILL.md").write_text(text, encoding="utf-8")
    return skill_dir


def write_rule(template_root: Path, name: str, frontmatter: str | None, body: str = "Rule body\n") -> Path:
    rules_dir = template_root / "rules"
    rules_dir.mkdir(parents=True, exist_ok=True)
    text = body if frontmatter is None else f"---\n{frontmatter}\n---\n{body}"
    path = rules_dir / f"{name}.md"
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture()
def template_root(tmp_path: Path) -> Path:
    root = tmp_path / "templates"
    (root / "skills").mkdir(parents=True)
    (root / "rules").mkdir()
    return root


@pytest.fixture()
def project_root(tmp_path: Path) -> Path:
    root = tmp_path / "project"
    root.mkdir()
    return root


@pytest.fixture()
def settings(template_root: Path) -> SyncSettings:
    return SyncSettings(template_root=template_root)


class FakeGenerator:
    """Stands in for ``rulesync`` and snapshots the staging tree when run."""

    def __init__(self) -> None:
        self.calls: list[dict[str, object]] = []
        self.returncode = 0
        self.staged: dict[str, str] = {}
        self.config: dict[str, object] | None = None

    def run(self, args, cwd=None, check=False, **kwargs):
        project = Path(cwd)
        self.calls.append({"args": list(args), "cwd": project})
        staging = project / ".rulesync"
        if staging.is_dir():
            self.staged = {
                path.relative_to(staging).as_posix(): path.read_text(encoding="utf-8", errors="replace")
                for path in staging.rglob("*")
                if path.is_file()
            }
        config_file = project / "rulesync.jsonc"
        if config_file.is_file():
            self.config = json.loads(config_file.read_text(encoding="utf-8"))
        return subprocess.CompletedProcess(args, self.returncode)


@pytest.fixture()
def fake_generator(monkeypatch: pytest.MonkeyPatch) -> FakeGenerator:
    fake = FakeGenerator()
    monkeypatch.setattr("skillsync.generator.shutil.which", lambda name: f"/usr/local/bin/{name}")
    monkeypatch.setattr("skillsync.generator.subprocess.run", fake.run)
    return fake


@pytest.fixture()
def skill_writer(template_root: Path) -> Callable[..., Path]:
    def _write(name: str, frontmatter: str | None, body: str = "Skill body\n") -> Path:
        return write_skill(template_root, name, frontmatter, body)

    return _write


@pytest.fixture()
def rule_writer(template_root: Path) -> Callable[..., Path]:
    def _write(name: str, frontmatter: str | None, body: str = "Rule body\n") -> Path:
        return write_rule(template_root, name, frontmatter, body)

    return _write
