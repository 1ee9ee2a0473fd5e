"""Run the external generator against a staged project and clean up after it."""

from __future__ import annotations

import logging
import shutil
import subprocess
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from skillsync.core.config import SyncSettings
from skillsync.core.constants import (
    GENERATOR_EXECUTABLE,
    GENERATOR_INSTALL_HINT,
    PIPELINE_CONFIG_FILE,
    STAGING_DIR,
)
from skillsync.staging import (
    StagingReport,
    SyncRequest,
    pipeline_config_path,
    prepare_staging,
    staging_root,
)

logger = logging.getLogger(__name__)


class SyncError(RuntimeError):
    """Base class for fatal sync failures."""


class GeneratorNotFoundError(SyncError):
    """Raised when the generator executable is not on PATH."""

    def __init__(self, executable: str = GENERATOR_EXECUTABLE, install_hint: str = GENERATOR_INSTALL_HINT):
        super().__init__(f"{executable} not found. Install it first:")
        self.executable = executable
        self.install_hint = install_hint


class StagingConflictError(SyncError):
    """Raised when the project already holds a staging tree or pipeline config."""


class GeneratorFailedError(SyncError):
    """Raised when the generator exits non-zero."""

    def __init__(self, returncode: int):
        super().__init__(f"{GENERATOR_EXECUTABLE} generate failed (exit code {returncode})")
        self.returncode = returncode


def ensure_generator() -> str:
    """Return the generator's resolved path."""
    executable = shutil.which(GENERATOR_EXECUTABLE)
    if executable is None:
        raise GeneratorNotFoundError()
    return executable


def guard_existing_staging(project_root: Path) -> None:
    """Refuse to run in a project that uses the generator natively."""
    if staging_root(project_root).exists() or pipeline_config_path(project_root).exists():
        raise StagingConflictError(
            f"{STAGING_DIR}/ or {PIPELINE_CONFIG_FILE} already exists "
            f"in {project_root}; this project may use {GENERATOR_EXECUTABLE} natively"
        )


def cleanup_staging(project_root: Path) -> None:
    """Remove the staging tree and pipeline config; safe to call repeatedly."""
    staging = staging_root(project_root)
    if staging.is_dir():
        shutil.rmtree(staging)
    config_file = pipeline_config_path(project_root)
    if config_file.is_file():
        config_file.unlink()


@contextmanager
def staging_area(project_root: Path) -> Iterator[Path]:
    """Own the staging tree for the duration of the block."""
    try:
        yield staging_root(project_root)
    finally:
        cleanup_staging(project_root)
        logger.debug("Removed staging tree from %s", project_root)


def run_generator(project_root: Path, *, dry_run: bool = False, executable: str = GENERATOR_EXECUTABLE) -> None:
    """Invoke ``<generator> generate`` in ``project_root`` with inherited output."""
    args = [executable, "generate"]
    if dry_run:
        args.append("--dry-run")
    logger.info("Running %s in %s", " ".join(args), project_root)
    result = subprocess.run(args, cwd=project_root, check=False)
    if result.returncode != 0:
        raise GeneratorFailedError(result.returncode)


def sync(project_root: Path, request: SyncRequest, settings: SyncSettings) -> StagingReport:
    """Stage templates for ``request`` and hand them to the generator.

    Preconditions are checked before anything is written. Once staging has
    started, the staging tree is removed on every exit path.

    Raises:
        GeneratorNotFoundError: The generator is not installed.
        StagingConflictError: The project already has a staging tree.
        GeneratorFailedError: The generator exited non-zero.
    """
    executable = ensure_generator()
    guard_existing_staging(project_root)

    with staging_area(project_root):
        report = prepare_staging(project_root, request, settings.template_root)
        run_generator(project_root, dry_run=settings.dry_run, executable=executable)
    return report


__all__ = [
    "GeneratorFailedError",
    "GeneratorNotFoundError",
    "StagingConflictError",
    "SyncError",
    "cleanup_staging",
    "ensure_generator",
    "guard_existing_staging",
    "run_generator",
    "staging_area",
    "sync",
]
