"""Project language detection from marker files."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from skillsync.core.constants import LANGUAGE_MARKERS


def detect_languages(directory: Path) -> set[str]:
    """Return the languages with at least one marker file directly in ``directory``."""
    langs: set[str] = set()
    for lang, markers in LANGUAGE_MARKERS.items():
        if any((directory / marker).exists() for marker in markers):
            langs.add(lang)
    return langs


def format_languages(langs: Iterable[str]) -> str:
    """Render detected languages for display, ``"none"`` when empty."""
    present = set(langs)
    ordered = [lang for lang in LANGUAGE_MARKERS if lang in present]
    return ", ".join(ordered) if ordered else "none"


__all__ = ["detect_languages", "format_languages"]
