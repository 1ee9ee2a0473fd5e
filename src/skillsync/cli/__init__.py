"""CLI helpers exposed for other modules."""

from .helpers import console, get_settings, run_sync

__all__ = ["console", "get_settings", "run_sync"]
