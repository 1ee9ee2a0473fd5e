"""Core configuration and constant exports."""

from .config import SyncSettings, TEMPLATE_ROOT_ENV, get_template_root
from .constants import (
    FEATURES,
    GENERATOR_EXECUTABLE,
    PIPELINE_CONFIG_FILE,
    STAGING_DIR,
    TARGETS,
)

__all__ = [
    "FEATURES",
    "GENERATOR_EXECUTABLE",
    "PIPELINE_CONFIG_FILE",
    "STAGING_DIR",
    "SyncSettings",
    "TARGETS",
    "TEMPLATE_ROOT_ENV",
    "get_template_root",
]
