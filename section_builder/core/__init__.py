"""Core module pour section_builder."""
from .schemas import (
    DEFAULT_COLUMNS_PREFIX,
    BUILDER_OPTIONS,
    BuilderOptions,
    CookiesPolicy,
    OgTag,
    PageSettings,
    Snapshot,
    SnapshotSection,
)
from .utils import deep_merge, kebab_case

__all__ = [
    "DEFAULT_COLUMNS_PREFIX",
    "BUILDER_OPTIONS",
    "BuilderOptions",
    "CookiesPolicy",
    "OgTag",
    "PageSettings",
    "Snapshot",
    "SnapshotSection",
    "deep_merge",
    "kebab_case",
]
