"""Data models for the shadcn-ui CLI."""

from .component import ComponentCategory, ComponentMetadata, Registry
from .diff import EditKind, EditOperation, Hunk, TaggedLine
from .project import ProjectConfig, ProjectSection, RegistrySection, ThemeSection
from .result import ComponentResult, ComponentStatus, SyncSummary

__all__ = [
    # Registry models
    "ComponentCategory",
    "ComponentMetadata",
    "Registry",
    # Diff models
    "EditKind",
    "EditOperation",
    "TaggedLine",
    "Hunk",
    # Project configuration models
    "ProjectConfig",
    "ProjectSection",
    "ThemeSection",
    "RegistrySection",
    # Result models
    "ComponentStatus",
    "ComponentResult",
    "SyncSummary",
]
