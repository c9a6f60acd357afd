"""
Canonical source provider implementations.
"""

from pathlib import Path
from typing import Optional, Union

from shadcn_ui.config import Settings
from shadcn_ui.models.component import ComponentMetadata
from shadcn_ui.sources.base import SourceProvider
from shadcn_ui.utils.logging import get_logger

logger = get_logger(__name__)

BUILTIN_SOURCES = Path(__file__).parent / "components"


STUB_TEMPLATE = '''//! {title} component for shadcn-ui-rs.
//!
//! Generated by `shadcn-ui add {name}` (registry v{version}). Customize freely.

use gpui::*;

/// {title} component.
pub struct {pascal} {{
    id: ElementId,
}}

impl {pascal} {{
    /// Create a new {title}.
    pub fn new(id: impl Into<ElementId>) -> Self {{
        Self {{ id: id.into() }}
    }}
}}
'''


def title_case(name: str) -> str:
    """``toggle_group`` -> ``Toggle Group``."""
    return " ".join(word.capitalize() for word in name.split("_") if word)


def pascal_case(name: str) -> str:
    """``toggle_group`` -> ``ToggleGroup``."""
    return "".join(word.capitalize() for word in name.split("_") if word)


class StubSourceProvider(SourceProvider):
    """Renders placeholder sources stamped with the component version."""

    @property
    def name(self) -> str:
        return "stub"

    def get_source(self, component: ComponentMetadata, file_name: str) -> Optional[str]:
        if file_name not in component.files:
            return None
        return STUB_TEMPLATE.format(
            title=title_case(component.name),
            name=component.name,
            version=component.version,
            pascal=pascal_case(component.name),
        )


class DirectorySourceProvider(SourceProvider):
    """Reads canonical sources from ``<root>/<file_name>``."""

    def __init__(self, root: Union[str, Path]):
        self.root = Path(root)

    @property
    def name(self) -> str:
        return "directory"

    def get_source(self, component: ComponentMetadata, file_name: str) -> Optional[str]:
        path = self.root / file_name
        if not path.is_file():
            logger.debug(
                f"No canonical source at {path}",
                extra={"component": component.name, "file_path": str(path)}
            )
            return None
        return path.read_text(encoding="utf-8")


class BuiltinSourceProvider(SourceProvider):
    """
    Canonical sources shipped with the package.

    Components without a shipped source fall back to generated stubs.
    """

    def __init__(self, root: Union[str, Path] = BUILTIN_SOURCES, fallback: Optional[SourceProvider] = None):
        self.shipped = DirectorySourceProvider(root)
        self.fallback = fallback or StubSourceProvider()

    @property
    def name(self) -> str:
        return "builtin"

    def get_source(self, component: ComponentMetadata, file_name: str) -> Optional[str]:
        if file_name not in component.files:
            return None
        source = self.shipped.get_source(component, file_name)
        if source is None:
            source = self.fallback.get_source(component, file_name)
        return source


def get_source_provider(settings: Settings) -> SourceProvider:
    """Directory provider when ``source_dir`` is configured, shipped sources otherwise."""
    if settings.source_dir:
        logger.info(f"Using canonical sources from {settings.source_dir}")
        return DirectorySourceProvider(settings.source_dir)
    return BuiltinSourceProvider()
