"""
Base interface for canonical component source providers.

A provider maps a registry component file to the source text the registry
considers canonical. Workflows compare and copy that text; they never care
where it came from.
"""

from abc import ABC, abstractmethod
from typing import Optional

from shadcn_ui.models.component import ComponentMetadata


class SourceNotFoundError(Exception):
    """Raised when no canonical source exists for a component file."""

    def __init__(self, component: str, file_name: str):
        self.component = component
        self.file_name = file_name
        super().__init__(f"No registry source for {component} ({file_name})")


class SourceProvider(ABC):
    """Base interface for canonical source providers."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Short provider name used in logs (e.g., 'stub', 'directory')."""
        pass

    @abstractmethod
    def get_source(self, component: ComponentMetadata, file_name: str) -> Optional[str]:
        """
        Return the canonical source text of one component file.

        Args:
            component: Registry entry the file belongs to
            file_name: One of ``component.files``

        Returns:
            Source text, or None when the provider has no such file
        """
        pass

    def require_source(self, component: ComponentMetadata, file_name: str) -> str:
        """
        Like ``get_source`` but raises when the source is missing.

        Raises:
            SourceNotFoundError: If the provider has no such file
        """
        source = self.get_source(component, file_name)
        if source is None:
            raise SourceNotFoundError(component.name, file_name)
        return source
