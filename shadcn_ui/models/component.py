"""Component registry data models."""

from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ComponentCategory(str, Enum):
    """Category tag of a registry component."""

    INPUT = "input"
    DISPLAY = "display"
    FEEDBACK = "feedback"
    NAVIGATION = "navigation"
    LAYOUT = "layout"
    SPECIAL = "special"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


class ComponentMetadata(BaseModel):
    """Registry entry describing one copyable component."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Unique component name")
    version: str = Field(..., description="Component version")
    description: str = Field("", description="One-line description")
    gpui_version: str = Field(">=0.2.0", description="Supported GPUI version requirement")
    category: ComponentCategory = Field(ComponentCategory.SPECIAL, description="Category tag")
    files: Tuple[str, ...] = Field(..., description="Source files copied into the project")
    dependencies: Tuple[str, ...] = Field(default_factory=tuple, description="Names of required components")


class Registry(BaseModel):
    """
    Immutable, ordered component catalog.

    Constructed once (see ``shadcn_ui.registry.catalog``) and passed to the
    resolver and workflows explicitly.
    """

    model_config = ConfigDict(frozen=True)

    version: str
    components: Tuple[ComponentMetadata, ...] = Field(default_factory=tuple)

    @field_validator("components")
    @classmethod
    def _unique_names(cls, components: Tuple[ComponentMetadata, ...]) -> Tuple[ComponentMetadata, ...]:
        seen = set()
        for component in components:
            if component.name in seen:
                raise ValueError(f"Duplicate component name in registry: '{component.name}'")
            seen.add(component.name)
        return components

    def find(self, name: str) -> Optional[ComponentMetadata]:
        """Find a component by name."""
        for component in self.components:
            if component.name == name:
                return component
        return None

    def all_names(self) -> List[str]:
        """Get all component names in catalog order."""
        return [component.name for component in self.components]

    def by_category(self, category: ComponentCategory) -> List[ComponentMetadata]:
        """Get components tagged with the given category."""
        return [c for c in self.components if c.category == category]

    def dependents_of(self, name: str) -> List[str]:
        """Names of components that declare ``name`` as a direct dependency."""
        return [c.name for c in self.components if name in c.dependencies]
