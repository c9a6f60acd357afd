"""Project configuration data models (shadcn-ui.yaml)."""

from typing import Dict

from pydantic import BaseModel, Field


class ProjectSection(BaseModel):
    """Where component sources live inside the user's project."""

    components_dir: str = "src/components/ui"
    theme_file: str = "src/theme.rs"


class ThemeSection(BaseModel):
    """Theme choices recorded at init time."""

    base_color: str = "zinc"
    radius: str = "md"
    dark_mode: bool = True


class RegistrySection(BaseModel):
    """Registry location."""

    url: str = "https://shadcn-ui-rs.dev/registry"


class ProjectConfig(BaseModel):
    """Top-level project configuration."""

    project: ProjectSection = Field(default_factory=ProjectSection)
    theme: ThemeSection = Field(default_factory=ThemeSection)
    registry: RegistrySection = Field(default_factory=RegistrySection)
    components: Dict[str, str] = Field(
        default_factory=dict,
        description="Installed component name -> version copied into the project",
    )
