"""Component listing for the ``list`` command."""

from typing import List, Optional, Tuple

from shadcn_ui.models.component import ComponentCategory, ComponentMetadata, Registry
from shadcn_ui.services.workspace import ProjectConfigError, ProjectWorkspace
from shadcn_ui.utils.logging import get_logger

logger = get_logger(__name__)


class ComponentInventory:
    """Registry catalog joined with what the project has installed."""

    def __init__(self, workspace: ProjectWorkspace, registry: Registry):
        self.workspace = workspace
        self.registry = registry

    def installed(self) -> List[str]:
        """
        Installed component names.

        An uninitialized or unreadable project simply has nothing installed.
        """
        try:
            config = self.workspace.load_config()
        except ProjectConfigError as e:
            logger.debug(f"No installed components: {e}")
            return []
        return self.workspace.installed_components(config, self.registry)

    def installed_entries(self) -> List[Tuple[str, Optional[ComponentMetadata]]]:
        """Installed names with their registry entry (None for local-only files)."""
        return [(name, self.registry.find(name)) for name in self.installed()]

    def by_category(self) -> List[Tuple[ComponentCategory, List[ComponentMetadata]]]:
        """Registry components grouped by category, categories sorted by display name."""
        groups = []
        for category in sorted(ComponentCategory, key=lambda c: c.display_name):
            components = self.registry.by_category(category)
            if components:
                groups.append((category, components))
        return groups
