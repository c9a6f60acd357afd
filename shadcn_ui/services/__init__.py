"""Workflow services package."""

from shadcn_ui.services.workspace import (
    ProjectConfigError,
    ProjectWorkspace,
)
from shadcn_ui.services.installer import (
    ComponentInstaller,
    UnknownComponentError,
    validate_component_names,
)
from shadcn_ui.services.sync import (
    ComponentSync,
    FileComparison,
)
from shadcn_ui.services.inventory import ComponentInventory

__all__ = [
    'ProjectConfigError',
    'ProjectWorkspace',
    'ComponentInstaller',
    'UnknownComponentError',
    'validate_component_names',
    'ComponentSync',
    'FileComparison',
    'ComponentInventory',
]
