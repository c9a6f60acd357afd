"""
Component catalog loading.

The registry is an explicit, immutable value: callers build it once with
``default_registry()`` or ``load_registry()`` and hand it to the resolver
and workflows.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import ValidationError

from shadcn_ui.models.component import Registry
from shadcn_ui.utils.logging import get_logger

logger = get_logger(__name__)

BUILTIN_CATALOG = Path(__file__).parent / "catalog.yaml"

REQUIRED_COMPONENT_FIELDS = ("name", "version", "files")


class RegistryLoadError(Exception):
    """Raised when a registry catalog cannot be read or is malformed."""
    pass


def parse_registry(data: Any, source: str = "<memory>") -> Registry:
    """
    Build a Registry from already-parsed catalog data.

    Args:
        data: Mapping with ``version`` and a ``components`` list
        source: Where the data came from, used in error messages

    Returns:
        Immutable Registry

    Raises:
        RegistryLoadError: If required fields are missing or invalid
    """
    if not isinstance(data, dict):
        raise RegistryLoadError(f"Registry catalog {source} must be a mapping")
    if "version" not in data:
        raise RegistryLoadError(f"Missing required field 'version' in {source}")

    components = data.get("components") or []
    for position, entry in enumerate(components):
        if not isinstance(entry, dict):
            raise RegistryLoadError(f"Component #{position} in {source} must be a mapping")
        for field in REQUIRED_COMPONENT_FIELDS:
            if field not in entry:
                label = entry.get("name", f"#{position}")
                raise RegistryLoadError(f"Missing required field '{field}' for component {label} in {source}")

    try:
        return Registry(version=str(data["version"]), components=components)
    except ValidationError as e:
        raise RegistryLoadError(f"Invalid registry catalog {source}: {e}") from e


def load_registry(path: Union[str, Path]) -> Registry:
    """
    Load a registry catalog from a YAML file.

    Raises:
        RegistryLoadError: If the file is missing, unparsable or invalid
    """
    catalog_path = Path(path)
    if not catalog_path.exists():
        raise RegistryLoadError(f"Registry catalog not found: {catalog_path}")

    try:
        with open(catalog_path, 'r', encoding='utf-8') as f:
            data: Dict[str, Any] = yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger.error(f"Failed to parse registry catalog {catalog_path}: {e}")
        raise RegistryLoadError(f"Failed to parse registry catalog {catalog_path}: {e}") from e

    registry = parse_registry(data, str(catalog_path))
    logger.info(
        f"Loaded registry v{registry.version} with {len(registry.components)} components",
        extra={"file_path": str(catalog_path)}
    )
    return registry


def default_registry() -> Registry:
    """Built-in component catalog shipped with the CLI."""
    return load_registry(BUILTIN_CATALOG)


def get_registry(registry_file: Optional[str] = None) -> Registry:
    """User catalog when ``registry_file`` is set, otherwise the built-in one."""
    if registry_file:
        return load_registry(registry_file)
    return default_registry()
