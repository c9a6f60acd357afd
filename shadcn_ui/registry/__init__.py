"""Component registry catalog."""

from shadcn_ui.registry.catalog import (
    BUILTIN_CATALOG,
    RegistryLoadError,
    default_registry,
    get_registry,
    load_registry,
    parse_registry,
)

__all__ = [
    "BUILTIN_CATALOG",
    "RegistryLoadError",
    "default_registry",
    "get_registry",
    "load_registry",
    "parse_registry",
]
