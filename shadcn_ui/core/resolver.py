"""
Dependency Resolver

Flattens requested component names into a dependency-first install order.
"""

from typing import Iterable, Iterator, List, Optional, Set, Tuple

from pydantic import BaseModel, Field

from shadcn_ui.models.component import Registry
from shadcn_ui.utils.logging import get_logger

logger = get_logger(__name__)


class DependencyCycleError(ValueError):
    """Raised by a strict resolver when the dependency graph has a cycle."""

    def __init__(self, cycles: List[List[str]]):
        self.cycles = cycles
        rendered = "; ".join(" -> ".join(cycle) for cycle in cycles)
        super().__init__(f"Circular dependency detected: {rendered}")


class Resolution(BaseModel):
    """Install order plus any dependency cycles met on the way."""

    order: List[str] = Field(default_factory=list)
    cycles: List[List[str]] = Field(default_factory=list)
    unknown: List[str] = Field(default_factory=list)

    @property
    def has_cycles(self) -> bool:
        return bool(self.cycles)


class DependencyResolver:
    """Resolves component dependencies with cycle detection."""

    def __init__(self, registry: Registry, strict: bool = False):
        """
        Initialize dependency resolver.

        Args:
            registry: Component registry to resolve names against
            strict: Raise DependencyCycleError instead of reporting cycles
        """
        self.registry = registry
        self.strict = strict

    def resolve(self, requested: Iterable[str]) -> Resolution:
        """
        Resolve requested names into a dependency-first order.

        Each requested name is walked depth-first: dependencies are emitted
        before the component itself, and every name appears once. Names
        missing from the registry are emitted as leaves.

        Args:
            requested: Component names, walked in the given order

        Returns:
            Resolution with the install order and detected cycles

        Raises:
            DependencyCycleError: If strict and a cycle was found
        """
        resolution = Resolution()
        visited: Set[str] = set()

        for name in requested:
            if name in visited:
                continue
            self._walk(name, visited, resolution)

        if resolution.cycles:
            for cycle in resolution.cycles:
                logger.warning(
                    f"Circular dependency: {' -> '.join(cycle)}",
                    extra={"cycle": cycle}
                )
            if self.strict:
                raise DependencyCycleError(resolution.cycles)

        logger.debug(f"Resolved install order: {resolution.order}")
        return resolution

    def _walk(self, root: str, visited: Set[str], resolution: Resolution) -> None:
        """Iterative post-order walk from ``root``."""
        visited.add(root)
        stack: List[Tuple[str, Iterator[str]]] = [(root, self._dependencies_of(root, resolution))]

        while stack:
            name, dependencies = stack[-1]
            dependency = next(dependencies, None)

            if dependency is None:
                stack.pop()
                resolution.order.append(name)
                continue

            if dependency in visited:
                path = [entry[0] for entry in stack]
                if dependency in path:
                    resolution.cycles.append(path[path.index(dependency):] + [dependency])
                continue

            visited.add(dependency)
            stack.append((dependency, self._dependencies_of(dependency, resolution)))

    def _dependencies_of(self, name: str, resolution: Resolution) -> Iterator[str]:
        meta = self.registry.find(name)
        if meta is None:
            logger.debug(f"'{name}' not in registry, treating as leaf")
            resolution.unknown.append(name)
            return iter(())
        return iter(meta.dependencies)


def resolve(registry: Registry, requested: Iterable[str], strict: bool = False) -> List[str]:
    """
    Flattened, deduplicated, dependency-first order for ``requested``.

    Args:
        registry: Component registry
        requested: Requested component names
        strict: Raise on dependency cycles instead of logging them

    Returns:
        Ordered list of component names
    """
    return DependencyResolver(registry, strict=strict).resolve(requested).order


def find_dependent(order: List[str], dependency: str, registry: Registry) -> Optional[str]:
    """First component in ``order`` that directly depends on ``dependency``."""
    for name in order:
        meta = registry.find(name)
        if meta is not None and dependency in meta.dependencies:
            return name
    return None
