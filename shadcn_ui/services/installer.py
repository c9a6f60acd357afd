"""
Component installer service.

Implements the ``init``, ``add`` and ``remove`` workflows: it validates
requested names against the registry, resolves dependencies into install
order, copies canonical sources into the project, keeps the components
module file in sync and records installed versions.
"""

from typing import Iterable, List, Optional

from shadcn_ui.config import Settings, settings as default_settings
from shadcn_ui.core.resolver import DependencyResolver, find_dependent
from shadcn_ui.models.component import Registry
from shadcn_ui.models.project import ProjectConfig, ProjectSection, ThemeSection
from shadcn_ui.models.result import ComponentResult, ComponentStatus, SyncSummary
from shadcn_ui.services.workspace import ProjectConfigError, ProjectWorkspace
from shadcn_ui.sources.base import SourceNotFoundError, SourceProvider
from shadcn_ui.utils.logging import LogContext, get_logger, log_component_event, log_error_with_context

logger = get_logger(__name__)

# Per-component failures recorded as FAILED results; the batch continues
COMPONENT_ERRORS = (OSError, UnicodeDecodeError, SourceNotFoundError)


class UnknownComponentError(ValueError):
    """Raised when requested component names are not in the registry."""

    def __init__(self, names: List[str], available: List[str]):
        self.names = names
        self.available = available
        quoted = ", ".join(f"'{name}'" for name in names)
        super().__init__(
            f"Unknown component: {quoted}\n\nAvailable components: {', '.join(available)}"
        )


def validate_component_names(registry: Registry, names: Iterable[str]) -> List[str]:
    """
    Check requested names against the registry.

    Returns:
        The names as a list, in the given order

    Raises:
        UnknownComponentError: If any name is not in the registry
    """
    names = list(names)
    unknown = [name for name in names if registry.find(name) is None]
    if unknown:
        raise UnknownComponentError(unknown, registry.all_names())
    return names


class ComponentInstaller:
    """
    Copies registry components into a project.
    """

    def __init__(
        self,
        workspace: ProjectWorkspace,
        registry: Registry,
        sources: SourceProvider,
        settings: Optional[Settings] = None,
    ):
        """
        Initialize the installer.

        Args:
            workspace: File-system view of the user project
            registry: Component registry
            sources: Canonical source provider
            settings: CLI settings. If None, the global settings are used.
        """
        self.workspace = workspace
        self.registry = registry
        self.sources = sources
        self.settings = settings or default_settings

    def init_project(
        self,
        components_dir: str = "src/components/ui",
        base_color: str = "zinc",
        radius: str = "md",
        dark_mode: bool = True,
        force: bool = False,
    ) -> ProjectConfig:
        """
        Write a fresh project configuration and create the components dir.

        Args:
            components_dir: Where component sources will be copied
            base_color: Base color theme name
            radius: Border radius preset
            dark_mode: Enable dark mode support
            force: Overwrite an existing configuration

        Returns:
            The written ProjectConfig

        Raises:
            ProjectConfigError: If a configuration exists and force is not set
        """
        if self.workspace.has_config() and not force:
            raise ProjectConfigError(
                f"{self.workspace.config_path} already exists (use --force to overwrite)"
            )

        config = ProjectConfig(
            project=ProjectSection(components_dir=components_dir),
            theme=ThemeSection(base_color=base_color, radius=radius, dark_mode=dark_mode),
        )
        self.workspace.components_dir(config).mkdir(parents=True, exist_ok=True)
        self.workspace.save_config(config)
        logger.info(
            f"Initialized project in {self.workspace.root}",
            extra={"command": "init", "file_path": str(self.workspace.config_path)}
        )
        return config

    def add(
        self,
        names: Iterable[str] = (),
        all_components: bool = False,
        path: Optional[str] = None,
        overwrite: bool = False,
    ) -> SyncSummary:
        """
        Add components and their dependencies to the project.

        Components are copied in dependency-first order. A file that already
        exists is skipped unless ``overwrite`` is set. A failure on one
        component is recorded and the remaining components are still added.

        Args:
            names: Requested component names
            all_components: Install every registry component
            path: Components directory overriding the configured one
            overwrite: Replace existing files

        Returns:
            SyncSummary with one result per component

        Raises:
            ProjectConfigError: If the project is not initialized
            UnknownComponentError: If a requested name is not in the registry
            ValueError: If neither names nor all_components were given
        """
        config = self.workspace.load_config()

        if all_components:
            requested = self.registry.all_names()
        else:
            requested = validate_component_names(self.registry, names)
            if not requested:
                raise ValueError("Please specify component names or use --all.")

        resolution = DependencyResolver(self.registry).resolve(requested)
        summary = SyncSummary(command="add")
        for cycle in resolution.cycles:
            summary.warnings.append(f"Circular dependency: {' -> '.join(cycle)}")

        directory = self.workspace.components_dir(config, path)
        directory.mkdir(parents=True, exist_ok=True)

        installed: List[str] = []
        with LogContext(logger, command="add"):
            for name in resolution.order:
                meta = self.registry.find(name)
                if meta is None:
                    continue

                note = None
                if name not in requested:
                    dependent = find_dependent(resolution.order, name, self.registry)
                    note = f"dependency of {dependent or 'unknown'}"

                try:
                    written, skipped = [], []
                    for file_name in meta.files:
                        dest = directory / file_name
                        if dest.exists() and not overwrite:
                            skipped.append(file_name)
                            continue
                        self.workspace.write_file(dest, self.sources.require_source(meta, file_name))
                        written.append(file_name)
                except COMPONENT_ERRORS as e:
                    log_error_with_context(logger, f"Failed to add {name}", e, component=name)
                    summary.record(ComponentResult(name=name, status=ComponentStatus.FAILED, message=str(e)))
                    continue

                installed.append(name)
                if written:
                    config.components[name] = meta.version
                    status = ComponentStatus.ADDED
                else:
                    status = ComponentStatus.SKIPPED
                    note = "already exists"
                summary.record(ComponentResult(
                    name=name,
                    status=status,
                    message=note,
                    files=written or skipped,
                    registry_version=meta.version,
                ))
                log_component_event(logger, "add", name, status.value, files=written or skipped)

        self.workspace.register_modules(directory, installed)
        self.workspace.save_config(config)
        return summary

    def remove(self, names: Iterable[str]) -> SyncSummary:
        """
        Remove components from the project.

        Deletes the component files, drops the module declaration and the
        recorded version. Removing a component other installed components
        depend on is allowed but reported as a warning.

        Raises:
            ProjectConfigError: If the project is not initialized
            UnknownComponentError: If a requested name is not in the registry
        """
        config = self.workspace.load_config()
        requested = validate_component_names(self.registry, names)
        directory = self.workspace.components_dir(config)
        installed = set(self.workspace.installed_components(config, self.registry))
        summary = SyncSummary(command="remove")

        with LogContext(logger, command="remove"):
            for name in requested:
                meta = self.registry.find(name)
                dependents = sorted(
                    d for d in self.registry.dependents_of(name)
                    if d in installed and d not in requested
                )
                if dependents:
                    summary.warnings.append(f"{name} is still used by: {', '.join(dependents)}")

                try:
                    removed = []
                    for file_name in meta.files:
                        target = directory / file_name
                        if target.exists():
                            target.unlink()
                            removed.append(file_name)
                except OSError as e:
                    log_error_with_context(logger, f"Failed to remove {name}", e, component=name)
                    summary.record(ComponentResult(name=name, status=ComponentStatus.FAILED, message=str(e)))
                    continue

                self.workspace.unregister_module(directory, name)
                config.components.pop(name, None)
                status = ComponentStatus.REMOVED if removed else ComponentStatus.SKIPPED
                summary.record(ComponentResult(
                    name=name,
                    status=status,
                    files=removed,
                    message=None if removed else "not installed",
                ))
                log_component_event(logger, "remove", name, status.value)

        self.workspace.save_config(config)
        return summary
