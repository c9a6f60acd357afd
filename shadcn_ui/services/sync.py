"""
Component sync service.

Implements the ``diff`` and ``update`` workflows. Components are processed
one at a time: the registry source and the local copy are read, compared
with the line differ and rendered as a unified diff. ``update`` then asks
for confirmation, backs the local file up and writes the registry source.

A failure on one component (missing local file, missing registry source,
undecodable or unwritable file) is logged, recorded as FAILED and the batch continues.
"""

from typing import Callable, Iterable, List, Optional, Tuple

from shadcn_ui.config import Settings, settings as default_settings
from shadcn_ui.core.differ import split_lines
from shadcn_ui.core.hunks import format_unified_diff
from shadcn_ui.models.component import ComponentMetadata, Registry
from shadcn_ui.models.project import ProjectConfig
from shadcn_ui.models.result import ComponentResult, ComponentStatus, SyncSummary
from shadcn_ui.services.installer import COMPONENT_ERRORS, validate_component_names
from shadcn_ui.services.workspace import ProjectWorkspace
from shadcn_ui.sources.base import SourceProvider
from shadcn_ui.utils.logging import LogContext, get_logger, log_component_event, log_error_with_context

logger = get_logger(__name__)

# Receives the CHANGED result (with its diff) and returns True to apply it
ConfirmCallback = Callable[[ComponentResult], bool]


class FileComparison:
    """Registry and local text of one component file plus their diff."""

    def __init__(self, file_name: str, canonical: str, local: str, diff: str):
        self.file_name = file_name
        self.canonical = canonical
        self.local = local
        self.diff = diff

    @property
    def changed(self) -> bool:
        return split_lines(self.canonical) != split_lines(self.local)


class ComponentSync:
    """
    Compares and updates locally copied components against the registry.
    """

    def __init__(
        self,
        workspace: ProjectWorkspace,
        registry: Registry,
        sources: SourceProvider,
        settings: Optional[Settings] = None,
    ):
        """
        Initialize the sync service.

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

    def _targets(self, config: ProjectConfig, names: Iterable[str], summary: SyncSummary) -> List[ComponentMetadata]:
        """
        Registry entries to process.

        Explicit names are validated; with no names every installed
        component is processed and local-only files are reported as warnings.
        """
        names = list(names)
        if names:
            return [self.registry.find(name) for name in validate_component_names(self.registry, names)]

        targets = []
        for name in self.workspace.installed_components(config, self.registry):
            meta = self.registry.find(name)
            if meta is None:
                summary.warnings.append(f"{name} is not a registry component, skipped")
                continue
            targets.append(meta)
        return targets

    def _label(self, meta: ComponentMetadata, file_name: str) -> str:
        if len(meta.files) == 1:
            return meta.name
        return f"{meta.name}/{file_name}"

    def compare(self, config: ProjectConfig, meta: ComponentMetadata) -> List[FileComparison]:
        """
        Compare every file of a component with its registry source.

        Raises:
            FileNotFoundError: If a local file is missing
            SourceNotFoundError: If the registry has no source for a file
            UnicodeDecodeError: If either side is not valid UTF-8
        """
        component_logger = logger.with_context(component=meta.name)
        comparisons = []
        for file_name in meta.files:
            component_logger.debug(f"Comparing {file_name}", extra={"file_path": file_name})
            local = self.workspace.read_local(config, file_name)
            canonical = self.sources.require_source(meta, file_name)
            label = self._label(meta, file_name)
            diff = format_unified_diff(
                split_lines(canonical),
                split_lines(local),
                label,
                context=self.settings.diff_context,
                old_label=f"{label} (registry)",
                new_label=f"{label} (local)",
            )
            comparisons.append(FileComparison(file_name, canonical, local, diff))
        return comparisons

    def _compare_result(
        self, config: ProjectConfig, meta: ComponentMetadata
    ) -> Tuple[ComponentResult, List[FileComparison]]:
        comparisons = self.compare(config, meta)
        changed = [c for c in comparisons if c.changed]
        local_version = config.components.get(meta.name)

        message = None
        if local_version and local_version != meta.version:
            message = f"local v{local_version}, registry v{meta.version}"

        result = ComponentResult(
            name=meta.name,
            status=ComponentStatus.CHANGED if changed else ComponentStatus.UNCHANGED,
            message=message,
            files=[c.file_name for c in changed],
            diff="".join(c.diff for c in changed) or None,
            local_version=local_version,
            registry_version=meta.version,
        )
        return result, comparisons

    def diff(self, names: Iterable[str] = ()) -> SyncSummary:
        """
        Compare local components with the registry.

        Args:
            names: Components to compare; empty compares every installed one

        Returns:
            SyncSummary with CHANGED (diff attached), UNCHANGED or FAILED results

        Raises:
            ProjectConfigError: If the project is not initialized
            UnknownComponentError: If a requested name is not in the registry
        """
        config = self.workspace.load_config()
        summary = SyncSummary(command="diff")

        with LogContext(logger, command="diff"):
            for meta in self._targets(config, names, summary):
                try:
                    result, _ = self._compare_result(config, meta)
                except COMPONENT_ERRORS as e:
                    log_error_with_context(logger, f"Failed to diff {meta.name}", e, component=meta.name)
                    summary.record(ComponentResult(name=meta.name, status=ComponentStatus.FAILED, message=str(e)))
                    continue

                summary.record(result)
                log_component_event(logger, "diff", meta.name, result.status.value)

        return summary

    def update(self, names: Iterable[str] = (), confirm: Optional[ConfirmCallback] = None) -> SyncSummary:
        """
        Replace local components with the registry version.

        For each changed component the diff is offered to ``confirm``; on
        approval every changed file is backed up and overwritten, and the
        registry version is recorded in the project configuration.

        Args:
            names: Components to update; empty updates every installed one
            confirm: Approval callback. None applies every change.

        Returns:
            SyncSummary with UPDATED, UNCHANGED, DECLINED or FAILED results

        Raises:
            ProjectConfigError: If the project is not initialized
            UnknownComponentError: If a requested name is not in the registry
        """
        config = self.workspace.load_config()
        summary = SyncSummary(command="update")
        targets = self._targets(config, names, summary)

        try:
            with LogContext(logger, command="update"):
                for meta in targets:
                    self._update_component(config, meta, confirm, summary)
        finally:
            self.workspace.save_config(config)
        return summary

    def _update_component(
        self,
        config: ProjectConfig,
        meta: ComponentMetadata,
        confirm: Optional[ConfirmCallback],
        summary: SyncSummary,
    ) -> None:
        try:
            result, comparisons = self._compare_result(config, meta)

            if result.status == ComponentStatus.UNCHANGED:
                config.components[meta.name] = meta.version
                summary.record(result)
                log_component_event(logger, "update", meta.name, result.status.value)
                return

            if confirm is not None and not confirm(result):
                result.status = ComponentStatus.DECLINED
                summary.record(result)
                log_component_event(logger, "update", meta.name, result.status.value)
                return

            for comparison in comparisons:
                if not comparison.changed:
                    continue
                path = self.workspace.component_path(config, comparison.file_name)
                self.workspace.backup(path)
                self.workspace.write_file(path, comparison.canonical)
        except COMPONENT_ERRORS as e:
            log_error_with_context(logger, f"Failed to update {meta.name}", e, component=meta.name)
            summary.record(ComponentResult(name=meta.name, status=ComponentStatus.FAILED, message=str(e)))
            return

        config.components[meta.name] = meta.version
        result.status = ComponentStatus.UPDATED
        summary.record(result)
        log_component_event(logger, "update", meta.name, result.status.value, version=meta.version)
