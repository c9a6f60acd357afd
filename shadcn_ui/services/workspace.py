"""
Project workspace service.

This service owns every file-system interaction of the workflows: reading
and writing the project configuration (shadcn-ui.yaml), reading and writing
component sources, backups, and the components ``mod.rs`` module list.
"""

import re
from pathlib import Path
from typing import Iterable, List, Optional, Union

import yaml
from pydantic import ValidationError

from shadcn_ui.config import Settings, settings as default_settings
from shadcn_ui.models.component import Registry
from shadcn_ui.models.project import ProjectConfig
from shadcn_ui.utils.logging import get_logger

logger = get_logger(__name__)

MOD_HEADER = "//! UI components generated by shadcn-ui."
# Config file written by the Rust shadcn-ui CLI; not read by this tool
TOML_CONFIG_FILE_NAME = "shadcn-ui.toml"
_MOD_LINE = re.compile(r'^\s*pub\s+mod\s+(?P<name>[A-Za-z_][A-Za-z0-9_]*)\s*;\s*$')


class ProjectConfigError(Exception):
    """Raised when the project configuration is missing or malformed."""
    pass


class ProjectWorkspace:
    """
    File-system view of a user project.

    All paths from the configuration are interpreted relative to ``root``.
    """

    def __init__(self, root: Union[str, Path] = ".", settings: Optional[Settings] = None):
        """
        Initialize the workspace.

        Args:
            root: Project root directory
            settings: CLI settings. If None, the global settings are used.
        """
        self.root = Path(root)
        self.settings = settings or default_settings

    @property
    def config_path(self) -> Path:
        return self.root / self.settings.config_file_name

    def has_config(self) -> bool:
        """Check whether the project configuration file exists."""
        return self.config_path.exists()

    def load_config(self) -> ProjectConfig:
        """
        Load the project configuration.

        Returns:
            Parsed ProjectConfig

        Raises:
            ProjectConfigError: If the file is missing or malformed
        """
        path = self.config_path
        if not path.exists():
            if (self.root / TOML_CONFIG_FILE_NAME).exists():
                raise ProjectConfigError(
                    f"Found {TOML_CONFIG_FILE_NAME} in {self.root}, but this CLI reads "
                    f"{self.settings.config_file_name}. Run `shadcn-ui init` to create it."
                )
            raise ProjectConfigError(
                f"No {self.settings.config_file_name} found in {self.root}. Run `shadcn-ui init` first."
            )

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
            return ProjectConfig(**data)
        except (yaml.YAMLError, ValidationError, TypeError) as e:
            logger.error(f"Failed to parse project configuration {path}: {e}")
            raise ProjectConfigError(f"Failed to parse {path}: {e}") from e

    def save_config(self, config: ProjectConfig) -> Path:
        """
        Write the project configuration.

        Raises:
            ProjectConfigError: If the file cannot be written
        """
        path = self.config_path
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, 'w', encoding='utf-8') as f:
                yaml.safe_dump(config.model_dump(mode="json"), f, sort_keys=False)
        except OSError as e:
            raise ProjectConfigError(f"Failed to write {path}: {e}") from e
        logger.debug("Saved project configuration", extra={"file_path": str(path)})
        return path

    def components_dir(self, config: ProjectConfig, override: Optional[str] = None) -> Path:
        """Absolute-or-root-relative components directory."""
        return self.root / (override or config.project.components_dir)

    def component_path(self, config: ProjectConfig, file_name: str) -> Path:
        return self.components_dir(config) / file_name

    def read_local(self, config: ProjectConfig, file_name: str) -> str:
        """
        Read a locally copied component file.

        Raises:
            FileNotFoundError: If the component file is not in the project
            OSError: If the file cannot be read
            UnicodeDecodeError: If the file is not valid UTF-8
        """
        path = self.component_path(config, file_name)
        if not path.is_file():
            raise FileNotFoundError(f"Local component file not found: {path}")
        return path.read_text(encoding='utf-8')

    def write_file(self, path: Path, content: str) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding='utf-8')
        logger.debug(f"Wrote {path}", extra={"file_path": str(path)})
        return path

    def backup(self, path: Path) -> Path:
        """
        Copy ``path`` next to itself with the configured backup suffix.

        Returns:
            Path of the backup file
        """
        backup_path = path.with_name(path.name + self.settings.backup_suffix)
        backup_path.write_text(path.read_text(encoding='utf-8'), encoding='utf-8')
        logger.debug(f"Backed up {path} to {backup_path}", extra={"file_path": str(backup_path)})
        return backup_path

    def installed_files(self, config: ProjectConfig) -> List[str]:
        """Component source file names in the components directory, sorted."""
        directory = self.components_dir(config)
        if not directory.is_dir():
            return []

        return sorted(
            path.name
            for path in directory.iterdir()
            if path.is_file()
            and path.suffix == self.settings.component_extension
            and path.name != self.settings.mod_file_name
        )

    def installed_components(self, config: ProjectConfig, registry: Optional[Registry] = None) -> List[str]:
        """
        Detect installed components from the components directory.

        With a registry, each file counts toward the component that lists it
        in ``files``, so a multi-file component appears once. Files no
        registry component owns are reported by their stem.
        """
        owners = {}
        if registry is not None:
            for component in registry.components:
                for file_name in component.files:
                    owners.setdefault(file_name, component.name)

        installed = set()
        for file_name in self.installed_files(config):
            installed.add(owners.get(file_name, Path(file_name).stem))
        return sorted(installed)

    def read_modules(self, directory: Path) -> List[str]:
        """Module names declared in the components module file, in file order."""
        mod_path = directory / self.settings.mod_file_name
        if not mod_path.exists():
            return []

        modules = []
        for line in mod_path.read_text(encoding='utf-8').splitlines():
            match = _MOD_LINE.match(line)
            if match:
                modules.append(match.group("name"))
        return modules

    def write_modules(self, directory: Path, modules: Iterable[str]) -> Path:
        """Write the module file with one sorted declaration per module."""
        lines = [MOD_HEADER, ""] + [f"pub mod {name};" for name in sorted(set(modules))]
        return self.write_file(directory / self.settings.mod_file_name, "\n".join(lines) + "\n")

    def register_modules(self, directory: Path, names: Iterable[str]) -> List[str]:
        """
        Add module declarations for ``names``.

        Existing and new entries are written back sorted by name.

        Returns:
            Names that were newly registered
        """
        modules = self.read_modules(directory)
        added = []
        for name in names:
            if name not in modules:
                modules.append(name)
                added.append(name)
        self.write_modules(directory, modules)
        return added

    def unregister_module(self, directory: Path, name: str) -> bool:
        """
        Drop the module declaration for ``name``.

        Returns:
            True if the module was declared
        """
        modules = self.read_modules(directory)
        if name not in modules:
            return False
        self.write_modules(directory, [m for m in modules if m != name])
        return True
