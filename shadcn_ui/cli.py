"""
shadcn-ui: add UI components to a GPUI project and keep them in sync.

Usage:
  shadcn-ui init
  shadcn-ui add button dialog
  shadcn-ui diff [component...]
  shadcn-ui update [component...] [--yes]
"""

import argparse
import sys
from typing import List, Optional

from shadcn_ui import __version__
from shadcn_ui.config import Settings
from shadcn_ui.models.result import ComponentResult, ComponentStatus, SyncSummary
from shadcn_ui.registry.catalog import RegistryLoadError, get_registry
from shadcn_ui.services.installer import ComponentInstaller, UnknownComponentError
from shadcn_ui.services.inventory import ComponentInventory
from shadcn_ui.services.sync import ComponentSync
from shadcn_ui.services.workspace import ProjectConfigError, ProjectWorkspace
from shadcn_ui.sources.providers import get_source_provider
from shadcn_ui.utils.logging import get_logger, setup_logging

logger = get_logger(__name__)


class CommandContext:
    """Collaborators shared by every command."""

    def __init__(self, settings: Settings, workspace: ProjectWorkspace, registry, sources):
        self.settings = settings
        self.workspace = workspace
        self.registry = registry
        self.sources = sources

    def installer(self) -> ComponentInstaller:
        return ComponentInstaller(self.workspace, self.registry, self.sources, self.settings)

    def sync(self) -> ComponentSync:
        return ComponentSync(self.workspace, self.registry, self.sources, self.settings)


def _print_warnings(summary: SyncSummary) -> None:
    for warning in summary.warnings:
        print(f"warning: {warning}", file=sys.stderr)


def _print_failures(summary: SyncSummary) -> None:
    for result in summary.with_status(ComponentStatus.FAILED):
        print(f"  ! {result.name}: {result.message}", file=sys.stderr)


def _summary_line(summary: SyncSummary) -> str:
    counts = summary.counts()
    if not counts:
        return "Nothing to do."
    return ", ".join(f"{count} {status}" for status, count in counts.items()) + "."


def cmd_init(args, ctx: CommandContext) -> int:
    """Write shadcn-ui.yaml and create the components directory."""
    config = ctx.installer().init_project(
        components_dir=args.components_dir,
        base_color=args.base_color,
        radius=args.radius,
        dark_mode=args.dark_mode,
        force=args.force,
    )
    print(f"Initialized shadcn-ui in {ctx.workspace.root}")
    print(f"  components: {config.project.components_dir}")
    print(f"  theme:      {config.theme.base_color} (radius {config.theme.radius})")
    return 0


def cmd_add(args, ctx: CommandContext) -> int:
    """Copy components and their dependencies into the project."""
    summary = ctx.installer().add(
        args.components, all_components=args.all, path=args.path, overwrite=args.overwrite
    )
    _print_warnings(summary)

    for result in summary.results:
        if result.status == ComponentStatus.ADDED:
            suffix = f" ({result.message})" if result.message else ""
            print(f"  + Added {result.name}{suffix}")
        elif result.status == ComponentStatus.SKIPPED:
            print(f"  - Skipped {', '.join(result.files)} (already exists)")
    _print_failures(summary)

    print()
    added = summary.with_status(ComponentStatus.ADDED)
    skipped = summary.with_status(ComponentStatus.SKIPPED)
    if added:
        print(f"Added {len(added)} component(s).")
    if skipped:
        print(f"Skipped {len(skipped)} component(s) (use --overwrite to replace).")
    return 1 if summary.has_failures else 0


def cmd_list(args, ctx: CommandContext) -> int:
    """List registry components, or only installed ones."""
    inventory = ComponentInventory(ctx.workspace, ctx.registry)
    installed = inventory.installed()

    if args.installed:
        if not installed:
            print("No components installed.")
            print()
            print("Run `shadcn-ui init`, then `shadcn-ui add <component>` to install components.")
            return 0

        print("Installed components:")
        print()
        for name, meta in inventory.installed_entries():
            description = meta.description if meta else "(unknown component)"
            print(f"  {name:<16} {description}")
        print()
        print(f"{len(installed)} component(s) installed.")
        return 0

    print(f"Available components (v{ctx.registry.version}):")
    print()
    for category, components in inventory.by_category():
        print(f"  {category.display_name}:")
        for meta in components:
            status = " [installed]" if meta.name in installed else ""
            print(f"    {meta.name:<16} {meta.description}{status}")
        print()
    print(f"{len(ctx.registry.components)} component(s) available, {len(installed)} installed.")
    return 0


def cmd_diff(args, ctx: CommandContext) -> int:
    """Show how local components differ from the registry."""
    summary = ctx.sync().diff(args.components)
    _print_warnings(summary)

    for result in summary.results:
        if result.status == ComponentStatus.CHANGED:
            if result.message:
                print(f"# {result.name}: {result.message}")
            sys.stdout.write(result.diff or "")
        elif result.status == ComponentStatus.UNCHANGED:
            print(f"  = {result.name} is up to date")
    _print_failures(summary)

    print()
    print(_summary_line(summary))
    return 1 if summary.has_failures else 0


def _prompt_confirm(result: ComponentResult) -> bool:
    sys.stdout.write(result.diff or "")
    try:
        answer = input(f"Update {result.name} to v{result.registry_version}? [y/N] ")
    except EOFError:
        return False
    return answer.strip().lower() in ("y", "yes")


def cmd_update(args, ctx: CommandContext) -> int:
    """Overwrite local components with the registry version."""
    confirm = None if args.yes else _prompt_confirm
    summary = ctx.sync().update(args.components, confirm=confirm)
    _print_warnings(summary)

    for result in summary.results:
        if result.status == ComponentStatus.UPDATED:
            backups = ", ".join(f"{f}{ctx.settings.backup_suffix}" for f in result.files)
            print(f"  + Updated {result.name} to v{result.registry_version} (backup: {backups})")
        elif result.status == ComponentStatus.DECLINED:
            print(f"  - Kept local {result.name}")
        elif result.status == ComponentStatus.UNCHANGED:
            print(f"  = {result.name} is up to date")
    _print_failures(summary)

    print()
    print(_summary_line(summary))
    return 1 if summary.has_failures else 0


def cmd_remove(args, ctx: CommandContext) -> int:
    """Delete components from the project."""
    summary = ctx.installer().remove(args.components)
    _print_warnings(summary)

    for result in summary.results:
        if result.status == ComponentStatus.REMOVED:
            print(f"  - Removed {result.name}")
        elif result.status == ComponentStatus.SKIPPED:
            print(f"  = {result.name} was not installed")
    _print_failures(summary)
    return 1 if summary.has_failures else 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shadcn-ui",
        description="Add beautiful UI components to your GPUI project",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")
    parser.add_argument("--cwd", default=".", help="Project directory (default: current directory)")
    sub = parser.add_subparsers(dest="command", required=True)

    p_init = sub.add_parser("init", help="Initialize shadcn-ui in your project")
    p_init.add_argument("-c", "--components-dir", default="src/components/ui", help="Components directory")
    p_init.add_argument("-b", "--base-color", default="zinc", help="Base color theme")
    p_init.add_argument("-r", "--radius", default="md", help="Border radius style")
    p_init.add_argument("--no-dark-mode", dest="dark_mode", action="store_false", help="Disable dark mode support")
    p_init.add_argument("-f", "--force", action="store_true", help="Overwrite an existing configuration")
    p_init.set_defaults(func=cmd_init)

    p_add = sub.add_parser("add", help="Add components to your project")
    p_add.add_argument("components", nargs="*", help="Component names to add")
    p_add.add_argument("-a", "--all", action="store_true", help="Install all components")
    p_add.add_argument("-p", "--path", help="Custom path for components")
    p_add.add_argument("-o", "--overwrite", action="store_true", help="Overwrite existing files")
    p_add.set_defaults(func=cmd_add)

    p_list = sub.add_parser("list", help="List available components")
    p_list.add_argument("-i", "--installed", action="store_true", help="Show installed components only")
    p_list.set_defaults(func=cmd_list)

    p_remove = sub.add_parser("remove", help="Remove components from your project")
    p_remove.add_argument("components", nargs="+", help="Component names to remove")
    p_remove.set_defaults(func=cmd_remove)

    p_diff = sub.add_parser("diff", help="Compare local components with registry")
    p_diff.add_argument("components", nargs="*", help="Component names to compare (empty for all)")
    p_diff.set_defaults(func=cmd_diff)

    p_update = sub.add_parser("update", help="Update components to latest version")
    p_update.add_argument("components", nargs="*", help="Component names to update (empty for all)")
    p_update.add_argument("-y", "--yes", action="store_true", help="Apply updates without asking")
    p_update.set_defaults(func=cmd_update)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point. Returns the process exit status."""
    args = build_parser().parse_args(argv)

    settings = Settings()
    setup_logging("DEBUG" if args.verbose else settings.log_level)

    try:
        registry = get_registry(settings.registry_file)
    except RegistryLoadError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    ctx = CommandContext(
        settings=settings,
        workspace=ProjectWorkspace(args.cwd, settings),
        registry=registry,
        sources=get_source_provider(settings),
    )

    try:
        return args.func(args, ctx)
    except (ProjectConfigError, UnknownComponentError, ValueError) as e:
        logger.debug(f"{args.command} aborted: {e}", extra={"command": args.command})
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
