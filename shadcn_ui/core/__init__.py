"""
Local source synchronization engine.

- resolver: dependency-first install order
- differ: LCS line edit scripts
- hunks: unified diff formatting
"""

from .differ import diff_lines, lcs_table, split_lines
from .hunks import DEFAULT_CONTEXT, build_hunks, format_unified_diff, group_changes, tag_lines
from .resolver import DependencyCycleError, DependencyResolver, Resolution, find_dependent, resolve

__all__ = [
    "diff_lines",
    "lcs_table",
    "split_lines",
    "DEFAULT_CONTEXT",
    "tag_lines",
    "group_changes",
    "build_hunks",
    "format_unified_diff",
    "DependencyResolver",
    "DependencyCycleError",
    "Resolution",
    "resolve",
    "find_dependent",
]
