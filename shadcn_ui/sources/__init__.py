"""
Canonical component source providers.

This package provides the provider interface the sync workflows read
registry sources through, plus the built-in implementations.
"""

from shadcn_ui.sources.base import SourceNotFoundError, SourceProvider
from shadcn_ui.sources.providers import (
    BuiltinSourceProvider,
    DirectorySourceProvider,
    StubSourceProvider,
    get_source_provider,
)

__all__ = [
    'SourceProvider',
    'SourceNotFoundError',
    'StubSourceProvider',
    'DirectorySourceProvider',
    'BuiltinSourceProvider',
    'get_source_provider',
]
