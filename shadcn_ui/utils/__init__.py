"""
Utility modules for the shadcn-ui CLI.
"""

from shadcn_ui.utils.logging import (
    get_logger,
    setup_logging,
    LogContext,
    log_component_event,
    log_error_with_context,
)

__all__ = [
    "get_logger",
    "setup_logging",
    "LogContext",
    "log_component_event",
    "log_error_with_context",
]
