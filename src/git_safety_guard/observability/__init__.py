"""Observability module for structured decision logging."""

from .logging import bind_hook_context, clear_hook_context, get_guard_logger, setup_structured_logging

__all__ = [
    "bind_hook_context",
    "clear_hook_context",
    "get_guard_logger",
    "setup_structured_logging",
]
