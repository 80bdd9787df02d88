"""Structured logging with per-hook-call context using structlog contextvars."""

import logging
import sys

import structlog

_configured = False


def setup_structured_logging(level: str = "WARNING", log_file: str | None = None, json_format: bool = True) -> None:
    """Configure structlog on top of stdlib logging.

    stdout is never used: a hook's stdout may be read by the harness. Logs go to
    stderr unless ``log_file`` is given. The default WARNING level keeps stderr
    empty for allowed commands.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional path to append log lines to
        json_format: JSON lines when True, key=value console output otherwise
    """
    global _configured
    if _configured:
        return

    renderer = structlog.processors.JSONRenderer() if json_format else structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,  # Inject hook context
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler: logging.Handler
    if log_file:
        handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))

    _configured = True


def bind_hook_context(session_id: str | None, tool_name: str | None) -> None:
    """Bind hook context for all subsequent logs in this context.

    Args:
        session_id: Agent session identifier from the hook payload
        tool_name: Name of the tool the agent wants to run (usually "Bash")
    """
    structlog.contextvars.bind_contextvars(session_id=session_id, tool_name=tool_name)


def clear_hook_context() -> None:
    """Clear hook context after the decision is made."""
    structlog.contextvars.clear_contextvars()


def get_guard_logger(name: str = "git_safety_guard") -> structlog.stdlib.BoundLogger:
    """Get a structlog logger with hook context.

    Args:
        name: Logger name

    Returns:
        Bound logger with hook context
    """
    return structlog.get_logger(name)
