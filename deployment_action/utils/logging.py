"""Logging configuration using structlog."""

import logging
import sys
from typing import Any

import structlog

from deployment_action.config import settings
from deployment_action.utils.workflow import escape_data

# Log levels mapped to the workflow command that surfaces them in the run log
_WORKFLOW_COMMANDS = {
    "debug": "debug",
    "warning": "warning",
    "error": "error",
    "critical": "error",
}


def render_workflow_command(
    logger: Any, method_name: str, event_dict: structlog.typing.EventDict
) -> str:
    """Render an event as a GitHub Actions workflow command line."""
    level = event_dict.pop("level", method_name)
    event = event_dict.pop("event", "")
    event_dict.pop("timestamp", None)
    event_dict.pop("logger", None)

    parts = [str(event)]
    parts.extend(f"{key}={value}" for key, value in event_dict.items())
    message = " ".join(parts)

    command = _WORKFLOW_COMMANDS.get(level)
    if command is None:
        return escape_data(message)
    return f"::{command}::{escape_data(message)}"


def configure_logging() -> None:
    """Configure structured logging for the action."""
    # Workflow commands are only recognised on stdout
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, settings.effective_log_level),
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    processors: list[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    # Add renderer based on format
    if settings.log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    elif settings.log_format == "console":
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        processors.append(render_workflow_command)

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)
