"""Utility functions for deployment-action."""

from deployment_action.utils.logging import configure_logging, get_logger
from deployment_action.utils.workflow import set_failed, set_output

__all__ = [
    "configure_logging",
    "get_logger",
    "set_failed",
    "set_output",
]
