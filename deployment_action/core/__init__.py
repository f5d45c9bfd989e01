"""Core functionality for deployment-action."""

from deployment_action.core.exceptions import (
    ActionError,
    DeploymentNotCreatedError,
    GitHubAPIError,
    InputValidationError,
    InvocationContextError,
    MissingInputError,
)

__all__ = [
    "ActionError",
    "DeploymentNotCreatedError",
    "GitHubAPIError",
    "InputValidationError",
    "InvocationContextError",
    "MissingInputError",
]
