"""Custom exceptions for deployment-action."""

from typing import Any


class ActionError(Exception):
    """Base exception for deployment-action."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class MissingInputError(ActionError):
    """A required action input was not supplied."""

    def __init__(self, name: str):
        super().__init__(
            f"Input required and not supplied: {name}",
            {"input": name},
        )
        self.name = name


class InputValidationError(ActionError):
    """An action input has an unusable value."""

    pass


class InvocationContextError(ActionError):
    """The runner environment does not describe a usable workflow run."""

    pass


class GitHubAPIError(ActionError):
    """A GitHub REST API call failed."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        method: str | None = None,
        url: str | None = None,
    ):
        details: dict[str, Any] = {}
        if status_code is not None:
            details["status_code"] = status_code
        if method:
            details["method"] = method
        if url:
            details["url"] = url
        super().__init__(message, details)
        self.status_code = status_code


class DeploymentNotCreatedError(ActionError):
    """GitHub acknowledged the deployment request without creating one."""

    def __init__(self, message: str):
        super().__init__(message, {"reason": "no_deployment_id"})
