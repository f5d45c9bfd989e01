"""Data models for deployment-action."""

from deployment_action.models.context import InvocationContext, PullRequestRef
from deployment_action.models.deployment import (
    CreatedDeployment,
    DeploymentRecord,
    DeploymentRequest,
    DeploymentResponse,
    DeploymentState,
    DeploymentStatus,
    DeploymentStatusRequest,
    UnresolvedDeployment,
    parse_deployment_response,
)
from deployment_action.models.pull_request import PullRequest, PullRequestHead

__all__ = [
    # Context models
    "InvocationContext",
    "PullRequestRef",
    # Deployment models
    "CreatedDeployment",
    "DeploymentRecord",
    "DeploymentRequest",
    "DeploymentResponse",
    "DeploymentState",
    "DeploymentStatus",
    "DeploymentStatusRequest",
    "UnresolvedDeployment",
    "parse_deployment_response",
    # Pull request models
    "PullRequest",
    "PullRequestHead",
]
