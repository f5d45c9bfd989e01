"""Deployment Recorder.

Records a GitHub deployment for the commit a workflow run was triggered by,
and attaches its initial status.
"""

import json
import time

from pydantic import BaseModel

from deployment_action.config import ActionInputs
from deployment_action.core.exceptions import DeploymentNotCreatedError
from deployment_action.github.client import GitHubClient
from deployment_action.models.context import InvocationContext
from deployment_action.models.deployment import (
    DeploymentRecord,
    DeploymentRequest,
    DeploymentStatusRequest,
    UnresolvedDeployment,
)
from deployment_action.utils.logging import get_logger


class DeploymentTarget(BaseModel):
    """Commit a deployment is recorded against."""

    ref: str
    sha: str


def build_log_url(context: InvocationContext, sha: str) -> str:
    """URL of the checks page for a commit."""
    return f"{context.server_url}/{context.owner}/{context.repo}/commit/{sha}/checks"


class DeploymentRecorder:
    """Creates a deployment and its initial status.

    Steps:
    1. Resolve the ref/sha to deploy (pull request head when applicable)
    2. Create the deployment
    3. Create the initial deployment status
    """

    def __init__(self, client: GitHubClient):
        self.client = client
        self.logger = get_logger("recorder")

    async def resolve_target(
        self, context: InvocationContext, inputs: ActionInputs
    ) -> DeploymentTarget:
        """Determine the ref and sha to record the deployment against."""
        ref = context.ref
        sha = context.sha

        if context.pull_request is not None:
            # The run checks out a merge commit that never shows up on the
            # pull request, so deploy the head commit of its branch instead.
            pr = await self.client.get_pull_request(
                context.owner, context.repo, context.pull_request.number
            )
            self.logger.debug("recorder.pull_request_head", head=pr.head.model_dump())
            sha = pr.head.sha
            ref = sha

        return DeploymentTarget(
            ref=inputs.ref or ref,
            sha=inputs.sha or sha,
        )

    async def record(
        self, context: InvocationContext, inputs: ActionInputs
    ) -> DeploymentRecord:
        """Create the deployment and its initial status.

        Raises:
            DeploymentNotCreatedError: If GitHub acknowledged the request
                without creating a deployment
            GitHubAPIError: If any API call fails
        """
        start_time = time.time()

        self.logger.debug(
            "recorder.event_payload",
            payload=json.dumps(context.payload, indent=2),
        )

        target = await self.resolve_target(context, inputs)
        log_url = build_log_url(context, target.sha)
        environment_url = inputs.target_url or log_url

        self.logger.info(
            "recorder.creating_deployment",
            repository=context.repository,
            ref=target.ref,
            sha=target.sha,
            environment=inputs.environment,
        )

        deployment = await self.client.create_deployment(
            DeploymentRequest(
                owner=context.owner,
                repo=context.repo,
                ref=target.ref,
                sha=target.sha,
                required_contexts=[],
                environment=inputs.environment,
                transient_environment=inputs.transient_environment,
                auto_merge=inputs.auto_merge,
                description=inputs.description,
            )
        )

        if isinstance(deployment, UnresolvedDeployment):
            raise DeploymentNotCreatedError(deployment.message)

        status = await self.client.create_deployment_status(
            DeploymentStatusRequest(
                owner=context.owner,
                repo=context.repo,
                deployment_id=deployment.id,
                state=inputs.initial_status,
                log_url=log_url,
                environment_url=environment_url,
            )
        )

        duration_ms = int((time.time() - start_time) * 1000)
        self.logger.info(
            "recorder.completed",
            deployment_id=deployment.id,
            state=status.state.value,
            duration_ms=duration_ms,
        )

        return DeploymentRecord(
            deployment=deployment,
            status=status,
            log_url=log_url,
            environment_url=environment_url,
        )
