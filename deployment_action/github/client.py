"""Async client for the GitHub REST API endpoints the action uses."""

from typing import Any

import httpx

from deployment_action import __version__
from deployment_action.core.exceptions import GitHubAPIError
from deployment_action.models.deployment import (
    CreatedDeployment,
    DeploymentRequest,
    DeploymentStatus,
    DeploymentStatusRequest,
    UnresolvedDeployment,
    parse_deployment_response,
)
from deployment_action.models.pull_request import PullRequest
from deployment_action.utils.logging import get_logger

API_VERSION = "2022-11-28"


class GitHubClient:
    """Thin GitHub REST client.

    Every failed call raises ``GitHubAPIError`` carrying the API's own
    ``message``; nothing is retried.
    """

    def __init__(
        self,
        token: str,
        base_url: str = "https://api.github.com",
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            headers={
                "Authorization": f"Bearer {token}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": API_VERSION,
                "User-Agent": f"deployment-action/{__version__}",
            },
            transport=transport,
            follow_redirects=True,
        )
        self.logger = get_logger("github.client")

    async def close(self) -> None:
        """Close HTTP client."""
        await self.client.aclose()

    async def __aenter__(self) -> "GitHubClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def _request(
        self, method: str, path: str, json: dict[str, Any] | None = None
    ) -> httpx.Response:
        try:
            response = await self.client.request(method, path, json=json)
        except httpx.HTTPError as e:
            raise GitHubAPIError(
                f"Request to GitHub failed: {e}",
                method=method,
                url=f"{self.base_url}{path}",
            ) from e

        self.logger.debug(
            "github.response",
            method=method,
            path=path,
            status_code=response.status_code,
        )

        if not response.is_success:
            raise GitHubAPIError(
                self._error_message(response),
                status_code=response.status_code,
                method=method,
                url=str(response.request.url),
            )
        return response

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        """Extract the API's error message from a failed response."""
        try:
            data = response.json()
        except ValueError:
            data = None

        message = None
        if isinstance(data, dict):
            message = data.get("message")
            errors = data.get("errors")
            if message and isinstance(errors, list) and errors:
                details = [
                    err.get("message") or err.get("code")
                    if isinstance(err, dict)
                    else str(err)
                    for err in errors
                ]
                message = f"{message}: {', '.join(d for d in details if d)}"

        if not message:
            message = response.text.strip() or response.reason_phrase
        return f"{message} (HTTP {response.status_code})"

    async def get_pull_request(self, owner: str, repo: str, number: int) -> PullRequest:
        """Get a pull request."""
        response = await self._request("GET", f"/repos/{owner}/{repo}/pulls/{number}")
        return PullRequest.model_validate(response.json())

    async def create_deployment(
        self, request: DeploymentRequest
    ) -> CreatedDeployment | UnresolvedDeployment:
        """Create a deployment.

        GitHub answers 201 with the deployment, or 202 with only a message
        when it merged the default branch into the ref instead.
        """
        response = await self._request(
            "POST",
            f"/repos/{request.owner}/{request.repo}/deployments",
            json=request.to_body(),
        )
        return parse_deployment_response(response.json())

    async def create_deployment_status(
        self, request: DeploymentStatusRequest
    ) -> DeploymentStatus:
        """Create a status on an existing deployment."""
        response = await self._request(
            "POST",
            f"/repos/{request.owner}/{request.repo}"
            f"/deployments/{request.deployment_id}/statuses",
            json=request.to_body(),
        )
        return DeploymentStatus.model_validate(response.json())
