"""Invocation context models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class PullRequestRef(BaseModel):
    """Pull request that triggered the workflow run."""

    model_config = ConfigDict(frozen=True)

    number: int
    head_sha: str | None = None


class InvocationContext(BaseModel):
    """Facts the runner provides about the event that started the run."""

    model_config = ConfigDict(frozen=True)

    owner: str
    repo: str
    sha: str
    ref: str
    event_name: str = ""
    payload: dict[str, Any] = Field(default_factory=dict)
    pull_request: PullRequestRef | None = None

    server_url: str = "https://github.com"
    api_url: str = "https://api.github.com"

    @property
    def repository(self) -> str:
        """Repository in ``owner/repo`` form."""
        return f"{self.owner}/{self.repo}"
