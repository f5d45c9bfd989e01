"""Pull request response models."""

from pydantic import BaseModel


class PullRequestHead(BaseModel):
    """Head branch of a pull request."""

    sha: str
    ref: str = ""
    label: str | None = None


class PullRequest(BaseModel):
    """The subset of a pull request needed to resolve its head commit."""

    number: int
    head: PullRequestHead
    state: str | None = None
