"""GitHub REST API access."""

from deployment_action.github.client import GitHubClient

__all__ = ["GitHubClient"]
