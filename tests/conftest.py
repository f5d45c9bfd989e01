"""Pytest configuration and fixtures."""

import json
import logging
import os
from typing import Any

import httpx
import pytest

from deployment_action.config import ActionInputs
from deployment_action.github.client import GitHubClient
from deployment_action.models.context import InvocationContext, PullRequestRef


class FakeGitHub:
    """In-memory stand-in for the GitHub REST endpoints the action calls."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.pull_head_sha = "feat111"
        self.deployment_status_code = 201
        self.deployment_body: dict[str, Any] = {"id": 42}
        self.status_error: tuple[int, dict[str, Any]] | None = None
        self.pull_error: tuple[int, dict[str, Any]] | None = None

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        if request.method == "GET" and "/pulls/" in path:
            if self.pull_error:
                status_code, body = self.pull_error
                return httpx.Response(status_code, json=body)
            number = int(path.rsplit("/", 1)[-1])
            return httpx.Response(
                200,
                json={
                    "number": number,
                    "state": "open",
                    "head": {"sha": self.pull_head_sha, "ref": "feature/widgets"},
                },
            )

        if request.method == "POST" and path.endswith("/statuses"):
            if self.status_error:
                status_code, body = self.status_error
                return httpx.Response(status_code, json=body)
            body = json.loads(request.content)
            return httpx.Response(201, json={"id": 7, **body})

        if request.method == "POST" and path.endswith("/deployments"):
            body = json.loads(request.content)
            if self.deployment_status_code == 201:
                return httpx.Response(201, json={**body, **self.deployment_body})
            return httpx.Response(self.deployment_status_code, json=self.deployment_body)

        return httpx.Response(404, json={"message": "Not Found"})

    def calls(self, method: str, suffix: str) -> list[httpx.Request]:
        """Requests matching a method and path suffix."""
        return [
            r
            for r in self.requests
            if r.method == method and r.url.path.endswith(suffix)
        ]

    def pull_calls(self) -> list[httpx.Request]:
        return [r for r in self.requests if "/pulls/" in r.url.path]

    @staticmethod
    def body(request: httpx.Request) -> dict[str, Any]:
        return json.loads(request.content)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch):
    """Keep runner variables of the test host out of the tests."""
    for key in list(os.environ):
        if key.startswith(("INPUT_", "GITHUB_")) or key == "RUNNER_DEBUG":
            monkeypatch.delenv(key, raising=False)

    yield

    # main() points logging at the captured stdout of the test that ran it
    root = logging.getLogger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)


@pytest.fixture
def fake_github() -> FakeGitHub:
    """Create a fresh fake GitHub API."""
    return FakeGitHub()


@pytest.fixture
async def github_client(fake_github: FakeGitHub):
    """GitHub client wired to the fake API."""
    client = GitHubClient("test-token", transport=fake_github.transport)
    yield client
    await client.close()


@pytest.fixture
def push_context() -> InvocationContext:
    """Context of a push to main."""
    return InvocationContext(
        owner="acme",
        repo="widgets",
        sha="abc123",
        ref="refs/heads/main",
        event_name="push",
        payload={"ref": "refs/heads/main", "after": "abc123"},
    )


@pytest.fixture
def pull_request_context() -> InvocationContext:
    """Context of a pull request run, checked out at a merge commit."""
    payload = {
        "action": "synchronize",
        "number": 5,
        "pull_request": {"number": 5, "head": {"sha": "stale000"}},
    }
    return InvocationContext(
        owner="acme",
        repo="widgets",
        sha="merge999",
        ref="refs/pull/5/merge",
        event_name="pull_request",
        payload=payload,
        pull_request=PullRequestRef(number=5, head_sha="stale000"),
    )


@pytest.fixture
def inputs() -> ActionInputs:
    """Inputs with only the token set."""
    return ActionInputs(token="test-token")
