"""Invocation context loading.

Builds the immutable ``InvocationContext`` from the ``GITHUB_*`` variables
the runner exports and the webhook payload it writes to ``GITHUB_EVENT_PATH``.
"""

import json
from pathlib import Path
from typing import Any

from deployment_action.config import RunnerEnvironment
from deployment_action.core.exceptions import InvocationContextError
from deployment_action.models.context import InvocationContext, PullRequestRef
from deployment_action.utils.logging import get_logger

logger = get_logger(__name__)


def read_event_payload(event_path: str | None) -> dict[str, Any]:
    """Read the webhook payload of the triggering event."""
    if not event_path:
        return {}

    path = Path(event_path)
    if not path.exists():
        logger.warning("context.event_path_missing", event_path=event_path)
        return {}

    try:
        with open(path, encoding="utf-8") as f:
            payload = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise InvocationContextError(
            f"Could not read event payload: {e}",
            {"event_path": event_path},
        ) from e

    if not isinstance(payload, dict):
        raise InvocationContextError(
            "Event payload is not a JSON object",
            {"event_path": event_path},
        )
    return payload


def pull_request_from_payload(payload: dict[str, Any]) -> PullRequestRef | None:
    """Extract the pull request descriptor from a pull-request-shaped payload."""
    pull_request = payload.get("pull_request")
    if not isinstance(pull_request, dict) or "number" not in pull_request:
        return None

    head = pull_request.get("head") or {}
    return PullRequestRef(
        number=pull_request["number"],
        head_sha=head.get("sha"),
    )


def _split_repository(repository: str, payload: dict[str, Any]) -> tuple[str, str]:
    if repository:
        owner, _, repo = repository.partition("/")
        if owner and repo:
            return owner, repo

    # Fall back to the payload, as for events replayed outside a runner
    payload_repo = payload.get("repository") or {}
    owner = (payload_repo.get("owner") or {}).get("login")
    repo = payload_repo.get("name")
    if owner and repo:
        return owner, repo

    raise InvocationContextError(
        "Could not determine the repository; set GITHUB_REPOSITORY to 'owner/repo'",
        {"repository": repository},
    )


def load_context(environment: RunnerEnvironment | None = None) -> InvocationContext:
    """Load the invocation context of the current workflow run.

    Args:
        environment: Runner variables; read from the process environment
            when omitted

    Raises:
        InvocationContextError: If the repository cannot be determined or
            the event payload is unreadable
    """
    env = environment or RunnerEnvironment()
    payload = read_event_payload(env.event_path)
    owner, repo = _split_repository(env.repository, payload)

    return InvocationContext(
        owner=owner,
        repo=repo,
        sha=env.sha,
        ref=env.ref,
        event_name=env.event_name,
        payload=payload,
        pull_request=pull_request_from_payload(payload),
        server_url=env.server_url.rstrip("/"),
        api_url=env.api_url.rstrip("/"),
    )
