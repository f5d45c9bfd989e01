"""Action entry point."""

import asyncio
import sys

import httpx

from deployment_action import __version__
from deployment_action.config import ActionInputs, load_inputs
from deployment_action.core.context import load_context
from deployment_action.core.exceptions import ActionError
from deployment_action.github.client import GitHubClient
from deployment_action.models.context import InvocationContext
from deployment_action.models.deployment import DeploymentRecord
from deployment_action.recorder import DeploymentRecorder
from deployment_action.utils.logging import configure_logging, get_logger
from deployment_action.utils.workflow import set_failed, set_output

logger = get_logger(__name__)


async def run(
    inputs: ActionInputs,
    context: InvocationContext,
    transport: httpx.AsyncBaseTransport | None = None,
) -> DeploymentRecord:
    """Record the deployment for a workflow run."""
    async with GitHubClient(
        inputs.token, base_url=context.api_url, transport=transport
    ) as client:
        recorder = DeploymentRecorder(client)
        return await recorder.record(context, inputs)


def main(transport: httpx.AsyncBaseTransport | None = None) -> int:
    """Run the action and return the process exit status."""
    configure_logging()
    logger.debug("action.starting", version=__version__)

    try:
        inputs = load_inputs()
        context = load_context()
        record = asyncio.run(run(inputs, context, transport=transport))
        set_output("deployment_id", record.deployment_id)
    except ActionError as exc:
        logger.debug("action.failed", error=exc.message, details=exc.details)
        set_failed(exc.message)
        return 1
    except Exception as exc:
        logger.exception("action.unexpected_error")
        set_failed(str(exc) or type(exc).__name__)
        return 1

    return 0


def cli() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    cli()
