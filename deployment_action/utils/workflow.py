"""GitHub Actions workflow commands.

See https://docs.github.com/actions/using-workflows/workflow-commands-for-github-actions
"""

import os
import sys
import uuid
from pathlib import Path
from typing import TextIO


def escape_data(value: str) -> str:
    """Escape a workflow command message."""
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def escape_property(value: str) -> str:
    """Escape a workflow command property value."""
    return (
        escape_data(value)
        .replace(":", "%3A")
        .replace(",", "%2C")
    )


def issue_command(
    command: str,
    message: str = "",
    properties: dict[str, str] | None = None,
    stream: TextIO | None = None,
) -> None:
    """Write a ``::command prop=value::message`` line for the runner."""
    line = f"::{command}"
    if properties:
        line += " " + ",".join(
            f"{key}={escape_property(value)}" for key, value in properties.items()
        )
    line += f"::{escape_data(message)}"
    print(line, file=stream or sys.stdout, flush=True)


def set_output(name: str, value: str, output_path: str | None = None) -> None:
    """Publish a step output.

    Appends to the ``$GITHUB_OUTPUT`` file using a heredoc delimiter, or
    falls back to the legacy ``set-output`` command outside a runner.
    """
    path = output_path or os.environ.get("GITHUB_OUTPUT")
    if not path:
        issue_command("set-output", value, {"name": name})
        return

    delimiter = f"ghadelimiter_{uuid.uuid4()}"
    if delimiter in name or delimiter in value:
        raise ValueError("Output value contains the heredoc delimiter")

    with open(Path(path), "a", encoding="utf-8") as f:
        f.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")


def set_failed(message: str) -> None:
    """Annotate the step as failed; the caller sets the exit status."""
    issue_command("error", message)
