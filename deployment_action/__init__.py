"""Create a GitHub deployment and its initial status from a workflow run."""

__version__ = "1.0.0"
