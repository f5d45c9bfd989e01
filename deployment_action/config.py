"""Action configuration using pydantic-settings."""

from functools import lru_cache
from typing import Any, Literal

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from deployment_action.core.exceptions import InputValidationError, MissingInputError
from deployment_action.models.deployment import DeploymentState


class Settings(BaseSettings):
    """Process settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["console", "json", "actions"] = "actions"

    # Set by the runner when step debug logging is enabled
    runner_debug: bool = False

    @property
    def effective_log_level(self) -> str:
        """Log level after applying the runner's debug switch.

        Workflow commands are filtered by the runner itself, so the
        ``actions`` format passes every event through.
        """
        if self.runner_debug or self.log_format == "actions":
            return "DEBUG"
        return self.log_level


class RunnerEnvironment(BaseSettings):
    """Default ``GITHUB_*`` variables the runner exports to every step."""

    model_config = SettingsConfigDict(
        env_prefix="GITHUB_",
        case_sensitive=False,
        extra="ignore",
    )

    repository: str = ""
    sha: str = ""
    ref: str = ""
    event_name: str = ""
    event_path: str | None = None

    server_url: str = "https://github.com"
    api_url: str = "https://api.github.com"


class ActionInputs(BaseSettings):
    """Inputs declared in action.yml, passed by the runner as ``INPUT_*``.

    The runner exports every declared input, using an empty string for the
    ones the workflow leaves unset, so blank values fall back to defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="INPUT_",
        case_sensitive=False,
        extra="ignore",
    )

    token: str = ""

    ref: str | None = None
    sha: str | None = None
    target_url: str | None = None
    environment: str = "production"
    description: str | None = None
    initial_status: DeploymentState = DeploymentState.PENDING
    auto_merge: bool = False
    transient_environment: bool = False

    @field_validator("token", mode="before")
    @classmethod
    def _strip_token(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value

    @field_validator("ref", "sha", "target_url", "description", mode="before")
    @classmethod
    def _blank_as_unset(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip() or None
        return value

    @field_validator("environment", mode="before")
    @classmethod
    def _default_environment(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip() or "production"
        return value

    @field_validator("initial_status", mode="before")
    @classmethod
    def _default_initial_status(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip() or DeploymentState.PENDING
        return value

    @field_validator("auto_merge", "transient_environment", mode="before")
    @classmethod
    def _literal_true(cls, value: Any) -> Any:
        # Only the exact string "true" enables a flag; "True", "1", "yes" do not.
        if isinstance(value, str):
            return value.strip() == "true"
        return value


def load_inputs(**overrides: Any) -> ActionInputs:
    """Read and validate the action inputs.

    Raises:
        MissingInputError: If no token was supplied
        InputValidationError: If an input has an unusable value
    """
    try:
        inputs = ActionInputs(**overrides)
    except ValidationError as e:
        errors = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in e.errors()
        )
        raise InputValidationError(
            f"Invalid action inputs: {errors}",
            {"errors": e.errors(include_url=False)},
        ) from e

    if not inputs.token:
        raise MissingInputError("token")

    return inputs


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
