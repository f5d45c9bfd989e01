"""Deployment data models."""

from enum import Enum
from typing import Annotated, Any, Union

from pydantic import BaseModel, Discriminator, Field, Tag, TypeAdapter


class DeploymentState(str, Enum):
    """State of a deployment status."""

    ERROR = "error"
    FAILURE = "failure"
    INACTIVE = "inactive"
    IN_PROGRESS = "in_progress"
    QUEUED = "queued"
    PENDING = "pending"
    SUCCESS = "success"


class DeploymentRequest(BaseModel):
    """Parameters for creating a deployment."""

    owner: str
    repo: str

    ref: str
    sha: str
    required_contexts: list[str] = Field(default_factory=list)
    environment: str = "production"
    transient_environment: bool = False
    auto_merge: bool = False
    description: str | None = None

    def to_body(self) -> dict[str, Any]:
        """Request body for the create deployment endpoint."""
        return self.model_dump(exclude={"owner", "repo"}, exclude_none=True)


class CreatedDeployment(BaseModel):
    """A deployment GitHub created and assigned an id to."""

    id: int
    ref: str = ""
    sha: str = ""
    environment: str = ""
    description: str | None = None
    transient_environment: bool = False
    url: str | None = None


class UnresolvedDeployment(BaseModel):
    """Acknowledgment returned instead of a deployment (e.g. auto-merge)."""

    message: str = "Deployment was not created"


def _deployment_kind(value: Any) -> str:
    if isinstance(value, dict):
        return "created" if value.get("id") is not None else "unresolved"
    return "created" if isinstance(value, CreatedDeployment) else "unresolved"


DeploymentResponse = Annotated[
    Union[
        Annotated[CreatedDeployment, Tag("created")],
        Annotated[UnresolvedDeployment, Tag("unresolved")],
    ],
    Discriminator(_deployment_kind),
]

_deployment_response = TypeAdapter(DeploymentResponse)


def parse_deployment_response(
    data: dict[str, Any],
) -> CreatedDeployment | UnresolvedDeployment:
    """Parse a create deployment response into its tagged result."""
    return _deployment_response.validate_python(data)


class DeploymentStatusRequest(BaseModel):
    """Parameters for creating a deployment status."""

    owner: str
    repo: str
    deployment_id: int

    state: DeploymentState
    log_url: str
    environment_url: str

    def to_body(self) -> dict[str, Any]:
        """Request body for the create deployment status endpoint."""
        return self.model_dump(
            mode="json",
            exclude={"owner", "repo", "deployment_id"},
        )


class DeploymentStatus(BaseModel):
    """A status GitHub attached to a deployment."""

    id: int
    state: DeploymentState
    log_url: str | None = None
    environment_url: str | None = None


class DeploymentRecord(BaseModel):
    """Result of a successful run."""

    deployment: CreatedDeployment
    status: DeploymentStatus
    log_url: str
    environment_url: str

    @property
    def deployment_id(self) -> str:
        """Deployment id as published in the step output."""
        return str(self.deployment.id)
