"""Request option schemas for container operations."""

from typing import Dict

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ListOpts(BaseModel):
    """Options for listing the containers of an account."""

    model_config = ConfigDict(extra="forbid")

    full: bool = Field(
        default=False,
        description="Request the detailed JSON listing instead of plain names",
    )
    params: Dict[str, str] = Field(
        default_factory=dict, description="Query parameters merged into the URL"
    )


class ContainerOpts(BaseModel):
    """Options shared by every single-container operation."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., description="Container name")
    headers: Dict[str, str] = Field(
        default_factory=dict, description="Literal header overrides"
    )
    metadata: Dict[str, str] = Field(
        default_factory=dict, description="User metadata sent as X-Container-Meta-*"
    )

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        if not value:
            raise ValueError("container name must not be empty")
        if "/" in value:
            raise ValueError(f"container name must not contain '/': {value}")
        return value


class CreateOpts(ContainerOpts):
    """Options for creating a container."""


class UpdateOpts(ContainerOpts):
    """Options for updating a container's metadata."""


class GetOpts(ContainerOpts):
    """Options for fetching a container's metadata."""


class DeleteOpts(ContainerOpts):
    """Options for deleting a container."""

    params: Dict[str, str] = Field(
        default_factory=dict, description="Query parameters merged into the URL"
    )
