"""Type definitions for space resources."""

from pydantic import BaseModel, ConfigDict, Field

from .common import Pagination


class Space(BaseModel):
    """Space model representing a space resource."""

    model_config = ConfigDict(extra="allow")

    id: str = Field(..., description="Space ID")
    name: str | None = Field(None, description="Display name")
    description: str | None = Field(None, description="Space description")


class ListSpacesOutput(BaseModel):
    """Response model for listing spaces."""

    data: list[Space] = Field(..., description="List of spaces")
    pagination: Pagination
