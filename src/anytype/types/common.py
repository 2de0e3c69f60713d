"""Type definitions shared by paged resources."""

from pydantic import BaseModel, ConfigDict, Field


class Pagination(BaseModel):
    """Offset pagination state reported with every list response."""

    model_config = ConfigDict(extra="allow")

    total: int = Field(..., description="Total number of items matching the query")
    offset: int = Field(0, description="Offset of the first item in this page")
    limit: int | None = Field(None, description="Page size used by the server")
    has_more: bool = Field(..., description="Whether there are more items")
