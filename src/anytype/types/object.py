"""Type definitions for object resources."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, JsonValue

from .common import Pagination

Properties = dict[str, JsonValue]


class Object(BaseModel):
    """Object model representing an object inside a space."""

    model_config = ConfigDict(extra="allow")

    id: str = Field(..., description="Object ID, unique within its space")
    name: str | None = Field(None, description="Display name")
    space_id: str | None = Field(None, description="ID of the owning space")
    object: str | None = Field(None, description="Object type tag")
    archived: bool | None = Field(None, description="Whether the object has been archived")
    properties: JsonValue = Field(None, description="Free-form properties document, normally a mapping")


class ListObjectsOutput(BaseModel):
    """Response model for listing objects."""

    data: list[Object] = Field(..., description="List of objects")
    pagination: Pagination


class CreateObjectRequest(BaseModel):
    type_key: str = Field(..., min_length=1)
    name: str | None = None
    properties: Properties | None = None
    template_id: str | None = None

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


class UpdateObjectRequest(BaseModel):
    """Partial update; fields left as None are not sent."""

    name: str | None = None
    markdown: str | None = None
    properties: Properties | None = None

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


class CreateObjectResp(BaseModel):
    object: Object
    properties: JsonValue = None
    markdown: str | None = None


class UpdateObjectResp(BaseModel):
    object: Object
    properties: JsonValue = None
    markdown: str | None = None


class DeleteObjectResp(BaseModel):
    object: Object
