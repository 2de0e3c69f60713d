"""Pydantic models for Anytype API payloads."""

from .common import Pagination
from .object import (
    CreateObjectRequest,
    CreateObjectResp,
    DeleteObjectResp,
    ListObjectsOutput,
    Object,
    Properties,
    UpdateObjectRequest,
    UpdateObjectResp,
)
from .space import ListSpacesOutput, Space

__all__ = [
    "Pagination",
    "Object",
    "Properties",
    "ListObjectsOutput",
    "CreateObjectRequest",
    "CreateObjectResp",
    "UpdateObjectRequest",
    "UpdateObjectResp",
    "DeleteObjectResp",
    "Space",
    "ListSpacesOutput",
]
