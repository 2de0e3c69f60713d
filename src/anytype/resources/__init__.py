"""Resource-specific API helpers for the Anytype client."""

from .async_objects import AsyncObjectsAPI
from .async_spaces import AsyncSpacesAPI
from .objects import ObjectsAPI
from .spaces import SpacesAPI

__all__ = [
    "ObjectsAPI",
    "SpacesAPI",
    "AsyncObjectsAPI",
    "AsyncSpacesAPI",
]
