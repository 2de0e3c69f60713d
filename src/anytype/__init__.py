"""
Python SDK for the Anytype API.
"""

from importlib import metadata as _metadata

from .async_client import AnytypeAsyncClient
from .client import AnytypeClient
from .config import AnytypeConfig, load_config
from .errors import (
    AnytypeError,
    AuthError,
    DeserializationError,
    InvalidRequestError,
    NotFoundError,
    TransportError,
    UnauthorizedError,
    ValidationError,
)
from .resources import (
    AsyncObjectsAPI,
    AsyncSpacesAPI,
    ObjectsAPI,
    SpacesAPI,
)
from .types import (
    CreateObjectRequest,
    Object,
    Pagination,
    Space,
    UpdateObjectRequest,
)

__all__ = [
    "AnytypeClient",
    "AnytypeAsyncClient",
    "AnytypeConfig",
    "load_config",
    "ObjectsAPI",
    "SpacesAPI",
    "AsyncObjectsAPI",
    "AsyncSpacesAPI",
    "Object",
    "Space",
    "Pagination",
    "CreateObjectRequest",
    "UpdateObjectRequest",
    "AnytypeError",
    "AuthError",
    "DeserializationError",
    "InvalidRequestError",
    "NotFoundError",
    "TransportError",
    "UnauthorizedError",
    "ValidationError",
    "__version__",
]

try:
    __version__ = _metadata.version("anytype-py")
except _metadata.PackageNotFoundError:  # pragma: no cover - local/checkout usage
    __version__ = "0.0.0"
