from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from .errors import DeserializationError

ModelT = TypeVar("ModelT", bound=BaseModel)


def build_params(**kwargs: Any) -> dict[str, Any]:
    return {key: value for key, value in kwargs.items() if value is not None}


def unwrap(data: Any, key: str) -> Any:
    """Return ``data[key]`` when the body wraps a single resource in an envelope.

    A bare object also has an ``object`` key (its type tag), so only a mapping
    value counts as an envelope.
    """
    if isinstance(data, Mapping) and isinstance(data.get(key), Mapping):
        return data[key]
    return data


def parse_model(model: type[ModelT], data: Any) -> ModelT:
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        raise DeserializationError(
            f"unexpected {model.__name__} response: {e.error_count()} validation error(s): {e}"
        ) from e
