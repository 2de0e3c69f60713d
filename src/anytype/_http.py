"""
Helpers shared by the sync and async requesters.
"""

from typing import Any

import httpx

from .config import AnytypeConfig
from .errors import (
    AuthError,
    DeserializationError,
    InvalidRequestError,
    NotFoundError,
    TransportError,
    UnauthorizedError,
)

USER_AGENT = "anytype-py"


def require_api_key(config: AnytypeConfig) -> str:
    api_key = (config.api_key or "").strip()
    if not api_key:
        raise AuthError("Not authenticated. Run 'anytype auth set-key' first.")
    return api_key


def default_headers(config: AnytypeConfig, api_key: str) -> dict[str, str]:
    return {
        "Authorization": f"Bearer {api_key}",
        "Anytype-Version": config.api_version,
        "Accept": "application/json",
        "User-Agent": USER_AGENT,
    }


def _error_detail(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text.strip() or response.reason_phrase
    if isinstance(body, dict):
        for key in ("message", "error", "detail"):
            value = body.get(key)
            if isinstance(value, str) and value:
                return value
            if isinstance(value, dict) and isinstance(value.get("message"), str):
                return value["message"]
    return response.text.strip() or response.reason_phrase


def handle_response(method: str, path: str, response: httpx.Response) -> Any:
    """Map a response onto the error taxonomy or return its decoded JSON body."""
    status = response.status_code
    if not response.is_success:
        detail = _error_detail(response)
        message = f"{method} {path} failed with HTTP {status}: {detail}"
        if status == 404:
            raise NotFoundError(message, status_code=status, path=path)
        if status in (401, 403):
            raise UnauthorizedError(message, status_code=status, path=path)
        if status in (400, 422):
            raise InvalidRequestError(message, status_code=status, path=path)
        raise TransportError(message, status_code=status, path=path)

    if not response.content:
        return None
    try:
        return response.json()
    except ValueError as e:
        raise DeserializationError(f"{method} {path} returned a non-JSON body: {e}") from e


def transport_failure(method: str, path: str, e: httpx.HTTPError) -> TransportError:
    return TransportError(f"{method} {path} failed: {e}", path=path)
