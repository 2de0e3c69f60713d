"""
Synchronous client for the Anytype API.
"""

from collections.abc import Mapping
from typing import Any

import httpx

from ._http import default_headers, handle_response, require_api_key, transport_failure
from .config import AnytypeConfig
from .env import LOG
from .resources import ObjectsAPI, SpacesAPI


class AnytypeClient:
    """Blocking client; every call is a single request, never retried.

    Args:
        config: Effective configuration. Defaults to ``AnytypeConfig()``.
        api_key: Overrides ``config.api_key``.
        base_url: Overrides ``config.base_url``.
        transport: Optional httpx transport, e.g. ``httpx.MockTransport`` in tests.

    Raises:
        AuthError: If no API key is available. Raised before any request is made.
    """

    def __init__(
        self,
        config: AnytypeConfig | None = None,
        *,
        api_key: str | None = None,
        base_url: str | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        config = config or AnytypeConfig()
        updates = {k: v for k, v in (("api_key", api_key), ("base_url", base_url)) if v is not None}
        if updates:
            config = config.model_copy(update=updates)
        self.config = config
        key = require_api_key(config)
        self._http = httpx.Client(
            base_url=config.base_url.rstrip("/"),
            headers=default_headers(config, key),
            timeout=config.timeout,
            transport=transport,
        )
        self.objects = ObjectsAPI(self)
        self.spaces = SpacesAPI(self)

    def request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        json_data: Mapping[str, Any] | None = None,
    ) -> Any:
        LOG.debug(f"{method} {path} params={dict(params) if params else {}}")
        try:
            response = self._http.request(method, path, params=params, json=json_data)
        except httpx.HTTPError as e:
            raise transport_failure(method, path, e) from e
        return handle_response(method, path, response)

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "AnytypeClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
