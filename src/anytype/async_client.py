"""
Asynchronous client for the Anytype API.
"""

from collections.abc import Mapping
from typing import Any

import httpx

from ._http import default_headers, handle_response, require_api_key, transport_failure
from .config import AnytypeConfig
from .env import LOG
from .resources import AsyncObjectsAPI, AsyncSpacesAPI


class AnytypeAsyncClient:
    """Async counterpart of :class:`anytype.client.AnytypeClient`."""

    def __init__(
        self,
        config: AnytypeConfig | None = None,
        *,
        api_key: str | None = None,
        base_url: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        config = config or AnytypeConfig()
        updates = {k: v for k, v in (("api_key", api_key), ("base_url", base_url)) if v is not None}
        if updates:
            config = config.model_copy(update=updates)
        self.config = config
        key = require_api_key(config)
        self._http = httpx.AsyncClient(
            base_url=config.base_url.rstrip("/"),
            headers=default_headers(config, key),
            timeout=config.timeout,
            transport=transport,
        )
        self.objects = AsyncObjectsAPI(self)
        self.spaces = AsyncSpacesAPI(self)

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        json_data: Mapping[str, Any] | None = None,
    ) -> Any:
        LOG.debug(f"{method} {path} params={dict(params) if params else {}}")
        try:
            response = await self._http.request(method, path, params=params, json=json_data)
        except httpx.HTTPError as e:
            raise transport_failure(method, path, e) from e
        return handle_response(method, path, response)

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "AnytypeAsyncClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
