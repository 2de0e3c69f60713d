"""
Object endpoints (async).
"""

from collections.abc import Mapping
from typing import Any, List

from .._utils import build_params, parse_model, unwrap
from ..client_types import AsyncRequesterProtocol
from ..env import LOG
from ..pagination import acollect_pages, check_limits
from ..types.object import (
    CreateObjectRequest,
    CreateObjectResp,
    DeleteObjectResp,
    ListObjectsOutput,
    Object,
    UpdateObjectRequest,
    UpdateObjectResp,
)
from .objects import build_create_request, build_update_request, log_request_body, objects_path


class AsyncObjectsAPI:
    def __init__(self, requester: AsyncRequesterProtocol) -> None:
        self._requester = requester

    async def list(
        self,
        space_id: str,
        *,
        limit: int | None = None,
        offset: int | None = None,
    ) -> ListObjectsOutput:
        """List one page of objects in a space.

        Args:
            space_id: The ID of the space.
            limit: Page size requested from the server. Defaults to None.
            offset: Number of items to skip. Defaults to None.

        Returns:
            ListObjectsOutput containing the page of objects and pagination state.

        Raises:
            DeserializationError: If the service answers 2xx with a body that is
                not a valid object page. The request itself succeeded, so this is
                not reported as a TransportError.
        """
        params = build_params(limit=limit, offset=offset)
        data = await self._requester.request("GET", objects_path(space_id), params=params or None)
        return parse_model(ListObjectsOutput, data)

    async def list_all(
        self,
        space_id: str,
        *,
        limit: int | None = None,
        page_size: int | None = None,
    ) -> List[Object]:
        """List objects in a space, awaiting each page before requesting the next."""
        check_limits(limit, page_size)
        per_page = page_size if page_size is not None else limit

        async def fetch(offset: int) -> ListObjectsOutput:
            return await self.list(space_id, limit=per_page, offset=offset)

        return await acollect_pages(fetch, limit=limit)

    async def get(self, space_id: str, object_id: str) -> Object:
        data = await self._requester.request("GET", objects_path(space_id, object_id))
        return parse_model(Object, unwrap(data, "object"))

    async def create(
        self,
        space_id: str,
        request: CreateObjectRequest | None = None,
        *,
        type_key: str | None = None,
        name: str | None = None,
        properties: Mapping[str, Any] | None = None,
        template_id: str | None = None,
    ) -> CreateObjectResp:
        request = build_create_request(request, type_key, name, properties, template_id)
        payload = request.to_payload()
        LOG.info(f"Creating object in space: {space_id}")
        log_request_body(payload)
        data = await self._requester.request("POST", objects_path(space_id), json_data=payload)
        return parse_model(CreateObjectResp, data)

    async def update(
        self,
        space_id: str,
        object_id: str,
        request: UpdateObjectRequest | None = None,
        *,
        name: str | None = None,
        markdown: str | None = None,
        properties: Mapping[str, Any] | None = None,
    ) -> UpdateObjectResp:
        request = build_update_request(request, name, markdown, properties)
        payload = request.to_payload()
        LOG.info(f"Updating object {object_id} in space: {space_id}")
        log_request_body(payload)
        data = await self._requester.request(
            "PATCH", objects_path(space_id, object_id), json_data=payload
        )
        return parse_model(UpdateObjectResp, data)

    async def delete(self, space_id: str, object_id: str) -> DeleteObjectResp:
        LOG.info(f"Deleting object {object_id} in space: {space_id}")
        data = await self._requester.request("DELETE", objects_path(space_id, object_id))
        return parse_model(DeleteObjectResp, data)
