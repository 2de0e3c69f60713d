"""
Object endpoints.
"""

import json
from collections.abc import Mapping
from typing import Any, List

from pydantic import ValidationError as PydanticValidationError

from .._utils import build_params, parse_model, unwrap
from ..client_types import RequesterProtocol
from ..env import LOG
from ..errors import ValidationError
from ..pagination import check_limits, collect_pages
from ..types.object import (
    CreateObjectRequest,
    CreateObjectResp,
    DeleteObjectResp,
    ListObjectsOutput,
    Object,
    UpdateObjectRequest,
    UpdateObjectResp,
)


def objects_path(space_id: str, object_id: str | None = None) -> str:
    if not space_id:
        raise ValidationError("space_id must not be empty")
    path = f"/v1/spaces/{space_id}/objects"
    if object_id is None:
        return path
    if not object_id:
        raise ValidationError("object_id must not be empty")
    return f"{path}/{object_id}"


def build_create_request(
    request: CreateObjectRequest | None,
    type_key: str | None,
    name: str | None,
    properties: Mapping[str, Any] | None,
    template_id: str | None,
) -> CreateObjectRequest:
    if request is not None:
        return request
    if not type_key:
        raise ValidationError("create requires 'type_key'")
    try:
        return CreateObjectRequest(
            type_key=type_key,
            name=name,
            properties=dict(properties) if properties is not None else None,
            template_id=template_id,
        )
    except PydanticValidationError as e:
        raise ValidationError(f"invalid create request: {e}") from e


def build_update_request(
    request: UpdateObjectRequest | None,
    name: str | None,
    markdown: str | None,
    properties: Mapping[str, Any] | None,
) -> UpdateObjectRequest:
    if request is None:
        try:
            request = UpdateObjectRequest(
                name=name,
                markdown=markdown,
                properties=dict(properties) if properties is not None else None,
            )
        except PydanticValidationError as e:
            raise ValidationError(f"invalid update request: {e}") from e
    if not request.to_payload():
        raise ValidationError("update requires at least one of: name, markdown, properties")
    return request


def log_request_body(payload: Mapping[str, Any]) -> None:
    LOG.debug(f"Request JSON: {json.dumps(payload, indent=2, ensure_ascii=False)}")


class ObjectsAPI:
    def __init__(self, requester: RequesterProtocol) -> None:
        self._requester = requester

    def list(
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
        data = self._requester.request("GET", objects_path(space_id), params=params or None)
        return parse_model(ListObjectsOutput, data)

    def list_all(
        self,
        space_id: str,
        *,
        limit: int | None = None,
        page_size: int | None = None,
    ) -> List[Object]:
        """List objects in a space, paging through as many pages as needed.

        Args:
            space_id: The ID of the space.
            limit: Maximum number of objects to return. Defaults to None (all).
            page_size: Page size sent with each request. Defaults to ``limit``.

        Returns:
            Objects in server order. Nothing is returned if any page fails.
        """
        check_limits(limit, page_size)
        per_page = page_size if page_size is not None else limit
        return collect_pages(
            lambda offset: self.list(space_id, limit=per_page, offset=offset),
            limit=limit,
        )

    def get(self, space_id: str, object_id: str) -> Object:
        """Get an object by its ID.

        Raises:
            NotFoundError: If the service does not know the object.
        """
        data = self._requester.request("GET", objects_path(space_id, object_id))
        return parse_model(Object, unwrap(data, "object"))

    def create(
        self,
        space_id: str,
        request: CreateObjectRequest | None = None,
        *,
        type_key: str | None = None,
        name: str | None = None,
        properties: Mapping[str, Any] | None = None,
        template_id: str | None = None,
    ) -> CreateObjectResp:
        """Create a new object in a space.

        Pass either a prepared ``request`` or the individual fields.

        Args:
            space_id: The ID of the space.
            request: A prepared CreateObjectRequest. Defaults to None.
            type_key: Type key of the new object; required without ``request``.
            name: Optional object name. Defaults to None.
            properties: Optional properties document. Defaults to None.
            template_id: Optional template to create from. Defaults to None.

        Returns:
            CreateObjectResp with the created object.

        Raises:
            ValidationError: If ``type_key`` is missing, or the service rejects the body.
        """
        request = build_create_request(request, type_key, name, properties, template_id)
        payload = request.to_payload()
        LOG.info(f"Creating object in space: {space_id}")
        log_request_body(payload)
        data = self._requester.request("POST", objects_path(space_id), json_data=payload)
        return parse_model(CreateObjectResp, data)

    def update(
        self,
        space_id: str,
        object_id: str,
        request: UpdateObjectRequest | None = None,
        *,
        name: str | None = None,
        markdown: str | None = None,
        properties: Mapping[str, Any] | None = None,
    ) -> UpdateObjectResp:
        """Update an existing object. Fields left as None are not changed.

        Raises:
            ValidationError: If no field is supplied.
        """
        request = build_update_request(request, name, markdown, properties)
        payload = request.to_payload()
        LOG.info(f"Updating object {object_id} in space: {space_id}")
        log_request_body(payload)
        data = self._requester.request(
            "PATCH", objects_path(space_id, object_id), json_data=payload
        )
        return parse_model(UpdateObjectResp, data)

    def delete(self, space_id: str, object_id: str) -> DeleteObjectResp:
        """Delete (archive) an object. The returned object reflects its archived state."""
        LOG.info(f"Deleting object {object_id} in space: {space_id}")
        data = self._requester.request("DELETE", objects_path(space_id, object_id))
        return parse_model(DeleteObjectResp, data)
