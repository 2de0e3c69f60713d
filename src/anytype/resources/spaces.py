"""
Spaces endpoints.
"""

from typing import List

from .._utils import build_params, parse_model, unwrap
from ..client_types import RequesterProtocol
from ..errors import ValidationError
from ..pagination import check_limits, collect_pages
from ..types.space import (
    ListSpacesOutput,
    Space,
)


def space_path(space_id: str) -> str:
    if not space_id:
        raise ValidationError("space_id must not be empty")
    return f"/v1/spaces/{space_id}"


class SpacesAPI:
    def __init__(self, requester: RequesterProtocol) -> None:
        self._requester = requester

    def list(
        self,
        *,
        limit: int | None = None,
        offset: int | None = None,
    ) -> ListSpacesOutput:
        """List one page of spaces.
        
        Args:
            limit: Maximum number of spaces to return. Defaults to None.
            offset: Number of spaces to skip. Defaults to None.
            
        Returns:
            ListSpacesOutput containing the list of spaces and pagination information.
        """
        params = build_params(limit=limit, offset=offset)
        data = self._requester.request("GET", "/v1/spaces", params=params or None)
        return parse_model(ListSpacesOutput, data)

    def list_all(
        self,
        *,
        limit: int | None = None,
        page_size: int | None = None,
    ) -> List[Space]:
        """List spaces across as many pages as needed.
        
        Args:
            limit: Maximum number of spaces to return. Defaults to None (all).
            page_size: Page size sent with each request. Defaults to ``limit``.
        """
        check_limits(limit, page_size)
        per_page = page_size if page_size is not None else limit
        return collect_pages(
            lambda offset: self.list(limit=per_page, offset=offset),
            limit=limit,
        )

    def get(self, space_id: str) -> Space:
        """Get a space by its ID.
        
        Args:
            space_id: The ID of the space.
            
        Returns:
            The Space object.
        """
        data = self._requester.request("GET", space_path(space_id))
        return parse_model(Space, unwrap(data, "space"))
