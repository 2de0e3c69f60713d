"""
Spaces endpoints (async).
"""

from typing import List

from .._utils import build_params, parse_model, unwrap
from ..client_types import AsyncRequesterProtocol
from ..pagination import acollect_pages, check_limits
from ..types.space import (
    ListSpacesOutput,
    Space,
)
from .spaces import space_path


class AsyncSpacesAPI:
    def __init__(self, requester: AsyncRequesterProtocol) -> None:
        self._requester = requester

    async def list(
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
        data = await self._requester.request("GET", "/v1/spaces", params=params or None)
        return parse_model(ListSpacesOutput, data)

    async def list_all(
        self,
        *,
        limit: int | None = None,
        page_size: int | None = None,
    ) -> List[Space]:
        check_limits(limit, page_size)
        per_page = page_size if page_size is not None else limit

        async def fetch(offset: int) -> ListSpacesOutput:
            return await self.list(limit=per_page, offset=offset)

        return await acollect_pages(fetch, limit=limit)

    async def get(self, space_id: str) -> Space:
        """Get a space by its ID.
        
        Args:
            space_id: The ID of the space.
            
        Returns:
            The Space object.
        """
        data = await self._requester.request("GET", space_path(space_id))
        return parse_model(Space, unwrap(data, "space"))
