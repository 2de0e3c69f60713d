"""
Protocols shared by the sync and async clients and their resources.
"""

from collections.abc import Mapping, Sequence
from typing import Any, Protocol, TypeVar

from .types.common import Pagination

T_co = TypeVar("T_co", covariant=True)


class RequesterProtocol(Protocol):
    def request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        json_data: Mapping[str, Any] | None = None,
    ) -> Any: ...


class AsyncRequesterProtocol(Protocol):
    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        json_data: Mapping[str, Any] | None = None,
    ) -> Any: ...


class PageProtocol(Protocol[T_co]):
    @property
    def data(self) -> Sequence[T_co]: ...

    @property
    def pagination(self) -> Pagination: ...
