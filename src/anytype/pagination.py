"""
Offset pagination helpers.

``collect_pages`` walks a paged listing endpoint into one list. Pages are
requested strictly in order because the offset of page N+1 is the number of
items received so far. The walk stops as soon as one of these holds:

- the caller ``limit`` has been reached,
- the server reports ``has_more=False``,
- the offset has reached the server-reported ``total``,
- a page came back empty (the offset could not advance).

Errors on any page propagate; items gathered before the failure are dropped.
"""

from collections.abc import Awaitable, Callable
from typing import TypeVar

from .client_types import PageProtocol
from .env import LOG

T = TypeVar("T")


def check_limits(limit: int | None, page_size: int | None) -> None:
    if limit is not None and limit < 0:
        raise ValueError("limit must be >= 0")
    if page_size is not None and page_size <= 0:
        raise ValueError("page_size must be > 0")


def _should_stop(page: PageProtocol[T], collected: int, offset: int, limit: int | None) -> bool:
    pagination = page.pagination
    if limit is not None and collected >= limit:
        return True
    if not pagination.has_more:
        return True
    if offset >= pagination.total:
        return True
    if not page.data:
        LOG.warning(
            f"Empty page at offset {offset} while server reports has_more (total={pagination.total}), stopping"
        )
        return True
    return False


def collect_pages(
    fetch_page: Callable[[int], PageProtocol[T]],
    *,
    limit: int | None = None,
) -> list[T]:
    """Fetch pages via ``fetch_page(offset)`` until a stop condition holds.

    Args:
        fetch_page: Callable returning the page that starts at ``offset``.
        limit: Maximum number of items to return. Defaults to None (all).

    Returns:
        Items in page order, at most ``limit`` of them.
    """
    check_limits(limit, None)
    if limit == 0:
        return []

    offset = 0
    items: list[T] = []
    pages_fetched = 0
    while True:
        page = fetch_page(offset)
        pages_fetched += 1
        if page.data:
            offset += len(page.data)
            items.extend(page.data)
            LOG.debug(
                f"Fetched page {pages_fetched} with {len(page.data)} items (offset: {offset - len(page.data)})"
            )
        if _should_stop(page, len(items), offset, limit):
            break

    if limit is not None:
        del items[limit:]
    return items


async def acollect_pages(
    fetch_page: Callable[[int], Awaitable[PageProtocol[T]]],
    *,
    limit: int | None = None,
) -> list[T]:
    """Async counterpart of :func:`collect_pages`; each page is awaited before the next."""
    check_limits(limit, None)
    if limit == 0:
        return []

    offset = 0
    items: list[T] = []
    pages_fetched = 0
    while True:
        page = await fetch_page(offset)
        pages_fetched += 1
        if page.data:
            offset += len(page.data)
            items.extend(page.data)
            LOG.debug(
                f"Fetched page {pages_fetched} with {len(page.data)} items (offset: {offset - len(page.data)})"
            )
        if _should_stop(page, len(items), offset, limit):
            break

    if limit is not None:
        del items[limit:]
    return items
