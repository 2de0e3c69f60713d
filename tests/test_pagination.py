from __future__ import annotations

import asyncio

import pytest

from anytype.errors import TransportError
from anytype.pagination import acollect_pages, collect_pages
from anytype.types import Pagination


class Page:
    def __init__(self, data, *, total, has_more):
        self.data = list(data)
        self.pagination = Pagination(total=total, has_more=has_more)


class ScriptedPages:
    """Returns pre-built pages in order and records the offsets requested."""

    def __init__(self, pages):
        self.pages = list(pages)
        self.offsets: list[int] = []

    def __call__(self, offset: int):
        self.offsets.append(offset)
        page = self.pages[len(self.offsets) - 1]
        if isinstance(page, Exception):
            raise page
        return page


def test_concatenates_pages_once_in_order() -> None:
    fetch = ScriptedPages(
        [
            Page([1, 2], total=5, has_more=True),
            Page([3, 4], total=5, has_more=True),
            Page([5], total=5, has_more=False),
        ]
    )
    assert collect_pages(fetch) == [1, 2, 3, 4, 5]
    assert fetch.offsets == [0, 2, 4]


def test_stops_when_total_reached_despite_has_more() -> None:
    fetch = ScriptedPages(
        [
            Page(["a", "b"], total=3, has_more=True),
            Page(["c"], total=3, has_more=True),
        ]
    )
    assert collect_pages(fetch) == ["a", "b", "c"]
    assert len(fetch.offsets) == 2


def test_limit_returns_first_items_without_extra_requests() -> None:
    fetch = ScriptedPages(
        [
            Page([1, 2, 3], total=9, has_more=True),
            Page([4, 5, 6], total=9, has_more=True),
            Page([7, 8, 9], total=9, has_more=False),
        ]
    )
    assert collect_pages(fetch, limit=4) == [1, 2, 3, 4]
    assert fetch.offsets == [0, 3]


def test_limit_truncates_oversized_first_page() -> None:
    fetch = ScriptedPages([Page(list(range(10)), total=50, has_more=True)])
    assert collect_pages(fetch, limit=3) == [0, 1, 2]
    assert fetch.offsets == [0]


def test_empty_first_page_yields_empty_result_after_one_request() -> None:
    fetch = ScriptedPages([Page([], total=0, has_more=False)])
    assert collect_pages(fetch) == []
    assert fetch.offsets == [0]


def test_empty_page_with_has_more_does_not_loop() -> None:
    fetch = ScriptedPages(
        [
            Page([1], total=10, has_more=True),
            Page([], total=10, has_more=True),
        ]
    )
    assert collect_pages(fetch) == [1]
    assert fetch.offsets == [0, 1]


def test_error_on_second_page_propagates() -> None:
    fetch = ScriptedPages(
        [
            Page([1, 2], total=6, has_more=True),
            TransportError("GET /v1/spaces/s/objects failed with HTTP 502: bad gateway", status_code=502),
            Page([5, 6], total=6, has_more=False),
        ]
    )
    with pytest.raises(TransportError) as exc:
        collect_pages(fetch)
    assert exc.value.status_code == 502
    assert fetch.offsets == [0, 2]


def test_zero_limit_makes_no_request() -> None:
    fetch = ScriptedPages([])
    assert collect_pages(fetch, limit=0) == []
    assert fetch.offsets == []


def test_negative_limit_rejected() -> None:
    with pytest.raises(ValueError):
        collect_pages(ScriptedPages([]), limit=-1)


def test_async_walk_matches_sync_walk() -> None:
    fetch = ScriptedPages(
        [
            Page([1, 2], total=4, has_more=True),
            Page([3, 4], total=4, has_more=False),
        ]
    )

    async def afetch(offset: int):
        return fetch(offset)

    assert asyncio.run(acollect_pages(afetch)) == [1, 2, 3, 4]
    assert fetch.offsets == [0, 2]


def test_async_walk_terminates_on_runaway_has_more() -> None:
    fetch = ScriptedPages([Page([1, 2], total=2, has_more=True)])

    async def afetch(offset: int):
        return fetch(offset)

    assert asyncio.run(acollect_pages(afetch)) == [1, 2]
    assert fetch.offsets == [0]
