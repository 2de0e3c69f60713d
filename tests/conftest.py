from __future__ import annotations

import json
from typing import Any

import httpx
import pytest

from anytype import AnytypeClient, AnytypeConfig


class FakeAnytypeService:
    """In-memory stand-in for the Anytype API, served through httpx.MockTransport."""

    def __init__(self, page_cap: int = 100) -> None:
        self.page_cap = page_cap
        self.objects: dict[str, list[dict[str, Any]]] = {}
        self.spaces: list[dict[str, Any]] = []
        self.requests: list[httpx.Request] = []
        self._next_id = 1

    def add_object(self, space_id: str, **fields: Any) -> dict[str, Any]:
        obj = {
            "id": fields.pop("id", None) or self._new_id(),
            "space_id": space_id,
            "object": "object",
            "archived": False,
            "properties": {},
        }
        obj.update(fields)
        self.objects.setdefault(space_id, []).append(obj)
        return obj

    def _new_id(self) -> str:
        value = f"obj-{self._next_id}"
        self._next_id += 1
        return value

    def _find(self, space_id: str, object_id: str) -> dict[str, Any] | None:
        for obj in self.objects.get(space_id, []):
            if obj["id"] == object_id:
                return obj
        return None

    def _page(self, items: list[dict[str, Any]], request: httpx.Request) -> httpx.Response:
        offset = int(request.url.params.get("offset", 0))
        limit = min(int(request.url.params.get("limit", self.page_cap)), self.page_cap)
        page = items[offset : offset + limit]
        return httpx.Response(
            200,
            json={
                "data": page,
                "pagination": {
                    "total": len(items),
                    "offset": offset,
                    "limit": limit,
                    "has_more": offset + len(page) < len(items),
                },
            },
        )

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.headers.get("Authorization") != "Bearer test-key":
            return httpx.Response(401, json={"message": "invalid api key"})

        parts = request.url.path.strip("/").split("/")
        if parts[:2] != ["v1", "spaces"]:
            return httpx.Response(404, json={"message": "route not found"})
        if len(parts) == 2 and request.method == "GET":
            return self._page(self.spaces, request)
        space_id = parts[2]
        if len(parts) == 3 and request.method == "GET":
            for space in self.spaces:
                if space["id"] == space_id:
                    return httpx.Response(200, json={"space": space})
            return httpx.Response(404, json={"message": "space not found"})
        if len(parts) == 4 and parts[3] == "objects":
            if request.method == "GET":
                return self._page(self.objects.get(space_id, []), request)
            if request.method == "POST":
                body = json.loads(request.content)
                if not body.get("type_key"):
                    return httpx.Response(400, json={"message": "type_key is required"})
                obj = self.add_object(
                    space_id,
                    name=body.get("name"),
                    object=body["type_key"],
                    properties=body.get("properties", {}),
                )
                return httpx.Response(
                    201, json={"object": obj, "properties": obj["properties"], "markdown": ""}
                )
        if len(parts) == 5 and parts[3] == "objects":
            obj = self._find(space_id, parts[4])
            if obj is None:
                return httpx.Response(404, json={"message": "object not found"})
            if request.method == "GET":
                return httpx.Response(200, json={"object": obj})
            if request.method == "PATCH":
                body = json.loads(request.content)
                for key in ("name", "properties"):
                    if key in body:
                        obj[key] = body[key]
                markdown = body.get("markdown")
                return httpx.Response(200, json={"object": obj, "markdown": markdown})
            if request.method == "DELETE":
                obj["archived"] = True
                return httpx.Response(200, json={"object": obj})
        return httpx.Response(405, json={"message": "method not allowed"})


@pytest.fixture
def service() -> FakeAnytypeService:
    return FakeAnytypeService()


@pytest.fixture
def client(service: FakeAnytypeService) -> AnytypeClient:
    config = AnytypeConfig(api_key="test-key", base_url="http://anytype.test")
    with AnytypeClient(config, transport=httpx.MockTransport(service)) as c:
        yield c
