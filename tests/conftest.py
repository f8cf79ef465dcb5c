"""Shared fixtures: an in-memory Assets API behind a requests.Session."""

import json
import re
from typing import Any, Optional

import pytest
import requests

from jiraassets_provider.assets import AssetsClient
from jiraassets_provider.framework import ComponentConfigureRequest, ComponentConfigureResponse
from jiraassets_provider.provider import ProviderClient

WORKSPACE_ID = "ws-1"
BASE = f"https://api.atlassian.com/jsm/assets/workspace/{WORKSPACE_ID}/v1/"

REASONS = {200: "OK", 201: "Created", 204: "No Content", 400: "Bad Request", 404: "Not Found", 500: "Internal Server Error"}


def make_response(status_code: int, payload: Any = None, method: str = "GET", url: str = BASE) -> requests.Response:
    """Build a real requests.Response without touching the network."""
    response = requests.Response()
    response.status_code = status_code
    response.reason = REASONS.get(status_code, "")
    response._content = b"" if payload is None else json.dumps(payload).encode("utf-8")
    response.encoding = "utf-8"
    response.headers["Content-Type"] = "application/json"
    response.url = url
    response.request = requests.Request(method, url).prepare()
    return response


class FakeAssetsAPI(requests.Session):
    """
    Minimal stateful Assets API.

    Objects are stored with their full attribute map. Update merges the
    sent attributes into the stored ones, like the real partial update.
    Individual routes can be overridden with `fail(method, path, status)`.
    """

    def __init__(self):
        super().__init__()
        self.objects: dict[str, dict] = {}
        self.schemas: dict[str, dict] = {}
        self.calls: list[tuple[str, str, Optional[dict]]] = []
        self.overrides: dict[tuple[str, str], Any] = {}
        self._next_id = 1

    def fail(self, method: str, path: str, status_code: int = 500, payload: Any = None) -> None:
        self.overrides[(method, path)] = (status_code, payload or {"errorMessages": ["boom"]})

    def raise_on(self, method: str, path: str, exc: Exception) -> None:
        self.overrides[(method, path)] = exc

    def add_object(self, object_type_id: str, attributes: dict[str, str]) -> str:
        object_id = str(self._next_id)
        self._next_id += 1
        self.objects[object_id] = {
            "objectTypeId": object_type_id,
            "attributes": dict(attributes),
            "hasAvatar": False,
            "version": 1,
        }
        return object_id

    def request(self, method, url, **kwargs):
        path = url[len(BASE):]
        body = kwargs.get("json")
        self.calls.append((method, path, body))

        override = self.overrides.get((method, path))
        if isinstance(override, Exception):
            raise override
        if override is not None:
            status_code, payload = override
            return make_response(status_code, payload, method, url)

        status_code, payload = self._dispatch(method, path, body)
        return make_response(status_code, payload, method, url)

    def _object_json(self, object_id: str) -> dict:
        stored = self.objects[object_id]
        version = stored["version"]
        return {
            "workspaceId": WORKSPACE_ID,
            "globalId": f"{WORKSPACE_ID}:{object_id}",
            "id": object_id,
            "label": stored["attributes"].get("1087", f"Object {object_id}"),
            "objectKey": f"ITSM-{object_id}",
            "created": "2024-01-01T10:00:00.000Z",
            "updated": f"2024-01-0{min(version, 9)}T10:00:00.000Z",
            "hasAvatar": stored["hasAvatar"],
            "timestamp": 1704103200000,
            "objectType": {"id": stored["objectTypeId"]},
        }

    def _attributes_json(self, object_id: str) -> list[dict]:
        stored = self.objects[object_id]
        entries = [
            # Computed attributes the API always returns
            {"id": "900", "objectTypeAttributeId": "1086", "objectAttributeValues": [{"value": f"ITSM-{object_id}"}]},
            {"id": "901", "objectTypeAttributeId": "1088", "objectAttributeValues": [{"value": "2024-01-01T10:00:00.000Z"}]},
        ]
        for index, (type_id, value) in enumerate(sorted(stored["attributes"].items())):
            entries.append({
                "workspaceId": WORKSPACE_ID,
                "globalId": f"{WORKSPACE_ID}:attr:{index}",
                "id": str(1000 + index),
                "objectTypeAttributeId": type_id,
                "objectAttributeValues": [{"value": value, "displayValue": value}],
                "objectId": object_id,
            })
        return entries

    def _dispatch(self, method: str, path: str, body: Optional[dict]):
        if method == "POST" and path == "object/create":
            object_id = self.add_object(
                body["objectTypeId"],
                {a["objectTypeAttributeId"]: a["objectAttributeValues"][0]["value"] for a in body["attributes"]},
            )
            self.objects[object_id]["hasAvatar"] = body.get("hasAvatar", False)
            return 201, self._object_json(object_id)

        match = re.fullmatch(r"object/(\w+)(/attributes)?", path)
        if match:
            object_id, attributes = match.groups()
            if object_id not in self.objects:
                return 404, {"errorMessages": [f"Object {object_id} not found"]}
            if attributes and method == "GET":
                return 200, self._attributes_json(object_id)
            if method == "GET":
                return 200, self._object_json(object_id)
            if method == "PUT":
                stored = self.objects[object_id]
                for attr in body["attributes"]:
                    stored["attributes"][attr["objectTypeAttributeId"]] = attr["objectAttributeValues"][0]["value"]
                stored["hasAvatar"] = body.get("hasAvatar", False)
                stored["version"] += 1
                return 200, self._object_json(object_id)
            if method == "DELETE":
                del self.objects[object_id]
                return 204, None

        match = re.fullmatch(r"objectschema/(\w+)", path)
        if match and method == "GET":
            schema = self.schemas.get(match.group(1))
            if schema is None:
                return 404, {"errorMessages": ["Object schema not found"]}
            return 200, schema

        return 404, {"errorMessages": [f"No route for {method} {path}"]}


@pytest.fixture
def fake_api() -> FakeAssetsAPI:
    return FakeAssetsAPI()


@pytest.fixture
def assets_client(fake_api) -> AssetsClient:
    return AssetsClient(WORKSPACE_ID, "admin@example.com", "token", session=fake_api)


@pytest.fixture
def provider_client(assets_client) -> ProviderClient:
    return ProviderClient(client=assets_client, workspace_id=WORKSPACE_ID)


def configured(component, provider_client):
    """Run the configure step of a resource or data source and return it."""
    resp = ComponentConfigureResponse()
    component.configure(ComponentConfigureRequest(provider_data=provider_client), resp)
    assert not resp.diagnostics.has_error()
    return component


@pytest.fixture
def configure(provider_client):
    """Configure a fresh resource or data source with the fake-backed client."""

    def _configure(component):
        return configured(component, provider_client)

    return _configure
