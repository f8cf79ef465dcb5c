"""
Jira Assets REST API client.

Endpoints used (all under ``jsm/assets/workspace/{workspace_id}/v1``):
- POST   object/create
- GET    object/{id}
- PUT    object/{id}
- DELETE object/{id}
- GET    object/{id}/attributes
- GET    objectschema/{id}

No retries, rate limiting or caching happen here. A failed call raises
AssetsAPIError carrying the HTTP response when there was one, so callers
can log the request URL, status, headers and body.
"""

import logging
from typing import Any, Optional
import requests
from requests.auth import HTTPBasicAuth
from pydantic import ValidationError

from ..models import AssetsObject, ObjectAttribute, ObjectPayload, ObjectSchema

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.atlassian.com/"


class AssetsAPIError(Exception):
    """Raised for transport failures, non-2xx responses and undecodable bodies."""

    def __init__(self, message: str, response: Optional[requests.Response] = None):
        super().__init__(message)
        self.response = response

    @property
    def status_code(self) -> Optional[int]:
        return self.response.status_code if self.response is not None else None


class AssetsClient:
    """Assets API client bound to one workspace and one set of credentials."""

    def __init__(
        self,
        workspace_id: str,
        user: str,
        password: str,
        base_url: str = DEFAULT_BASE_URL,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        """
        Initialize Assets client.

        Args:
            workspace_id: Assets workspace id, added to every request path
            user: Account email for basic auth
            password: API token for basic auth
            base_url: API gateway root
            session: Pre-built session (tests inject fakes here)
            timeout: Per-request timeout; None leaves the requests default
        """
        if not workspace_id:
            raise ValueError("workspace_id must not be empty")

        self.workspace_id = workspace_id
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.auth = HTTPBasicAuth(user, password)
        self.session.headers.update({
            "Accept": "application/json",
            "Content-Type": "application/json",
        })

    def _url(self, path: str) -> str:
        return f"{self.base_url}/jsm/assets/workspace/{self.workspace_id}/v1/{path}"

    def _request(self, method: str, path: str, **kwargs) -> requests.Response:
        """Send one request and raise AssetsAPIError unless the status is 2xx."""
        url = self._url(path)
        if self.timeout is not None:
            kwargs.setdefault("timeout", self.timeout)

        logger.debug(f"Assets API {method} {url}")
        try:
            response = self.session.request(method, url, **kwargs)
        except requests.exceptions.RequestException as e:
            raise AssetsAPIError(f"{method} {url} failed: {e}") from e

        if not 200 <= response.status_code < 300:
            raise AssetsAPIError(
                f"{method} {url} returned {response.status_code}: {response.text}",
                response=response,
            )

        return response

    @staticmethod
    def _json(response: requests.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise AssetsAPIError(f"Invalid JSON in response: {e}", response=response) from e

    def _parse(self, model: type, response: requests.Response):
        try:
            return model.model_validate(self._json(response))
        except ValidationError as e:
            raise AssetsAPIError(f"Unexpected response shape: {e}", response=response) from e

    def create_object(self, payload: ObjectPayload) -> AssetsObject:
        """Create an object and return it as stored remotely."""
        response = self._request("POST", "object/create", json=payload.to_json())
        return self._parse(AssetsObject, response)

    def get_object(self, object_id: str) -> AssetsObject:
        """Get an object by id."""
        response = self._request("GET", f"object/{object_id}")
        return self._parse(AssetsObject, response)

    def update_object(self, object_id: str, payload: ObjectPayload) -> AssetsObject:
        """Update an object; attributes not in the payload are left as they are."""
        response = self._request("PUT", f"object/{object_id}", json=payload.to_json())
        return self._parse(AssetsObject, response)

    def delete_object(self, object_id: str) -> requests.Response:
        """Delete an object."""
        return self._request("DELETE", f"object/{object_id}")

    def get_object_attributes(self, object_id: str) -> list[ObjectAttribute]:
        """List all attributes of an object, computed ones included."""
        response = self._request("GET", f"object/{object_id}/attributes")
        data = self._json(response)
        if not isinstance(data, list):
            raise AssetsAPIError("Expected a list of object attributes", response=response)
        try:
            return [ObjectAttribute.model_validate(item) for item in data]
        except ValidationError as e:
            raise AssetsAPIError(f"Unexpected response shape: {e}", response=response) from e

    def get_object_schema(self, schema_id: str) -> tuple[ObjectSchema, requests.Response]:
        """Get object schema metadata together with the raw response."""
        response = self._request("GET", f"objectschema/{schema_id}")
        return self._parse(ObjectSchema, response), response
