"""Data source `jiraassets_object_schema`: read-only object schema metadata."""

import logging
from typing import Optional

from pydantic import ValidationError

from .assets import AssetsAPIError, AssetsClient
from .framework import (
    Attribute,
    AttributeType,
    ComponentConfigureRequest,
    ComponentConfigureResponse,
    DataSource,
    DataSourceReadRequest,
    DataSourceReadResponse,
    Schema,
)
from .models import ObjectSchemaDataSourceModel
from .provider import ProviderClient
from .utils.structured_logging import log_response_error

logger = logging.getLogger(__name__)

_STRING = Attribute(AttributeType.STRING, computed=True)
_INT64 = Attribute(AttributeType.INT64, computed=True)
_BOOL = Attribute(AttributeType.BOOL, computed=True)


class ObjectSchemaDataSource(DataSource):
    """The data source implementation."""

    def __init__(self):
        self.client: Optional[AssetsClient] = None
        self.workspace_id: str = ""

    def type_name(self, provider_type_name: str) -> str:
        return f"{provider_type_name}_object_schema"

    def schema(self) -> Schema:
        return Schema(
            description="Metadata of a Jira Assets object schema.",
            attributes={
                "workspace_id": _STRING,
                "global_id": _STRING,
                "id": Attribute(AttributeType.STRING, required=True, description="Numeric id of the object schema."),
                "name": _STRING,
                "object_schema_key": _STRING,
                "status": _STRING,
                "description": _STRING,
                "created": _STRING,
                "updated": _STRING,
                "object_count": _INT64,
                "object_type_count": _INT64,
                "can_manage": _BOOL,
                "id_as_int": _INT64,
            },
        )

    def configure(self, req: ComponentConfigureRequest, resp: ComponentConfigureResponse) -> None:
        if req.provider_data is None:
            return

        if not isinstance(req.provider_data, ProviderClient):
            resp.diagnostics.add_error(
                "Unexpected Data Source Configure Type",
                f"Expected ProviderClient, got: {type(req.provider_data).__name__}. "
                "Please report this issue to the provider developers.",
            )
            return

        self.client = req.provider_data.client
        self.workspace_id = req.provider_data.workspace_id

    def read(self, req: DataSourceReadRequest, resp: DataSourceReadResponse) -> None:
        logger.debug("Reading object schema data source")

        schema_id = req.config.get("id")
        if not isinstance(schema_id, str) or not schema_id.strip().isdigit():
            resp.diagnostics.add_attribute_error(
                "id",
                "Invalid object schema id",
                f"Expected a numeric string, got: {schema_id!r}",
            )
            return

        if self.client is None:
            resp.diagnostics.add_error(
                "Unconfigured Assets client",
                "The data source was read before the provider was configured.",
            )
            return

        try:
            schema, response = self.client.get_object_schema(schema_id.strip())
        except AssetsAPIError as e:
            log_response_error(logger, "Error reading object schema", e.response)
            resp.diagnostics.add_error("Unable to read Assets object schema", str(e))
            return

        # Only 200 is accepted, other 2xx codes included
        if response.status_code != 200:
            log_response_error(logger, "Unexpected status reading object schema", response)
            resp.diagnostics.add_error(
                "Unexpected HTTP status code from Assets API",
                f"{response.status_code} {response.reason or ''}".strip(),
            )
            return

        try:
            state = ObjectSchemaDataSourceModel.from_remote(schema)
        except ValidationError as e:
            resp.diagnostics.add_error("Unable to read Assets object schema", str(e))
            return

        resp.state = state.model_dump()
