"""Host-facing plugin interfaces: diagnostics, schemas and lifecycle calls."""

from .diagnostics import Diagnostic, Diagnostics, Severity
from .schema import Attribute, AttributeType, Schema
from .values import UNKNOWN, is_null, is_unknown, strip_unknown
from .interfaces import (
    ComponentConfigureRequest,
    ComponentConfigureResponse,
    ConfigureRequest,
    ConfigureResponse,
    CreateRequest,
    CreateResponse,
    DataSource,
    DataSourceReadRequest,
    DataSourceReadResponse,
    DeleteRequest,
    DeleteResponse,
    ImportStateRequest,
    ImportStateResponse,
    Provider,
    ReadRequest,
    ReadResponse,
    Resource,
    ResourceWithImportState,
    State,
    UpdateRequest,
    UpdateResponse,
    import_state_passthrough_id,
)

__all__ = [
    # Diagnostics
    "Diagnostic",
    "Diagnostics",
    "Severity",
    # Schema
    "Attribute",
    "AttributeType",
    "Schema",
    # Values
    "UNKNOWN",
    "is_null",
    "is_unknown",
    "strip_unknown",
    # Lifecycle
    "ComponentConfigureRequest",
    "ComponentConfigureResponse",
    "ConfigureRequest",
    "ConfigureResponse",
    "CreateRequest",
    "CreateResponse",
    "DataSource",
    "DataSourceReadRequest",
    "DataSourceReadResponse",
    "DeleteRequest",
    "DeleteResponse",
    "ImportStateRequest",
    "ImportStateResponse",
    "Provider",
    "ReadRequest",
    "ReadResponse",
    "Resource",
    "ResourceWithImportState",
    "State",
    "UpdateRequest",
    "UpdateResponse",
    "import_state_passthrough_id",
]
