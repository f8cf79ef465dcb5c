"""
Lifecycle interfaces invoked by the plugin host.

The host owns the plan/apply loop, state storage and concurrency. It calls
into a Provider, then into the Resources and DataSources the provider
exposes, handing each call a request object and collecting the response
object. Handlers never raise for expected failures; they record
diagnostics on the response instead.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from .diagnostics import Diagnostics
from .schema import Schema

State = dict[str, Any]


# --- provider -------------------------------------------------------------


@dataclass
class ConfigureRequest:
    config: State = field(default_factory=dict)


@dataclass
class ConfigureResponse:
    diagnostics: Diagnostics = field(default_factory=Diagnostics)
    resource_data: Any = None
    data_source_data: Any = None


# --- resource / data source configure ------------------------------------


@dataclass
class ComponentConfigureRequest:
    provider_data: Any = None


@dataclass
class ComponentConfigureResponse:
    diagnostics: Diagnostics = field(default_factory=Diagnostics)


# --- resource CRUD --------------------------------------------------------


@dataclass
class CreateRequest:
    plan: State


@dataclass
class CreateResponse:
    state: Optional[State] = None
    diagnostics: Diagnostics = field(default_factory=Diagnostics)


@dataclass
class ReadRequest:
    state: State


@dataclass
class ReadResponse:
    state: Optional[State] = None
    diagnostics: Diagnostics = field(default_factory=Diagnostics)


@dataclass
class UpdateRequest:
    plan: State
    state: State


@dataclass
class UpdateResponse:
    state: Optional[State] = None
    diagnostics: Diagnostics = field(default_factory=Diagnostics)


@dataclass
class DeleteRequest:
    state: State


@dataclass
class DeleteResponse:
    diagnostics: Diagnostics = field(default_factory=Diagnostics)


@dataclass
class ImportStateRequest:
    id: str


@dataclass
class ImportStateResponse:
    state: State = field(default_factory=dict)
    diagnostics: Diagnostics = field(default_factory=Diagnostics)


# --- data source read -----------------------------------------------------


@dataclass
class DataSourceReadRequest:
    config: State


@dataclass
class DataSourceReadResponse:
    state: Optional[State] = None
    diagnostics: Diagnostics = field(default_factory=Diagnostics)


# --- interfaces -----------------------------------------------------------


class Resource(ABC):
    """A managed resource type."""

    @abstractmethod
    def type_name(self, provider_type_name: str) -> str:
        """Full resource type name, e.g. ``jiraassets_object``."""

    @abstractmethod
    def schema(self) -> Schema:
        ...

    def configure(self, req: ComponentConfigureRequest, resp: ComponentConfigureResponse) -> None:
        """Receive provider data. Optional for resources that need none."""

    @abstractmethod
    def create(self, req: CreateRequest, resp: CreateResponse) -> None:
        ...

    @abstractmethod
    def read(self, req: ReadRequest, resp: ReadResponse) -> None:
        ...

    @abstractmethod
    def update(self, req: UpdateRequest, resp: UpdateResponse) -> None:
        ...

    @abstractmethod
    def delete(self, req: DeleteRequest, resp: DeleteResponse) -> None:
        ...


class ResourceWithImportState(Resource):
    """A resource that can be imported from an externally supplied id."""

    @abstractmethod
    def import_state(self, req: ImportStateRequest, resp: ImportStateResponse) -> None:
        ...


class DataSource(ABC):
    """A read-only data source type."""

    @abstractmethod
    def type_name(self, provider_type_name: str) -> str:
        ...

    @abstractmethod
    def schema(self) -> Schema:
        ...

    def configure(self, req: ComponentConfigureRequest, resp: ComponentConfigureResponse) -> None:
        """Receive provider data. Optional for data sources that need none."""

    @abstractmethod
    def read(self, req: DataSourceReadRequest, resp: DataSourceReadResponse) -> None:
        ...


class Provider(ABC):
    """Top level provider: configuration plus the types it serves."""

    type_name: str = ""
    version: str = ""

    @abstractmethod
    def schema(self) -> Schema:
        ...

    @abstractmethod
    def configure(self, req: ConfigureRequest, resp: ConfigureResponse) -> None:
        ...

    @abstractmethod
    def resources(self) -> list[Callable[[], Resource]]:
        ...

    @abstractmethod
    def data_sources(self) -> list[Callable[[], DataSource]]:
        ...


def import_state_passthrough_id(attribute: str, req: ImportStateRequest, resp: ImportStateResponse) -> None:
    """Seed the imported state with the supplied id, to be filled by a read."""
    if not req.id:
        resp.diagnostics.add_error(
            "Missing Resource Import Identifier",
            "The import identifier was empty. Supply the id of an existing object.",
        )
        return
    resp.state[attribute] = req.id
