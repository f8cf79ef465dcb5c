"""
Resource `jiraassets_object`: an Assets object of a given object type.

Attributes are reconciled narrowly: a read only refreshes attribute type
ids already tracked in state, and an update only resends what is
configured. Attributes dropped from configuration therefore stay on the
remote object; they just disappear from the local view.
"""

import logging
from typing import Optional

from pydantic import ValidationError

from .assets import AssetsAPIError, AssetsClient
from .framework import (
    Attribute,
    AttributeType,
    ComponentConfigureRequest,
    ComponentConfigureResponse,
    CreateRequest,
    CreateResponse,
    DeleteRequest,
    DeleteResponse,
    Diagnostics,
    ImportStateRequest,
    ImportStateResponse,
    ReadRequest,
    ReadResponse,
    ResourceWithImportState,
    Schema,
    State,
    UpdateRequest,
    UpdateResponse,
    import_state_passthrough_id,
    strip_unknown,
)
from .models import ObjectAttribute, ObjectAttrResourceModel, ObjectResourceModel
from .provider import ProviderClient
from .utils.structured_logging import log_response_error

logger = logging.getLogger(__name__)


def _computed(description: str = "", keep_state: bool = True) -> Attribute:
    return Attribute(
        AttributeType.STRING,
        computed=True,
        description=description,
        use_state_for_unknown=keep_state,
    )


def _load(data: State, diagnostics: Diagnostics) -> Optional[ObjectResourceModel]:
    try:
        return ObjectResourceModel.model_validate(strip_unknown(data))
    except ValidationError as e:
        diagnostics.add_error("Invalid object resource data", str(e))
        return None


def reconcile_attributes(
    tracked: list[ObjectAttrResourceModel],
    remote: list[ObjectAttribute],
) -> list[ObjectAttrResourceModel]:
    """
    Refresh tracked attributes from the remote attribute listing.

    Only attribute type ids already in `tracked` are kept. The listing also
    carries computed attributes (key, created, updated...) whose type ids
    are not known up front, so they cannot be excluded any other way.
    Remote attributes without values are dropped.
    """
    tracked_ids = {attr.attr_type_id for attr in tracked}
    refreshed = []
    for attr in remote:
        if attr.object_type_attribute_id not in tracked_ids:
            continue
        value = attr.first_value()
        if value is None:
            continue
        refreshed.append(ObjectAttrResourceModel(attr_type_id=attr.object_type_attribute_id, attr_value=value))
    return refreshed


class ObjectResource(ResourceWithImportState):
    """The resource implementation."""

    def __init__(self):
        self.client: Optional[AssetsClient] = None
        self.workspace_id: str = ""

    def type_name(self, provider_type_name: str) -> str:
        return f"{provider_type_name}_object"

    def schema(self) -> Schema:
        return Schema(
            description="A Jira Assets object resource.",
            attributes={
                "workspace_id": _computed("The ID of the workspace the object belongs to."),
                "global_id": _computed("The global ID of the object."),
                "id": _computed("The ID of the object."),
                "label": _computed(
                    "The name of the object. This value is fetched from the attribute that is "
                    "currently marked as label for the object type of this object"
                ),
                "object_key": _computed("The external identifier for this object"),
                "type_id": Attribute(AttributeType.STRING, required=True),
                "attributes": Attribute(
                    AttributeType.SET_NESTED,
                    required=True,
                    description="The definition of the attribute that is associated with an object type",
                    nested={
                        "attr_type_id": Attribute(
                            AttributeType.STRING,
                            required=True,
                            description="The type of the attribute. The type decides how this value should be interpreted",
                        ),
                        "attr_value": Attribute(
                            AttributeType.STRING,
                            required=True,
                            description="The actual value of the object attribute.",
                        ),
                    },
                ),
                "created": _computed(),
                "updated": _computed(keep_state=False),
                "has_avatar": Attribute(AttributeType.BOOL, optional=True),
                "avatar_uuid": Attribute(
                    AttributeType.STRING,
                    optional=True,
                    description="The UUID as retrieved by uploading an avatar.",
                ),
            },
        )

    def configure(self, req: ComponentConfigureRequest, resp: ComponentConfigureResponse) -> None:
        if req.provider_data is None:
            return

        if not isinstance(req.provider_data, ProviderClient):
            resp.diagnostics.add_error(
                "Unexpected Resource Configure Type",
                f"Expected ProviderClient, got: {type(req.provider_data).__name__}. "
                "Please report this issue to the provider developers.",
            )
            return

        self.client = req.provider_data.client
        self.workspace_id = req.provider_data.workspace_id

    def _require_client(self, diagnostics: Diagnostics) -> bool:
        if self.client is None:
            diagnostics.add_error(
                "Unconfigured Assets client",
                "The resource was called before the provider was configured.",
            )
            return False
        return True

    def create(self, req: CreateRequest, resp: CreateResponse) -> None:
        plan = _load(req.plan, resp.diagnostics)
        if plan is None or not self._require_client(resp.diagnostics):
            return

        try:
            obj = self.client.create_object(plan.to_payload())
        except AssetsAPIError as e:
            log_response_error(logger, "Error creating object", e.response)
            resp.diagnostics.add_error("Error during object creation", str(e))
            return

        plan.apply_remote(obj)
        resp.state = plan.model_dump()

    def read(self, req: ReadRequest, resp: ReadResponse) -> None:
        state = _load(req.state, resp.diagnostics)
        if state is None or not self._require_client(resp.diagnostics):
            return

        if not state.id:
            resp.diagnostics.add_attribute_error("id", "Missing object id", "Cannot read an object without an id.")
            return

        try:
            obj = self.client.get_object(state.id)
        except AssetsAPIError as e:
            log_response_error(logger, "Error reading object", e.response)
            resp.diagnostics.add_error("Error during object reading", str(e))
            return

        try:
            remote_attributes = self.client.get_object_attributes(state.id)
        except AssetsAPIError as e:
            log_response_error(logger, "Error reading object attributes", e.response)
            resp.diagnostics.add_error("Error during object attributes reading", str(e))
            return

        state.attributes = reconcile_attributes(state.attributes, remote_attributes)
        state.apply_remote(obj)
        resp.state = state.model_dump()

    def update(self, req: UpdateRequest, resp: UpdateResponse) -> None:
        plan = _load(req.plan, resp.diagnostics)
        if plan is None or not self._require_client(resp.diagnostics):
            return

        # The plan carries the id through use-state-for-unknown; fall back
        # to prior state when the host hands over a plain plan.
        if plan.id is None:
            plan.id = req.state.get("id")

        if not plan.id:
            resp.diagnostics.add_attribute_error("id", "Missing object id", "Cannot update an object without an id.")
            return

        logger.info("Updating object.", extra={"object_id": plan.id})

        try:
            obj = self.client.update_object(plan.id, plan.to_payload())
        except AssetsAPIError as e:
            log_response_error(logger, "Error updating object", e.response)
            resp.diagnostics.add_error("Error during object update", str(e))
            return

        plan.apply_remote(obj)
        resp.state = plan.model_dump()

    def delete(self, req: DeleteRequest, resp: DeleteResponse) -> None:
        state = _load(req.state, resp.diagnostics)
        if state is None or not self._require_client(resp.diagnostics):
            return

        if not state.id:
            resp.diagnostics.add_attribute_error("id", "Missing object id", "Cannot delete an object without an id.")
            return

        try:
            self.client.delete_object(state.id)
        except AssetsAPIError as e:
            log_response_error(logger, "Error deleting object", e.response)
            resp.diagnostics.add_error("Error during object deletion", str(e))

    def import_state(self, req: ImportStateRequest, resp: ImportStateResponse) -> None:
        import_state_passthrough_id("id", req, resp)
