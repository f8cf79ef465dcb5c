"""Terraform-side models, keyed by schema attribute names."""

from typing import Optional
from pydantic import BaseModel, ConfigDict

from .assets_models import AssetsObject, ObjectPayload, ObjectPayloadAttribute, ObjectPayloadAttributeValue, ObjectSchema


class ProviderModel(BaseModel):
    """Provider configuration block."""

    model_config = ConfigDict(extra="forbid")

    workspace_id: Optional[str] = None
    user: Optional[str] = None
    password: Optional[str] = None


class ObjectAttrResourceModel(BaseModel):
    """One `attributes` element of the object resource."""

    model_config = ConfigDict(frozen=True)

    attr_type_id: str
    attr_value: str


class ObjectResourceModel(BaseModel):
    """State of a `jiraassets_object` resource."""

    workspace_id: Optional[str] = None
    global_id: Optional[str] = None
    id: Optional[str] = None
    label: Optional[str] = None
    object_key: Optional[str] = None
    created: Optional[str] = None
    updated: Optional[str] = None
    has_avatar: Optional[bool] = None

    type_id: Optional[str] = None
    attributes: list[ObjectAttrResourceModel] = []
    avatar_uuid: Optional[str] = None

    def to_payload(self) -> ObjectPayload:
        """Build the create/update body from the configured values."""
        return ObjectPayload(
            object_type_id=self.type_id or "",
            attributes=[
                ObjectPayloadAttribute(
                    object_type_attribute_id=attr.attr_type_id,
                    object_attribute_values=[ObjectPayloadAttributeValue(value=attr.attr_value)],
                )
                for attr in self.attributes
            ],
            has_avatar=bool(self.has_avatar),
            avatar_uuid=self.avatar_uuid or "",
        )

    def apply_remote(self, obj: AssetsObject) -> None:
        """Overwrite server-computed fields with the remote object's values."""
        self.workspace_id = obj.workspace_id
        self.global_id = obj.global_id
        self.id = obj.id
        self.label = obj.label
        self.object_key = obj.object_key
        self.created = obj.created
        self.updated = obj.updated
        self.has_avatar = obj.has_avatar

    def tracked_type_ids(self) -> set[str]:
        return {attr.attr_type_id for attr in self.attributes}


class ObjectSchemaDataSourceModel(BaseModel):
    """State of a `jiraassets_object_schema` data source."""

    workspace_id: Optional[str] = None
    global_id: Optional[str] = None
    id: str
    name: Optional[str] = None
    object_schema_key: Optional[str] = None
    status: Optional[str] = None
    description: Optional[str] = None
    created: Optional[str] = None
    updated: Optional[str] = None
    object_count: Optional[int] = None
    object_type_count: Optional[int] = None
    can_manage: Optional[bool] = None
    id_as_int: Optional[int] = None

    @classmethod
    def from_remote(cls, schema: ObjectSchema) -> "ObjectSchemaDataSourceModel":
        id_as_int = schema.id_as_int
        if id_as_int is None and schema.id.isdigit():
            id_as_int = int(schema.id)

        return cls(
            workspace_id=schema.workspace_id,
            global_id=schema.global_id,
            id=schema.id,
            name=schema.name,
            object_schema_key=schema.object_schema_key,
            status=schema.status,
            description=schema.description,
            created=schema.created,
            updated=schema.updated,
            object_count=schema.object_count,
            object_type_count=schema.object_type_count,
            can_manage=schema.can_manage,
            id_as_int=id_as_int,
        )
