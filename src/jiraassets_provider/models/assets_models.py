"""Jira Assets wire models (request payloads and API responses)."""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class ObjectPayloadAttributeValue(BaseModel):
    """A single value sent for an object attribute."""

    value: str


class ObjectPayloadAttribute(BaseModel):
    """An attribute entry in a create/update payload."""

    model_config = ConfigDict(populate_by_name=True)

    object_type_attribute_id: str = Field(..., alias="objectTypeAttributeId")
    object_attribute_values: list[ObjectPayloadAttributeValue] = Field(
        default_factory=list, alias="objectAttributeValues"
    )


class ObjectPayload(BaseModel):
    """
    Body of object create and update requests.

    Update is partial on the Assets side: attributes missing from
    `attributes` are left untouched on the remote object.
    """

    model_config = ConfigDict(populate_by_name=True)

    object_type_id: str = Field(..., alias="objectTypeId")
    attributes: list[ObjectPayloadAttribute] = Field(default_factory=list)
    has_avatar: bool = Field(False, alias="hasAvatar")
    avatar_uuid: str = Field("", alias="avatarUUID")

    def to_json(self) -> dict:
        return self.model_dump(by_alias=True)


class AssetsObject(BaseModel):
    """An object as returned by create, get and update."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", coerce_numbers_to_str=True)

    workspace_id: str = Field("", alias="workspaceId")
    global_id: str = Field("", alias="globalId")
    id: str
    label: str = ""
    object_key: str = Field("", alias="objectKey")
    created: str = ""
    updated: str = ""
    has_avatar: bool = Field(False, alias="hasAvatar")
    timestamp: Optional[int] = None


class ObjectAttributeValue(BaseModel):
    """One value of an object attribute."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", coerce_numbers_to_str=True)

    value: Optional[str] = None
    display_value: Optional[str] = Field(None, alias="displayValue")
    search_value: Optional[str] = Field(None, alias="searchValue")


class ObjectAttribute(BaseModel):
    """An entry of the object attributes listing."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", coerce_numbers_to_str=True)

    workspace_id: str = Field("", alias="workspaceId")
    global_id: str = Field("", alias="globalId")
    id: str = ""
    object_type_attribute_id: str = Field(..., alias="objectTypeAttributeId")
    object_attribute_values: list[ObjectAttributeValue] = Field(
        default_factory=list, alias="objectAttributeValues"
    )
    object_id: Optional[str] = Field(None, alias="objectId")

    def first_value(self) -> Optional[str]:
        """
        Value of the first entry, or None for an attribute with no values.

        A first entry whose value is null reads as an empty string.
        """
        if not self.object_attribute_values:
            return None
        return self.object_attribute_values[0].value or ""


class ObjectSchema(BaseModel):
    """Object schema metadata."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", coerce_numbers_to_str=True)

    workspace_id: str = Field("", alias="workspaceId")
    global_id: str = Field("", alias="globalId")
    id: str
    name: str = ""
    object_schema_key: str = Field("", alias="objectSchemaKey")
    status: str = ""
    description: Optional[str] = None
    created: str = ""
    updated: str = ""
    object_count: int = Field(0, alias="objectCount")
    object_type_count: int = Field(0, alias="objectTypeCount")
    can_manage: bool = Field(False, alias="canManage")
    id_as_int: Optional[int] = Field(None, alias="idAsInt")
