"""Data models for the Assets API and Terraform state."""

from .assets_models import (
    AssetsObject,
    ObjectAttribute,
    ObjectAttributeValue,
    ObjectPayload,
    ObjectPayloadAttribute,
    ObjectPayloadAttributeValue,
    ObjectSchema,
)
from .state_models import (
    ObjectAttrResourceModel,
    ObjectResourceModel,
    ObjectSchemaDataSourceModel,
    ProviderModel,
)

__all__ = [
    # Assets API models
    "AssetsObject",
    "ObjectAttribute",
    "ObjectAttributeValue",
    "ObjectPayload",
    "ObjectPayloadAttribute",
    "ObjectPayloadAttributeValue",
    "ObjectSchema",
    # Terraform state models
    "ObjectAttrResourceModel",
    "ObjectResourceModel",
    "ObjectSchemaDataSourceModel",
    "ProviderModel",
]
