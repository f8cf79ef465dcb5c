"""
Jira Assets Terraform provider.

Passive handler set invoked by a plugin host: the provider configures a
shared Assets API client, the `jiraassets_object` resource manages objects
and the `jiraassets_object_schema` data source reads schema metadata.
"""

__version__ = "0.1.0"

from .assets import AssetsAPIError, AssetsClient
from .provider import JiraAssetsProvider, ProviderClient, new
from .object_resource import ObjectResource
from .object_schema_datasource import ObjectSchemaDataSource

__all__ = [
    "AssetsAPIError",
    "AssetsClient",
    "JiraAssetsProvider",
    "ProviderClient",
    "new",
    "ObjectResource",
    "ObjectSchemaDataSource",
]
