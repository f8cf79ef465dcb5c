"""
Jira Assets provider: configuration and the types it serves.

Configure resolves workspace id, user and password (explicit value first,
then the JIRAASSETS_* environment variables), builds one AssetsClient and
hands it to every resource and data source as a frozen ProviderClient.
"""

import logging
import os
from dataclasses import dataclass
from typing import Callable, Mapping, Optional

from pydantic import ValidationError

from .assets import AssetsClient
from .framework import (
    Attribute,
    AttributeType,
    ConfigureRequest,
    ConfigureResponse,
    DataSource,
    Provider,
    Resource,
    Schema,
    is_unknown,
)
from .models import ProviderModel
from .utils.config_loader import ENV_VARS, env_defaults
from .utils.structured_logging import MASK

logger = logging.getLogger(__name__)

TYPE_NAME = "jiraassets"


@dataclass(frozen=True)
class ProviderClient:
    """Client and workspace id shared read-only by resources and data sources."""

    client: AssetsClient
    workspace_id: str


# (attribute, unknown summary, missing summary, wording used in details)
_SETTINGS = (
    ("workspace_id", "Unknown Assets Workspace Id", "Missing Assets API Workspace Id", "workspace Id"),
    ("user", "Unknown Assets User", "Missing Assets API User", "username"),
    ("password", "Unknown Assets Password", "Missing Assets API Password", "password"),
)


class JiraAssetsProvider(Provider):
    """Provider implementation."""

    type_name = TYPE_NAME

    def __init__(
        self,
        version: str = "dev",
        environ: Optional[Mapping[str, str]] = None,
        client_factory: Callable[..., AssetsClient] = AssetsClient,
    ):
        """
        Args:
            version: Provider version; "dev" for local builds, "test" in tests
            environ: Environment used for fallbacks (defaults to os.environ)
            client_factory: Builds the AssetsClient from (workspace_id, user, password)
        """
        self.version = version
        self._environ = environ
        self._client_factory = client_factory

    def schema(self) -> Schema:
        return Schema(
            description="A Terraform provider for Jira Assets.",
            attributes={
                "workspace_id": Attribute(
                    AttributeType.STRING,
                    optional=True,
                    description="Workspace Id of the Assets instance.",
                ),
                "user": Attribute(
                    AttributeType.STRING,
                    optional=True,
                    description="Username of an admin or service account with access to the Jira API.",
                ),
                "password": Attribute(
                    AttributeType.STRING,
                    optional=True,
                    sensitive=True,
                    description="Personal access token for the admin or service account.",
                ),
            },
        )

    def configure(self, req: ConfigureRequest, resp: ConfigureResponse) -> None:
        logger.info("Configuring Jira Assets provider")

        # Unknown values cannot be validated as strings, check them first
        for name, unknown_summary, _, wording in _SETTINGS:
            if is_unknown(req.config.get(name)):
                resp.diagnostics.add_attribute_error(
                    name,
                    unknown_summary,
                    "The provider cannot create the Assets API client as there is an unknown "
                    f"configuration value for the Assets API {wording}. Either target apply the "
                    "source of the value first, set the value statically in the configuration, "
                    f"or use the {ENV_VARS[name]} environment variable.",
                )

        if resp.diagnostics.has_error():
            return

        try:
            config = ProviderModel.model_validate(req.config)
        except ValidationError as e:
            resp.diagnostics.add_error("Invalid provider configuration", str(e))
            return

        # Environment first, then override with explicit configuration
        resolved = env_defaults(self._environ if self._environ is not None else os.environ)
        for name in resolved:
            value = getattr(config, name)
            if value is not None:
                resolved[name] = value

        for name, _, missing_summary, wording in _SETTINGS:
            if not resolved[name]:
                resp.diagnostics.add_attribute_error(
                    name,
                    missing_summary,
                    "The provider cannot create the Assets API client as there is a missing or "
                    f"empty value for the Assets API {wording}. Set the {name} value in the "
                    f"configuration or use the {ENV_VARS[name]} environment variable. If either "
                    "is already set, ensure the value is not empty.",
                )

        if resp.diagnostics.has_error():
            return

        logger.debug(
            "Creating Assets client",
            extra={
                "workspace_id": resolved["workspace_id"],
                "user": resolved["user"],
                "password": MASK,
            },
        )

        try:
            client = self._client_factory(resolved["workspace_id"], resolved["user"], resolved["password"])
        except (ValueError, TypeError) as e:
            resp.diagnostics.add_error(
                "Unable to create Assets client",
                f"An unexpected error occurred when creating the Assets API client. Error: {e}",
            )
            return

        provider_client = ProviderClient(client=client, workspace_id=resolved["workspace_id"])
        resp.resource_data = provider_client
        resp.data_source_data = provider_client

        logger.info("Configured Jira Assets client", extra={"success": True})

    def resources(self) -> list[Callable[[], Resource]]:
        from .object_resource import ObjectResource

        return [ObjectResource]

    def data_sources(self) -> list[Callable[[], DataSource]]:
        from .object_schema_datasource import ObjectSchemaDataSource

        return [ObjectSchemaDataSource]


def new(version: str) -> Callable[[], JiraAssetsProvider]:
    """Provider factory for the host and for tests."""

    def factory() -> JiraAssetsProvider:
        return JiraAssetsProvider(version=version)

    return factory
