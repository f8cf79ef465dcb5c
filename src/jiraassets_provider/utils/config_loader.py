"""Configuration loader."""

import os
from pathlib import Path
from typing import Mapping, Optional

import yaml

from ..models import ProviderModel

ENV_WORKSPACE_ID = "JIRAASSETS_WORKSPACE_ID"
ENV_USER = "JIRAASSETS_USER"
ENV_PASSWORD = "JIRAASSETS_PASSWORD"

ENV_VARS = {
    "workspace_id": ENV_WORKSPACE_ID,
    "user": ENV_USER,
    "password": ENV_PASSWORD,
}


def load_provider_config(config_path: str | Path) -> ProviderModel:
    """
    Load a provider configuration block from a YAML file.

    The file holds the same keys as the Terraform provider block
    (workspace_id, user, password); missing keys stay null.

    Args:
        config_path: Path to config file

    Returns:
        Loaded configuration

    Raises:
        FileNotFoundError: If config file not found
        yaml.YAMLError: If config file is invalid
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        config_data = yaml.safe_load(f) or {}

    return ProviderModel(**config_data)


def env_defaults(environ: Optional[Mapping[str, str]] = None) -> dict[str, str]:
    """Read the JIRAASSETS_* fallbacks, empty string when unset."""
    environ = os.environ if environ is None else environ
    return {key: environ.get(var, "") for key, var in ENV_VARS.items()}
