"""Utility functions."""

from .config_loader import ENV_VARS, env_defaults, load_provider_config
from .structured_logging import (
    MaskingFilter,
    StructuredFormatter,
    log_response_error,
    response_fields,
    setup_structured_logging,
)

__all__ = [
    "ENV_VARS",
    "env_defaults",
    "load_provider_config",
    "MaskingFilter",
    "StructuredFormatter",
    "log_response_error",
    "response_fields",
    "setup_structured_logging",
]
