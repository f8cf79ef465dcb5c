"""Jira Assets API access."""

from .client import DEFAULT_BASE_URL, AssetsAPIError, AssetsClient

__all__ = [
    "DEFAULT_BASE_URL",
    "AssetsAPIError",
    "AssetsClient",
]
