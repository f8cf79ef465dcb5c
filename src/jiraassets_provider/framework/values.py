"""Value markers shared between the host and the handlers.

Terraform distinguishes three states for a configuration value: known,
null and unknown (not yet computed during plan). Known values travel as
plain Python values, null as ``None`` and unknown as ``UNKNOWN``.
"""

from typing import Any


class _Unknown:
    """Singleton marker for a value that is not known until apply."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNKNOWN"

    def __bool__(self) -> bool:
        return False

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self


UNKNOWN = _Unknown()


def is_unknown(value: Any) -> bool:
    return value is UNKNOWN


def is_null(value: Any) -> bool:
    return value is None


def strip_unknown(data: Any) -> Any:
    """Replace UNKNOWN markers with None, recursing into dicts and lists."""
    if is_unknown(data):
        return None
    if isinstance(data, dict):
        return {key: strip_unknown(value) for key, value in data.items()}
    if isinstance(data, (list, tuple)):
        return [strip_unknown(value) for value in data]
    return data
