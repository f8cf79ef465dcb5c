"""Diagnostics reported back to the plugin host."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Optional


class Severity(str, Enum):
    """Diagnostic severity levels understood by the host."""

    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class Diagnostic:
    """A single problem (or warning) attached to a lifecycle call."""

    severity: Severity
    summary: str
    detail: str = ""
    attribute: Optional[str] = None

    def to_dict(self) -> dict:
        """Serialize for the host / CLI output."""
        data = {
            "severity": self.severity.value,
            "summary": self.summary,
            "detail": self.detail,
        }
        if self.attribute is not None:
            data["attribute"] = self.attribute
        return data


class Diagnostics:
    """
    Ordered collection of diagnostics.

    Handlers append to it and return early once `has_error()` is true.
    Nothing is raised: the host decides what to do with collected errors.
    """

    def __init__(self, items: Iterable[Diagnostic] | None = None):
        self._items: list[Diagnostic] = list(items or [])

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Diagnostics({self._items!r})"

    def append(self, *diagnostics: Diagnostic) -> None:
        self._items.extend(diagnostics)

    def extend(self, other: Iterable[Diagnostic]) -> None:
        self._items.extend(other)

    def add_error(self, summary: str, detail: str = "") -> None:
        self._items.append(Diagnostic(Severity.ERROR, summary, detail))

    def add_attribute_error(self, attribute: str, summary: str, detail: str = "") -> None:
        self._items.append(Diagnostic(Severity.ERROR, summary, detail, attribute))

    def add_warning(self, summary: str, detail: str = "") -> None:
        self._items.append(Diagnostic(Severity.WARNING, summary, detail))

    def errors(self) -> list[Diagnostic]:
        return [d for d in self._items if d.severity is Severity.ERROR]

    def warnings(self) -> list[Diagnostic]:
        return [d for d in self._items if d.severity is Severity.WARNING]

    def has_error(self) -> bool:
        return any(d.severity is Severity.ERROR for d in self._items)
