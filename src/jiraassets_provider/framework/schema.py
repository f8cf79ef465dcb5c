"""Schema definitions for the provider, resources and data sources."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from .values import UNKNOWN, is_unknown


class AttributeType(str, Enum):
    """Attribute kinds used by this provider."""

    STRING = "string"
    BOOL = "bool"
    INT64 = "int64"
    SET_NESTED = "set_nested"


@dataclass(frozen=True)
class Attribute:
    """
    A single schema attribute.

    Exactly one of `required`, `optional` or `computed` is normally set.
    `use_state_for_unknown` mirrors the framework plan modifier of the same
    name: a computed value that is unknown in the plan keeps its prior
    state value.
    """

    type: AttributeType
    required: bool = False
    optional: bool = False
    computed: bool = False
    sensitive: bool = False
    description: str = ""
    use_state_for_unknown: bool = False
    nested: Optional[dict[str, "Attribute"]] = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"type": self.type.value}
        for flag in ("required", "optional", "computed", "sensitive"):
            if getattr(self, flag):
                data[flag] = True
        if self.description:
            data["description"] = self.description
        if self.use_state_for_unknown:
            data["plan_modifiers"] = ["use_state_for_unknown"]
        if self.nested is not None:
            data["nested_attributes"] = {
                name: attr.to_dict() for name, attr in self.nested.items()
            }
        return data


@dataclass(frozen=True)
class Schema:
    """Top level schema of a provider, resource or data source."""

    attributes: dict[str, Attribute] = field(default_factory=dict)
    description: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "description": self.description,
            "attributes": {name: attr.to_dict() for name, attr in self.attributes.items()},
        }

    def computed_names(self) -> list[str]:
        return [name for name, attr in self.attributes.items() if attr.computed]

    def sensitive_names(self) -> list[str]:
        return [name for name, attr in self.attributes.items() if attr.sensitive]

    def apply_plan_modifiers(self, plan: dict[str, Any], state: Optional[dict[str, Any]]) -> dict[str, Any]:
        """
        Return a copy of `plan` with "use state for unknown" applied.

        Args:
            plan: Proposed new state, unknown computed values as UNKNOWN
            state: Prior state, or None during create

        Returns:
            The modified plan
        """
        modified = dict(plan)
        if not state:
            return modified

        for name, attr in self.attributes.items():
            if not attr.use_state_for_unknown:
                continue
            if is_unknown(modified.get(name, UNKNOWN)) and state.get(name) is not None:
                modified[name] = state[name]

        return modified
