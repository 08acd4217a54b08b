"""Record tree produced by the resolver and consumed by codegen."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class Primitive(str, Enum):
    """Target primitive type of a leaf field."""

    STRING = "string"
    INTEGER = "integer"
    BOOL = "bool"
    STRUCT = "struct"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Record:
    """One generated type: its primitive fields and nested child records.

    ``depth`` is 1 for a top-level record and grows by one per nesting
    level. A name appears either in ``fields`` or among ``children``,
    never both. ``fields`` is a read-only copy of the mapping passed in.
    """

    name: str
    depth: int
    fields: Mapping[str, Primitive] = field(default_factory=dict)
    children: tuple[Record, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))
        object.__setattr__(self, "children", tuple(self.children))

    def __hash__(self) -> int:
        return hash((self.name, self.depth, tuple(self.sorted_fields()), self.children))

    def sorted_fields(self) -> list[tuple[str, Primitive]]:
        return sorted(self.fields.items())

    def child(self, name: str) -> Record | None:
        for child in self.children:
            if child.name == name:
                return child
        return None
