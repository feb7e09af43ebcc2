"""
Type mapping tables for OpenAPI to Scala conversion.

The tables are built once per generation run by ``build_type_mapping`` and
are read-only afterwards.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Final

# Schema kind -> Scala type name
_SCALA_TYPE_MAPPING: Final = {
    "array": "Seq",
    "set": "Set",
    "map": "Map",
    "boolean": "Boolean",
    "string": "String",
    "int": "Int",
    "integer": "Int",
    "long": "Long",
    "float": "Float",
    "byte": "Byte",
    "short": "Short",
    "char": "Char",
    "double": "Double",
    "object": "Any",
    "file": "ApiFile",
    "number": "Double",
    "DateTime": "OffsetDateTime",
    "date-time": "OffsetDateTime",
    "date": "LocalDate",
}

# Type names that are Scala built-ins and never need an import
_LANGUAGE_SPECIFIC_PRIMITIVES: Final = frozenset(
    {
        "String",
        "boolean",
        "Boolean",
        "Double",
        "Int",
        "Long",
        "Float",
        "Object",
        "List",
        "Seq",
        "Map",
    }
)

# Container kind -> type used to construct an empty instance
_INSTANTIATION_TYPES: Final = {
    "array": "ListBuffer",
    "map": "Map",
}

_IMPORT_MAPPING: Final = {
    "OffsetDateTime": "java.time.OffsetDateTime",
    "LocalDate": "java.time.LocalDate",
}

# Primitive kinds whose required default is the legacy ``null`` literal
SCALAR_KINDS: Final = frozenset(
    {
        "string",
        "boolean",
        "int",
        "integer",
        "long",
        "float",
        "double",
        "number",
        "date",
        "DateTime",
        "date-time",
    }
)

MAP_KEY_TYPE: Final = "String"
FILE_TYPE_NAME: Final = "ApiFile"


@dataclass(frozen=True)
class TypeMapping:
    """Read-only Scala type tables."""

    type_mapping: Mapping[str, str]
    language_specific_primitives: frozenset[str]
    instantiation_types: Mapping[str, str]
    import_mapping: Mapping[str, str]

    def mapped(self, kind: str) -> str | None:
        """Return the Scala type for a schema kind, or None when unmapped."""
        return self.type_mapping.get(kind)

    def is_language_primitive(self, type_name: str) -> bool:
        return type_name in self.language_specific_primitives

    @property
    def array_type(self) -> str:
        return self.type_mapping["array"]

    @property
    def map_type(self) -> str:
        return self.type_mapping["map"]

    @property
    def file_type(self) -> str:
        return self.type_mapping["file"]

    def instantiation_type(self, container: str) -> str:
        return self.instantiation_types[container]


def build_type_mapping(invoker_package: str) -> TypeMapping:
    """Build the Scala type tables for a client whose scaffolding lives in ``invoker_package``.

    Args:
        invoker_package: Package of the generated invoker scaffolding; the
            ``ApiFile`` alias is imported from there.

    Returns:
        Immutable type tables.
    """
    import_mapping = {**_IMPORT_MAPPING, FILE_TYPE_NAME: f"{invoker_package}.{FILE_TYPE_NAME}"}
    return TypeMapping(
        type_mapping=MappingProxyType(dict(_SCALA_TYPE_MAPPING)),
        language_specific_primitives=_LANGUAGE_SPECIFIC_PRIMITIVES,
        instantiation_types=MappingProxyType(dict(_INSTANTIATION_TYPES)),
        import_mapping=MappingProxyType(import_mapping),
    )
