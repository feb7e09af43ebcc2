"""
Scala type resolution and default value synthesis.

``TypeResolver`` turns schema types into Scala type expressions, recursing
through arrays and maps from the innermost item outwards. Recursion follows
container nesting only; object and enum types are resolved by name and are
never expanded, so the depth is bounded by how deeply the parser nested
the containers.
"""

from __future__ import annotations

from typing import Final

from scala_oas_generator.generator.naming import normalize_identifier, to_type_name
from scala_oas_generator.generator.type_mapping import MAP_KEY_TYPE, SCALAR_KINDS, TypeMapping
from scala_oas_generator.schema import (
    Array,
    EnumRef,
    File,
    Map,
    ObjectRef,
    Primitive,
    Property,
    ResolvedType,
    SchemaType,
)
from scala_oas_generator.utils.string_case import SCALA_RESERVED_WORDS

NULL_LITERAL: Final = "null"
NONE_LITERAL: Final = "None"


class TypeResolver:
    """Resolves schema types against a set of Scala type tables."""

    def __init__(self, type_mapping: TypeMapping, reserved_words: frozenset[str] = SCALA_RESERVED_WORDS) -> None:
        self.type_mapping = type_mapping
        self.reserved_words = reserved_words

    def resolve(self, schema_type: SchemaType) -> ResolvedType:
        """Resolve a schema type into its Scala type and instantiation expression.

        Args:
            schema_type: The schema type to resolve.

        Returns:
            The resolved type. ``instantiation_expr`` is only set for arrays
            and maps.

        Examples:
            ``Array(Map(Primitive("string")))`` resolves to
            ``Seq[Map[String, String]]`` / ``ListBuffer[Map[String, String]]``.
        """
        match schema_type:
            case Primitive(name=name):
                return ResolvedType(self._primitive_type_name(name))
            case Array(item=item):
                inner = self.resolve(item).display_name
                return ResolvedType(
                    display_name=f"{self.type_mapping.array_type}[{inner}]",
                    instantiation_expr=f"{self.type_mapping.instantiation_type('array')}[{inner}]",
                )
            case Map(value=value):
                inner = self.resolve(value).display_name
                return ResolvedType(
                    display_name=f"{self.type_mapping.map_type}[{MAP_KEY_TYPE}, {inner}]",
                    instantiation_expr=f"{self.type_mapping.instantiation_type('map')}[{MAP_KEY_TYPE}, {inner}]",
                )
            case ObjectRef(name=name) | EnumRef(name=name):
                return ResolvedType(self.model_type_name(name))
            case File():
                return ResolvedType(self.type_mapping.file_type)
            case _:
                msg = f"Unsupported schema type: {schema_type!r}"
                raise TypeError(msg)

    def type_declaration(self, schema_type: SchemaType) -> str:
        """Return the Scala type expression of a schema type."""
        return self.resolve(schema_type).display_name

    def instantiation_type(self, schema_type: SchemaType) -> str | None:
        """Return the construction syntax of a container type, or None for other types."""
        return self.resolve(schema_type).instantiation_expr

    def model_type_name(self, name: str) -> str:
        """Return the Scala type name of a generated model or enum."""
        return normalize_identifier(name, capitalize_first=True, reserved_words=self.reserved_words).normalized

    def is_primitive(self, schema_type: SchemaType) -> bool:
        """Check whether a schema type renders as a Scala built-in or mapped type."""
        match schema_type:
            case Primitive(name=name):
                mapped = self.type_mapping.mapped(name)
                return mapped is not None and self.type_mapping.is_language_primitive(mapped)
            case File():
                return True
            case _:
                return False

    def default_value(self, prop: Property) -> str:
        """Synthesize the default value expression of a model property.

        Optional properties always default to ``None``. Required scalars
        default to ``null``; required maps and arrays default to an empty
        instance of their resolved type.

        Args:
            prop: The property to synthesize a default for.

        Returns:
            The Scala default value expression.
        """
        if not prop.required:
            return NONE_LITERAL

        match prop.schema_type:
            case Primitive(name=name) if name in SCALAR_KINDS:
                return NULL_LITERAL
            case Map(value=value):
                inner = self.resolve(value).display_name
                return f"{self.type_mapping.map_type}[{MAP_KEY_TYPE}, {inner}].empty"
            case Array(item=item):
                inner = self.resolve(item).display_name
                return f"{self.type_mapping.array_type}[{inner}].empty"
            case _:
                return NULL_LITERAL

    def _primitive_type_name(self, name: str) -> str:
        mapped = self.type_mapping.mapped(name)
        if mapped is None:
            return name
        return to_type_name(mapped)
