"""
Schema type variants handed over by the API-description parser.

A schema type is one of a closed set of frozen dataclasses; consumers
dispatch on it with ``match``. Containers may nest to any depth. Object
and enum types are referenced by name, so recursive models never form a
cycle between ``SchemaType`` values.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True)
class Primitive:
    """A primitive schema kind such as ``string``, ``integer`` or ``DateTime``."""

    name: str


@dataclass(frozen=True)
class Array:
    """An ordered collection of ``item``."""

    item: SchemaType


@dataclass(frozen=True)
class Map:
    """A string-keyed dictionary of ``value``."""

    value: SchemaType


@dataclass(frozen=True)
class ObjectRef:
    """A reference to a generated model by its schema name."""

    name: str


@dataclass(frozen=True)
class File:
    """A binary file payload."""


@dataclass(frozen=True)
class EnumRef:
    """A reference to a generated enumeration by its schema name."""

    name: str


SchemaType: TypeAlias = Primitive | Array | Map | ObjectRef | File | EnumRef


def innermost_type(schema_type: SchemaType) -> SchemaType:
    """Unwrap nested containers down to the first non-container type.

    Examples:
        >>> innermost_type(Array(Map(ObjectRef("Pet"))))
        ObjectRef(name='Pet')
    """
    match schema_type:
        case Array(item=item):
            return innermost_type(item)
        case Map(value=value):
            return innermost_type(value)
        case _:
            return schema_type
