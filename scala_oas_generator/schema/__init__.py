"""
Schema Module for Scala Client Generation

This module defines the schema type variants and the parsed API entities
(models, properties, operations, security requirements) the generator
works on.
"""

from .entities import (
    Identifier,
    Model,
    Operation,
    Parameter,
    Property,
    ResolvedType,
    Response,
    SecurityRequirement,
    SecuritySchemeCategory,
    SupportFile,
    with_adjacency,
)
from .types import Array, EnumRef, File, Map, ObjectRef, Primitive, SchemaType, innermost_type

__all__ = [
    "Array",
    "EnumRef",
    "File",
    "Identifier",
    "Map",
    "Model",
    "ObjectRef",
    "Operation",
    "Parameter",
    "Primitive",
    "Property",
    "ResolvedType",
    "Response",
    "SchemaType",
    "SecurityRequirement",
    "SecuritySchemeCategory",
    "SupportFile",
    "innermost_type",
    "with_adjacency",
]
