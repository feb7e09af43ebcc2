"""
Parsed API entities consumed by the Scala client generator.

These records are produced by the API-description parser and flow through
the resolution and post-processing passes. They are frozen: a pass that
changes a record returns a new one.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace
from enum import Enum

from scala_oas_generator.schema.types import SchemaType


@dataclass(frozen=True)
class ResolvedType:
    """A Scala type expression and, for containers, its construction syntax."""

    display_name: str
    instantiation_expr: str | None = None


@dataclass(frozen=True)
class Identifier:
    """A schema name together with its Scala identifier."""

    raw: str
    normalized: str
    is_escaped: bool = False

    def __str__(self) -> str:
        return self.normalized


@dataclass(frozen=True)
class Property:
    """Represents a model property."""

    base_name: str
    schema_type: SchemaType
    required: bool = False
    is_primitive: bool = False
    datatype_name: str = ""
    description: str | None = None


@dataclass(frozen=True)
class Model:
    """Represents a generated model and the imports its file declares."""

    name: str
    properties: tuple[Property, ...] = ()
    declared_imports: tuple[str, ...] = ()
    description: str | None = None


class SecuritySchemeCategory(Enum):
    """Authentication scheme categories."""

    API_KEY = "apiKey"
    BASIC = "basic"
    OAUTH = "oauth2"


@dataclass(frozen=True)
class SecurityRequirement:
    """A named security scheme attached to an operation."""

    scheme_name: str
    scheme_category: SecuritySchemeCategory
    is_last: bool = False

    @property
    def is_oauth(self) -> bool:
        return self.scheme_category is SecuritySchemeCategory.OAUTH


def with_adjacency(requirements: Iterable[SecurityRequirement]) -> list[SecurityRequirement]:
    """Recompute ``is_last`` so that only the final requirement carries it."""
    items = list(requirements)
    last_index = len(items) - 1
    return [replace(item, is_last=index == last_index) for index, item in enumerate(items)]


@dataclass(frozen=True)
class Parameter:
    """Represents an operation parameter."""

    base_name: str
    schema_type: SchemaType
    required: bool = False
    location: str = "query"
    description: str | None = None


@dataclass(frozen=True)
class Response:
    """Represents an operation response."""

    code: str
    schema_type: SchemaType | None = None
    message: str = ""

    @property
    def is_success(self) -> bool:
        return self.code.startswith("2")


@dataclass(frozen=True)
class Operation:
    """Represents an API operation."""

    operation_id: str
    http_method: str
    path: str
    parameters: tuple[Parameter, ...] = ()
    responses: tuple[Response, ...] = ()
    security: tuple[SecurityRequirement, ...] = ()
    summary: str | None = None
    notes: str | None = None
    tags: tuple[str, ...] = ()


@dataclass(frozen=True)
class SupportFile:
    """An auxiliary file rendered once per generated client."""

    template_id: str
    output_relative_path: str
    output_file_name: str

    @property
    def destination(self) -> str:
        """Folder and file name joined with ``/``."""
        if not self.output_relative_path:
            return self.output_file_name
        return f"{self.output_relative_path.rstrip('/')}/{self.output_file_name}"
