"""
Identifier normalization for generated Scala code.

Schema-supplied names are camel-cased and checked against the Scala
identifier grammar and the reserved-word table. Names that fail either
check are wrapped in backticks instead of being rewritten, so
normalization never fails.
"""

from __future__ import annotations

import logging

from scala_oas_generator.errors import InvalidOperationNameError
from scala_oas_generator.schema import Identifier
from scala_oas_generator.utils.string_case import (
    SCALA_RESERVED_WORDS,
    camelize,
    capitalcase,
    escape_scala_identifier,
    is_valid_scala_identifier,
    pascalcase,
)

logger = logging.getLogger(__name__)

_OPERATION_PREFIX = "call_"
# Stands in for names without a single letter or digit
EMPTY_IDENTIFIER = "_empty"


def normalize_identifier(
    raw: str,
    *,
    capitalize_first: bool = False,
    reserved_words: frozenset[str] = SCALA_RESERVED_WORDS,
) -> Identifier:
    """Convert a schema name into a Scala identifier.

    Args:
        raw: Name as it appears in the API description.
        capitalize_first: Produce a type-style name (``UserId``) instead of
            a term-style one (``userId``).
        reserved_words: Names that must be escaped when produced verbatim.

    Returns:
        The identifier; ``is_escaped`` tells whether backticks were added.

    Examples:
        >>> normalize_identifier("user-id").normalized
        'userId'
        >>> normalize_identifier("type").normalized
        '`type`'
        >>> normalize_identifier("---").normalized
        '_empty'
    """
    identifier = camelize(raw, capitalize_first=capitalize_first)
    if capitalize_first:
        identifier = capitalcase(identifier)
    if not identifier:
        logger.warning("Name %r has no usable character. Renamed to %s", raw, EMPTY_IDENTIFIER)
        identifier = EMPTY_IDENTIFIER

    if is_valid_scala_identifier(identifier) and identifier not in reserved_words:
        return Identifier(raw=raw, normalized=identifier, is_escaped=False)

    return Identifier(raw=raw, normalized=escape_scala_identifier(identifier), is_escaped=True)


def to_type_name(name: str) -> str:
    """Convert a name into the capitalized camel case used for Scala types."""
    return pascalcase(name)


def to_method_name(
    operation_id: str | None,
    *,
    reserved_words: frozenset[str] = SCALA_RESERVED_WORDS,
    strict: bool = False,
) -> Identifier:
    """Convert an operation id into a client method identifier.

    Args:
        operation_id: The operation id from the API description.
        reserved_words: Names that cannot be used as method names.
        strict: Raise instead of renaming when the name is reserved.

    Returns:
        The method identifier.

    Raises:
        InvalidOperationNameError: If the operation id is empty, or is
            reserved and ``strict`` is set.

    Examples:
        >>> to_method_name("GetUserById").normalized
        'getUserById'
    """
    if not operation_id or not operation_id.strip():
        msg = "Empty method name (operationId) not allowed"
        raise InvalidOperationNameError(msg)

    method_name = camelize(operation_id)
    if not method_name:
        msg = f"Operation id '{operation_id}' does not contain any usable character"
        raise InvalidOperationNameError(msg)

    if method_name in reserved_words:
        if strict:
            msg = f"Operation id '{operation_id}' is a reserved word"
            raise InvalidOperationNameError(msg)
        renamed = camelize(f"{_OPERATION_PREFIX}{method_name}")
        logger.warning("%s (reserved word) cannot be used as method name. Renamed to %s", method_name, renamed)
        method_name = renamed

    if is_valid_scala_identifier(method_name):
        return Identifier(raw=operation_id, normalized=method_name, is_escaped=False)
    return Identifier(raw=operation_id, normalized=escape_scala_identifier(method_name), is_escaped=True)
