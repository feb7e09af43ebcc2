"""
String case conversion utilities for Scala client generation.

This module provides the casing primitives shared by identifier
normalization and the template text transforms, together with the
Scala reserved-word table and backtick escaping.
"""

import re
from collections.abc import Callable
from typing import Final

# Regex patterns for case conversion
_WORD_SEPARATOR_PATTERN: Final = re.compile(r"[^a-zA-Z0-9]+")
_SCALA_IDENTIFIER_PATTERN: Final = re.compile(r"^[a-zA-Z_$][a-zA-Z0-9_$]*$")

ESCAPE_DELIMITER: Final = "`"

# Reserved Scala keywords that need to be escaped with backticks
SCALA_KEYWORDS: Final = frozenset(
    {
        "abstract",
        "case",
        "catch",
        "class",
        "def",
        "do",
        "else",
        "extends",
        "false",
        "final",
        "finally",
        "for",
        "forSome",
        "if",
        "implicit",
        "import",
        "lazy",
        "match",
        "new",
        "null",
        "object",
        "override",
        "package",
        "private",
        "protected",
        "return",
        "sealed",
        "super",
        "this",
        "throw",
        "trait",
        "try",
        "true",
        "type",
        "val",
        "var",
        "while",
        "with",
        "yield",
    }
)

# Local names bound by the generated ApiInvoker/ApiRequest scaffolding
SCAFFOLDING_NAMES: Final = frozenset(
    {
        "apiInvoker",
        "apiRequest",
        "wsClient",
    }
)

SCALA_RESERVED_WORDS: Final = SCALA_KEYWORDS | SCAFFOLDING_NAMES


def _convert_if_not_empty(string: str | None, conversion_func: Callable[[str], str]) -> str:
    """Safely convert a string, returning empty string if input is None or empty."""
    return conversion_func(string) if string else ""


def capitalcase(string: str | None) -> str:
    """Convert string into capital case (first letter uppercase).

    Args:
        string: String to convert.

    Returns:
        Capital case string.

    Examples:
        >>> capitalcase("hello world")
        'Hello world'
    """

    def _capitalcase(s: str) -> str:
        return s[0].upper() + s[1:]

    return _convert_if_not_empty(string, _capitalcase)


def decapitalcase(string: str | None) -> str:
    """Convert string into a string whose first letter is lowercase."""

    def _decapitalcase(s: str) -> str:
        return s[0].lower() + s[1:]

    return _convert_if_not_empty(string, _decapitalcase)


def camelize(string: str | None, *, capitalize_first: bool = False) -> str:
    """Convert string into camel case, keeping the inner casing of each word.

    The string is split on every character that is not a letter or a digit
    (underscores included). Every word after the first gets an uppercase
    first letter; the first word gets a lowercase first letter unless
    ``capitalize_first`` is set. The remaining letters of each word are kept
    as they are, so already camel-cased input is left untouched.

    Args:
        string: String to convert.
        capitalize_first: Whether the first letter of the result is uppercase.

    Returns:
        Camel case string.

    Examples:
        >>> camelize("user-id")
        'userId'
        >>> camelize("GetUserById")
        'getUserById'
        >>> camelize("pet_store", capitalize_first=True)
        'PetStore'
    """

    def _camelize(s: str) -> str:
        words = [word for word in _WORD_SEPARATOR_PATTERN.split(s) if word]
        if not words:
            return ""
        head = capitalcase(words[0]) if capitalize_first else decapitalcase(words[0])
        return head + "".join(capitalcase(word) for word in words[1:])

    return _convert_if_not_empty(string, _camelize)


def pascalcase(string: str | None) -> str:
    """Convert string into PascalCase, keeping the inner casing of each word.

    Examples:
        >>> pascalcase("pet_store")
        'PetStore'
        >>> pascalcase("OffsetDateTime")
        'OffsetDateTime'
    """
    return camelize(string, capitalize_first=True)


def is_valid_scala_identifier(name: str) -> bool:
    """Check if a string matches the plain Scala identifier grammar.

    Args:
        name: String to check.

    Returns:
        True if the string is made of letters, digits, ``_`` and ``$`` and
        does not start with a digit.
    """
    return bool(_SCALA_IDENTIFIER_PATTERN.match(name))


def escape_scala_identifier(name: str) -> str:
    """Wrap a name in backticks so Scala accepts it as an identifier.

    Examples:
        >>> escape_scala_identifier("type")
        '`type`'
    """
    return f"{ESCAPE_DELIMITER}{name}{ESCAPE_DELIMITER}"


def strip_escape(name: str) -> str:
    """Remove surrounding backticks from an escaped identifier, if any."""
    if len(name) >= 2 and name.startswith(ESCAPE_DELIMITER) and name.endswith(ESCAPE_DELIMITER):  # noqa: PLR2004
        return name[1:-1]
    return name


def package_to_path(package: str) -> str:
    """Convert a dotted package name into a slash separated folder path.

    Examples:
        >>> package_to_path("io.swagger.client.core")
        'io/swagger/client/core'
    """
    return package.replace(".", "/")
