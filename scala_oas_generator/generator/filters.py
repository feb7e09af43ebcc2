"""
Jinja2 filters for Scala code generation.

This module provides the text transforms templates apply to rendered
fragments: capitalization, camel casing, Scaladoc wrapping and enum entry
naming. ``build_lambdas`` returns them under the names the templates use.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from functools import partial
from typing import Any, Final

from scala_oas_generator.generator.naming import normalize_identifier
from scala_oas_generator.utils.string_case import SCALA_RESERVED_WORDS, camelize, capitalcase

_LINE_BREAK_PATTERN: Final = re.compile(r"\r?\n")

# Scaladoc block markers
_DOC_OPEN: Final = "  /**"
_DOC_LINE_PREFIX: Final = "   * "
_DOC_CLOSE: Final = "   */"


def capitalize(text: str) -> str:
    """Uppercase the first character and leave the rest unchanged.

    Examples:
        >>> capitalize("petStore")
        'PetStore'
    """
    return capitalcase(text)


def camelize_fragment(text: str, *, capitalize_first: bool = False) -> str:
    """Camel-case a rendered fragment without any identifier checks.

    Examples:
        >>> camelize_fragment("find_pets_by_status")
        'findPetsByStatus'
    """
    return camelize(text, capitalize_first=capitalize_first)


def javadoc(text: str) -> str:
    """Wrap text in a Scaladoc block, one ``*`` line per input line.

    Examples:
        >>> print(javadoc("Finds pets.\\nMultiple values allowed."), end="")
          /**
           * Finds pets.
           * Multiple values allowed.
           */
    """
    lines = _LINE_BREAK_PATTERN.split(text)
    result = [_DOC_OPEN]
    result.extend(f"{_DOC_LINE_PREFIX}{line}" for line in lines)
    result.append(_DOC_CLOSE)
    return "\n".join(result) + "\n"


def enum_entry(text: str, reserved_words: frozenset[str] = SCALA_RESERVED_WORDS) -> str:
    """Format a fragment as an enumeration constant name.

    Examples:
        >>> enum_entry("available")
        'Available'
    """
    return normalize_identifier(text, capitalize_first=True, reserved_words=reserved_words).normalized


def escape_unsafe_characters(text: str) -> str:
    """Break comment delimiters so documentation cannot close a comment block."""
    return text.replace("*/", "*_/").replace("/*", "/_*")


def escape_quotation_mark(text: str) -> str:
    """Remove double quotes so text cannot terminate a string literal."""
    return text.replace('"', "")


def scala_string_literal(text: str) -> str:
    """Format text as a Scala string literal."""
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def build_lambdas(
    *,
    render_javadoc: bool = True,
    reserved_words: frozenset[str] = SCALA_RESERVED_WORDS,
) -> dict[str, Callable[..., Any]]:
    """Build the named text transforms exposed to templates.

    Args:
        render_javadoc: Register ``javadocRenderer``.
        reserved_words: Reserved words used for enum entry names.

    Returns:
        Mapping of template name to callable.
    """
    lambdas: dict[str, Callable[..., Any]] = {}
    if render_javadoc:
        lambdas["javadocRenderer"] = javadoc
    lambdas["fnCapitalize"] = capitalize
    lambdas["fnCamelize"] = partial(camelize_fragment, capitalize_first=False)
    lambdas["fnEnumEntry"] = partial(enum_entry, reserved_words=reserved_words)
    return lambdas


# Register filters that will be available in Jinja templates
FILTERS = {
    "capitalize_first": capitalize,
    "camelize": camelize_fragment,
    "escape_unsafe_characters": escape_unsafe_characters,
    "escape_quotation_mark": escape_quotation_mark,
    "scala_string_literal": scala_string_literal,
}
