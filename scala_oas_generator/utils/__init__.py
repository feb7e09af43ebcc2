"""
Utilities Module for Scala Client Generation

This module provides utility functions for file operations, string case
conversions and Scala identifier escaping.
"""

from .file_utils import get_relative_path, write_files_to_disk
from .string_case import (
    SCALA_KEYWORDS,
    SCALA_RESERVED_WORDS,
    camelize,
    capitalcase,
    decapitalcase,
    escape_scala_identifier,
    is_valid_scala_identifier,
    package_to_path,
    pascalcase,
    strip_escape,
)

__all__ = [
    "SCALA_KEYWORDS",
    "SCALA_RESERVED_WORDS",
    "camelize",
    "capitalcase",
    "decapitalcase",
    "escape_scala_identifier",
    "get_relative_path",
    "is_valid_scala_identifier",
    "package_to_path",
    "pascalcase",
    "strip_escape",
    "write_files_to_disk",
]
