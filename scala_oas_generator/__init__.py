"""
Scala OpenAPI Client Generator

A Jinja2-based generator that decides how API schemas are rendered in a
Play-WS based Scala client: type names, identifiers, default values,
imports and the support files of the client project.
"""

from .config import CodegenConfig
from .errors import CodegenError, ConfigurationError, InvalidOperationNameError
from .generator import ScalaClientCodegen, ScalaCodeGenerator, ScalaTemplateEngine, create_codegen

__version__ = "1.0.0"

__all__ = [
    "CodegenConfig",
    "CodegenError",
    "ConfigurationError",
    "InvalidOperationNameError",
    "ScalaClientCodegen",
    "ScalaCodeGenerator",
    "ScalaTemplateEngine",
    "create_codegen",
]
