"""
Scala Code Generator Module

This module provides the Play-Scala generation policy (naming, type
resolution, default values, post-processing) and the Jinja2-based
rendering of client files.
"""

from .codegen import ResolvedResponse, ScalaClientCodegen, create_codegen
from .naming import normalize_identifier, to_method_name
from .post_processing import dedupe_model_imports, filter_security
from .support_files import plan_support_files
from .template_engine import ScalaCodeGenerator, ScalaTemplateEngine
from .type_mapping import TypeMapping, build_type_mapping
from .type_resolver import TypeResolver

__all__ = [
    "ResolvedResponse",
    "ScalaClientCodegen",
    "ScalaCodeGenerator",
    "ScalaTemplateEngine",
    "TypeMapping",
    "TypeResolver",
    "build_type_mapping",
    "create_codegen",
    "dedupe_model_imports",
    "filter_security",
    "normalize_identifier",
    "plan_support_files",
    "to_method_name",
]
