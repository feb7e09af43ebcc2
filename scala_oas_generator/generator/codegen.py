"""
Play-Scala client generation policy.

``ScalaClientCodegen`` bundles every decision the templates depend on:
identifier naming, type resolution, default values, security filtering,
model import cleanup and the support file list. ``create_codegen`` builds
one per generation run from a ``CodegenConfig``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, replace
from typing import Any, Final

from scala_oas_generator.config import CodegenConfig
from scala_oas_generator.generator.filters import build_lambdas
from scala_oas_generator.generator.naming import normalize_identifier, to_method_name, to_type_name
from scala_oas_generator.generator.post_processing import dedupe_model_imports, filter_security
from scala_oas_generator.generator.support_files import plan_support_files
from scala_oas_generator.generator.type_mapping import TypeMapping, build_type_mapping
from scala_oas_generator.generator.type_resolver import TypeResolver
from scala_oas_generator.schema import (
    File,
    Identifier,
    Model,
    Operation,
    Property,
    ResolvedType,
    Response,
    SchemaType,
    SecurityRequirement,
    SupportFile,
)
from scala_oas_generator.utils.string_case import SCALA_RESERVED_WORDS, escape_scala_identifier, package_to_path

logger = logging.getLogger(__name__)

# Sorts after every numeric status code
_NON_NUMERIC_STATUS: Final = 1000
UNIT_TYPE: Final = "Unit"


def status_sort_key(code: str) -> tuple[int, str]:
    """Order status codes numerically; ``2XX`` ranges sort with their base code.

    Examples:
        >>> sorted(["404", "2XX", "201", "default"], key=status_sort_key)
        ['2XX', '201', '404', 'default']
    """
    digits = code.upper().replace("X", "0")
    if digits.isdigit():
        return int(digits), code
    return _NON_NUMERIC_STATUS, code


@dataclass(frozen=True)
class ResolvedResponse:
    """A response with its Scala data type."""

    code: str
    message: str
    data_type: str | None
    is_primitive: bool

    @property
    def is_success(self) -> bool:
        return self.code.startswith("2")

    @property
    def status(self) -> int | None:
        """The status code as a number, or None for ranges and ``default``."""
        return int(self.code) if self.code.isdigit() else None


class ScalaClientCodegen:
    """Naming, typing and emission policy for a Play-WS based Scala client."""

    name = "play-scala"
    help = "Generates a Scala client library based on PlayWS."

    def __init__(self, config: CodegenConfig, type_mapping: TypeMapping | None = None) -> None:
        self.config = config
        self.type_mapping = type_mapping or build_type_mapping(config.invoker_package)
        self.reserved_words: frozenset[str] = SCALA_RESERVED_WORDS | config.extra_reserved_words
        self.type_resolver = TypeResolver(self.type_mapping, self.reserved_words)

    # Naming

    def normalize_identifier(self, raw: str, *, capitalize_first: bool = False) -> Identifier:
        return normalize_identifier(raw, capitalize_first=capitalize_first, reserved_words=self.reserved_words)

    @staticmethod
    def escape_reserved_word(name: str) -> str:
        return escape_scala_identifier(name)

    def to_param_name(self, name: str) -> str:
        return self.normalize_identifier(name).normalized

    def to_var_name(self, name: str) -> str:
        return self.normalize_identifier(name).normalized

    def to_enum_name(self, prop: Property) -> str:
        return self.normalize_identifier(prop.base_name, capitalize_first=True).normalized

    @staticmethod
    def to_model_name(name: str) -> str:
        return to_type_name(name)

    def to_model_import(self, name: str) -> str:
        return f"{self.config.model_package}.{name}"

    def to_operation_id(self, operation_id: str | None) -> str:
        """Return the client method name of an operation.

        Raises:
            InvalidOperationNameError: If the id is empty, or reserved while
                ``strict_operation_names`` is configured.
        """
        return to_method_name(
            operation_id,
            reserved_words=self.reserved_words,
            strict=self.config.strict_operation_names,
        ).normalized

    # Types

    def resolve_type(self, schema_type: SchemaType) -> ResolvedType:
        return self.type_resolver.resolve(schema_type)

    def get_type_declaration(self, schema_type: SchemaType) -> str:
        return self.type_resolver.type_declaration(schema_type)

    def to_instantiation_type(self, schema_type: SchemaType) -> str | None:
        return self.type_resolver.instantiation_type(schema_type)

    def to_default_value(self, prop: Property) -> str:
        return self.type_resolver.default_value(prop)

    def from_property(self, prop: Property) -> Property:
        """Fill in the resolved data type of a parsed property."""
        return replace(
            prop,
            datatype_name=prop.datatype_name or self.get_type_declaration(prop.schema_type),
            is_primitive=prop.is_primitive or self.type_resolver.is_primitive(prop.schema_type),
        )

    def from_response(self, response: Response) -> ResolvedResponse:
        """Resolve a response; file payloads are handed to the caller as-is."""
        if response.schema_type is None:
            return ResolvedResponse(response.code, response.message, None, is_primitive=False)

        is_primitive = isinstance(response.schema_type, File) or self.type_resolver.is_primitive(response.schema_type)
        return ResolvedResponse(
            code=response.code,
            message=response.message,
            data_type=self.get_type_declaration(response.schema_type),
            is_primitive=is_primitive,
        )

    def success_responses(self, operation: Operation) -> list[ResolvedResponse]:
        """Return the responses treated as a successful call.

        With ``only_one_success`` only the lowest 2XX response counts and
        every other status becomes an ``ApiError``. Otherwise every response
        defined by the operation counts.
        """
        if self.config.only_one_success:
            successes = self._sorted_successes(operation)[:1]
        else:
            successes = sorted(operation.responses, key=lambda r: status_sort_key(r.code))
        return [self.from_response(response) for response in successes]

    def return_type(self, operation: Operation) -> str:
        """Scala type of the content of the lowest 2XX response, ``Unit`` when it has none."""
        successes = self._sorted_successes(operation)
        if not successes or successes[0].schema_type is None:
            return UNIT_TYPE
        return self.get_type_declaration(successes[0].schema_type)

    @staticmethod
    def _sorted_successes(operation: Operation) -> list[Response]:
        return sorted((r for r in operation.responses if r.is_success), key=lambda r: status_sort_key(r.code))

    # Post-processing

    def from_security(self, requirements: Iterable[SecurityRequirement]) -> list[SecurityRequirement] | None:
        return filter_security(requirements, remove_oauth=self.config.remove_oauth_securities)

    def post_process_model(self, model: Model) -> Model:
        return dedupe_model_imports(
            model,
            type_name=self.get_type_declaration,
            is_primitive=self.type_resolver.is_primitive,
            import_mapping=self.type_mapping.import_mapping,
            model_package=self.config.model_package,
        )

    def post_process_models(self, models: Iterable[Model]) -> list[Model]:
        return [self.post_process_model(model) for model in models]

    # Template context

    def additional_properties(self) -> dict[str, Any]:
        """Values and callables every template can reference."""
        properties: dict[str, Any] = self.config.to_options()
        properties.update(
            build_lambdas(render_javadoc=self.config.render_javadoc, reserved_words=self.reserved_words),
        )
        properties["onlyOneSuccess"] = self.config.only_one_success
        return properties

    def model_context(self, model: Model) -> dict[str, Any]:
        """Resolve a model into the values its template renders."""
        model = self.post_process_model(model)
        variables = []
        for prop in model.properties:
            resolved = self.from_property(prop)
            variables.append(
                {
                    "base_name": prop.base_name,
                    "name": self.to_var_name(prop.base_name),
                    "data_type": resolved.datatype_name,
                    "default_value": self.to_default_value(prop),
                    "required": prop.required,
                    "is_primitive": resolved.is_primitive,
                    "description": prop.description,
                }
            )
        return {
            "model": model,
            "class_name": self.type_resolver.model_type_name(model.name),
            "imports": list(model.declared_imports),
            "vars": variables,
            "package": self.config.model_package,
        }

    def operation_context(self, operation: Operation) -> dict[str, Any]:
        """Resolve an operation into the values its template renders."""
        params = [
            {
                "base_name": param.base_name,
                "name": self.to_param_name(param.base_name),
                "data_type": self.get_type_declaration(param.schema_type),
                "required": param.required,
                "location": param.location,
                "description": param.description,
            }
            for param in operation.parameters
        ]
        return {
            "operation": operation,
            "method_name": self.to_operation_id(operation.operation_id),
            "params": params,
            "auth_methods": self.from_security(operation.security),
            "return_type": self.return_type(operation),
            "success_responses": self.success_responses(operation),
            "responses": [self.from_response(response) for response in operation.responses],
        }

    # Output layout

    def supporting_files(self) -> list[SupportFile]:
        return plan_support_files(self.config)

    def model_file_folder(self) -> str:
        return f"{self.config.output_folder}/{self.config.source_folder}/{package_to_path(self.config.model_package)}"

    def api_file_folder(self) -> str:
        return f"{self.config.output_folder}/{self.config.source_folder}/{package_to_path(self.config.api_package)}"


def create_codegen(config: CodegenConfig | None = None) -> ScalaClientCodegen:
    """Create the generation policy for a configuration.

    Args:
        config: Generator configuration; defaults apply when omitted.

    Returns:
        The configured ``ScalaClientCodegen``.
    """
    config = config or CodegenConfig()
    logger.debug("Creating %s codegen for package %s", ScalaClientCodegen.name, config.main_package)
    return ScalaClientCodegen(config)
