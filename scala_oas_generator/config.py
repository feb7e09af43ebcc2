"""
Generator configuration for Play-Scala client generation.

The configuration is built once per generation run and is read-only
afterwards. ``CodegenConfig.from_options`` accepts the option names used on
the command line and in template contexts (``projectName``, ``invokerPackage``
and so on).
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Final

from scala_oas_generator.errors import ConfigurationError

DEFAULT_MAIN_PACKAGE: Final = "io.swagger.client"

# Option name -> dataclass field name
_OPTION_FIELDS: Final = {
    "mainPackage": "main_package",
    "invokerPackage": "invoker_package",
    "apiPackage": "api_package",
    "modelPackage": "model_package",
    "configPath": "config_path",
    "sourceFolder": "source_folder",
    "resourcesFolder": "resources_folder",
    "outputFolder": "output_folder",
    "projectOrganization": "project_organization",
    "projectName": "project_name",
    "projectVersion": "project_version",
    "scalaVersion": "scala_version",
    "playVersion": "play_version",
    "renderJavadoc": "render_javadoc",
    "removeOAuthSecurities": "remove_oauth_securities",
    "onlyOneSuccess": "only_one_success",
    "strictOperationNames": "strict_operation_names",
}

_BOOLEAN_OPTIONS: Final = frozenset(
    {"renderJavadoc", "removeOAuthSecurities", "onlyOneSuccess", "strictOperationNames"}
)
_TRUE_STRINGS: Final = frozenset({"true", "1", "yes", "on"})
_FALSE_STRINGS: Final = frozenset({"false", "0", "no", "off"})

# Descriptions shown by the CLI
OPTION_DESCRIPTIONS: Final = {
    "mainPackage": "root package of the generated client",
    "invokerPackage": "package of the invoker scaffolding (ApiInvoker, ApiConfig, ...)",
    "apiPackage": "package of the generated API classes",
    "modelPackage": "package of the generated model classes",
    "configPath": "path under which the config must be defined",
    "projectOrganization": "project organization in generated build.sbt",
    "projectName": "project name in generated build.sbt",
    "projectVersion": "project version in generated build.sbt",
    "scalaVersion": "the Scala version to use in generated build.sbt",
    "playVersion": "the Play version to use in generated build.sbt",
}


def _coerce_bool(option: str, value: Any) -> bool:  # noqa: ANN401
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    msg = f"Option '{option}' expects a boolean, got {value!r}"
    raise ConfigurationError(msg)


@dataclass(frozen=True)
class CodegenConfig:
    """Immutable configuration record for one generation run."""

    main_package: str = DEFAULT_MAIN_PACKAGE
    invoker_package: str = ""
    api_package: str = ""
    model_package: str = ""
    config_path: str = ""
    source_folder: str = "src/main/scala"
    resources_folder: str = "src/main/resources"
    output_folder: str = "generated-code/scala"

    # Project based values for the build.sbt file
    project_organization: str = "io.swagger"
    project_name: str = "swagger-client"
    project_version: str = "1.0.0"
    scala_version: str = "2.12.3"
    play_version: str = "2.6.6"

    render_javadoc: bool = True
    remove_oauth_securities: bool = True
    # Only the lowest 2XX response is a success; every other response becomes an ApiError.
    only_one_success: bool = True
    strict_operation_names: bool = False

    extra_reserved_words: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if not self.main_package:
            msg = "Option 'mainPackage' must not be empty"
            raise ConfigurationError(msg)

        # Derived packages default to sub-packages of the main package
        derived = {
            "invoker_package": f"{self.main_package}.core",
            "api_package": f"{self.main_package}.api",
            "model_package": f"{self.main_package}.model",
            "config_path": self.main_package,
        }
        for name, default in derived.items():
            if not getattr(self, name):
                object.__setattr__(self, name, default)

    @classmethod
    def from_options(cls, options: Mapping[str, Any] | None = None) -> CodegenConfig:
        """Build a configuration from option names as used by the CLI.

        Args:
            options: Mapping of option name (e.g. ``projectName``) to value.

        Returns:
            The resolved configuration.

        Raises:
            ConfigurationError: If an option is unknown or has a bad value.
        """
        kwargs: dict[str, Any] = {}
        for option, value in (options or {}).items():
            if value is None:
                continue
            if option not in _OPTION_FIELDS:
                msg = f"Unknown generator option '{option}'"
                raise ConfigurationError(msg)
            if option in _BOOLEAN_OPTIONS:
                value = _coerce_bool(option, value)
            kwargs[_OPTION_FIELDS[option]] = value
        return cls(**kwargs)

    def to_options(self) -> dict[str, Any]:
        """Return the configuration keyed by option name."""
        return {option: getattr(self, name) for option, name in _OPTION_FIELDS.items()}

    @staticmethod
    def option_names() -> list[str]:
        """All option names accepted by ``from_options``."""
        return list(_OPTION_FIELDS)
