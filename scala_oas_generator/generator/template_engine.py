"""
Scala Template Engine for OpenAPI Client Generation

This module uses Jinja2 templates to render Play-Scala client files from
the values resolved by ``ScalaClientCodegen``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape

from scala_oas_generator.generator.codegen import ScalaClientCodegen, create_codegen
from scala_oas_generator.generator.filters import FILTERS
from scala_oas_generator.schema import Model, Operation

logger = logging.getLogger(__name__)


class ScalaTemplateEngine:
    """Template engine for generating Scala code."""

    def __init__(
        self,
        template_dir: Path | None = None,
        lambdas: Mapping[str, Callable[..., Any]] | None = None,
    ) -> None:
        """Initialize the template engine.

        Args:
            template_dir: Directory holding the ``.j2`` templates.
            lambdas: Named text transforms, registered as filters.
        """
        if template_dir is None:
            current_dir = Path(__file__).parent
            template_dir = current_dir.parent / "templates"

        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

        self.env.filters.update(FILTERS)
        self.env.filters.update(lambdas or {})

    def render_template(self, template_name: str, context: dict[str, Any]) -> str:
        """Render a template with the given context."""
        logger.debug("Rendering template %s", template_name)
        template = self.env.get_template(template_name)
        return template.render(**context)


class ScalaCodeGenerator:
    """Main code generator for Play-Scala clients."""

    def __init__(
        self,
        codegen: ScalaClientCodegen | None = None,
        template_engine: ScalaTemplateEngine | None = None,
    ) -> None:
        """Initialize the code generator."""
        self.codegen = codegen or create_codegen()
        properties = self.codegen.additional_properties()
        lambdas = {name: value for name, value in properties.items() if callable(value)}
        self.template_engine = template_engine or ScalaTemplateEngine(lambdas=lambdas)
        self.context = properties

    def generate_client(
        self,
        output_dir: Path,
        models: Iterable[Model] = (),
        operations: Iterable[Operation] = (),
        api_name: str = "Default",
    ) -> dict[Path, str]:
        """Generate a complete Scala client below ``output_dir``."""
        output_dir = Path(output_dir)
        files = {}
        files.update(self.generate_support_files(output_dir))
        files.update(self.generate_model_files(models, output_dir))
        operations = list(operations)
        if operations:
            files.update(self.generate_api_file(api_name, operations, output_dir))
        return files

    def generate_support_files(self, output_dir: Path) -> dict[Path, str]:
        """Render the build descriptor, reference.conf and invoker scaffolding."""
        files = {}
        for support_file in self.codegen.supporting_files():
            content = self.template_engine.render_template(support_file.template_id, self.context)
            files[output_dir / support_file.destination] = content
        return files

    def generate_model_files(self, models: Iterable[Model], output_dir: Path) -> dict[Path, str]:
        """Render one file per model."""
        files = {}
        models_dir = output_dir / self._package_folder(self.codegen.config.model_package)

        for model in models:
            model_context = {**self.context, **self.codegen.model_context(model)}
            content = self.template_engine.render_template("model.j2", model_context)
            files[models_dir / f"{model_context['class_name'].strip('`')}.scala"] = content

        return files

    def generate_api_file(self, api_name: str, operations: list[Operation], output_dir: Path) -> dict[Path, str]:
        """Render the API class that groups ``operations``."""
        apis_dir = output_dir / self._package_folder(self.codegen.config.api_package)
        class_name = f"{self.codegen.to_model_name(api_name)}Api"
        api_context = {
            **self.context,
            "class_name": class_name,
            "package": self.codegen.config.api_package,
            "operations": [self.codegen.operation_context(operation) for operation in operations],
        }
        content = self.template_engine.render_template("api.j2", api_context)
        return {apis_dir / f"{class_name}.scala": content}

    def _package_folder(self, package: str) -> Path:
        return Path(self.codegen.config.source_folder, *package.split("."))
