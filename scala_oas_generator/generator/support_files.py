"""Support files rendered once per generated Play-Scala client."""

from __future__ import annotations

import logging
from typing import Final

from scala_oas_generator.config import CodegenConfig
from scala_oas_generator.schema import SupportFile
from scala_oas_generator.utils.string_case import package_to_path

logger = logging.getLogger(__name__)

# (template id, file name) of the scaffolding placed in the invoker package
_INVOKER_FILES: Final = (
    ("apiFile.j2", "ApiFile.scala"),
    ("apiConfig.j2", "ApiConfig.scala"),
    ("apiRequest.j2", "ApiRequest.scala"),
    ("apiResponse.j2", "ApiResponse.scala"),
    ("apiInvoker.j2", "ApiInvoker.scala"),
    ("apiImplicits.j2", "ApiImplicits.scala"),
)


def invoker_folder(config: CodegenConfig) -> str:
    """Folder of the invoker package below the project root."""
    return package_to_path(f"{config.source_folder}/{config.invoker_package}")


def plan_support_files(config: CodegenConfig) -> list[SupportFile]:
    """List the support files of a client project, in rendering order.

    Args:
        config: The generator configuration.

    Returns:
        The build descriptor, the runtime configuration reference and the
        invoker scaffolding files.
    """
    files = [
        SupportFile("sbt.j2", "", "build.sbt"),
        SupportFile("reference.j2", config.resources_folder, "reference.conf"),
    ]
    folder = invoker_folder(config)
    files.extend(SupportFile(template_id, folder, file_name) for template_id, file_name in _INVOKER_FILES)

    logger.debug("Planned %d support files (invoker folder %s)", len(files), folder)
    return files
