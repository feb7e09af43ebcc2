#!/usr/bin/env python3
"""Command-line interface for the Scala OAS Generator."""

import argparse
import logging
import sys
import traceback
from pathlib import Path

from scala_oas_generator.config import OPTION_DESCRIPTIONS, CodegenConfig
from scala_oas_generator.errors import ConfigurationError
from scala_oas_generator.generator.codegen import create_codegen
from scala_oas_generator.generator.template_engine import ScalaCodeGenerator
from scala_oas_generator.utils.file_utils import get_relative_path, write_files_to_disk

# Exit codes for better error reporting
EXIT_SUCCESS = 0
EXIT_CONFIGURATION_ERROR = 1
EXIT_GENERATION_ERROR = 3

# Option name -> command line flag
_STRING_OPTIONS = {
    "mainPackage": "--main-package",
    "invokerPackage": "--invoker-package",
    "apiPackage": "--api-package",
    "modelPackage": "--model-package",
    "configPath": "--config-path",
    "projectOrganization": "--project-organization",
    "projectName": "--project-name",
    "projectVersion": "--project-version",
    "scalaVersion": "--scala-version",
    "playVersion": "--play-version",
}


def parse_command_line_args(args: list[str] | None = None) -> argparse.Namespace:
    """Create and configure the command line argument parser."""
    parser = argparse.ArgumentParser(
        description="Generate the support files of a Play-Scala API client",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s --output ./client
  %(prog)s --output ./client --main-package com.example.client --project-name example-client
  %(prog)s --output ./client --keep-oauth --verbose
        """,
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=Path("./generated"),
        help="Output directory for generated files (default: %(default)s)",
        dest="output_dir",
    )
    for option, flag in _STRING_OPTIONS.items():
        parser.add_argument(flag, dest=option, help=OPTION_DESCRIPTIONS[option])
    parser.add_argument(
        "--no-javadoc",
        action="store_false",
        dest="renderJavadoc",
        help="Do not render Scaladoc blocks",
    )
    parser.add_argument(
        "--keep-oauth",
        action="store_false",
        dest="removeOAuthSecurities",
        help="Keep OAuth security requirements on operations",
    )
    parser.add_argument(
        "--all-success-responses",
        action="store_false",
        dest="onlyOneSuccess",
        help="Treat every 2XX response as a success, not only the lowest one",
    )
    parser.add_argument(
        "--strict-operation-names",
        action="store_true",
        dest="strictOperationNames",
        help="Fail instead of renaming operation ids that are reserved words",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output",
    )
    return parser.parse_args(args)


def setup_logging(*, verbose: bool) -> None:
    """Send generator log records to stderr.

    Args:
        verbose: Log DEBUG records instead of warnings only.
    """
    level = logging.DEBUG if verbose else logging.WARNING

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(levelname)-8s %(name)s: %(message)s"))

    package_logger = logging.getLogger("scala_oas_generator")
    package_logger.setLevel(level)
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.propagate = False


def options_from_args(parsed_args: argparse.Namespace) -> dict[str, object]:
    """Collect generator options from parsed command line arguments."""
    names = [*_STRING_OPTIONS, "renderJavadoc", "removeOAuthSecurities", "onlyOneSuccess", "strictOperationNames"]
    return {name: getattr(parsed_args, name) for name in names}


def print_generation_summary(*, files: dict[Path, str], output_dir: Path) -> None:
    """Print summary of generated files."""
    print(f"Generated {len(files)} files:")
    for file_path in sorted(files.keys()):
        print(f"  {get_relative_path(file_path, output_dir)}")
    print(f"\nScala client support files generated successfully in {output_dir}")


def generate_support_files(*, config: CodegenConfig, output_dir: Path) -> dict[Path, str]:
    """Render the support files of a client project."""
    generator = ScalaCodeGenerator(create_codegen(config))
    return generator.generate_support_files(output_dir)


def main(args: list[str] | None = None) -> int:
    """Generate the support files of a Play-Scala client."""
    parsed_args = parse_command_line_args(args)
    setup_logging(verbose=parsed_args.verbose)

    try:
        config = CodegenConfig.from_options(options_from_args(parsed_args))
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_CONFIGURATION_ERROR

    try:
        generated_files = generate_support_files(config=config, output_dir=parsed_args.output_dir)
        write_files_to_disk(generated_files)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        if parsed_args.verbose:
            traceback.print_exc()
        return EXIT_GENERATION_ERROR

    if parsed_args.verbose:
        print_generation_summary(files=generated_files, output_dir=parsed_args.output_dir)
    else:
        print(f"Scala client support files generated successfully in {parsed_args.output_dir}")

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
