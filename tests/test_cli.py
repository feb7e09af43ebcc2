"""Tests for the command line interface."""

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from scala_oas_generator.cli import (
    EXIT_CONFIGURATION_ERROR,
    EXIT_SUCCESS,
    main,
    options_from_args,
    parse_command_line_args,
    setup_logging,
)


@pytest.fixture(autouse=True)
def restore_package_logger() -> Iterator[None]:
    """Undo the handler setup done by ``main``."""
    package_logger = logging.getLogger("scala_oas_generator")
    handlers, level, propagate = list(package_logger.handlers), package_logger.level, package_logger.propagate
    yield
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)
    package_logger.propagate = propagate


class TestArguments:
    def test_defaults(self) -> None:
        options = options_from_args(parse_command_line_args([]))

        assert options["mainPackage"] is None
        assert options["renderJavadoc"] is True
        assert options["removeOAuthSecurities"] is True
        assert options["onlyOneSuccess"] is True
        assert options["strictOperationNames"] is False

    def test_setup_logging(self) -> None:
        setup_logging(verbose=True)

        package_logger = logging.getLogger("scala_oas_generator")
        assert package_logger.level == logging.DEBUG
        assert len(package_logger.handlers) == 1
        assert not package_logger.propagate

    def test_flags(self) -> None:
        args = parse_command_line_args(["--no-javadoc", "--keep-oauth", "--main-package", "com.example"])
        options = options_from_args(args)

        assert options["renderJavadoc"] is False
        assert options["removeOAuthSecurities"] is False
        assert options["mainPackage"] == "com.example"


class TestMain:
    """Test running the generator end to end."""

    def test_writes_support_files(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        exit_code = main(["--output", str(tmp_path), "--project-name", "petstore-client"])

        assert exit_code == EXIT_SUCCESS
        assert 'name := "petstore-client"' in (tmp_path / "build.sbt").read_text()
        assert (tmp_path / "src/main/scala/io/swagger/client/core/ApiInvoker.scala").exists()
        assert "generated successfully" in capsys.readouterr().out

    def test_verbose_summary(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--output", str(tmp_path), "--verbose"]) == EXIT_SUCCESS

        out = capsys.readouterr().out
        assert "Generated 8 files:" in out
        assert "build.sbt" in out

    def test_configuration_error(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        exit_code = main(["--output", str(tmp_path), "--main-package", ""])

        assert exit_code == EXIT_CONFIGURATION_ERROR
        assert "Error:" in capsys.readouterr().err
        assert not (tmp_path / "build.sbt").exists()
