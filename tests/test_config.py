"""Tests for the generator configuration record."""

import dataclasses

import pytest

from scala_oas_generator.config import CodegenConfig
from scala_oas_generator.errors import ConfigurationError


class TestDefaults:
    def test_derived_packages(self, config: CodegenConfig) -> None:
        assert config.main_package == "io.swagger.client"
        assert config.invoker_package == "io.swagger.client.core"
        assert config.api_package == "io.swagger.client.api"
        assert config.model_package == "io.swagger.client.model"
        assert config.config_path == "io.swagger.client"

    def test_project_values(self, config: CodegenConfig) -> None:
        assert config.project_organization == "io.swagger"
        assert config.project_name == "swagger-client"
        assert config.project_version == "1.0.0"
        assert config.scala_version == "2.12.3"
        assert config.play_version == "2.6.6"

    def test_flags(self, config: CodegenConfig) -> None:
        assert config.render_javadoc
        assert config.remove_oauth_securities
        assert config.only_one_success
        assert not config.strict_operation_names

    def test_frozen(self, config: CodegenConfig) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.project_name = "other"  # type: ignore[misc]


class TestFromOptions:
    """Test building a configuration from option names."""

    def test_main_package_drives_derived_packages(self) -> None:
        config = CodegenConfig.from_options({"mainPackage": "com.example.client", "projectName": "example"})

        assert config.invoker_package == "com.example.client.core"
        assert config.model_package == "com.example.client.model"
        assert config.config_path == "com.example.client"
        assert config.project_name == "example"

    def test_explicit_packages_win(self) -> None:
        config = CodegenConfig.from_options({"mainPackage": "com.example", "invokerPackage": "com.example.runtime"})

        assert config.invoker_package == "com.example.runtime"

    def test_none_values_are_ignored(self) -> None:
        assert CodegenConfig.from_options({"projectName": None}) == CodegenConfig()

    def test_boolean_strings(self) -> None:
        config = CodegenConfig.from_options({"renderJavadoc": "false", "onlyOneSuccess": "yes"})

        assert not config.render_javadoc
        assert config.only_one_success

    def test_bad_boolean(self) -> None:
        with pytest.raises(ConfigurationError, match="renderJavadoc"):
            CodegenConfig.from_options({"renderJavadoc": "maybe"})

    def test_unknown_option(self) -> None:
        with pytest.raises(ConfigurationError, match="Unknown generator option 'artifactId'"):
            CodegenConfig.from_options({"artifactId": "x"})

    def test_empty_main_package(self) -> None:
        with pytest.raises(ConfigurationError):
            CodegenConfig.from_options({"mainPackage": ""})

    def test_to_options(self, config: CodegenConfig) -> None:
        options = config.to_options()

        assert options["invokerPackage"] == "io.swagger.client.core"
        assert set(options) == set(CodegenConfig.option_names())
        assert CodegenConfig.from_options(options) == config
