"""Tests for the support file plan."""

from scala_oas_generator.config import CodegenConfig
from scala_oas_generator.generator.support_files import invoker_folder, plan_support_files
from scala_oas_generator.schema import SupportFile

INVOKER_FOLDER = "src/main/scala/io/swagger/client/core"


class TestPlanSupportFiles:
    def test_default_plan(self, config: CodegenConfig) -> None:
        assert plan_support_files(config) == [
            SupportFile("sbt.j2", "", "build.sbt"),
            SupportFile("reference.j2", "src/main/resources", "reference.conf"),
            SupportFile("apiFile.j2", INVOKER_FOLDER, "ApiFile.scala"),
            SupportFile("apiConfig.j2", INVOKER_FOLDER, "ApiConfig.scala"),
            SupportFile("apiRequest.j2", INVOKER_FOLDER, "ApiRequest.scala"),
            SupportFile("apiResponse.j2", INVOKER_FOLDER, "ApiResponse.scala"),
            SupportFile("apiInvoker.j2", INVOKER_FOLDER, "ApiInvoker.scala"),
            SupportFile("apiImplicits.j2", INVOKER_FOLDER, "ApiImplicits.scala"),
        ]

    def test_paths_follow_configuration(self) -> None:
        config = CodegenConfig(
            main_package="com.example",
            source_folder="app",
            resources_folder="conf",
        )

        files = plan_support_files(config)

        assert invoker_folder(config) == "app/com/example/core"
        assert files[1].destination == "conf/reference.conf"
        assert {f.output_relative_path for f in files[2:]} == {"app/com/example/core"}

    def test_destination(self, config: CodegenConfig) -> None:
        files = plan_support_files(config)

        assert files[0].destination == "build.sbt"
        assert files[2].destination == f"{INVOKER_FOLDER}/ApiFile.scala"

    def test_deterministic(self, config: CodegenConfig) -> None:
        assert plan_support_files(config) == plan_support_files(config)
