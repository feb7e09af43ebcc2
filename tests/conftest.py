"""Shared fixtures for the Scala OAS generator tests."""

import pytest

from scala_oas_generator.config import CodegenConfig
from scala_oas_generator.generator.codegen import ScalaClientCodegen, create_codegen
from scala_oas_generator.schema import (
    Array,
    File,
    Model,
    ObjectRef,
    Operation,
    Parameter,
    Primitive,
    Property,
    Response,
    SecurityRequirement,
    SecuritySchemeCategory,
)

MODEL_PACKAGE = "io.swagger.client.model"


@pytest.fixture
def config() -> CodegenConfig:
    return CodegenConfig()


@pytest.fixture
def codegen(config: CodegenConfig) -> ScalaClientCodegen:
    return create_codegen(config)


@pytest.fixture
def pet_model() -> Model:
    """A petstore model referencing sibling models and mapped types."""
    return Model(
        name="Pet",
        description="A pet for sale.",
        properties=(
            Property("id", Primitive("long")),
            Property("name", Primitive("string"), required=True),
            Property("tags", Array(ObjectRef("Tag")), required=True),
            Property("created", Primitive("DateTime")),
        ),
        declared_imports=(
            f"{MODEL_PACKAGE}.Tag",
            "java.time.OffsetDateTime",
        ),
    )


@pytest.fixture
def get_pet_operation() -> Operation:
    return Operation(
        operation_id="GetPetById",
        http_method="GET",
        path="/pet/{petId}",
        summary="Find pet by ID",
        parameters=(Parameter("petId", Primitive("long"), required=True, location="path"),),
        responses=(
            Response("404", None, "Pet not found"),
            Response("200", ObjectRef("Pet"), "successful operation"),
        ),
        security=(
            SecurityRequirement("api_key", SecuritySchemeCategory.API_KEY),
            SecurityRequirement("petstore_auth", SecuritySchemeCategory.OAUTH, is_last=True),
        ),
    )


@pytest.fixture
def upload_operation() -> Operation:
    return Operation(
        operation_id="downloadFile",
        http_method="GET",
        path="/files/{fileId}",
        responses=(
            Response("201", File(), "file created"),
            Response("200", File(), "file content"),
        ),
    )
