"""Tests for the security filter and the model import cleanup."""

import pytest

from scala_oas_generator.config import CodegenConfig
from scala_oas_generator.generator.codegen import ScalaClientCodegen, create_codegen
from scala_oas_generator.generator.post_processing import filter_security
from scala_oas_generator.schema import (
    Array,
    File,
    Map,
    Model,
    ObjectRef,
    Primitive,
    Property,
    SecurityRequirement,
    SecuritySchemeCategory,
    with_adjacency,
)

API_KEY = SecuritySchemeCategory.API_KEY
BASIC = SecuritySchemeCategory.BASIC
OAUTH = SecuritySchemeCategory.OAUTH


def _requirements(*categories: SecuritySchemeCategory) -> list[SecurityRequirement]:
    return with_adjacency(SecurityRequirement(f"scheme{i}", category) for i, category in enumerate(categories))


class TestWithAdjacency:
    def test_only_last_is_flagged(self) -> None:
        requirements = _requirements(API_KEY, BASIC, OAUTH)

        assert [r.is_last for r in requirements] == [False, False, True]

    def test_empty(self) -> None:
        assert with_adjacency([]) == []


class TestFilterSecurity:
    """Test removal of OAuth security requirements."""

    def test_removes_oauth_and_repairs_adjacency(self) -> None:
        filtered = filter_security(_requirements(API_KEY, OAUTH, BASIC), remove_oauth=True)

        assert filtered is not None
        assert [r.scheme_name for r in filtered] == ["scheme0", "scheme2"]
        assert [r.is_last for r in filtered] == [False, True]

    def test_trailing_oauth_moves_last_flag(self) -> None:
        filtered = filter_security(_requirements(API_KEY, BASIC, OAUTH), remove_oauth=True)

        assert filtered is not None
        assert [r.is_last for r in filtered] == [False, True]

    def test_all_oauth_is_absent(self) -> None:
        assert filter_security(_requirements(OAUTH, OAUTH), remove_oauth=True) is None

    def test_empty_input_is_absent_when_filtering(self) -> None:
        assert filter_security([], remove_oauth=True) is None

    def test_disabled_returns_input_unchanged(self) -> None:
        requirements = _requirements(API_KEY, OAUTH, BASIC)

        assert filter_security(requirements, remove_oauth=False) == requirements
        assert filter_security([], remove_oauth=False) == []

    def test_codegen_follows_configuration(self) -> None:
        requirements = _requirements(OAUTH)

        assert create_codegen(CodegenConfig()).from_security(requirements) is None
        kept = create_codegen(CodegenConfig(remove_oauth_securities=False)).from_security(requirements)
        assert kept == requirements


class TestModelImports:
    """Test removal of sibling model imports."""

    @pytest.fixture
    def order_model(self) -> Model:
        return Model(
            name="Order",
            properties=(
                Property("id", Primitive("long")),
                Property("pet", ObjectRef("Pet")),
                Property("tags", Array(ObjectRef("Tag"))),
                Property("attributes", Map(Array(ObjectRef("Attribute")))),
                Property("shipDate", Primitive("DateTime")),
                Property("invoice", File()),
                Property("timestamp", ObjectRef("OffsetDateTime")),
            ),
            declared_imports=(
                "io.swagger.client.model.Pet",
                "java.time.OffsetDateTime",
                "io.swagger.client.model.Tag",
                "io.swagger.client.core.ApiFile",
                "io.swagger.client.model.Attribute",
                "io.swagger.client.model.Tag",
                "io.swagger.client.model.Customer",
            ),
        )

    def test_removes_sibling_models(self, codegen: ScalaClientCodegen, order_model: Model) -> None:
        processed = codegen.post_process_model(order_model)

        assert processed.declared_imports == (
            "java.time.OffsetDateTime",
            "io.swagger.client.core.ApiFile",
            "io.swagger.client.model.Customer",
        )

    def test_unmapped_primitive_is_a_sibling_model(self, codegen: ScalaClientCodegen) -> None:
        model = Model(
            name="Order",
            properties=(
                Property("pet", Primitive("Pet")),
                Property("quantity", Primitive("integer")),
                Property("shipDate", Primitive("DateTime")),
            ),
            declared_imports=("io.swagger.client.model.Pet", "java.time.OffsetDateTime"),
        )

        processed = codegen.post_process_model(model)

        assert processed.declared_imports == ("java.time.OffsetDateTime",)

    def test_keeps_model_otherwise(self, codegen: ScalaClientCodegen, order_model: Model) -> None:
        processed = codegen.post_process_model(order_model)

        assert processed.name == order_model.name
        assert processed.properties == order_model.properties
        assert order_model.declared_imports[0] == "io.swagger.client.model.Pet"

    def test_idempotent(self, codegen: ScalaClientCodegen, order_model: Model) -> None:
        once = codegen.post_process_model(order_model)
        twice = codegen.post_process_model(once)

        assert twice == once

    def test_custom_model_package(self, order_model: Model) -> None:
        codegen = create_codegen(CodegenConfig(model_package="com.example.models"))

        processed = codegen.post_process_model(order_model)

        assert processed.declared_imports == order_model.declared_imports

    def test_batch(self, codegen: ScalaClientCodegen, order_model: Model, pet_model: Model) -> None:
        processed = codegen.post_process_models([order_model, pet_model])

        assert [model.name for model in processed] == ["Order", "Pet"]
        assert processed[1].declared_imports == ("java.time.OffsetDateTime",)
