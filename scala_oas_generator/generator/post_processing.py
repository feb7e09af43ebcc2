"""
Post-processing passes over parsed models and operations.

Both passes run after type resolution and before rendering.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import replace

from scala_oas_generator.schema import (
    Model,
    SchemaType,
    SecurityRequirement,
    innermost_type,
    with_adjacency,
)


def filter_security(
    requirements: Iterable[SecurityRequirement],
    *,
    remove_oauth: bool,
) -> list[SecurityRequirement] | None:
    """Drop OAuth requirements and repair the ``is_last`` flags.

    Args:
        requirements: Security requirements of one operation, in order.
        remove_oauth: Whether OAuth schemes are removed at all.

    Returns:
        The requirements unchanged when ``remove_oauth`` is false. Otherwise
        the non-OAuth requirements in their original order, or None when
        none are left, meaning the operation renders without security.
    """
    if not remove_oauth:
        return list(requirements)

    remaining = with_adjacency(req for req in requirements if not req.is_oauth)
    if not remaining:
        return None
    return remaining


def local_model_imports(
    model: Model,
    *,
    type_name: Callable[[SchemaType], str],
    is_primitive: Callable[[SchemaType], bool],
    import_mapping: Mapping[str, str],
    model_package: str,
) -> set[str]:
    """Collect the imports of sibling models referenced by a model's properties.

    Args:
        model: The model to inspect.
        type_name: Resolves a non-container schema type to its Scala name.
        is_primitive: Tells whether a schema type is a Scala built-in.
        import_mapping: Types imported from outside the model package.
        model_package: Package every generated model lives in.

    Returns:
        Fully qualified imports of models generated into ``model_package``.
    """
    imports: set[str] = set()
    for prop in model.properties:
        item = innermost_type(prop.schema_type)
        if is_primitive(item):
            continue
        name = type_name(item)
        if name not in import_mapping:
            imports.add(f"{model_package}.{name}")
    return imports


def dedupe_model_imports(
    model: Model,
    *,
    type_name: Callable[[SchemaType], str],
    is_primitive: Callable[[SchemaType], bool],
    import_mapping: Mapping[str, str],
    model_package: str,
) -> Model:
    """Remove imports of models that live in the model's own package.

    Scala warns when a file imports a type from its own package
    (``imported `Tag' is permanently hidden by definition of object Tag``),
    so sibling model imports are dropped. Every other import is kept in
    its original position.

    Returns:
        A copy of the model with the filtered ``declared_imports``.
    """
    local_imports = local_model_imports(
        model,
        type_name=type_name,
        is_primitive=is_primitive,
        import_mapping=import_mapping,
        model_package=model_package,
    )
    kept = tuple(value for value in model.declared_imports if value not in local_imports)
    return replace(model, declared_imports=kept)
