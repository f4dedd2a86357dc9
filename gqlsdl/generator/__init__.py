"""Compile schema documents into graphql-core type descriptors."""

from gqlsdl.generator.binding import (
    BoundResolver,
    Implementations,
    ResolvedType,
    Resolver,
    as_resolved_type,
    bind_resolver,
    bind_type_resolver,
    resolved_type_name,
    scalar_hooks,
)
from gqlsdl.generator.descriptions import DescriptionAccumulator
from gqlsdl.generator.generate import SchemaGenerator, generate
from gqlsdl.generator.literals import value_from_query_literal, value_from_schema_literal
from gqlsdl.generator.options import DuplicatePolicy, GeneratorOptions, MissingEnumValuePolicy
from gqlsdl.generator.registry import BUILT_IN_SCALARS, TypePosition, TypeRegistry

__all__ = [
    "BUILT_IN_SCALARS",
    "BoundResolver",
    "DescriptionAccumulator",
    "DuplicatePolicy",
    "GeneratorOptions",
    "Implementations",
    "MissingEnumValuePolicy",
    "ResolvedType",
    "Resolver",
    "SchemaGenerator",
    "TypePosition",
    "TypeRegistry",
    "as_resolved_type",
    "bind_resolver",
    "bind_type_resolver",
    "generate",
    "resolved_type_name",
    "scalar_hooks",
    "value_from_query_literal",
    "value_from_schema_literal",
]
