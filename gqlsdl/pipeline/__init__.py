"""Facade entrypoints and compile carriers."""

from gqlsdl.pipeline.entrypoints import (
    SchemaClient,
    build_schema,
    compile_schema_text,
    create_schema,
)
from gqlsdl.pipeline.result import ROOT_OPERATION_TYPES, CompiledSchema, schema_from_registry

__all__ = [
    "ROOT_OPERATION_TYPES",
    "CompiledSchema",
    "SchemaClient",
    "build_schema",
    "compile_schema_text",
    "create_schema",
    "schema_from_registry",
]
