"""Diagnostics."""

from gqlsdl.diagnostics.codes import (
    BINDER_NOT_CALLABLE,
    BINDER_UNKNOWN_RESOLVED_TYPE,
    GENERATOR_DUPLICATE_DEFINITION,
    GENERATOR_EXTENSION_TARGET_NOT_DEFINED,
    GENERATOR_INTERFACE_NOT_DEFINED,
    GENERATOR_MISSING_ENUM_VALUE,
    GENERATOR_MISSING_IMPLEMENTATION,
    GENERATOR_SCALAR_PARSER_MISSING,
    GENERATOR_TYPE_NOT_IMPLEMENTED,
    GENERATOR_UNEXPECTED_NODE,
    PARSER_EXPECTED,
    PARSER_INVALID_DEFINITION,
    DiagnosticSpec,
)
from gqlsdl.diagnostics.diagnostic import Diagnostic, Severity
from gqlsdl.diagnostics.errors import (
    DuplicateDefinitionError,
    MissingImplementationError,
    SchemaError,
    SchemaSyntaxError,
    UnexpectedNodeError,
    UnresolvedTypeError,
)

__all__ = [
    "BINDER_NOT_CALLABLE",
    "BINDER_UNKNOWN_RESOLVED_TYPE",
    "GENERATOR_DUPLICATE_DEFINITION",
    "GENERATOR_EXTENSION_TARGET_NOT_DEFINED",
    "GENERATOR_INTERFACE_NOT_DEFINED",
    "GENERATOR_MISSING_ENUM_VALUE",
    "GENERATOR_MISSING_IMPLEMENTATION",
    "GENERATOR_SCALAR_PARSER_MISSING",
    "GENERATOR_TYPE_NOT_IMPLEMENTED",
    "GENERATOR_UNEXPECTED_NODE",
    "PARSER_EXPECTED",
    "PARSER_INVALID_DEFINITION",
    "Diagnostic",
    "DiagnosticSpec",
    "DuplicateDefinitionError",
    "MissingImplementationError",
    "SchemaError",
    "SchemaSyntaxError",
    "Severity",
    "UnexpectedNodeError",
    "UnresolvedTypeError",
]
