"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


PARSER_EXPECTED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED",
    message="Expected",
    severity="error",
    category="parser",
)

PARSER_INVALID_DEFINITION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_INVALID_DEFINITION",
    message="invalid definition (must be either a type, interface, union, scalar, enum, input or extend)",
    hint="Top-level definitions start with `type`, `interface`, `union`, `scalar`, `enum`, `input` or `extend`.",
    severity="error",
    category="parser",
)

GENERATOR_TYPE_NOT_IMPLEMENTED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="GENERATOR_TYPE_NOT_IMPLEMENTED",
    message="is not implemented.",
    hint="Define the type in the schema or use a built-in scalar (String, Int, Float, Boolean, ID).",
    severity="error",
    category="generator",
)

GENERATOR_INTERFACE_NOT_DEFINED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="GENERATOR_INTERFACE_NOT_DEFINED",
    message="is not defined.",
    hint="Only interface types can follow `implements`.",
    severity="error",
    category="generator",
)

GENERATOR_EXTENSION_TARGET_NOT_DEFINED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="GENERATOR_EXTENSION_TARGET_NOT_DEFINED",
    message="cannot be extended because it is not a defined object type.",
    hint="`extend type X` requires a `type X { ... }` definition in the same document.",
    severity="error",
    category="generator",
)

GENERATOR_MISSING_IMPLEMENTATION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="GENERATOR_MISSING_IMPLEMENTATION",
    message="is calculated (i.e. it accepts arguments) but does not have an implementation",
    hint="Add a resolver for the field to the implementation map under its type name.",
    severity="error",
    category="generator",
)

GENERATOR_MISSING_ENUM_VALUE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="GENERATOR_MISSING_ENUM_VALUE",
    message="has no backing value in the implementation map.",
    hint="Add the value to the enum's implementation entry or use MissingEnumValuePolicy.NAME.",
    severity="error",
    category="generator",
)

GENERATOR_SCALAR_PARSER_MISSING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="GENERATOR_SCALAR_PARSER_MISSING",
    message="provides `parse_literal` without `parse_value`.",
    hint="Scalars that parse literals must also parse variable values.",
    severity="error",
    category="generator",
)

GENERATOR_DUPLICATE_DEFINITION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="GENERATOR_DUPLICATE_DEFINITION",
    message="is defined more than once.",
    hint="Rename one of the definitions or use DuplicatePolicy.REPLACE.",
    severity="error",
    category="generator",
)

GENERATOR_UNEXPECTED_NODE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="GENERATOR_UNEXPECTED_NODE",
    message="Unexpected node type",
    severity="error",
    category="generator",
)

BINDER_UNKNOWN_RESOLVED_TYPE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="BINDER_UNKNOWN_RESOLVED_TYPE",
    message="is not a defined object type.",
    hint="`resolve_type` must name or return one of the schema's object types.",
    severity="error",
    category="binder",
)

BINDER_NOT_CALLABLE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="BINDER_NOT_CALLABLE",
    message="implementation is not callable.",
    hint="Field and type resolvers must be functions taking `(source, info, **arguments)`.",
    severity="error",
    category="binder",
)
