"""Exceptions raised when a schema cannot be compiled."""

from __future__ import annotations

from gqlsdl.diagnostics.diagnostic import Diagnostic


class SchemaError(Exception):
    """Base class of every compile-time failure."""

    def __init__(self, diagnostic: Diagnostic, message: str | None = None) -> None:
        super().__init__(message if message is not None else diagnostic.message)
        self.diagnostic = diagnostic

    @property
    def code(self) -> str:
        return self.diagnostic.code


class SchemaSyntaxError(SchemaError):
    """The source text does not match the grammar.

    The exception message holds the diagnostic message followed by an
    excerpt of the source around the failing offset.
    """

    def __init__(self, diagnostic: Diagnostic, excerpt: str) -> None:
        super().__init__(diagnostic, f"{diagnostic.message}\n\n{excerpt}\n")
        self.excerpt = excerpt

    @property
    def offset(self) -> int | None:
        return self.diagnostic.range.start if self.diagnostic.range is not None else None


class UnresolvedTypeError(SchemaError):
    """A referenced type name matches none of the namespaces it may come from."""


class MissingImplementationError(SchemaError):
    """The implementation map lacks something the schema requires."""


class DuplicateDefinitionError(SchemaError):
    """A type or extension field is defined twice."""


class UnexpectedNodeError(SchemaError):
    """An AST node showed up where the generator does not handle it.

    Raised only on a parser/generator contract violation, never for a
    well-formed document.
    """
