"""Entrypoints that run source text through parse, generate and execute."""

from __future__ import annotations

import logging
from typing import Any

from graphql import ExecutionResult, GraphQLSchema, graphql

from gqlsdl.generator import GeneratorOptions, Implementations, generate
from gqlsdl.parser import parse_schema
from gqlsdl.pipeline.result import CompiledSchema

logger = logging.getLogger(__name__)


def compile_schema_text(
    text: str,
    implementations: Implementations | None = None,
    *,
    options: GeneratorOptions | None = None,
) -> CompiledSchema:
    """Parse `text` and compile it against `implementations`."""
    resolved_options = options or GeneratorOptions()
    document = parse_schema(text)
    registry = generate(document, implementations, options=resolved_options)
    return CompiledSchema(
        source_text=text,
        document=document,
        registry=registry,
        options=resolved_options,
    )


def build_schema(
    text: str,
    implementations: Implementations | None = None,
    *,
    options: GeneratorOptions | None = None,
) -> GraphQLSchema:
    return compile_schema_text(text, implementations, options=options).schema()


class SchemaClient:
    """Executable schema with an awaitable query call."""

    def __init__(self, compiled: CompiledSchema) -> None:
        self._compiled = compiled

    @property
    def compiled(self) -> CompiledSchema:
        return self._compiled

    @property
    def schema(self) -> GraphQLSchema:
        return self._compiled.schema()

    async def query(
        self,
        source: str,
        variables: dict[str, Any] | None = None,
        *,
        root_value: Any = None,
        context_value: Any = None,
        operation_name: str | None = None,
    ) -> ExecutionResult:
        logger.debug("executing operation %s", operation_name or "<anonymous>")
        return await graphql(
            self.schema,
            source,
            root_value=root_value,
            context_value=context_value,
            variable_values=variables,
            operation_name=operation_name,
        )


def create_schema(
    text: str,
    implementations: Implementations | None = None,
    *,
    options: GeneratorOptions | None = None,
) -> SchemaClient:
    """Compile `text` and wrap the result for execution."""
    return SchemaClient(compile_schema_text(text, implementations, options=options))
