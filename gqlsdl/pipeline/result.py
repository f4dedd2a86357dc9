"""Compile carriers shared by the facade entrypoints."""

from __future__ import annotations

from dataclasses import dataclass, field

from graphql import GraphQLSchema

from gqlsdl.ast import Document
from gqlsdl.generator import GeneratorOptions, TypeRegistry

ROOT_OPERATION_TYPES = ("Query", "Mutation", "Subscription")


@dataclass(slots=True)
class CompiledSchema:
    """Parse-once/compile-once result with a lazily assembled executable schema."""

    source_text: str
    document: Document
    registry: TypeRegistry
    options: GeneratorOptions
    _schema: GraphQLSchema | None = field(default=None, init=False, repr=False)

    def schema(self) -> GraphQLSchema:
        if self._schema is None:
            self._schema = schema_from_registry(self.registry)
        return self._schema


def schema_from_registry(registry: TypeRegistry) -> GraphQLSchema:
    """Object types named Query, Mutation and Subscription become the root types."""
    query, mutation, subscription = (registry.object_types.get(name) for name in ROOT_OPERATION_TYPES)
    return GraphQLSchema(
        query=query,
        mutation=mutation,
        subscription=subscription,
        types=list(registry),
    )
