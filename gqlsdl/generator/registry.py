"""Compiled type registry and the name lookups used while compiling."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType
from typing import Final, Mapping

from graphql import (
    GraphQLBoolean,
    GraphQLEnumType,
    GraphQLFloat,
    GraphQLID,
    GraphQLInputObjectType,
    GraphQLInt,
    GraphQLInterfaceType,
    GraphQLNamedType,
    GraphQLObjectType,
    GraphQLScalarType,
    GraphQLString,
    GraphQLUnionType,
)

BUILT_IN_SCALARS: Final[Mapping[str, GraphQLScalarType]] = MappingProxyType(
    {
        "String": GraphQLString,
        "Int": GraphQLInt,
        "Float": GraphQLFloat,
        "Boolean": GraphQLBoolean,
        "ID": GraphQLID,
    }
)


class TypePosition(StrEnum):
    """Where a type reference appears; decides which kinds may answer it."""

    OUTPUT = "output"
    INPUT = "input"


@dataclass(slots=True)
class TypeRegistry:
    """Name-keyed descriptors produced by one compilation.

    The five output mappings are the registry's contract with the execution
    engine. `input_types` is kept alongside because input positions resolve
    against it.
    """

    object_types: dict[str, GraphQLObjectType] = field(default_factory=dict)
    interface_types: dict[str, GraphQLInterfaceType] = field(default_factory=dict)
    union_types: dict[str, GraphQLUnionType] = field(default_factory=dict)
    scalar_types: dict[str, GraphQLScalarType] = field(default_factory=dict)
    enum_types: dict[str, GraphQLEnumType] = field(default_factory=dict)
    input_types: dict[str, GraphQLInputObjectType] = field(default_factory=dict)

    def lookup(self, name: str, position: TypePosition) -> GraphQLNamedType | None:
        """First match wins; object types never answer an input position."""
        namespaces: tuple[Mapping[str, GraphQLNamedType], ...]
        if position == TypePosition.OUTPUT:
            namespaces = (
                BUILT_IN_SCALARS,
                self.object_types,
                self.interface_types,
                self.union_types,
                self.scalar_types,
                self.enum_types,
                self.input_types,
            )
        else:
            namespaces = (
                BUILT_IN_SCALARS,
                self.interface_types,
                self.union_types,
                self.scalar_types,
                self.enum_types,
                self.input_types,
            )
        for namespace in namespaces:
            named = namespace.get(name)
            if named is not None:
                return named
        return None

    def defines(self, name: str) -> bool:
        """Whether `name` is taken by a type defined in the document."""
        return any(name in namespace for namespace in self._namespaces())

    def forget(self, name: str) -> None:
        for namespace in self._namespaces():
            namespace.pop(name, None)

    def __iter__(self) -> Iterator[GraphQLNamedType]:
        for namespace in self._namespaces():
            yield from namespace.values()

    def _namespaces(self) -> tuple[dict[str, GraphQLNamedType], ...]:
        return (
            self.object_types,  # type: ignore[return-value]
            self.interface_types,
            self.union_types,
            self.scalar_types,
            self.enum_types,
            self.input_types,
        )
