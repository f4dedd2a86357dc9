"""Bind implementation-map entries to compiled descriptors.

Every field resolver follows one contract: `resolver(source, info, **arguments)`
returns a value or an awaitable of one. Binding wraps it in a coroutine
function with the same signature, so the engine always gets an awaitable.
"""

from __future__ import annotations

import functools
import inspect
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Literal, Mapping, TypeAlias

from graphql import GraphQLObjectType, GraphQLResolveInfo, ValueNode

from gqlsdl.diagnostics import (
    BINDER_NOT_CALLABLE,
    BINDER_UNKNOWN_RESOLVED_TYPE,
    GENERATOR_SCALAR_PARSER_MISSING,
    Diagnostic,
    MissingImplementationError,
    UnresolvedTypeError,
)
from gqlsdl.generator.literals import value_from_query_literal
from gqlsdl.generator.registry import TypeRegistry

logger = logging.getLogger(__name__)

Resolver: TypeAlias = Callable[..., Any]
BoundResolver: TypeAlias = Callable[..., Awaitable[Any]]
Implementations: TypeAlias = Mapping[str, Mapping[str, Any]]

_EMPTY: Mapping[str, Any] = MappingProxyType({})

_RESOLVE_TYPE_KEYS = ("resolve_type", "resolveType")
_PARSE_VALUE_KEYS = ("parse_value", "parseValue", "parse")
_PARSE_LITERAL_KEYS = ("parse_literal", "parseLiteral")


@dataclass(frozen=True, slots=True)
class ResolvedType:
    """Result of a `resolve_type` implementation: a type name or a descriptor."""

    kind: Literal["name", "type"]
    value: str | GraphQLObjectType

    @staticmethod
    def by_name(name: str) -> "ResolvedType":
        return ResolvedType(kind="name", value=name)

    @staticmethod
    def by_type(type_: GraphQLObjectType) -> "ResolvedType":
        return ResolvedType(kind="type", value=type_)


def implementation_for(implementations: Implementations, type_name: str) -> Mapping[str, Any]:
    return implementations.get(type_name) or _EMPTY


def bind_resolver(owner: str, field_name: str, resolver: Resolver) -> BoundResolver:
    _require_callable(f"{owner}.{field_name}", resolver)

    @functools.wraps(resolver)
    async def resolve(source: Any, info: GraphQLResolveInfo, **arguments: Any) -> Any:
        result = resolver(source, info, **arguments)
        if inspect.isawaitable(result):
            result = await result
        return result

    logger.debug("bound resolver %s.%s", owner, field_name)
    return resolve


def bind_type_resolver(
    owner: str,
    implementation: Mapping[str, Any],
    registry: TypeRegistry,
) -> Callable[..., Any] | None:
    """Wrap `resolve_type` so whatever it returns reaches the engine as a type name."""
    resolver = _first_present(implementation, _RESOLVE_TYPE_KEYS)
    if resolver is None:
        return None
    _require_callable(f"{owner}.resolve_type", resolver)

    async def finish(pending: Awaitable[Any]) -> str | None:
        return resolved_type_name(registry, await pending)

    def resolve_type(value: Any, info: GraphQLResolveInfo, abstract_type: Any) -> Any:
        result = resolver(value, info, abstract_type)
        if inspect.isawaitable(result):
            return finish(result)
        return resolved_type_name(registry, result)

    return resolve_type


def as_resolved_type(result: ResolvedType | str | GraphQLObjectType) -> ResolvedType:
    if isinstance(result, ResolvedType):
        return result
    if isinstance(result, str):
        return ResolvedType.by_name(result)
    if isinstance(result, GraphQLObjectType):
        return ResolvedType.by_type(result)
    raise _unknown_resolved_type(repr(result))


def resolved_type_name(registry: TypeRegistry, result: Any) -> str | None:
    if result is None:
        return None
    resolved = as_resolved_type(result)
    if resolved.kind == "type":
        return resolved.value.name  # type: ignore[union-attr]
    descriptor = registry.object_types.get(resolved.value)  # type: ignore[arg-type]
    if descriptor is None:
        raise _unknown_resolved_type(str(resolved.value))
    return descriptor.name


def scalar_hooks(owner: str, implementation: Mapping[str, Any]) -> dict[str, Any]:
    """Keyword arguments for GraphQLScalarType built from a scalar's implementation."""
    serialize = implementation.get("serialize")
    parse_value = _first_present(implementation, _PARSE_VALUE_KEYS)
    parse_literal = _first_present(implementation, _PARSE_LITERAL_KEYS)

    if parse_literal is not None and parse_value is None:
        message = f"{owner} {GENERATOR_SCALAR_PARSER_MISSING.message}"
        raise MissingImplementationError(Diagnostic.from_spec(GENERATOR_SCALAR_PARSER_MISSING, message))

    if parse_literal is None and parse_value is not None:
        parse_literal = _literal_parser(parse_value)

    return {
        "serialize": serialize,
        "parse_value": parse_value,
        "parse_literal": parse_literal,
    }


def _literal_parser(parse_value: Callable[[Any], Any]) -> Callable[..., Any]:
    def parse_literal(node: ValueNode, variables: dict[str, Any] | None = None) -> Any:
        return parse_value(value_from_query_literal(node, variables))

    return parse_literal


def _first_present(implementation: Mapping[str, Any], keys: tuple[str, ...]) -> Any:
    for key in keys:
        value = implementation.get(key)
        if value is not None:
            return value
    return None


def _require_callable(path: str, value: Any) -> None:
    if callable(value):
        return
    message = f"{path} {BINDER_NOT_CALLABLE.message}"
    raise MissingImplementationError(Diagnostic.from_spec(BINDER_NOT_CALLABLE, message))


def _unknown_resolved_type(name: str) -> UnresolvedTypeError:
    message = f"{name} {BINDER_UNKNOWN_RESOLVED_TYPE.message}"
    return UnresolvedTypeError(Diagnostic.from_spec(BINDER_UNKNOWN_RESOLVED_TYPE, message))
