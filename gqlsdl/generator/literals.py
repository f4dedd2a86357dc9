"""Literal coercion for the two literal grammars the compiler meets.

Schema default values come from this package's AST; scalar `parse_literal`
hooks receive `graphql-core` query AST nodes, whose numbers arrive as
untagged source text. The two are kept as separate functions.
"""

from __future__ import annotations

import json
from typing import Any, Mapping

from graphql import (
    BooleanValueNode,
    EnumValueNode,
    FloatValueNode,
    IntValueNode,
    ListValueNode,
    NullValueNode,
    ObjectValueNode,
    StringValueNode,
    ValueNode as QueryValueNode,
    VariableNode,
)

from gqlsdl.ast import (
    BooleanValue,
    Comment,
    EnumValue,
    ListValue,
    NumberValue,
    ObjectField,
    ObjectValue,
    StringValue,
    ValueNode,
)
from gqlsdl.diagnostics import GENERATOR_UNEXPECTED_NODE, Diagnostic, UnexpectedNodeError


def value_from_schema_literal(node: ValueNode) -> Any:
    """Evaluate a default-value literal into a plain Python value.

    Enum literals become their bare names; comments inside list and object
    literals are skipped.
    """
    if isinstance(node, (NumberValue, StringValue, BooleanValue)):
        return node.value
    if isinstance(node, EnumValue):
        return node.name.value
    if isinstance(node, ListValue):
        return [
            value_from_schema_literal(item)
            for item in node.values
            if not isinstance(item, Comment)
        ]
    if isinstance(node, ObjectValue):
        return {
            item.name.value: value_from_schema_literal(item.value)
            for item in node.fields
            if isinstance(item, ObjectField)
        }
    raise _unexpected(getattr(node, "kind", type(node).__name__))


def value_from_query_literal(
    node: QueryValueNode,
    variables: Mapping[str, Any] | None = None,
) -> Any:
    """Evaluate a query-document literal into a plain Python value."""
    if isinstance(node, (IntValueNode, FloatValueNode)):
        return json.loads(node.value)
    if isinstance(node, (StringValueNode, BooleanValueNode, EnumValueNode)):
        return node.value
    if isinstance(node, NullValueNode):
        return None
    if isinstance(node, ListValueNode):
        return [value_from_query_literal(item, variables) for item in node.values]
    if isinstance(node, ObjectValueNode):
        return {
            item.name.value: value_from_query_literal(item.value, variables)
            for item in node.fields
        }
    if isinstance(node, VariableNode):
        return (variables or {}).get(node.name.value)
    raise _unexpected(getattr(node, "kind", type(node).__name__))


def _unexpected(kind: object) -> UnexpectedNodeError:
    message = f"{GENERATOR_UNEXPECTED_NODE.message} {kind}"
    return UnexpectedNodeError(Diagnostic.from_spec(GENERATOR_UNEXPECTED_NODE, message))
