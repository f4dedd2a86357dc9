"""JSON-shaped dumps of AST nodes."""

from __future__ import annotations

from dataclasses import fields
from typing import Any

from gqlsdl.ast.model import Node


def dump_node(node: Node) -> dict[str, Any]:
    """Render a node as `{"kind": ..., <field>: ...}` with nested nodes dumped too."""
    result: dict[str, Any] = {"kind": str(node.kind)}
    for item in fields(node):
        result[item.name] = _dump_value(getattr(node, item.name))
    return result


def _dump_value(value: Any) -> Any:
    if isinstance(value, tuple):
        return [_dump_value(item) for item in value]
    if hasattr(value, "kind") and hasattr(value, "__dataclass_fields__"):
        return dump_node(value)
    return value
