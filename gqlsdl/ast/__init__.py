"""Typed AST of schema source."""

from gqlsdl.ast.dump import dump_node
from gqlsdl.ast.model import (
    BooleanValue,
    Comment,
    Definition,
    Document,
    EnumTypeDefinition,
    EnumValue,
    EnumValueDefinition,
    FieldDefinition,
    InputObjectTypeDefinition,
    InputValueDefinition,
    InterfaceTypeDefinition,
    ListType,
    ListValue,
    Name,
    NamedType,
    Node,
    NonNullType,
    NumberValue,
    ObjectField,
    ObjectTypeDefinition,
    ObjectValue,
    ScalarTypeDefinition,
    StringValue,
    TypeDefinition,
    TypeExtensionDefinition,
    TypeNode,
    UnionTypeDefinition,
    ValueNode,
)

__all__ = [
    "BooleanValue",
    "Comment",
    "Definition",
    "Document",
    "EnumTypeDefinition",
    "EnumValue",
    "EnumValueDefinition",
    "FieldDefinition",
    "InputObjectTypeDefinition",
    "InputValueDefinition",
    "InterfaceTypeDefinition",
    "ListType",
    "ListValue",
    "Name",
    "NamedType",
    "Node",
    "NonNullType",
    "NumberValue",
    "ObjectField",
    "ObjectTypeDefinition",
    "ObjectValue",
    "ScalarTypeDefinition",
    "StringValue",
    "TypeDefinition",
    "TypeExtensionDefinition",
    "TypeNode",
    "UnionTypeDefinition",
    "ValueNode",
    "dump_node",
]
