"""AST data model for schema source."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, TypeAlias

from gqlsdl.syntax import NodeKind


@dataclass(frozen=True, slots=True)
class Name:
    kind: ClassVar[NodeKind] = NodeKind.NAME

    value: str


@dataclass(frozen=True, slots=True)
class Comment:
    """One `#` line, kept verbatim including the leading `#`."""

    kind: ClassVar[NodeKind] = NodeKind.COMMENT

    value: str

    @property
    def text(self) -> str:
        return self.value[1:]


@dataclass(frozen=True, slots=True)
class NamedType:
    kind: ClassVar[NodeKind] = NodeKind.NAMED_TYPE

    name: Name


@dataclass(frozen=True, slots=True)
class ListType:
    kind: ClassVar[NodeKind] = NodeKind.LIST_TYPE

    type: TypeNode


@dataclass(frozen=True, slots=True)
class NonNullType:
    kind: ClassVar[NodeKind] = NodeKind.NON_NULL_TYPE

    type: NamedType | ListType


@dataclass(frozen=True, slots=True)
class NumberValue:
    kind: ClassVar[NodeKind] = NodeKind.NUMBER_VALUE

    value: int | float


@dataclass(frozen=True, slots=True)
class StringValue:
    kind: ClassVar[NodeKind] = NodeKind.STRING_VALUE

    value: str


@dataclass(frozen=True, slots=True)
class BooleanValue:
    kind: ClassVar[NodeKind] = NodeKind.BOOLEAN_VALUE

    value: bool


@dataclass(frozen=True, slots=True)
class EnumValue:
    """Bare identifier used as a literal, e.g. `= RED`."""

    kind: ClassVar[NodeKind] = NodeKind.ENUM_VALUE

    name: Name


@dataclass(frozen=True, slots=True)
class ListValue:
    kind: ClassVar[NodeKind] = NodeKind.LIST_VALUE

    values: tuple[ValueNode | Comment, ...]


@dataclass(frozen=True, slots=True)
class ObjectField:
    kind: ClassVar[NodeKind] = NodeKind.OBJECT_FIELD

    name: Name
    value: ValueNode


@dataclass(frozen=True, slots=True)
class ObjectValue:
    kind: ClassVar[NodeKind] = NodeKind.OBJECT_VALUE

    fields: tuple[ObjectField | Comment, ...]


@dataclass(frozen=True, slots=True)
class InputValueDefinition:
    """Argument or input-object field: `name: Type = default`."""

    kind: ClassVar[NodeKind] = NodeKind.INPUT_VALUE_DEFINITION

    name: Name
    type: TypeNode
    default_value: ValueNode | None = None


@dataclass(frozen=True, slots=True)
class FieldDefinition:
    """Output field. `arguments` is None when no parentheses were written."""

    kind: ClassVar[NodeKind] = NodeKind.FIELD_DEFINITION

    name: Name
    arguments: tuple[InputValueDefinition | Comment, ...] | None
    type: TypeNode

    @property
    def declares_arguments(self) -> bool:
        return any(
            isinstance(argument, InputValueDefinition)
            for argument in self.arguments or ()
        )


@dataclass(frozen=True, slots=True)
class ObjectTypeDefinition:
    kind: ClassVar[NodeKind] = NodeKind.OBJECT_TYPE_DEFINITION

    name: Name
    interfaces: tuple[NamedType, ...]
    fields: tuple[FieldDefinition | Comment, ...]


@dataclass(frozen=True, slots=True)
class InterfaceTypeDefinition:
    kind: ClassVar[NodeKind] = NodeKind.INTERFACE_TYPE_DEFINITION

    name: Name
    fields: tuple[FieldDefinition | Comment, ...]


@dataclass(frozen=True, slots=True)
class UnionTypeDefinition:
    kind: ClassVar[NodeKind] = NodeKind.UNION_TYPE_DEFINITION

    name: Name
    types: tuple[NamedType, ...]


@dataclass(frozen=True, slots=True)
class ScalarTypeDefinition:
    kind: ClassVar[NodeKind] = NodeKind.SCALAR_TYPE_DEFINITION

    name: Name


@dataclass(frozen=True, slots=True)
class EnumValueDefinition:
    kind: ClassVar[NodeKind] = NodeKind.ENUM_VALUE_DEFINITION

    name: Name


@dataclass(frozen=True, slots=True)
class EnumTypeDefinition:
    kind: ClassVar[NodeKind] = NodeKind.ENUM_TYPE_DEFINITION

    name: Name
    values: tuple[EnumValueDefinition | Comment, ...]


@dataclass(frozen=True, slots=True)
class InputObjectTypeDefinition:
    kind: ClassVar[NodeKind] = NodeKind.INPUT_OBJECT_TYPE_DEFINITION

    name: Name
    fields: tuple[InputValueDefinition | Comment, ...]


@dataclass(frozen=True, slots=True)
class TypeExtensionDefinition:
    """`extend type X { ... }`; only object types can be extended."""

    kind: ClassVar[NodeKind] = NodeKind.TYPE_EXTENSION_DEFINITION

    definition: ObjectTypeDefinition


@dataclass(frozen=True, slots=True)
class Document:
    kind: ClassVar[NodeKind] = NodeKind.DOCUMENT

    definitions: tuple[Definition, ...]

    @property
    def type_definitions(self) -> tuple[TypeDefinition, ...]:
        return tuple(
            definition
            for definition in self.definitions
            if definition.kind.is_type_definition
        )


TypeNode: TypeAlias = NamedType | ListType | NonNullType
ValueNode: TypeAlias = NumberValue | StringValue | BooleanValue | EnumValue | ListValue | ObjectValue
TypeDefinition: TypeAlias = (
    ObjectTypeDefinition
    | InterfaceTypeDefinition
    | UnionTypeDefinition
    | ScalarTypeDefinition
    | EnumTypeDefinition
    | InputObjectTypeDefinition
    | TypeExtensionDefinition
)
Definition: TypeAlias = TypeDefinition | Comment
Node: TypeAlias = (
    Document
    | Definition
    | Name
    | FieldDefinition
    | InputValueDefinition
    | EnumValueDefinition
    | TypeNode
    | ValueNode
    | ObjectField
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
]
