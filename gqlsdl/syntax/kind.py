"""Syntax kinds of schema AST nodes."""

from enum import StrEnum


class NodeKind(StrEnum):
    """Schema language node vocabulary.

    Values are the node names used in dumped ASTs.
    """

    DOCUMENT = "Document"
    COMMENT = "Comment"

    # Definitions
    OBJECT_TYPE_DEFINITION = "ObjectTypeDefinition"
    INTERFACE_TYPE_DEFINITION = "InterfaceTypeDefinition"
    UNION_TYPE_DEFINITION = "UnionTypeDefinition"
    SCALAR_TYPE_DEFINITION = "ScalarTypeDefinition"
    ENUM_TYPE_DEFINITION = "EnumTypeDefinition"
    ENUM_VALUE_DEFINITION = "EnumValueDefinition"
    INPUT_OBJECT_TYPE_DEFINITION = "InputObjectTypeDefinition"
    FIELD_DEFINITION = "FieldDefinition"
    INPUT_VALUE_DEFINITION = "InputValueDefinition"
    TYPE_EXTENSION_DEFINITION = "TypeExtensionDefinition"

    # Names and type references
    NAME = "Name"
    NAMED_TYPE = "NamedType"
    LIST_TYPE = "ListType"
    NON_NULL_TYPE = "NonNullType"

    # Literal values
    NUMBER_VALUE = "NumberValue"
    STRING_VALUE = "StringValue"
    BOOLEAN_VALUE = "BooleanValue"
    ENUM_VALUE = "EnumValue"
    LIST_VALUE = "ListValue"
    OBJECT_VALUE = "ObjectValue"
    OBJECT_FIELD = "ObjectField"

    @property
    def is_type_definition(self) -> bool:
        return self in (
            NodeKind.OBJECT_TYPE_DEFINITION,
            NodeKind.INTERFACE_TYPE_DEFINITION,
            NodeKind.UNION_TYPE_DEFINITION,
            NodeKind.SCALAR_TYPE_DEFINITION,
            NodeKind.ENUM_TYPE_DEFINITION,
            NodeKind.INPUT_OBJECT_TYPE_DEFINITION,
            NodeKind.TYPE_EXTENSION_DEFINITION,
        )

    @property
    def is_type_reference(self) -> bool:
        return self in (NodeKind.NAMED_TYPE, NodeKind.LIST_TYPE, NodeKind.NON_NULL_TYPE)

    @property
    def is_value(self) -> bool:
        return self in (
            NodeKind.NUMBER_VALUE,
            NodeKind.STRING_VALUE,
            NodeKind.BOOLEAN_VALUE,
            NodeKind.ENUM_VALUE,
            NodeKind.LIST_VALUE,
            NodeKind.OBJECT_VALUE,
        )
