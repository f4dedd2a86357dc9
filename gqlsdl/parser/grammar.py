"""Schema grammar routines that emit AST nodes.

Every routine returns its node, or None when the production does not start
at the current position. Once a production has committed (its leading
keyword or punctuation matched) any further mismatch is a syntax error.
"""

from __future__ import annotations

import json
import re
from collections.abc import Callable
from typing import Final, TypeVar

from gqlsdl.ast import (
    BooleanValue,
    Comment,
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
from gqlsdl.diagnostics import PARSER_INVALID_DEFINITION
from gqlsdl.scanner import Scanner

NAME_PATTERN: Final[re.Pattern[str]] = re.compile(r"[_A-Za-z][_0-9A-Za-z]*")
COMMENT_PATTERN: Final[re.Pattern[str]] = re.compile(r"#[^\n]*")
NUMBER_PATTERN: Final[re.Pattern[str]] = re.compile(r"-?(?:0|[1-9][0-9]*)(?:\.[0-9]+)?(?:[Ee][+-]?[0-9]+)?")
STRING_PATTERN: Final[re.Pattern[str]] = re.compile(r'"(?:[^"\\\n]|\\\\|\\")*"')

T = TypeVar("T")


def parse_document(scanner: Scanner) -> Document:
    definitions = parse_list(scanner, parse_type_definition)
    if not scanner.at_end():
        raise scanner.error(PARSER_INVALID_DEFINITION.message, PARSER_INVALID_DEFINITION)
    return Document(definitions=definitions)


def parse_list(scanner: Scanner, element: Callable[[Scanner], T | None]) -> tuple[T | Comment, ...]:
    """Collect comments and `element` nodes until neither matches."""
    result: list[T | Comment] = []
    while True:
        node = parse_comment(scanner) or element(scanner)
        if node is None:
            break
        result.append(node)
    return tuple(result)


def parse_comment(scanner: Scanner) -> Comment | None:
    text = scanner.match(COMMENT_PATTERN)
    if text is None:
        return None
    return Comment(value=text)


def parse_type_definition(scanner: Scanner) -> TypeDefinition | None:
    return (
        parse_object_type_definition(scanner)
        or parse_interface_type_definition(scanner)
        or parse_union_type_definition(scanner)
        or parse_scalar_type_definition(scanner)
        or parse_enum_type_definition(scanner)
        or parse_input_object_type_definition(scanner)
        or parse_type_extension_definition(scanner)
    )


def parse_object_type_definition(scanner: Scanner) -> ObjectTypeDefinition | None:
    """`type Developer implements Person { ... }`"""
    if scanner.match_keyword("type") is None:
        return None
    name = scanner.required(parse_name(scanner), "name")
    interfaces = parse_implements(scanner)
    scanner.expect("{")
    fields = parse_list(scanner, parse_field_definition)
    scanner.expect("}")
    return ObjectTypeDefinition(name=name, interfaces=interfaces, fields=fields)


def parse_implements(scanner: Scanner) -> tuple[NamedType, ...]:
    if scanner.match_keyword("implements") is None:
        return ()
    interfaces: list[NamedType] = [scanner.required(parse_named_type(scanner), "NamedType")]
    while (named := parse_named_type(scanner)) is not None:
        interfaces.append(named)
    return tuple(interfaces)


def parse_field_definition(scanner: Scanner) -> FieldDefinition | None:
    name = parse_name(scanner)
    if name is None:
        return None
    arguments = parse_arguments_definition(scanner)
    scanner.expect(":")
    type_ = scanner.required(parse_type(scanner), "type")
    return FieldDefinition(name=name, arguments=arguments, type=type_)


def parse_arguments_definition(scanner: Scanner) -> tuple[InputValueDefinition | Comment, ...] | None:
    if scanner.match("(") is None:
        return None
    arguments = parse_list(scanner, parse_input_value_definition)
    scanner.expect(")")
    return arguments


def parse_input_value_definition(scanner: Scanner) -> InputValueDefinition | None:
    name = parse_name(scanner)
    if name is None:
        return None
    scanner.expect(":")
    type_ = scanner.required(parse_type(scanner), "type")
    default_value = parse_default_value(scanner)
    return InputValueDefinition(name=name, type=type_, default_value=default_value)


def parse_interface_type_definition(scanner: Scanner) -> InterfaceTypeDefinition | None:
    """`interface Person { ... }`"""
    if scanner.match_keyword("interface") is None:
        return None
    name = scanner.required(parse_name(scanner), "Name")
    scanner.expect("{")
    fields = parse_list(scanner, parse_field_definition)
    scanner.expect("}")
    return InterfaceTypeDefinition(name=name, fields=fields)


def parse_union_type_definition(scanner: Scanner) -> UnionTypeDefinition | None:
    """`union Animal = Cat | Dog`"""
    if scanner.match_keyword("union") is None:
        return None
    name = scanner.required(parse_name(scanner), "Name")
    scanner.expect("=")
    types: list[NamedType] = [scanner.required(parse_named_type(scanner), "NamedType")]
    while scanner.match("|") is not None:
        types.append(scanner.required(parse_named_type(scanner), "NamedType"))
    return UnionTypeDefinition(name=name, types=tuple(types))


def parse_scalar_type_definition(scanner: Scanner) -> ScalarTypeDefinition | None:
    """`scalar Date`"""
    if scanner.match_keyword("scalar") is None:
        return None
    return ScalarTypeDefinition(name=scanner.required(parse_name(scanner), "Name"))


def parse_enum_type_definition(scanner: Scanner) -> EnumTypeDefinition | None:
    """`enum Site { DESKTOP MOBILE }`"""
    if scanner.match_keyword("enum") is None:
        return None
    name = scanner.required(parse_name(scanner), "Name")
    scanner.expect("{")
    values = parse_list(scanner, parse_enum_value_definition)
    scanner.expect("}")
    return EnumTypeDefinition(name=name, values=values)


def parse_enum_value_definition(scanner: Scanner) -> EnumValueDefinition | None:
    name = parse_name(scanner)
    if name is None:
        return None
    return EnumValueDefinition(name=name)


def parse_input_object_type_definition(scanner: Scanner) -> InputObjectTypeDefinition | None:
    """`input Film { ... }`"""
    if scanner.match_keyword("input") is None:
        return None
    name = scanner.required(parse_name(scanner), "Name")
    scanner.expect("{")
    fields = parse_list(scanner, parse_input_value_definition)
    scanner.expect("}")
    return InputObjectTypeDefinition(name=name, fields=fields)


def parse_type_extension_definition(scanner: Scanner) -> TypeExtensionDefinition | None:
    """`extend type Film { ... }`"""
    if scanner.match_keyword("extend") is None:
        return None
    definition = scanner.required(parse_object_type_definition(scanner), "ObjectTypeDefinition")
    return TypeExtensionDefinition(definition=definition)


def parse_name(scanner: Scanner) -> Name | None:
    value = scanner.match(NAME_PATTERN)
    if value is None:
        return None
    return Name(value=value)


def parse_named_type(scanner: Scanner) -> NamedType | None:
    name = parse_name(scanner)
    if name is None:
        return None
    return NamedType(name=name)


def parse_list_type(scanner: Scanner) -> ListType | None:
    if scanner.match("[") is None:
        return None
    inner = scanner.required(parse_type(scanner), "Type")
    scanner.expect("]")
    return ListType(type=inner)


def parse_type(scanner: Scanner) -> TypeNode | None:
    type_ = parse_named_type(scanner) or parse_list_type(scanner)
    if type_ is None:
        return None
    if scanner.match("!") is not None:
        return NonNullType(type=type_)
    return type_


def parse_default_value(scanner: Scanner) -> ValueNode | None:
    if scanner.match("=") is None:
        return None
    return scanner.required(parse_value(scanner), "Value")


def parse_value(scanner: Scanner) -> ValueNode | None:
    return (
        parse_number_value(scanner)
        or parse_string_value(scanner)
        or parse_boolean_value(scanner)
        or parse_enum_value(scanner)
        or parse_list_value(scanner)
        or parse_object_value(scanner)
    )


def parse_number_value(scanner: Scanner) -> NumberValue | None:
    text = scanner.match(NUMBER_PATTERN)
    if text is None:
        return None
    return NumberValue(value=json.loads(text))


def parse_string_value(scanner: Scanner) -> StringValue | None:
    text = scanner.match(STRING_PATTERN)
    if text is None:
        return None
    # Raw tabs are legal inside the quotes; only `\\` and `\"` are escapes.
    return StringValue(value=json.loads(text, strict=False))


def parse_boolean_value(scanner: Scanner) -> BooleanValue | None:
    if scanner.match_keyword("true") is not None:
        return BooleanValue(value=True)
    if scanner.match_keyword("false") is not None:
        return BooleanValue(value=False)
    return None


def parse_enum_value(scanner: Scanner) -> EnumValue | None:
    name = parse_name(scanner)
    if name is None:
        return None
    return EnumValue(name=name)


def parse_list_value(scanner: Scanner) -> ListValue | None:
    if scanner.match("[") is None:
        return None
    values = parse_list(scanner, parse_value)
    scanner.expect("]")
    return ListValue(values=values)


def parse_object_field(scanner: Scanner) -> ObjectField | None:
    name = parse_name(scanner)
    if name is None:
        return None
    scanner.expect(":")
    return ObjectField(name=name, value=scanner.required(parse_value(scanner), "Value"))


def parse_object_value(scanner: Scanner) -> ObjectValue | None:
    if scanner.match("{") is None:
        return None
    fields = parse_list(scanner, parse_object_field)
    scanner.expect("}")
    return ObjectValue(fields=fields)
