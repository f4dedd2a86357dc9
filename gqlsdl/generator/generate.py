"""Compile a schema Document into a registry of graphql-core type descriptors.

Construction runs in three phases over one document:

1. object, interface, scalar, enum and input types are registered in
   document order. Object, interface and input types get an empty field
   table behind a thunk; descriptions are taken here, in source order.
2. unions are built once every other name is known, so members may be
   declared before or after the union.
3. extensions are merged and every field table is populated. All reference
   and binding errors surface here, before the registry is handed out.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from graphql import (
    GraphQLArgument,
    GraphQLEnumType,
    GraphQLEnumValue,
    GraphQLField,
    GraphQLInputField,
    GraphQLInputObjectType,
    GraphQLInterfaceType,
    GraphQLList,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLScalarType,
    GraphQLType,
    GraphQLUnionType,
    Undefined,
)

from gqlsdl.ast import (
    Comment,
    Document,
    EnumTypeDefinition,
    EnumValueDefinition,
    FieldDefinition,
    InputObjectTypeDefinition,
    InputValueDefinition,
    InterfaceTypeDefinition,
    ListType,
    NamedType,
    NonNullType,
    ObjectTypeDefinition,
    ScalarTypeDefinition,
    TypeExtensionDefinition,
    TypeNode,
    UnionTypeDefinition,
)
from gqlsdl.diagnostics import (
    GENERATOR_DUPLICATE_DEFINITION,
    GENERATOR_EXTENSION_TARGET_NOT_DEFINED,
    GENERATOR_INTERFACE_NOT_DEFINED,
    GENERATOR_MISSING_ENUM_VALUE,
    GENERATOR_MISSING_IMPLEMENTATION,
    GENERATOR_TYPE_NOT_IMPLEMENTED,
    GENERATOR_UNEXPECTED_NODE,
    Diagnostic,
    DuplicateDefinitionError,
    MissingImplementationError,
    UnexpectedNodeError,
    UnresolvedTypeError,
)
from gqlsdl.generator.binding import (
    Implementations,
    bind_resolver,
    bind_type_resolver,
    implementation_for,
    scalar_hooks,
)
from gqlsdl.generator.descriptions import DescriptionAccumulator
from gqlsdl.generator.literals import value_from_schema_literal
from gqlsdl.generator.options import DuplicatePolicy, GeneratorOptions, MissingEnumValuePolicy
from gqlsdl.generator.registry import TypePosition, TypeRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class _DescribedInputValue:
    node: InputValueDefinition
    description: str | None


@dataclass(frozen=True, slots=True)
class _DescribedField:
    node: FieldDefinition
    description: str | None
    arguments: tuple[_DescribedInputValue, ...]


@dataclass(slots=True)
class _FieldPlan:
    """Field table handle of one object or interface, filled in phase 3."""

    table: dict[str, GraphQLField]
    fields: list[_DescribedField]
    is_interface: bool = False
    interfaces: list[NamedType] = field(default_factory=list)
    interface_table: list[GraphQLInterfaceType] = field(default_factory=list)


@dataclass(slots=True)
class _InputPlan:
    table: dict[str, GraphQLInputField]
    fields: tuple[_DescribedInputValue, ...]


@dataclass(frozen=True, slots=True)
class _Extension:
    target: str
    fields: tuple[_DescribedField, ...]
    interfaces: tuple[NamedType, ...]


class SchemaGenerator:
    """One compilation of one document; not reusable across documents."""

    def __init__(
        self,
        document: Document,
        implementations: Implementations | None = None,
        options: GeneratorOptions | None = None,
    ) -> None:
        self._document = document
        self._implementations: Implementations = implementations or {}
        self._options = options or GeneratorOptions()
        self._registry = TypeRegistry()
        self._descriptions = DescriptionAccumulator()
        self._field_plans: dict[str, _FieldPlan] = {}
        self._input_plans: dict[str, _InputPlan] = {}
        self._pending_unions: dict[str, tuple[UnionTypeDefinition, str | None]] = {}
        self._extensions: list[_Extension] = []

    def generate(self) -> TypeRegistry:
        for definition in self._document.definitions:
            self._register(definition)

        # Unions wait until every member name can be dereferenced.
        for node, description in self._pending_unions.values():
            self._build_union(node, description)

        for extension in self._extensions:
            self._apply_extension(extension)
        for name, plan in self._field_plans.items():
            self._populate_fields(name, plan)
        for name, input_plan in self._input_plans.items():
            input_plan.table.update(self._build_input_fields(name, input_plan.fields))

        return self._registry

    # Phase 1

    def _register(self, definition: Any) -> None:
        if isinstance(definition, Comment):
            self._descriptions.push(definition)
        elif isinstance(definition, ObjectTypeDefinition):
            self._register_object(definition)
        elif isinstance(definition, InterfaceTypeDefinition):
            self._register_interface(definition)
        elif isinstance(definition, UnionTypeDefinition):
            self._register_union(definition)
        elif isinstance(definition, ScalarTypeDefinition):
            self._register_scalar(definition)
        elif isinstance(definition, EnumTypeDefinition):
            self._register_enum(definition)
        elif isinstance(definition, InputObjectTypeDefinition):
            self._register_input_object(definition)
        elif isinstance(definition, TypeExtensionDefinition):
            self._register_extension(definition)
        else:
            raise _unexpected(definition)

    def _register_object(self, node: ObjectTypeDefinition) -> None:
        name = node.name.value
        description = self._descriptions.take()
        fields = self._describe_fields(node.fields)
        self._claim(name)

        plan = _FieldPlan(table={}, fields=list(fields), interfaces=list(node.interfaces))
        table = plan.table
        interface_table = plan.interface_table
        self._field_plans[name] = plan
        self._registry.object_types[name] = GraphQLObjectType(
            name=name,
            description=description,
            fields=lambda: table,
            interfaces=lambda: tuple(interface_table),
        )
        logger.debug("registered object type %s", name)

    def _register_interface(self, node: InterfaceTypeDefinition) -> None:
        name = node.name.value
        description = self._descriptions.take()
        fields = self._describe_fields(node.fields)
        self._claim(name)

        plan = _FieldPlan(table={}, fields=list(fields), is_interface=True)
        table = plan.table
        self._field_plans[name] = plan
        self._registry.interface_types[name] = GraphQLInterfaceType(
            name=name,
            description=description,
            fields=lambda: table,
            resolve_type=bind_type_resolver(
                name,
                implementation_for(self._implementations, name),
                self._registry,
            ),
        )
        logger.debug("registered interface type %s", name)

    def _register_union(self, node: UnionTypeDefinition) -> None:
        name = node.name.value
        description = self._descriptions.take()
        self._claim(name)
        self._pending_unions[name] = (node, description)
        logger.debug("deferred union type %s", name)

    def _register_scalar(self, node: ScalarTypeDefinition) -> None:
        name = node.name.value
        description = self._descriptions.take()
        self._claim(name)
        self._registry.scalar_types[name] = GraphQLScalarType(
            name=name,
            description=description,
            **scalar_hooks(name, implementation_for(self._implementations, name)),
        )
        logger.debug("registered scalar type %s", name)

    def _register_enum(self, node: EnumTypeDefinition) -> None:
        name = node.name.value
        description = self._descriptions.take()
        implementation = implementation_for(self._implementations, name)

        values: dict[str, GraphQLEnumValue] = {}
        for entry in node.values:
            if isinstance(entry, Comment):
                self._descriptions.push(entry)
                continue
            if not isinstance(entry, EnumValueDefinition):
                raise _unexpected(entry)
            value_name = entry.name.value
            values[value_name] = GraphQLEnumValue(
                self._enum_value(name, value_name, implementation),
                description=self._descriptions.take(),
            )
        self._descriptions.discard()

        self._claim(name)
        self._registry.enum_types[name] = GraphQLEnumType(
            name=name,
            values=values,
            description=description,
        )
        logger.debug("registered enum type %s", name)

    def _register_input_object(self, node: InputObjectTypeDefinition) -> None:
        name = node.name.value
        description = self._descriptions.take()
        fields = self._describe_input_values(node.fields)
        self._claim(name)

        plan = _InputPlan(table={}, fields=fields)
        table = plan.table
        self._input_plans[name] = plan
        self._registry.input_types[name] = GraphQLInputObjectType(
            name=name,
            description=description,
            fields=lambda: table,
        )
        logger.debug("registered input type %s", name)

    def _register_extension(self, node: TypeExtensionDefinition) -> None:
        # Extensions carry no description of their own.
        self._descriptions.discard()
        definition = node.definition
        self._extensions.append(
            _Extension(
                target=definition.name.value,
                fields=self._describe_fields(definition.fields),
                interfaces=definition.interfaces,
            )
        )

    def _describe_fields(self, entries: tuple[FieldDefinition | Comment, ...]) -> tuple[_DescribedField, ...]:
        described: list[_DescribedField] = []
        for entry in entries:
            if isinstance(entry, Comment):
                self._descriptions.push(entry)
                continue
            if not isinstance(entry, FieldDefinition):
                raise _unexpected(entry)
            description = self._descriptions.take()
            described.append(
                _DescribedField(
                    node=entry,
                    description=description,
                    arguments=self._describe_input_values(entry.arguments or ()),
                )
            )
        self._descriptions.discard()
        return tuple(described)

    def _describe_input_values(
        self,
        entries: tuple[InputValueDefinition | Comment, ...],
    ) -> tuple[_DescribedInputValue, ...]:
        described: list[_DescribedInputValue] = []
        for entry in entries:
            if isinstance(entry, Comment):
                self._descriptions.push(entry)
                continue
            if not isinstance(entry, InputValueDefinition):
                raise _unexpected(entry)
            described.append(_DescribedInputValue(node=entry, description=self._descriptions.take()))
        self._descriptions.discard()
        return tuple(described)

    def _enum_value(self, owner: str, value_name: str, implementation: Mapping[str, Any]) -> Any:
        if value_name in implementation:
            return implementation[value_name]
        if implementation and self._options.missing_enum_values == MissingEnumValuePolicy.ERROR:
            message = f"{owner}.{value_name} {GENERATOR_MISSING_ENUM_VALUE.message}"
            raise MissingImplementationError(Diagnostic.from_spec(GENERATOR_MISSING_ENUM_VALUE, message))
        return value_name

    def _claim(self, name: str) -> None:
        if not (self._registry.defines(name) or name in self._pending_unions):
            return
        if self._options.duplicate_definitions == DuplicatePolicy.ERROR:
            raise _duplicate(name)
        logger.debug("replacing earlier definition of %s", name)
        self._registry.forget(name)
        self._pending_unions.pop(name, None)
        self._field_plans.pop(name, None)
        self._input_plans.pop(name, None)

    # Phase 2

    def _build_union(self, node: UnionTypeDefinition, description: str | None) -> None:
        name = node.name.value
        types = tuple(self._resolve(member, TypePosition.OUTPUT) for member in node.types)
        self._registry.union_types[name] = GraphQLUnionType(
            name=name,
            types=types,  # type: ignore[arg-type]
            resolve_type=bind_type_resolver(
                name,
                implementation_for(self._implementations, name),
                self._registry,
            ),
            description=description,
        )
        logger.debug("registered union type %s with %d members", name, len(types))

    # Phase 3

    def _apply_extension(self, extension: _Extension) -> None:
        plan = self._field_plans.get(extension.target)
        if plan is None or plan.is_interface:
            message = f"{extension.target} {GENERATOR_EXTENSION_TARGET_NOT_DEFINED.message}"
            raise UnresolvedTypeError(Diagnostic.from_spec(GENERATOR_EXTENSION_TARGET_NOT_DEFINED, message))
        plan.fields.extend(extension.fields)
        plan.interfaces.extend(extension.interfaces)
        logger.debug("extended %s with %d fields", extension.target, len(extension.fields))

    def _populate_fields(self, name: str, plan: _FieldPlan) -> None:
        plan.interface_table.extend(self._interface(named) for named in plan.interfaces)
        plan.table.update(self._build_fields(name, plan.fields, concrete=not plan.is_interface))

    def _build_fields(
        self,
        type_name: str,
        described: list[_DescribedField],
        *,
        concrete: bool,
    ) -> dict[str, GraphQLField]:
        implementation = implementation_for(self._implementations, type_name)
        fields: dict[str, GraphQLField] = {}
        for item in described:
            field_name = item.node.name.value
            resolver = implementation.get(field_name) if concrete else None
            if concrete and resolver is None and item.node.declares_arguments:
                message = f"{type_name}.{field_name} {GENERATOR_MISSING_IMPLEMENTATION.message}"
                raise MissingImplementationError(
                    Diagnostic.from_spec(GENERATOR_MISSING_IMPLEMENTATION, message)
                )
            if field_name in fields:
                self._check_redefinition(f"{type_name}.{field_name}")

            arguments = {
                argument.node.name.value: _argument(
                    self._resolve(argument.node.type, TypePosition.INPUT),
                    argument.node,
                    description=argument.description,
                )
                for argument in item.arguments
            }
            fields[field_name] = GraphQLField(
                self._resolve(item.node.type, TypePosition.OUTPUT),  # type: ignore[arg-type]
                args=arguments or None,
                resolve=bind_resolver(type_name, field_name, resolver) if resolver is not None else None,
                description=item.description,
            )
        return fields

    def _build_input_fields(
        self,
        type_name: str,
        described: tuple[_DescribedInputValue, ...],
    ) -> dict[str, GraphQLInputField]:
        fields: dict[str, GraphQLInputField] = {}
        for item in described:
            field_name = item.node.name.value
            if field_name in fields:
                self._check_redefinition(f"{type_name}.{field_name}")
            input_type = self._resolve(item.node.type, TypePosition.INPUT)
            fields[field_name] = GraphQLInputField(
                input_type,  # type: ignore[arg-type]
                default_value=_default_value(item.node, input_type),
                description=item.description,
            )
        return fields

    def _check_redefinition(self, path: str) -> None:
        if self._options.duplicate_definitions == DuplicatePolicy.ERROR:
            raise _duplicate(path)
        logger.debug("replacing earlier definition of %s", path)

    def _interface(self, named: NamedType) -> GraphQLInterfaceType:
        interface = self._registry.interface_types.get(named.name.value)
        if interface is None:
            message = f"{named.name.value} {GENERATOR_INTERFACE_NOT_DEFINED.message}"
            raise UnresolvedTypeError(Diagnostic.from_spec(GENERATOR_INTERFACE_NOT_DEFINED, message))
        return interface

    def _resolve(self, node: TypeNode, position: TypePosition) -> GraphQLType:
        """Resolve a type reference; wrappers keep the position of the outer reference."""
        if isinstance(node, NamedType):
            named = self._registry.lookup(node.name.value, position)
            if named is None:
                message = f"{node.name.value} {GENERATOR_TYPE_NOT_IMPLEMENTED.message}"
                raise UnresolvedTypeError(Diagnostic.from_spec(GENERATOR_TYPE_NOT_IMPLEMENTED, message))
            return named
        if isinstance(node, ListType):
            return GraphQLList(self._resolve(node.type, position))
        if isinstance(node, NonNullType):
            return GraphQLNonNull(self._resolve(node.type, position))  # type: ignore[arg-type]
        raise _unexpected(node)


def generate(
    document: Document,
    implementations: Implementations | None = None,
    *,
    options: GeneratorOptions | None = None,
) -> TypeRegistry:
    """Compile `document` against `implementations`; raises SchemaError on failure."""
    return SchemaGenerator(document, implementations, options).generate()


def _argument(type_: GraphQLType, node: InputValueDefinition, description: str | None) -> GraphQLArgument:
    return GraphQLArgument(
        type_,  # type: ignore[arg-type]
        default_value=_default_value(node, type_),
        description=description,
    )


def _default_value(node: InputValueDefinition, type_: GraphQLType) -> Any:
    if node.default_value is None:
        return Undefined
    return _enum_backing_values(value_from_schema_literal(node.default_value), type_)


def _enum_backing_values(value: Any, type_: GraphQLType) -> Any:
    """Replace enum names in a default with the values the enum is backed by.

    Defaults are stored as internal values, the same form resolvers receive
    for supplied arguments. Names nested inside input-object literals are
    left as written.
    """
    if isinstance(type_, GraphQLNonNull):
        return _enum_backing_values(value, type_.of_type)
    if isinstance(type_, GraphQLList):
        if isinstance(value, list):
            return [_enum_backing_values(item, type_.of_type) for item in value]
        return _enum_backing_values(value, type_.of_type)
    if isinstance(type_, GraphQLEnumType) and isinstance(value, str) and value in type_.values:
        return type_.values[value].value
    return value


def _duplicate(name: str) -> DuplicateDefinitionError:
    message = f"{name} {GENERATOR_DUPLICATE_DEFINITION.message}"
    return DuplicateDefinitionError(Diagnostic.from_spec(GENERATOR_DUPLICATE_DEFINITION, message))


def _unexpected(node: object) -> UnexpectedNodeError:
    kind = getattr(node, "kind", type(node).__name__)
    message = f"{GENERATOR_UNEXPECTED_NODE.message} {kind}"
    return UnexpectedNodeError(Diagnostic.from_spec(GENERATOR_UNEXPECTED_NODE, message))
