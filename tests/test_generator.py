import asyncio
import re

import pytest
from graphql import (
    GraphQLEnumType,
    GraphQLInputObjectType,
    GraphQLInt,
    GraphQLInterfaceType,
    GraphQLList,
    GraphQLNonNull,
    GraphQLString,
    Undefined,
)

from gqlsdl.ast import Comment, Document, Name, ScalarTypeDefinition
from gqlsdl.diagnostics import (
    DuplicateDefinitionError,
    MissingImplementationError,
    UnexpectedNodeError,
    UnresolvedTypeError,
)
from gqlsdl.generator import (
    DuplicatePolicy,
    GeneratorOptions,
    MissingEnumValuePolicy,
    TypePosition,
    generate,
)
from gqlsdl.parser import parse_schema
from tests._shared_cases import PARSER_CASES, SchemaCase, case_id


def _compile(source: str, implementations=None, options: GeneratorOptions | None = None):
    return generate(parse_schema(source), implementations, options=options)


@pytest.mark.parametrize(
    "case",
    [case for case in PARSER_CASES if case.compiles_without_implementations],
    ids=case_id,
)
def test_shared_cases_compile_without_implementations(case: SchemaCase) -> None:
    registry = _compile(case.source)

    for named in registry:
        assert named.name


def test_forward_and_circular_references_resolve() -> None:
    registry = _compile(
        """
        type Author {
          posts: [Post]
        }
        type Post {
          author: Author
        }
        """
    )

    author = registry.object_types["Author"]
    post = registry.object_types["Post"]
    posts_type = author.fields["posts"].type
    assert isinstance(posts_type, GraphQLList)
    assert posts_type.of_type is post
    assert post.fields["author"].type is author


def test_union_declared_before_members() -> None:
    registry = _compile(
        """
        union SearchResult = Photo | Person
        type Photo {
          width: Int
        }
        type Person {
          name: String
        }
        """
    )

    union = registry.union_types["SearchResult"]
    assert [member.name for member in union.types] == ["Photo", "Person"]
    assert union.types[0] is registry.object_types["Photo"]


def test_interfaces_are_linked_regardless_of_order() -> None:
    registry = _compile(
        """
        type Dog implements Pet {
          name: String
        }
        interface Pet {
          name: String
        }
        """
    )

    dog = registry.object_types["Dog"]
    assert dog.interfaces == (registry.interface_types["Pet"],)
    assert isinstance(dog.interfaces[0], GraphQLInterfaceType)


def test_undefined_interface_is_rejected() -> None:
    with pytest.raises(UnresolvedTypeError, match="Pet is not defined."):
        _compile("type Dog implements Pet {\n  name: String\n}\n")


def test_unknown_type_is_not_implemented() -> None:
    with pytest.raises(UnresolvedTypeError, match="Missing is not implemented.") as info:
        _compile("type A {\n  b: Missing\n}\n")

    assert info.value.code == "GENERATOR_TYPE_NOT_IMPLEMENTED"


def test_object_type_in_input_position_is_rejected() -> None:
    source = """
    type Point {
      x: Int
    }
    type Query {
      near(point: Point): Point
    }
    """
    implementations = {"Query": {"near": lambda source, info, point: point}}

    with pytest.raises(UnresolvedTypeError, match="Point is not implemented."):
        _compile(source, implementations)


def test_wrapped_object_type_in_input_position_is_rejected() -> None:
    source = """
    type Point {
      x: Int
    }
    type Query {
      near(points: [Point!]): Int
    }
    """
    implementations = {"Query": {"near": lambda source, info, points: 0}}

    with pytest.raises(UnresolvedTypeError, match="Point is not implemented."):
        _compile(source, implementations)


def test_output_position_accepts_input_types() -> None:
    registry = _compile("input Filter {\n  a: Int\n}\ntype Query {\n  last: Filter\n}\n")

    assert registry.object_types["Query"].fields["last"].type is registry.input_types["Filter"]


def test_lookup_namespaces_differ_by_position() -> None:
    registry = _compile("type Point {\n  x: Int\n}\ninput Shape {\n  y: Int\n}\n")

    assert registry.lookup("Point", TypePosition.OUTPUT) is registry.object_types["Point"]
    assert registry.lookup("Point", TypePosition.INPUT) is None
    assert registry.lookup("Shape", TypePosition.INPUT) is registry.input_types["Shape"]
    assert registry.lookup("String", TypePosition.INPUT) is GraphQLString


def test_calculated_field_needs_implementation() -> None:
    source = "type Query {\n  add(a: Int, b: Int): Int\n}\n"

    with pytest.raises(
        MissingImplementationError,
        match=re.escape("Query.add is calculated (i.e. it accepts arguments) but does not have an implementation"),
    ):
        _compile(source)

    registry = _compile(source, {"Query": {"add": lambda source, info, a, b: a + b}})
    add = registry.object_types["Query"].fields["add"]
    assert set(add.args) == {"a", "b"}
    assert asyncio.run(add.resolve(None, None, a=2, b=3)) == 5


def test_interface_fields_with_arguments_need_no_implementation() -> None:
    registry = _compile("interface Shape {\n  area(scale: Float): Float\n}\n")

    area = registry.interface_types["Shape"].fields["area"]
    assert area.resolve is None
    assert "scale" in area.args


def test_empty_parentheses_do_not_make_a_field_calculated() -> None:
    registry = _compile("type Query {\n  now(): String\n}\n")

    now = registry.object_types["Query"].fields["now"]
    assert now.args == {}
    assert now.resolve is None


def test_wrapper_composition_matches_source() -> None:
    registry = _compile("type Query {\n  tags: [String!]!\n  loose: [String]\n  count: Int!\n}\n")
    fields = registry.object_types["Query"].fields

    tags = fields["tags"].type
    assert isinstance(tags, GraphQLNonNull)
    assert isinstance(tags.of_type, GraphQLList)
    assert isinstance(tags.of_type.of_type, GraphQLNonNull)
    assert tags.of_type.of_type.of_type is GraphQLString

    loose = fields["loose"].type
    assert isinstance(loose, GraphQLList)
    assert loose.of_type is GraphQLString

    count = fields["count"].type
    assert isinstance(count, GraphQLNonNull)
    assert count.of_type is GraphQLInt


def test_arguments_and_input_fields_carry_defaults() -> None:
    source = """
    enum Order {
      ASC
      DESC
    }
    input Page {
      size: Int = 20
      order: Order = DESC
      tags: [String] = ["a", "b"]
      cursor: String
    }
    type Query {
      items(page: Page, limit: Int = 5): [String]
    }
    """
    registry = _compile(source, {"Query": {"items": lambda source, info, **arguments: []}})

    page = registry.input_types["Page"]
    assert isinstance(page, GraphQLInputObjectType)
    assert page.fields["size"].default_value == 20
    assert page.fields["order"].default_value == "DESC"
    assert page.fields["tags"].default_value == ["a", "b"]
    assert page.fields["cursor"].default_value is Undefined

    items = registry.object_types["Query"].fields["items"]
    assert items.args["page"].type is page
    assert items.args["limit"].default_value == 5


def test_resolver_contract_end_to_end() -> None:
    source = "type Person {\n  name: String\n  age: Int\n}\ntype Query {\n  person: Person\n}\n"
    implementations = {"Query": {"person": lambda source, info: {"name": "Matt"}}}

    registry = _compile(source, implementations)

    person = registry.object_types["Query"].fields["person"]
    assert person.type is registry.object_types["Person"]
    assert asyncio.run(person.resolve(None, None)) == {"name": "Matt"}
    assert registry.object_types["Person"].fields["name"].resolve is None


def test_enum_values_come_from_implementation() -> None:
    source = "enum Episode {\n  NEWHOPE\n  EMPIRE\n  JEDI\n}\n"
    registry = _compile(source, {"Episode": {"NEWHOPE": 4, "EMPIRE": 5, "JEDI": 6}})

    episode = registry.enum_types["Episode"]
    assert isinstance(episode, GraphQLEnumType)
    assert {name: value.value for name, value in episode.values.items()} == {
        "NEWHOPE": 4,
        "EMPIRE": 5,
        "JEDI": 6,
    }


def test_enum_without_implementation_uses_names() -> None:
    registry = _compile("enum Axis {\n  X\n  Y\n}\n", options=GeneratorOptions.strict())

    assert registry.enum_types["Axis"].values["X"].value == "X"


def test_missing_enum_value_follows_policy() -> None:
    source = "enum Episode {\n  NEWHOPE\n  EMPIRE\n}\n"
    implementations = {"Episode": {"NEWHOPE": 4}}

    registry = _compile(source, implementations)
    assert registry.enum_types["Episode"].values["EMPIRE"].value == "EMPIRE"

    strict = GeneratorOptions(missing_enum_values=MissingEnumValuePolicy.ERROR)
    with pytest.raises(MissingImplementationError, match="Episode.EMPIRE has no backing value"):
        _compile(source, implementations, strict)


def test_duplicate_type_follows_policy() -> None:
    source = "type A {\n  x: Int\n}\ntype A {\n  y: Int\n}\n"

    with pytest.raises(DuplicateDefinitionError, match="A is defined more than once."):
        _compile(source)

    registry = _compile(source, options=GeneratorOptions(duplicate_definitions=DuplicatePolicy.REPLACE))
    assert set(registry.object_types["A"].fields) == {"y"}


def test_duplicate_across_kinds_is_replaced_under_lenient_options() -> None:
    source = "union A = B\ntype B {\n  x: Int\n}\nscalar A\n"

    with pytest.raises(DuplicateDefinitionError):
        _compile(source)

    registry = _compile(source, options=GeneratorOptions.lenient())
    assert "A" in registry.scalar_types
    assert "A" not in registry.union_types


def test_extension_adds_fields_and_interfaces() -> None:
    source = """
    interface Node {
      id: ID
    }
    type Film {
      title: String
    }
    extend type Film implements Node {
      id: ID
      # Release year.
      year: Int
    }
    """
    registry = _compile(source)

    film = registry.object_types["Film"]
    assert list(film.fields) == ["title", "id", "year"]
    assert film.fields["year"].description == "Release year."
    assert film.interfaces == (registry.interface_types["Node"],)


def test_extension_field_collision_follows_policy() -> None:
    source = "type Film {\n  title: String\n}\nextend type Film {\n  title: Int\n}\n"

    with pytest.raises(DuplicateDefinitionError, match="Film.title is defined more than once."):
        _compile(source)

    registry = _compile(source, options=GeneratorOptions.lenient())
    assert registry.object_types["Film"].fields["title"].type is GraphQLInt


def test_extension_of_undefined_type_is_rejected() -> None:
    with pytest.raises(UnresolvedTypeError, match="Ghost cannot be extended"):
        _compile("extend type Ghost {\n  a: Int\n}\n")

    with pytest.raises(UnresolvedTypeError, match="Shape cannot be extended"):
        _compile("interface Shape {\n  a: Int\n}\nextend type Shape {\n  b: Int\n}\n")


def test_extension_fields_with_arguments_need_implementation() -> None:
    source = "type Query {\n  a: Int\n}\nextend type Query {\n  b(x: Int): Int\n}\n"

    with pytest.raises(MissingImplementationError):
        _compile(source)

    registry = _compile(source, {"Query": {"b": lambda source, info, x: x}})
    assert asyncio.run(registry.object_types["Query"].fields["b"].resolve(None, None, x=3)) == 3


def test_scalar_hooks_are_attached() -> None:
    registry = _compile("scalar Upper\n", {"Upper": {"serialize": str.upper, "parse_value": str.lower}})

    upper = registry.scalar_types["Upper"]
    assert upper.serialize("abc") == "ABC"
    assert upper.parse_value("ABC") == "abc"


def test_unexpected_document_node_is_rejected() -> None:
    document = Document(definitions=(Comment(value="# x"), Name(value="stray")))  # type: ignore[arg-type]

    with pytest.raises(UnexpectedNodeError, match="Unexpected node type Name"):
        generate(document)


def test_generate_accepts_hand_built_documents() -> None:
    document = Document(definitions=(ScalarTypeDefinition(name=Name(value="Date")),))

    registry = generate(document)

    assert registry.scalar_types["Date"].name == "Date"
    assert registry.lookup("Date", TypePosition.INPUT) is registry.scalar_types["Date"]
