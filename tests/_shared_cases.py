"""Centralized schema source cases used across parser/generator tests."""

from __future__ import annotations

from dataclasses import dataclass
import textwrap


@dataclass(frozen=True, slots=True)
class SchemaCase:
    name: str
    source: str
    compiles_without_implementations: bool = True


def _dedent(text: str) -> str:
    return textwrap.dedent(text).lstrip()


PARSER_CASES: tuple[SchemaCase, ...] = (
    SchemaCase(name="empty_document", source=""),
    SchemaCase(name="comment_only", source="# nothing to see here\n"),
    SchemaCase(name="single_scalar", source="scalar Date\n"),
    SchemaCase(
        name="commas_are_insignificant",
        source="type Point { x: Int, y: Int, }\nenum Axis { X, Y, Z }\n",
    ),
    SchemaCase(name="dense_punctuation", source="type A{b(c:Int=1):[A!]!}\n", compiles_without_implementations=False),
    SchemaCase(
        name="forward_and_circular_references",
        source=_dedent(
            """
            type Author {
              posts: [Post]
            }
            type Post {
              author: Author
            }
            """
        ),
    ),
    SchemaCase(
        name="union_before_members",
        source=_dedent(
            """
            union SearchResult = Photo | Person
            type Photo {
              width: Int
            }
            type Person {
              name: String
            }
            """
        ),
    ),
    SchemaCase(
        name="interface_after_implementor",
        source=_dedent(
            """
            type Dog implements Pet Named {
              name: String
            }
            interface Pet {
              name: String
            }
            interface Named {
              name: String
            }
            """
        ),
    ),
    SchemaCase(
        name="input_defaults",
        source=_dedent(
            """
            enum Order {
              ASC
              DESC
            }
            input Page {
              size: Int = 20
              order: Order = ASC
              cursor: [String] = [
                # start
                "a"
              ]
            }
            """
        ),
    ),
    SchemaCase(
        name="type_extension",
        source=_dedent(
            """
            type Film {
              title: String
            }
            extend type Film {
              year: Int
            }
            """
        ),
    ),
    SchemaCase(
        name="keyword_prefixed_names",
        source=_dedent(
            """
            type typeRegistry {
              enumerated: Boolean
              interfaces: [String]
            }
            """
        ),
    ),
)

INVALID_CASES: tuple[SchemaCase, ...] = (
    SchemaCase(name="missing_type_name", source="type {\n  a: Int\n}\n"),
    SchemaCase(name="unclosed_block", source="type A {\n  a: Int\n"),
    SchemaCase(name="missing_field_type", source="type A {\n  a:\n}\n"),
    SchemaCase(name="unknown_definition", source="schema {\n  query: Query\n}\n"),
    SchemaCase(name="union_without_members", source="union U =\n"),
    SchemaCase(name="extend_without_type", source="extend interface A { a: Int }\n"),
    SchemaCase(name="default_without_value", source="input I {\n  a: Int =\n}\n"),
)


def case_id(case: SchemaCase) -> str:
    return case.name
