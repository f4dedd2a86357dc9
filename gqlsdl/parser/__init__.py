"""Recursive-descent parser for the schema definition language."""

from gqlsdl.parser.grammar import (
    parse_document,
    parse_type,
    parse_type_definition,
    parse_value,
)
from gqlsdl.parser.parser import Parser
from gqlsdl.parser.schema import parse_schema

__all__ = [
    "Parser",
    "parse_document",
    "parse_schema",
    "parse_type",
    "parse_type_definition",
    "parse_value",
]
