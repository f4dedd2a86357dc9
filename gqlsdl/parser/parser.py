"""Parser object over one schema source."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from gqlsdl.ast import Document, TypeDefinition, TypeNode, ValueNode
from gqlsdl.parser import grammar
from gqlsdl.scanner import Scanner

T = TypeVar("T")


class Parser:
    """Runs grammar productions against one source text.

    `parse_document` consumes the whole text. The single-production entry
    points require the production to span the rest of the input.
    """

    def __init__(self, text: str) -> None:
        self._scanner = Scanner(text)

    @property
    def scanner(self) -> Scanner:
        return self._scanner

    def parse_document(self) -> Document:
        return grammar.parse_document(self._scanner)

    def parse_type_definition(self) -> TypeDefinition:
        return self._parse_whole(grammar.parse_type_definition, "type definition")

    def parse_type(self) -> TypeNode:
        return self._parse_whole(grammar.parse_type, "Type")

    def parse_value(self) -> ValueNode:
        return self._parse_whole(grammar.parse_value, "Value")

    def _parse_whole(self, production: Callable[[Scanner], T | None], name: str) -> T:
        node = self._scanner.required(production(self._scanner), name)
        if not self._scanner.at_end():
            raise self._scanner.error(f"Expected end of input but got {self._scanner.describe_next()}")
        return node

