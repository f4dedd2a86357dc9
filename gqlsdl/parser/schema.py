"""High-level parse entrypoint for schema source text."""

from __future__ import annotations

import logging

from gqlsdl.ast import Document
from gqlsdl.parser.parser import Parser

logger = logging.getLogger(__name__)


def parse_schema(text: str) -> Document:
    """Parse schema source into a Document; raises SchemaSyntaxError on bad input."""
    document = Parser(text).parse_document()
    logger.debug("parsed %d top-level definitions", len(document.definitions))
    return document
