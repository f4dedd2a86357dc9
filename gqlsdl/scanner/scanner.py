"""Cursor over schema source with insignificant-character skipping."""

from __future__ import annotations

import re
from typing import Final, TypeVar

from gqlsdl.diagnostics import PARSER_EXPECTED, Diagnostic, DiagnosticSpec, SchemaSyntaxError
from gqlsdl.text import TextRange, render_excerpt

# Commas are insignificant, like newlines.
_IGNORED: Final[re.Pattern[str]] = re.compile(
    r"[\n, \f\r\t\v\u00a0\u1680\u180e\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]+"
)
_NAME_CONTINUE: Final[re.Pattern[str]] = re.compile(r"[_0-9A-Za-z]")

T = TypeVar("T")


class Scanner:
    """Tracks the consumed offset into immutable source text.

    Every match first skips insignificant characters. A failed match leaves
    the position where it was.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._position = 0

    @property
    def source(self) -> str:
        """Original source text."""
        return self._source

    @property
    def position(self) -> int:
        return self._position

    @property
    def remaining(self) -> str:
        return self._source[self._position :]

    def match(self, pattern: str | re.Pattern[str]) -> str | None:
        start = self._skip_ignored(self._position)

        if isinstance(pattern, str):
            if not self._source.startswith(pattern, start):
                return None
            self._position = start + len(pattern)
            return pattern

        found = pattern.match(self._source, start)
        if found is None or not found.group(0):
            return None
        self._position = found.end()
        return found.group(0)

    def match_keyword(self, keyword: str) -> str | None:
        """Match `keyword` only when it is not the prefix of a longer name."""
        start = self._skip_ignored(self._position)
        end = start + len(keyword)
        if not self._source.startswith(keyword, start):
            return None
        if _NAME_CONTINUE.match(self._source, end):
            return None
        self._position = end
        return keyword

    def expect(self, literal: str) -> str:
        return self.required(self.match(literal), f'"{literal}"')

    def required(self, value: T | None, name: str) -> T:
        if value is not None:
            return value
        raise self.error(f"Expected {name} but got {self.describe_next()}")

    def at_end(self) -> bool:
        return self._skip_ignored(self._position) >= len(self._source)

    def error(self, message: str, spec: DiagnosticSpec = PARSER_EXPECTED) -> SchemaSyntaxError:
        offset = self._skip_ignored(self._position)
        diagnostic = Diagnostic.from_spec(spec, message, TextRange.empty(offset))
        return SchemaSyntaxError(diagnostic, render_excerpt(self._source, offset))

    def _skip_ignored(self, offset: int) -> int:
        found = _IGNORED.match(self._source, offset)
        return found.end() if found is not None else offset

    def describe_next(self) -> str:
        """Quoted next significant character, or "end of input"."""
        offset = self._skip_ignored(self._position)
        if offset >= len(self._source):
            return "end of input"
        return f'"{self._source[offset]}"'
