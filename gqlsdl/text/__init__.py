"""Source text positions and excerpts."""

from gqlsdl.text.text import LineColumn, TextRange, line_column, render_excerpt

__all__ = [
    "LineColumn",
    "TextRange",
    "line_column",
    "render_excerpt",
]
