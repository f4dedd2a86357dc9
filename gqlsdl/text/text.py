from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class TextRange:
    """
    Half-open range [start, end) in source text.

    Invariant:
    - 0 <= start <= end
    """

    start: int
    end: int

    def __post_init__(self):
        if self.start < 0 or self.end < 0:
            raise ValueError("TextRange positions cannot be negative")
        if self.start > self.end:
            raise ValueError("TextRange invariant violated: start > end")

    @staticmethod
    def empty(offset: int) -> "TextRange":
        """Create an empty TextRange at the given offset."""
        return TextRange(offset, offset)


@dataclass(frozen=True, slots=True)
class LineColumn:
    """Zero-based line and column of an offset."""

    line: int
    column: int


def line_column(source: str, offset: int) -> LineColumn:
    """Map an offset to its line/column; offsets past the end clamp to the end."""
    offset = min(max(offset, 0), len(source))
    line = source.count("\n", 0, offset)
    line_start = source.rfind("\n", 0, offset) + 1
    return LineColumn(line=line, column=offset - line_start)


def render_excerpt(source: str, offset: int, *, indent: str = "    ") -> str:
    """Render the previous line, the offending line, a caret and the next line.

    The caret sits under the character at `offset`. Missing neighbour lines
    render as bare indentation so the excerpt always has four lines.
    """
    offset = min(max(offset, 0), len(source))
    lines = source.split("\n")
    position = line_column(source, offset)

    previous_line = lines[position.line - 1] if position.line > 0 else ""
    current_line = lines[position.line] if position.line < len(lines) else ""
    next_line = lines[position.line + 1] if position.line + 1 < len(lines) else ""

    return "\n".join(
        (
            indent + previous_line,
            indent + current_line,
            " " * (len(indent) + position.column) + "^",
            indent + next_line,
        )
    )
