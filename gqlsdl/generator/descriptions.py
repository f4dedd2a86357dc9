"""Fold consecutive comment lines into documentation strings."""

from __future__ import annotations

from dataclasses import dataclass, field

from gqlsdl.ast import Comment


@dataclass(slots=True)
class DescriptionAccumulator:
    """Pending comment lines for the next definition, field, value or argument.

    One accumulator belongs to one generator run. `take()` drains it, so a
    description is consumed exactly once.
    """

    _lines: list[str] = field(default_factory=list)

    def push(self, comment: Comment) -> None:
        self._lines.append(comment.text)

    def take(self) -> str | None:
        """Return the pending lines de-indented and joined, or None when blank."""
        lines, self._lines = self._lines, []
        if not any(line.strip() for line in lines):
            return None
        return "\n".join(_strip_common_indent(lines))

    def discard(self) -> None:
        self._lines.clear()

    def __len__(self) -> int:
        return len(self._lines)


def _strip_common_indent(lines: list[str]) -> list[str]:
    """Drop the shortest leading-whitespace run from every line.

    Whitespace-only lines do not count towards the indent and come out empty.
    Indents are compared by length, so a tab and a space weigh the same.
    """
    indent = min(len(line) - len(line.lstrip()) for line in lines if line.strip())
    return [line[indent:] if line.strip() else "" for line in lines]
