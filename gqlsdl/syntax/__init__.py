"""Syntax kinds."""

from gqlsdl.syntax.kind import NodeKind

__all__ = ["NodeKind"]
