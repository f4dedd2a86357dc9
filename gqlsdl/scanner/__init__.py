"""Source scanner."""

from gqlsdl.scanner.scanner import Scanner

__all__ = ["Scanner"]
