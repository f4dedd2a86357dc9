"""Diagnostics core types."""

from dataclasses import dataclass

from gqlsdl.diagnostics.codes import DiagnosticSpec, Severity
from gqlsdl.text import TextRange


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic carried by every schema error."""

    code: str
    message: str
    range: TextRange | None = None
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None

    @staticmethod
    def from_spec(
        spec: DiagnosticSpec,
        message: str,
        range: TextRange | None = None,
    ) -> "Diagnostic":
        return Diagnostic(
            code=spec.code,
            message=message,
            range=range,
            severity=spec.severity,
            hint=spec.hint,
            category=spec.category,
        )
