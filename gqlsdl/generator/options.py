"""Generator policies and configuration options."""

from dataclasses import dataclass
from enum import StrEnum


class DuplicatePolicy(StrEnum):
    """What happens when a type name or extension field is defined twice."""

    ERROR = "error"
    REPLACE = "replace"


class MissingEnumValuePolicy(StrEnum):
    """How an enum value absent from its type's implementation entry is backed."""

    NAME = "name"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class GeneratorOptions:
    """Policy toggles applied while compiling one document."""

    duplicate_definitions: DuplicatePolicy = DuplicatePolicy.ERROR
    missing_enum_values: MissingEnumValuePolicy = MissingEnumValuePolicy.NAME

    @staticmethod
    def strict() -> "GeneratorOptions":
        return GeneratorOptions(
            duplicate_definitions=DuplicatePolicy.ERROR,
            missing_enum_values=MissingEnumValuePolicy.ERROR,
        )

    @staticmethod
    def lenient() -> "GeneratorOptions":
        return GeneratorOptions(
            duplicate_definitions=DuplicatePolicy.REPLACE,
            missing_enum_values=MissingEnumValuePolicy.NAME,
        )
