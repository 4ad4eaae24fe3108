from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType


class ErrorCategory(Enum):
    """The four mutually exclusive outcomes of classification."""

    VALIDATION = "validation"
    CONSTRAINT = "constraint"
    ADAPTER = "adapter"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class CategoryDefinition:
    """Status, symbolic code and default message of one category."""

    status: int
    code: str
    msg: str


ERROR_TYPES: Mapping[ErrorCategory, CategoryDefinition] = MappingProxyType(
    {
        # Rejected before reaching storage, e.g. a `required` or `min_length` rule.
        ErrorCategory.VALIDATION: CategoryDefinition(
            status=400,
            code="E_VALIDATION",
            msg="Validation error",
        ),
        # Reported by storage, e.g. a unique index.
        ErrorCategory.CONSTRAINT: CategoryDefinition(
            status=409,
            code="E_CONSTRAINT",
            msg="Constraint violation",
        ),
        ErrorCategory.ADAPTER: CategoryDefinition(
            status=500,
            code="E_ADAPTER",
            msg="An adapter error occurred",
        ),
        ErrorCategory.UNKNOWN: CategoryDefinition(
            status=500,
            code="E_UNKNOWN",
            msg="Encountered an unexpected error",
        ),
    }
)
