from orm_errors.database.exceptions import AdapterError, AdapterErrorCode
from orm_errors.errors import (
    DEFAULT_CLASSIFIER,
    ERROR_TYPES,
    CategoryDefinition,
    Classifier,
    ErrorBoundary,
    ErrorCategory,
    Inspector,
    NormalizedError,
    is_adapter_error,
    is_constraint_violation,
    is_validation_error,
)

__all__ = [
    "DEFAULT_CLASSIFIER",
    "ERROR_TYPES",
    "AdapterError",
    "AdapterErrorCode",
    "CategoryDefinition",
    "Classifier",
    "ErrorBoundary",
    "ErrorCategory",
    "Inspector",
    "NormalizedError",
    "is_adapter_error",
    "is_constraint_violation",
    "is_validation_error",
]
