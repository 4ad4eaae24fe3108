from orm_errors.errors.boundary import ErrorBoundary
from orm_errors.errors.classifier import DEFAULT_CLASSIFIER, Classifier
from orm_errors.errors.inspector import Inspector
from orm_errors.errors.normalized import NormalizedError
from orm_errors.errors.predicates import (
    extract_invalid_attributes,
    is_adapter_error,
    is_constraint_violation,
    is_validation_error,
)
from orm_errors.errors.types import ERROR_TYPES, CategoryDefinition, ErrorCategory

__all__ = [
    "DEFAULT_CLASSIFIER",
    "ERROR_TYPES",
    "CategoryDefinition",
    "Classifier",
    "ErrorBoundary",
    "ErrorCategory",
    "Inspector",
    "NormalizedError",
    "extract_invalid_attributes",
    "is_adapter_error",
    "is_constraint_violation",
    "is_validation_error",
]
