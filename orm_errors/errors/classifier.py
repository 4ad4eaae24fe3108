from collections.abc import Callable, Iterable
from dataclasses import dataclass, replace
from functools import partial

from orm_errors.database.exceptions import ADAPTER_ERROR_IDENTIFIERS
from orm_errors.errors.predicates import (
    is_adapter_error,
    is_constraint_violation,
    is_validation_error,
)
from orm_errors.errors.types import ErrorCategory
from orm_errors.logging.logger import Log

Predicate = Callable[[object], bool]


@dataclass(frozen=True)
class Classifier:
    """Assign exactly one category to a raw error.

    Predicates run in priority order (validation, constraint, adapter) and the
    first match wins. ``UNKNOWN`` is returned when nothing matches, so
    classification never fails.
    """

    is_validation_error: Predicate = is_validation_error
    is_constraint_violation: Predicate = is_constraint_violation
    is_adapter_error: Predicate = is_adapter_error

    def classify(self, raw: object) -> ErrorCategory:
        """Return the category of ``raw``."""
        rules: tuple[tuple[ErrorCategory, Predicate], ...] = (
            (ErrorCategory.VALIDATION, self.is_validation_error),
            (ErrorCategory.CONSTRAINT, self.is_constraint_violation),
            (ErrorCategory.ADAPTER, self.is_adapter_error),
        )
        for category, predicate in rules:
            if self._matches(category, predicate, raw):
                return category
        return ErrorCategory.UNKNOWN

    def with_adapter_identifiers(self, identifiers: Iterable[str]) -> "Classifier":
        """Return a copy using the default adapter rule extended with ``identifiers``."""
        extra = frozenset(identifiers)
        if not extra:
            return self
        return replace(
            self,
            is_adapter_error=partial(
                is_adapter_error,
                identifiers=ADAPTER_ERROR_IDENTIFIERS | extra,
            ),
        )

    @staticmethod
    def _matches(category: ErrorCategory, predicate: Predicate, raw: object) -> bool:
        try:
            return bool(predicate(raw))
        except Exception as exc:  # noqa: BLE001
            Log.warning(
                f"{category.name.lower()} rule raised {type(exc).__name__}: {exc}; "
                "treating as no match"
            )
            return False


DEFAULT_CLASSIFIER = Classifier()
