from collections.abc import Generator
from contextlib import contextmanager

from orm_errors.config.settings import Settings
from orm_errors.errors.classifier import DEFAULT_CLASSIFIER, Classifier
from orm_errors.errors.inspector import Inspector
from orm_errors.errors.normalized import DEFAULT_INSPECTOR, NormalizedError
from orm_errors.errors.types import ErrorCategory
from orm_errors.logging.logger import Log

_CALLER_CATEGORIES = frozenset({ErrorCategory.VALIDATION, ErrorCategory.CONSTRAINT})


class ErrorBoundary:
    """Normalize every exception escaping a data-layer call."""

    def __init__(
        self,
        classifier: Classifier | None = None,
        inspector: Inspector | None = None,
    ) -> None:
        self._classifier = classifier or DEFAULT_CLASSIFIER
        self._inspector = inspector or DEFAULT_INSPECTOR

    @classmethod
    def from_settings(cls, settings: Settings) -> "ErrorBoundary":
        """Configure logging and build a boundary from application settings."""
        Log.configure(settings.log_level)
        inspector = Inspector(
            max_depth=settings.inspect_max_depth,
            max_items=settings.inspect_max_items,
            max_string_length=settings.inspect_max_string_length,
        )
        classifier = DEFAULT_CLASSIFIER.with_adapter_identifiers(
            settings.adapter_error_identifiers
        )
        return cls(classifier=classifier, inspector=inspector)

    def normalize(self, raw_error: object) -> NormalizedError:
        """Normalize ``raw_error`` with this boundary's classifier and inspector."""
        return NormalizedError(
            raw_error,
            classifier=self._classifier,
            inspector=self._inspector,
        )

    @contextmanager
    def guard(self, operation: str) -> Generator[None, None, None]:
        """Re-raise any exception from the block as a ``NormalizedError``."""
        try:
            yield
        except NormalizedError as exc:
            Log.debug(f"{operation} raised an already normalized {exc.code}")
            raise
        except Exception as exc:
            normalized = self.normalize(exc)
            self._log(operation, normalized)
            raise normalized from exc

    @staticmethod
    def _log(operation: str, error: NormalizedError) -> None:
        message = f"{operation} failed with {error.code} ({error.status}): {error}"
        if error.category in _CALLER_CATEGORIES:
            Log.warning(message, error_code=error.code)
        else:
            Log.error(message, error_code=error.code)
