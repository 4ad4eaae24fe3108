import copy
from typing import Any

from orm_errors.errors.classifier import DEFAULT_CLASSIFIER, Classifier
from orm_errors.errors.inspector import Inspector
from orm_errors.errors.predicates import extract_invalid_attributes
from orm_errors.errors.types import ERROR_TYPES, ErrorCategory

DEFAULT_INSPECTOR = Inspector()


class NormalizedError(Exception):
    """A mystery error normalized into one of a handful of categories.

    Whatever the raw error looks like, the instance exposes the same
    ``status``, ``code`` and ``msg`` properties and the same rendering
    methods, so callers can branch on ``code`` without knowing which
    component failed.

    Wrapping an existing ``NormalizedError`` returns that same instance.
    """

    def __new__(
        cls,
        raw_error: object = None,
        *,
        classifier: Classifier | None = None,
        inspector: Inspector | None = None,
    ) -> "NormalizedError":
        if isinstance(raw_error, NormalizedError):
            return raw_error
        return super().__new__(cls, raw_error)

    def __init__(
        self,
        raw_error: object = None,
        *,
        classifier: Classifier | None = None,
        inspector: Inspector | None = None,
    ) -> None:
        # __new__ handed back an already normalized error; keep it untouched.
        if raw_error is self:
            return
        super().__init__(raw_error)
        self._original_error = raw_error
        self._inspector = inspector or DEFAULT_INSPECTOR
        self._category = (classifier or DEFAULT_CLASSIFIER).classify(raw_error)

        definition = ERROR_TYPES[self._category]
        self._status = definition.status
        self._code = definition.code
        self._msg = definition.msg
        self._invalid_attributes: dict[Any, list[Any]] | None = None
        if self._category is ErrorCategory.VALIDATION:
            self._invalid_attributes = _detached(extract_invalid_attributes(raw_error))

    @property
    def original_error(self) -> object:
        return self._original_error

    @property
    def category(self) -> ErrorCategory:
        return self._category

    @property
    def status(self) -> int:
        return self._status

    @property
    def code(self) -> str:
        return self._code

    @property
    def msg(self) -> str:
        return self._msg

    @property
    def invalid_attributes(self) -> dict[Any, list[Any]] | None:
        """Attribute -> rule violations, set only for validation errors."""
        if self._invalid_attributes is None:
            return None
        return _detached(self._invalid_attributes)

    def to_plain_object(self) -> dict[str, Any]:
        """Return the ``message``/``details``/``code`` record safe to expose."""
        details: dict[Any, list[Any]] | str
        if self._invalid_attributes is not None:
            details = _detached(self._invalid_attributes)
        else:
            details = self.to_string()
        return {
            "message": self._msg,
            "details": details,
            "code": self._code,
        }

    to_dict = to_plain_object

    def to_string(self) -> str:
        """Render the original error as text.

        Strings are returned verbatim, exceptions use their own ``str()``
        and everything else goes through the structural inspector.
        """
        original = self._original_error
        if isinstance(original, str):
            return original
        if isinstance(original, BaseException):
            try:
                return str(original) or type(original).__name__
            except Exception:  # noqa: BLE001
                return self._inspector.render(original)
        return self._inspector.render(original)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self._code!r}, status={self._status})"


def _detached(invalid_attributes: dict[Any, list[Any]]) -> dict[Any, list[Any]]:
    """Return a copy sharing no mutable state with ``invalid_attributes``."""
    try:
        return copy.deepcopy(invalid_attributes)
    except Exception:  # noqa: BLE001
        # Descriptors that refuse deep copies are shared; the containers are not.
        return {attribute: list(rules) for attribute, rules in invalid_attributes.items()}
