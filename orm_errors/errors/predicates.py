"""Shape checks that decide which category a raw error belongs to.

Each predicate is total: it answers ``False`` for values it does not
understand instead of raising.
"""

from collections.abc import Collection, Mapping, Sequence
from typing import Any

import psycopg
from pydantic import ValidationError as PydanticValidationError

from orm_errors.database.exceptions import ADAPTER_ERROR_IDENTIFIERS

VALIDATION_PAYLOAD_KEY = "ValidationError"
INTEGRITY_CONSTRAINT_CLASS = "23"


def _lookup(raw: object, name: str) -> Any:
    """Read ``name`` from a mapping key or an attribute, ``None`` when absent."""
    if isinstance(raw, Mapping):
        return raw.get(name)
    try:
        return getattr(raw, name, None)
    except Exception:  # noqa: BLE001
        # A raising property is treated as an absent one.
        return None


def is_validation_error(raw: object) -> bool:
    """Detect a raw error carrying a field-level validation payload."""
    if isinstance(raw, PydanticValidationError):
        return True
    payload = _lookup(raw, VALIDATION_PAYLOAD_KEY)
    if not isinstance(payload, Mapping):
        return False
    return all(
        isinstance(rules, Sequence) and not isinstance(rules, (str, bytes))
        for rules in payload.values()
    )


def extract_invalid_attributes(raw: object) -> dict[Any, list[Any]]:
    """Return the attribute -> rule violations map of a validation error."""
    if isinstance(raw, PydanticValidationError):
        return _group_pydantic_errors(raw)
    payload = _lookup(raw, VALIDATION_PAYLOAD_KEY)
    if not isinstance(payload, Mapping):
        return {}
    return {attribute: list(rules) for attribute, rules in payload.items()}


def _group_pydantic_errors(exc: PydanticValidationError) -> dict[str, list[Any]]:
    grouped: dict[str, list[Any]] = {}
    for error in exc.errors():
        attribute = ".".join(str(part) for part in error["loc"]) or "__root__"
        grouped.setdefault(attribute, []).append(
            {"rule": error["type"], "message": error["msg"]}
        )
    return grouped


def is_constraint_violation(raw: object) -> bool:
    """Detect a logical constraint breach reported by the storage layer."""
    if isinstance(raw, psycopg.IntegrityError):
        return True
    sqlstate = _lookup(raw, "sqlstate")
    return isinstance(sqlstate, str) and sqlstate.startswith(INTEGRITY_CONSTRAINT_CLASS)


def is_adapter_error(
    raw: object,
    identifiers: Collection[str] = ADAPTER_ERROR_IDENTIFIERS,
) -> bool:
    """Detect a physical-layer error raised or tagged by a storage adapter."""
    if isinstance(raw, psycopg.Error):
        return True
    code = _lookup(raw, "code")
    return isinstance(code, str) and code in identifiers
