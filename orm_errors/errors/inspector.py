import dataclasses
import types
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Inspector:
    """Bounded, cycle-safe structural printer.

    Used for raw errors that have no string form of their own. Containers
    nested deeper than ``max_depth`` collapse to ``{...}``/``[...]``, a
    container already being printed renders as ``<circular TypeName>`` and
    long containers or strings are cut.
    """

    max_depth: int = 2
    max_items: int = 100
    max_string_length: int = 10000

    def render(self, value: object) -> str:
        """Return a human-readable rendering of ``value``. Never raises."""
        try:
            return self._render(value, 0, frozenset())
        except Exception:  # noqa: BLE001
            return _safe_repr(value)

    def _render(self, value: object, depth: int, path: frozenset[int]) -> str:
        if isinstance(value, (str, bytes, bytearray)):
            return self._render_string(value)
        if isinstance(value, BaseException):
            return _safe_repr(value)

        fields = _fields_of(value)
        if not isinstance(value, (Mapping, list, tuple, set, frozenset)) and fields is None:
            return _safe_repr(value)

        if id(value) in path:
            return f"<circular {type(value).__name__}>"
        if depth > self.max_depth:
            return _collapsed(value)

        inner = path | {id(value)}
        if isinstance(value, Mapping):
            entries = self._entries(
                (
                    f"{self._render(key, depth + 1, inner)}: {self._render(item, depth + 1, inner)}"
                    for key, item in value.items()
                ),
                len(value),
            )
            return "{" + entries + "}"
        if fields is not None:
            entries = self._entries(
                (
                    f"{name}={self._render(item, depth + 1, inner)}"
                    for name, item in fields.items()
                ),
                len(fields),
            )
            return f"{type(value).__name__}({entries})"

        entries = self._entries(
            (self._render(item, depth + 1, inner) for item in value),
            len(value),
        )
        if isinstance(value, list):
            return "[" + entries + "]"
        if isinstance(value, tuple):
            return "(" + entries + ("," if len(value) == 1 else "") + ")"
        if not value:
            return f"{type(value).__name__}()"
        if isinstance(value, frozenset):
            return "frozenset({" + entries + "})"
        return "{" + entries + "}"

    def _entries(self, rendered: Iterable[str], total: int) -> str:
        parts: list[str] = []
        for part in rendered:
            if len(parts) >= self.max_items:
                break
            parts.append(part)
        if total > len(parts):
            parts.append(f"... <{total - len(parts)} more>")
        return ", ".join(parts)

    def _render_string(self, value: str | bytes | bytearray) -> str:
        if len(value) > self.max_string_length:
            return repr(value[: self.max_string_length]) + "..."
        return repr(value)


def _fields_of(value: object) -> dict[str, Any] | None:
    """Return the attributes of a plain object or dataclass, ``None`` otherwise."""
    if isinstance(value, (type, types.ModuleType)) or callable(value):
        return None
    if dataclasses.is_dataclass(value):
        return {field.name: getattr(value, field.name) for field in dataclasses.fields(value)}
    try:
        attributes = vars(value)
    except TypeError:
        return None
    return dict(attributes)


def _collapsed(value: object) -> str:
    if isinstance(value, Mapping):
        return "{...}"
    if isinstance(value, list):
        return "[...]"
    if isinstance(value, tuple):
        return "(...)"
    if isinstance(value, (set, frozenset)):
        return "{...}"
    return f"{type(value).__name__}(...)"


def _safe_repr(value: object) -> str:
    try:
        return repr(value)
    except Exception:  # noqa: BLE001
        return f"<unrepresentable {type(value).__name__}>"
