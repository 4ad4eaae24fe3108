from enum import Enum


class AdapterErrorCode(str, Enum):
    """Identifiers a storage adapter tags its physical-layer failures with."""

    CONNECTION = "E_CONNECTION"
    TIMEOUT = "E_TIMEOUT"
    NOT_SUPPORTED = "E_NOT_SUPPORTED"
    SCHEMA = "E_SCHEMA"
    TRANSACTION = "E_TRANSACTION"


ADAPTER_ERROR_IDENTIFIERS: frozenset[str] = frozenset(code.value for code in AdapterErrorCode)


class AdapterError(Exception):
    """Raised by a storage adapter for a miscellaneous physical-layer failure."""

    def __init__(self, code: AdapterErrorCode | str, message: str = "") -> None:
        self.code = code.value if isinstance(code, AdapterErrorCode) else code
        super().__init__(message or self.code)
