"""Canonical error types produced by the normalizer."""

from typing import Any, Iterable

UNKNOWN_ERROR_MESSAGE = "Unknown Error"

# Attribute names that belong to the error itself and never take field values.
_RESERVED = frozenset({
    "args", "with_traceback", "add_note",
    "fields", "update", "set_field", "setdefault_field",
})


class NormalizedError(Exception):
    """Error built from a non-exception failure value.

    Carries a ``message`` plus an extension map of fields copied from the
    source value.  String-keyed fields are also exposed as attributes, so
    ``err.code`` works for a source like ``{"message": ..., "code": ...}``.
    """

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message
        self.fields: dict[Any, Any] = {}

    def __str__(self) -> str:
        return self.message

    def update(self, items: Iterable[tuple[Any, Any]]) -> "NormalizedError":
        """Shallow-merge *items* onto this error. Last write wins."""
        for key, value in items:
            self.set_field(key, value)
        return self

    def set_field(self, key: Any, value: Any) -> None:
        """Store one extension field, mirroring it as an attribute if possible."""
        self.fields[key] = value
        if key == "message":
            if isinstance(value, str):
                self.message = value
                self.args = (value,)
            return
        if not isinstance(key, str) or key.startswith("__") or key in _RESERVED:
            return
        try:
            setattr(self, key, value)
        except (AttributeError, TypeError):
            # read-only on exceptions; still reachable through fields
            pass

    def setdefault_field(self, key: str, value: Any) -> None:
        if key not in self.fields:
            self.set_field(key, value)


class UnknownError(NormalizedError):
    """Default fallback when nothing useful can be extracted."""

    def __init__(self, message: str = UNKNOWN_ERROR_MESSAGE):
        super().__init__(message)


class ResponseError(NormalizedError):
    """Error synthesized from an HTTP-response-like object."""

    def __init__(self, status: int, status_text: str):
        super().__init__(f"{status} {status_text}")
        # lets pickle and copy rebuild the error from args
        self.args = (status, status_text)
        self.set_field("status", status)
        self.set_field("status_text", status_text)
