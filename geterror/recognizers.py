"""Recognizers: each tries one interpretation of an unknown failure value.

A recognizer is called as ``recognizer(value, fallback)`` and returns an
exception, or ``None`` to let the next recognizer try.  The capability
checks below never raise; a lookup that blows up counts as absent.
"""

import inspect
import numbers
from collections.abc import Mapping
from typing import Any, Optional

from .errors import NormalizedError, ResponseError
from .types import ResponseStatus


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()

# (status attribute, status text attribute), tried in order.
# Covers fetch-style objects, requests, httpx and aiohttp responses.
RESPONSE_STATUS_ATTRS = (
    ("status", "statusText"),
    ("status", "status_text"),
    ("status", "reason"),
    ("status_code", "reason"),
    ("status_code", "reason_phrase"),
)

_FALLBACK_TYPES = (
    list, tuple, set, frozenset,
    bytes, bytearray, memoryview,
    numbers.Number,
)


# -- capability checks --

def _get_attr(value: Any, name: str) -> Any:
    try:
        return getattr(value, name, MISSING)
    except Exception:
        return MISSING


def get_field(value: Any, name: str) -> Any:
    """Return ``value[name]`` for mappings, ``value.name`` otherwise, or MISSING."""
    try:
        if isinstance(value, Mapping):
            return value[name] if name in value else MISSING
    except Exception:
        return MISSING
    return _get_attr(value, name)


def iter_fields(value: Any) -> list[tuple[Any, Any]]:
    """Top-level fields of a mapping or plain object, as a list of pairs."""
    try:
        if isinstance(value, Mapping):
            return list(value.items())
        if isinstance(value, NormalizedError):
            return list(value.fields.items())
        return list(vars(value).items())
    except Exception:
        return []


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    try:
        return str(value)
    except Exception:
        return f"<{type(value).__name__}>"


def get_message(value: Any) -> Any:
    """The ``message`` field, or ``str(exc)`` for exceptions without one."""
    message = get_field(value, "message")
    if message is MISSING and isinstance(value, BaseException):
        return _as_text(value)
    return message


def has_message_field(value: Any) -> bool:
    return value is not None and get_message(value) is not MISSING


def _is_status(value: Any) -> bool:
    if not isinstance(value, numbers.Integral) or isinstance(value, bool):
        return False
    return 100 <= value <= 599


def as_response_like(value: Any) -> Optional[ResponseStatus]:
    """Extract status and status text from an HTTP-response-like object.

    Only attributes are consulted; a decoded JSON mapping that happens to
    carry ``status`` keys is a payload, not a response.
    """
    if isinstance(value, Mapping):
        return None
    for status_attr, text_attr in RESPONSE_STATUS_ATTRS:
        status = _get_attr(value, status_attr)
        if not _is_status(status):
            continue
        text = _get_attr(value, text_attr)
        if text is None:
            text = ""
        if isinstance(text, str):
            return ResponseStatus(status=int(status), status_text=text)
    return None


def _is_function(value: Any) -> bool:
    return inspect.isroutine(value) or inspect.isclass(value)


# -- recognizers --

def from_primitive_type(value: Any, fallback: BaseException) -> Optional[BaseException]:
    """Handle None, strings, arrays and other non-object values."""
    if value is None:
        return fallback
    if isinstance(value, str):
        return NormalizedError(value)
    if isinstance(value, _FALLBACK_TYPES) or _is_function(value):
        return fallback
    return None


def from_known_error(value: Any, fallback: BaseException) -> Optional[BaseException]:
    """Pass exception instances through unchanged."""
    if isinstance(value, BaseException):
        return value
    return None


def from_response(value: Any, fallback: BaseException) -> Optional[BaseException]:
    status = as_response_like(value)
    if status is None:
        return None
    return ResponseError(status.status, status.status_text)


def from_message_object(value: Any, fallback: BaseException) -> Optional[BaseException]:
    """Build an error from ``{"message": ..., **extra}`` and copy the extras."""
    if not has_message_field(value):
        return None
    error = NormalizedError(_as_text(get_message(value)))
    return error.update(iter_fields(value))


def from_rpc_object(value: Any, fallback: BaseException) -> Optional[BaseException]:
    """Some APIs return objects like ``{"error": {"message": str}}``."""
    nested = get_field(value, "error")
    if nested is MISSING:
        return None
    error = from_primitive_type(nested, fallback)
    if error is None:
        error = from_message_object(nested, fallback)
    return error


DEFAULT_RECOGNIZERS = (
    from_primitive_type,
    from_known_error,
    from_response,
    from_message_object,
    from_rpc_object,
)
