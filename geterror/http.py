"""Canonical errors from ``requests`` responses and exceptions."""

import logging
from typing import Optional

import requests

from .errors import NormalizedError, ResponseError
from .normalize import normalize

_LOG = logging.getLogger(__name__)


def error_from_response(
    resp: requests.Response, fallback: Optional[BaseException] = None
) -> BaseException:
    """Build an error from a failed HTTP response.

    A JSON body such as ``{"error": {"message": ..., "code": ...}}`` or
    ``{"message": ...}`` takes precedence; otherwise the status line
    (``"404 Not Found"``) becomes the message.  Body-derived errors also get
    ``status`` and ``status_text`` fields unless the body set them.
    """
    status_error = normalize(resp, fallback)
    try:
        body = resp.json()
    except ValueError:
        # empty or non-JSON body
        _LOG.debug("response %s has no JSON body", resp.status_code)
        return status_error

    error = normalize(body, status_error)
    if (
        error is not status_error
        and isinstance(error, NormalizedError)
        and isinstance(status_error, ResponseError)
    ):
        error.setdefault_field("status", status_error.fields["status"])
        error.setdefault_field("status_text", status_error.fields["status_text"])
    return error


def error_from_exception(
    exc: requests.RequestException, fallback: Optional[BaseException] = None
) -> BaseException:
    """Prefer the server's error over a bare ``HTTPError`` when one was sent.

    Returns *exc* unchanged if it carries no response, as with connection
    errors and timeouts.  Otherwise *fallback* (or *exc* when omitted) is
    used when the response has neither a status line nor an error body.
    A new error keeps *exc* as its ``__cause__``.
    """
    resp = exc.response
    if resp is None:
        return exc
    if fallback is None:
        fallback = exc
    error = error_from_response(resp, fallback)
    if error is not exc and error is not fallback:
        error.__cause__ = exc
    return error
