"""Turn any failure value into a single exception instance."""

import logging
from typing import Any, Iterable, Optional

from .errors import UNKNOWN_ERROR_MESSAGE, UnknownError
from .recognizers import DEFAULT_RECOGNIZERS
from .types import Recognizer

_LOG = logging.getLogger(__name__)


def _name(recognizer: Recognizer) -> str:
    return getattr(recognizer, "__name__", type(recognizer).__name__)


class Normalizer:
    """An ordered chain of recognizers ending in a fallback error.

    Recognizers are tried in order and the first non-None result wins.  A
    recognizer that raises is skipped, so ``normalize`` never raises as long
    as the fallback itself can be built.
    """

    def __init__(
        self,
        recognizers: Iterable[Recognizer] = DEFAULT_RECOGNIZERS,
        default_message: str = UNKNOWN_ERROR_MESSAGE,
    ):
        self._recognizers = tuple(recognizers)
        self._default_message = default_message

    @property
    def recognizers(self) -> tuple[Recognizer, ...]:
        return self._recognizers

    @property
    def default_message(self) -> str:
        return self._default_message

    def prepend(self, *recognizers: Recognizer) -> "Normalizer":
        """Return a new normalizer that tries *recognizers* before this chain."""
        return Normalizer(recognizers + self._recognizers, self._default_message)

    def normalize(
        self, value: Any, fallback: Optional[BaseException] = None
    ) -> BaseException:
        """Classify *value* and return exactly one exception.

        Args:
            value: Anything a caller caught, received or decoded.
            fallback: Returned when nothing better can be extracted.  A fresh
                ``UnknownError`` is created per call when omitted.

        Returns:
            *value* itself if it is already an exception, a new
            ``NormalizedError`` built from it, or *fallback*.
        """
        if fallback is None:
            fallback = UnknownError(self._default_message)
        for recognizer in self._recognizers:
            try:
                error = recognizer(value, fallback)
            except Exception:
                _LOG.debug("recognizer %s failed", _name(recognizer), exc_info=True)
                continue
            if error is not None:
                _LOG.debug("normalized %s via %s", type(value).__name__, _name(recognizer))
                return error
        _LOG.debug("no recognizer matched %s, using fallback", type(value).__name__)
        return fallback


_default = Normalizer()


def normalize(value: Any, fallback: Optional[BaseException] = None) -> BaseException:
    """Normalize *value* with the default recognizer chain."""
    return _default.normalize(value, fallback)
