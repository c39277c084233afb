"""Shared types for recognizers."""

from dataclasses import dataclass
from typing import Any, Callable, Optional


@dataclass(frozen=True)
class ResponseStatus:
    status: int
    status_text: str


# (value, fallback) -> error, or None to defer to the next recognizer
Recognizer = Callable[[Any, BaseException], Optional[BaseException]]
