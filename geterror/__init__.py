"""geterror: normalize unknown failure values into one exception type."""

from .normalize import Normalizer, normalize
from .recognizers import (
    DEFAULT_RECOGNIZERS,
    as_response_like,
    get_message,
    has_message_field,
    from_primitive_type,
    from_known_error,
    from_response,
    from_message_object,
    from_rpc_object,
)
from .errors import (
    NormalizedError,
    UnknownError,
    ResponseError,
)
from .types import ResponseStatus

get_error = normalize

__all__ = [
    "Normalizer",
    "normalize",
    "get_error",
    "DEFAULT_RECOGNIZERS",
    "as_response_like",
    "get_message",
    "has_message_field",
    "from_primitive_type",
    "from_known_error",
    "from_response",
    "from_message_object",
    "from_rpc_object",
    "NormalizedError",
    "UnknownError",
    "ResponseError",
    "ResponseStatus",
]
