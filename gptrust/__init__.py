"""Client binding for OpenAI-style text completion services."""

from gptrust.core.exceptions import (
    AmbiguousPromptError,
    AmbiguousStopError,
    EmptyModelError,
    GptrustError,
    MalformedResponseError,
    RequestValidationError,
    SerializationError,
    StreamingNotSupportedError,
    TooManyStopWordsError,
    TransportError,
)
from gptrust.schemas.completions import (
    Choice,
    CompletionPrompt,
    CreateCompletionRequest,
    CreateCompletionResponse,
    LogProbs,
    StopWords,
    Usage,
)
from gptrust.services.completions import create_completion, parse_response, serialize_request
from gptrust.services.transport import HttpTransport, Transport
from gptrust.services.validation import validate

__version__ = "0.1.0"

__all__ = [
    "AmbiguousPromptError",
    "AmbiguousStopError",
    "Choice",
    "CompletionPrompt",
    "CreateCompletionRequest",
    "CreateCompletionResponse",
    "EmptyModelError",
    "GptrustError",
    "HttpTransport",
    "LogProbs",
    "MalformedResponseError",
    "RequestValidationError",
    "SerializationError",
    "StopWords",
    "StreamingNotSupportedError",
    "TooManyStopWordsError",
    "Transport",
    "TransportError",
    "Usage",
    "create_completion",
    "parse_response",
    "serialize_request",
    "validate",
]
