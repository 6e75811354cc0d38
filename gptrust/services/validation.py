"""Pre-dispatch checks for completion requests.

Everything here is a pure predicate over the request's fields: no I/O, no
logging. The first failing check raises; a request that passes is safe to
serialize and send.
"""

from gptrust.core.exceptions import (
    AmbiguousPromptError,
    AmbiguousStopError,
    EmptyModelError,
    StreamingNotSupportedError,
    TooManyStopWordsError,
)
from gptrust.schemas.completions import MAX_STOP_WORDS, CreateCompletionRequest, StopWords


def validate(request: CreateCompletionRequest) -> None:
    """Raise a RequestValidationError subclass if the request cannot be sent."""
    if not request.model.strip():
        raise EmptyModelError()

    prompt_variants = request.prompt.populated()
    if len(prompt_variants) != 1:
        raise AmbiguousPromptError(details={"populated": prompt_variants})

    _validate_stop(request.stop)

    if request.stream:
        raise StreamingNotSupportedError()


def _validate_stop(stop: StopWords | None) -> None:
    # A missing stop group has zero populated variants
    stop_variants = stop.populated() if stop is not None else []
    if len(stop_variants) != 1:
        raise AmbiguousStopError(details={"populated": stop_variants})

    if stop.stop_word is not None:
        return

    if len(stop.stop_words) > MAX_STOP_WORDS:
        raise TooManyStopWordsError(
            details={"count": len(stop.stop_words), "maximum": MAX_STOP_WORDS},
        )
