class GptrustError(Exception):
    """Base exception for completion client errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict | None = None,
    ):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict:
        result = {
            "error": {
                "code": self.code,
                "message": self.message,
            }
        }
        if self.details:
            result["error"]["details"] = self.details
        return result


# ── Request validation ───────────────────────────────────────────────────────


class RequestValidationError(GptrustError):
    """Request rejected before anything was sent."""

    def __init__(self, message: str = "Invalid completion request.", code: str = "invalid_request", details: dict | None = None):
        super().__init__(code=code, message=message, details=details)


class EmptyModelError(RequestValidationError):
    def __init__(self, message: str = "Please provide a model to use for the completion.", details: dict | None = None):
        super().__init__(message=message, code="empty_model", details=details)


class AmbiguousPromptError(RequestValidationError):
    def __init__(self, message: str = "You can pass only one type of prompt.", details: dict | None = None):
        super().__init__(message=message, code="ambiguous_prompt", details=details)


class AmbiguousStopError(RequestValidationError):
    def __init__(
        self,
        message: str = "Pass exactly one of a stop word or a list of stop words.",
        details: dict | None = None,
    ):
        super().__init__(message=message, code="ambiguous_stop", details=details)


class TooManyStopWordsError(RequestValidationError):
    def __init__(self, message: str = "You can pass maximum 4 stop words.", details: dict | None = None):
        super().__init__(message=message, code="too_many_stop_words", details=details)


class StreamingNotSupportedError(RequestValidationError):
    def __init__(self, message: str = "Streaming completions are not supported by this client.", details: dict | None = None):
        super().__init__(message=message, code="streaming_not_supported", details=details)


# ── Dispatch ─────────────────────────────────────────────────────────────────


class SerializationError(GptrustError):
    def __init__(self, message: str = "Request could not be encoded.", details: dict | None = None):
        super().__init__(code="serialization_error", message=message, details=details)


class TransportError(GptrustError):
    def __init__(self, message: str = "Completion service is unreachable.", status: int | None = None, details: dict | None = None):
        self.status = status
        super().__init__(code="transport_error", message=message, details=details)

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.status is not None:
            result["error"]["status"] = self.status
        return result


class MalformedResponseError(GptrustError):
    def __init__(self, message: str = "Completion service returned an unexpected response.", details: dict | None = None):
        super().__init__(code="malformed_response", message=message, details=details)
