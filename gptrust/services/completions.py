import structlog
from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from gptrust.core.exceptions import MalformedResponseError, SerializationError
from gptrust.schemas.completions import CreateCompletionRequest, CreateCompletionResponse
from gptrust.services.transport import Transport
from gptrust.services.validation import validate

logger = structlog.get_logger()

COMPLETIONS_ENDPOINT = "completions"


def serialize_request(request: CreateCompletionRequest) -> str:
    """Validate a request, then encode it as JSON leaving out every unset field.

    Only validated requests are encoded, so a oneOf group always goes out as the
    bare value of its single variant.
    """
    validate(request)
    try:
        return request.model_dump_json(exclude_none=True)
    except PydanticSerializationError as e:
        raise SerializationError(f"Request could not be encoded: {e}")


def parse_response(body: str) -> CreateCompletionResponse:
    try:
        return CreateCompletionResponse.model_validate_json(body)
    except ValidationError as e:
        raise MalformedResponseError(
            details={"errors": e.errors(include_url=False, include_context=False, include_input=False)},
        )


async def create_completion(request: CreateCompletionRequest, transport: Transport) -> CreateCompletionResponse:
    """Validate, send and parse a single completion request.

    Validation errors (raised by serialize_request) come before the transport
    is touched. Transport errors propagate unchanged; a body that does not parse raises
    MalformedResponseError.
    """
    body = serialize_request(request)
    response = parse_response(await transport.send(COMPLETIONS_ENDPOINT, body))
    logger.debug("completion_created", id=response.id, model=response.model, choices=len(response.choices))
    return response
