"""Request/response envelope models for Alexa skills."""

from .codec import dump_response, parse_request, parse_response, serialize_request, serialize_response
from .errors import DeserializationError, EnvelopeError, InvalidDirective
from .models import PROTOCOL_VERSION, RequestEnvelope, ResponseEnvelope
from .services import ResponseBuilder, end_session_response, simple_response

__all__ = [
    "PROTOCOL_VERSION",
    "parse_request",
    "serialize_response",
    "dump_response",
    "parse_response",
    "serialize_request",
    "RequestEnvelope",
    "ResponseEnvelope",
    "ResponseBuilder",
    "simple_response",
    "end_session_response",
    "EnvelopeError",
    "DeserializationError",
    "InvalidDirective",
]
