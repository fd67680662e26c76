"""
Conversion between raw JSON and envelope models.

These are the only entry points a transport needs: ``parse_request`` on the way
in, ``serialize_response`` (or ``dump_response`` when the transport encodes
JSON itself) on the way out.
"""

import logging
from typing import Any, Mapping, Sequence, TypeVar

from pydantic import ValidationError

from .config import settings
from .errors import DeserializationError
from .models.base import WireModel
from .models.directive import DIRECTIVE_TYPES, OPAQUE_DIRECTIVE_TAG
from .models.request import REQUEST_TYPES, UNKNOWN_REQUEST_TAG, RequestEnvelope
from .models.response import ResponseEnvelope

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=WireModel)

_REQUEST_TAGS = frozenset({*REQUEST_TYPES, UNKNOWN_REQUEST_TAG})
_DIRECTIVE_TAGS = frozenset({*DIRECTIVE_TYPES, OPAQUE_DIRECTIVE_TAG})


def _is_union_tag(loc: Sequence[Any], index: int) -> bool:
    """Pydantic puts the selected tag right after ``request`` and after each ``response.directives[i]``."""
    part = loc[index]
    if index == 1 and loc[0] == "request":
        return part in _REQUEST_TAGS
    if index == 3 and loc[0] == "response" and loc[1] == "directives" and isinstance(loc[2], int):
        return part in _DIRECTIVE_TAGS
    return False


def _validate(model: type[M], payload: bytes | str | Mapping[str, Any]) -> M:
    # Wire names only; attribute names are not a second spelling of a field
    try:
        if isinstance(payload, Mapping):
            return model.model_validate(payload, by_alias=True, by_name=False)
        return model.model_validate_json(payload, by_alias=True, by_name=False)
    except ValidationError as exc:
        raise DeserializationError.from_validation_error(exc, is_tag=_is_union_tag) from exc


def _serialize(value: WireModel) -> bytes:
    return value.model_dump_json(by_alias=True).encode("utf-8")


def parse_request(payload: bytes | str | Mapping[str, Any]) -> RequestEnvelope:
    """
    Parse an Alexa request.

    Args:
        payload: Raw JSON bytes/text, or an already decoded JSON object

    Returns:
        The request envelope

    Raises:
        DeserializationError: Malformed JSON or a missing/invalid required field
    """
    envelope = _validate(RequestEnvelope, payload)

    if settings.warn_on_version_mismatch and envelope.version not in settings.supported_versions:
        logger.warning(
            f"Request version {envelope.version!r} is not one of {settings.supported_versions}"
        )

    return envelope


def serialize_response(response: ResponseEnvelope) -> bytes:
    """Encode a response envelope as compact JSON bytes."""
    return _serialize(response)


def dump_response(response: ResponseEnvelope) -> dict[str, Any]:
    """JSON-ready dict of a response, for transports that encode JSON themselves."""
    return response.to_wire()


def parse_response(payload: bytes | str | Mapping[str, Any]) -> ResponseEnvelope:
    """Parse a response envelope, e.g. one recorded from another skill."""
    return _validate(ResponseEnvelope, payload)


def serialize_request(envelope: RequestEnvelope) -> bytes:
    """Encode a request envelope as compact JSON bytes."""
    return _serialize(envelope)
