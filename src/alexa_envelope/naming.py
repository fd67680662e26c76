"""Wire-format field names for every envelope structure.

Alexa sends and expects lower-camel keys (``sessionId``, ``offsetInMilliseconds``)
plus a few PascalCase interface blocks (``System``, ``AudioPlayer``). Models use
snake_case attributes. The mapping between the two is declared here, once per
field, and nowhere else: each model pulls its aliases from ``WIRE_SCHEMAS`` via
``models.base.wire_config``.

Every entry follows the mechanical rule ``field == snake_case(wire)``, so the
table can be regenerated from example payloads with ``draft_schemas``.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass(frozen=True)
class WireSchema:
    """Wire names of one structure and whether it keeps unknown keys."""

    fields: Mapping[str, str]  # wire name -> model field
    extensible: bool = False
    by_field: Mapping[str, str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        inverse: dict[str, str] = {}
        for wire_name, field_name in self.fields.items():
            if field_name in inverse:
                raise ValueError(
                    f"'{inverse[field_name]}' and '{wire_name}' both map to field '{field_name}'"
                )
            inverse[field_name] = wire_name
        object.__setattr__(self, "by_field", inverse)

    def wire_name(self, field_name: str) -> str:
        return self.by_field[field_name]

    def field_name(self, wire_name: str) -> str:
        return self.fields[wire_name]


def snake_case(wire_name: str) -> str:
    """Convert a wire key to its attribute name: ``offsetInMilliseconds`` -> ``offset_in_milliseconds``."""
    name = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1_\2", wire_name)
    name = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", name)
    return name.replace(".", "_").replace("-", "_").lower()


def _schema(*wire_names: str, extensible: bool = False, base: Mapping[str, str] | None = None) -> WireSchema:
    fields = dict(base or {})
    fields.update({wire_name: snake_case(wire_name) for wire_name in wire_names})
    return WireSchema(fields=fields, extensible=extensible)


_REQUEST_COMMON = _schema("type", "requestId", "timestamp", "locale").fields
_AUDIO_PLAYER_EVENT = _schema("token", "offsetInMilliseconds", base=_REQUEST_COMMON).fields
_DIALOG = _schema("type", "updatedIntent").fields


WIRE_SCHEMAS: dict[str, WireSchema] = {
    # Session and identity
    "Application": _schema("applicationId"),
    "Permissions": _schema("consentToken", extensible=True),
    "User": _schema("userId", "accessToken", "permissions", extensible=True),
    "Person": _schema("personId", "accessToken", extensible=True),
    "Session": _schema("new", "sessionId", "application", "attributes", "user", extensible=True),
    # Context
    "Device": _schema("deviceId", "supportedInterfaces", extensible=True),
    "System": _schema(
        "apiEndpoint", "apiAccessToken", "application", "user", "person", "device", extensible=True
    ),
    "AudioPlayerState": _schema("token", "offsetInMilliseconds", "playerActivity", extensible=True),
    "DisplayState": _schema("token", extensible=True),
    "Context": _schema("System", "AudioPlayer", "Display", extensible=True),
    # Intents and slots
    "ResolutionValue": _schema("name", "id"),
    "ResolutionValueWrapper": _schema("value"),
    "ResolutionStatus": _schema("code"),
    "ResolutionPerAuthority": _schema("authority", "status", "values", extensible=True),
    "Resolutions": _schema("resolutionsPerAuthority", extensible=True),
    "Slot": _schema("name", "value", "confirmationStatus", "resolutions", extensible=True),
    "Intent": _schema("name", "confirmationStatus", "slots", extensible=True),
    # Request bodies
    "LaunchRequest": _schema(base=_REQUEST_COMMON, extensible=True),
    "IntentRequest": _schema("intent", "dialogState", base=_REQUEST_COMMON, extensible=True),
    "SessionEndedError": _schema("type", "message", extensible=True),
    "SessionEndedRequest": _schema("reason", "error", base=_REQUEST_COMMON, extensible=True),
    "CanFulfillIntentRequest": _schema("intent", "dialogState", base=_REQUEST_COMMON, extensible=True),
    "PlaybackStartedRequest": _schema(base=_AUDIO_PLAYER_EVENT, extensible=True),
    "PlaybackFinishedRequest": _schema(base=_AUDIO_PLAYER_EVENT, extensible=True),
    "PlaybackStoppedRequest": _schema(base=_AUDIO_PLAYER_EVENT, extensible=True),
    "PlaybackNearlyFinishedRequest": _schema(base=_AUDIO_PLAYER_EVENT, extensible=True),
    "PlaybackError": _schema("type", "message", extensible=True),
    "PlaybackState": _schema("token", "offsetInMilliseconds", "playerActivity", extensible=True),
    "PlaybackFailedRequest": _schema(
        "error", "currentPlaybackState", base=_AUDIO_PLAYER_EVENT, extensible=True
    ),
    "NextCommandIssuedRequest": _schema(base=_REQUEST_COMMON, extensible=True),
    "PauseCommandIssuedRequest": _schema(base=_REQUEST_COMMON, extensible=True),
    "PlayCommandIssuedRequest": _schema(base=_REQUEST_COMMON, extensible=True),
    "PreviousCommandIssuedRequest": _schema(base=_REQUEST_COMMON, extensible=True),
    "ElementSelectedRequest": _schema("token", base=_REQUEST_COMMON, extensible=True),
    "ExceptionError": _schema("type", "message", extensible=True),
    "ExceptionCause": _schema("requestId", extensible=True),
    "ExceptionEncounteredRequest": _schema("error", "cause", base=_REQUEST_COMMON, extensible=True),
    "UnknownRequest": _schema(base=_REQUEST_COMMON, extensible=True),
    "RequestEnvelope": _schema("version", "session", "context", "request", extensible=True),
    # Display payloads
    "ImageInstance": _schema("url", "size", "widthPixels", "heightPixels"),
    "Image": _schema("contentDescription", "sources"),
    "TextField": _schema("type", "text"),
    "TextContent": _schema("primaryText", "secondaryText", "tertiaryText"),
    "ListItem": _schema("token", "image", "textContent", extensible=True),
    "DisplayTemplate": _schema(
        "type",
        "token",
        "backButton",
        "backgroundImage",
        "title",
        "image",
        "textContent",
        "listItems",
        extensible=True,
    ),
    # AudioPlayer payloads
    "CaptionData": _schema("type", "content"),
    "Stream": _schema("url", "token", "offsetInMilliseconds", "expectedPreviousToken", "captionData"),
    "AudioItemMetadata": _schema("title", "subtitle", "art", "backgroundImage"),
    "AudioItem": _schema("stream", "metadata"),
    # Directives
    "SpeakDirective": _schema("type", "speech"),
    "PlayDirective": _schema("type", "playBehavior", "audioItem"),
    "StopDirective": _schema("type"),
    "ClearQueueDirective": _schema("type", "clearBehavior"),
    "RenderTemplateDirective": _schema("type", "template"),
    "HintContent": _schema("type", "text"),
    "HintDirective": _schema("type", "hint"),
    "DelegateDirective": _schema(base=_DIALOG),
    "ElicitSlotDirective": _schema("slotToElicit", base=_DIALOG),
    "ConfirmSlotDirective": _schema("slotToConfirm", base=_DIALOG),
    "ConfirmIntentDirective": _schema(base=_DIALOG),
    "OpaqueDirective": _schema("type", extensible=True),
    # Response
    "OutputSpeech": _schema("type", "text", "ssml", "playBehavior"),
    "CardImage": _schema("smallImageUrl", "largeImageUrl"),
    "Card": _schema("type", "title", "content", "text", "image", "permissions"),
    "Reprompt": _schema("outputSpeech"),
    "ResponseBody": _schema(
        "outputSpeech", "card", "reprompt", "directives", "shouldEndSession", extensible=True
    ),
    "ResponseEnvelope": _schema("version", "sessionAttributes", "response", extensible=True),
}


def draft_schemas(example: Mapping[str, Any], root_name: str) -> dict[str, WireSchema]:
    """
    Derive draft table entries from an example payload.

    Nested objects become structures named after their key in PascalCase;
    lists of objects merge the keys of every element. Maps keyed by data
    (such as ``slots``) cannot be told apart from structures and come out
    as one structure per key, so drafts need a human pass before they
    replace entries in ``WIRE_SCHEMAS``.

    Args:
        example: A decoded JSON object
        root_name: Structure name for the top-level object

    Returns:
        Structure name -> draft WireSchema, in discovery order
    """
    found: dict[str, dict[str, str]] = {}

    def visit(obj: Mapping[str, Any], name: str) -> None:
        fields = found.setdefault(name, {})
        for wire_name, value in obj.items():
            fields[wire_name] = snake_case(wire_name)
            child = wire_name[:1].upper() + wire_name[1:]
            if isinstance(value, Mapping):
                visit(value, child)
            elif isinstance(value, list):
                for item in value:
                    if isinstance(item, Mapping):
                        visit(item, child)

    visit(example, root_name)
    return {name: WireSchema(fields=fields) for name, fields in found.items()}
