"""Alexa request envelope and the request body union."""

from datetime import datetime
from typing import Annotated, Any, Literal, Union

from pydantic import Discriminator, StrictInt, Tag

from .base import WireModel, wire_config
from .context import Context
from .intent import Intent
from .session import Session
from .types import (
    BuiltinIntent,
    DialogStateValue,
    Locale,
    LocaleValue,
    PlayerActivityValue,
    RequestType,
    SessionEndedErrorTypeValue,
    SessionEndedReasonValue,
    known_or_raw,
)

UNKNOWN_REQUEST_TAG = "UnknownRequest"


class BaseRequest(WireModel):
    """Fields every request body carries."""

    type: str
    request_id: str
    timestamp: str
    locale: LocaleValue | None = None

    @property
    def sent_at(self) -> datetime:
        """``timestamp`` parsed as an aware datetime."""
        return datetime.fromisoformat(self.timestamp)


class LaunchRequest(BaseRequest):
    """User opened the skill without a specific request."""

    model_config = wire_config("LaunchRequest")

    type: Literal["LaunchRequest"] = "LaunchRequest"


class IntentRequest(BaseRequest):
    model_config = wire_config("IntentRequest")

    type: Literal["IntentRequest"] = "IntentRequest"
    intent: Intent
    dialog_state: DialogStateValue | None = None


class SessionEndedError(WireModel):
    model_config = wire_config("SessionEndedError")

    type: SessionEndedErrorTypeValue
    message: str | None = None


class SessionEndedRequest(BaseRequest):
    """Session closed by the user, an error, or too many reprompts."""

    model_config = wire_config("SessionEndedRequest")

    type: Literal["SessionEndedRequest"] = "SessionEndedRequest"
    reason: SessionEndedReasonValue | None = None
    error: SessionEndedError | None = None


class CanFulfillIntentRequest(BaseRequest):
    """Platform query asking whether the skill could handle ``intent``."""

    model_config = wire_config("CanFulfillIntentRequest")

    type: Literal["CanFulfillIntentRequest"] = "CanFulfillIntentRequest"
    intent: Intent
    dialog_state: DialogStateValue | None = None


class _AudioPlayerEvent(BaseRequest):
    token: str | None = None
    offset_in_milliseconds: StrictInt | None = None


class PlaybackStartedRequest(_AudioPlayerEvent):
    model_config = wire_config("PlaybackStartedRequest")

    type: Literal["AudioPlayer.PlaybackStarted"] = "AudioPlayer.PlaybackStarted"


class PlaybackFinishedRequest(_AudioPlayerEvent):
    model_config = wire_config("PlaybackFinishedRequest")

    type: Literal["AudioPlayer.PlaybackFinished"] = "AudioPlayer.PlaybackFinished"


class PlaybackStoppedRequest(_AudioPlayerEvent):
    model_config = wire_config("PlaybackStoppedRequest")

    type: Literal["AudioPlayer.PlaybackStopped"] = "AudioPlayer.PlaybackStopped"


class PlaybackNearlyFinishedRequest(_AudioPlayerEvent):
    """Sent when the current stream is almost done; the usual moment to ENQUEUE the next one."""

    model_config = wire_config("PlaybackNearlyFinishedRequest")

    type: Literal["AudioPlayer.PlaybackNearlyFinished"] = "AudioPlayer.PlaybackNearlyFinished"


class PlaybackError(WireModel):
    model_config = wire_config("PlaybackError")

    type: str
    message: str | None = None


class PlaybackState(WireModel):
    model_config = wire_config("PlaybackState")

    token: str | None = None
    offset_in_milliseconds: StrictInt | None = None
    player_activity: PlayerActivityValue | None = None


class PlaybackFailedRequest(_AudioPlayerEvent):
    model_config = wire_config("PlaybackFailedRequest")

    type: Literal["AudioPlayer.PlaybackFailed"] = "AudioPlayer.PlaybackFailed"
    error: PlaybackError | None = None
    current_playback_state: PlaybackState | None = None


class NextCommandIssuedRequest(BaseRequest):
    model_config = wire_config("NextCommandIssuedRequest")

    type: Literal["PlaybackController.NextCommandIssued"] = "PlaybackController.NextCommandIssued"


class PauseCommandIssuedRequest(BaseRequest):
    model_config = wire_config("PauseCommandIssuedRequest")

    type: Literal["PlaybackController.PauseCommandIssued"] = "PlaybackController.PauseCommandIssued"


class PlayCommandIssuedRequest(BaseRequest):
    model_config = wire_config("PlayCommandIssuedRequest")

    type: Literal["PlaybackController.PlayCommandIssued"] = "PlaybackController.PlayCommandIssued"


class PreviousCommandIssuedRequest(BaseRequest):
    model_config = wire_config("PreviousCommandIssuedRequest")

    type: Literal["PlaybackController.PreviousCommandIssued"] = "PlaybackController.PreviousCommandIssued"


class ElementSelectedRequest(BaseRequest):
    """User touched an item of a rendered Display template."""

    model_config = wire_config("ElementSelectedRequest")

    type: Literal["Display.ElementSelected"] = "Display.ElementSelected"
    token: str | None = None


class ExceptionError(WireModel):
    model_config = wire_config("ExceptionError")

    type: str
    message: str | None = None


class ExceptionCause(WireModel):
    model_config = wire_config("ExceptionCause")

    request_id: str


class ExceptionEncounteredRequest(BaseRequest):
    """The platform rejected the skill's previous response."""

    model_config = wire_config("ExceptionEncounteredRequest")

    type: Literal["System.ExceptionEncountered"] = "System.ExceptionEncountered"
    error: ExceptionError | None = None
    cause: ExceptionCause | None = None


class UnknownRequest(WireModel):
    """
    Any request type this package does not model.

    The raw ``type`` and every other field are kept; ``payload`` exposes the
    fields that have no attribute here.
    """

    model_config = wire_config("UnknownRequest")

    type: str
    request_id: str | None = None
    timestamp: str | None = None
    locale: LocaleValue | None = None

    @property
    def payload(self) -> dict[str, Any]:
        return dict(self.model_extra or {})


REQUEST_TYPES: dict[str, type[BaseRequest]] = {
    cls.model_fields["type"].default: cls
    for cls in (
        LaunchRequest,
        IntentRequest,
        SessionEndedRequest,
        CanFulfillIntentRequest,
        PlaybackStartedRequest,
        PlaybackFinishedRequest,
        PlaybackStoppedRequest,
        PlaybackNearlyFinishedRequest,
        PlaybackFailedRequest,
        NextCommandIssuedRequest,
        PauseCommandIssuedRequest,
        PlayCommandIssuedRequest,
        PreviousCommandIssuedRequest,
        ElementSelectedRequest,
        ExceptionEncounteredRequest,
    )
}


def _request_tag(value: Any) -> str | None:
    if isinstance(value, UnknownRequest):
        return UNKNOWN_REQUEST_TAG
    request_type = value.get("type") if isinstance(value, dict) else getattr(value, "type", None)
    if not isinstance(request_type, str):
        return None
    return request_type if request_type in REQUEST_TYPES else UNKNOWN_REQUEST_TAG


RequestBody = Annotated[
    Union[
        Annotated[LaunchRequest, Tag("LaunchRequest")],
        Annotated[IntentRequest, Tag("IntentRequest")],
        Annotated[SessionEndedRequest, Tag("SessionEndedRequest")],
        Annotated[CanFulfillIntentRequest, Tag("CanFulfillIntentRequest")],
        Annotated[PlaybackStartedRequest, Tag("AudioPlayer.PlaybackStarted")],
        Annotated[PlaybackFinishedRequest, Tag("AudioPlayer.PlaybackFinished")],
        Annotated[PlaybackStoppedRequest, Tag("AudioPlayer.PlaybackStopped")],
        Annotated[PlaybackNearlyFinishedRequest, Tag("AudioPlayer.PlaybackNearlyFinished")],
        Annotated[PlaybackFailedRequest, Tag("AudioPlayer.PlaybackFailed")],
        Annotated[NextCommandIssuedRequest, Tag("PlaybackController.NextCommandIssued")],
        Annotated[PauseCommandIssuedRequest, Tag("PlaybackController.PauseCommandIssued")],
        Annotated[PlayCommandIssuedRequest, Tag("PlaybackController.PlayCommandIssued")],
        Annotated[PreviousCommandIssuedRequest, Tag("PlaybackController.PreviousCommandIssued")],
        Annotated[ElementSelectedRequest, Tag("Display.ElementSelected")],
        Annotated[ExceptionEncounteredRequest, Tag("System.ExceptionEncountered")],
        Annotated[UnknownRequest, Tag(UNKNOWN_REQUEST_TAG)],
    ],
    Discriminator(
        _request_tag,
        custom_error_type="missing_request_type",
        custom_error_message="Request body needs a string 'type'",
    ),
]


class RequestEnvelope(WireModel):
    """
    Full Alexa request envelope.

    ``session`` is absent for session-less requests (AudioPlayer and
    PlaybackController events) and ``context`` may be absent in hand-built
    test payloads; neither absence is an error.
    """

    model_config = wire_config("RequestEnvelope")

    version: str
    session: Session | None = None
    context: Context | None = None
    request: RequestBody

    @property
    def request_type(self) -> RequestType | str:
        return known_or_raw(RequestType, self.request.type)

    @property
    def locale(self) -> Locale | str | None:
        return self.request.locale

    @property
    def intent(self) -> Intent | None:
        return getattr(self.request, "intent", None)

    @property
    def intent_name(self) -> str | None:
        intent = self.intent
        return intent.name if intent else None

    @property
    def builtin_intent(self) -> BuiltinIntent | None:
        """The Amazon built-in intent of this request, if it is one."""
        name = self.intent_name
        if name is None:
            return None
        value = known_or_raw(BuiltinIntent, name)
        return value if isinstance(value, BuiltinIntent) else None

    @property
    def is_new(self) -> bool:
        return self.session.new if self.session else False

    def slot_value(self, name: str) -> str | None:
        intent = self.intent
        return intent.slot_value(name) if intent else None

    def attribute(self, key: str, default: Any = None) -> Any:
        """Session attribute ``key`` carried over from the previous turn."""
        if self.session is None or self.session.attributes is None:
            return default
        return self.session.attributes.get(key, default)
