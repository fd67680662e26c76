"""Enumerated wire strings shared across the request and response schemas."""

from enum import Enum
from typing import Annotated, TypeVar, Union

from pydantic import PlainSerializer, PlainValidator

PROTOCOL_VERSION = "1.0"

E = TypeVar("E", bound=Enum)


def known_or_raw(enum_cls: type[E], value: str) -> E | str:
    """Return the enum member for ``value``, or ``value`` itself when it is not a known member."""
    try:
        return enum_cls(value)
    except ValueError:
        return value


def _open_enum(enum_cls: type[Enum]) -> object:
    """
    Annotated type accepting any string for ``enum_cls``.

    Known values validate to the enum member; anything else is kept as the raw
    string so newer platform values survive a parse/serialize cycle.
    """

    def validate(value: object) -> Enum | str:
        if isinstance(value, enum_cls):
            return value
        if not isinstance(value, str):
            raise ValueError(f"{enum_cls.__name__} must be a string")
        return known_or_raw(enum_cls, value)

    def serialize(value: Enum | str) -> str:
        return value.value if isinstance(value, Enum) else value

    return Annotated[
        Union[enum_cls, str],
        PlainValidator(validate),
        PlainSerializer(serialize, return_type=str),
    ]


class Locale(str, Enum):
    """Locales Alexa skills can be published in."""

    ARABIC = "ar-SA"
    GERMAN = "de-DE"
    AUSTRALIAN_ENGLISH = "en-AU"
    CANADIAN_ENGLISH = "en-CA"
    BRITISH_ENGLISH = "en-GB"
    INDIAN_ENGLISH = "en-IN"
    AMERICAN_ENGLISH = "en-US"
    SPANISH = "es-ES"
    MEXICAN_SPANISH = "es-MX"
    AMERICAN_SPANISH = "es-US"
    FRENCH = "fr-FR"
    CANADIAN_FRENCH = "fr-CA"
    HINDI = "hi-IN"
    ITALIAN = "it-IT"
    JAPANESE = "ja-JP"
    DUTCH = "nl-NL"
    BRAZILIAN_PORTUGUESE = "pt-BR"

    @property
    def language(self) -> str:
        return self.value.split("-")[0]

    @property
    def region(self) -> str:
        return self.value.split("-")[1]

    def is_english(self) -> bool:
        return self.language == "en"

    def is_french(self) -> bool:
        return self.language == "fr"

    def is_spanish(self) -> bool:
        return self.language == "es"


class ConfirmationStatus(str, Enum):
    """Whether the user confirmed an intent or slot."""

    NONE = "NONE"
    CONFIRMED = "CONFIRMED"
    DENIED = "DENIED"


class DialogState(str, Enum):
    """Progress of a multi-turn dialog."""

    STARTED = "STARTED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"


class SessionEndedReason(str, Enum):
    """Why the platform closed the session."""

    USER_INITIATED = "USER_INITIATED"
    ERROR = "ERROR"
    EXCEEDED_MAX_REPROMPTS = "EXCEEDED_MAX_REPROMPTS"


class SessionEndedErrorType(str, Enum):
    """Error category reported with a SessionEndedRequest."""

    INVALID_RESPONSE = "INVALID_RESPONSE"
    DEVICE_COMMUNICATION_ERROR = "DEVICE_COMMUNICATION_ERROR"
    INTERNAL_SERVICE_ERROR = "INTERNAL_SERVICE_ERROR"
    ENDPOINT_TIMEOUT = "ENDPOINT_TIMEOUT"


class ResolutionStatusCode(str, Enum):
    """Entity resolution outcome for one authority."""

    ER_SUCCESS_MATCH = "ER_SUCCESS_MATCH"
    ER_SUCCESS_NO_MATCH = "ER_SUCCESS_NO_MATCH"
    ER_ERROR_TIMEOUT = "ER_ERROR_TIMEOUT"
    ER_ERROR_EXCEPTION = "ER_ERROR_EXCEPTION"


class PlayerActivity(str, Enum):
    """AudioPlayer state reported in the request context."""

    IDLE = "IDLE"
    PAUSED = "PAUSED"
    PLAYING = "PLAYING"
    BUFFER_UNDERRUN = "BUFFER_UNDERRUN"
    FINISHED = "FINISHED"
    STOPPED = "STOPPED"


class PlayBehavior(str, Enum):
    """How a Play directive or speech interacts with the playback queue."""

    REPLACE_ALL = "REPLACE_ALL"
    ENQUEUE = "ENQUEUE"
    REPLACE_ENQUEUED = "REPLACE_ENQUEUED"


class ClearBehavior(str, Enum):
    """Which queue entries a ClearQueue directive removes."""

    CLEAR_ALL = "CLEAR_ALL"
    CLEAR_ENQUEUED = "CLEAR_ENQUEUED"


class SpeechType(str, Enum):
    """Output speech markup."""

    PLAIN_TEXT = "PlainText"
    SSML = "SSML"


class CardType(str, Enum):
    """Companion app card kinds."""

    SIMPLE = "Simple"
    STANDARD = "Standard"
    LINK_ACCOUNT = "LinkAccount"
    ASK_FOR_PERMISSIONS_CONSENT = "AskForPermissionsConsent"


class ImageSize(str, Enum):
    """Display image size buckets."""

    X_SMALL = "X_SMALL"
    SMALL = "SMALL"
    MEDIUM = "MEDIUM"
    LARGE = "LARGE"
    X_LARGE = "X_LARGE"


class BackButtonBehavior(str, Enum):
    VISIBLE = "VISIBLE"
    HIDDEN = "HIDDEN"


class TextFieldType(str, Enum):
    PLAIN_TEXT = "PlainText"
    RICH_TEXT = "RichText"


class InterfaceName(str, Enum):
    """Device interfaces declared under ``supportedInterfaces``."""

    AUDIO_PLAYER = "AudioPlayer"
    DISPLAY = "Display"
    VIDEO_APP = "VideoApp"
    APL = "Alexa.Presentation.APL"
    GEOLOCATION = "Geolocation"


class RequestType(str, Enum):
    """Discriminator values of the request body."""

    LAUNCH = "LaunchRequest"
    INTENT = "IntentRequest"
    SESSION_ENDED = "SessionEndedRequest"
    CAN_FULFILL_INTENT = "CanFulfillIntentRequest"
    PLAYBACK_STARTED = "AudioPlayer.PlaybackStarted"
    PLAYBACK_FINISHED = "AudioPlayer.PlaybackFinished"
    PLAYBACK_STOPPED = "AudioPlayer.PlaybackStopped"
    PLAYBACK_NEARLY_FINISHED = "AudioPlayer.PlaybackNearlyFinished"
    PLAYBACK_FAILED = "AudioPlayer.PlaybackFailed"
    NEXT_COMMAND_ISSUED = "PlaybackController.NextCommandIssued"
    PAUSE_COMMAND_ISSUED = "PlaybackController.PauseCommandIssued"
    PLAY_COMMAND_ISSUED = "PlaybackController.PlayCommandIssued"
    PREVIOUS_COMMAND_ISSUED = "PlaybackController.PreviousCommandIssued"
    ELEMENT_SELECTED = "Display.ElementSelected"
    EXCEPTION_ENCOUNTERED = "System.ExceptionEncountered"


class DirectiveType(str, Enum):
    """Discriminator values of response directives."""

    SPEAK = "VoicePlayer.Speak"
    PLAY = "AudioPlayer.Play"
    STOP = "AudioPlayer.Stop"
    CLEAR_QUEUE = "AudioPlayer.ClearQueue"
    RENDER_TEMPLATE = "Display.RenderTemplate"
    HINT = "Hint"
    DELEGATE = "Dialog.Delegate"
    ELICIT_SLOT = "Dialog.ElicitSlot"
    CONFIRM_SLOT = "Dialog.ConfirmSlot"
    CONFIRM_INTENT = "Dialog.ConfirmIntent"


class BuiltinIntent(str, Enum):
    """Amazon built-in intents."""

    CANCEL = "AMAZON.CancelIntent"
    FALLBACK = "AMAZON.FallbackIntent"
    HELP = "AMAZON.HelpIntent"
    LOOP_OFF = "AMAZON.LoopOffIntent"
    LOOP_ON = "AMAZON.LoopOnIntent"
    NAVIGATE_HOME = "AMAZON.NavigateHomeIntent"
    NEXT = "AMAZON.NextIntent"
    NO = "AMAZON.NoIntent"
    PAUSE = "AMAZON.PauseIntent"
    PREVIOUS = "AMAZON.PreviousIntent"
    REPEAT = "AMAZON.RepeatIntent"
    RESUME = "AMAZON.ResumeIntent"
    SELECT = "AMAZON.SelectIntent"
    SHUFFLE_OFF = "AMAZON.ShuffleOffIntent"
    SHUFFLE_ON = "AMAZON.ShuffleOnIntent"
    START_OVER = "AMAZON.StartOverIntent"
    STOP = "AMAZON.StopIntent"
    YES = "AMAZON.YesIntent"


# Field types that keep unrecognized wire values as plain strings
LocaleValue = _open_enum(Locale)
ConfirmationStatusValue = _open_enum(ConfirmationStatus)
DialogStateValue = _open_enum(DialogState)
SessionEndedReasonValue = _open_enum(SessionEndedReason)
SessionEndedErrorTypeValue = _open_enum(SessionEndedErrorType)
ResolutionStatusCodeValue = _open_enum(ResolutionStatusCode)
PlayerActivityValue = _open_enum(PlayerActivity)
PlayBehaviorValue = _open_enum(PlayBehavior)
ClearBehaviorValue = _open_enum(ClearBehavior)
SpeechTypeValue = _open_enum(SpeechType)
CardTypeValue = _open_enum(CardType)
ImageSizeValue = _open_enum(ImageSize)
BackButtonBehaviorValue = _open_enum(BackButtonBehavior)
TextFieldTypeValue = _open_enum(TextFieldType)
