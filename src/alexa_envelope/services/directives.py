"""Directive construction with validation at the point of the call."""

from typing import Any, Callable, Mapping, TypeVar

from pydantic import TypeAdapter, ValidationError

from ..errors import InvalidDirective
from ..models.audioplayer import AudioItem, AudioItemMetadata, CaptionData, Stream
from ..models.directive import (
    ClearQueueDirective,
    ConfirmIntentDirective,
    ConfirmSlotDirective,
    DelegateDirective,
    Directive,
    ElicitSlotDirective,
    HintContent,
    HintDirective,
    OpaqueDirective,
    PlayDirective,
    RenderTemplateDirective,
    SpeakDirective,
    StopDirective,
)
from ..models.display import DisplayTemplate
from ..models.intent import Intent
from ..models.types import ClearBehavior, DirectiveType, PlayBehavior, known_or_raw

T = TypeVar("T")

_directive_adapter: TypeAdapter[Directive] = TypeAdapter(Directive)


def _reason(exc: ValidationError) -> str:
    error = exc.errors()[0]
    field = ".".join(str(part) for part in error.get("loc", ()))
    message = error.get("msg") or "invalid"
    return f"{field}: {message}" if field else message


def _construct(directive_type: str, build: Callable[[], T]) -> T:
    try:
        return build()
    except ValidationError as exc:
        raise InvalidDirective(directive_type, _reason(exc)) from exc


def speak(speech: str) -> SpeakDirective:
    """VoicePlayer.Speak progressive response."""
    return _construct(DirectiveType.SPEAK.value, lambda: SpeakDirective(speech=speech))


def play(
    url: str,
    token: str,
    offset_in_milliseconds: int = 0,
    behavior: PlayBehavior | str = PlayBehavior.REPLACE_ALL,
    expected_previous_token: str | None = None,
    metadata: AudioItemMetadata | None = None,
    caption_data: CaptionData | None = None,
) -> PlayDirective:
    """
    AudioPlayer.Play directive.

    Args:
        url: HTTPS stream URL
        token: Opaque stream identifier echoed back in playback events
        offset_in_milliseconds: Where to start playing
        behavior: Queue behavior
        expected_previous_token: Token of the stream this one follows; required
            for ENQUEUE and rejected for the other behaviors
        metadata: Title and artwork for screen devices
        caption_data: Captions for the stream

    Raises:
        InvalidDirective: Empty url/token, negative offset, or a token/behavior mismatch
    """
    directive_type = DirectiveType.PLAY.value

    if offset_in_milliseconds < 0:
        raise InvalidDirective(directive_type, "offsetInMilliseconds must not be negative")

    enqueue = known_or_raw(PlayBehavior, behavior) == PlayBehavior.ENQUEUE
    if enqueue and not expected_previous_token:
        raise InvalidDirective(directive_type, "ENQUEUE requires expectedPreviousToken")
    if not enqueue and expected_previous_token is not None:
        raise InvalidDirective(directive_type, "expectedPreviousToken is only allowed with ENQUEUE")

    return _construct(
        directive_type,
        lambda: PlayDirective(
            play_behavior=behavior,
            audio_item=AudioItem(
                stream=Stream(
                    url=url,
                    token=token,
                    offset_in_milliseconds=offset_in_milliseconds,
                    expected_previous_token=expected_previous_token,
                    caption_data=caption_data,
                ),
                metadata=metadata,
            ),
        ),
    )


def stop() -> StopDirective:
    return StopDirective()


def clear_queue(behavior: ClearBehavior | str = ClearBehavior.CLEAR_ALL) -> ClearQueueDirective:
    return _construct(
        DirectiveType.CLEAR_QUEUE.value, lambda: ClearQueueDirective(clear_behavior=behavior)
    )


def render_template(template: DisplayTemplate | Mapping[str, Any]) -> RenderTemplateDirective:
    """Display.RenderTemplate; ``template`` may be a model or its wire-format dict."""

    def build() -> RenderTemplateDirective:
        if isinstance(template, Mapping):
            return RenderTemplateDirective(
                template=DisplayTemplate.model_validate(template, by_alias=True, by_name=False)
            )
        return RenderTemplateDirective(template=template)

    return _construct(DirectiveType.RENDER_TEMPLATE.value, build)


def hint(text: str) -> HintDirective:
    return _construct(
        DirectiveType.HINT.value, lambda: HintDirective(hint=HintContent(type="PlainText", text=text))
    )


def delegate(updated_intent: Intent | None = None) -> DelegateDirective:
    return DelegateDirective(updated_intent=updated_intent)


def elicit_slot(slot_name: str, updated_intent: Intent | None = None) -> ElicitSlotDirective:
    return _construct(
        DirectiveType.ELICIT_SLOT.value,
        lambda: ElicitSlotDirective(slot_to_elicit=slot_name, updated_intent=updated_intent),
    )


def confirm_slot(slot_name: str, updated_intent: Intent | None = None) -> ConfirmSlotDirective:
    return _construct(
        DirectiveType.CONFIRM_SLOT.value,
        lambda: ConfirmSlotDirective(slot_to_confirm=slot_name, updated_intent=updated_intent),
    )


def confirm_intent(updated_intent: Intent | None = None) -> ConfirmIntentDirective:
    return ConfirmIntentDirective(updated_intent=updated_intent)


def opaque(directive_type: str, **fields: Any) -> OpaqueDirective:
    """
    A directive of a kind not modelled here, e.g. ``Alexa.Presentation.APL.RenderDocument``.

    ``fields`` are written to the wire as given, so use wire names.
    """
    return _construct(directive_type or "<empty>", lambda: OpaqueDirective(type=directive_type, **fields))


def from_wire(data: Mapping[str, Any]) -> Directive:
    """Validate a wire-format directive dict into the matching variant."""
    directive_type = data.get("type")
    return _construct(
        directive_type if isinstance(directive_type, str) and directive_type else "<unknown>",
        lambda: _directive_adapter.validate_python(data, by_alias=True, by_name=False),
    )
