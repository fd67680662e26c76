"""Fluent construction of Alexa responses."""

import copy
from typing import Any, Mapping

from ..models.audioplayer import AudioItemMetadata
from ..models.directive import Directive
from ..models.display import DisplayTemplate
from ..models.intent import Intent
from ..models.request import RequestEnvelope
from ..models.response import Card, CardImage, OutputSpeech, Reprompt, ResponseBody, ResponseEnvelope
from ..models.types import PROTOCOL_VERSION, CardType, ClearBehavior, PlayBehavior, SpeechType
from . import directives


class ResponseBuilder:
    """
    Incrementally assemble a ResponseEnvelope.

    Every mutator returns the builder, so calls chain:

        response = (
            ResponseBuilder()
            .speak("Playing your station.")
            .play_audio("https://example.com/stream.mp3", token="station-1")
            .should_end_session(True)
            .build()
        )

    ``build`` can be called any number of times; each call returns a fresh,
    immutable envelope reflecting the builder's state at that moment.
    ``shouldEndSession`` stays absent unless ``should_end_session`` is called.

    A builder belongs to one response cycle and is not safe to share between
    threads.
    """

    def __init__(self) -> None:
        self._output_speech: OutputSpeech | None = None
        self._reprompt: Reprompt | None = None
        self._card: Card | None = None
        self._directives: list[Directive] = []
        self._should_end_session: bool | None = None
        self._session_attributes: dict[str, Any] | None = None

    # Speech

    def speak(self, text: str, play_behavior: PlayBehavior | str | None = None) -> "ResponseBuilder":
        """Plain text output speech."""
        self._output_speech = OutputSpeech(
            type=SpeechType.PLAIN_TEXT, text=text, play_behavior=play_behavior
        )
        return self

    def speak_ssml(self, ssml: str, play_behavior: PlayBehavior | str | None = None) -> "ResponseBuilder":
        """SSML output speech; ``ssml`` is sent as given, ``<speak>`` tags included."""
        self._output_speech = OutputSpeech(type=SpeechType.SSML, ssml=ssml, play_behavior=play_behavior)
        return self

    def reprompt(self, text: str) -> "ResponseBuilder":
        """Speech used when the user does not answer; keeps the microphone open."""
        self._reprompt = Reprompt(output_speech=OutputSpeech(type=SpeechType.PLAIN_TEXT, text=text))
        return self

    def reprompt_ssml(self, ssml: str) -> "ResponseBuilder":
        self._reprompt = Reprompt(output_speech=OutputSpeech(type=SpeechType.SSML, ssml=ssml))
        return self

    # Cards

    def simple_card(self, title: str, content: str) -> "ResponseBuilder":
        self._card = Card(type=CardType.SIMPLE, title=title, content=content)
        return self

    def standard_card(
        self,
        title: str,
        text: str,
        small_image_url: str | None = None,
        large_image_url: str | None = None,
    ) -> "ResponseBuilder":
        image = None
        if small_image_url or large_image_url:
            image = CardImage(small_image_url=small_image_url, large_image_url=large_image_url)
        self._card = Card(type=CardType.STANDARD, title=title, text=text, image=image)
        return self

    def link_account_card(self) -> "ResponseBuilder":
        self._card = Card(type=CardType.LINK_ACCOUNT)
        return self

    def ask_for_permissions_card(self, permissions: list[str]) -> "ResponseBuilder":
        self._card = Card(type=CardType.ASK_FOR_PERMISSIONS_CONSENT, permissions=list(permissions))
        return self

    # Directives

    def add_directive(self, directive: Directive | Mapping[str, Any]) -> "ResponseBuilder":
        """
        Append a directive; order is the order the device executes them in.

        Wire-format dicts are validated into the matching variant, falling
        back to an opaque directive for unmodelled kinds.
        """
        if isinstance(directive, Mapping):
            directive = directives.from_wire(directive)
        self._directives.append(directive)
        return self

    def progressive_speak(self, speech: str) -> "ResponseBuilder":
        return self.add_directive(directives.speak(speech))

    def play_audio(
        self,
        url: str,
        token: str,
        offset_in_milliseconds: int = 0,
        behavior: PlayBehavior | str = PlayBehavior.REPLACE_ALL,
        expected_previous_token: str | None = None,
        metadata: AudioItemMetadata | None = None,
    ) -> "ResponseBuilder":
        return self.add_directive(
            directives.play(
                url,
                token,
                offset_in_milliseconds=offset_in_milliseconds,
                behavior=behavior,
                expected_previous_token=expected_previous_token,
                metadata=metadata,
            )
        )

    def stop_audio(self) -> "ResponseBuilder":
        return self.add_directive(directives.stop())

    def clear_queue(self, behavior: ClearBehavior | str = ClearBehavior.CLEAR_ALL) -> "ResponseBuilder":
        return self.add_directive(directives.clear_queue(behavior))

    def render_template(self, template: DisplayTemplate | Mapping[str, Any]) -> "ResponseBuilder":
        return self.add_directive(directives.render_template(template))

    def hint(self, text: str) -> "ResponseBuilder":
        return self.add_directive(directives.hint(text))

    def delegate(self, updated_intent: Intent | None = None) -> "ResponseBuilder":
        return self.add_directive(directives.delegate(updated_intent))

    def elicit_slot(self, slot_name: str, updated_intent: Intent | None = None) -> "ResponseBuilder":
        return self.add_directive(directives.elicit_slot(slot_name, updated_intent))

    def confirm_slot(self, slot_name: str, updated_intent: Intent | None = None) -> "ResponseBuilder":
        return self.add_directive(directives.confirm_slot(slot_name, updated_intent))

    def confirm_intent(self, updated_intent: Intent | None = None) -> "ResponseBuilder":
        return self.add_directive(directives.confirm_intent(updated_intent))

    # Session

    def should_end_session(self, end: bool) -> "ResponseBuilder":
        self._should_end_session = end
        return self

    def session_attribute(self, key: str, value: Any) -> "ResponseBuilder":
        """Set one attribute the next request will carry in ``session.attributes``."""
        if self._session_attributes is None:
            self._session_attributes = {}
        self._session_attributes[key] = value
        return self

    def session_attributes(self, attributes: Mapping[str, Any] | None) -> "ResponseBuilder":
        """Replace all session attributes; ``None`` omits ``sessionAttributes``."""
        self._session_attributes = dict(attributes) if attributes is not None else None
        return self

    def carry_session_attributes(self, request: RequestEnvelope) -> "ResponseBuilder":
        """Start from the attributes the request arrived with."""
        if request.session is not None and request.session.attributes is not None:
            self._session_attributes = copy.deepcopy(request.session.attributes)
        return self

    def build(self) -> ResponseEnvelope:
        """Produce the response envelope for the current builder state."""
        return ResponseEnvelope(
            version=PROTOCOL_VERSION,
            session_attributes=copy.deepcopy(self._session_attributes),
            response=ResponseBody(
                output_speech=self._output_speech,
                card=self._card,
                reprompt=self._reprompt,
                directives=list(self._directives) or None,
                should_end_session=self._should_end_session,
            ),
        )


def simple_response(title: str, text: str) -> ResponseEnvelope:
    """Speak ``text``, show it on a simple card titled ``title``, and end the session."""
    return ResponseBuilder().speak(text).simple_card(title, text).should_end_session(True).build()


def end_session_response() -> ResponseEnvelope:
    """Empty response that ends the session."""
    return ResponseBuilder().should_end_session(True).build()
