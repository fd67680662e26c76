"""Alexa response envelope models."""

from typing import Any

from pydantic import StrictBool

from .base import WireModel, wire_config
from .directive import Directive
from .types import CardTypeValue, PlayBehaviorValue, SpeechTypeValue


class OutputSpeech(WireModel):
    """Alexa speech output, either plain text or SSML."""

    model_config = wire_config("OutputSpeech")

    type: SpeechTypeValue | None = None
    text: str | None = None
    ssml: str | None = None
    play_behavior: PlayBehaviorValue | None = None


class CardImage(WireModel):
    model_config = wire_config("CardImage")

    small_image_url: str | None = None
    large_image_url: str | None = None


class Card(WireModel):
    """Alexa card for the companion app or screen."""

    model_config = wire_config("Card")

    type: CardTypeValue
    title: str | None = None
    content: str | None = None
    text: str | None = None
    image: CardImage | None = None
    permissions: list[str] | None = None


class Reprompt(WireModel):
    model_config = wire_config("Reprompt")

    output_speech: OutputSpeech


class ResponseBody(WireModel):
    """
    Alexa response body.

    ``should_end_session`` left as ``None`` is omitted from the wire, which the
    platform treats differently from an explicit ``false`` (screen devices keep
    the session open without a microphone prompt).
    """

    model_config = wire_config("ResponseBody")

    output_speech: OutputSpeech | None = None
    card: Card | None = None
    reprompt: Reprompt | None = None
    directives: list[Directive] | None = None
    should_end_session: StrictBool | None = None


class ResponseEnvelope(WireModel):
    """Full Alexa response envelope."""

    model_config = wire_config("ResponseEnvelope")

    version: str
    session_attributes: dict[str, Any] | None = None
    response: ResponseBody
