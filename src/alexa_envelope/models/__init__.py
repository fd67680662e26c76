"""Pydantic models for the Alexa request/response envelopes."""

from .context import Application, AudioPlayerState, Context, Device, DisplayState, Person, System, User
from .directive import (
    ClearQueueDirective,
    ConfirmIntentDirective,
    ConfirmSlotDirective,
    DelegateDirective,
    Directive,
    ElicitSlotDirective,
    HintDirective,
    OpaqueDirective,
    PlayDirective,
    RenderTemplateDirective,
    SpeakDirective,
    StopDirective,
)
from .intent import Intent, Slot
from .request import (
    IntentRequest,
    LaunchRequest,
    RequestBody,
    RequestEnvelope,
    SessionEndedRequest,
    UnknownRequest,
)
from .response import Card, OutputSpeech, Reprompt, ResponseBody, ResponseEnvelope
from .session import Session
from .types import PROTOCOL_VERSION

__all__ = [
    "PROTOCOL_VERSION",
    "RequestEnvelope",
    "RequestBody",
    "LaunchRequest",
    "IntentRequest",
    "SessionEndedRequest",
    "UnknownRequest",
    "Session",
    "Context",
    "System",
    "Device",
    "Application",
    "User",
    "Person",
    "AudioPlayerState",
    "DisplayState",
    "Intent",
    "Slot",
    "Directive",
    "SpeakDirective",
    "PlayDirective",
    "StopDirective",
    "ClearQueueDirective",
    "RenderTemplateDirective",
    "HintDirective",
    "DelegateDirective",
    "ElicitSlotDirective",
    "ConfirmSlotDirective",
    "ConfirmIntentDirective",
    "OpaqueDirective",
    "ResponseEnvelope",
    "ResponseBody",
    "OutputSpeech",
    "Card",
    "Reprompt",
]
