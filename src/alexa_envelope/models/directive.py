"""Response directives, a union discriminated on ``type``."""

from typing import Annotated, Any, Literal, Union

from pydantic import Discriminator, Field, Tag, model_validator

from .audioplayer import AudioItem
from .base import WireModel, wire_config
from .display import DisplayTemplate
from .intent import Intent
from .types import ClearBehaviorValue, DirectiveType, PlayBehaviorValue

OPAQUE_DIRECTIVE_TAG = "OpaqueDirective"


class SpeakDirective(WireModel):
    """Progressive response spoken while the skill is still working."""

    model_config = wire_config("SpeakDirective")

    type: Literal["VoicePlayer.Speak"] = "VoicePlayer.Speak"
    speech: str = Field(..., min_length=1)


class PlayDirective(WireModel):
    model_config = wire_config("PlayDirective")

    type: Literal["AudioPlayer.Play"] = "AudioPlayer.Play"
    play_behavior: PlayBehaviorValue
    audio_item: AudioItem


class StopDirective(WireModel):
    model_config = wire_config("StopDirective")

    type: Literal["AudioPlayer.Stop"] = "AudioPlayer.Stop"


class ClearQueueDirective(WireModel):
    model_config = wire_config("ClearQueueDirective")

    type: Literal["AudioPlayer.ClearQueue"] = "AudioPlayer.ClearQueue"
    clear_behavior: ClearBehaviorValue


class RenderTemplateDirective(WireModel):
    model_config = wire_config("RenderTemplateDirective")

    type: Literal["Display.RenderTemplate"] = "Display.RenderTemplate"
    template: DisplayTemplate


class HintContent(WireModel):
    model_config = wire_config("HintContent")

    type: Literal["PlainText"]
    text: str = Field(..., min_length=1)


class HintDirective(WireModel):
    """Suggested utterance shown on screen devices."""

    model_config = wire_config("HintDirective")

    type: Literal["Hint"] = "Hint"
    hint: HintContent


class DelegateDirective(WireModel):
    """Hand the next dialog turn to the platform's dialog model."""

    model_config = wire_config("DelegateDirective")

    type: Literal["Dialog.Delegate"] = "Dialog.Delegate"
    updated_intent: Intent | None = None


class ElicitSlotDirective(WireModel):
    model_config = wire_config("ElicitSlotDirective")

    type: Literal["Dialog.ElicitSlot"] = "Dialog.ElicitSlot"
    slot_to_elicit: str = Field(..., min_length=1)
    updated_intent: Intent | None = None


class ConfirmSlotDirective(WireModel):
    model_config = wire_config("ConfirmSlotDirective")

    type: Literal["Dialog.ConfirmSlot"] = "Dialog.ConfirmSlot"
    slot_to_confirm: str = Field(..., min_length=1)
    updated_intent: Intent | None = None


class ConfirmIntentDirective(WireModel):
    model_config = wire_config("ConfirmIntentDirective")

    type: Literal["Dialog.ConfirmIntent"] = "Dialog.ConfirmIntent"
    updated_intent: Intent | None = None


class OpaqueDirective(WireModel):
    """
    A directive kind this package does not model (APL documents, video, ...).

    Only ``type`` is an attribute; every other field lives in ``payload`` and is
    written back unchanged. ``type`` is never one of the modelled kinds.
    """

    model_config = wire_config("OpaqueDirective")

    type: str = Field(..., min_length=1)

    @model_validator(mode="after")
    def reject_modelled_kind(self) -> "OpaqueDirective":
        if self.type in {kind.value for kind in DirectiveType}:
            raise ValueError(f"{self.type} is a modelled directive kind and cannot be opaque")
        return self

    @property
    def payload(self) -> dict[str, Any]:
        return dict(self.model_extra or {})


DIRECTIVE_TYPES: dict[str, type[WireModel]] = {
    cls.model_fields["type"].default: cls
    for cls in (
        SpeakDirective,
        PlayDirective,
        StopDirective,
        ClearQueueDirective,
        RenderTemplateDirective,
        HintDirective,
        DelegateDirective,
        ElicitSlotDirective,
        ConfirmSlotDirective,
        ConfirmIntentDirective,
    )
}


def _directive_tag(value: Any) -> str | None:
    if isinstance(value, OpaqueDirective):
        return OPAQUE_DIRECTIVE_TAG
    directive_type = value.get("type") if isinstance(value, dict) else getattr(value, "type", None)
    if not isinstance(directive_type, str):
        return None
    return directive_type if directive_type in DIRECTIVE_TYPES else OPAQUE_DIRECTIVE_TAG


Directive = Annotated[
    Union[
        Annotated[SpeakDirective, Tag("VoicePlayer.Speak")],
        Annotated[PlayDirective, Tag("AudioPlayer.Play")],
        Annotated[StopDirective, Tag("AudioPlayer.Stop")],
        Annotated[ClearQueueDirective, Tag("AudioPlayer.ClearQueue")],
        Annotated[RenderTemplateDirective, Tag("Display.RenderTemplate")],
        Annotated[HintDirective, Tag("Hint")],
        Annotated[DelegateDirective, Tag("Dialog.Delegate")],
        Annotated[ElicitSlotDirective, Tag("Dialog.ElicitSlot")],
        Annotated[ConfirmSlotDirective, Tag("Dialog.ConfirmSlot")],
        Annotated[ConfirmIntentDirective, Tag("Dialog.ConfirmIntent")],
        Annotated[OpaqueDirective, Tag(OPAQUE_DIRECTIVE_TAG)],
    ],
    Discriminator(
        _directive_tag,
        custom_error_type="missing_directive_type",
        custom_error_message="Directive needs a string 'type'",
    ),
]
