"""Intent, slot and entity resolution models."""

from .base import WireModel, wire_config
from .types import ConfirmationStatusValue, ResolutionStatusCode, ResolutionStatusCodeValue


class ResolutionValue(WireModel):
    model_config = wire_config("ResolutionValue")

    name: str
    id: str | None = None


class ResolutionValueWrapper(WireModel):
    model_config = wire_config("ResolutionValueWrapper")

    value: ResolutionValue


class ResolutionStatus(WireModel):
    model_config = wire_config("ResolutionStatus")

    code: ResolutionStatusCodeValue


class ResolutionPerAuthority(WireModel):
    """Entity resolution result from one authority (custom slot type or dynamic entities)."""

    model_config = wire_config("ResolutionPerAuthority")

    authority: str
    status: ResolutionStatus
    values: list[ResolutionValueWrapper] | None = None

    @property
    def matched(self) -> bool:
        return self.status.code == ResolutionStatusCode.ER_SUCCESS_MATCH


class Resolutions(WireModel):
    model_config = wire_config("Resolutions")

    resolutions_per_authority: list[ResolutionPerAuthority]


class Slot(WireModel):
    """A named fragment of the utterance; ``value`` is absent when the slot was not filled."""

    model_config = wire_config("Slot")

    name: str
    value: str | None = None
    confirmation_status: ConfirmationStatusValue | None = None
    resolutions: Resolutions | None = None

    def resolved_values(self) -> list[ResolutionValue]:
        """Canonical values from every authority that reported a match, in authority order."""
        if self.resolutions is None:
            return []
        return [
            wrapper.value
            for authority in self.resolutions.resolutions_per_authority
            if authority.matched
            for wrapper in authority.values or []
        ]


class Intent(WireModel):
    model_config = wire_config("Intent")

    name: str
    confirmation_status: ConfirmationStatusValue | None = None
    slots: dict[str, Slot] | None = None

    def slot(self, name: str) -> Slot | None:
        return (self.slots or {}).get(name)

    def slot_value(self, name: str) -> str | None:
        slot = self.slot(name)
        return slot.value if slot else None
