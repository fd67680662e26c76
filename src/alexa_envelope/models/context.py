"""Device, identity and interface-state models from the request context."""

from typing import Any

from pydantic import StrictInt

from .base import WireModel, wire_config
from .types import InterfaceName, PlayerActivityValue


class Application(WireModel):
    """Skill identity."""

    model_config = wire_config("Application")

    application_id: str


class Permissions(WireModel):
    model_config = wire_config("Permissions")

    consent_token: str | None = None


class User(WireModel):
    """Amazon account that owns the device."""

    model_config = wire_config("User")

    user_id: str
    access_token: str | None = None
    permissions: Permissions | None = None


class Person(WireModel):
    """Recognized speaker, when voice profiles are enabled."""

    model_config = wire_config("Person")

    person_id: str
    access_token: str | None = None


class Device(WireModel):
    """Device identity and the interfaces it declares."""

    model_config = wire_config("Device")

    device_id: str
    supported_interfaces: dict[str, dict[str, Any]] | None = None

    def supports(self, interface: InterfaceName | str) -> bool:
        """Whether the device declares ``interface`` under supportedInterfaces."""
        name = interface.value if isinstance(interface, InterfaceName) else interface
        return name in (self.supported_interfaces or {})


class System(WireModel):
    model_config = wire_config("System")

    api_endpoint: str | None = None
    api_access_token: str | None = None
    application: Application | None = None
    user: User | None = None
    person: Person | None = None
    device: Device | None = None


class AudioPlayerState(WireModel):
    """Playback state, present when the device supports AudioPlayer."""

    model_config = wire_config("AudioPlayerState")

    token: str | None = None
    # Alexa has been observed to send -1 here
    offset_in_milliseconds: StrictInt | None = None
    player_activity: PlayerActivityValue | None = None


class DisplayState(WireModel):
    model_config = wire_config("DisplayState")

    token: str | None = None


class Context(WireModel):
    """
    Device and platform snapshot sent with every request.

    Interface blocks that have no model here (``Viewport``, ``Viewports``,
    ``Extensions``, ...) are kept verbatim in ``model_extra``.
    """

    model_config = wire_config("Context")

    system: System
    audio_player: AudioPlayerState | None = None
    display: DisplayState | None = None

    def interfaces(self) -> dict[str, Any]:
        """
        All interface-state blocks keyed by their wire name.

        Modelled blocks are returned as models, unknown ones as raw JSON values.
        """
        blocks: dict[str, Any] = {}
        if self.audio_player is not None:
            blocks[InterfaceName.AUDIO_PLAYER.value] = self.audio_player
        if self.display is not None:
            blocks[InterfaceName.DISPLAY.value] = self.display
        blocks.update(self.model_extra or {})
        return blocks
