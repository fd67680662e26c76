"""AudioPlayer interface structures carried by the Play directive."""

from pydantic import Field, StrictInt

from .base import WireModel, wire_config
from .display import Image


class CaptionData(WireModel):
    model_config = wire_config("CaptionData")

    type: str | None = None
    content: str | None = None


class Stream(WireModel):
    """The audio stream to play, identified by ``token`` in later playback events."""

    model_config = wire_config("Stream")

    url: str = Field(..., min_length=1)
    token: str = Field(..., min_length=1)
    offset_in_milliseconds: StrictInt | None = None
    expected_previous_token: str | None = None
    caption_data: CaptionData | None = None


class AudioItemMetadata(WireModel):
    """What screen devices show while the stream plays."""

    model_config = wire_config("AudioItemMetadata")

    title: str | None = None
    subtitle: str | None = None
    art: Image | None = None
    background_image: Image | None = None


class AudioItem(WireModel):
    model_config = wire_config("AudioItem")

    stream: Stream
    metadata: AudioItemMetadata | None = None
