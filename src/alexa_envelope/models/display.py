"""
Display interface structures.

The Display interface is deprecated in favour of APL, but ``Image`` is still
used by AudioPlayer metadata and RenderTemplate remains in the field.
"""

from pydantic import Field, StrictInt

from .base import WireModel, wire_config
from .types import BackButtonBehaviorValue, ImageSizeValue, TextFieldTypeValue


class ImageInstance(WireModel):
    model_config = wire_config("ImageInstance")

    url: str
    size: ImageSizeValue | None = None
    width_pixels: StrictInt | None = Field(None, ge=0)
    height_pixels: StrictInt | None = Field(None, ge=0)


class Image(WireModel):
    """An image in one or more sizes."""

    model_config = wire_config("Image")

    content_description: str | None = None
    sources: list[ImageInstance]


class TextField(WireModel):
    model_config = wire_config("TextField")

    type: TextFieldTypeValue
    text: str


class TextContent(WireModel):
    model_config = wire_config("TextContent")

    primary_text: TextField | None = None
    secondary_text: TextField | None = None
    tertiary_text: TextField | None = None


class ListItem(WireModel):
    model_config = wire_config("ListItem")

    token: str
    image: Image | None = None
    text_content: TextContent | None = None


class DisplayTemplate(WireModel):
    """
    A body or list template (``BodyTemplate1``, ``ListTemplate2``, ...).

    Template kinds differ only in which of these fields they use, so one
    extensible structure covers all of them.
    """

    model_config = wire_config("DisplayTemplate")

    type: str = Field(..., min_length=1)
    token: str | None = None
    back_button: BackButtonBehaviorValue | None = None
    background_image: Image | None = None
    title: str | None = None
    image: Image | None = None
    text_content: TextContent | None = None
    list_items: list[ListItem] | None = None
