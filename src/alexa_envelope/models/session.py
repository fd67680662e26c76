"""Session model."""

from typing import Any

from pydantic import StrictBool

from .base import WireModel, wire_config
from .context import Application, User


class Session(WireModel):
    """
    Multi-turn session state.

    ``attributes`` holds whatever the skill returned as ``sessionAttributes``
    on the previous turn; values are arbitrary JSON.
    """

    model_config = wire_config("Session")

    new: StrictBool
    session_id: str
    application: Application
    attributes: dict[str, Any] | None = None
    user: User
