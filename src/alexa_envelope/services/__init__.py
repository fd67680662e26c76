"""Response construction services."""

from . import directives
from .response_builder import ResponseBuilder, end_session_response, simple_response

__all__ = [
    "directives",
    "ResponseBuilder",
    "simple_response",
    "end_session_response",
]
