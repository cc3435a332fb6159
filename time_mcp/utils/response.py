"""Standardized response envelopes for MCP tools."""

from typing import Any, Dict, List, Literal

from pydantic import BaseModel, ConfigDict, Field


class TextItem(BaseModel):
    """A single text content item."""
    model_config = ConfigDict(frozen=True)

    type: Literal["text"] = "text"
    text: str


class ResponseEnvelope(BaseModel):
    """Uniform success/failure wrapper returned for every invocation.

    Serializes as ``{"content": [...], "isError": true}``; ``isError`` is
    omitted on success.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    content: List[TextItem]
    is_error: bool = Field(default=False, alias="isError")

    @property
    def text(self) -> str:
        """Text of the (single) content item."""
        return self.content[0].text

    def to_dict(self) -> Dict[str, Any]:
        """Wire representation of the envelope."""
        data = {"content": [item.model_dump() for item in self.content]}
        if self.is_error:
            data["isError"] = True
        return data


def is_success(envelope: ResponseEnvelope) -> bool:
    """Check if an invocation succeeded."""
    return not envelope.is_error


def success_response(text: str) -> ResponseEnvelope:
    """Create a successful response envelope.

    Args:
        text: Handler result text

    Returns:
        Envelope with one text item and no error flag
    """
    return ResponseEnvelope(content=[TextItem(text=text)])


def error_response(message: str) -> ResponseEnvelope:
    """Create an error response envelope.

    Args:
        message: Failure description, without the ``Error:`` prefix

    Returns:
        Envelope flagged as an error with text ``Error: {message}``
    """
    return ResponseEnvelope(
        content=[TextItem(text=f"Error: {message}")],
        is_error=True,
    )
