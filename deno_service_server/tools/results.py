"""Structured results returned by tool handlers."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class TextBlock(BaseModel):
    """A plain-text content block."""

    type: Literal["text"] = "text"
    text: str


class ToolResult(BaseModel):
    """Outcome of one tool invocation.

    ``is_error`` marks a failure that happened *inside* a handler.  Such
    failures are still successful responses at the protocol level.
    """

    content: list[TextBlock] = Field(default_factory=list)
    is_error: bool = False

    @property
    def text(self) -> str:
        """All text blocks joined with newlines."""
        return "\n".join(block.text for block in self.content)

    @classmethod
    def success(cls, text: str) -> "ToolResult":
        return cls(content=[TextBlock(text=text)])

    @classmethod
    def failure(cls, text: str) -> "ToolResult":
        return cls(content=[TextBlock(text=text)], is_error=True)
