"""Body part model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from mail_model.config import get_settings


def _default_encoding() -> str:
    return get_settings().default_encoding


class EmailMessage(BaseModel):
    """A single body part: text content with its MIME type and encoding."""

    model_config = ConfigDict(frozen=True)

    content: str = Field(description="Body part text")
    mime_type: str = Field(description="MIME type, e.g. text/plain or text/html")
    encoding: str = Field(
        default_factory=_default_encoding,
        description="Character encoding of the content",
    )

    @classmethod
    def create(cls, content: str, mime_type: str, encoding: str | None = None) -> EmailMessage:
        """Build a body part, falling back to the configured encoding.

        Args:
            content: Body part text.
            mime_type: MIME type of the content.
            encoding: Character encoding. If None, uses settings default_encoding.

        Returns:
            EmailMessage: The new body part.
        """
        if encoding is None:
            return cls(content=content, mime_type=mime_type)
        return cls(content=content, mime_type=mime_type, encoding=encoding)
