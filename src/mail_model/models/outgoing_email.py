"""Outgoing message model."""

from __future__ import annotations

from pydantic import BaseModel, Field

from mail_model.models.common_email import CommonEmail

TEXT_PLAIN = "text/plain"
TEXT_HTML = "text/html"


class Email(BaseModel):
    """A message being composed for sending.

    Envelope, headers and body parts live in ``common``; this class only adds
    composing helpers on top of it.
    """

    common: CommonEmail = Field(default_factory=CommonEmail, description="Shared message fields")

    def add_text(self, text: str, encoding: str | None = None) -> Email:
        """Append a text/plain body part and return self for chaining."""
        self.common.add_message(text, TEXT_PLAIN, encoding)
        return self

    def add_html(self, html: str, encoding: str | None = None) -> Email:
        """Append a text/html body part and return self for chaining."""
        self.common.add_message(html, TEXT_HTML, encoding)
        return self
