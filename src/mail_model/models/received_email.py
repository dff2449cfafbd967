"""Received message model.

A parser fills one of these in from a fetched message. Messages that arrived
as ``message/rfc822`` attachments are kept, already parsed, in
``attached_messages``.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from mail_model.models.common_email import CommonEmail

SEEN = "\\Seen"


class ReceivedEmail(BaseModel):
    """A message fetched from a mailbox."""

    common: CommonEmail = Field(default_factory=CommonEmail, description="Shared message fields")

    message_number: int = Field(default=0, description="Message number within the folder")
    flags: set[str] = Field(default_factory=set, description="Mailbox flags, e.g. \\Seen")
    received_date: datetime | None = Field(default=None, description="Date the server received it")

    attached_messages: list[ReceivedEmail] = Field(
        default_factory=list,
        description="Messages attached to this one, in order",
    )

    def add_attached_message(self, email: ReceivedEmail) -> None:
        """Append a message that was attached to this one."""
        self.attached_messages.append(email)

    def is_seen(self) -> bool:
        """Return whether the \\Seen flag is set."""
        return SEEN in self.flags
