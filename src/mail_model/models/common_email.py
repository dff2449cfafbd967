"""Fields shared by outgoing and received messages.

`CommonEmail` is a mutable record. It is filled in by a composer or a parser
and then handed to whatever sends or displays the message. Addresses are kept
as given (``"Name <user@example.com>"`` is fine) and are never validated here.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from datetime import datetime
from typing import Any

import structlog
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PrivateAttr,
    TypeAdapter,
    computed_field,
    field_validator,
)

from mail_model.models.email_message import EmailMessage
from mail_model.models.priority import PRIORITY_UNAVAILABLE, X_PRIORITY

logger = structlog.get_logger()

_HEADER_TEXT = TypeAdapter(str)

_INTEGER = re.compile(r"[+-]?[0-9]+")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _address_list(value: Any) -> Any:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return value


def _varargs(addresses: tuple[Any, ...]) -> Any:
    # A lone list, tuple or None stands for the whole sequence.
    if len(addresses) == 1 and not isinstance(addresses[0], str):
        return addresses[0]
    return list(addresses)


def _parse_int32(value: str) -> int:
    if not _INTEGER.fullmatch(value):
        raise ValueError(f"not an integer: {value!r}")
    number = int(value)
    if not _INT_MIN <= number <= _INT_MAX:
        raise ValueError(f"out of 32-bit range: {value!r}")
    return number


class CommonEmail(BaseModel):
    """Envelope, subject, body parts, headers and sent date of a message."""

    model_config = ConfigDict(validate_assignment=True, populate_by_name=True)

    from_addr: str | None = Field(default=None, alias="from", description="From address")
    to: list[str] = Field(default_factory=list, description="To addresses")
    reply_to: list[str] = Field(default_factory=list, description="Reply-To addresses")
    cc: list[str] = Field(default_factory=list, description="Cc addresses")
    bcc: list[str] = Field(default_factory=list, description="Bcc addresses")

    subject: str | None = Field(default=None, description="Subject header")

    messages: list[EmailMessage] = Field(default_factory=list, description="Body parts in order")

    sent_date: datetime | None = Field(
        default=None,
        description="Sent date; None means it is set when the message is sent",
    )

    # Stays None until the first set_header call, then lives as long as the record.
    _headers: dict[str, str] | None = PrivateAttr(default=None)

    @field_validator("to", "reply_to", "cc", "bcc", mode="before")
    @classmethod
    def _normalize_addresses(cls, value: Any) -> Any:
        return _address_list(value)

    # ------------------------------------------------------------------ from

    def set_from(self, address: str | None) -> None:
        """Set the From address, optionally with a display name."""
        self.from_addr = address

    def get_from(self) -> str | None:
        return self.from_addr

    # ------------------------------------------------------------ recipients

    def set_to(self, *addresses: str | Iterable[str] | None) -> None:
        """Replace the To addresses. No arguments or None clears them."""
        self.to = _varargs(addresses)

    def get_to(self) -> list[str]:
        return self.to

    def set_reply_to(self, *addresses: str | Iterable[str] | None) -> None:
        """Replace the Reply-To addresses. No arguments or None clears them."""
        self.reply_to = _varargs(addresses)

    def get_reply_to(self) -> list[str]:
        return self.reply_to

    def set_cc(self, *addresses: str | Iterable[str] | None) -> None:
        """Replace the Cc addresses. No arguments or None clears them."""
        self.cc = _varargs(addresses)

    def get_cc(self) -> list[str]:
        return self.cc

    def set_bcc(self, *addresses: str | Iterable[str] | None) -> None:
        """Replace the Bcc addresses. No arguments or None clears them."""
        self.bcc = _varargs(addresses)

    def get_bcc(self) -> list[str]:
        return self.bcc

    # --------------------------------------------------------------- subject

    def set_subject(self, subject: str | None) -> None:
        self.subject = subject

    def get_subject(self) -> str | None:
        return self.subject

    # -------------------------------------------------------------- messages

    def get_all_messages(self) -> list[EmailMessage]:
        """Return the body parts. The list is live, not a copy."""
        return self.messages

    def add_message(
        self,
        message: EmailMessage | str,
        mime_type: str | None = None,
        encoding: str | None = None,
    ) -> None:
        """Append a body part.

        Args:
            message: A ready body part, or the text of a new one.
            mime_type: MIME type; required when ``message`` is text.
            encoding: Character encoding for text. If None, uses settings
                default_encoding.

        Raises:
            TypeError: If ``mime_type`` is missing for text, or given along
                with a ready body part.
        """
        if isinstance(message, EmailMessage):
            if mime_type is not None or encoding is not None:
                raise TypeError("mime_type and encoding only apply when adding text")
            self.messages.append(message)
            return

        if mime_type is None:
            raise TypeError("mime_type is required when adding text")
        self.messages.append(EmailMessage.create(message, mime_type, encoding))

    # --------------------------------------------------------------- headers

    @computed_field(description="Custom headers; None until the first one is set")
    @property
    def headers(self) -> dict[str, str] | None:
        return self._headers

    def get_all_headers(self) -> dict[str, str] | None:
        """Return the header mapping, or None if no header was ever set."""
        return self._headers

    def set_header(self, name: str, value: str) -> None:
        """Set a header, replacing any previous value under the same name.

        Raises:
            pydantic.ValidationError: If the name or value is not a string.
        """
        name = _HEADER_TEXT.validate_python(name)
        value = _HEADER_TEXT.validate_python(value)
        if self._headers is None:
            self._headers = {}
        self._headers[name] = value

    def get_header(self, name: str) -> str | None:
        if self._headers is None:
            return None
        return self._headers.get(name)

    # -------------------------------------------------------------- priority

    def set_priority(self, priority: int) -> None:
        """Set the X-Priority header.

        Values 1 through 5 are conventional, 1 being the highest and 3 normal.
        Other values are stored as given.
        """
        self.set_header(X_PRIORITY, str(int(priority)))

    def get_priority(self) -> int:
        """Return the X-Priority value, or -1 if it is missing or not a 32-bit integer."""
        value = self.get_header(X_PRIORITY)
        if value is None:
            return PRIORITY_UNAVAILABLE
        try:
            return _parse_int32(value)
        except (TypeError, ValueError):
            logger.debug("priority_header_unparseable", value=value)
            return PRIORITY_UNAVAILABLE

    # ------------------------------------------------------------- sent date

    def set_sent_date(self, date: datetime | None) -> None:
        """Set the sent date. None leaves it to the sender."""
        self.sent_date = date

    def get_sent_date(self) -> datetime | None:
        return self.sent_date
