"""Data models for Mail Model.

This module contains Pydantic models for the fields shared by outgoing and
received messages, and for the two message kinds built on them.
"""

from mail_model.models.common_email import CommonEmail
from mail_model.models.email_message import EmailMessage
from mail_model.models.outgoing_email import Email
from mail_model.models.priority import PRIORITY_UNAVAILABLE, X_PRIORITY, Priority
from mail_model.models.received_email import ReceivedEmail

__all__ = [
    "CommonEmail",
    "Email",
    "EmailMessage",
    "PRIORITY_UNAVAILABLE",
    "Priority",
    "ReceivedEmail",
    "X_PRIORITY",
]
