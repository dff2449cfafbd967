"""Mail Model - shared data model for outgoing and received email.

This package provides the envelope, header, priority and body-part records
that mail composers, senders and parsers exchange.
"""

__version__ = "0.1.0"
__author__ = "Trickl"

from mail_model.config import Settings, get_settings
from mail_model.models import (
    X_PRIORITY,
    CommonEmail,
    Email,
    EmailMessage,
    Priority,
    ReceivedEmail,
)

__all__ = [
    "CommonEmail",
    "Email",
    "EmailMessage",
    "Priority",
    "ReceivedEmail",
    "Settings",
    "X_PRIORITY",
    "get_settings",
    "__version__",
    "__author__",
]
