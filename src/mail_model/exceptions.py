"""Custom exceptions for Mail Model."""


class MailModelError(Exception):
    """Base exception for all Mail Model errors."""


class ConfigurationError(MailModelError):
    """Exception raised for configuration related errors."""
