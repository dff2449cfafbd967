"""Pytest configuration and shared fixtures."""

from datetime import datetime, timezone

import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_global_state():
    """Clear cached settings and structlog configuration between tests."""
    from mail_model.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()


@pytest.fixture
def mock_settings():
    """Provide mock settings for testing."""
    from mail_model.config import Settings

    return Settings(
        default_encoding="ISO-8859-1",
        log_level="DEBUG",
        debug=True,
    )


@pytest.fixture
def sample_common_email():
    """Provide a populated CommonEmail."""
    from mail_model.models import CommonEmail

    email = CommonEmail()
    email.set_from("Jane Doe <jane@example.com>")
    email.set_to("bob@example.com", "carol@example.com")
    email.set_cc("dave@example.com")
    email.set_subject("Quarterly report")
    email.add_message("See attached numbers.", "text/plain")
    email.set_sent_date(datetime(2024, 5, 1, 9, 30, tzinfo=timezone.utc))
    return email
