"""Unit tests for the outgoing and received message kinds."""

from datetime import datetime, timezone

from mail_model.models import CommonEmail, Email, ReceivedEmail


class TestEmail:
    """Test suite for the outgoing Email model."""

    def test_new_email_has_its_own_common_record(self) -> None:
        first = Email()
        second = Email()

        first.common.set_subject("first")

        assert second.common.get_subject() is None

    def test_add_text_and_html(self) -> None:
        """Test that helpers append parts in order with their MIME types."""
        email = Email().add_text("Hello").add_html("<b>Hello</b>", encoding="ISO-8859-1")

        text, html = email.common.get_all_messages()
        assert (text.mime_type, text.encoding) == ("text/plain", "UTF-8")
        assert (html.mime_type, html.encoding) == ("text/html", "ISO-8859-1")

    def test_wraps_existing_common_record(self, sample_common_email: CommonEmail) -> None:
        email = Email(common=sample_common_email)
        email.common.set_priority(2)

        assert email.common.get_subject() == "Quarterly report"
        assert email.common.get_priority() == 2


class TestReceivedEmail:
    """Test suite for the ReceivedEmail model."""

    def test_defaults(self) -> None:
        email = ReceivedEmail()

        assert email.message_number == 0
        assert email.flags == set()
        assert email.received_date is None
        assert email.attached_messages == []
        assert email.common.get_priority() == -1
        assert email.is_seen() is False

    def test_receive_only_fields(self) -> None:
        received = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)
        email = ReceivedEmail(message_number=42, flags={"\\Seen", "\\Flagged"}, received_date=received)
        email.common.set_from("sender@example.com")

        assert email.message_number == 42
        assert email.is_seen() is True
        assert email.received_date == received
        assert email.common.get_from() == "sender@example.com"

    def test_attached_messages_keep_order(self) -> None:
        outer = ReceivedEmail()
        first = ReceivedEmail(message_number=1)
        second = ReceivedEmail(message_number=2)

        outer.add_attached_message(first)
        outer.add_attached_message(second)

        assert [m.message_number for m in outer.attached_messages] == [1, 2]
