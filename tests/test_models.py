import pytest

from inboxdesk.models import (
    Attachment,
    Email,
    EmailStatus,
    User,
    email_status_from_string,
    email_status_to_string,
)


@pytest.mark.parametrize("text", ["sent", "draft", "deleted"])
def test_status_text_round_trip(text):
    assert email_status_to_string(email_status_from_string(text)) == text


@pytest.mark.parametrize(
    "status", [EmailStatus.SENT, EmailStatus.DRAFT, EmailStatus.DELETED]
)
def test_status_enum_round_trip(status):
    assert email_status_from_string(email_status_to_string(status)) is status


def test_sent_draft_parses_but_is_stored_as_draft():
    assert email_status_from_string("sent_draft") is EmailStatus.SENT_DRAFT
    assert email_status_to_string(EmailStatus.SENT_DRAFT) == "draft"


@pytest.mark.parametrize("text", ["", "SENT", "archived"])
def test_unknown_status_text_raises(text):
    with pytest.raises(ValueError, match="Unknown email status type"):
        email_status_from_string(text)


def test_unknown_status_value_raises():
    with pytest.raises(ValueError, match="Unknown email status type"):
        email_status_to_string("sent")


def test_email_str_uses_status_text():
    email = Email(3, 4, "Hello", "Body text", EmailStatus.SENT, "2025-04-12")
    text = str(email)
    assert text.startswith("Email(")
    assert "status: sent" in text
    assert "subject: Hello" in text


def test_attachment_str_leaves_out_data():
    attachment = Attachment(1, "report.pdf", "/tmp/report.pdf", b"SECRETBYTES", "now")
    text = str(attachment)
    assert "file_name: report.pdf" in text
    assert "SECRETBYTES" not in text


def test_user_defaults_and_equality():
    user = User(email="ann@example.com", first_name="Ann", last_name="Lee")
    assert user.user_id == 0
    assert user == User(0, "ann@example.com", "Ann", "Lee", "")
    assert "email: ann@example.com" in str(user)