"""Records stored in the mail database."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class EmailStatus(Enum):
    """Lifecycle state of a stored e-mail."""

    SENT = auto()
    DRAFT = auto()
    DELETED = auto()
    SENT_DRAFT = auto()


_STATUS_BY_TEXT = {
    "sent": EmailStatus.SENT,
    "draft": EmailStatus.DRAFT,
    "deleted": EmailStatus.DELETED,
    "sent_draft": EmailStatus.SENT_DRAFT,
}

# A sent draft is stored back as an ordinary draft.
_TEXT_BY_STATUS = {
    EmailStatus.SENT: "sent",
    EmailStatus.DRAFT: "draft",
    EmailStatus.DELETED: "deleted",
    EmailStatus.SENT_DRAFT: "draft",
}


def email_status_from_string(text: str) -> EmailStatus:
    """Parse the status column of the email table."""
    try:
        return _STATUS_BY_TEXT[text]
    except (KeyError, TypeError):
        raise ValueError(f"Unknown email status type: {text}") from None


def email_status_to_string(status: EmailStatus) -> str:
    """Return the text stored in the database for a status."""
    try:
        return _TEXT_BY_STATUS[status]
    except (KeyError, TypeError):
        raise ValueError(f"Unknown email status type: {status}") from None


@dataclass(frozen=True)
class Email:
    email_id: int
    sender_id: int
    subject: str
    body: str
    status: EmailStatus
    sent_at: str

    def __str__(self) -> str:
        return (
            f"Email(email_id: {self.email_id}, sender_id: {self.sender_id}, "
            f"subject: {self.subject}, body: {self.body}, "
            f"status: {email_status_to_string(self.status)}, sent_at: {self.sent_at})"
        )


@dataclass(frozen=True)
class Attachment:
    attachment_id: int
    file_name: str
    file_path: str
    data: bytes = b""
    created_at: str = ""

    def __str__(self) -> str:
        return (
            f"Attachment(attachment_id: {self.attachment_id}, file_name: {self.file_name}, "
            f"file_path: {self.file_path}, created_at: {self.created_at})"
        )


@dataclass(frozen=True)
class User:
    user_id: int = 0
    email: str = ""
    first_name: str = ""
    last_name: str = ""
    created_at: str = ""

    def __str__(self) -> str:
        return (
            f"User(user_id: {self.user_id}, email: {self.email}, "
            f"first_name: {self.first_name}, last_name: {self.last_name}, "
            f"created_at: {self.created_at})"
        )