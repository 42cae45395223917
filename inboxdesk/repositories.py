"""Repositories that read and write e-mails, users and attachments."""

from __future__ import annotations

import sqlite3
from typing import Any, List, Mapping, Sequence, Union

from inboxdesk.container import Service
from inboxdesk.database import DatabaseError, DbContext
from inboxdesk.models import Attachment, Email, User, email_status_from_string

_Params = Union[Sequence[Any], Mapping[str, Any]]


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _int(value: Any) -> int:
    return 0 if value is None else int(value)


def _bytes(value: Any) -> bytes:
    if value is None:
        return b""
    if isinstance(value, str):
        return value.encode("utf-8")
    return bytes(value)


class _Repository(Service):
    def __init__(self, db: DbContext) -> None:
        self._db = db

    def _fetch(self, sql: str, params: _Params = ()) -> List[sqlite3.Row]:
        connection = self._db.connection()
        try:
            return connection.execute(sql, params).fetchall()
        except sqlite3.Error as exc:
            raise DatabaseError(f"Query failed: {exc}") from exc


class EmailRepo(_Repository):
    """Reads rows of the email table."""

    def all_emails(self) -> List[Email]:
        return [self._map(row) for row in self._fetch("SELECT * FROM email")]

    def get_email(self, email_id: int) -> Email:
        rows = self._fetch(
            "SELECT * FROM email WHERE email_id = :email_id", {"email_id": email_id}
        )
        if not rows:
            raise LookupError(f"No email with id '{email_id}' exists in the DB.")
        return self._map(rows[0])

    @staticmethod
    def _map(row: sqlite3.Row) -> Email:
        return Email(
            email_id=_int(row["email_id"]),
            sender_id=_int(row["sender_id"]),
            subject=_text(row["subject"]),
            body=_text(row["body"]),
            status=email_status_from_string(_text(row["status"])),
            sent_at=_text(row["sent_at"]),
        )


class UserRepo(_Repository):
    """Reads and adds rows of the user table."""

    def all_users(self) -> List[User]:
        return [self._map(row) for row in self._fetch("SELECT * FROM user")]

    def get_user_by_email(self, email: str) -> User:
        rows = self._fetch("SELECT * FROM user WHERE email = :email", {"email": email})
        if not rows:
            raise LookupError(f"User with email '{email}' doesn't exist")
        return self._map(rows[0])

    def get_user(self, user_id: int) -> User:
        rows = self._fetch(
            "SELECT * FROM user WHERE user_id = :user_id", {"user_id": user_id}
        )
        if not rows:
            raise LookupError(f"User with id '{user_id}' doesn't exist")
        return self._map(rows[0])

    def add_user(self, user: User) -> int:
        """Insert a user and return the id the database gave it."""
        connection = self._db.connection()
        try:
            with connection:
                cursor = connection.execute(
                    "INSERT INTO user(email, first_name, last_name) "
                    "VALUES (:email, :first_name, :last_name)",
                    {
                        "email": user.email,
                        "first_name": user.first_name,
                        "last_name": user.last_name,
                    },
                )
        except sqlite3.Error as exc:
            raise DatabaseError(f"AddUser failed: {exc}") from exc
        return int(cursor.lastrowid)

    def recipients(self, email_id: int) -> List[User]:
        rows = self._fetch(
            """
            SELECT *
            FROM user u
            JOIN email_recipient er ON u.user_id = er.recipient_id
            WHERE er.email_id = :email_id
            """,
            {"email_id": email_id},
        )
        return [self._map(row) for row in rows]

    @staticmethod
    def _map(row: sqlite3.Row) -> User:
        return User(
            user_id=_int(row["user_id"]),
            email=_text(row["email"]),
            first_name=_text(row["first_name"]),
            last_name=_text(row["last_name"]),
            created_at=_text(row["created_at"]),
        )


class AttachmentRepo(_Repository):
    """Reads the attachments linked to an e-mail."""

    def attachments(self, email_id: int) -> List[Attachment]:
        rows = self._fetch(
            """
            SELECT *
            FROM attachment a
            JOIN email_attachment ea ON a.attachment_id = ea.attachment_id
            WHERE ea.email_id = :email_id
            """,
            {"email_id": email_id},
        )
        return [self._map(row) for row in rows]

    @staticmethod
    def _map(row: sqlite3.Row) -> Attachment:
        return Attachment(
            attachment_id=_int(row["attachment_id"]),
            file_name=_text(row["attachment_name"]),
            file_path=_text(row["attachment_path"]),
            data=_bytes(row["attachment_data"]),
            created_at=_text(row["created_at"]),
        )