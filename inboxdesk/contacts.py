"""The contacts view: a table of every known user."""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from inboxdesk.component import Component
from inboxdesk.container import ServiceContainer
from inboxdesk.models import User
from inboxdesk.repositories import UserRepo

ContactRow = Tuple[str, str, str]


def contact_rows(users: Iterable[User]) -> List[ContactRow]:
    """Turn users into (email, first name, last name) rows."""
    return [(user.email, user.first_name, user.last_name) for user in users]


class ContactsView(Component):
    """Table of the users stored in the database."""

    HEADERS: Tuple[str, str, str] = ("Email", "First Name", "Last Name")

    def __init__(
        self, container: ServiceContainer, parent: Optional[Component] = None
    ) -> None:
        super().__init__("ContactsView", parent)
        self._container = container
        user_repo = container.get_service(UserRepo)
        self._rows = contact_rows(user_repo.all_users())

    def rows(self) -> List[ContactRow]:
        return list(self._rows)