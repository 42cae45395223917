"""The e-mail list: categories, search bar and cards of the listed e-mails."""

from __future__ import annotations

from enum import Enum, auto
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from inboxdesk.component import Component
from inboxdesk.container import ServiceContainer
from inboxdesk.events import EventBus, PreviewEmailClicked
from inboxdesk.models import Email
from inboxdesk.repositories import EmailRepo, UserRepo

CATEGORIES: Tuple[str, ...] = (
    "Inbox",
    "Drafts",
    "Sent Mail",
    "All Mail",
    "Spam",
    "Bin",
    "Important",
    "Starred",
)


class EmailListKind(Enum):
    """The kinds of e-mail list that can be shown."""

    INBOX_LIST_VIEW = auto()
    DRAFT_LIST_VIEW = auto()
    BIN_LIST_VIEW = auto()


class CategoryList(Component):
    """Fixed list of mail categories."""

    header = "Category"

    def __init__(
        self, container: ServiceContainer, parent: Optional[Component] = None
    ) -> None:
        super().__init__("CategoryList", parent)
        self._container = container
        self._categories: List[str] = list(CATEGORIES)

    def categories(self) -> List[str]:
        return list(self._categories)


class EmailListFilterFrame(Component):
    """Holds the filter options of the e-mail list."""

    def __init__(
        self, container: ServiceContainer, parent: Optional[Component] = None
    ) -> None:
        super().__init__("EmailListFilterFrame", parent)
        self._container = container


class EmailListSortFrame(Component):
    """Holds the sort options of the e-mail list."""

    def __init__(
        self, container: ServiceContainer, parent: Optional[Component] = None
    ) -> None:
        super().__init__("EmailListSortFrame", parent)
        self._container = container


class EmailListSearchBar(Component):
    """Search input with its search, filter and sort buttons."""

    placeholder = "Search..."
    buttons: Tuple[str, ...] = ("Search", "Filter", "Sort")

    def __init__(
        self, container: ServiceContainer, parent: Optional[Component] = None
    ) -> None:
        super().__init__("EmailListSearchBar", parent)
        self._container = container
        self.text = ""
        self.filter_frame = EmailListFilterFrame(container, self)
        self.sort_frame = EmailListSortFrame(container, self)


class EmailCard(Component):
    """Summary of one e-mail: sender, time sent, subject and a preview button."""

    def __init__(
        self,
        container: ServiceContainer,
        email: Email,
        sender: str,
        parent: Optional[Component] = None,
    ) -> None:
        super().__init__("EmailCard", parent)
        self._container = container
        self.email_id = email.email_id
        self.sender = sender
        self.subject = email.subject
        self.sent_at = email.sent_at
        self._on_preview: Callable[[], None] = lambda: None
        self.bind_events()

    def bind_events(self) -> None:
        bus = self._container.get_service(EventBus)
        email_id = self.email_id

        def on_preview() -> None:
            bus.forward_emit(PreviewEmailClicked, email_id)

        self._on_preview = on_preview

    def preview(self) -> None:
        """Press the preview button: announce that this e-mail should be shown."""
        self._on_preview()


class EmailCardList(Component):
    """Scrollable column of e-mail cards."""

    def __init__(
        self, container: ServiceContainer, parent: Optional[Component] = None
    ) -> None:
        super().__init__("EmailCardList", parent)
        self._container = container
        self._cards: List[EmailCard] = []

    def project_emails(self, emails: Iterable[Email]) -> None:
        """Replace the shown cards with one card per e-mail, in order."""
        user_repo = self._container.get_service(UserRepo)
        cards = [
            EmailCard(self._container, email, user_repo.get_user(email.sender_id).email, self)
            for email in emails
        ]
        self._cards = cards

    def cards(self) -> List[EmailCard]:
        return list(self._cards)


class EmailListView(Component):
    """A list of e-mails shown as cards."""

    def __init__(
        self,
        container: ServiceContainer,
        name: str,
        parent: Optional[Component] = None,
    ) -> None:
        super().__init__(name, parent)
        self._container = container
        self.email_card_list = EmailCardList(container, self)


class InboxListView(EmailListView):
    """The inbox: every stored e-mail."""

    def __init__(
        self, container: ServiceContainer, parent: Optional[Component] = None
    ) -> None:
        super().__init__(container, "InboxListView", parent)
        email_repo = container.get_service(EmailRepo)
        self.email_card_list.project_emails(email_repo.all_emails())


class EmailList(Component):
    """Search bar above whichever e-mail list is current."""

    def __init__(
        self, container: ServiceContainer, parent: Optional[Component] = None
    ) -> None:
        super().__init__("EmailList", parent)
        self._container = container
        self.search_bar = EmailListSearchBar(container, self)
        self.list_views: Dict[EmailListKind, EmailListView] = {
            EmailListKind.INBOX_LIST_VIEW: InboxListView(container, self),
        }
        self._current = EmailListKind.INBOX_LIST_VIEW
        self.hide_all_views()
        self.list_views[self._current].visible = True

    def hide_all_views(self) -> None:
        for view in self.list_views.values():
            view.visible = False

    def current_view(self) -> EmailListKind:
        return self._current