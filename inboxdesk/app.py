"""The main window: side bar, view panel, menu bar and status bar."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Dict, List, Optional, TextIO, Tuple

from inboxdesk.component import Component
from inboxdesk.compose import ComposeView
from inboxdesk.contacts import ContactsView
from inboxdesk.container import ServiceContainer
from inboxdesk.database import DatabaseError, DbContext
from inboxdesk.email_list import CategoryList, EmailCard, EmailList, EmailListKind
from inboxdesk.events import EventBus, SideBarButtonClickedEvent, View
from inboxdesk.preview import EmailPreview
from inboxdesk.repositories import AttachmentRepo, EmailRepo, UserRepo

logger = logging.getLogger(__name__)

DEFAULT_DB_PATH = "Assets/Sql/emails.db"
WINDOW_TITLE = "Email Client"
APP_TITLE = "Qt Email Client"
WINDOW_SIZE: Tuple[int, int] = (1200, 800)
STATUS_MESSAGE = "TRA0163"

_SIDE_BAR_LABELS: Dict[View, str] = {
    View.COMPOSE_VIEW: "Compose",
    View.EMAIL_VIEW: "Inbox",
    View.CONTACTS_VIEW: "Contact",
    View.QUIT: "Quit",
    View.LOGOUT: "Log-Out",
}

# Top group, then a stretch, then the bottom group.
_SIDE_BAR_LAYOUT: Tuple[View, ...] = (
    View.COMPOSE_VIEW,
    View.EMAIL_VIEW,
    View.CONTACTS_VIEW,
    View.LOGOUT,
    View.QUIT,
)


class _MenuBar(Component):
    """Menus of the main window, each with its ordered actions."""

    def __init__(self, parent: Optional[Component] = None) -> None:
        super().__init__("Menubar", parent)
        self.menus: Dict[str, Tuple[str, ...]] = {}


def build_menubar(root: Optional[Component], container: ServiceContainer) -> _MenuBar:
    """Create the menu bar of the main window."""
    menubar = _MenuBar(root)
    menubar.menus["File"] = ("Compose", "Quit")
    return menubar


class SideBar(Component):
    """Column of buttons that switch between the views."""

    def __init__(
        self, container: ServiceContainer, parent: Optional[Component] = None
    ) -> None:
        super().__init__("Sidebar", parent)
        self._container = container
        self._bus = container.get_service(EventBus)
        self.labels: Dict[View, str] = dict(_SIDE_BAR_LABELS)
        self.layout: Tuple[View, ...] = _SIDE_BAR_LAYOUT

    def click(self, view: View) -> None:
        """Press the button of a view."""
        if view not in self.labels:
            raise ValueError(f"No side bar button for {view!r}")
        self._bus.emit(SideBarButtonClickedEvent(view))


class StatusBar(Component):
    """Line of status text at the bottom of the window."""

    def __init__(
        self, container: ServiceContainer, parent: Optional[Component] = None
    ) -> None:
        super().__init__("StatusBar", parent)
        self._container = container
        self.message = STATUS_MESSAGE


class EmailView(Component):
    """Categories, the e-mail list and the preview, side by side."""

    CATEGORY_WIDTH = 150

    def __init__(
        self, container: ServiceContainer, parent: Optional[Component] = None
    ) -> None:
        super().__init__("EmailView", parent)
        self._container = container
        self.category_list = CategoryList(container, self)
        self.email_list = EmailList(container, self)
        self.email_preview = EmailPreview(container, self)
        self.sizes: Tuple[int, int, int] = (self.CATEGORY_WIDTH, 500, 500)
        self.stretch: Tuple[int, int, int] = (0, 5, 5)

    def inbox_cards(self) -> List[EmailCard]:
        inbox = self.email_list.list_views[EmailListKind.INBOX_LIST_VIEW]
        return inbox.email_card_list.cards()


class ViewPanel(Component):
    """Shows one of the e-mail, compose and contacts views at a time."""

    def __init__(
        self, container: ServiceContainer, parent: Optional[Component] = None
    ) -> None:
        super().__init__("ViewPanel", parent)
        self._container = container
        self.email_view = EmailView(container, self)
        self.compose_view = ComposeView(container, self)
        self.contacts_view = ContactsView(container, self)
        self.views: Dict[View, Component] = {
            View.EMAIL_VIEW: self.email_view,
            View.COMPOSE_VIEW: self.compose_view,
            View.CONTACTS_VIEW: self.contacts_view,
        }
        for widget in self.views.values():
            widget.visible = False
        self.views[View.EMAIL_VIEW].visible = True

        bus = container.get_service(EventBus)
        bus.subscribe(SideBarButtonClickedEvent, self._on_side_bar_clicked)

    def _on_side_bar_clicked(self, event: SideBarButtonClickedEvent) -> None:
        logger.info("ViewPanel - Received: %s", event)
        self.show_view(event.view)

    def show_view(self, view: View) -> bool:
        """Show the given view alone; views the panel lacks are ignored."""
        if view not in self.views:
            return False
        for widget in self.views.values():
            widget.visible = False
        self.views[view].visible = True
        return True

    def current_view(self) -> View:
        return next(view for view, widget in self.views.items() if widget.visible)


class MainWindow(Component):
    """Side bar next to the view panel, with menu and status bars."""

    def __init__(
        self, container: ServiceContainer, parent: Optional[Component] = None
    ) -> None:
        super().__init__("MainWindow", parent)
        self._container = container
        self.title = WINDOW_TITLE
        self.size: Optional[Tuple[int, int]] = None
        self.menubar = build_menubar(self, container)
        self.side_bar = SideBar(container, self)
        self.view_panel = ViewPanel(container, self)
        self.status_bar = StatusBar(container, self)
        self.stretch: Tuple[int, int] = (1, 8)


def build_container(db_path: str) -> ServiceContainer:
    """Open the database and register the bus, the context and the repositories."""
    bus = EventBus()
    db = DbContext()
    db.connect(db_path)

    container = ServiceContainer()
    container.add_singleton(bus)
    container.add_singleton(db)
    container.add_singleton(EmailRepo(db))
    container.add_singleton(UserRepo(db))
    container.add_singleton(AttachmentRepo(db))
    return container


def _preview(window: MainWindow, argument: str, out: TextIO) -> None:
    try:
        email_id = int(argument)
    except ValueError:
        print(f"Not an e-mail id: {argument}", file=out)
        return
    card = next(
        (c for c in window.view_panel.email_view.inbox_cards() if c.email_id == email_id),
        None,
    )
    if card is None:
        print(f"No email with id {email_id}", file=out)
        return
    card.preview()
    content = window.view_panel.email_view.email_preview.content
    print(content.header.subject, file=out)
    print(content.header.sender, file=out)
    print(content.header.recipients, end="", file=out)
    print(content.body.text, file=out)
    for name in content.attachments.file_names:
        print(f"Attachment: {name}", file=out)


def _run(window: MainWindow, source: TextIO, out: TextIO) -> int:
    by_label = {label.lower(): view for view, label in window.side_bar.labels.items()}
    print(window.title, file=out)
    print(window.status_bar.message, file=out)
    print(f"Showing {window.view_panel.current_view().name}", file=out)
    for line in source:
        command = line.strip()
        if not command:
            continue
        word, _, rest = command.partition(" ")
        if word.lower() == "preview":
            _preview(window, rest.strip(), out)
            continue
        view = by_label.get(command.lower())
        if view is None:
            print(f"Unknown command: {command}", file=out)
            continue
        window.side_bar.click(view)
        if view is View.QUIT:
            break
        print(f"Showing {window.view_panel.current_view().name}", file=out)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="inboxdesk", description="Browse a mail database.")
    parser.add_argument("database", nargs="?", default=DEFAULT_DB_PATH)
    args = parser.parse_args(argv)

    try:
        container = build_container(args.database)
    except DatabaseError as exc:
        print(f"Failed to connect to DB: {exc}", file=sys.stderr)
        return 1
    db = container.get_service(DbContext)
    try:
        try:
            window = MainWindow(container)
        except (DatabaseError, LookupError, ValueError) as exc:
            print(f"Failed to load mail: {exc}", file=sys.stderr)
            return 1
        window.title = APP_TITLE
        window.size = WINDOW_SIZE
        return _run(window, sys.stdin, sys.stdout)
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())