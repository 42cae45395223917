"""The preview pane: toolbar, header, body and attachments of one e-mail."""

from __future__ import annotations

import logging
from enum import Enum, auto
from typing import Dict, Iterable, List, Optional, Tuple

from inboxdesk.component import Component
from inboxdesk.container import ServiceContainer
from inboxdesk.events import EventBus, PreviewEmailClicked
from inboxdesk.models import Attachment, Email, User
from inboxdesk.repositories import AttachmentRepo, EmailRepo, UserRepo

logger = logging.getLogger(__name__)


class PreviewToolbarButton(Enum):
    """Buttons of the preview toolbar, in the order they are laid out."""

    REPLY = auto()
    FORWARD = auto()
    REMOVE = auto()
    DELETE_FOREVER = auto()
    EDIT = auto()
    CLOSE = auto()


_BUTTON_LABELS: Dict[PreviewToolbarButton, str] = {
    PreviewToolbarButton.REPLY: "Reply",
    PreviewToolbarButton.FORWARD: "Forward",
    PreviewToolbarButton.REMOVE: "Remove",
    PreviewToolbarButton.DELETE_FOREVER: "Delete Forever",
    PreviewToolbarButton.EDIT: "Edit",
    PreviewToolbarButton.CLOSE: "Close",
}


def sender_text(user: User) -> str:
    """Line describing the sender: address, first name and last name."""
    return f"{user.email} {user.first_name} {user.last_name}"


def recipients_text(users: Iterable[User]) -> str:
    """One line per recipient, each ending in a newline."""
    return "".join(f"{sender_text(user)}\n" for user in users)


class EmailPreviewToolbar(Component):
    """Row of actions on the previewed e-mail."""

    def __init__(self, parent: Optional[Component] = None) -> None:
        super().__init__("EmailPreviewToolbar", parent)
        self.labels: Dict[PreviewToolbarButton, str] = dict(_BUTTON_LABELS)
        self._hidden = {PreviewToolbarButton.DELETE_FOREVER}

    def visible_buttons(self) -> List[PreviewToolbarButton]:
        return [button for button in PreviewToolbarButton if button not in self._hidden]


class EmailPreviewHeader(Component):
    """Subject, sender and recipients of the previewed e-mail."""

    def __init__(
        self, container: ServiceContainer, parent: Optional[Component] = None
    ) -> None:
        super().__init__("EmailPreviewHeader", parent)
        self._container = container
        self.subject = "[subject]"
        self.sender = "[sender]"
        self.recipients = "[recipients]"

    def project_email(self, email: Email) -> None:
        user_repo = self._container.get_service(UserRepo)
        sender = user_repo.get_user(email.sender_id)
        self.subject = email.subject
        self.sender = sender_text(sender)
        self.recipients = recipients_text(user_repo.recipients(email.email_id))


class EmailPreviewBody(Component):
    """Read-only text of the previewed e-mail."""

    placeholder = "Email body..."
    read_only = True

    def __init__(self, parent: Optional[Component] = None) -> None:
        super().__init__("EmailPreviewBody", parent)
        self.text = ""

    def project_email(self, email: Email) -> None:
        self.text = email.body


class EmailPreviewAttachments(Component):
    """The files attached to the previewed e-mail."""

    def __init__(
        self, container: ServiceContainer, parent: Optional[Component] = None
    ) -> None:
        super().__init__("EmailPreviewAttachments", parent)
        self._container = container
        self.attachments: List[Attachment] = []

    @property
    def file_names(self) -> List[str]:
        return [attachment.file_name for attachment in self.attachments]

    def project_email(self, email: Email) -> None:
        """Replace the shown attachments with those of the given e-mail."""
        repo = self._container.get_service(AttachmentRepo)
        attachments = repo.attachments(email.email_id)
        for attachment in attachments:
            logger.info("Show this: %s", attachment)
        self.attachments = list(attachments)


class EmailPreviewContent(Component):
    """Header above the body and attachments of the previewed e-mail."""

    def __init__(
        self, container: ServiceContainer, parent: Optional[Component] = None
    ) -> None:
        super().__init__("EmailPreviewContent", parent)
        self._container = container
        self.header = EmailPreviewHeader(container, self)
        self.body = EmailPreviewBody(self)
        self.attachments = EmailPreviewAttachments(container, self)
        self.email: Optional[Email] = None
        self.bind_events()

    def bind_events(self) -> None:
        bus = self._container.get_service(EventBus)
        email_repo = self._container.get_service(EmailRepo)

        def on_preview(event: PreviewEmailClicked) -> None:
            self.show_email(email_repo.get_email(event.email_id))

        bus.subscribe(PreviewEmailClicked, on_preview)

    def show_email(self, email: Email) -> None:
        logger.info("Show email %s", email)
        self.header.project_email(email)
        self.body.project_email(email)
        self.attachments.project_email(email)
        self.email = email

    def hide_email(self) -> None:
        logger.info("Hide email")
        self.email = None


class EmailPreview(Component):
    """Toolbar above the content of the previewed e-mail."""

    def __init__(
        self, container: ServiceContainer, parent: Optional[Component] = None
    ) -> None:
        super().__init__("EmailPreview", parent)
        self._container = container
        self.toolbar = EmailPreviewToolbar(self)
        self.content = EmailPreviewContent(container, self)
        self.requested: Tuple[int, ...] = ()
        self.bind_events()

    def bind_events(self) -> None:
        bus = self._container.get_service(EventBus)

        def on_preview(event: PreviewEmailClicked) -> None:
            self.preview_email(event.email_id)

        bus.subscribe(PreviewEmailClicked, on_preview)

    def preview_email(self, email_id: int) -> None:
        """Record a request to preview the e-mail with this id."""
        logger.info("Show email with id %s in the preview", email_id)
        self.requested = (*self.requested, email_id)