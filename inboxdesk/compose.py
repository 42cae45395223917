"""The compose view: the e-mail editor and its list of attachments."""

from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Sequence

from inboxdesk.component import Component
from inboxdesk.container import ServiceContainer
from inboxdesk.events import (
    AttachToEmailEvent,
    EmailDraft,
    EventBus,
    SaveEmailClickedEvent,
    SendEmailClickedEvent,
    SideBarButtonClickedEvent,
)

logger = logging.getLogger(__name__)

FileChooser = Callable[[], Sequence[str]]

DIALOG_TITLE = "Compose Email"


def _nothing_chosen() -> Sequence[str]:
    """Stand-in chooser for when no file picker is available: picks nothing."""
    return ()


class AttachmentList:
    """Ordered list of file names attached to the e-mail being composed."""

    header = "Filename"

    def __init__(self, paths: Iterable[str] = ()) -> None:
        self._files: List[str] = [str(path) for path in paths]

    def add(self, paths: Iterable[str]) -> None:
        """Append the given paths in order."""
        self._files.extend(str(path) for path in paths)

    def remove(self, index: int) -> None:
        """Remove the entry at a row index."""
        if not 0 <= index < len(self._files):
            raise IndexError(f"No attachment at row {index}")
        del self._files[index]

    def files(self) -> List[str]:
        return list(self._files)

    def __len__(self) -> int:
        return len(self._files)

    def __iter__(self) -> Iterator[str]:
        return iter(self._files)


class EmailEditor(Component):
    """Form holding sender, recipients, subject and body, with a toolbar."""

    def __init__(
        self,
        container: ServiceContainer,
        parent: Optional[Component] = None,
        choose_files: Optional[FileChooser] = None,
    ) -> None:
        super().__init__("EmailEditor", parent)
        self._container = container
        self._draft = EmailDraft()
        self._choose_files = choose_files or _nothing_chosen
        self.toolbar: Dict[str, Callable[[], None]] = {}
        self.bind_events()

    def draft(self) -> EmailDraft:
        """The live contents of the form."""
        return self._draft

    def bind_events(self) -> None:
        bus = self._container.get_service(EventBus)

        def send() -> None:
            bus.forward_emit(SendEmailClickedEvent, self._draft)

        def save() -> None:
            bus.forward_emit(SaveEmailClickedEvent, self._draft)

        def attach() -> None:
            bus.forward_emit(AttachToEmailEvent, list(self._choose_files()))

        self.toolbar = {"Send": send, "Save": save, "Attach": attach}


class AttachmentSideBar(Component):
    """Shows the files attached to the e-mail being composed."""

    def __init__(
        self, container: ServiceContainer, parent: Optional[Component] = None
    ) -> None:
        super().__init__("AttachmentSideBar", parent)
        self._container = container
        self.model = AttachmentList()
        self.bind_events()

    def bind_events(self) -> None:
        bus = self._container.get_service(EventBus)
        bus.subscribe(SideBarButtonClickedEvent, self._on_side_bar_clicked)
        bus.subscribe(AttachToEmailEvent, self._on_attach)

    def attachments(self) -> List[str]:
        return self.model.files()

    @staticmethod
    def _on_side_bar_clicked(event: SideBarButtonClickedEvent) -> None:
        logger.info("Side bar clicked: %s", event)

    def _on_attach(self, event: AttachToEmailEvent) -> None:
        logger.info("Attaching: %s", event)
        self.model.add(event.attachments)


class ComposeView(Component):
    """Editor on the left, attachments on the right."""

    def __init__(
        self,
        container: ServiceContainer,
        parent: Optional[Component] = None,
        is_dialog: bool = False,
        choose_files: Optional[FileChooser] = None,
    ) -> None:
        super().__init__("ComposeView", parent)
        self._container = container
        self._choose_files = choose_files
        self.is_dialog = is_dialog
        self.title: Optional[str] = None
        self.left = Component("LeftSplit", self)
        self.right = Component("RightSplit", self)
        self.editor = EmailEditor(container, self.left, choose_files)
        self.attachment_side_bar = AttachmentSideBar(container, self.right)
        self.has_open_in_new = not is_dialog
        self.dialogs: List["ComposeView"] = []

    def set_is_dialog(self, value: bool) -> None:
        self.is_dialog = bool(value)

    def open_in_new(self) -> "ComposeView":
        """Open a separate compose window and return its view."""
        view = ComposeView(self._container, self, True, self._choose_files)
        view.title = DIALOG_TITLE
        self.dialogs.append(view)
        return view