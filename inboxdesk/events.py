"""Event types and the bus that delivers them to subscribers."""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Callable, Dict, List, Type, TypeVar

from inboxdesk.container import Service

logger = logging.getLogger(__name__)


class Event:
    """Base class of everything sent over the bus."""

    def __str__(self) -> str:
        return "Event()"


E = TypeVar("E", bound=Event)


class EventBus(Service):
    """Delivers events to handlers subscribed to their exact type."""

    def __init__(self) -> None:
        self._handlers: Dict[type, List[Callable[[Any], None]]] = defaultdict(list)

    def subscribe(self, event_type: Type[E], handler: Callable[[E], None]) -> None:
        if not (isinstance(event_type, type) and issubclass(event_type, Event)):
            raise TypeError(f"{event_type!r} is not an event type")
        self._handlers[event_type].append(handler)

    def emit(self, event: Event) -> None:
        if not isinstance(event, Event):
            raise TypeError(f"{event!r} is not an event")
        event_type = type(event)
        logger.info("Emitting: %s with key: %s", event, event_type.__name__)
        handlers = tuple(self._handlers.get(event_type, ()))
        if not handlers:
            logger.info("No handlers for event type")
            return
        logger.info("There are %d listeners.", len(handlers))
        for handler in handlers:
            handler(event)

    def forward_emit(self, event_type: Type[E], *args: Any, **kwargs: Any) -> None:
        """Build an event from the arguments and emit it."""
        self.emit(event_type(*args, **kwargs))


@dataclass
class ButtonClickedEvent(Event):
    button_id: str

    def __str__(self) -> str:
        return f"ButtonClickedEvent(button_id: {self.button_id})"


class View(Enum):
    """Views that the side bar can switch to."""

    COMPOSE_VIEW = auto()
    EMAIL_VIEW = auto()
    CONTACTS_VIEW = auto()
    LOGOUT = auto()
    QUIT = auto()


@dataclass
class SideBarButtonClickedEvent(Event):
    view: View

    def __str__(self) -> str:
        return f"SideBarButtonClickedEvent(View: {self.view})"


@dataclass
class PreviewEmailClicked(Event):
    email_id: int

    def __str__(self) -> str:
        return f"PreviewEmailClicked(email_id: {self.email_id})"


@dataclass
class EmailDraft:
    """Contents of the compose form."""

    sender: str = ""
    recipients: str = ""
    subject: str = ""
    body: str = ""

    def __str__(self) -> str:
        return (
            f"sender: {self.sender}, recipients: {self.recipients}, "
            f"subject: {self.subject}, text: {self.body}"
        )


@dataclass
class SendEmailClickedEvent(Event):
    data: EmailDraft

    def __str__(self) -> str:
        return f"SendEmailClickedEvent({self.data})"


@dataclass
class SaveEmailClickedEvent(Event):
    data: EmailDraft

    def __str__(self) -> str:
        return f"SaveEmailClickedEvent({self.data})"


@dataclass
class AttachToEmailEvent(Event):
    """Files chosen to be attached to the e-mail being composed."""

    attachments: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.attachments = list(self.attachments)

    def __str__(self) -> str:
        return f"AttachToEmailEvent(attachments: [{', '.join(self.attachments)}])"