"""Base class of the named, nestable parts of the user interface."""

from __future__ import annotations

from typing import Optional


class Component:
    """A named part of the interface that may sit inside another one."""

    def __init__(self, name: str, parent: Optional["Component"] = None) -> None:
        self.name = name
        self.parent = parent
        self.visible = True

    def bind_events(self) -> None:
        """Connect the component to the events it reacts to; none by default."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"