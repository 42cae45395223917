"""Connection to the SQLite mail database."""

from __future__ import annotations

import logging
import os
import sqlite3
from typing import Optional, Union

from inboxdesk.container import Service

logger = logging.getLogger(__name__)


class DatabaseError(Exception):
    """Raised when the database cannot be opened or queried."""


class DbContext(Service):
    """Owns a single SQLite connection."""

    def __init__(self, connection_name: str = "default") -> None:
        self.connection_name = connection_name
        self._connection: Optional[sqlite3.Connection] = None

    def connect(self, db_path: Union[str, "os.PathLike[str]"]) -> None:
        """Open the database file, replacing any earlier connection."""
        self.close()
        try:
            connection = sqlite3.connect(os.fspath(db_path))
        except sqlite3.Error as exc:
            logger.critical("Failed to open database %s: %s", self.connection_name, exc)
            raise DatabaseError(
                f"Failed to open database {self.connection_name}: {exc}"
            ) from exc
        connection.row_factory = sqlite3.Row
        self._connection = connection

    def is_connected(self) -> bool:
        return self._connection is not None

    def connection(self) -> sqlite3.Connection:
        if self._connection is None:
            raise DatabaseError("Database is not open")
        return self._connection

    def close(self) -> None:
        if self._connection is not None:
            self._connection.close()
            self._connection = None

    def __enter__(self) -> "DbContext":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()