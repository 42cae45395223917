"""An e-mail client that browses, previews and composes mail stored in SQLite."""

__version__ = "0.1.0"