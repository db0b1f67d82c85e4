"""Attachment source port - interface for reading message attachments."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, Self

if TYPE_CHECKING:
    from ..domain.models import Attachment


class AttachmentSource(ABC):
    """Interface for opening message files and listing their attachments.

    A source is a session: it is opened once, used for any number of
    messages and closed again. Use it as a context manager.
    """

    def open(self) -> None:
        """Acquire the underlying reader or application."""
        pass

    def close(self) -> None:
        """Release whatever open() acquired."""
        pass

    @abstractmethod
    def list_attachments(self, message_path: Path) -> list["Attachment"]:
        """Return all attachments of a message file with their contents."""
        pass

    def __enter__(self) -> Self:
        self.open()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
