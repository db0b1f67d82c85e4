"""Exporter port - interface for text to PDF conversion."""

from abc import ABC, abstractmethod
from enum import Enum
from pathlib import Path
from typing import Self


class Orientation(str, Enum):
    """Page orientation."""

    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"


class DocumentExporter(ABC):
    """Interface for a document editor session exporting PDFs.

    One exporter handles one document: load, lay out, export, release.
    Use it as a context manager so release() runs even if export fails.
    """

    @abstractmethod
    def load(self, path: Path) -> None:
        """Open a text document."""
        pass

    @abstractmethod
    def set_orientation(self, orientation: Orientation) -> None:
        """Set the page orientation of the loaded document."""
        pass

    @abstractmethod
    def export_pdf(self, dest: Path) -> Path:
        """Export the loaded document as PDF.

        Returns path to the PDF.
        """
        pass

    @abstractmethod
    def release(self) -> None:
        """Close the document without saving and shut the session down."""
        pass

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()
