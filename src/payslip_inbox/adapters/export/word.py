"""PDF exporter using Microsoft Word automation (Windows only)."""

import logging
from pathlib import Path

from ...ports.exporter import DocumentExporter, Orientation

logger = logging.getLogger(__name__)

# Word object model constants
WD_EXPORT_FORMAT_PDF = 17
WD_ORIENT_PORTRAIT = 0
WD_ORIENT_LANDSCAPE = 1
WD_DO_NOT_SAVE_CHANGES = 0
WD_ALERTS_NONE = 0


class WordExporter(DocumentExporter):
    """Exporter driving a private Word instance through COM.

    Each exporter starts its own Word and quits it on release().
    """

    def __init__(self) -> None:
        import win32com.client

        self.app = win32com.client.DispatchEx("Word.Application")
        try:
            self.app.Visible = False
            self.app.DisplayAlerts = WD_ALERTS_NONE
        except Exception:
            self.app.Quit()
            raise
        self.document = None

    def load(self, path: Path) -> None:
        logger.debug(f"Opening in Word: {path.name}")
        self.document = self.app.Documents.Open(
            str(path.resolve()),
            ConfirmConversions=False,
            ReadOnly=True,
            AddToRecentFiles=False,
        )

    def set_orientation(self, orientation: Orientation) -> None:
        if self.document is None:
            raise RuntimeError("No document loaded")
        if orientation == Orientation.PORTRAIT:
            self.document.PageSetup.Orientation = WD_ORIENT_PORTRAIT
        else:
            self.document.PageSetup.Orientation = WD_ORIENT_LANDSCAPE

    def export_pdf(self, dest: Path) -> Path:
        if self.document is None:
            raise RuntimeError("No document loaded")
        self.document.ExportAsFixedFormat(str(dest.resolve()), WD_EXPORT_FORMAT_PDF)
        return dest

    def release(self) -> None:
        try:
            if self.document is not None:
                self.document.Close(SaveChanges=WD_DO_NOT_SAVE_CHANGES)
        finally:
            self.document = None
            if self.app is not None:
                self.app.Quit()
                self.app = None
