"""PDF exporter rendering plain text with reportlab."""

import logging
import textwrap
from pathlib import Path

from reportlab.lib.pagesizes import A4, LETTER, landscape, portrait
from reportlab.lib.units import mm
from reportlab.pdfbase.pdfmetrics import stringWidth
from reportlab.pdfgen import canvas
from reportlab.pdfgen.textobject import PDFTextObject

from ...ports.exporter import DocumentExporter, Orientation

logger = logging.getLogger(__name__)

PAGE_SIZES = {"A4": A4, "letter": LETTER}
LEADING_FACTOR = 1.2


class ReportLabExporter(DocumentExporter):
    """Exporter drawing the text monospaced, one text line per PDF line."""

    def __init__(
        self,
        page_size: str = "A4",
        font_name: str = "Courier",
        font_size: float = 9.0,
        margin_mm: float = 15.0,
        encoding: str = "utf-8",
    ) -> None:
        if page_size not in PAGE_SIZES:
            raise ValueError(f"Unknown page size: {page_size}")
        self.base_size = PAGE_SIZES[page_size]
        self.pagesize = portrait(self.base_size)
        self.font_name = font_name
        self.font_size = font_size
        self.margin = margin_mm * mm
        self.encoding = encoding
        self.source: Path | None = None
        self.lines: list[str] | None = None

    def load(self, path: Path) -> None:
        logger.debug(f"Loading text: {path.name}")
        text = path.read_text(encoding=self.encoding, errors="replace")
        self.source = path
        self.lines = [line.expandtabs(8) for line in text.splitlines()]

    def set_orientation(self, orientation: Orientation) -> None:
        if orientation == Orientation.PORTRAIT:
            self.pagesize = portrait(self.base_size)
        else:
            self.pagesize = landscape(self.base_size)

    def export_pdf(self, dest: Path) -> Path:
        if self.lines is None or self.source is None:
            raise RuntimeError("No document loaded")

        width, height = self.pagesize
        leading = self.font_size * LEADING_FACTOR
        char_width = stringWidth("M", self.font_name, self.font_size)
        max_chars = max(1, int((width - 2 * self.margin) / char_width))

        pdf = canvas.Canvas(str(dest), pagesize=self.pagesize)
        pdf.setTitle(self.source.stem)

        text = self._new_page_text(pdf, height, leading)
        for line in self.lines:
            # Keep blank lines, wrap anything wider than the page
            for chunk in textwrap.wrap(line, max_chars, drop_whitespace=False) or [""]:
                if text.getY() < self.margin:
                    pdf.drawText(text)
                    pdf.showPage()
                    text = self._new_page_text(pdf, height, leading)
                text.textLine(chunk)

        pdf.drawText(text)
        pdf.showPage()
        pdf.save()

        logger.debug(f"Wrote PDF: {dest.name}")
        return dest

    def release(self) -> None:
        self.source = None
        self.lines = None

    def _new_page_text(
        self, pdf: canvas.Canvas, height: float, leading: float
    ) -> PDFTextObject:
        text = pdf.beginText(self.margin, height - self.margin - self.font_size)
        text.setFont(self.font_name, self.font_size, leading)
        return text
