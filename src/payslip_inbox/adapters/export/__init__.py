"""PDF exporter adapters."""

from collections.abc import Callable

from ...config import ExportBackend, ExportConfig
from ...ports.exporter import DocumentExporter
from .reportlab_exporter import ReportLabExporter
from .word import WordExporter

__all__ = ["ReportLabExporter", "WordExporter", "create_exporter_factory"]


def create_exporter_factory(
    config: ExportConfig, encoding: str = "utf-8"
) -> Callable[[], DocumentExporter]:
    """Return a callable creating one exporter per document."""
    if config.backend == ExportBackend.REPORTLAB:
        return lambda: ReportLabExporter(
            page_size=config.page_size.value,
            font_name=config.font_name,
            font_size=config.font_size,
            margin_mm=config.margin_mm,
            encoding=encoding,
        )
    elif config.backend == ExportBackend.WORD:
        return WordExporter
    else:
        raise ValueError(f"Unknown export backend: {config.backend}")
