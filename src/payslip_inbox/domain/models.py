"""Domain models."""

from dataclasses import dataclass, field
from datetime import date
from pathlib import Path


@dataclass(frozen=True)
class Attachment:
    """A file attached to a message."""

    filename: str
    data: bytes


@dataclass(frozen=True)
class PayPeriod:
    """Date range captured from a payslip's pay-period line.

    All parts are kept as the strings found in the text.
    """

    start_day: str
    start_month: str
    start_year: str
    end_day: str
    end_month: str
    end_year: str

    @property
    def end_date(self) -> date | None:
        """End date, or None when the month name is not recognised."""
        from .naming import MONTH_NUMERALS

        month = MONTH_NUMERALS.get(self.end_month)
        if month is None:
            return None
        try:
            return date(int(self.end_year), int(month), int(self.end_day))
        except ValueError:
            return None

    def __str__(self) -> str:
        return (
            f"{self.start_day} {self.start_month} {self.start_year}"
            f" TO {self.end_day} {self.end_month} {self.end_year}"
        )


@dataclass
class ExtractionResult:
    """Result of extracting attachments from a folder."""

    folder: Path
    messages: int = 0
    saved: list[Path] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)


@dataclass
class ConversionResult:
    """Result of renaming and exporting one payslip."""

    source_path: Path
    renamed_path: Path
    pdf_path: Path


@dataclass
class RunResult:
    """Result of a full pipeline run."""

    folder: Path
    extraction: ExtractionResult
    conversions: list[ConversionResult] = field(default_factory=list)
