"""Metadata port - interface for PDF metadata."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..domain.models import PayPeriod


class MetadataPort(ABC):
    """Interface for stamping payslip details into exported PDFs."""

    @abstractmethod
    def update_pdf(self, path: Path, period: "PayPeriod") -> None:
        """Update PDF metadata with the pay period."""
        pass
