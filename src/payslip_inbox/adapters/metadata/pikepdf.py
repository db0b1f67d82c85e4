"""Metadata adapter using pikepdf."""

import logging
from pathlib import Path

import pikepdf

from ...domain.models import PayPeriod
from ...ports.metadata import MetadataPort

logger = logging.getLogger(__name__)

SUBJECT = "Payslip"


class PikePdfAdapter(MetadataPort):
    """Metadata implementation writing XMP fields with pikepdf."""

    def update_pdf(self, path: Path, period: PayPeriod) -> None:
        logger.info(f"Updating PDF metadata: {path.name}")

        with pikepdf.open(path, allow_overwriting_input=True) as pdf:
            with pdf.open_metadata() as meta:
                meta["dc:title"] = path.stem
                meta["dc:subject"] = SUBJECT
                meta["dc:description"] = f"PAY PERIOD {period}"
                end_date = period.end_date
                if end_date:
                    meta["dc:date"] = end_date.isoformat()

            pdf.save(path)
