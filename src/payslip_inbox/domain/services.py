"""Domain services - orchestrate business logic."""

import fnmatch
import logging
import shutil
from collections.abc import Callable, Iterable
from pathlib import Path

from ..ports.attachments import AttachmentSource
from ..ports.exporter import DocumentExporter, Orientation
from ..ports.metadata import MetadataPort
from .models import ConversionResult, ExtractionResult, PayPeriod, RunResult
from .naming import (
    DEFAULT_COLLISION_SUFFIX,
    DEFAULT_SUFFIX,
    canonical_filename,
    collision_candidates,
    parse_pay_period,
)

logger = logging.getLogger(__name__)

DEFAULT_MESSAGE_PATTERNS = ["*.msg", "*.eml"]
DEFAULT_TEXT_PATTERNS = ["*.txt"]


def collect_files(folder: Path, patterns: Iterable[str]) -> list[Path]:
    """Collect files directly in folder matching any pattern.

    Matching ignores case, so "*.msg" also finds "Payslip.MSG".
    """
    patterns = [p.lower() for p in patterns]
    return sorted(
        path
        for path in folder.iterdir()
        if path.is_file()
        and any(fnmatch.fnmatch(path.name.lower(), p) for p in patterns)
    )


class AttachmentExtractor:
    """Saves the attachments of every message file in a folder."""

    def __init__(
        self,
        source: AttachmentSource,
        message_patterns: list[str] | None = None,
    ) -> None:
        self.source = source
        self.message_patterns = message_patterns or DEFAULT_MESSAGE_PATTERNS

    def extract(self, folder: Path) -> ExtractionResult:
        """Write attachments next to their messages, never overwriting."""
        result = ExtractionResult(folder=folder)
        messages = collect_files(folder, self.message_patterns)
        logger.info(f"Found {len(messages)} message files in {folder}")

        with self.source as source:
            for message in messages:
                logger.info(f"Reading: {message.name}")
                result.messages += 1

                for attachment in source.list_attachments(message):
                    # Strip any directory parts the sender put in the name
                    name = Path(attachment.filename.replace("\\", "/")).name
                    if not name:
                        logger.debug(f"Ignoring unnamed attachment in {message.name}")
                        continue

                    dest = folder / name
                    if dest.exists():
                        logger.warning(f"Skipping attachment, file already exists: {name}")
                        result.skipped.append(dest)
                        continue

                    dest.write_bytes(attachment.data)
                    logger.info(f"Saved attachment: {name}")
                    result.saved.append(dest)

        return result


class PayslipRenamer:
    """Renames a payslip text file after the end of its pay period."""

    def __init__(
        self,
        suffix: str = DEFAULT_SUFFIX,
        collision_suffix: str = DEFAULT_COLLISION_SUFFIX,
        encoding: str = "utf-8",
    ) -> None:
        self.suffix = suffix
        self.collision_suffix = collision_suffix
        self.encoding = encoding

    def rename(self, path: Path) -> Path | None:
        """Rename path to its canonical payslip name.

        Returns the new path, or None if the file has no pay-period line.
        """
        period = self.read_period(path)
        if period is None:
            logger.debug(f"No pay period found: {path.name}")
            return None

        target = path.with_name(canonical_filename(period, self.suffix))
        if "Unknown-" in target.name:
            logger.warning(f"Unrecognised month in pay period {period}: {path.name}")

        if target != path and target.exists():
            logger.warning(f"Payslip name taken: {target.name}")
            for candidate in collision_candidates(target, self.collision_suffix):
                if candidate == path or not candidate.exists():
                    target = candidate
                    break

        if target == path:
            logger.info(f"Already named: {path.name}")
            return path

        shutil.move(str(path), target)
        logger.info(f"Renamed: {path.name} -> {target.name}")

        return target

    def read_period(self, path: Path) -> PayPeriod | None:
        """Scan a text file for its first pay-period line."""
        with open(path, encoding=self.encoding, errors="replace") as f:
            return parse_pay_period(f)


class PdfConverter:
    """Renames payslips in a folder and exports each one to PDF."""

    def __init__(
        self,
        renamer: PayslipRenamer,
        exporter_factory: Callable[[], DocumentExporter],
        metadata: MetadataPort | None = None,
        text_patterns: list[str] | None = None,
    ) -> None:
        self.renamer = renamer
        self.exporter_factory = exporter_factory
        self.metadata = metadata
        self.text_patterns = text_patterns or DEFAULT_TEXT_PATTERNS

    def convert(self, folder: Path) -> list[ConversionResult]:
        """Convert every payslip text file in folder.

        Files without a pay-period line are skipped.
        """
        # List up front, renaming changes the directory
        candidates = collect_files(folder, self.text_patterns)
        results = []

        for path in candidates:
            renamed = self.renamer.rename(path)
            if renamed is None:
                continue
            results.append(self.convert_file(path, renamed))

        logger.info(f"Converted {len(results)} payslips in {folder}")
        return results

    def convert_file(self, source: Path, renamed: Path) -> ConversionResult:
        """Export one renamed payslip to PDF in a fresh exporter session."""
        pdf_path = renamed.with_suffix(".pdf")

        with self.exporter_factory() as exporter:
            exporter.load(renamed)
            exporter.set_orientation(Orientation.PORTRAIT)
            exporter.export_pdf(pdf_path)

        logger.info(f"Exported: {pdf_path.name}")

        if self.metadata:
            period = self.renamer.read_period(renamed)
            if period:
                self.metadata.update_pdf(pdf_path, period)

        return ConversionResult(
            source_path=source, renamed_path=renamed, pdf_path=pdf_path
        )


class PayslipPipeline:
    """Runs extraction, then renaming and conversion, over one folder."""

    def __init__(self, extractor: AttachmentExtractor, converter: PdfConverter) -> None:
        self.extractor = extractor
        self.converter = converter

    def run(self, folder: Path) -> RunResult:
        """Process a folder of exported messages.

        Pipeline:
            1. Save attachments of every message
            2. Rename each payslip text file after its pay period
            3. Export each renamed payslip to PDF

        Any adapter error halts the run.
        """
        logger.info(f"Processing folder: {folder}")
        extraction = self.extractor.extract(folder)
        conversions = self.converter.convert(folder)
        return RunResult(folder=folder, extraction=extraction, conversions=conversions)
