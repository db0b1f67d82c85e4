"""CLI entry point for payslip-inbox."""

import logging
import sys
from pathlib import Path

import click

from .adapters.export import create_exporter_factory
from .adapters.mail import create_attachment_source
from .adapters.metadata import PikePdfAdapter
from .config import MailBackend, Settings, load_settings
from .domain.services import (
    AttachmentExtractor,
    PayslipPipeline,
    PayslipRenamer,
    PdfConverter,
)

logger = logging.getLogger(__name__)

OUTLOOK_MESSAGE_PATTERNS = ["*.msg"]


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def require_folder(folder: Path) -> Path:
    """Exit with an error unless folder is an existing directory."""
    if not folder.is_dir():
        click.echo(f"Error: not a folder: {folder}", err=True)
        sys.exit(1)
    return folder


def build_extractor(settings: Settings) -> AttachmentExtractor:
    patterns = settings.scan.message_patterns
    if settings.mail.backend == MailBackend.OUTLOOK:
        # OpenSharedItem only understands Outlook .msg files
        patterns = [p for p in patterns if p.lower().endswith(".msg")]
    return AttachmentExtractor(
        source=create_attachment_source(settings.mail),
        message_patterns=patterns or OUTLOOK_MESSAGE_PATTERNS,
    )


def build_renamer(settings: Settings) -> PayslipRenamer:
    return PayslipRenamer(
        suffix=settings.naming.suffix,
        collision_suffix=settings.naming.collision_suffix,
        encoding=settings.scan.encoding,
    )


def build_converter(settings: Settings) -> PdfConverter:
    return PdfConverter(
        renamer=build_renamer(settings),
        exporter_factory=create_exporter_factory(
            settings.export, encoding=settings.scan.encoding
        ),
        metadata=PikePdfAdapter() if settings.export.write_metadata else None,
        text_patterns=settings.scan.text_patterns,
    )


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option("-c", "--config", type=click.Path(exists=True), help="Config file path")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config: str | None) -> None:
    """Payslip Inbox - extract, rename and convert emailed payslips."""
    setup_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = Path(config) if config else None


@cli.command()
@click.argument("folder", type=click.Path(path_type=Path))
@click.pass_context
def run(ctx: click.Context, folder: Path) -> None:
    """Extract, rename and convert all payslips in FOLDER."""
    require_folder(folder)
    settings = load_settings(ctx.obj["config_path"])

    pipeline = PayslipPipeline(
        extractor=build_extractor(settings),
        converter=build_converter(settings),
    )
    try:
        result = pipeline.run(folder)
    except Exception as e:
        logger.exception(f"Run failed: {e}")
        raise

    click.echo(f"messages: {result.extraction.messages}")
    click.echo(f"attachments saved: {len(result.extraction.saved)}")
    click.echo(f"attachments skipped: {len(result.extraction.skipped)}")
    for conversion in result.conversions:
        click.echo(f"payslip: {conversion.pdf_path.name}")
    click.echo(f"payslips converted: {len(result.conversions)}")


@cli.command()
@click.argument("folder", type=click.Path(path_type=Path))
@click.pass_context
def extract(ctx: click.Context, folder: Path) -> None:
    """Save attachments of all message files in FOLDER."""
    require_folder(folder)
    settings = load_settings(ctx.obj["config_path"])

    result = build_extractor(settings).extract(folder)

    for path in result.saved:
        click.echo(f"saved: {path.name}")
    for path in result.skipped:
        click.echo(f"skipped: {path.name}")


@cli.command()
@click.argument("folder", type=click.Path(path_type=Path))
@click.pass_context
def convert(ctx: click.Context, folder: Path) -> None:
    """Rename payslip text files in FOLDER and export them to PDF."""
    require_folder(folder)
    settings = load_settings(ctx.obj["config_path"])

    results = build_converter(settings).convert(folder)

    for conversion in results:
        click.echo(f"{conversion.source_path.name} -> {conversion.pdf_path.name}")
    click.echo(f"payslips converted: {len(results)}")


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_context
def rename(ctx: click.Context, file: Path) -> None:
    """Rename a single payslip text FILE after its pay period."""
    settings = load_settings(ctx.obj["config_path"])

    renamed = build_renamer(settings).rename(file)

    if renamed is None:
        click.echo(f"No pay period found in {file.name}", err=True)
        sys.exit(1)
    click.echo(f"renamed: {renamed.name}")


if __name__ == "__main__":
    cli()
