"""Shared test fixtures."""

from collections.abc import Callable
from email.message import EmailMessage
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from payslip_inbox.domain.models import Attachment, PayPeriod
from payslip_inbox.ports.attachments import AttachmentSource
from payslip_inbox.ports.exporter import DocumentExporter
from payslip_inbox.ports.metadata import MetadataPort

PAYSLIP_TEXT = """\
SAAB AUSTRALIA PTY LTD
EMPLOYEE: J CITIZEN                      EMPLOYEE NO: 012345
PAY PERIOD 01 Jan 2023 TO 28 Jan 2023
GROSS PAY                                        6,250.00
TAX                                              1,512.00
NET PAY                                          4,738.00
"""


@pytest.fixture
def payslip_text() -> str:
    """Payslip text for the period ending 28 Jan 2023."""
    return PAYSLIP_TEXT


@pytest.fixture
def sample_period() -> PayPeriod:
    return PayPeriod("01", "Jan", "2023", "28", "Jan", "2023")


@pytest.fixture
def make_eml() -> Callable[[Path, dict[str, str]], Path]:
    """Write an .eml file carrying the given text attachments."""

    def _make(path: Path, attachments: dict[str, str]) -> Path:
        message = EmailMessage()
        message["Subject"] = "Your payslip"
        message["From"] = "payroll@example.com"
        message["To"] = "employee@example.com"
        message.set_content("Please find your payslip attached.")
        for filename, text in attachments.items():
            message.add_attachment(text, subtype="plain", filename=filename)
        path.write_bytes(message.as_bytes())
        return path

    return _make


@pytest.fixture
def mock_source() -> MagicMock:
    """Mock attachment source returning one payslip attachment per message."""
    mock = MagicMock(spec=AttachmentSource)
    mock.__enter__.return_value = mock
    mock.list_attachments.return_value = [
        Attachment(filename="payslip.txt", data=PAYSLIP_TEXT.encode())
    ]
    return mock


@pytest.fixture
def mock_exporter() -> MagicMock:
    """Mock exporter that writes a placeholder PDF on export."""
    mock = MagicMock(spec=DocumentExporter)
    mock.__enter__.return_value = mock

    def _export(dest: Path) -> Path:
        dest.write_bytes(b"%PDF-1.4 test content")
        return dest

    mock.export_pdf.side_effect = _export
    return mock


@pytest.fixture
def mock_metadata() -> MagicMock:
    """Mock metadata port."""
    return MagicMock(spec=MetadataPort)
