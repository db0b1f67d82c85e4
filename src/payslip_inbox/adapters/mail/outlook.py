"""Attachment source using Outlook automation (Windows only)."""

import logging
import tempfile
from pathlib import Path

from ...domain.models import Attachment
from ...ports.attachments import AttachmentSource

logger = logging.getLogger(__name__)

OL_DISCARD = 1


class OutlookAttachmentSource(AttachmentSource):
    """Attachment source driving a local Outlook through COM.

    Outlook is dispatched once in open() and reused for every message.
    """

    def __init__(self) -> None:
        self.namespace = None

    def open(self) -> None:
        import win32com.client

        logger.info("Connecting to Outlook")
        outlook = win32com.client.Dispatch("Outlook.Application")
        self.namespace = outlook.GetNamespace("MAPI")

    def close(self) -> None:
        # Leave Outlook running, the user may have it open
        self.namespace = None

    def list_attachments(self, message_path: Path) -> list[Attachment]:
        if self.namespace is None:
            raise RuntimeError("Outlook session is not open")
        if message_path.suffix.lower() != ".msg":
            raise ValueError(f"Outlook can only open .msg files: {message_path.name}")

        item = self.namespace.OpenSharedItem(str(message_path.resolve()))
        attachments = []
        try:
            with tempfile.TemporaryDirectory() as tmp:
                # COM collections are 1-based
                for i in range(1, item.Attachments.Count + 1):
                    att = item.Attachments.Item(i)
                    tmp_path = Path(tmp) / f"attachment-{i}"
                    att.SaveAsFile(str(tmp_path))
                    attachments.append(
                        Attachment(filename=att.FileName, data=tmp_path.read_bytes())
                    )
        finally:
            item.Close(OL_DISCARD)

        return attachments
