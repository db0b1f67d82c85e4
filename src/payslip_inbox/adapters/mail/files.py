"""Attachment source reading exported message files directly."""

import email
import logging
from email import policy
from pathlib import Path

import extract_msg

from ...domain.models import Attachment
from ...ports.attachments import AttachmentSource

logger = logging.getLogger(__name__)


class MessageFileSource(AttachmentSource):
    """Attachment source for .eml (MIME) and .msg (Outlook) files."""

    def list_attachments(self, message_path: Path) -> list[Attachment]:
        suffix = message_path.suffix.lower()
        if suffix == ".msg":
            return self._read_msg(message_path)
        if suffix == ".eml":
            return self._read_eml(message_path)
        raise ValueError(f"Unsupported message file: {message_path.name}")

    def _read_eml(self, path: Path) -> list[Attachment]:
        message = email.message_from_bytes(path.read_bytes(), policy=policy.default)

        attachments = []
        for part in message.iter_attachments():
            filename = part.get_filename()
            if not filename:
                continue
            data = part.get_payload(decode=True) or b""
            attachments.append(Attachment(filename=filename, data=data))

        logger.debug(f"{path.name}: {len(attachments)} attachments")
        return attachments

    def _read_msg(self, path: Path) -> list[Attachment]:
        attachments = []
        with extract_msg.openMsg(str(path)) as msg:
            for att in msg.attachments:
                filename = att.longFilename or att.shortFilename
                # Embedded messages carry a Message object, not bytes
                if not filename or not isinstance(att.data, bytes):
                    logger.debug(f"Ignoring attachment without file data in {path.name}")
                    continue
                attachments.append(Attachment(filename=filename, data=att.data))

        logger.debug(f"{path.name}: {len(attachments)} attachments")
        return attachments
