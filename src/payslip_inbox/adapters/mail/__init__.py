"""Attachment source adapters."""

from ...config import MailBackend, MailConfig
from ...ports.attachments import AttachmentSource
from .files import MessageFileSource
from .outlook import OutlookAttachmentSource

__all__ = ["MessageFileSource", "OutlookAttachmentSource", "create_attachment_source"]


def create_attachment_source(config: MailConfig) -> AttachmentSource:
    """Create attachment source based on configuration."""
    if config.backend == MailBackend.FILES:
        return MessageFileSource()
    elif config.backend == MailBackend.OUTLOOK:
        return OutlookAttachmentSource()
    else:
        raise ValueError(f"Unknown mail backend: {config.backend}")
