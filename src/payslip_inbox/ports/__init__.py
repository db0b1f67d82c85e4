"""Ports - interfaces for external dependencies."""

from .attachments import AttachmentSource
from .exporter import DocumentExporter, Orientation
from .metadata import MetadataPort

__all__ = ["AttachmentSource", "DocumentExporter", "MetadataPort", "Orientation"]
