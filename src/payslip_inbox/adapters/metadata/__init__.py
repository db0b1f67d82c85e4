"""Metadata adapters."""

from .pikepdf import PikePdfAdapter

__all__ = ["PikePdfAdapter"]
