"""Domain layer - core business logic."""

from .models import (
    Attachment,
    ConversionResult,
    ExtractionResult,
    PayPeriod,
    RunResult,
)

__all__ = [
    "Attachment",
    "ConversionResult",
    "ExtractionResult",
    "PayPeriod",
    "RunResult",
]
