"""
OCR Result models for representing extracted text returned to the capture surface.
"""

from enum import Enum

from pydantic import BaseModel, Field, field_validator


class OCREngine(str, Enum):
    """Supported OCR engines."""
    GOOGLE_VISION = "google_vision"


class ExtractionResult(BaseModel):
    """
    Reading-ordered text extracted from one image.

    Confidence is emitted as 1.0 for every result; the per-symbol scores in
    the provider response are not aggregated.
    """
    text: str = Field(..., description="Extracted text in reading order")
    confidence: float = Field(default=1.0, description="Result confidence (0-1)")

    @field_validator("confidence")
    @classmethod
    def validate_confidence(cls, v):
        if not 0.0 <= v <= 1.0:
            raise ValueError("Confidence must be between 0.0 and 1.0")
        return v
