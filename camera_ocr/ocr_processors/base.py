"""
Base OCR processor interface and provider error types.
"""

import logging
from abc import ABC, abstractmethod
from typing import List, Optional

from ..models import ExtractionResult


class OCRProviderError(RuntimeError):
    """Base class for failures reported by an OCR provider."""


class ProviderHTTPError(OCRProviderError):
    """The provider answered with a non-success HTTP status."""

    def __init__(self, status_code: int, status_text: str, body: str = ""):
        self.status_code = status_code
        self.status_text = status_text
        self.body = body
        super().__init__(f"Vision API error: {status_code} {status_text}")


class ProviderParseError(OCRProviderError):
    """The provider body was not valid JSON or did not match the response schema."""


class ProviderResponseError(OCRProviderError):
    """The provider reported a per-image error inside a successful response."""

    def __init__(self, code: int, message: str):
        self.code = code
        self.provider_message = message
        super().__init__(f"Vision API image error {code}: {message}")


class BaseOCRProcessor(ABC):
    """Base class for all OCR processors."""

    def __init__(self, engine_name: str, logger: Optional[logging.Logger] = None):
        self.engine_name = engine_name
        self.logger = logger or logging.getLogger(f"{__name__}.{engine_name}")

    @abstractmethod
    async def extract_text(self, base64_image: str) -> List[ExtractionResult]:
        """
        Extract reading-ordered text from a base64-encoded image.

        Args:
            base64_image: JPEG/PNG bytes encoded as base64, without data-URI prefix

        Returns:
            Zero or one extraction results
        """
        pass

    @abstractmethod
    def is_available(self) -> bool:
        """Check if the OCR engine is properly configured."""
        pass

    def _validate_payload(self, base64_image: str) -> str:
        """Reject empty payloads and data-URI prefixed payloads."""
        if not base64_image or not base64_image.strip():
            raise ValueError("Image payload is empty")
        if base64_image.startswith("data:"):
            raise ValueError("Image payload must be raw base64 without a data-URI prefix")
        return base64_image
