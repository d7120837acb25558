"""
OCR Processors module for calling cloud OCR providers.
"""

from .base import (
    BaseOCRProcessor,
    OCRProviderError,
    ProviderHTTPError,
    ProviderParseError,
    ProviderResponseError,
)
from .vision_processor import VisionAPIProcessor
from .factory import create_ocr_processor, get_supported_engines

__all__ = [
    "BaseOCRProcessor",
    "OCRProviderError",
    "ProviderHTTPError",
    "ProviderParseError",
    "ProviderResponseError",
    "VisionAPIProcessor",
    "create_ocr_processor",
    "get_supported_engines",
]
