"""
Camera OCR - cloud OCR extraction for captured photos.

Sends a base64-encoded image to the Vision API and assembles the returned
annotations into reading-ordered text.
"""

from .models import (
    ExtractionResult,
    VisionConfig,
    FeatureType,
    BatchAnnotateImagesResponse,
)

from .orchestrator import CameraOCROrchestrator

from .ocr_processors import (
    create_ocr_processor,
    VisionAPIProcessor,
    OCRProviderError,
    ProviderHTTPError,
    ProviderParseError,
    ProviderResponseError,
)

from .document_analyzers import (
    LayoutAnalyzer,
    polygon_area,
    extract_paragraph_text,
    identify_main_content,
)

__version__ = "1.0.0"

__all__ = [
    # Core models
    "ExtractionResult",
    "VisionConfig",
    "FeatureType",
    "BatchAnnotateImagesResponse",

    # Main orchestrator
    "CameraOCROrchestrator",

    # OCR processors
    "create_ocr_processor",
    "VisionAPIProcessor",

    # Errors
    "OCRProviderError",
    "ProviderHTTPError",
    "ProviderParseError",
    "ProviderResponseError",

    # Text assembly
    "LayoutAnalyzer",
    "polygon_area",
    "extract_paragraph_text",
    "identify_main_content",
]
