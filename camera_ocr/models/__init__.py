"""
Data models for camera OCR extraction.
"""

from .ocr_config import VisionConfig, FeatureType
from .ocr_result import ExtractionResult, OCREngine
from .vision_annotation import (
    Vertex,
    BoundingPoly,
    Symbol,
    Word,
    Paragraph,
    Block,
    Page,
    FullTextAnnotation,
    EntityAnnotation,
    ProviderStatus,
    AnnotateImageResponse,
    BatchAnnotateImagesResponse,
)

__all__ = [
    "VisionConfig",
    "FeatureType",
    "ExtractionResult",
    "OCREngine",
    "Vertex",
    "BoundingPoly",
    "Symbol",
    "Word",
    "Paragraph",
    "Block",
    "Page",
    "FullTextAnnotation",
    "EntityAnnotation",
    "ProviderStatus",
    "AnnotateImageResponse",
    "BatchAnnotateImagesResponse",
]
