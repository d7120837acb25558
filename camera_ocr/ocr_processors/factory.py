"""
Factory methods for creating OCR processors.
"""

import logging
from typing import List, Optional

import httpx

from .base import BaseOCRProcessor
from .vision_processor import VisionAPIProcessor
from ..models import OCREngine, VisionConfig

logger = logging.getLogger(__name__)


def create_ocr_processor(
    engine: str = OCREngine.GOOGLE_VISION.value,
    config: Optional[VisionConfig] = None,
    client: Optional[httpx.AsyncClient] = None,
    **kwargs
) -> BaseOCRProcessor:
    """
    Create an OCR processor instance.

    Args:
        engine: OCR engine name ('google_vision')
        config: Provider configuration, read from the environment when omitted
        client: Optional shared HTTP client
        **kwargs: Engine-specific parameters (layout_analyzer, logger)

    Returns:
        OCR processor instance

    Raises:
        ValueError: If engine is not supported
        RuntimeError: If engine is not available
    """
    engine = engine.lower().strip()

    if engine == OCREngine.GOOGLE_VISION.value:
        processor = VisionAPIProcessor(
            config=config or VisionConfig.from_env(),
            client=client,
            layout_analyzer=kwargs.get('layout_analyzer'),
            logger=kwargs.get('logger')
        )
    else:
        raise ValueError(f"Unsupported OCR engine: {engine}")

    if not processor.is_available():
        raise RuntimeError(f"OCR engine {engine} is not available")

    logger.info(f"Created {engine} OCR processor")
    return processor


def get_supported_engines() -> List[str]:
    """Get list of OCR engine names the factory can build."""
    return [engine.value for engine in OCREngine]
