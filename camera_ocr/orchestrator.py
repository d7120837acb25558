"""
Main camera OCR orchestrator that turns a captured image into reading-ordered text.
"""

import asyncio
import logging
from typing import List, Optional, Dict, Any

import httpx

from .models import ExtractionResult, FeatureType, OCREngine, VisionConfig
from .ocr_processors import BaseOCRProcessor, create_ocr_processor

logger = logging.getLogger(__name__)


class CameraOCROrchestrator:
    """
    Entry point for capture surfaces.

    Accepts a base64-encoded photo and returns zero or one extraction
    results. Calls are independent: nothing is shared between them except
    the frozen configuration, so a capture surface that needs to prevent
    overlapping requests must do so itself.
    """

    def __init__(self,
                 config: Optional[VisionConfig] = None,
                 processor: Optional[BaseOCRProcessor] = None,
                 client: Optional[httpx.AsyncClient] = None,
                 engine: str = OCREngine.GOOGLE_VISION.value,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize camera OCR orchestrator.

        Args:
            config: Provider configuration, read from the environment when omitted
            processor: Pre-built processor; takes precedence over engine/config
            client: Optional shared HTTP client handed to the processor
            engine: OCR engine name used when no processor is given
            logger: Diagnostic logger, defaults to the module logger
        """
        self.logger = logger or logging.getLogger(__name__)

        if processor is None:
            processor = create_ocr_processor(
                engine=engine,
                config=config,
                client=client,
                logger=logger
            )
        self.processor = processor
        self.config = getattr(processor, 'config', config)

        self.logger.info(f"Camera OCR orchestrator initialized with engine: {self.processor.engine_name}")

    async def perform_ocr(self, base64_image: str) -> List[ExtractionResult]:
        """
        Extract text from a captured image.

        Args:
            base64_image: Base64-encoded JPEG/PNG without a data-URI prefix

        Returns:
            Zero or one extraction results; empty when no text was detected

        Raises:
            OCRProviderError: The provider rejected the request or returned an unusable body
            httpx.HTTPError: Network failure
        """
        self.logger.info(f"Starting OCR for image payload of {len(base64_image or '')} characters")

        try:
            results = await self.processor.extract_text(base64_image)
        except Exception as e:
            self.logger.error(f"OCR Error: {e}")
            raise

        self.logger.info(f"OCR completed with {len(results)} result(s)")
        return results

    def perform_ocr_sync(self, base64_image: str) -> List[ExtractionResult]:
        """Blocking variant of perform_ocr for callers without an event loop."""
        return asyncio.run(self.perform_ocr(base64_image))

    def get_configuration(self) -> Dict[str, Any]:
        """Get the active engine and provider configuration, without the endpoint query string."""
        provider_config = None
        if self.config is not None:
            provider_config = self.config.model_dump(mode='json', exclude={'endpoint'})
            provider_config['endpoint_host'] = httpx.URL(self.config.endpoint).host

        return {
            'engine': self.processor.engine_name,
            'available': self.processor.is_available(),
            'provider_config': provider_config,
        }

    def get_supported_feature_types(self) -> List[str]:
        """Get list of detection feature types the provider accepts."""
        return [feature.value for feature in FeatureType]
