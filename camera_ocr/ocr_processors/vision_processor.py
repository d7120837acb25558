"""
Google Cloud Vision OCR processor implementation.
"""

import logging
from typing import List, Optional, Union

import httpx
from pydantic import ValidationError

from .base import (
    BaseOCRProcessor,
    ProviderHTTPError,
    ProviderParseError,
    ProviderResponseError,
)
from ..document_analyzers import LayoutAnalyzer, strip_whitespace
from ..models import (
    AnnotateImageResponse,
    BatchAnnotateImagesResponse,
    ExtractionResult,
    OCREngine,
    VisionConfig,
)

# Whole-image results carry a fixed confidence
FULL_TEXT_CONFIDENCE = 1.0


class VisionAPIProcessor(BaseOCRProcessor):
    """Vision API images:annotate processor with structured text assembly."""

    def __init__(self,
                 config: VisionConfig,
                 client: Optional[httpx.AsyncClient] = None,
                 layout_analyzer: Optional[LayoutAnalyzer] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize Vision API processor.

        Args:
            config: Endpoint and feature configuration
            client: Shared HTTP client; a short-lived one is opened per call when omitted
            layout_analyzer: Assembles structured annotations into text
            logger: Diagnostic logger, defaults to a per-engine child logger
        """
        super().__init__(engine_name=OCREngine.GOOGLE_VISION.value, logger=logger)

        self.config = config
        self.client = client
        self.layout_analyzer = layout_analyzer or LayoutAnalyzer(logger=self.logger)

    def is_available(self) -> bool:
        """Check if an endpoint is configured."""
        return bool(self.config.endpoint)

    async def extract_text(self, base64_image: str) -> List[ExtractionResult]:
        """
        Extract text from a base64-encoded image using the Vision API.

        Raises:
            ProviderHTTPError: Non-success HTTP status
            ProviderParseError: Body is not a valid annotate response
            ProviderResponseError: The image entry carries an error status
            httpx.HTTPError: Transport failure
        """
        self._validate_payload(base64_image)
        request_body = self.config.build_request(base64_image)

        try:
            response = await self._post(request_body)
        except httpx.HTTPError as e:
            self.logger.error(f"Vision API request failed: {e}")
            raise

        if not response.is_success:
            error_text = response.text
            self.logger.error(f"Vision API Error: {error_text}")
            raise ProviderHTTPError(response.status_code, response.reason_phrase, error_text)

        batch = self.parse_response(response.content)
        return self.reduce_response(batch)

    async def _post(self, request_body: dict) -> httpx.Response:
        """Send the annotate request and return the full response."""
        headers = {"Content-Type": "application/json"}

        if self.client is not None:
            return await self.client.post(self.config.endpoint, json=request_body, headers=headers)

        client_kwargs = {}
        if self.config.timeout is not None:
            client_kwargs["timeout"] = self.config.timeout

        async with httpx.AsyncClient(**client_kwargs) as client:
            return await client.post(self.config.endpoint, json=request_body, headers=headers)

    def parse_response(self, body: Union[bytes, str]) -> BatchAnnotateImagesResponse:
        """Validate a raw JSON body (bytes or str) against the response schema."""
        try:
            return BatchAnnotateImagesResponse.model_validate_json(body)
        except ValidationError as e:
            self.logger.error(f"Failed to parse Vision API response: {e}")
            raise ProviderParseError(f"Malformed Vision API response: {e}") from e

    def reduce_response(self, batch: BatchAnnotateImagesResponse) -> List[ExtractionResult]:
        """
        Reduce a parsed response to zero or one extraction result.

        Prefers structured pages, then the full annotation text, then the
        first legacy text annotation.
        """
        image_response = batch.first_response
        if image_response is None:
            self.logger.info("Vision API returned no image responses")
            return []

        if image_response.error is not None and image_response.error.code:
            self.logger.error(
                f"Vision API image error {image_response.error.code}: {image_response.error.message}"
            )
            raise ProviderResponseError(image_response.error.code, image_response.error.message)

        text = self._select_text(image_response)
        if not text:
            self.logger.info("No text detected")
            return []

        return [ExtractionResult(text=text, confidence=FULL_TEXT_CONFIDENCE)]

    def _select_text(self, image_response: AnnotateImageResponse) -> str:
        full_text = image_response.full_text_annotation

        if image_response.has_pages:
            page = full_text.first_page
            if self.logger.isEnabledFor(logging.DEBUG):
                self.logger.debug(f"Layout statistics: {self.layout_analyzer.get_layout_statistics(page)}")
            text = self.layout_analyzer.assemble_page_text(page)
            if text:
                return text
            self.logger.debug("Structured pages produced no text, falling back")

        if full_text is not None and full_text.text:
            text = strip_whitespace(full_text.text)
            if text:
                return text

        if image_response.text_annotations:
            # The first entry holds the whole-image text
            return strip_whitespace(image_response.text_annotations[0].description)

        return ""
