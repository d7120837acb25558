"""
Configuration models for the Vision API request.
"""

import os
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FeatureType(str, Enum):
    """Text detection features accepted by the Vision API."""
    DOCUMENT_TEXT_DETECTION = "DOCUMENT_TEXT_DETECTION"
    TEXT_DETECTION = "TEXT_DETECTION"


class VisionConfig(BaseModel):
    """Endpoint and feature settings, read once at startup and frozen."""

    model_config = ConfigDict(frozen=True)

    endpoint: str = Field(..., description="Full images:annotate URL, including any key query parameter")
    feature_type: FeatureType = Field(
        default=FeatureType.DOCUMENT_TEXT_DETECTION,
        description="Detection feature to request"
    )
    max_results: int = Field(default=1, description="maxResults sent with the feature")
    timeout: Optional[float] = Field(None, description="Request timeout in seconds, transport default when unset")

    @field_validator("endpoint")
    @classmethod
    def validate_endpoint(cls, v):
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"Endpoint must be an http(s) URL: {v!r}")
        return v

    @field_validator("max_results")
    @classmethod
    def validate_max_results(cls, v):
        if v < 1:
            raise ValueError("max_results must be at least 1")
        return v

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v):
        if v is not None and v <= 0:
            raise ValueError("timeout must be positive")
        return v

    @classmethod
    def from_env(cls) -> "VisionConfig":
        """
        Build configuration from environment variables.

        Reads VISION_API_ENDPOINT (required), VISION_FEATURE_TYPE,
        VISION_MAX_RESULTS and VISION_TIMEOUT.
        """
        endpoint = os.environ.get("VISION_API_ENDPOINT")
        if not endpoint:
            raise ValueError("VISION_API_ENDPOINT is not set")

        values = {"endpoint": endpoint}
        if os.environ.get("VISION_FEATURE_TYPE"):
            values["feature_type"] = os.environ["VISION_FEATURE_TYPE"].strip().upper()
        if os.environ.get("VISION_MAX_RESULTS"):
            values["max_results"] = int(os.environ["VISION_MAX_RESULTS"])
        if os.environ.get("VISION_TIMEOUT"):
            values["timeout"] = float(os.environ["VISION_TIMEOUT"])
        return cls(**values)

    def build_request(self, base64_image: str) -> dict:
        """Build the images:annotate request body for a single image."""
        return {
            "requests": [
                {
                    "image": {"content": base64_image},
                    "features": [
                        {
                            "type": self.feature_type.value,
                            "maxResults": self.max_results,
                        }
                    ],
                }
            ]
        }
