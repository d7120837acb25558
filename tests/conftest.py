import asyncio
import json

import httpx
import pytest

from camera_ocr.models import Paragraph, VisionConfig
from camera_ocr.ocr_processors import VisionAPIProcessor

ENDPOINT = "https://vision.example.test/v1/images:annotate?key=test-key"


def _box(y, x=0, width=100, height=20):
    return {
        "vertices": [
            {"x": x, "y": y},
            {"x": x + width, "y": y},
            {"x": x + width, "y": y + height},
            {"x": x, "y": y + height},
        ]
    }


def _paragraph_json(words, y=0, x=0):
    # Each word is a string (one symbol per character) or a list of symbol texts
    return {
        "boundingBox": _box(y, x=x),
        "words": [{"symbols": [{"text": text} for text in word]} for word in words],
    }


@pytest.fixture
def vision_config():
    return VisionConfig(endpoint=ENDPOINT)


@pytest.fixture
def paragraph_json():
    return _paragraph_json


@pytest.fixture
def make_paragraph():
    def _make(words, y=0, x=0):
        return Paragraph.model_validate(_paragraph_json(words, y=y, x=x))

    return _make


@pytest.fixture
def full_text_response():
    """Build a response body with one page; each block is a list of (words, y) pairs."""

    def _make(*blocks, text=None):
        annotation = {
            "pages": [
                {
                    "blocks": [
                        {"paragraphs": [_paragraph_json(words, y=y) for words, y in block]}
                        for block in blocks
                    ]
                }
            ]
        }
        if text is not None:
            annotation["text"] = text
        return {"responses": [{"fullTextAnnotation": annotation}]}

    return _make


@pytest.fixture
def run_extraction(vision_config):
    """Run VisionAPIProcessor.extract_text against a mocked transport, returning (result, requests)."""

    def _run(handler, payload="aGVsbG8=", config=None):
        requests = []

        def _recording_handler(request):
            requests.append(request)
            return handler(request)

        async def _extract():
            transport = httpx.MockTransport(_recording_handler)
            async with httpx.AsyncClient(transport=transport) as client:
                processor = VisionAPIProcessor(config=config or vision_config, client=client)
                return await processor.extract_text(payload)

        return asyncio.run(_extract()), requests

    return _run


@pytest.fixture
def json_handler():
    def _make(body, status_code=200):
        def _handler(request):
            return httpx.Response(status_code, content=json.dumps(body).encode("utf-8"))

        return _handler

    return _make
