import pytest
from pydantic import ValidationError

from camera_ocr.models import (
    BatchAnnotateImagesResponse,
    ExtractionResult,
    FeatureType,
    Paragraph,
    VisionConfig,
)


def test_vision_config_defaults():
    config = VisionConfig(endpoint="https://vision.example.test/v1/images:annotate")

    assert config.feature_type == FeatureType.DOCUMENT_TEXT_DETECTION
    assert config.max_results == 1
    assert config.timeout is None


@pytest.mark.parametrize("kwargs", [
    {"endpoint": "vision.example.test"},
    {"endpoint": "https://vision.example.test", "max_results": 0},
    {"endpoint": "https://vision.example.test", "timeout": 0},
    {"endpoint": "https://vision.example.test", "feature_type": "LABEL_DETECTION"},
])
def test_vision_config_rejects_invalid_values(kwargs):
    with pytest.raises(ValidationError):
        VisionConfig(**kwargs)


def test_vision_config_is_frozen():
    config = VisionConfig(endpoint="https://vision.example.test")
    with pytest.raises(ValidationError):
        config.max_results = 3


def test_vision_config_from_env(monkeypatch):
    monkeypatch.setenv("VISION_API_ENDPOINT", "https://vision.example.test/v1/images:annotate?key=k")
    monkeypatch.setenv("VISION_FEATURE_TYPE", "text_detection")
    monkeypatch.setenv("VISION_MAX_RESULTS", "10")
    monkeypatch.setenv("VISION_TIMEOUT", "2.5")

    config = VisionConfig.from_env()

    assert config.endpoint.endswith("?key=k")
    assert config.feature_type == FeatureType.TEXT_DETECTION
    assert config.max_results == 10
    assert config.timeout == 2.5


def test_vision_config_from_env_requires_endpoint(monkeypatch):
    monkeypatch.delenv("VISION_API_ENDPOINT", raising=False)
    with pytest.raises(ValueError):
        VisionConfig.from_env()


def test_build_request_shape():
    config = VisionConfig(endpoint="https://vision.example.test", max_results=3)
    assert config.build_request("QUJD") == {
        "requests": [
            {
                "image": {"content": "QUJD"},
                "features": [{"type": "DOCUMENT_TEXT_DETECTION", "maxResults": 3}],
            }
        ]
    }


def test_extraction_result_confidence_bounds():
    assert ExtractionResult(text="x").confidence == 1.0
    assert set(ExtractionResult(text="x").model_dump()) == {"text", "confidence"}
    with pytest.raises(ValidationError):
        ExtractionResult(text="x", confidence=1.5)


def test_annotation_parsing_defaults_omitted_coordinates():
    paragraph = Paragraph.model_validate({
        "boundingBox": {"vertices": [{}, {"x": 7}, {"x": 7, "y": 3}, {"y": 3}]},
        "words": [{"symbols": [{"text": "h", "confidence": 0.9}, {"text": "i"}]}],
        "unknownField": True,
    })

    assert paragraph.vertices[0].x == 0.0
    assert paragraph.vertices[0].y == 0.0
    assert paragraph.vertices[1].x == 7.0
    assert paragraph.words[0].text == "hi"
    assert paragraph.bounding_box.top_y == 0.0
    assert paragraph.top_y == 0.0


def test_paragraph_top_y_uses_first_vertex():
    paragraph = Paragraph.model_validate({
        "boundingBox": {"vertices": [{"x": 0, "y": 80}, {"x": 0, "y": 10}, {"x": 5, "y": 10}]},
    })

    assert paragraph.top_y == 80.0
    assert Paragraph().top_y == 0.0
    assert Paragraph.model_validate({"boundingBox": {}}).top_y == 0.0


def test_batch_response_accessors():
    batch = BatchAnnotateImagesResponse.model_validate({
        "responses": [
            {
                "fullTextAnnotation": {
                    "text": "abc",
                    "pages": [{"blocks": [{"paragraphs": [{}, {}]}, {"paragraphs": [{}]}]}],
                },
                "textAnnotations": [{"description": "abc"}],
            }
        ]
    })

    response = batch.first_response
    assert response.has_pages
    assert len(response.full_text_annotation.first_page.paragraphs) == 3
    assert response.text_annotations[0].description == "abc"
    assert BatchAnnotateImagesResponse().first_response is None


def test_symbol_confidence_out_of_range_rejected():
    with pytest.raises(ValidationError):
        Paragraph.model_validate({"words": [{"symbols": [{"text": "a", "confidence": 2}]}]})
