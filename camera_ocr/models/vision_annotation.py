"""
Vision API annotation models for representing the provider's OCR response.

The provider nests recognized text as pages -> blocks -> paragraphs -> words
-> symbols, each level carrying its own bounding polygon. Field names follow
the provider's camelCase JSON through aliases.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AnnotationModel(BaseModel):
    """Base for provider models: accepts camelCase aliases and ignores unknown fields."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class Vertex(AnnotationModel):
    """A 2D point in image pixel space. The provider omits zero coordinates."""
    x: float = Field(default=0.0, description="Horizontal pixel coordinate")
    y: float = Field(default=0.0, description="Vertical pixel coordinate")


class NormalizedVertex(AnnotationModel):
    """A 2D point relative to image size (0-1)."""
    x: float = Field(default=0.0, description="Relative horizontal coordinate")
    y: float = Field(default=0.0, description="Relative vertical coordinate")


class BoundingPoly(AnnotationModel):
    """Ordered polygon vertices delimiting a detected text region."""
    vertices: List[Vertex] = Field(default_factory=list, description="Pixel vertices in boundary order")
    normalized_vertices: List[NormalizedVertex] = Field(
        default_factory=list,
        alias="normalizedVertices",
        description="Relative vertices in boundary order"
    )

    @property
    def top_y(self) -> float:
        """Y coordinate of the first vertex, 0 when the polygon has no vertices."""
        return self.vertices[0].y if self.vertices else 0.0


class Symbol(AnnotationModel):
    """Smallest recognized unit, a single glyph."""
    text: str = Field(default="", description="Recognized glyph")
    confidence: Optional[float] = Field(None, description="Recognition confidence (0-1)")
    bounding_box: Optional[BoundingPoly] = Field(None, alias="boundingBox", description="Glyph polygon")

    @field_validator("confidence")
    @classmethod
    def validate_confidence(cls, v):
        if v is not None and not 0.0 <= v <= 1.0:
            raise ValueError("Confidence must be between 0.0 and 1.0")
        return v


class Word(AnnotationModel):
    """Ordered symbols forming a word."""
    symbols: List[Symbol] = Field(default_factory=list, description="Word symbols in order")
    bounding_box: Optional[BoundingPoly] = Field(None, alias="boundingBox", description="Word polygon")
    confidence: Optional[float] = Field(None, description="Word confidence (0-1)")

    @property
    def text(self) -> str:
        """Concatenated symbol text."""
        return "".join(symbol.text for symbol in self.symbols)


class Paragraph(AnnotationModel):
    """Ordered words forming a paragraph."""
    words: List[Word] = Field(default_factory=list, description="Paragraph words in order")
    bounding_box: Optional[BoundingPoly] = Field(None, alias="boundingBox", description="Paragraph polygon")
    confidence: Optional[float] = Field(None, description="Paragraph confidence (0-1)")

    @property
    def vertices(self) -> List[Vertex]:
        """Paragraph polygon vertices, empty when no bounding box was returned."""
        return self.bounding_box.vertices if self.bounding_box else []

    @property
    def top_y(self) -> float:
        """Reading-order key: y of the first polygon vertex, 0 without a bounding box."""
        return self.bounding_box.top_y if self.bounding_box else 0.0


class Block(AnnotationModel):
    """Ordered paragraphs forming a block."""
    paragraphs: List[Paragraph] = Field(default_factory=list, description="Block paragraphs in order")
    bounding_box: Optional[BoundingPoly] = Field(None, alias="boundingBox", description="Block polygon")
    block_type: Optional[str] = Field(None, alias="blockType", description="Provider block type")
    confidence: Optional[float] = Field(None, description="Block confidence (0-1)")


class Page(AnnotationModel):
    """A page of detected text."""
    blocks: List[Block] = Field(default_factory=list, description="Page blocks in order")
    width: Optional[int] = Field(None, description="Page width in pixels")
    height: Optional[int] = Field(None, description="Page height in pixels")
    confidence: Optional[float] = Field(None, description="Page confidence (0-1)")

    @property
    def paragraphs(self) -> List[Paragraph]:
        """Every block's paragraphs flattened in provider order."""
        return [paragraph for block in self.blocks for paragraph in block.paragraphs]


class FullTextAnnotation(AnnotationModel):
    """Structured document text annotation."""
    pages: List[Page] = Field(default_factory=list, description="Detected pages")
    text: Optional[str] = Field(None, description="Whole-image UTF-8 text")

    @property
    def first_page(self) -> Optional[Page]:
        return self.pages[0] if self.pages else None


class EntityAnnotation(AnnotationModel):
    """Legacy flat text annotation; the first entry holds the whole-image text."""
    description: str = Field(default="", description="Detected text")
    locale: Optional[str] = Field(None, description="Detected language code")
    bounding_poly: Optional[BoundingPoly] = Field(None, alias="boundingPoly", description="Text polygon")


class ProviderStatus(AnnotationModel):
    """Per-image error status returned inside a successful batch response."""
    code: int = Field(default=0, description="Provider status code")
    message: str = Field(default="", description="Provider error message")


class AnnotateImageResponse(AnnotationModel):
    """Annotations for a single image."""
    full_text_annotation: Optional[FullTextAnnotation] = Field(
        None,
        alias="fullTextAnnotation",
        description="Structured document annotation"
    )
    text_annotations: List[EntityAnnotation] = Field(
        default_factory=list,
        alias="textAnnotations",
        description="Legacy flat annotations"
    )
    error: Optional[ProviderStatus] = Field(None, description="Per-image error status")

    @property
    def has_pages(self) -> bool:
        return bool(self.full_text_annotation and self.full_text_annotation.pages)


class BatchAnnotateImagesResponse(AnnotationModel):
    """Top-level provider response body."""
    responses: List[AnnotateImageResponse] = Field(default_factory=list, description="One entry per requested image")

    @property
    def first_response(self) -> Optional[AnnotateImageResponse]:
        return self.responses[0] if self.responses else None
