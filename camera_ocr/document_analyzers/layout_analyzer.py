"""
Layout analyzer for assembling Vision API annotations into reading-ordered text.
"""

import logging
import re
from typing import List, Dict, Any, Optional, Sequence

import numpy as np

from ..models import Page, Paragraph, Vertex

logger = logging.getLogger(__name__)

_WHITESPACE_RE = re.compile(r"\s+")

PARAGRAPH_SEPARATOR = "\n\n"


def polygon_area(vertices: Sequence[Vertex]) -> float:
    """
    Calculate polygon area with the shoelace formula.

    Vertices must be ordered around the polygon boundary. Fewer than three
    vertices yields 0.0.
    """
    if len(vertices) < 3:
        return 0.0

    xs = np.array([v.x for v in vertices], dtype=float)
    ys = np.array([v.y for v in vertices], dtype=float)
    signed = np.dot(xs, np.roll(ys, -1)) - np.dot(np.roll(xs, -1), ys)
    return float(abs(signed) / 2.0)


def strip_whitespace(text: str) -> str:
    """Remove every whitespace character, not only leading and trailing ones."""
    return _WHITESPACE_RE.sub("", text)


def extract_paragraph_text(paragraph: Paragraph) -> str:
    """Concatenate all symbol texts of a paragraph without separators."""
    if not paragraph.words:
        return ""
    return strip_whitespace("".join(word.text for word in paragraph.words))


def identify_main_content(paragraphs: Sequence[Paragraph],
                          logger: Optional[logging.Logger] = None,
                          separator: str = PARAGRAPH_SEPARATOR) -> str:
    """
    Join non-empty paragraph texts top to bottom.

    Paragraphs are ordered by the y coordinate of their first polygon vertex
    (stable for ties). Multi-column layouts are not detected.

    Args:
        paragraphs: Paragraphs in provider order
        logger: Receives DEBUG diagnostics, defaults to the module logger
        separator: Text placed between paragraphs

    Returns:
        Assembled text, empty when no paragraph carries text
    """
    log = logger or logging.getLogger(__name__)

    if not paragraphs:
        log.debug("No paragraphs to assemble")
        return ""

    candidates = []
    for index, paragraph in enumerate(paragraphs):
        text = extract_paragraph_text(paragraph)
        vertices = paragraph.vertices
        top_y = paragraph.top_y
        log.debug(
            f"Paragraph {index}: y={top_y}, area={polygon_area(vertices):.1f}, "
            f"chars={len(text)}"
        )
        if text:
            candidates.append((top_y, text))

    # sorted() is stable, ties keep provider order
    ordered = sorted(candidates, key=lambda item: item[0])

    log.debug(f"Assembled {len(ordered)} of {len(paragraphs)} paragraphs")
    return separator.join(text for _, text in ordered)


class LayoutAnalyzer:
    """
    Assembles the first page of a Vision API annotation into reading order.

    Sorting is purely vertical; genuinely multi-column text will interleave.
    """

    def __init__(self,
                 paragraph_separator: str = PARAGRAPH_SEPARATOR,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize layout analyzer.

        Args:
            paragraph_separator: Text placed between assembled paragraphs
            logger: Diagnostic logger, defaults to the module logger
        """
        self.paragraph_separator = paragraph_separator
        self.logger = logger or logging.getLogger(__name__)

    def flatten_paragraphs(self, page: Page) -> List[Paragraph]:
        """Collect every block's paragraphs in provider order."""
        return page.paragraphs

    def assemble_page_text(self, page: Page) -> str:
        """Assemble a page's paragraphs into reading-ordered text."""
        paragraphs = self.flatten_paragraphs(page)
        self.logger.debug(f"Assembling {len(page.blocks)} blocks, {len(paragraphs)} paragraphs")
        return identify_main_content(
            paragraphs,
            logger=self.logger,
            separator=self.paragraph_separator
        )

    def get_layout_statistics(self, page: Page) -> Dict[str, Any]:
        """Get diagnostic counts and metrics for a page."""
        paragraphs = self.flatten_paragraphs(page)
        words = [word for paragraph in paragraphs for word in paragraph.words]
        symbols = [symbol for word in words for symbol in word.symbols]
        confidences = [s.confidence for s in symbols if s.confidence is not None]

        return {
            'block_count': len(page.blocks),
            'paragraph_count': len(paragraphs),
            'non_empty_paragraphs': sum(1 for p in paragraphs if extract_paragraph_text(p)),
            'word_count': len(words),
            'symbol_count': len(symbols),
            'total_paragraph_area': sum(polygon_area(p.vertices) for p in paragraphs),
            'mean_symbol_confidence': float(np.mean(confidences)) if confidences else None,
        }
