"""
Document analysis module for reading-order text assembly.
"""

from .layout_analyzer import (
    LayoutAnalyzer,
    polygon_area,
    strip_whitespace,
    extract_paragraph_text,
    identify_main_content,
)

__all__ = [
    "LayoutAnalyzer",
    "polygon_area",
    "strip_whitespace",
    "extract_paragraph_text",
    "identify_main_content",
]
