"""Analysis stages for the readable engine.

Deterministic, pure stages (no I/O, no shared state):
1. stage_tokenize - Lowercase word tokens and term frequencies
2. stage_segment - Sentence segmentation with character offsets
3. stage_entities - Date and amount spans
4. stage_structure - List, table and heading lines
5. stage_summarize - Extractive summary and simplified rewrite
6. stage_build - Document assembly from the stages above

Each stage can be run on its own or through build_document.
"""

from .stage_build import (
    OCR_UNAVAILABLE_PLACEHOLDER,
    build_document,
    is_ocr_placeholder,
    reading_segments,
)
from .stage_entities import (
    AMOUNT_PATTERN,
    DATE_PATTERN,
    contains_amount,
    contains_date,
    extract_key_spans,
    find_amounts,
    find_dates,
)
from .stage_segment import ABBREVIATIONS, Sentence, is_abbreviation, split_sentences
from .stage_structure import classify_line, detect_structure
from .stage_summarize import simplify_sentence, simplify_text, summarize_text
from .stage_tokenize import term_frequencies, tokenize

__all__ = [
    # Tokenize
    "tokenize",
    "term_frequencies",
    # Segment
    "ABBREVIATIONS",
    "Sentence",
    "is_abbreviation",
    "split_sentences",
    # Entities
    "AMOUNT_PATTERN",
    "DATE_PATTERN",
    "contains_amount",
    "contains_date",
    "extract_key_spans",
    "find_amounts",
    "find_dates",
    # Structure
    "classify_line",
    "detect_structure",
    # Summarize
    "simplify_sentence",
    "simplify_text",
    "summarize_text",
    # Build
    "OCR_UNAVAILABLE_PLACEHOLDER",
    "build_document",
    "is_ocr_placeholder",
    "reading_segments",
]
