"""Text analysis and question answering engine for an accessibility reading aid."""

from readable.exceptions import DocumentLoadError
from readable.models import AnswerResult, AnswerSource, Document, Highlights, Span
from readable.pipeline import (
    Sentence,
    build_document,
    detect_structure,
    extract_key_spans,
    reading_segments,
    simplify_text,
    split_sentences,
    summarize_text,
    tokenize,
)
from readable.qa import analyze_question, answer_question

__version__ = "0.1.0"

__all__ = [
    "AnswerResult",
    "AnswerSource",
    "Document",
    "DocumentLoadError",
    "Highlights",
    "Sentence",
    "Span",
    "analyze_question",
    "answer_question",
    "build_document",
    "detect_structure",
    "extract_key_spans",
    "reading_segments",
    "simplify_text",
    "split_sentences",
    "summarize_text",
    "tokenize",
]
