"""Build Stage - Assemble a Document from raw text.

Runs segmentation once and derives both `sentences` and
`sentence_ranges` from that single result, then indexes each sentence and
attaches the summary, simplified rewrite, highlights and structure
markers computed over the trimmed text.
"""

import logging
from typing import Optional, Union

from readable.models import (
    Document,
    ReadingMode,
    SentenceMeta,
    SentenceRange,
)
from readable.pipeline.stage_entities import extract_key_spans
from readable.pipeline.stage_segment import split_sentences
from readable.pipeline.stage_structure import detect_structure
from readable.pipeline.stage_summarize import simplify_text, summarize_text
from readable.pipeline.stage_tokenize import term_frequencies, tokenize

logger = logging.getLogger(__name__)

# Text an OCR collaborator returns when no recognizer is available
OCR_UNAVAILABLE_PLACEHOLDER = (
    "OCR unavailable: install a Dev Client with ML Kit / Apple Vision and reopen the image."
)


def is_ocr_placeholder(text: Optional[str]) -> bool:
    """Check if text is the OCR-unavailable sentinel rather than user content."""
    return bool(text) and text.strip() == OCR_UNAVAILABLE_PLACEHOLDER


def build_document(text: Optional[str]) -> Document:
    """Analyze raw text into an immutable Document.

    Args:
        text: User supplied text (typed, pasted or OCR output).

    Returns:
        Document with a fresh id and timestamp. Empty input yields a
        document with empty fields.
    """
    cleaned = (text or "").strip()
    if not cleaned:
        logger.warning("Building document from empty text")
        return Document()
    if is_ocr_placeholder(cleaned):
        logger.warning("Building document from the OCR placeholder text")

    segments = split_sentences(cleaned)
    sentences = [segment.text for segment in segments]
    sentence_ranges = [SentenceRange(start=s.start, end=s.end) for s in segments]

    sentence_meta = []
    for sentence, sentence_range in zip(sentences, sentence_ranges):
        tokens = tokenize(sentence)
        sentence_meta.append(
            SentenceMeta(
                text=sentence,
                tokens=tokens,
                term_freq=term_frequencies(tokens),
                range=sentence_range,
            )
        )

    document = Document(
        raw_text=cleaned,
        sentences=sentences,
        sentence_meta=sentence_meta,
        sentence_ranges=sentence_ranges,
        summary=summarize_text(cleaned, sentences),
        simplified_text=simplify_text(cleaned, sentences),
        highlights=extract_key_spans(cleaned),
        structures=detect_structure(cleaned),
    )
    logger.debug(
        "Built document %s: %d sentences, %d dates, %d amounts, %d structures",
        document.id,
        len(document.sentences),
        len(document.highlights.dates),
        len(document.highlights.amounts),
        len(document.structures),
    )
    return document


def reading_segments(
    doc: Document,
    mode: Union[ReadingMode, str] = ReadingMode.SIMPLIFIED,
) -> list[str]:
    """Ordered text segments for sentence-by-sentence speech playback.

    Args:
        doc: Built document.
        mode: `simplified` re-segments the simplified text; `original`
            uses the document sentences.

    Returns:
        Segments in reading order. The whole text is a single segment when
        segmentation yields nothing; an empty document yields no segments.
    """
    mode = ReadingMode(mode)
    if mode == ReadingMode.SIMPLIFIED:
        whole = doc.simplified_text
        segments = [s.text for s in split_sentences(whole)]
    else:
        whole = doc.raw_text
        segments = list(doc.sentences)

    if segments:
        return segments
    return [whole] if whole.strip() else []
