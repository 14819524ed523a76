"""Question answering over a built Document.

Scores every sentence against the question and returns the best one, or
falls back in order to a highlighted date/amount sentence, the summary,
and finally the first sentence. Stateless and deterministic for a given
(question, document) pair; degenerate input yields a low-confidence
result instead of an exception.
"""

import logging
from typing import Any, Mapping, Optional, Union

from readable.config import ScoringWeights, settings
from readable.exceptions import DocumentLoadError
from readable.models import (
    AnswerResult,
    AnswerSource,
    Document,
    QuestionAnalysis,
    QuestionType,
    Span,
)
from readable.qa.analyzer import analyze_question
from readable.qa.scoring import compute_confidence, rank_sentences

logger = logging.getLogger(__name__)

DocumentInput = Union[Document, Mapping[str, Any], str, bytes, None]


def _coerce_document(doc: DocumentInput) -> Optional[Document]:
    if doc is None or isinstance(doc, Document):
        return doc
    try:
        return Document.load(doc)
    except DocumentLoadError as e:
        logger.warning("Cannot answer from malformed document: %s", e)
        return None


def _first_sentence_with(doc: Document, spans: list[Span]) -> Optional[str]:
    if not spans:
        return None
    value = spans[0].value
    return next((s for s in doc.sentences if value in s), None)


def _fallback_answer(
    doc: Document,
    analysis: QuestionAnalysis,
    weights: ScoringWeights,
) -> AnswerResult:
    if analysis.question_type == QuestionType.DATE:
        sentence = _first_sentence_with(doc, doc.highlights.dates)
        if sentence is not None:
            return AnswerResult(
                answer=sentence,
                confidence=weights.highlight_confidence,
                source=AnswerSource.date_highlight(),
            )
    elif analysis.question_type == QuestionType.AMOUNT:
        sentence = _first_sentence_with(doc, doc.highlights.amounts)
        if sentence is not None:
            return AnswerResult(
                answer=sentence,
                confidence=weights.highlight_confidence,
                source=AnswerSource.amount_highlight(),
            )

    if doc.summary:
        return AnswerResult(
            answer=doc.summary,
            confidence=weights.summary_confidence,
            source=AnswerSource.summary(),
        )

    answer = doc.sentences[0] if doc.sentences else doc.raw_text[: settings.fallback_char_limit]
    return AnswerResult(
        answer=answer,
        confidence=weights.fallback_confidence,
        source=AnswerSource.fallback(),
    )


def answer_question(
    question: Optional[str],
    doc: DocumentInput,
    weights: Optional[ScoringWeights] = None,
) -> AnswerResult:
    """Answer a free-text question from a document.

    Args:
        question: The user's question.
        doc: Built Document, or persisted document data (mapping or JSON)
            which is validated first.
        weights: Scoring weights (default from settings).

    Returns:
        AnswerResult. The top sentence is accepted when its total score
        reaches the accept threshold; otherwise the fallback chain applies. Empty
        questions, unusable documents and questions with nothing to match
        return the zero result.
    """
    if weights is None:
        weights = settings.scoring

    if not isinstance(question, str) or not question.strip():
        return AnswerResult.empty()

    document = _coerce_document(doc)
    if document is None or not document.sentences or not document.sentence_meta:
        return AnswerResult.empty()

    analysis = analyze_question(question)
    if analysis.is_empty:
        return AnswerResult.empty()

    ranked = rank_sentences(question, analysis, document.sentence_meta, weights)
    confidence = compute_confidence(ranked, weights)
    best = ranked[0]
    logger.debug(
        "Top sentence %d scored %.2f, confidence %d",
        best.index,
        best.score,
        confidence,
    )

    if best.score >= weights.accept_threshold:
        return AnswerResult(
            answer=best.sentence,
            confidence=max(confidence, weights.min_accepted_confidence),
            source=AnswerSource.sentence_match(best.index, best.sentence),
        )

    return _fallback_answer(document, analysis, weights)
