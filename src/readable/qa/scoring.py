"""Sentence scoring for the question answerer.

Every weight lives in `readable.config.ScoringWeights`.
"""

import re
from dataclasses import dataclass

from readable.config import ScoringWeights
from readable.models import QuestionAnalysis, QuestionType, SentenceMeta
from readable.pipeline.stage_entities import contains_amount, contains_date

QUESTION_END_PUNCTUATION = re.compile(r"[?!]")


@dataclass
class ScoredSentence:
    """Score breakdown for one sentence."""

    index: int
    sentence: str
    score: float = 0.0
    keyword_matches: int = 0
    token_matches: int = 0


def question_phrases(question: str, weights: ScoringWeights) -> list[str]:
    """Adjacent word pairs from the leading long words of a question."""
    words = [
        word
        for word in QUESTION_END_PUNCTUATION.sub("", question.lower()).split()
        if len(word) >= weights.phrase_word_min_length
    ][: weights.phrase_word_count]
    return [f"{words[i]} {words[i + 1]}" for i in range(len(words) - 1)]


def _type_boost(
    sentence: str,
    analysis: QuestionAnalysis,
    weights: ScoringWeights,
) -> float:
    if analysis.question_type == QuestionType.DATE:
        has_entity, literals = contains_date(sentence), analysis.dates
    elif analysis.question_type == QuestionType.AMOUNT:
        has_entity, literals = contains_amount(sentence), analysis.amounts
    else:
        return 0.0

    boost = weights.type_match if has_entity else 0.0
    if any(literal in sentence for literal in literals):
        boost += weights.literal_match
    return boost


def score_sentence(
    meta: SentenceMeta,
    index: int,
    total: int,
    analysis: QuestionAnalysis,
    phrases: list[str],
    weights: ScoringWeights,
) -> ScoredSentence:
    """Score one sentence against an analyzed question.

    Args:
        meta: Indexed sentence.
        index: Sentence position in the document.
        total: Number of sentences in the document.
        analysis: Analyzed question.
        phrases: Question word pairs from `question_phrases`.
        weights: Scoring weights.

    Returns:
        ScoredSentence with the total score and match counts.
    """
    lower = meta.text.lower()

    keyword_matches = sum(
        1 for kw in analysis.keywords if meta.term_freq.get(kw, 0) > 0 or kw in lower
    )
    token_matches = sum(meta.term_freq.get(token, 0) for token in analysis.tokens)

    score = keyword_matches * weights.keyword_match
    score += token_matches * weights.token_frequency
    score += _type_boost(meta.text, analysis, weights)
    score += sum(weights.phrase_match for phrase in phrases if phrase in lower)
    score += (total - index) / total * weights.position_weight

    return ScoredSentence(
        index=index,
        sentence=meta.text,
        score=score,
        keyword_matches=keyword_matches,
        token_matches=token_matches,
    )


def rank_sentences(
    question: str,
    analysis: QuestionAnalysis,
    sentence_meta: list[SentenceMeta],
    weights: ScoringWeights,
) -> list[ScoredSentence]:
    """Score all sentences and order them best first.

    Ties keep document order.
    """
    phrases = question_phrases(question, weights)
    total = len(sentence_meta)
    scored = [
        score_sentence(meta, idx, total, analysis, phrases, weights)
        for idx, meta in enumerate(sentence_meta)
    ]
    return sorted(scored, key=lambda s: s.score, reverse=True)


def compute_confidence(ranked: list[ScoredSentence], weights: ScoringWeights) -> int:
    """Blend the top score and its lead over the runner-up into 0-100."""
    top_score = ranked[0].score if ranked else 0.0
    if top_score <= 0:
        return 0
    second_score = ranked[1].score if len(ranked) > 1 else 0.0
    score_gap = top_score - second_score

    normalized_score = min(1.0, top_score / weights.score_normalizer)
    if score_gap > weights.gap_saturation:
        gap_term = weights.gap_share
    else:
        gap_term = score_gap / weights.gap_divisor * weights.gap_share

    confidence = round((normalized_score * weights.score_share + gap_term) * 100)
    return max(0, min(100, confidence))
