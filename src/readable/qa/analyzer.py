"""Question analysis - type detection, keywords and entity literals."""

import logging
import re
from typing import Optional

from readable.models import QuestionAnalysis, QuestionType
from readable.pipeline.stage_entities import find_amounts, find_dates
from readable.pipeline.stage_tokenize import tokenize

logger = logging.getLogger(__name__)

# Checked in order against the lowercased question; first match wins
QUESTION_TYPE_PATTERNS = [
    (QuestionType.DATE, re.compile(r"\b(?:when|what time|what date|which day)\b")),
    (
        QuestionType.AMOUNT,
        re.compile(r"\b(?:how much|what.*cost|price|fee|amount|dollar|money)\b"),
    ),
    (QuestionType.PERSON, re.compile(r"\b(?:who|whom|whose)\b")),
    (QuestionType.LOCATION, re.compile(r"\b(?:where|location|place)\b")),
    (QuestionType.DETAIL, re.compile(r"\b(?:how|why|what|which)\b")),
]

# Articles, copulas, wh-words and modal/auxiliary verbs
STOP_WORDS = frozenset(
    {
        "the", "a", "an",
        "is", "are", "was", "were", "be", "been", "being", "am",
        "what", "when", "where", "who", "whom", "whose", "why", "which", "how",
        "can", "could", "will", "would", "shall", "should", "may", "might", "must",
        "do", "does", "did",
    }
)


def detect_question_type(question: str) -> QuestionType:
    """Classify a question by its cue words."""
    lower = question.lower()
    for question_type, pattern in QUESTION_TYPE_PATTERNS:
        if pattern.search(lower):
            return question_type
    return QuestionType.GENERAL


def analyze_question(question: Optional[str]) -> QuestionAnalysis:
    """Analyze a free-text question.

    Args:
        question: The user's question. Empty, None or non-string input yields an empty analysis.

    Returns:
        QuestionAnalysis with type, tokens, keywords (tokens minus stop words)
        and the date/amount literals the question mentions.
    """
    if not isinstance(question, str) or not question.strip():
        return QuestionAnalysis()

    tokens = tokenize(question)
    analysis = QuestionAnalysis(
        question_type=detect_question_type(question),
        keywords=[token for token in tokens if token not in STOP_WORDS],
        tokens=tokens,
        dates=find_dates(question),
        amounts=find_amounts(question),
    )
    logger.debug(
        "Question type %s, %d keywords, %d tokens",
        analysis.question_type.value,
        len(analysis.keywords),
        len(analysis.tokens),
    )
    return analysis
