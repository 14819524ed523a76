"""Heuristic question answering over analyzed documents."""

from .analyzer import STOP_WORDS, analyze_question, detect_question_type
from .answerer import answer_question
from .scoring import ScoredSentence, compute_confidence, rank_sentences, score_sentence

__all__ = [
    "STOP_WORDS",
    "analyze_question",
    "detect_question_type",
    "answer_question",
    "ScoredSentence",
    "compute_confidence",
    "rank_sentences",
    "score_sentence",
]
