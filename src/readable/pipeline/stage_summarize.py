"""Summarize Stage - Extractive summary and lexical simplification.

Both functions are pure: the summary is verbatim leading text, and the
simplified rewrite only splits clauses and drops formal connectives.
"""

import re
from typing import Optional, Sequence, Union

from readable.config import settings
from readable.pipeline.stage_segment import Sentence, split_sentences

CLAUSE_PUNCTUATION = re.compile(r"[,;]")
CONNECTIVES = re.compile(
    r"\b(?:however|therefore|moreover|furthermore|additionally)\b",
    re.IGNORECASE,
)
SPACE_BEFORE_PERIOD = re.compile(r"\s+\.")

SentenceInput = Sequence[Union[str, Sentence]]


def _sentence_texts(sentences: SentenceInput) -> list[str]:
    return [s if isinstance(s, str) else s.text for s in sentences]


def summarize_text(
    text: Optional[str],
    sentences: Optional[SentenceInput] = None,
    max_sentences: Optional[int] = None,
    max_words: Optional[int] = None,
) -> str:
    """Build an extractive summary.

    Args:
        text: Full source text.
        sentences: Pre-segmented sentences (strings or Sentence objects).
        max_sentences: Leading sentences kept when `sentences` is given
            (default from settings, 2).
        max_words: Leading words kept otherwise (default from settings, 40).

    Returns:
        The leading sentences joined by a space, or the leading words of
        `text`. Empty for empty text.
    """
    if not text:
        return ""
    if max_sentences is None:
        max_sentences = settings.summary_sentence_count
    if max_words is None:
        max_words = settings.summary_word_limit

    if sentences:
        return " ".join(_sentence_texts(sentences)[:max_sentences]).strip()
    return " ".join(text.split()[:max_words])


def simplify_sentence(sentence: str) -> str:
    """Break clauses into periods and strip formal connectives."""
    return CONNECTIVES.sub("", CLAUSE_PUNCTUATION.sub(".", sentence)).strip()


def simplify_text(text: Optional[str], sentences: Optional[SentenceInput] = None) -> str:
    """Produce a lexically simplified rewrite of every sentence.

    Args:
        text: Full source text.
        sentences: Pre-segmented sentences; segmented from `text` if omitted.

    Returns:
        Simplified sentences joined with ". ", with whitespace before
        periods collapsed.
    """
    if not text:
        return ""
    if sentences:
        texts = _sentence_texts(sentences)
    else:
        texts = [s.text for s in split_sentences(text)]

    joined = ". ".join(simplify_sentence(s) for s in texts)
    return SPACE_BEFORE_PERIOD.sub(".", joined).strip()
