"""Segment Stage - Split text into sentences with character offsets.

Scans the text once, treating `.`, `!` and `?` as candidate boundaries.
A candidate is rejected when it ends a known abbreviation ("Dr.", "etc.")
or sits inside a decimal number ("3.14"), and accepted only when the next
non-whitespace character is an uppercase letter or a digit, or the text
ends.

Offsets always index the text exactly as given (untrimmed), so renderers
can highlight the characters the user typed.
"""

import logging
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)

SENTENCE_TERMINATORS = frozenset(".!?")

# Titles, units, address parts, ordinals and Latin abbreviations
ABBREVIATIONS = frozenset(
    {
        "mr", "mrs", "ms", "dr", "prof", "sr", "jr",
        "vs", "etc", "inc", "ltd", "corp", "co",
        "st", "ave", "blvd", "rd", "apt",
        "no", "vol", "pp", "ed",
        "am", "pm",
        "e.g", "i.e", "cf", "ca",
        "approx", "est", "min", "max",
    }
)

_WORD_PREFIX = "\"'([{"


@dataclass(frozen=True)
class Sentence:
    """A sentence and its [start, end) offsets in the source text."""

    text: str
    start: int
    end: int


def is_abbreviation(word: str) -> bool:
    """Check if a word (with its trailing punctuation) is a known abbreviation."""
    if not word:
        return False
    normalized = word.lower().lstrip(_WORD_PREFIX).rstrip(".!?")
    return normalized in ABBREVIATIONS


def _last_word(text: str, start: int, end: int) -> str:
    words = text[start:end].split()
    return words[-1] if words else ""


def _is_decimal_point(text: str, idx: int, lower: int, upper: int) -> bool:
    return (
        lower < idx < upper - 1
        and text[idx - 1].isdigit()
        and text[idx + 1].isdigit()
    )


def _starts_sentence(char: str) -> bool:
    return char.isupper() or char.isdigit()


def _trimmed_sentence(text: str, start: int, end: int) -> Optional[Sentence]:
    while start < end and text[start].isspace():
        start += 1
    while end > start and text[end - 1].isspace():
        end -= 1
    if start == end:
        return None
    return Sentence(text=text[start:end], start=start, end=end)


def split_sentences(text: Optional[str]) -> list[Sentence]:
    """Split text into ordered sentences with exact offsets.

    Args:
        text: Raw text, possibly with surrounding whitespace.

    Returns:
        Sentences in document order. Empty or whitespace-only text yields an
        empty list; text without any boundary yields a single sentence
        covering the trimmed text.
    """
    if not text or not text.strip():
        return []

    first = len(text) - len(text.lstrip())
    last = len(text.rstrip())

    sentences: list[Sentence] = []
    buffer_start = first

    for idx in range(first, last):
        char = text[idx]
        if char not in SENTENCE_TERMINATORS:
            continue
        if is_abbreviation(_last_word(text, buffer_start, idx + 1)):
            continue
        if char == "." and _is_decimal_point(text, idx, first, last):
            continue

        lookahead = idx + 1
        while lookahead < last and text[lookahead].isspace():
            lookahead += 1
        if lookahead < last and not _starts_sentence(text[lookahead]):
            continue

        sentence = _trimmed_sentence(text, buffer_start, idx + 1)
        if sentence is not None:
            sentences.append(sentence)
        buffer_start = lookahead

    remainder = _trimmed_sentence(text, buffer_start, last)
    if remainder is not None:
        sentences.append(remainder)

    logger.debug("Segmented %d characters into %d sentences", len(text), len(sentences))
    return sentences
