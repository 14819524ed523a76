"""Tokenize Stage - Lowercase word tokens and term frequencies.

Leaf utility shared by document indexing and question analysis.
"""

import re
from collections import Counter
from typing import Iterable, Optional

from readable.config import settings

NON_WORD = re.compile(r"\W+")


def tokenize(text: Optional[str], min_length: Optional[int] = None) -> list[str]:
    """Split text into lowercase word tokens.

    Args:
        text: Input text. Empty or None yields no tokens.
        min_length: Shortest token kept (default from settings, 3).

    Returns:
        Tokens in text order, duplicates preserved.
    """
    if not text:
        return []
    if min_length is None:
        min_length = settings.min_token_length
    return [token for token in NON_WORD.split(text.lower()) if len(token) >= min_length]


def term_frequencies(tokens: Iterable[str]) -> dict[str, int]:
    """Count occurrences of each token."""
    return dict(Counter(tokens))
