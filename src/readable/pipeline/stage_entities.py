"""Entity Stage - Locate date-like and amount-like substrings.

Dates are month names (full or abbreviated) or numeric d/m/y forms with
`/`, `.` or `-` separators. Amounts are an optional currency marker
followed by a number with optional thousands separators and exactly two
decimal places.

Compiled patterns are shared at module level; Python regex objects keep no
scan position between calls, so every call starts from the beginning of
its input.
"""

import re
from typing import Optional

from readable.models import Highlights, Span

DATE_PATTERN = re.compile(
    r"\b(?:"
    r"Jan(?:uary)?|Feb(?:ruary)?|Mar(?:ch)?|Apr(?:il)?|May|Jun(?:e)?|Jul(?:y)?"
    r"|Aug(?:ust)?|Sep(?:t(?:ember)?)?|Oct(?:ober)?|Nov(?:ember)?|Dec(?:ember)?"
    r"|\d{1,2}[/.-]\d{1,2}[/.-]\d{2,4}"
    r")\b",
    re.IGNORECASE,
)

AMOUNT_PATTERN = re.compile(
    r"(?:\b(?:USD|EUR|GBP)\s?|[$€£]\s?|\b)"
    r"(?:\d{1,3}(?:,\d{3})+|\d+)\.\d{2}\b"
)


def _spans(pattern: re.Pattern, text: str) -> list[Span]:
    return [Span(value=match.group(0), index=match.start()) for match in pattern.finditer(text)]


def find_dates(text: Optional[str]) -> list[str]:
    """All date literals in text, in order."""
    if not text:
        return []
    return [match.group(0) for match in DATE_PATTERN.finditer(text)]


def find_amounts(text: Optional[str]) -> list[str]:
    """All amount literals in text, in order."""
    if not text:
        return []
    return [match.group(0) for match in AMOUNT_PATTERN.finditer(text)]


def contains_date(text: str) -> bool:
    return DATE_PATTERN.search(text) is not None


def contains_amount(text: str) -> bool:
    return AMOUNT_PATTERN.search(text) is not None


def extract_key_spans(text: Optional[str]) -> Highlights:
    """Extract located date and amount spans.

    Every match becomes a Span with a fresh id; matches are neither merged
    nor deduplicated.

    Args:
        text: Source text. Span offsets index into it as given.

    Returns:
        Highlights with dates and amounts in document order.
    """
    if not text:
        return Highlights()
    return Highlights(
        dates=_spans(DATE_PATTERN, text),
        amounts=_spans(AMOUNT_PATTERN, text),
    )
