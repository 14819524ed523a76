"""Structure Stage - Classify lines as list items, table rows or headings."""

import re
from typing import Optional

from readable.models import StructureMarker, StructureType

# First matching rule wins for a line
STRUCTURE_RULES = [
    (StructureType.LIST, re.compile(r"^(?:[-*•]|\d+[.)])\s")),
    (StructureType.TABLE, re.compile(r"\|\s*\|")),
    (StructureType.HEADING, re.compile(r"^#{1,6}\s")),
]


def classify_line(line: str) -> Optional[StructureType]:
    """Structure type of a single trimmed line, or None."""
    for structure_type, pattern in STRUCTURE_RULES:
        if pattern.search(line):
            return structure_type
    return None


def detect_structure(text: Optional[str]) -> list[StructureMarker]:
    """Detect list, table and heading lines.

    Args:
        text: Source text, split on newlines.

    Returns:
        Markers in line order. `line_index` is the 0-based line number;
        `content` is the trimmed line. Blank and unmatched lines are skipped.
    """
    if not text:
        return []

    markers = []
    for line_index, line in enumerate(text.split("\n")):
        content = line.strip()
        if not content:
            continue
        structure_type = classify_line(content)
        if structure_type is not None:
            markers.append(
                StructureMarker(type=structure_type, line_index=line_index, content=content)
            )
    return markers
