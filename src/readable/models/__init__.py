"""IR (Intermediate Representation) models for the readable engine.

Pydantic models for the data produced by the analysis stages and the
question answerer. All models are frozen and serialize to JSON with the
camelCase field names shared with storage, rendering and speech
collaborators.

Model Hierarchy:
- Document → SentenceMeta → SentenceRange
- Document → Highlights → Span
- Document → StructureMarker
- QuestionAnalysis, AnswerResult → AnswerSource (per query)
"""

from .answer import (
    AnswerResult,
    AnswerSource,
    QuestionAnalysis,
)
from .base import (
    BaseIRModel,
    QuestionType,
    ReadingMode,
    SourceType,
    StructureType,
)
from .document import (
    Document,
    SentenceMeta,
    SentenceRange,
    StructureMarker,
)
from .entity import (
    Highlights,
    Span,
)

__all__ = [
    # Base types
    "BaseIRModel",
    "QuestionType",
    "ReadingMode",
    "SourceType",
    "StructureType",
    # Document
    "Document",
    "SentenceMeta",
    "SentenceRange",
    "StructureMarker",
    # Entity
    "Highlights",
    "Span",
    # Answer
    "AnswerResult",
    "AnswerSource",
    "QuestionAnalysis",
]
