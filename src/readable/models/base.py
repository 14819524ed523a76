"""Base models and common types for the text analysis engine."""

from enum import Enum

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class StructureType(str, Enum):
    """Kinds of line-level structure detected in raw text."""

    LIST = "list"
    TABLE = "table"
    HEADING = "heading"


class QuestionType(str, Enum):
    """Question categories, in detection priority order."""

    DATE = "date"
    AMOUNT = "amount"
    PERSON = "person"
    LOCATION = "location"
    DETAIL = "detail"
    GENERAL = "general"


class SourceType(str, Enum):
    """Where an answer came from."""

    SENTENCE = "sentence"
    DATE_HIGHLIGHT = "date_highlight"
    AMOUNT_HIGHLIGHT = "amount_highlight"
    SUMMARY = "summary"
    FALLBACK = "fallback"


class ReadingMode(str, Enum):
    """Which text a speech collaborator reads aloud."""

    SIMPLIFIED = "simplified"
    ORIGINAL = "original"


class BaseIRModel(BaseModel):
    """Base class for all IR models.

    Models are immutable once built and serialize with the camelCase field
    names shared with storage and rendering collaborators.
    """

    class Config:
        frozen = True
        alias_generator = to_camel
        populate_by_name = True
