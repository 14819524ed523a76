"""Question analysis and answer IR models."""

from typing import Optional

from pydantic import Field, model_validator

from .base import BaseIRModel, QuestionType, SourceType


class QuestionAnalysis(BaseIRModel):
    """Per-query analysis of a free-text question. Never persisted."""

    question_type: QuestionType = QuestionType.GENERAL
    keywords: list[str] = Field(default_factory=list)
    tokens: list[str] = Field(default_factory=list)
    dates: list[str] = Field(default_factory=list, description="Date literals in the question")
    amounts: list[str] = Field(default_factory=list, description="Amount literals in the question")

    @property
    def is_empty(self) -> bool:
        """True when the question carries nothing to match against."""
        return not self.tokens and not self.dates and not self.amounts


class AnswerSource(BaseIRModel):
    """
    Provenance of an answer.

    Tagged by `type`. Only sentence matches carry `sentence_index` and
    `sentence`; every other case is the bare tag.
    """

    type: SourceType
    sentence_index: Optional[int] = Field(None, ge=0)
    sentence: Optional[str] = None

    @model_validator(mode="after")
    def _check_variant(self) -> "AnswerSource":
        has_sentence = self.sentence_index is not None and self.sentence is not None
        if self.type == SourceType.SENTENCE and not has_sentence:
            raise ValueError("sentence source requires sentence_index and sentence")
        if self.type != SourceType.SENTENCE and (
            self.sentence_index is not None or self.sentence is not None
        ):
            raise ValueError(f"{self.type.value} source carries no sentence fields")
        return self

    @classmethod
    def sentence_match(cls, index: int, text: str) -> "AnswerSource":
        return cls(type=SourceType.SENTENCE, sentence_index=index, sentence=text)

    @classmethod
    def date_highlight(cls) -> "AnswerSource":
        return cls(type=SourceType.DATE_HIGHLIGHT)

    @classmethod
    def amount_highlight(cls) -> "AnswerSource":
        return cls(type=SourceType.AMOUNT_HIGHLIGHT)

    @classmethod
    def summary(cls) -> "AnswerSource":
        return cls(type=SourceType.SUMMARY)

    @classmethod
    def fallback(cls) -> "AnswerSource":
        return cls(type=SourceType.FALLBACK)


class AnswerResult(BaseIRModel):
    """Best answer for a question with a heuristic 0-100 confidence."""

    answer: str = ""
    confidence: int = Field(default=0, ge=0, le=100)
    source: Optional[AnswerSource] = None

    @classmethod
    def empty(cls) -> "AnswerResult":
        """Zero result for unanswerable input."""
        return cls(answer="", confidence=0, source=None)

    @property
    def is_empty(self) -> bool:
        return self.source is None
