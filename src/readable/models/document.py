"""Document-level IR models."""

from datetime import datetime, timezone
from typing import Any, Mapping, Optional, Union
from uuid import UUID, uuid4

from pydantic import Field, ValidationError, model_validator

from readable.exceptions import DocumentLoadError

from .base import BaseIRModel, StructureType
from .entity import Highlights


class SentenceRange(BaseIRModel):
    """Character offsets of a sentence in the document raw text, [start, end)."""

    start: int = Field(..., ge=0)
    end: int = Field(..., ge=0)

    @model_validator(mode="after")
    def _check_order(self) -> "SentenceRange":
        if self.end < self.start:
            raise ValueError(f"range end {self.end} precedes start {self.start}")
        return self

    def contains(self, offset: int) -> bool:
        """Check if a character offset falls inside this range."""
        return self.start <= offset < self.end


class SentenceMeta(BaseIRModel):
    """Per-sentence lexical index used for question scoring."""

    text: str
    tokens: list[str] = Field(default_factory=list)
    term_freq: dict[str, int] = Field(
        default_factory=dict, description="Token occurrence counts within this sentence"
    )
    range: SentenceRange


class StructureMarker(BaseIRModel):
    """A line classified as list item, table row or heading."""

    type: StructureType
    line_index: int = Field(..., ge=0)
    content: str


class Document(BaseIRModel):
    """
    Immutable analyzed representation of one input text.

    All offsets (sentence ranges, highlight spans) index into `raw_text`.
    `sentences`, `sentence_meta` and `sentence_ranges` are parallel
    sequences in document order.
    """

    id: UUID = Field(default_factory=uuid4)
    raw_text: str = ""

    # Segmentation
    sentences: list[str] = Field(default_factory=list)
    sentence_meta: list[SentenceMeta] = Field(default_factory=list)
    sentence_ranges: list[SentenceRange] = Field(default_factory=list)

    # Derived text
    summary: str = ""
    simplified_text: str = ""

    # Extraction
    highlights: Highlights = Field(default_factory=Highlights)
    structures: list[StructureMarker] = Field(default_factory=list)

    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @model_validator(mode="after")
    def _check_parallel_sequences(self) -> "Document":
        counts = {len(self.sentences), len(self.sentence_meta), len(self.sentence_ranges)}
        if len(counts) != 1:
            raise ValueError(
                "sentences, sentenceMeta and sentenceRanges must have equal length "
                f"(got {len(self.sentences)}, {len(self.sentence_meta)}, "
                f"{len(self.sentence_ranges)})"
            )
        return self

    @classmethod
    def load(cls, data: Union[Mapping[str, Any], str, bytes]) -> "Document":
        """Validate persisted document data.

        Args:
            data: Mapping or JSON text in the serialized (camelCase) form.

        Returns:
            Validated Document.

        Raises:
            DocumentLoadError: If the data is not a well-formed document.
        """
        try:
            if isinstance(data, (str, bytes)):
                return cls.model_validate_json(data)
            if not isinstance(data, Mapping):
                raise DocumentLoadError(
                    f"Expected mapping or JSON text, got {type(data).__name__}"
                )
            return cls.model_validate(dict(data))
        except ValidationError as e:
            raise DocumentLoadError(f"Malformed document: {e.error_count()} error(s)") from e

    def to_json(self, indent: Optional[int] = None) -> str:
        """Serialize to JSON using the camelCase field names."""
        return self.model_dump_json(by_alias=True, indent=indent)

    def shape(self) -> dict[str, Any]:
        """Structural content without generated identity (ids, timestamp).

        Two documents built from the same text have equal shapes.
        """
        return self.model_dump(
            by_alias=True,
            mode="json",
            exclude={
                "id": True,
                "created_at": True,
                "highlights": {
                    "dates": {"__all__": {"id"}},
                    "amounts": {"__all__": {"id"}},
                },
            },
        )

    @property
    def is_empty(self) -> bool:
        """Check if the document has no sentences."""
        return not self.sentences

    def sentence_at(self, offset: int) -> Optional[int]:
        """Index of the sentence whose range contains a raw text offset."""
        for idx, sentence_range in enumerate(self.sentence_ranges):
            if sentence_range.contains(offset):
                return idx
        return None
