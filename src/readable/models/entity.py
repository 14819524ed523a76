"""Entity IR models for located date and amount matches."""

from uuid import UUID, uuid4

from pydantic import Field

from .base import BaseIRModel


class Span(BaseIRModel):
    """A located substring match within the document raw text."""

    id: UUID = Field(default_factory=uuid4)
    value: str = Field(..., description="Matched substring, verbatim")
    index: int = Field(..., ge=0, description="Offset of the match start in the source text")

    @property
    def end(self) -> int:
        """Exclusive end offset of the match."""
        return self.index + len(self.value)


class Highlights(BaseIRModel):
    """Date and amount spans found in a text, in document order."""

    dates: list[Span] = Field(default_factory=list)
    amounts: list[Span] = Field(default_factory=list)

    def values(self) -> dict[str, list[str]]:
        """Matched values without their generated ids."""
        return {
            "dates": [span.value for span in self.dates],
            "amounts": [span.value for span in self.amounts],
        }
