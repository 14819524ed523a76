"""Tests for question answering."""

import logging

import pytest

from readable.config import ScoringWeights
from readable.models import (
    Document,
    Highlights,
    SentenceMeta,
    SentenceRange,
    SourceType,
    Span,
)
from readable.pipeline import build_document
from readable.qa import answer_question


def _hand_built(sentences, summary="", highlights=None):
    """Document with explicit fields, as a storage collaborator might load it."""
    ranges = []
    cursor = 0
    for sentence in sentences:
        ranges.append(SentenceRange(start=cursor, end=cursor + len(sentence)))
        cursor += len(sentence) + 1
    return Document(
        raw_text=" ".join(sentences),
        sentences=sentences,
        sentence_meta=[
            SentenceMeta(text=s, tokens=[], term_freq={}, range=r)
            for s, r in zip(sentences, ranges)
        ],
        sentence_ranges=ranges,
        summary=summary,
        highlights=highlights or Highlights(),
    )


class TestSentenceAnswers:
    """Tests for answers taken from a scored sentence."""

    def test_due_date(self, lease_doc):
        """Date questions pick the sentence holding the due date."""
        result = answer_question("When is the due date?", lease_doc)

        assert result.answer == "Your rent payment is due on March 1, 2024."
        assert result.confidence >= 40
        assert result.source.type == SourceType.SENTENCE
        assert result.source.sentence_index == 0
        assert result.source.sentence == result.answer

    def test_amount(self, lease_doc):
        """Amount questions pick the sentence holding the rent amount."""
        result = answer_question("How much is the monthly rent?", lease_doc)

        assert result.source.sentence_index == 1
        assert "$1,250.00" in result.answer

    def test_phrase_match(self, lease_doc):
        """A shared word pair lifts the matching sentence."""
        result = answer_question("What are the late fees?", lease_doc)

        assert result.source.sentence_index == 2

    def test_person(self, lease_doc):
        """Keyword overlap finds the landlord sentence."""
        result = answer_question("Who is the landlord?", lease_doc)

        assert result.source.sentence_index == 3
        assert result.answer == "Contact the landlord with questions."

    def test_minimum_confidence(self):
        """Accepted sentences get at least the minimum confidence."""
        doc = build_document("One thing here. Another thing there.")
        result = answer_question("thing", doc)

        assert result.source.type == SourceType.SENTENCE
        assert result.confidence == 40

    def test_custom_weights(self, lease_doc):
        """Weights passed in override the configured ones."""
        weights = ScoringWeights(min_accepted_confidence=90)
        result = answer_question("Who is the landlord?", lease_doc, weights=weights)

        assert result.confidence >= 90

    def test_deterministic(self, lease_doc):
        """The same question and document give the same answer."""
        question = "When is the due date?"

        assert answer_question(question, lease_doc) == answer_question(question, lease_doc)


class TestFallbackAnswers:
    """Tests for the fallback chain.

    The default position bonus alone lifts the first sentence over the
    accept threshold, so these use documents scored with no position weight.
    """

    no_position = ScoringWeights(position_weight=0)

    def test_first_sentence_by_position(self, plain_doc):
        """With default weights, an unmatched question takes the first sentence."""
        result = answer_question("xyz", plain_doc)

        assert result.answer == plain_doc.sentences[0]
        assert result.confidence >= 40
        assert result.source.type == SourceType.SENTENCE
        assert result.source.sentence_index == 0

    def test_summary_when_nothing_matches(self, plain_doc):
        """A zero top score falls back to the summary."""
        result = answer_question("xyz", plain_doc, weights=self.no_position)

        assert result.answer == plain_doc.summary
        assert result.confidence == 25
        assert result.source.type == SourceType.SUMMARY

    def test_summary_from_persisted_document(self, plain_doc):
        """Persisted documents reach the same fallback."""
        result = answer_question("qwerty", plain_doc.to_json(), weights=self.no_position)

        assert result.source.type == SourceType.SUMMARY
        assert result.confidence == 25

    def test_first_sentence_without_summary(self):
        """Without a summary, the first sentence is the last resort."""
        doc = _hand_built(["Alpha beta.", "Gamma delta."])
        result = answer_question("xyz", doc, weights=self.no_position)

        assert result.answer == "Alpha beta."
        assert result.confidence == 15
        assert result.source.type == SourceType.FALLBACK

    def test_date_highlight(self):
        """Date questions fall back to the sentence holding the first date highlight."""
        doc = _hand_built(
            ["Pickup is tomorrow.", "Bring boxes."],
            summary="Pickup is tomorrow.",
            highlights=Highlights(dates=[Span(value="tomorrow", index=10)]),
        )
        result = answer_question("When is xyz?", doc, weights=self.no_position)

        assert result.answer == "Pickup is tomorrow."
        assert result.confidence == 50
        assert result.source.type == SourceType.DATE_HIGHLIGHT

    def test_amount_highlight(self):
        """Amount questions fall back to the sentence holding the first amount highlight."""
        doc = _hand_built(
            ["Bring boxes.", "Parking is free."],
            summary="Bring boxes.",
            highlights=Highlights(amounts=[Span(value="free", index=24)]),
        )
        result = answer_question("How much xyz?", doc, weights=self.no_position)

        assert result.answer == "Parking is free."
        assert result.confidence == 50
        assert result.source.type == SourceType.AMOUNT_HIGHLIGHT

    def test_highlight_not_in_any_sentence(self):
        """A highlight found in no sentence skips to the summary."""
        doc = _hand_built(
            ["Bring boxes."],
            summary="Bring boxes.",
            highlights=Highlights(dates=[Span(value="never", index=0)]),
        )
        result = answer_question("When xyz?", doc, weights=self.no_position)

        assert result.source.type == SourceType.SUMMARY

    def test_accept_threshold_counts_position(self):
        """The position bonus counts towards the accept threshold."""
        doc = _hand_built(["Alpha beta.", "Gamma delta."], summary="Alpha beta.")
        weights = ScoringWeights(position_weight=1.0)

        result = answer_question("xyz", doc, weights=weights)

        assert result.source.type == SourceType.SENTENCE
        assert result.source.sentence_index == 0


class TestDegenerateInput:
    """Tests for input that yields the zero result."""

    @pytest.mark.parametrize("question", ["", "   ", None, "a?", "is it", 123, b"When?"])
    def test_empty_question(self, question, lease_doc):
        """Blank, stop-word-only and non-string questions give the zero result."""
        result = answer_question(question, lease_doc)

        assert result.answer == ""
        assert result.confidence == 0
        assert result.source is None

    def test_no_document(self):
        """A missing document gives the zero result."""
        assert answer_question("When?", None).confidence == 0

    def test_empty_document(self):
        """A document with no sentences gives the zero result."""
        assert answer_question("When is rent due?", build_document("")).confidence == 0

    def test_malformed_mapping(self, caplog):
        """Invalid persisted data is logged and gives the zero result."""
        with caplog.at_level(logging.WARNING, logger="readable"):
            result = answer_question("When is rent due?", {"sentences": ["Rent is due."]})

        assert result.confidence == 0
        assert result.source is None
        assert "malformed" in caplog.text

    def test_persisted_mapping(self, lease_doc):
        """Persisted mappings answer like the built document."""
        data = lease_doc.model_dump(by_alias=True, mode="json")

        assert answer_question("When is the due date?", data) == answer_question(
            "When is the due date?", lease_doc
        )

    def test_persisted_json(self, lease_doc):
        """Persisted JSON is validated before answering."""
        result = answer_question("Who is the landlord?", lease_doc.to_json())

        assert result.source.sentence_index == 3

    @pytest.mark.parametrize(
        "question",
        ["xyz", "", "When?", "How much?", "qwerty asdf", "What is the fee for pets?"],
    )
    def test_confidence_range(self, question, plain_doc):
        """Confidence stays in range and fallbacks use their fixed values."""
        result = answer_question(
            question, plain_doc, weights=ScoringWeights(position_weight=0)
        )

        assert 0 <= result.confidence <= 100
        if result.source is None:
            assert result.confidence == 0
        elif result.source.type != SourceType.SENTENCE:
            assert result.confidence in {15, 25, 50}
