"""Configuration management for the readable engine."""

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings


class ScoringWeights(BaseModel):
    """Weights of the sentence scoring heuristic used by the question answerer.

    Per-sentence score:
        keyword_match    * keywords present in the sentence
      + token_frequency  * occurrences of question tokens in the sentence
      + type_match       if a date/amount question meets a date/amount sentence
      + literal_match    if that sentence repeats a date/amount from the question
      + phrase_match     * adjacent question word pairs found verbatim
      + position_weight  * (total - index) / total

    Confidence (0-100) blends the top score with its lead over the runner-up:
        min(1, top / score_normalizer) * score_share
      + (gap_share if gap > gap_saturation else gap / gap_divisor * gap_share)
    """

    # Lexical overlap
    keyword_match: float = 3.0
    token_frequency: float = 2.0

    # Question type boosts
    type_match: float = 5.0
    literal_match: float = 10.0

    # Phrase adjacency
    phrase_match: float = 8.0
    phrase_word_min_length: int = 4
    phrase_word_count: int = 3

    # Position bias
    position_weight: float = 2.0

    # Confidence blend
    score_normalizer: float = 20.0
    score_share: float = 0.7
    gap_share: float = 0.3
    gap_saturation: float = 3.0
    gap_divisor: float = 10.0

    # Decision policy
    accept_threshold: float = 1.0
    min_accepted_confidence: int = 40
    highlight_confidence: int = 50
    summary_confidence: int = 25
    fallback_confidence: int = 15


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Logging
    log_level: str = "INFO"

    # Tokenizer
    min_token_length: int = 3

    # Summarizer
    summary_sentence_count: int = 2
    summary_word_limit: int = 40

    # Question answering
    fallback_char_limit: int = 200
    scoring: ScoringWeights = Field(default_factory=ScoringWeights)

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        env_nested_delimiter = "__"


settings = Settings()
