"""Models for categorization results."""

from pydantic import BaseModel, Field


class PhraseEntry(BaseModel):
    """A phrase inside a category bucket."""

    phrase: str = Field(..., description="Phrase text")
    confidence: float = Field(..., ge=0, description="Winning weighted score")


class CategorizedPhrase(BaseModel):
    """Classification record for a single phrase."""

    phrase: str = Field(..., description="Phrase text")
    category: str = Field(..., description="Winning category name or the Other sentinel")
    confidence: float = Field(..., ge=0, description="Winning weighted score, not a probability")


class CategorizationResult(BaseModel):
    """Phrases of one prompt grouped by category.

    ``total_phrases`` counts the extracted phrases. Once a session starts editing
    the result it is no longer guaranteed to equal the number of bucket entries.
    """

    categories: dict[str, list[PhraseEntry]] = Field(
        default_factory=dict,
        description="Category name to entries, in first-match order",
    )
    total_phrases: int = Field(0, ge=0, description="Number of extracted phrases")
    all_results: list[CategorizedPhrase] = Field(
        default_factory=list,
        description="Per-phrase records in extraction order",
    )
