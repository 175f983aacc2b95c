"""Data models for prompt categorization."""

from .category import OTHER_CATEGORY, CategoryDefinition
from .result import CategorizationResult, CategorizedPhrase, PhraseEntry

__all__ = [
    "OTHER_CATEGORY",
    "CategoryDefinition",
    "CategorizationResult",
    "CategorizedPhrase",
    "PhraseEntry",
]
