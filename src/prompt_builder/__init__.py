"""Build AI video prompts from a phrase library and categorize existing prompts."""

from .categorization.categorizer import (
    CONFIDENCE_FLOOR,
    PromptCategorizer,
    categorize_phrase,
    categorize_prompt,
)
from .categorization.extractor import extract_phrases
from .categorization.registry import DEFAULT_REGISTRY, CategoryRegistry
from .categorization.scorer import score_phrase
from .library import PromptBuilder, PromptLibrary
from .models import (
    OTHER_CATEGORY,
    CategorizationResult,
    CategorizedPhrase,
    CategoryDefinition,
    PhraseEntry,
)
from .outputs.exporter import export_to_prompt_data
from .session import AnalysisSession

__version__ = "0.1.0"

__all__ = [
    "CONFIDENCE_FLOOR",
    "DEFAULT_REGISTRY",
    "OTHER_CATEGORY",
    "AnalysisSession",
    "CategorizationResult",
    "CategorizedPhrase",
    "CategoryDefinition",
    "CategoryRegistry",
    "PhraseEntry",
    "PromptBuilder",
    "PromptCategorizer",
    "PromptLibrary",
    "categorize_phrase",
    "categorize_prompt",
    "export_to_prompt_data",
    "extract_phrases",
    "score_phrase",
]
