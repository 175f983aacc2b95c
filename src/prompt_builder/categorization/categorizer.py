"""Rule-based phrase categorization."""

from typing import Optional

from ..models.category import OTHER_CATEGORY, CategoryDefinition
from ..models.result import CategorizationResult, CategorizedPhrase, PhraseEntry
from .extractor import extract_phrases
from .registry import DEFAULT_REGISTRY, CategoryRegistry
from .scorer import score_phrase

# Winning scores below this are reported as the Other sentinel
CONFIDENCE_FLOOR = 5


class PromptCategorizer:
    """Categorize prompt phrases using keyword and pattern scoring."""

    def __init__(self, registry: CategoryRegistry = DEFAULT_REGISTRY):
        """Initialize categorizer.

        Args:
            registry: Category definitions to score against
        """
        self.registry = registry

    def score_all(self, phrase: str) -> dict[str, float]:
        """Score a phrase against every category, in registry order."""
        return {name: score_phrase(phrase, definition) for name, definition in self.registry.items()}

    @staticmethod
    def select_best(scores: dict[str, float]) -> tuple[Optional[str], float]:
        """Pick the category with the strictly highest score.

        On a tie the category seen first keeps its lead. If nothing scores above
        zero no category is selected.

        Args:
            scores: Category name to score, in registry order

        Returns:
            Tuple of (best category or None, best score)
        """
        best_category = None
        best_score = 0.0

        for category, score in scores.items():
            if score > best_score:
                best_score = score
                best_category = category

        return best_category, best_score

    @staticmethod
    def apply_confidence_floor(category: Optional[str], score: float) -> str:
        """Replace weak matches with the Other sentinel."""
        if category is None or score < CONFIDENCE_FLOOR:
            return OTHER_CATEGORY
        return category

    def categorize_phrase(self, phrase: str) -> CategorizedPhrase:
        """Categorize a single phrase.

        Args:
            phrase: Phrase to categorize

        Returns:
            Classification record; confidence keeps the winning score even when
            the phrase falls back to Other
        """
        best_category, best_score = self.select_best(self.score_all(phrase))

        return CategorizedPhrase(
            phrase=phrase,
            category=self.apply_confidence_floor(best_category, best_score),
            confidence=best_score,
        )

    def categorize_prompt(self, text: str) -> CategorizationResult:
        """Categorize all phrases of a prompt.

        Args:
            text: Full prompt text

        Returns:
            Phrases grouped by category, with empty categories dropped
        """
        phrases = extract_phrases(text)

        categorized: dict[str, list[PhraseEntry]] = {name: [] for name in self.registry.names()}
        categorized[OTHER_CATEGORY] = []
        results = []

        for phrase in phrases:
            result = self.categorize_phrase(phrase)
            results.append(result)
            categorized[result.category].append(
                PhraseEntry(phrase=result.phrase, confidence=result.confidence)
            )

        return CategorizationResult(
            categories={name: entries for name, entries in categorized.items() if entries},
            total_phrases=len(phrases),
            all_results=results,
        )

    def get_categories(self) -> list[CategoryDefinition]:
        """Get all category definitions.

        Returns:
            List of category definitions
        """
        return list(self.registry)


def categorize_phrase(phrase: str, registry: CategoryRegistry = DEFAULT_REGISTRY) -> CategorizedPhrase:
    """Categorize a single phrase against a registry."""
    return PromptCategorizer(registry).categorize_phrase(phrase)


def categorize_prompt(text: str, registry: CategoryRegistry = DEFAULT_REGISTRY) -> CategorizationResult:
    """Categorize a full prompt against a registry."""
    return PromptCategorizer(registry).categorize_prompt(text)
