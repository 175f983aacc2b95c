"""Analysis session holding the current categorization result."""

from typing import Optional

from rich.console import Console

from .categorization.categorizer import PromptCategorizer
from .library import PromptLibrary
from .models.result import CategorizationResult, PhraseEntry
from .outputs.exporter import export_to_prompt_data

console = Console(stderr=True)


class AnalysisSession:
    """Analyze prompts and edit the result before adding it to the library."""

    def __init__(self, categorizer: Optional[PromptCategorizer] = None):
        """Initialize session.

        Args:
            categorizer: Categorizer to analyze with (default: built-in registry)
        """
        self.categorizer = categorizer or PromptCategorizer()
        self.result: Optional[CategorizationResult] = None

    def analyze(self, text: str) -> CategorizationResult:
        """Categorize a prompt and make it the current result.

        Args:
            text: Prompt text

        Returns:
            New categorization result

        Raises:
            ValueError: If the text is empty or whitespace only
        """
        if not text.strip():
            raise ValueError("Please enter a prompt to analyze")

        self.result = self.categorizer.categorize_prompt(text)
        return self.result

    def _require_result(self) -> CategorizationResult:
        if self.result is None:
            raise RuntimeError("No categorization result. Run analyze() first.")
        return self.result

    def _entry(self, category: str, index: int) -> PhraseEntry:
        result = self._require_result()
        if category not in result.categories:
            raise KeyError(f"Unknown category in result: {category}")

        entries = result.categories[category]
        if not 0 <= index < len(entries):
            raise IndexError(f"No phrase at index {index} in {category} ({len(entries)} phrases)")
        return entries[index]

    def edit_phrase(self, category: str, index: int, new_text: str) -> None:
        """Replace the text of one phrase in place.

        Raises:
            KeyError: If the category is not in the result
            IndexError: If the index is out of range
            ValueError: If the new text is empty
        """
        entry = self._entry(category, index)
        new_text = new_text.strip()
        if not new_text:
            raise ValueError("Phrase text cannot be empty")
        entry.phrase = new_text

    def remove_phrase(self, category: str, index: int) -> PhraseEntry:
        """Remove one phrase from the result.

        The category is dropped once its last phrase is removed.

        Returns:
            The removed entry

        Raises:
            KeyError: If the category is not in the result
            IndexError: If the index is out of range
        """
        self._entry(category, index)
        result = self._require_result()

        removed = result.categories[category].pop(index)
        result.total_phrases -= 1
        if not result.categories[category]:
            del result.categories[category]
        return removed

    def clear(self) -> None:
        self.result = None

    def export(self) -> dict[str, list[str]]:
        return export_to_prompt_data(self._require_result())

    def add_to_library(self, library: PromptLibrary) -> int:
        """Merge the current result into a library.

        Args:
            library: Library to merge into

        Returns:
            Number of phrases added
        """
        exported = self.export()
        added = library.merge(exported)

        total = sum(len(phrases) for phrases in exported.values())
        console.print(
            f"[green]Added {added} new phrases to library "
            f"({total - added} already present)[/green]"
        )
        return added
