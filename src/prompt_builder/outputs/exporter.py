"""Convert categorization results into the prompt library shape."""

from ..models.result import CategorizationResult


def export_to_prompt_data(result: CategorizationResult) -> dict[str, list[str]]:
    """Export categorized phrases to the prompt library structure.

    Args:
        result: Output of categorize_prompt, possibly edited

    Returns:
        Category name to phrase texts, in bucket order
    """
    return {
        category: [entry.phrase for entry in entries]
        for category, entries in result.categories.items()
    }
