"""Score phrases against category definitions."""

from ..models.category import CategoryDefinition

KEYWORD_POINTS = 2
PATTERN_POINTS = 3


def score_phrase(phrase: str, definition: CategoryDefinition) -> float:
    """Score a phrase against a category definition.

    Args:
        phrase: Phrase to score
        definition: Category definition

    Returns:
        Weighted score (higher = better match)
    """
    lower_phrase = phrase.lower()
    score = 0

    for keyword in definition.keywords:
        if keyword.lower() in lower_phrase:
            score += KEYWORD_POINTS

    for pattern in definition.patterns:
        if pattern.search(lower_phrase):
            score += PATTERN_POINTS

    return score * definition.weight
