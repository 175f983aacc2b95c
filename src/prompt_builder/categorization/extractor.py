"""Split raw prompt text into candidate phrases."""

import re

# Phrases longer than this are additionally split on connector words
LONG_PHRASE_THRESHOLD = 100

# Fragments must be longer than this to be kept
MIN_FRAGMENT_LENGTH = 5

CONNECTOR_SPLIT = re.compile(r"\s+(?:with|and|from|amid|in|on|at|forming)\s+")


def extract_phrases(text: str) -> list[str]:
    """Extract phrases from a prompt string.

    Comma-separated pieces come first, in order. Fragments obtained by splitting
    long pieces on connector words are appended after them; the long piece itself
    is kept in place, so its text can appear twice.

    Args:
        text: Full prompt text

    Returns:
        List of trimmed, non-empty phrases
    """
    phrases = [p.strip() for p in text.split(",")]
    phrases = [p for p in phrases if p]

    additional_phrases = []
    for phrase in phrases:
        if len(phrase) <= LONG_PHRASE_THRESHOLD:
            continue

        sub_phrases = CONNECTOR_SPLIT.split(phrase)
        if len(sub_phrases) > 1:
            additional_phrases.extend(
                s.strip() for s in sub_phrases if len(s.strip()) > MIN_FRAGMENT_LENGTH
            )

    return phrases + additional_phrases
