"""Registry of category definitions used for phrase classification."""

from collections.abc import Iterable, Iterator
from typing import Optional

from ..models.category import OTHER_CATEGORY, CategoryDefinition


class CategoryRegistry:
    """Fixed, ordered collection of category definitions.

    Iteration order is definition order. It only matters as the tie-break when two
    categories score the same: the earlier one wins.
    """

    def __init__(self, definitions: Iterable[CategoryDefinition]):
        """Initialize registry.

        Args:
            definitions: Category definitions in iteration order

        Raises:
            ValueError: If a name is duplicated or uses the reserved sentinel
        """
        self._definitions: dict[str, CategoryDefinition] = {}
        for definition in definitions:
            if definition.name == OTHER_CATEGORY:
                raise ValueError(f"Category name '{OTHER_CATEGORY}' is reserved")
            if definition.name in self._definitions:
                raise ValueError(f"Duplicate category name: {definition.name}")
            self._definitions[definition.name] = definition

    def items(self) -> Iterator[tuple[str, CategoryDefinition]]:
        """Iterate over (name, definition) pairs in registry order."""
        return iter(self._definitions.items())

    def names(self) -> list[str]:
        """Get category names in registry order."""
        return list(self._definitions)

    def get(self, name: str) -> Optional[CategoryDefinition]:
        return self._definitions.get(name)

    def __iter__(self) -> Iterator[CategoryDefinition]:
        return iter(self._definitions.values())

    def __len__(self) -> int:
        return len(self._definitions)

    def __contains__(self, name: object) -> bool:
        return name in self._definitions


def build_default_registry() -> CategoryRegistry:
    """Build the built-in registry of video prompt categories."""
    return CategoryRegistry([
        CategoryDefinition(
            name="Subject & Main Focus",
            keywords=["dancer", "person", "figure", "character", "creature", "subject",
                      "portrait", "face", "body", "irises", "eyes"],
            patterns=[r"\w+\s+in\s+", r"captured from", r"\w+\s+performing"],
            weight=10,
        ),
        CategoryDefinition(
            name="Action & Movement",
            keywords=["spinning", "twirling", "dancing", "moving", "flowing", "running",
                      "jumping", "walking", "flying", "swirling", "rotating", "motion"],
            patterns=[r"\w+ing\s+(fire|poi|flames)", r"-spin", r"mid-\w+"],
            weight=9,
        ),
        CategoryDefinition(
            name="Visual Effects & Modifications",
            keywords=["blur", "glow", "melting", "dripping", "liquid", "chrome", "metallic",
                      "holographic", "bioluminescent", "refraction", "reflection", "gloss",
                      "streaks", "smoke", "embers"],
            patterns=[r"motion blur", r"\w+ melting", r"\w+ dripping", r"HUD elements"],
            weight=8,
        ),
        CategoryDefinition(
            name="Patterns & Geometric Elements",
            keywords=["fractal", "fractals", "mandala", "mandalas", "pattern", "patterns",
                      "geometric", "recursive", "kaleidoscope", "kaleidoscopic", "symmetry"],
            patterns=[r"recursive \w+", r"\w+ patterns?", r"intricate \w+"],
            weight=8,
        ),
        CategoryDefinition(
            name="Colors",
            keywords=["cyan", "magenta", "yellow", "rainbow", "neon", "color", "red", "blue",
                      "green", "purple", "orange", "prismatic"],
            patterns=[r"\w+-\w+-\w+ color", r"color \w+", r"rainbow \w+"],
            weight=7,
        ),
        CategoryDefinition(
            name="Lighting",
            keywords=["lighting", "glow", "glowing", "light", "luminescent", "neon", "bright",
                      "dark", "shadow", "illuminated", "cinematic lighting"],
            patterns=[r"\d+k.*lighting", r"cinematic.*lighting", r"\w+ light"],
            weight=7,
        ),
        CategoryDefinition(
            name="Style & Artistic References",
            keywords=["psychedelic", "surreal", "dreamscape", "Salvador Dali", "proportions",
                      "warped", "acid-trip", "hyper-", "style", "artistic"],
            patterns=[r"\w+ style", r"Salvador Dali", r"hyper-\w+"],
            weight=6,
        ),
        CategoryDefinition(
            name="Background & Environment",
            keywords=["background", "environment", "scene", "setting", "landscape",
                      "backdrop", "atmosphere", "chaos"],
            patterns=[r"\w+ background", r"amid the \w+"],
            weight=5,
        ),
        CategoryDefinition(
            name="Quality & Technical Specifications",
            keywords=["8k", "4k", "ultra", "high", "detailed", "resolution", "cinematic",
                      "professional", "hd", "uhd"],
            patterns=[r"\d+k", r"ultra-\w+", r"high-\w+"],
            weight=4,
        ),
    ])


# Built once at import; shared read-only by every categorization call
DEFAULT_REGISTRY = build_default_registry()
