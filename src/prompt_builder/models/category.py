"""Models for categories and category definitions."""

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Sentinel bucket for phrases that score below the confidence floor
OTHER_CATEGORY = "Other"


class CategoryDefinition(BaseModel):
    """Definition of a category with the keywords and patterns that identify it."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Category name")
    keywords: tuple[str, ...] = Field(default_factory=tuple, description="Keywords matched as substrings")
    patterns: tuple[re.Pattern[str], ...] = Field(
        default_factory=tuple,
        description="Regular expressions tested against the phrase",
    )
    weight: float = Field(..., gt=0, description="Multiplier applied to the raw match score")

    @field_validator("patterns", mode="before")
    @classmethod
    def compile_patterns(cls, value: Any) -> tuple[re.Pattern[str], ...]:
        """Compile pattern strings case-insensitively.

        An invalid expression is a configuration defect and is rejected here,
        so a broken registry fails when it is built rather than when scoring.
        """
        compiled = []
        for pattern in value:
            if isinstance(pattern, re.Pattern):
                pattern = pattern.pattern
            try:
                compiled.append(re.compile(pattern, re.IGNORECASE))
            except re.error as e:
                raise ValueError(f"Invalid pattern {pattern!r}: {e}") from e
        return tuple(compiled)
