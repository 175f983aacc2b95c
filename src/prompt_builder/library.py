"""In-memory prompt library and prompt builder."""

from pathlib import Path
from typing import Optional

import yaml
from rich.console import Console

console = Console(stderr=True)


DEFAULT_PROMPT_DATA: dict[str, list[str]] = {
    "Fire Poi": [
        "spinning fire poi",
        "flowing fire trails",
        "circular fire patterns",
        "poi dancer silhouette",
        "ember sparks flying",
        "fire poi choreography",
        "double poi spinning",
        "fire circle motion",
        "glowing fire arcs",
        "night fire performance",
    ],
    "Bigfoot": [
        "bigfoot in misty forest",
        "sasquatch footprints",
        "cryptid in shadows",
        "tall hairy creature",
        "bigfoot walking away",
        "mysterious forest encounter",
        "blurry bigfoot footage",
        "sasquatch among trees",
        "cryptozoology documentary style",
        "bigfoot howling",
    ],
    "Trippy Visuals": [
        "kaleidoscope patterns",
        "psychedelic colors",
        "fractal geometry",
        "morphing shapes",
        "rainbow color trails",
        "liquid light effects",
        "geometric mandala",
        "swirling vortex",
        "neon glow effects",
        "surreal dreamscape",
        "color bleeding",
        "prismatic refraction",
        "infinite tunnel",
        "warping reality",
    ],
}


class PromptLibrary:
    """Curated mapping of prompt type to unique phrases."""

    def __init__(self, data: Optional[dict[str, list[str]]] = None):
        """Initialize library.

        Args:
            data: Prompt type to phrases (default: built-in library)
        """
        source = DEFAULT_PROMPT_DATA if data is None else data
        self._data: dict[str, list[str]] = {
            prompt_type: list(dict.fromkeys(phrases)) for prompt_type, phrases in source.items()
        }

    @classmethod
    def from_yaml(cls, path: Path) -> "PromptLibrary":
        """Load a library from a YAML mapping of prompt type to phrase list.

        Args:
            path: YAML file

        Returns:
            Loaded library

        Raises:
            ValueError: If the file is not a mapping of strings to string lists
        """
        with open(path) as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"Library file {path} must contain a mapping")

        for prompt_type, phrases in data.items():
            if not isinstance(prompt_type, str) or not isinstance(phrases, list):
                raise ValueError(f"Invalid library entry in {path}: {prompt_type!r}")
            if not all(isinstance(p, str) for p in phrases):
                raise ValueError(f"Phrases for {prompt_type!r} in {path} must be strings")

        return cls(data)

    def prompt_types(self) -> list[str]:
        return list(self._data)

    def phrases_for(self, prompt_type: str) -> list[str]:
        """Get phrases for a prompt type.

        Raises:
            KeyError: If the prompt type is not in the library
        """
        if prompt_type not in self._data:
            raise KeyError(f"Unknown prompt type: {prompt_type}")
        return list(self._data[prompt_type])

    def phrase_count(self, prompt_type: str) -> int:
        return len(self.phrases_for(prompt_type))

    def merge(self, prompt_data: dict[str, list[str]]) -> int:
        """Merge exported phrases into the library.

        Phrases are unioned per prompt type; text already present is skipped and
        unknown prompt types are created.

        Args:
            prompt_data: Prompt type to phrases, as produced by the exporter

        Returns:
            Number of phrases added
        """
        added = 0
        for prompt_type, phrases in prompt_data.items():
            if prompt_type not in self._data:
                console.print(f"[yellow]New prompt type added: {prompt_type}[/yellow]")
            existing = self._data.setdefault(prompt_type, [])
            for phrase in phrases:
                if phrase not in existing:
                    existing.append(phrase)
                    added += 1
        return added

    def to_dict(self) -> dict[str, list[str]]:
        return {prompt_type: list(phrases) for prompt_type, phrases in self._data.items()}

    def to_yaml(self) -> str:
        return yaml.safe_dump(self.to_dict(), default_flow_style=False, sort_keys=False, allow_unicode=True)

    def __contains__(self, prompt_type: object) -> bool:
        return prompt_type in self._data

    def __len__(self) -> int:
        return len(self._data)


class PromptBuilder:
    """Build a prompt by selecting prompt types and phrases from a library."""

    def __init__(self, library: PromptLibrary):
        """Initialize builder.

        Args:
            library: Library to pick phrases from
        """
        self.library = library
        # dicts used as insertion-ordered sets
        self.selected_types: dict[str, None] = {}
        self.selected_phrases: dict[str, None] = {}

    def select_type(self, prompt_type: str) -> None:
        if prompt_type not in self.library:
            raise KeyError(f"Unknown prompt type: {prompt_type}")
        self.selected_types[prompt_type] = None

    def deselect_type(self, prompt_type: str) -> None:
        """Deselect a prompt type along with all of its phrases."""
        self.selected_types.pop(prompt_type, None)
        for phrase in self.library.phrases_for(prompt_type):
            self.selected_phrases.pop(phrase, None)

    def select_all(self, prompt_type: str) -> None:
        """Select a prompt type and every phrase in it."""
        self.select_type(prompt_type)
        for phrase in self.library.phrases_for(prompt_type):
            self.selected_phrases[phrase] = None

    def available_phrases(self) -> dict[str, list[str]]:
        """Get phrases offered by the selected prompt types."""
        return {t: self.library.phrases_for(t) for t in self.selected_types}

    def select_phrase(self, phrase: str) -> None:
        """Select a phrase from one of the selected prompt types.

        Raises:
            ValueError: If no selected prompt type offers the phrase
        """
        if not any(phrase in phrases for phrases in self.available_phrases().values()):
            raise ValueError(f"Phrase not offered by the selected prompt types: {phrase}")
        self.selected_phrases[phrase] = None

    def deselect_phrase(self, phrase: str) -> None:
        self.selected_phrases.pop(phrase, None)

    @property
    def phrase_count(self) -> int:
        return len(self.selected_phrases)

    def build_prompt(self) -> str:
        """Join the selected phrases into a prompt, in selection order."""
        return ", ".join(self.selected_phrases)

    def clear(self) -> None:
        self.selected_types.clear()
        self.selected_phrases.clear()
        console.print("[yellow]Prompt selection cleared[/yellow]")
