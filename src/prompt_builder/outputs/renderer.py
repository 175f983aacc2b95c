"""Render categorization results for the console."""

import json
import math

import yaml
from rich.console import Console
from rich.table import Table
from rich.text import Text

from ..categorization.registry import CategoryRegistry
from ..library import PromptLibrary
from ..models.result import CategorizationResult


class ResultRenderer:
    """Render results, registries and libraries."""

    def __init__(self, console: Console):
        """Initialize renderer.

        Args:
            console: Console to print to
        """
        self.console = console

    def render_result(self, result: CategorizationResult) -> None:
        """Render a categorization result as one table per category.

        Args:
            result: Result to render
        """
        self.console.print(f"[cyan]Total phrases: {result.total_phrases}[/cyan]")
        self.console.print(f"[cyan]Categories found: {len(result.categories)}[/cyan]\n")

        for category, entries in result.categories.items():
            table = Table(title=f"{category} ({len(entries)} phrases)", title_justify="left")
            table.add_column("#", justify="right", style="dim")
            table.add_column("Confidence", justify="right", style="cyan")
            table.add_column("Phrase")

            for i, entry in enumerate(entries):
                table.add_row(str(i), str(round_confidence(entry.confidence)), Text(entry.phrase))

            self.console.print(table)

    def render_all_results(self, result: CategorizationResult) -> None:
        table = Table(title="All phrases", title_justify="left")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Category", style="magenta")
        table.add_column("Confidence", justify="right", style="cyan")
        table.add_column("Phrase")

        for i, record in enumerate(result.all_results, 1):
            table.add_row(str(i), record.category, str(round_confidence(record.confidence)), Text(record.phrase))

        self.console.print(table)

    def render_registry(self, registry: CategoryRegistry) -> None:
        table = Table(title="Categories", title_justify="left")
        table.add_column("Category", style="magenta")
        table.add_column("Weight", justify="right")
        table.add_column("Keywords", justify="right")
        table.add_column("Patterns", justify="right")

        for name, definition in registry.items():
            table.add_row(
                name,
                f"{definition.weight:g}",
                str(len(definition.keywords)),
                str(len(definition.patterns)),
            )

        self.console.print(table)

    def render_library(self, library: PromptLibrary) -> None:
        for prompt_type in library.prompt_types():
            phrases = library.phrases_for(prompt_type)
            self.console.print(f"[bold]{prompt_type}[/bold] [dim]({len(phrases)})[/dim]")
            for phrase in phrases:
                self.console.print(f"  - {phrase}", markup=False, highlight=False)


def to_yaml(result: CategorizationResult) -> str:
    """Serialize a result to YAML."""
    return yaml.safe_dump(
        result.model_dump(mode="json"),
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
    )


def to_json(result: CategorizationResult) -> str:
    """Serialize a result to JSON."""
    return json.dumps(result.model_dump(mode="json"), indent=2)


def round_confidence(confidence: float) -> int:
    """Round a confidence for display, halves rounding up."""
    return math.floor(confidence + 0.5)
