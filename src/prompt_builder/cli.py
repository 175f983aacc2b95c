"""Command-line interface for the video prompt builder."""

import sys
from typing import Optional

import click
from rich.console import Console

from .categorization.categorizer import PromptCategorizer
from .categorization.extractor import extract_phrases
from .categorization.registry import DEFAULT_REGISTRY
from .config import Settings, get_settings
from .library import PromptBuilder, PromptLibrary
from .outputs.renderer import ResultRenderer, to_json, to_yaml
from .session import AnalysisSession

console = Console()
# Notices that must stay out of machine-readable stdout
err_console = Console(stderr=True)

OUTPUT_FORMATS = ["table", "yaml", "json"]


def load_library(settings: Settings) -> PromptLibrary:
    """Load the prompt library configured in settings."""
    if settings.library_file is None:
        return PromptLibrary()
    return PromptLibrary.from_yaml(settings.library_file)


def read_text(text: str) -> str:
    """Read prompt text, using stdin for '-'."""
    if text == "-":
        return sys.stdin.read()
    return text


@click.group()
def cli() -> None:
    """Video Prompt Builder - build and categorize AI video prompts."""
    pass


@cli.command()
@click.argument("text")
@click.option(
    "--format",
    "output_format",
    help="Output format (overrides config)",
    type=click.Choice(OUTPUT_FORMATS),
)
@click.option(
    "--all-results",
    help="Also list every phrase with its classification",
    is_flag=True,
)
@click.option(
    "--add-to-library",
    help="Merge the categorized phrases into the prompt library and report the counts "
    "(the merged library is not saved)",
    is_flag=True,
)
def analyze(
    text: str,
    output_format: Optional[str],
    all_results: bool,
    add_to_library: bool,
) -> None:
    """Categorize the phrases of a prompt (use '-' to read stdin)."""
    settings = get_settings()
    output_format = output_format or settings.output_format

    session = AnalysisSession()
    try:
        result = session.analyze(read_text(text))
    except ValueError as e:
        raise click.UsageError(str(e))

    if output_format == "yaml":
        click.echo(to_yaml(result), nl=False)
    elif output_format == "json":
        click.echo(to_json(result))
    else:
        renderer = ResultRenderer(console)
        renderer.render_result(result)
        if all_results or settings.show_all_results:
            renderer.render_all_results(result)

    if add_to_library:
        try:
            library = load_library(settings)
        except (OSError, ValueError) as e:
            err_console.print(f"[red]Error loading library: {e}[/red]")
            raise click.ClickException(str(e))

        session.add_to_library(library)
        notices = console if output_format == "table" else err_console
        notices.print(f"Library now has {len(library)} prompt types")


@cli.command()
@click.argument("text")
def extract(text: str) -> None:
    """List the phrases extracted from a prompt."""
    phrases = extract_phrases(read_text(text))

    console.print(f"[cyan]Extracted {len(phrases)} phrases[/cyan]")
    for i, phrase in enumerate(phrases, 1):
        console.print(f"  {i}. {phrase}", markup=False, highlight=False)


@cli.command()
def categories() -> None:
    """Show the category definitions used for classification."""
    ResultRenderer(console).render_registry(DEFAULT_REGISTRY)


@cli.command()
@click.option(
    "--format",
    "output_format",
    help="Output format",
    type=click.Choice(["table", "yaml"]),
    default="table",
)
def library(output_format: str) -> None:
    """Show the prompt library."""
    try:
        prompt_library = load_library(get_settings())
    except (OSError, ValueError) as e:
        console.print(f"[red]Error loading library: {e}[/red]")
        raise click.ClickException(str(e))

    if output_format == "yaml":
        click.echo(prompt_library.to_yaml(), nl=False)
    else:
        ResultRenderer(console).render_library(prompt_library)


@cli.command()
@click.option(
    "--type",
    "-t",
    "prompt_types",
    help="Prompt type to select (repeatable)",
    multiple=True,
    required=True,
)
@click.option(
    "--phrase",
    "-p",
    "phrases",
    help="Phrase to select (repeatable)",
    multiple=True,
)
@click.option(
    "--all",
    "select_all",
    help="Select every phrase of the selected prompt types",
    is_flag=True,
)
def build(prompt_types: tuple[str, ...], phrases: tuple[str, ...], select_all: bool) -> None:
    """Build a prompt from library phrases."""
    try:
        builder = PromptBuilder(load_library(get_settings()))
        for prompt_type in prompt_types:
            if select_all:
                builder.select_all(prompt_type)
            else:
                builder.select_type(prompt_type)
        for phrase in phrases:
            builder.select_phrase(phrase)
    except (KeyError, ValueError, OSError) as e:
        message = e.args[0] if isinstance(e, KeyError) else str(e)
        console.print(f"[red]Error building prompt: {message}[/red]")
        raise click.ClickException(message)

    if builder.phrase_count == 0:
        console.print("[yellow]No phrases selected. Use --phrase or --all.[/yellow]")
        return

    click.echo(builder.build_prompt())
    console.print(f"[dim]{builder.phrase_count} phrases[/dim]")


@cli.command()
def validate() -> None:
    """Validate configuration, category registry and library."""
    try:
        settings = get_settings()

        console.print("[cyan]Validating configuration...[/cyan]\n")

        categorizer = PromptCategorizer()
        console.print(f"  ✓ Registry loaded: {len(categorizer.get_categories())} categories")

        prompt_library = load_library(settings)
        source = settings.library_file or "built-in"
        console.print(f"  ✓ Library loaded from {source}: {len(prompt_library)} prompt types")

        console.print("\n[green]All validations passed![/green]")

    except Exception as e:
        console.print(f"\n[red]Validation failed: {e}[/red]")
        raise


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
