"""CLI interface using typer + rich."""

from __future__ import annotations

import asyncio
import logging

from dotenv import load_dotenv

load_dotenv()

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from prompt_crafter.config import load_config
from prompt_crafter.errors import InvalidArgument
from prompt_crafter.models.enhancement import EnhancementRequest, ModelSelector
from prompt_crafter.models.language import language_name, list_supported_languages
from prompt_crafter.models.tools import AI_TOOLS
from prompt_crafter.pipeline.orchestrator import open_pipeline
from prompt_crafter.pipeline.suggestions import generate_suggestions

app = typer.Typer(
    name="prompt-crafter",
    help="Detect, translate and enhance AI prompts.",
    no_args_is_help=True,
)
console = Console()


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


@app.command()
def enhance(
    prompt: str = typer.Argument(help="Prompt to enhance"),
    language: str = typer.Option("en", "--language", "-l", help="Output language code"),
    model: ModelSelector = typer.Option(ModelSelector.FREE, "--model", "-m", help="Generation backend"),
    api_key: str = typer.Option(
        None, "--api-key", envvar="ANTHROPIC_API_KEY", help="API key for the claude backend"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Enhance a prompt, translating through English when needed."""
    _setup_logging(verbose)
    request = EnhancementRequest(
        prompt=prompt,
        output_language=language,
        model=model,
        credential=api_key if model.requires_credential else None,
    )

    async def _run():
        async with open_pipeline(config) as pipeline:
            with Progress(
                SpinnerColumn(),
                TextColumn("[progress.description]{task.description}"),
                console=console,
                transient=True,
            ) as progress:
                task = progress.add_task("Enhancing...", total=None)

                def on_phase(phase: str, detail: str) -> None:
                    progress.update(task, description=detail)

                return await pipeline.run(request, on_phase=on_phase)

    try:
        config = load_config()
        result = asyncio.run(_run())
    except InvalidArgument as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)
    except ValueError as e:
        # Invalid config.yaml values.
        console.print(f"[red]Configuration error: {e}[/red]")
        raise typer.Exit(2)

    console.print(
        Panel(
            result.enhanced_text,
            title="Enhanced prompt",
            subtitle=(
                f"detected: {language_name(result.detected_language)} | "
                f"output: {language_name(result.output_language)} | "
                f"{result.elapsed_seconds:.1f}s"
            ),
        )
    )


@app.command()
def languages() -> None:
    """List supported languages."""
    table = Table(title="Supported languages")
    table.add_column("Code", style="bold")
    table.add_column("Name")
    for lang in list_supported_languages():
        table.add_row(lang.code, lang.name)
    console.print(table)


@app.command()
def suggest(
    topic: str = typer.Argument(help="Topic or draft prompt"),
) -> None:
    """Show prompt suggestions for a topic."""
    config = load_config()
    suggestions = generate_suggestions(topic, limit=config.pipeline.max_suggestions)
    if not suggestions:
        console.print("[yellow]Enter a topic to get suggestions.[/yellow]")
        raise typer.Exit(1)
    for i, s in enumerate(suggestions, 1):
        console.print(f"  {i}. {s}")


@app.command()
def tools() -> None:
    """List external AI tools."""
    for tool in AI_TOOLS:
        console.print(f"  [bold]{tool.name}[/bold]: {tool.description} [dim]{tool.url}[/dim]")
