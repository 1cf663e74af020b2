"""Command-line interface for blogsum."""

from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import click
import structlog
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from blogsum import __version__
from blogsum.config import Config, find_config_file
from blogsum.container import DependencyContainer
from blogsum.exceptions import BlogsumError
from blogsum.observability import configure_logging
from blogsum.pipeline import BlogPipeline, PipelineResult
from blogsum.urdu import URDU_PHRASES, get_urdu_text_statistics, validate_urdu_translation

console = Console()
logger = structlog.get_logger(__name__)


def load_config(config_path: Optional[Path], log_level: Optional[str]) -> Config:
    """Load configuration from an explicit path, ./config.yaml, or defaults."""
    path = config_path or find_config_file()
    config = Config.from_yaml(path) if path else Config()
    if log_level:
        config.monitoring.log_level = log_level
    return config


def _print_result(result: PipelineResult) -> None:
    body = [
        f"[bold]{result.article.title}[/bold]",
        f"[dim]{result.article.url}[/dim]",
        "",
        result.summary.summary,
    ]
    if result.summary.key_points:
        body.append("")
        body.append(f"[bold]Key points[/bold] ({URDU_PHRASES['KEY_POINTS']})")
        body.extend(f"  • {point}" for point in result.summary.key_points)
    body.append("")
    body.append(f"[bold]{URDU_PHRASES['SUMMARY']}[/bold]")
    body.append(result.translation.translated_text)

    footer = f"summary: {result.summary.source} | translation: {result.translation.source}"
    if result.record_id is not None:
        footer += f" | saved as #{result.record_id}"
    if result.storage_error:
        footer += f" | [yellow]not saved: {result.storage_error}[/yellow]"
    console.print(Panel("\n".join(body), subtitle=footer, border_style="green"))


@click.group()
@click.version_option(version=__version__)
@click.option("--config", "-c", type=click.Path(exists=True), help="Configuration file path")
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"]),
    help="Logging level (overrides the configuration file)",
)
@click.pass_context
def cli(ctx: click.Context, config: Optional[str], log_level: Optional[str]) -> None:
    """blogsum - summarize blog posts in English and Urdu."""
    ctx.ensure_object(dict)
    loaded = load_config(Path(config) if config else None, log_level)
    configure_logging(loaded.monitoring)
    ctx.obj["config"] = loaded
    ctx.obj["config_path"] = Path(config) if config else None


@cli.command()
@click.argument("urls", nargs=-1, required=True)
@click.option("--no-store", is_flag=True, help="Do not persist the results")
@click.option("--json", "as_json", is_flag=True, help="Print results as JSON")
@click.pass_context
def summarize(ctx: click.Context, urls: List[str], no_store: bool, as_json: bool) -> None:
    """Scrape, summarize and translate one or more blog URLs."""

    async def run() -> int:
        container = DependencyContainer(ctx.obj["config"], ctx.obj["config_path"])
        async with container.lifecycle():
            pipeline = BlogPipeline(container)
            results = await pipeline.process_many(list(urls), store=not no_store)

        failures = 0
        payload: List[Dict[str, Any]] = []
        for url, result in zip(urls, results):
            if isinstance(result, PipelineResult):
                if as_json:
                    payload.append(result.to_dict())
                else:
                    _print_result(result)
                continue
            failures += 1
            if as_json:
                payload.append({"url": url, "error": str(result), "error_type": type(result).__name__})
            else:
                console.print(f"[red]Failed to process {url}: {result}[/red]")

        if as_json:
            click.echo(json.dumps(payload, ensure_ascii=False, indent=2))
        return 1 if failures else 0

    sys.exit(asyncio.run(run()))


@cli.command()
@click.argument("text")
@click.option("--offline", is_flag=True, help="Use the dictionary translator only")
@click.pass_context
def translate(ctx: click.Context, text: str, offline: bool) -> None:
    """Translate English TEXT to Urdu."""

    async def run() -> None:
        container = DependencyContainer(ctx.obj["config"], ctx.obj["config_path"])
        async with container.lifecycle():
            chain = await container.get_translation_chain(offline=offline)
            result = await chain.translate(text)

        console.print(result.translated_text)
        confidence = f"{result.confidence:.2f}" if result.confidence is not None else "n/a"
        console.print(f"[dim]source: {result.source} | confidence: {confidence}[/dim]")

    try:
        asyncio.run(run())
    except BlogsumError as e:
        console.print(f"[red]Translation failed: {e}[/red]")
        sys.exit(1)


@cli.command("check-urdu")
@click.argument("text")
@click.option("--source", default=None, help="English source text to validate the translation against")
def check_urdu(text: str, source: Optional[str]) -> None:
    """Report script, structure and quality statistics for Urdu TEXT."""
    stats = get_urdu_text_statistics(text)
    table = Table(title="Urdu Text Statistics")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="magenta")
    table.add_row("Words", str(stats.word_count))
    table.add_row("Sentences", str(stats.sentence_count))
    table.add_row("Characters", str(stats.character_count))
    table.add_row("Urdu characters", str(stats.urdu_character_count))
    table.add_row("Paragraphs", str(stats.paragraph_count))
    table.add_row("Avg words/sentence", f"{stats.avg_words_per_sentence:.1f}")
    table.add_row("Script percentage", f"{stats.script_percentage:.1f}%")
    table.add_row("Proper punctuation", "yes" if stats.has_proper_punctuation else "no")
    console.print(table)

    if source is not None:
        validation = validate_urdu_translation(source, text)
        status = "[green]valid[/green]" if validation.is_valid else "[red]invalid[/red]"
        console.print(f"Translation is {status} (confidence {validation.confidence:.2f})")
        for issue in validation.issues:
            console.print(f"  - {issue}")
        if not validation.is_valid:
            sys.exit(1)


@cli.command()
@click.option("--limit", default=10, show_default=True, help="Number of articles to show")
@click.option("--search", "term", default=None, help="Only show articles whose title or summary match")
@click.pass_context
def history(ctx: click.Context, limit: int, term: Optional[str]) -> None:
    """List previously processed articles."""

    async def run() -> None:
        container = DependencyContainer(ctx.obj["config"], ctx.obj["config_path"])
        async with container.lifecycle():
            store = await container.get_storage()
            records = await store.search(term, limit) if term else await store.recent(limit)

        table = Table(title="Processed Articles")
        table.add_column("ID", style="cyan", justify="right")
        table.add_column("Title")
        table.add_column("URL", style="dim")
        table.add_column("Words", justify="right")
        table.add_column("Created")
        for record in records:
            created = record.created_at.strftime("%Y-%m-%d %H:%M") if record.created_at else ""
            table.add_row(str(record.id), record.title, record.url, str(record.word_count), created)
        console.print(table)

    try:
        asyncio.run(run())
    except BlogsumError as e:
        console.print(f"[red]Could not read history: {e}[/red]")
        sys.exit(1)


@cli.command()
@click.pass_context
def health(ctx: click.Context) -> None:
    """Check configuration, hosted provider and storage health."""

    async def run() -> Dict[str, Any]:
        container = DependencyContainer(ctx.obj["config"], ctx.obj["config_path"])
        async with container.lifecycle():
            return await BlogPipeline(container).health()

    status = asyncio.run(run())
    click.echo(json.dumps(status, indent=2, default=str))
    if not status["healthy"]:
        sys.exit(1)


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
