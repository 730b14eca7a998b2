"""CLI interface using typer."""

import asyncio
import json
import logging

import typer

from .config import settings
from .crawl import ConfigurationError, TraversalConfig, count_characters
from .report import print_report, report_dict

app = typer.Typer(
    name="kanjifreq",
    help="Crawl a website and rank its Kanji, Hiragana and Katakana",
    no_args_is_help=True,
)


@app.command()
def count(
    url: str = typer.Option(settings.default_url, "--url", help="Target website"),
    depth: int = typer.Option(settings.default_depth, "--depth", "-d", help="Search depth"),
    ranksize: int = typer.Option(settings.default_ranking_size, "--ranksize", "-n", help="Ranking size"),
    concurrency: int = typer.Option(1, "--concurrency", "-c", help="Concurrent requests"),
    time_budget: float = typer.Option(None, "--time-budget", help="Stop crawling after this many seconds"),
    output: str = typer.Option(None, "-o", "--output", help="Output file (JSON)"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Show crawl diagnostics"),
):
    """Crawl a website and print its most common Japanese characters."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = TraversalConfig(
            root_url=url,
            search_depth=depth,
            logging_mode=verbose,
            concurrency=concurrency,
        )
    except ConfigurationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2)

    crawler = asyncio.run(count_characters(config, time_budget=time_budget))
    counter = crawler.counter

    if output:
        result = report_dict(counter, ranksize)
        result["url"] = config.root_url
        result["search_depth"] = config.search_depth
        result["pages_fetched"] = crawler.pages_fetched
        result["pages_failed"] = crawler.pages_failed
        result["timed_out"] = crawler.timed_out
        with open(output, "w", encoding="utf-8") as f:
            json.dump(result, f, indent=2, ensure_ascii=False)
        typer.echo(f"Saved to {output}")
    else:
        print_report(counter, ranksize)


@app.command()
def version():
    """Show version."""
    from . import __version__

    typer.echo(f"kanjifreq {__version__}")


if __name__ == "__main__":
    app()
