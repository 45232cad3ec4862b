"""CLI interface for Docsitemap.

Command-line tool for building and serving documentation sitemaps.
"""

import json
import logging
import sys
from pathlib import Path

import click

from docsitemap.config import Config
from docsitemap.core.sitemap import unflatten_sitemap_tree
from docsitemap.manifest import load_pages, mark_current


@click.group()
def cli() -> None:
    """Docsitemap - navigation trees for documentation sites."""


@cli.command()
@click.argument(
    "manifest",
    type=click.Path(path_type=Path, dir_okay=False),
    required=False,
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover docsitemap.toml)",
)
@click.option(
    "--site-title",
    default=None,
    help="Root page name when the root page has no title (overrides config)",
)
@click.option(
    "--current",
    default=None,
    help="URL of the page being viewed, marked as current in the sitemap",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Write sitemap JSON to file instead of stdout",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output (show sitemap diagnostics)",
)
def build(
    manifest: Path | None,
    config_path: Path | None,
    site_title: str | None,
    current: str | None,
    output: Path | None,
    verbose: bool,
) -> None:
    """Build a sitemap tree from a page manifest."""
    _configure_logging(verbose)

    try:
        config = Config.load(config_path).with_overrides(
            site_title=site_title,
            pages_file=manifest,
        )
        pages = load_pages(config.sitemap.pages_file)
    except (FileNotFoundError, ValueError) as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)

    if current is not None:
        pages = mark_current(pages, current)

    root = unflatten_sitemap_tree(pages, config.sitemap.links, config.site.title)
    if root is None:
        click.echo(click.style("No sitemap", fg="yellow"), err=True)
        return

    text = json.dumps(root.to_dict(), indent=2, ensure_ascii=False)
    if output is None:
        click.echo(text)
        return

    output.write_text(text + "\n", encoding="utf-8")
    click.echo(f"Sitemap written to {output}", err=True)


@cli.command()
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover docsitemap.toml)",
)
@click.option(
    "--pages-file",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Page manifest served by the API (overrides config)",
)
@click.option(
    "--host",
    default=None,
    help="Host to bind to (overrides config)",
)
@click.option(
    "--port",
    "-p",
    type=int,
    default=None,
    help="Port to bind to (overrides config)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output (show sitemap diagnostics)",
)
def serve(
    config_path: Path | None,
    pages_file: Path | None,
    host: str | None,
    port: int | None,
    verbose: bool,
) -> None:
    """Start the sitemap API server."""
    from docsitemap.server import run_server

    _configure_logging(verbose)

    try:
        config = Config.load(config_path).with_overrides(
            host=host,
            port=port,
            pages_file=pages_file,
        )
    except (FileNotFoundError, ValueError) as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)

    click.echo(f"Starting server on {config.server.host}:{config.server.port}")
    click.echo(f"Page manifest: {config.sitemap.pages_file}")
    click.echo(f"Custom links: {len(config.sitemap.links)}")

    run_server(config)


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


if __name__ == "__main__":
    cli()
