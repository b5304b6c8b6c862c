#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
DocSeeker - command-line interface
Index a directory of XML/XHTML documents and search it with TF-IDF.
"""

import argparse
import logging
import sys
import time

from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn
from rich.table import Table

from DocSeeker.build_index import IndexBuilder
from DocSeeker.config import load_config
from DocSeeker.errors import DocSeekerError
from DocSeeker.index_io import save_index
from DocSeeker.server import serve
from DocSeeker.tfidf_search.tfidf_search import TFIDFSearchEngine

console = Console()


def setup_logging(level):
    """Route log records through the rich console."""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def cmd_index(args, config):
    """Build an index from a directory and save it"""
    output = args.output or config["index_file"]
    console.print(f"Indexing [cyan]{args.directory}[/cyan]")

    builder = IndexBuilder()
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        TimeElapsedColumn(),
        console=console,
        transient=True,
    ) as progress:
        progress.add_task("Building index...", total=None)
        index = builder.build(args.directory)

    save_index(index, output)

    console.print(Panel(
        f"[green]Indexed [bold]{builder.document_count}[/bold] documents[/green]\n"
        f"[yellow]Skipped [bold]{len(builder.skipped)}[/bold] documents[/yellow]\n"
        f"Saved to [cyan]{output}[/cyan]",
        title="[bold]Index built[/bold]",
        border_style="blue",
        width=80,
    ))
    return 0


def cmd_search(args, config):
    """Search a saved index and print the ranked documents"""
    index_file = args.index or config["index_file"]
    top_k = args.top if args.top is not None else config["search"]["top_k"]

    engine = TFIDFSearchEngine.from_file(index_file)

    start_time = time.time()
    results = engine.search(args.query, top_k=top_k)
    execution_time = time.time() - start_time

    display_results(results, args.query)
    console.print(f"[dim]Ranked {len(engine)} documents in {execution_time:.6f} seconds[/dim]")
    return 0


def cmd_serve(args, config):
    """Serve the search page and API for a saved index"""
    index_file = args.index or config["index_file"]
    host = args.host or config["server"]["host"]
    port = args.port if args.port is not None else config["server"]["port"]

    engine = TFIDFSearchEngine.from_file(index_file)
    serve(engine, host=host, port=port, top_k=config["search"]["top_k"])
    return 0


def display_results(results, query):
    """Display search results in a table"""
    if not results:
        console.print("[yellow]No documents in the index.[/yellow]")
        return

    table = Table(
        box=box.HEAVY_EDGE,
        show_header=True,
        header_style="bold magenta",
        title=f"[bold]Results for '{query}'[/bold]",
        title_style="yellow",
    )
    table.add_column("#", style="dim", width=4)
    table.add_column("Path", style="cyan", overflow="fold")
    table.add_column("Score", style="yellow", justify="right")

    for i, (path, score) in enumerate(results):
        table.add_row(str(i + 1), path, f"{score:.6f}")

    console.print(table)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="docseeker",
        description="DocSeeker - TF-IDF search over a directory of XML documents",
    )
    parser.add_argument("--config", help="Path to a JSON configuration file")
    parser.add_argument("--log-level", help="Logging level (overrides configuration)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    index_parser = subparsers.add_parser("index", help="Index a directory")
    index_parser.add_argument("directory", help="Directory to index")
    index_parser.add_argument("--output", help="Path to output index JSON file")
    index_parser.set_defaults(func=cmd_index)

    search_parser = subparsers.add_parser("search", help="Search a saved index")
    search_parser.add_argument("query", help="Free text query")
    search_parser.add_argument("--index", help="Path to index JSON file")
    search_parser.add_argument("--top", type=int, help="Number of top results to display")
    search_parser.set_defaults(func=cmd_search)

    serve_parser = subparsers.add_parser("serve", help="Serve a saved index over HTTP")
    serve_parser.add_argument("--index", help="Path to index JSON file")
    serve_parser.add_argument("--host", help="Address to listen on")
    serve_parser.add_argument("--port", type=int, help="Port to listen on")
    serve_parser.set_defaults(func=cmd_serve)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    # config warnings go through rich before the configured level is known
    setup_logging(args.log_level or "INFO")

    try:
        config = load_config(args.config)
        setup_logging(args.log_level or config["logging"]["level"])
        return args.func(args, config)
    except DocSeekerError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
