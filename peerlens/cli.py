#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# File: cli.py
# Project: peerlens
# Author: Based on work by Wadih Khairallah
# Created: 2026-10-15
# Modified: 2026-10-19 10:31:26
#
# Command line interface for the peerlens analysis engine

import os
import sys
import json as j
import click
import logging

from pathlib import Path
from typing import Optional, Dict, List, Any, Tuple

from rich.console import Console, Group
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table
from rich import box
from rich.pretty import Pretty

from peerlens.__version__ import __version__
from peerlens.config import CHUNK_SIZE, MATCH_THRESHOLD, SimilarityConfig
from peerlens.engine import CONTENT_KINDS, analyze_content
from peerlens.feedback import synthesize_feedback
from peerlens.similarity import detect_similarity
from peerlens.textanalysis import analyze_text, download_nltk_data

# Setup console
console = Console()
logger = logging.getLogger("peerlens")


def setup_logging(verbose: int = 0) -> None:
    """Route log records through rich; -v for INFO, -vv for DEBUG."""
    if verbose <= 0:
        level = logging.WARNING
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)]
    )
    logger.setLevel(level)


# Utility functions
def handle_output(
    data: Any,
    source: str,
    save_path: Optional[str] = None,
    json_output: bool = False
):
    """Handle output in either JSON or rich formatted mode"""
    if json_output or save_path:
        if isinstance(data, dict):
            data = dict(data, source=source)
        output = j.dumps(data, indent=4, ensure_ascii=False)

        if save_path:
            with open(save_path, 'w', encoding='utf-8') as f:
                f.write(output)
            console.print(f"[green]Output saved to:[/] {save_path}")
        else:
            click.echo(output)
        return output

    if isinstance(data, Group):
        console.print(data)
        return data

    console.print(Panel(
        Pretty(data),
        title=f"Source: {source}",
        border_style="green",
        expand=True
    ))
    return data


def read_source(
    source: str
) -> Optional[str]:
    """
    Read text from a file path, or from stdin when the source is "-".

    Returns:
        Optional[str]: File contents, or None if the path is not a file
    """
    if source == "-":
        return sys.stdin.read()

    path = Path(os.path.expanduser(source))
    if not path.is_file():
        return None
    return path.read_text(encoding="utf-8", errors="replace")


def load_corpus(
    sources: Tuple[str, ...]
) -> List[Dict[str, Any]]:
    """Build corpus documents from files and directories of files."""
    paths = []
    for source in sources:
        path = Path(os.path.expanduser(source))
        if path.is_dir():
            paths.extend(sorted(p for p in path.rglob("*") if p.is_file()))
        elif path.is_file():
            paths.append(path)
        else:
            logger.warning(f"Skipping corpus source '{source}': not a file or directory")

    corpus = []
    for path in paths:
        corpus.append({
            "id": str(path),
            "title": path.name,
            "author": None,
            "content": path.read_text(encoding="utf-8", errors="replace"),
        })
    return corpus


def render_report(
    report: Dict[str, Any]
) -> Group:
    """Render a plagiarism report as a summary line and a table of sources"""
    render = []

    style = "red" if report["score"] >= 50 else "yellow" if report["score"] > 0 else "green"
    summary = (f"[bold {style}]Similarity score: {report['score']}%[/]  "
               f"({report['checked_sources']}/{report['total_sources']} documents checked)")
    if report.get("error"):
        summary += f"\n[red]Error:[/] {report['error']}"
    render.append(summary)

    if report["sources"]:
        table = Table(title="Similar Documents", box=box.ROUNDED, expand=True, show_lines=True)
        table.add_column("Document", style="cyan", overflow="fold")
        table.add_column("Similarity", style="magenta", justify="right")
        table.add_column("Top Matching Passage", overflow="fold")

        for match in report["sources"]:
            spans = match["matching_spans"]
            passage = spans[0]["source_chunk"] if spans else ""
            table.add_row(
                str(match["title"] or match["document_id"]),
                f"{match['similarity']:.0%}",
                passage
            )
        render.append(table)

    return Group(*render)


# Main CLI group
@click.group()
@click.option('--verbose', '-v', count=True, help='Increase verbosity (can be used multiple times)')
@click.version_option(version=__version__)
def cli(verbose: int):
    """
    peerlens: Content analysis and similarity detection for peer review

    Score prose and code submissions and check them against earlier work.
    """
    setup_logging(verbose)


@cli.command()
@click.argument('source')
@click.option('--kind', type=click.Choice(CONTENT_KINDS), default='text', show_default=True,
              help='Declared content type')
@click.option('--language', help='Programming language for code analysis')
@click.option('--output', help='Save output to a file')
@click.option('--json', is_flag=True, help='Output results as JSON')
def analyze(
    source: str,
    kind: str,
    language: Optional[str],
    output: Optional[str],
    json: bool
):
    """Compute text and/or code metrics for SOURCE ('-' for stdin)"""
    content = read_source(source)
    if content is None:
        console.print(f"[red]Error:[/] Invalid path '{source}'")
        sys.exit(1)

    analysis = analyze_content(content, kind, language)
    handle_output(analysis, source, output, json)


@cli.command()
@click.argument('source')
@click.argument('corpus', nargs=-1, required=True)
@click.option('--threshold', type=float, default=MATCH_THRESHOLD, show_default=True,
              help='Minimum composite similarity for a document to be reported')
@click.option('--chunk-size', type=int, default=CHUNK_SIZE, show_default=True,
              help='Words per chunk when locating matching passages')
@click.option('--output', help='Save output to a file')
@click.option('--json', is_flag=True, help='Output results as JSON')
def similarity(
    source: str,
    corpus: Tuple[str, ...],
    threshold: float,
    chunk_size: int,
    output: Optional[str],
    json: bool
):
    """
    Compare SOURCE against the files in CORPUS

    CORPUS: One or more files or directories of earlier submissions
    """
    content = read_source(source)
    if content is None:
        console.print(f"[red]Error:[/] Invalid path '{source}'")
        sys.exit(1)

    try:
        config = SimilarityConfig(match_threshold=threshold, chunk_size=chunk_size)
    except ValueError as e:
        raise click.BadParameter(str(e))

    report = detect_similarity(content, load_corpus(corpus), config)

    if json or output:
        handle_output(report, source, output, json)
    else:
        handle_output(render_report(report), source)


@cli.command()
@click.argument('source')
@click.option('--output', help='Save output to a file')
@click.option('--json', is_flag=True, help='Output results as JSON')
def feedback(
    source: str,
    output: Optional[str],
    json: bool
):
    """Summarize strengths, weaknesses and suggestions for SOURCE"""
    content = read_source(source)
    if content is None:
        console.print(f"[red]Error:[/] Invalid path '{source}'")
        sys.exit(1)

    result = synthesize_feedback(analyze_text(content))

    if json or output:
        handle_output(result, source, output, json)
        return

    table = Table(title=f"Overall score: {result['overall_score']}", box=box.ROUNDED, expand=True)
    table.add_column("Strengths", style="green")
    table.add_column("Weaknesses", style="red")
    table.add_column("Suggestions", style="cyan")
    table.add_row(
        "\n".join(result["strengths"]),
        "\n".join(result["weaknesses"]),
        "\n".join(result["suggestions"])
    )
    handle_output(Group(table), source)


@cli.command(name="download-models")
def download_models():
    """Fetch the NLTK models used for named-entity extraction"""
    console.print("[cyan]Downloading NLTK models...[/cyan]")
    download_nltk_data()
    console.print("[green]Done.[/green]")


def main():
    try:
        cli()
    except Exception as e:
        console.print(f"[bold red]Error:[/] {str(e)}")
        logger.debug("Unhandled error", exc_info=True)
        sys.exit(1)

if __name__ == "__main__":
    main()
