#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# File: cli.py
# Project: wordlens
# Author: Wadih Khairallah
# Created: 2026-10-15
# Modified: 2026-10-19 10:48:20
#
# Command line interface for the wordlens analyzer

import os
import sys
import json as j
import logging
import click
import pytz

from datetime import datetime
from typing import Optional, Dict, Any

from rich.console import Console, Group
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table
from rich import box

from wordlens.__version__ import __version__
from wordlens.config import load_config, density_ranges, analyze_options
from wordlens.detect import detect_language
from wordlens.errors import WordAnalysisError
from wordlens.languages import supported_languages
from wordlens.models import AnalysisResult, DensityRanges
from wordlens.report import (
    density_category, filter_words, sort_words, quick_metrics, SORT_KEYS,
    export_filename, words_to_csv,
)
from wordlens.textanalysis import analyze as analyze_text
from wordlens.textextract import analyze_html, looks_like_html, read_source, extract_page

# Setup console
console = Console()

# Column width for rich output written to a file
SAVE_WIDTH = 120

CATEGORY_STYLES = {
    "under-optimized": "yellow",
    "optimal": "green",
    "over-optimized": "red",
}


def setup_logging(level: str = "WARNING") -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.WARNING),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )


def handle_output(
    data: Any,
    source: Optional[str],
    save_path: Optional[str] = None,
    json_output: bool = False,
    raw_output: bool = False,
    encoding: str = "utf-8"
):
    """Handle output in either JSON, raw text, or rich formatted mode"""
    if json_output:
        if isinstance(data, dict):
            data["timestamp"] = datetime.now(pytz.UTC).isoformat()
            data["source"] = source or "stdin"

        output = j.dumps(data, indent=4, ensure_ascii=False)
        if save_path:
            with open(save_path, 'w', encoding=encoding) as f:
                f.write(output)
            console.print(f"[green]Output saved to:[/] {save_path}")
            return output

        click.echo(output)
        return output

    if raw_output:
        output = data if isinstance(data, str) else j.dumps(data, indent=4, ensure_ascii=False)
        if save_path:
            with open(save_path, 'w', encoding=encoding) as f:
                f.write(output)
            console.print(f"[green]Output saved to:[/] {save_path}")
            return output

        click.echo(output, nl=not output.endswith("\n"))
        return output

    if save_path:
        with open(save_path, 'w', encoding=encoding) as f:
            if isinstance(data, str):
                f.write(data)
            else:
                # Renderables are written as plain text
                Console(file=f, width=SAVE_WIDTH).print(data)

        console.print(f"[green]Output saved to:[/] {save_path}")
        return data

    console.print(data)
    return data


def render_result(
    result: AnalysisResult,
    words,
    ranges: DensityRanges,
    source: Optional[str]
) -> Group:
    """Build the metrics panel and phrase table for a result"""
    metrics = Table.grid(padding=(0, 2))
    metrics.add_column(style="cyan", justify="right")
    metrics.add_column(style="green")
    for label, value in quick_metrics(result).items():
        metrics.add_row(label, value)
    if result.language:
        metrics.add_row("Language", f"{result.language} ({result.confidence:.0%})")
    if result.title:
        metrics.add_row("Title", result.title)

    table = Table(
        title=f"{len(words)} of {len(result.words)} phrases",
        box=box.ROUNDED,
        expand=True,
    )
    table.add_column("Phrase", style="bold cyan", overflow="fold")
    table.add_column("Count", justify="right")
    table.add_column("Density", justify="right")
    table.add_column("Category", justify="left")

    for word in words:
        category = density_category(word.density, ranges)
        style = CATEGORY_STYLES[category]
        table.add_row(
            word.text,
            str(word.count),
            f"{word.density:.2f}%",
            f"[{style}]{category}",
        )

    return Group(
        Panel(metrics, title=f"Source: {source or 'stdin'}", border_style="green"),
        table,
    )


def fail(message: str) -> None:
    console.print(f"[red]Error:[/] {message}")
    sys.exit(1)


# Main CLI group
@click.group()
@click.option('--config', 'config_path', type=click.Path(exists=True, dir_okay=False), help='Path to a YAML config file')
@click.option('--debug', is_flag=True, help='Verbose logging and tracebacks')
@click.version_option(version=__version__)
@click.pass_context
def cli(ctx, config_path: Optional[str], debug: bool):
    """
    wordlens: Word and phrase density analysis for web pages

    Detects the page language, extracts word n-grams and reports how often
    each meaningful phrase occurs.
    """
    try:
        cfg = load_config(config_path)
    except WordAnalysisError as e:
        fail(str(e))
    setup_logging("DEBUG" if debug else cfg["log_level"])
    ctx.obj = cfg


# Analyze command
@cli.command()
@click.argument('source', required=False)
@click.option('--group-size', '-g', type=int, help='Words per phrase (1-5)')
@click.option('--min-count', '-m', type=int, help='Hide phrases seen fewer times')
@click.option('--case-sensitive/--ignore-case', default=None, help='Keep original casing')
@click.option('--html/--text', 'as_html', default=None, help='Treat input as HTML markup (auto-detected)')
@click.option('--search', help='Only show phrases containing this text')
@click.option('--sort', 'sort_key', type=click.Choice(SORT_KEYS), default='count', help='Sort column')
@click.option('--asc', is_flag=True, help='Sort ascending')
@click.option('--top', type=int, help='Number of rows to show')
@click.option('--output', help='Save output to a file (a directory gets a generated CSV name)')
@click.option('--json', is_flag=True, help='Output results as JSON')
@click.option('--csv', 'csv_output', is_flag=True, help='Output phrase rows as CSV')
@click.option('--raw', is_flag=True, help='Output phrase rows as plain text')
@click.pass_obj
def analyze(
    cfg: Dict[str, Any],
    source: Optional[str],
    group_size: Optional[int],
    min_count: Optional[int],
    case_sensitive: Optional[bool],
    as_html: Optional[bool],
    search: Optional[str],
    sort_key: str,
    asc: bool,
    top: Optional[int],
    output: Optional[str],
    json: bool,
    csv_output: bool,
    raw: bool
):
    """Analyze word and phrase density of a file, URL, or stdin"""
    cfg = dict(cfg, **{
        k: v for k, v in (
            ("group_size", group_size),
            ("min_count", min_count),
            ("case_sensitive", case_sensitive),
            ("top", top),
        ) if v is not None
    })
    quiet = json or csv_output or raw

    try:
        options = analyze_options(cfg)
        content = read_source(source, timeout=cfg["timeout"])
        if as_html is None:
            as_html = looks_like_html(source, content)

        if not quiet:
            console.print(f"[cyan]Analyzing:[/] {source or 'stdin'}")

        if as_html:
            result = analyze_html(content, options)
        else:
            result = analyze_text(content, options)

        words = filter_words(result.words, search, options.case_sensitive)
        words = sort_words(words, sort_key, "asc" if asc else "desc")
    except WordAnalysisError as e:
        fail(str(e))

    limit = cfg["top"]
    if limit and limit > 0:
        words = words[:limit]

    if json:
        data = result.to_dict()
        data["words"] = [w.to_dict() for w in words]
        handle_output(data, source, output, json_output=True)
    elif csv_output:
        save_path = output
        if output and os.path.isdir(output):
            save_path = os.path.join(output, export_filename(source))
        handle_output(
            words_to_csv(words), source, save_path, raw_output=True, encoding="utf-8-sig"
        )
    elif raw:
        lines = "\n".join(f"{w.text} ({w.count}x, {w.density:.2f}%)" for w in words)
        handle_output(lines, source, output, raw_output=True)
    else:
        ranges = density_ranges(cfg)
        handle_output(render_result(result, words, ranges, source), source, output)


# Detect command
@cli.command()
@click.argument('source', required=False)
@click.option('--html/--text', 'as_html', default=None, help='Treat input as HTML markup (auto-detected)')
@click.option('--json', is_flag=True, help='Output results as JSON')
@click.pass_obj
def detect(
    cfg: Dict[str, Any],
    source: Optional[str],
    as_html: Optional[bool],
    json: bool
):
    """Detect the language of a file, URL, or stdin"""
    try:
        content = read_source(source, timeout=cfg["timeout"])
    except WordAnalysisError as e:
        fail(str(e))

    if as_html is None:
        as_html = looks_like_html(source, content)
    text = extract_page(content).text if as_html else content

    detection = detect_language(text)
    if json:
        handle_output({
            "language": detection.language,
            "confidence": round(detection.confidence, 4),
            "scores": detection.scores,
        }, source, json_output=True)
        return

    table = Table(title="Language Scores", box=box.ROUNDED)
    table.add_column("Code", style="cyan")
    table.add_column("Language", style="green")
    table.add_column("Score", justify="right")
    names = supported_languages()
    for code, score in sorted(detection.scores.items(), key=lambda x: -x[1]):
        table.add_row(code, names[code], f"{score:g}")

    console.print(
        f"[cyan]Detected:[/] {names[detection.language]} "
        f"({detection.language}, confidence {detection.confidence:.2f})"
    )
    console.print(table)


# List command group for various listings
@cli.group(name="list")
def list_group():
    """List available options and capabilities"""
    pass


@list_group.command(name="languages")
@click.option('--json', is_flag=True, help='Output results as JSON')
def list_languages(json: bool):
    """List languages with rule tables"""
    languages = supported_languages()

    if json:
        click.echo(j.dumps(languages, indent=4, ensure_ascii=False))
        return

    table = Table(title="Supported Languages", box=box.ROUNDED)
    table.add_column("Code", style="cyan")
    table.add_column("Language", style="green")
    for code, name in sorted(languages.items(), key=lambda x: x[1]):
        table.add_row(code, name)
    console.print(table)


def main():
    try:
        cli()
    except Exception as e:
        console.print(f"[bold red]Error:[/] {str(e)}")
        if '--debug' in sys.argv:
            import traceback
            console.print(traceback.format_exc())
        sys.exit(1)


if __name__ == "__main__":
    main()
