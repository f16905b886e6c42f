#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# File: report.py
# Author: Wadih Khairallah
# Description: Views over analysis results: search, sort, density bands
# Created: 2026-10-14 14:05:33
# Modified: 2026-10-19 10:31:07

import csv
import io
import re
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional
from urllib.parse import urlparse

from wordlens.errors import InvalidOptionsError
from wordlens.models import AnalysisResult, DensityRanges, WordCount

UNDER_OPTIMIZED = "under-optimized"
OPTIMAL = "optimal"
OVER_OPTIMIZED = "over-optimized"

SORT_KEYS = ("text", "count", "density")
SORT_DIRECTIONS = ("asc", "desc")

CSV_HEADER = ("Word/Phrase", "Count", "Density")
_RESERVED_NAMES = re.compile(r"^(con|prn|aux|nul|com[1-9]|lpt[1-9])$", re.I)


def density_category(density: float, ranges: Optional[DensityRanges] = None) -> str:
    """
    Place a density value in its keyword-density band.

    Args:
        density (float): Density percentage
        ranges (DensityRanges): Band limits, defaults 0.5% and 2.0%

    Returns:
        str: "under-optimized", "optimal" or "over-optimized"
    """
    ranges = ranges or DensityRanges()
    if density <= ranges.under_optimized:
        return UNDER_OPTIMIZED
    if density <= ranges.optimal_max:
        return OPTIMAL
    return OVER_OPTIMIZED


def filter_words(
    words: List[WordCount],
    term: Optional[str],
    case_sensitive: bool = False,
) -> List[WordCount]:
    if not term:
        return list(words)
    if not case_sensitive:
        term = term.lower()
        return [w for w in words if term in w.text.lower()]
    return [w for w in words if term in w.text]


def sort_words(
    words: List[WordCount],
    key: str = "count",
    direction: str = "desc",
) -> List[WordCount]:
    """
    Sort rows by text, count or density.

    Args:
        words (List[WordCount]): Rows to sort
        key (str): "text", "count" or "density"
        direction (str): "asc" or "desc"

    Returns:
        List[WordCount]: New sorted list; equal keys keep their order

    Raises:
        InvalidOptionsError: Unknown key or direction
    """
    if key not in SORT_KEYS:
        raise InvalidOptionsError(f"Invalid sort key: {key}")
    if direction not in SORT_DIRECTIONS:
        raise InvalidOptionsError(f"Invalid sort direction: {direction}")

    if key == "text":
        sort_key = lambda w: w.text.casefold()
    else:
        sort_key = lambda w: getattr(w, key)
    return sorted(words, key=sort_key, reverse=direction == "desc")


def top_by_density(words: List[WordCount], limit: int = 15) -> List[WordCount]:
    return sort_words(words, "density", "desc")[:limit]


def quick_metrics(result: AnalysisResult) -> Dict[str, str]:
    """Headline figures for a result, formatted for display."""
    return {
        "Total Words": str(result.total_words),
        "Unique Words": str(result.unique_words),
        "Avg Word Length": f"{result.avg_word_length:.1f}",
        "Reading Time": f"{result.reading_time} min",
        "Text/HTML Ratio": f"{result.text_html_ratio}%",
    }


def words_to_csv(words: List[WordCount]) -> str:
    """
    Render rows as CSV text with a Word/Phrase, Count, Density header.

    Args:
        words (List[WordCount]): Rows in the order they should appear

    Returns:
        str: CSV text, newline separated, densities with two decimals
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for word in words:
        writer.writerow([word.text, word.count, f"{word.density:.2f}"])
    return buffer.getvalue()


def export_slug(source: Optional[str], max_length: int = 50) -> str:
    """
    File-name safe slug for a URL or file path.

    URLs use host and path ("example.com/blog/" becomes "example-com-blog"),
    files use their stem, and stdin gives "page". Windows device names get a
    "site-" prefix.
    """
    host = ""
    if source and source.lower().startswith(("http://", "https://")):
        parsed = urlparse(source)
        host = (parsed.hostname or "").lower()
        raw = host + parsed.path
    elif source and source != "-":
        raw = Path(source).stem
    else:
        raw = ""

    slug = re.sub(r"/{2,}", "/", raw).lower()
    slug = re.sub(r"[^a-z0-9/]", "-", slug)
    slug = re.sub(r"-+", "-", slug)
    slug = slug.rstrip("/").strip("-").replace("/", "-")
    if not slug:
        slug = host or "page"
    if _RESERVED_NAMES.match(slug):
        slug = f"site-{slug}"
    return slug[:max_length]


def export_filename(source: Optional[str], now: Optional[datetime] = None) -> str:
    """Default CSV name: keywords-<slug>-<YYYY-MM-DD>-<HH-MM-SS>.csv"""
    now = now or datetime.now()
    return f"keywords-{export_slug(source)}-{now:%Y-%m-%d}-{now:%H-%M-%S}.csv"
