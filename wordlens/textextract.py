#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# File: textextract.py
# Author: Wadih Khairallah
# Description: Visible text, headings and text/HTML ratio from pages
# Created: 2026-10-13 08:51:19
# Modified: 2026-10-18 18:27:54

import os
import re
import sys
import random
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union
from urllib.parse import urlparse

import requests
from bs4 import BeautifulSoup

from wordlens.errors import SourceError
from wordlens.models import AnalysisResult, AnalyzeOptions
from wordlens.textanalysis import EventCallback, analyze

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10

USER_AGENTS = [
    # Desktop
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 13_3) AppleWebKit/605.1.15 (KHTML, like Gecko) Version/16.0 Safari/605.1.15",
    "Mozilla/5.0 (X11; Linux x86_64) Gecko/20100101 Firefox/115.0",
]

INVISIBLE_TAGS = ["script", "style", "noscript", "iframe", "template", "svg", "head"]
HIDDEN_STYLE = re.compile(r"display\s*:\s*none|visibility\s*:\s*hidden", re.IGNORECASE)
HTML_SUFFIXES = (".htm", ".html", ".xhtml")


@dataclass
class PageContent:
    text: str
    text_html_ratio: int
    title: str = ""
    headings: List[str] = field(default_factory=list)


def generate_http_headers(url: str) -> Dict[str, str]:
    parsed = urlparse(url)
    return {
        "User-Agent": random.choice(USER_AGENTS),
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        "Accept-Language": "en-US,en;q=0.9",
        "Referer": f"{parsed.scheme}://{parsed.netloc}/",
    }


def clean_path(
    path: str
) -> Optional[str]:
    """
    Normalize and validate a filesystem path.

    Args:
        path (str): Input file path.

    Returns:
        Optional[str]: Absolute path if valid; None otherwise.
    """
    if is_url(path):
        return path

    p = os.path.expanduser(path)
    p = os.path.abspath(p)
    if os.path.isfile(p):
        return p
    return None


def is_url(s: str) -> bool:
    """
    Check if a string is a valid HTTP/HTTPS URL.

    Args:
        s (str): String to check

    Returns:
        bool: True if valid URL, False otherwise
    """
    parsed = urlparse(s)
    return parsed.scheme in {"http", "https"} and bool(parsed.netloc)


def looks_like_html(source: Optional[str], content: str) -> bool:
    if source and (is_url(source) or source.lower().endswith(HTML_SUFFIXES)):
        return True
    head = content.lstrip()[:512].lower()
    return head.startswith("<!doctype html") or "<html" in head


def collapse_whitespace(text: str) -> str:
    return re.sub(r"\s+", " ", text or "").strip()


def text_html_ratio(text: str, html: str) -> int:
    """
    Percentage of the page markup that is visible text.

    Args:
        text (str): Visible text
        html (str): Full page markup

    Returns:
        int: Rounded percentage, 0 for empty markup
    """
    clean_html = collapse_whitespace(html)
    if not clean_html:
        return 0
    return round(len(collapse_whitespace(text)) / len(clean_html) * 100)


def _is_hidden(tag) -> bool:
    if tag.has_attr("hidden") or tag.get("aria-hidden") == "true":
        return True
    return bool(HIDDEN_STYLE.search(tag.get("style", "")))


def extract_page(html: str) -> PageContent:
    """
    Extract the title, headings and visible text of an HTML document.

    Args:
        html (str): HTML source

    Returns:
        PageContent: Visible text, text/HTML ratio, title and h1-h6 texts
    """
    soup = BeautifulSoup(html, "html.parser")

    title = soup.title.get_text(strip=True) if soup.title else ""

    headings = [
        collapse_whitespace(h.get_text(" "))
        for h in soup.find_all(["h1", "h2", "h3", "h4", "h5", "h6"])
    ]
    headings = [h for h in headings if h]

    for tag in soup(INVISIBLE_TAGS) + soup.find_all(_is_hidden):
        # Nested matches go away with their parent.
        if not tag.decomposed:
            tag.decompose()

    text = collapse_whitespace(soup.get_text(separator=" "))

    return PageContent(
        text=text,
        text_html_ratio=text_html_ratio(text, html),
        title=title,
        headings=headings,
    )


def text_from_html(html: str) -> str:
    return extract_page(html).text


def text_from_url(
    url: str,
    timeout: float = DEFAULT_TIMEOUT
) -> str:
    """
    Download the raw markup of a web page.

    Args:
        url (str): Target URL.
        timeout (float): Request timeout in seconds.

    Returns:
        str: Response body.

    Raises:
        SourceError: The request failed or returned an error status.
    """
    headers = generate_http_headers(url)
    try:
        response = requests.get(url, headers=headers, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        logger.warning(f"Fetching {url} failed: {e}")
        raise SourceError(f"Could not fetch {url}: {e}") from e
    return response.text


def read_source(
    source: Optional[str],
    timeout: float = DEFAULT_TIMEOUT
) -> str:
    """
    Read raw content from a URL, a file path or stdin ("-" or None).

    Args:
        source (str): URL, path, "-" or None
        timeout (float): Request timeout for URLs

    Returns:
        str: Raw content

    Raises:
        SourceError: Nothing could be read
    """
    if source in (None, "-"):
        if sys.stdin.isatty():
            raise SourceError("No input source provided.")
        return sys.stdin.read()

    if is_url(source):
        return text_from_url(source, timeout=timeout)

    path = clean_path(source)
    if not path:
        raise SourceError(f"Invalid path '{source}'")
    try:
        with open(path, "r", encoding="utf-8", errors="ignore") as f:
            return f.read()
    except OSError as e:
        raise SourceError(f"Could not read {path}: {e}") from e


def analyze_html(
    html: str,
    options: Union[AnalyzeOptions, Mapping[str, Any], None] = None,
    on_event: Optional[EventCallback] = None,
) -> AnalysisResult:
    """
    Analyze the visible text of an HTML page.

    Args:
        html (str): Page markup
        options (AnalyzeOptions | Mapping): Analysis options
        on_event (Callable): Optional progress observer

    Returns:
        AnalysisResult: Engine result with title and headings attached
    """
    page = extract_page(html)
    result = analyze(page.text, options, page.text_html_ratio, on_event=on_event)
    result.title = page.title
    result.headings = page.headings
    return result
