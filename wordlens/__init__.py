#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# File: __init__.py
# Author: Wadih Khairallah
# Description: 
# Created: 2026-10-12 09:58:14
# Modified: 2026-10-19 11:40:52

from .__version__ import __version__
from .errors import (
    WordAnalysisError,
    InputTooLargeError,
    InvalidOptionsError,
    AnalysisFailedError,
    SourceError,
    ConfigError,
)
from .models import (
    AnalyzeOptions,
    AnalysisResult,
    WordCount,
    DetectionResult,
    DensityRanges,
)
from .languages import (
    LanguageRules,
    get_rules,
    supported_languages,
)
from .detect import detect_language
from .textanalysis import (
    analyze,
    normalize_text,
    tokenize_text,
    extract_ngrams,
    filter_ngrams,
    calculate_densities,
)
from .textextract import (
    extract_page,
    analyze_html,
    text_from_html,
    text_from_url,
)
from .report import (
    density_category,
    filter_words,
    sort_words,
    top_by_density,
    quick_metrics,
    words_to_csv,
    export_filename,
)

__all__ = [
    "__version__",
    "WordAnalysisError",
    "InputTooLargeError",
    "InvalidOptionsError",
    "AnalysisFailedError",
    "SourceError",
    "ConfigError",
    "AnalyzeOptions",
    "AnalysisResult",
    "WordCount",
    "DetectionResult",
    "DensityRanges",
    "LanguageRules",
    "get_rules",
    "supported_languages",
    "detect_language",
    "analyze",
    "normalize_text",
    "tokenize_text",
    "extract_ngrams",
    "filter_ngrams",
    "calculate_densities",
    "extract_page",
    "analyze_html",
    "text_from_html",
    "text_from_url",
    "density_category",
    "filter_words",
    "sort_words",
    "top_by_density",
    "quick_metrics",
    "words_to_csv",
    "export_filename"
]
