#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# File: detect.py
# Author: Wadih Khairallah
# Description: Heuristic language identification over the rule tables
# Created: 2026-10-12 11:37:50
# Modified: 2026-10-18 16:40:12

import re
import logging
import unicodedata
from typing import Dict

from wordlens.languages import LANGUAGE_RULES, DEFAULT_LANGUAGE
from wordlens.models import DetectionResult

logger = logging.getLogger(__name__)

# Any of these anywhere in the text disables the plain-ASCII English prior.
SPECIAL_CHARS = re.compile(
    r"[áéíóúñ¿¡àèìòùãõçâêôąćęłńśźżëîïûüÿœæäöß]",
    re.IGNORECASE,
)

WORD_WEIGHT = 1.5
ASCII_ENGLISH_BONUS = 0.5
EMPTY_CONFIDENCE = 0.25


def detect_language(text: str) -> DetectionResult:
    """
    Score text against every known language and pick the best match.

    Each language earns its signature weight per character-class match
    and 1.5x the table weight of every frequent word it recognizes. Text
    with no diacritics at all gives English half a point per word. Ties go
    to the language listed first in the rule table.

    Args:
        text (str): Visible page text.

    Returns:
        DetectionResult: Winning language code, confidence in [0, 1] and
        the raw per-language scores.
    """
    text = unicodedata.normalize("NFC", text or "")
    scores: Dict[str, float] = {code: 0.0 for code in LANGUAGE_RULES}

    for code, rules in LANGUAGE_RULES.items():
        hits = len(rules.signature.findall(text))
        scores[code] += hits * rules.signature_weight

    words = text.lower().split()
    for word in words:
        for code, rules in LANGUAGE_RULES.items():
            weight = rules.word_frequencies.get(word)
            if weight:
                scores[code] += weight * WORD_WEIGHT

    if not SPECIAL_CHARS.search(text):
        scores[DEFAULT_LANGUAGE] += len(words) * ASCII_ENGLISH_BONUS

    language = max(scores, key=scores.get)
    total = sum(scores.values())
    confidence = scores[language] / total if total > 0 else EMPTY_CONFIDENCE

    logger.debug(f"Language scores: {scores}")
    return DetectionResult(language=language, confidence=confidence, scores=scores)
