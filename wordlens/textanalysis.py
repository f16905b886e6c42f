"""
Text Analysis Module

Word and phrase frequency/density analysis for page text in any of the
languages known to the rule tables.
"""

import re
import math
import logging
import unicodedata
from typing import Any, Callable, Dict, List, Mapping, Optional, Union
from collections import Counter

from nltk.util import ngrams

from wordlens.detect import detect_language
from wordlens.errors import (
    AnalysisFailedError,
    InputTooLargeError,
    WordAnalysisError,
)
from wordlens.languages import WORD_CHAR, LanguageRules, contraction_pattern, get_rules
from wordlens.models import AnalysisResult, AnalyzeOptions, WordCount

# Setup logger
logger = logging.getLogger(__name__)

CHUNK_SIZE = 100_000
MAX_TEXT_LENGTH = 1_000_000
MIN_WORD_LENGTH = 2
MAX_WORD_LENGTH = 50
WORDS_PER_MINUTE = 200

EventCallback = Callable[[str], None]

_DROPPED_MARKS = re.compile(r"[\u00bf\u00a1\u00ab\u00bb\u2039\u203a]")
_SINGLE_QUOTES = re.compile(r"[\u2018\u2019\u201a\u201b]")
_DOUBLE_QUOTES = re.compile(r"[\u201c\u201d\u201e\u201f]")
_EDGE_PUNCT = re.compile(
    rf"(?<!{WORD_CHAR})[-.,:;'\"()\[\]{{}}]+|[-.,:;'\"()\[\]{{}}]+(?!{WORD_CHAR})"
)
_WHITESPACE = re.compile(r"[\s\u00a0\u200b]+")
_DIGITS = re.compile(r"^\d+$")


def normalize_text(text: str, rules: LanguageRules, case_sensitive: bool = False) -> str:
    """
    Prepare raw text for tokenization in the given language.

    Args:
        text (str): Raw page text
        rules (LanguageRules): Rules of the detected language
        case_sensitive (bool): Keep original casing

    Returns:
        str: NFD text with contractions expanded and compound joiners removed
    """
    normalized = text if case_sensitive else text.lower()
    normalized = unicodedata.normalize("NFD", normalized)

    flags = 0 if case_sensitive else re.IGNORECASE
    for contraction, expansion in rules.contractions:
        normalized = re.sub(
            contraction_pattern(contraction),
            unicodedata.normalize("NFD", expansion),
            normalized,
            flags=flags,
        )

    if rules.compound_joiner is not None:
        normalized = rules.compound_joiner.sub("", normalized)

    return normalized


def is_admissible(word: str, rules: LanguageRules) -> bool:
    if len(word) == 1:
        return rules.is_valid_single_letter(word)
    if len(word) < MIN_WORD_LENGTH or len(word) > MAX_WORD_LENGTH:
        return False
    return not _DIGITS.match(word)


def tokenize_text(
    text: str,
    rules: LanguageRules,
    case_sensitive: bool = False,
    keep_stop_words: bool = True,
) -> List[str]:
    """
    Split normalized text into admissible tokens.

    Args:
        text (str): Output of normalize_text()
        rules (LanguageRules): Rules of the detected language
        case_sensitive (bool): Compare stop words with original casing
        keep_stop_words (bool): When False, short stop words are dropped

    Returns:
        List[str]: Tokens in reading order
    """
    text = _DROPPED_MARKS.sub(" ", text)
    text = _SINGLE_QUOTES.sub("'", text)
    text = _DOUBLE_QUOTES.sub('"', text)
    text = _EDGE_PUNCT.sub(" ", text)
    text = _WHITESPACE.sub(" ", text).strip()
    if not text:
        return []

    tokens = [w for w in text.split(" ") if is_admissible(w, rules)]
    if keep_stop_words:
        return tokens

    # Stop words longer than three characters still carry meaning.
    return [
        w for w in tokens
        if len(w) > 3 or not rules.is_stop_word(w, case_sensitive)
    ]


def extract_ngrams(tokens: List[str], group_size: int) -> Counter:
    """
    Count every window of `group_size` consecutive tokens.

    Tokens are read in chunks of CHUNK_SIZE windows. Each chunk carries the
    next group_size - 1 tokens so windows that straddle a boundary are kept.

    Args:
        tokens (List[str]): Full token stream
        group_size (int): Words per phrase

    Returns:
        Counter: Phrase -> occurrences, in order of first occurrence
    """
    counts: Counter = Counter()
    if group_size < 1 or not tokens:
        return counts

    overlap = group_size - 1
    for start in range(0, len(tokens), CHUNK_SIZE):
        chunk = tokens[start:start + CHUNK_SIZE + overlap]
        counts.update(" ".join(gram) for gram in ngrams(chunk, group_size))

    return counts


def is_valid_ngram(
    phrase: str,
    group_size: int,
    rules: LanguageRules,
    case_sensitive: bool = False,
) -> bool:
    """
    Decide whether a phrase is worth reporting in the given language.

    Args:
        phrase (str): Space-joined n-gram
        group_size (int): Expected number of words
        rules (LanguageRules): Rules of the detected language
        case_sensitive (bool): Compare with original casing

    Returns:
        bool: False for degenerate phrases
    """
    words = phrase.split(" ")
    if len(words) != group_size:
        return False

    folded = words if case_sensitive else [w.lower() for w in words]

    if group_size == 1:
        word = words[0]
        if folded[0] in rules.stop_words and len(word) <= 3:
            return False
        if len(word) == 1 and not rules.is_valid_single_letter(word):
            return False
        return True

    if rules.invalid_starters.match(folded[0]):
        return False
    if rules.common_phrase_endings.match(folded[-1]):
        return False

    for current, following in zip(folded, folded[1:]):
        if current == following:
            return False
        if current in rules.stop_words and following in rules.stop_words:
            return False
        if rules.articles.match(current) and rules.articles.match(following):
            return False

    if all(w in rules.stop_words for w in folded):
        return False

    key = phrase if case_sensitive else phrase.lower()
    return key not in rules.multi_word_stops


def filter_ngrams(
    counts: Mapping[str, int],
    group_size: int,
    rules: LanguageRules,
    case_sensitive: bool = False,
) -> Dict[str, int]:
    return {
        phrase: count
        for phrase, count in counts.items()
        if is_valid_ngram(phrase, group_size, rules, case_sensitive)
    }


def calculate_densities(
    counts: Mapping[str, int],
    total_tokens: int,
    group_size: int,
    min_count: int,
) -> List[WordCount]:
    """
    Turn phrase counts into density rows sorted by count.

    Args:
        counts (Mapping): Filtered phrase counts
        total_tokens (int): Size of the full token stream
        group_size (int): Words per phrase
        min_count (int): Rows below this count are dropped

    Returns:
        List[WordCount]: Rows, highest count first; equal counts keep
        first-occurrence order
    """
    windows = max(1, total_tokens - group_size + 1)
    rows = [
        WordCount(text=phrase, count=count, density=round(count / windows * 100, 2))
        for phrase, count in counts.items()
        if count >= min_count
    ]
    rows.sort(key=lambda row: -row.count)
    return rows


def _validate_input(text: str) -> None:
    if len(text) > MAX_TEXT_LENGTH:
        raise InputTooLargeError(
            f"Input text is too large (max {MAX_TEXT_LENGTH} characters)"
        )


def analyze(
    text: str,
    options: Union[AnalyzeOptions, Mapping[str, Any], None] = None,
    text_html_ratio: float = 0,
    on_event: Optional[EventCallback] = None,
) -> AnalysisResult:
    """
    Compute word or phrase frequency and density statistics for page text.

    Args:
        text (str): Visible page text, markup already removed
        options (AnalyzeOptions | Mapping): Group size, minimum count and
            case sensitivity
        text_html_ratio (float): Passed through to the result unchanged
        on_event (Callable): Optional observer for progress messages

    Returns:
        AnalysisResult: Sorted phrase rows and corpus statistics

    Raises:
        InvalidOptionsError: Options out of range
        InputTooLargeError: Text above MAX_TEXT_LENGTH characters
        AnalysisFailedError: Any unexpected failure while processing
    """
    text = text or ""
    options = AnalyzeOptions.coerce(options)
    _validate_input(text)

    def emit(message: str) -> None:
        logger.debug(message)
        if on_event is not None:
            on_event(message)

    if not text.strip():
        return AnalysisResult.empty(text_html_ratio)

    try:
        detection = detect_language(text)
        rules = get_rules(detection.language)
        emit(f"Detected language {detection.language} ({detection.confidence:.2f})")

        normalized = normalize_text(text, rules, options.case_sensitive)
        tokens = tokenize_text(normalized, rules, options.case_sensitive, keep_stop_words=True)
        if not tokens:
            return AnalysisResult.empty(text_html_ratio)
        emit(f"Tokenized {len(tokens)} words")

        total_words = len(tokens)
        avg_word_length = round(sum(len(w) for w in tokens) / total_words, 2)
        reading_time = math.ceil(total_words / WORDS_PER_MINUTE)

        raw_counts = extract_ngrams(tokens, options.group_size)
        valid_counts = filter_ngrams(
            raw_counts, options.group_size, rules, options.case_sensitive
        )
        emit(f"Kept {len(valid_counts)} of {len(raw_counts)} distinct phrases")

        filtered_tokens = tokenize_text(
            normalized, rules, options.case_sensitive, keep_stop_words=False
        )

        words = calculate_densities(
            valid_counts, total_words, options.group_size, options.min_count
        )
    except WordAnalysisError:
        raise
    except Exception as e:
        logger.error(f"Text analysis error: {e}")
        raise AnalysisFailedError(f"Failed to analyze text: {e}") from e

    return AnalysisResult(
        words=words,
        total_words=total_words,
        unique_words=len(set(filtered_tokens)),
        avg_word_length=avg_word_length,
        reading_time=reading_time,
        text_html_ratio=text_html_ratio,
        language=detection.language,
        confidence=round(detection.confidence, 4),
    )
