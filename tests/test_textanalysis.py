#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# File: test_textanalysis.py
# Description: Tests for normalization, tokenization, n-grams and analyze()
# Created: 2026-10-16
# Modified: 2026-10-19 11:02:45

import unicodedata
import unittest
from unittest import mock

from pydantic import ValidationError

from wordlens.errors import (
    AnalysisFailedError,
    InputTooLargeError,
    InvalidOptionsError,
    TEXT_ANALYSIS_ERROR,
    VALIDATION_ERROR,
)
from wordlens.languages import get_rules
from wordlens.models import AnalysisResult, AnalyzeOptions
from wordlens.textanalysis import (
    MAX_TEXT_LENGTH,
    analyze,
    calculate_densities,
    extract_ngrams,
    filter_ngrams,
    normalize_text,
    tokenize_text,
)

EN = get_rules("en")

SAMPLE = (
    "Keyword density tools measure how often a keyword phrase appears on a page. "
    "A keyword density tool counts every phrase and reports the density of each "
    "keyword phrase. Search engines read the page text, and keyword density tools "
    "read the same page text to count each keyword phrase again."
)


def nfd(s):
    return unicodedata.normalize("NFD", s)


class NormalizeTextTest(unittest.TestCase):

    def test_lowercases_unless_case_sensitive(self):
        self.assertEqual(normalize_text("Big Cat", EN), "big cat")
        self.assertEqual(normalize_text("Big Cat", EN, case_sensitive=True), "Big Cat")

    def test_output_is_nfd(self):
        text = normalize_text("café", get_rules("fr"))
        self.assertEqual(text, nfd("café"))

    def test_english_contractions(self):
        self.assertEqual(normalize_text("Don't stop", EN), "do not stop")
        self.assertEqual(normalize_text("It's here", EN), "it is here")
        self.assertEqual(normalize_text("we'll see", EN), "we will see")

    def test_contractions_with_case_kept(self):
        self.assertEqual(normalize_text("Don't", EN, case_sensitive=True), "Do not")
        self.assertEqual(normalize_text("DON'T", EN, case_sensitive=True), "DON'T")

    def test_french_elision(self):
        text = normalize_text("L'homme qu'il voit", get_rules("fr"))
        self.assertEqual(text, "le homme que il voit")

    def test_italian_elision(self):
        text = normalize_text("la storia dell'arte", get_rules("it"))
        self.assertEqual(text, "la storia de la arte")

    def test_spanish_whole_word_contraction(self):
        text = normalize_text("voy al mercado del pueblo", get_rules("es"))
        self.assertEqual(text, "voy a el mercado de el pueblo")

    def test_portuguese_contraction_keeps_longer_words(self):
        text = normalize_text("dados do sistema", get_rules("pt"))
        self.assertEqual(text, "dados de o sistema")

    def test_german_compound_joiner(self):
        text = normalize_text("Das E-Mail-Konto", get_rules("de"))
        self.assertEqual(text, "das emailkonto")

    def test_hyphen_kept_outside_german(self):
        self.assertEqual(normalize_text("e-mail", EN), "e-mail")


class TokenizeTextTest(unittest.TestCase):

    def test_strips_edge_punctuation(self):
        tokens = tokenize_text("hello, world (test) [done].", EN)
        self.assertEqual(tokens, ["hello", "world", "test", "done"])

    def test_keeps_inner_hyphens_and_apostrophes(self):
        tokens = tokenize_text("well-known rock'n'roll", EN)
        self.assertEqual(tokens, ["well-known", "rock'n'roll"])

    def test_quotes_and_guillemets(self):
        tokens = tokenize_text("«bonjour» “quoted” ‘single’", EN)
        self.assertEqual(tokens, ["bonjour", "quoted", "single"])

    def test_collapses_unusual_whitespace(self):
        tokens = tokenize_text("foo\u00a0bar\u200bbaz\t\nqux", EN)
        self.assertEqual(tokens, ["foo", "bar", "baz", "qux"])

    def test_admissible_tokens(self):
        long_word = "x" * 51
        tokens = tokenize_text(f"a x 123 12ab {long_word} ok", EN)
        self.assertEqual(tokens, ["a", "12ab", "ok"])

    def test_single_letters_follow_language(self):
        self.assertEqual(tokenize_text("w domu", get_rules("pl")), ["w", "domu"])
        self.assertEqual(tokenize_text("w domu", EN), ["domu"])

    def test_drop_short_stop_words(self):
        tokens = tokenize_text("the cat is about here", EN, keep_stop_words=False)
        self.assertEqual(tokens, ["cat", "about", "here"])

    def test_empty(self):
        self.assertEqual(tokenize_text("", EN), [])
        self.assertEqual(tokenize_text(" ... ", EN), [])


class ExtractNgramsTest(unittest.TestCase):

    def test_unigrams(self):
        counts = extract_ngrams(["cat", "cat", "dog", "cat"], 1)
        self.assertEqual(counts, {"cat": 3, "dog": 1})

    def test_bigrams_in_first_occurrence_order(self):
        counts = extract_ngrams(["a1", "b1", "c1", "a1", "b1"], 2)
        self.assertEqual(list(counts), ["a1 b1", "b1 c1", "c1 a1"])
        self.assertEqual(counts["a1 b1"], 2)

    def test_empty_or_invalid(self):
        self.assertEqual(extract_ngrams([], 2), {})
        self.assertEqual(extract_ngrams(["a1", "b1"], 0), {})
        self.assertEqual(extract_ngrams(["a1", "b1"], 3), {})

    def test_windows_across_chunk_boundaries(self):
        """Chunking never drops or double counts a window"""
        tokens = [f"t{i}" for i in range(11)]
        for group_size in range(1, 6):
            expected = extract_ngrams(tokens, group_size)
            with mock.patch("wordlens.textanalysis.CHUNK_SIZE", 3):
                chunked = extract_ngrams(tokens, group_size)
            self.assertEqual(chunked, expected)
            self.assertEqual(sum(chunked.values()), len(tokens) - group_size + 1)


class FilterAndDensityTest(unittest.TestCase):

    def test_filter_unigram_stop_words(self):
        counts = {"the": 5, "cat": 3, "about": 2, "x": 2}
        self.assertEqual(filter_ngrams(counts, 1, EN), {"cat": 3, "about": 2})

    def test_filter_wrong_length(self):
        self.assertEqual(filter_ngrams({"big cat": 2, "cat": 2}, 2, EN), {"big cat": 2})

    def test_filter_case_sensitive_multi_word_stop(self):
        counts = {"In The": 2}
        self.assertEqual(filter_ngrams(counts, 2, EN, case_sensitive=True), {"In The": 2})
        self.assertEqual(filter_ngrams(counts, 2, EN), {})

    def test_densities(self):
        rows = calculate_densities({"a1": 2, "b1": 5, "c1": 2, "d1": 1}, 10, 1, 2)
        self.assertEqual([r.text for r in rows], ["b1", "a1", "c1"])
        self.assertEqual(rows[0].density, 50.0)
        self.assertEqual(rows[1].density, 20.0)

    def test_density_uses_window_count(self):
        rows = calculate_densities({"big cat": 1}, 3, 2, 1)
        self.assertEqual(rows[0].density, 50.0)

    def test_density_denominator_never_zero(self):
        rows = calculate_densities({"big cat": 1}, 0, 2, 1)
        self.assertEqual(rows[0].density, 100.0)


class AnalyzeOptionsTest(unittest.TestCase):

    def test_defaults(self):
        options = AnalyzeOptions.coerce(None)
        self.assertEqual(options, AnalyzeOptions(group_size=1, min_count=2, case_sensitive=False))

    def test_snake_and_camel_keys(self):
        options = AnalyzeOptions.coerce({"groupSize": 3, "min_count": 4, "caseSensitive": True})
        self.assertEqual(options.group_size, 3)
        self.assertEqual(options.min_count, 4)
        self.assertTrue(options.case_sensitive)

    def test_instance_passes_through(self):
        options = AnalyzeOptions(group_size=2)
        self.assertIs(AnalyzeOptions.coerce(options), options)

    def test_frozen(self):
        options = AnalyzeOptions()
        with self.assertRaises(ValidationError):
            options.group_size = 4

    def test_readable_messages(self):
        cases = [
            ({"groupSize": 6}, "Group size must be between 1 and 5"),
            ({"groupSize": 1.5}, "Group size must be an integer"),
            ({"minCount": 0}, "Minimum count must be greater than 0"),
            ({"min_count": "3"}, "Minimum count must be an integer"),
            ({"caseSensitive": 1}, "Case sensitivity must be a boolean"),
            ({"colour": "red"}, "Unknown option: colour"),
        ]
        for options, message in cases:
            with self.assertRaises(InvalidOptionsError) as ctx:
                AnalyzeOptions.coerce(options)
            self.assertEqual(str(ctx.exception), message)
            self.assertIsInstance(ctx.exception.__cause__, ValidationError)

    def test_direct_construction_validates(self):
        with self.assertRaises(ValidationError):
            AnalyzeOptions(group_size=0)


class AnalyzeTest(unittest.TestCase):

    def test_single_words(self):
        result = analyze("cat cat dog cat", {"groupSize": 1, "minCount": 2, "caseSensitive": False})
        self.assertEqual(result.total_words, 4)
        self.assertEqual([w.to_dict() for w in result.words], [
            {"text": "cat", "count": 3, "density": 75.0},
        ])
        self.assertEqual(result.unique_words, 2)
        self.assertEqual(result.avg_word_length, 3.0)
        self.assertEqual(result.reading_time, 1)
        self.assertEqual(result.language, "en")

    def test_bigram_rejection(self):
        result = analyze("the cat and the dog", AnalyzeOptions(group_size=2, min_count=1))
        self.assertEqual([w.text for w in result.words], ["the cat", "cat and", "the dog"])
        self.assertTrue(all(w.density == 25.0 for w in result.words))

    def test_language_detection(self):
        result = analyze("the quick brown fox the lazy dog the", {"minCount": 1})
        self.assertEqual(result.language, "en")
        self.assertGreater(result.confidence, 0.5)

    def test_spanish_text(self):
        text = "El niño come la manzana. La manzana es roja y el niño está feliz."
        result = analyze(text)
        self.assertEqual(result.language, "es")
        self.assertEqual(result.total_words, 14)
        self.assertEqual([w.text for w in result.words], [nfd("niño"), "manzana"])
        self.assertEqual(result.words[0].density, 14.29)

    def test_german_compounds_join(self):
        text = "Das E-Mail-Konto ist neu. Das E-Mail-Konto ist gut. Über die Straße."
        result = analyze(text)
        self.assertEqual(result.language, "de")
        self.assertIn("emailkonto", [w.text for w in result.words])

    def test_case_sensitive(self):
        folded = analyze("Apple apple Apple", {"minCount": 1})
        self.assertEqual([(w.text, w.count) for w in folded.words], [("apple", 3)])
        kept = analyze("Apple apple Apple", {"minCount": 1, "caseSensitive": True})
        self.assertEqual([(w.text, w.count) for w in kept.words], [("Apple", 2), ("apple", 1)])

    def test_idempotent(self):
        options = {"groupSize": 2, "minCount": 1}
        self.assertEqual(analyze(SAMPLE, options, 40), analyze(SAMPLE, options, 40))

    def test_row_invariants(self):
        """Counts, group sizes and densities hold for every group size"""
        for group_size in range(1, 6):
            for min_count in (1, 2, 3):
                result = analyze(SAMPLE, {"groupSize": group_size, "minCount": min_count})
                windows = max(1, result.total_words - group_size + 1)
                for word in result.words:
                    self.assertGreaterEqual(word.count, min_count)
                    self.assertEqual(len(word.text.split(" ")), group_size)
                    self.assertGreaterEqual(word.density, 0)
                    self.assertLessEqual(word.density, 100)
                    self.assertEqual(word.density, round(word.count / windows * 100, 2))
                counts = [w.count for w in result.words]
                self.assertEqual(counts, sorted(counts, reverse=True))

    def test_keyword_phrase_found(self):
        result = analyze(SAMPLE, {"groupSize": 2})
        texts = [w.text for w in result.words]
        self.assertIn("keyword density", texts)
        self.assertIn("keyword phrase", texts)
        self.assertNotIn("of each", texts)

    def test_empty_input(self):
        expected = {
            "words": [],
            "totalWords": 0,
            "uniqueWords": 0,
            "avgWordLength": 0,
            "readingTime": 0,
            "textHtmlRatio": 0,
        }
        self.assertEqual(analyze("", {}, 0).to_dict(), expected)
        self.assertEqual(analyze("  \n\t ").to_dict(), expected)
        self.assertEqual(analyze(None).to_dict(), expected)

    def test_punctuation_only_input(self):
        result = analyze("... ,,, ---", None, 12)
        self.assertEqual(result, AnalysisResult.empty(12))

    def test_ratio_passes_through(self):
        self.assertEqual(analyze("cat cat", None, 37.5).text_html_ratio, 37.5)
        self.assertEqual(analyze("", None, 37.5).text_html_ratio, 37.5)

    def test_optional_keys_in_public_shape(self):
        data = analyze("cat cat").to_dict()
        self.assertEqual(data["language"], "en")
        self.assertIn("confidence", data)
        self.assertNotIn("title", data)
        self.assertNotIn("headings", data)

    def test_invalid_group_size(self):
        for bad in (0, 6, -1):
            with self.assertRaises(InvalidOptionsError) as ctx:
                analyze("cat cat", {"groupSize": bad})
            self.assertEqual(ctx.exception.code, VALIDATION_ERROR)

    def test_invalid_min_count(self):
        with self.assertRaises(InvalidOptionsError):
            analyze("cat cat", {"minCount": 0})

    def test_invalid_option_types(self):
        with self.assertRaises(InvalidOptionsError):
            analyze("cat cat", {"groupSize": True})
        with self.assertRaises(InvalidOptionsError):
            analyze("cat cat", {"groupSize": "2"})
        with self.assertRaises(InvalidOptionsError):
            analyze("cat cat", {"caseSensitive": "yes"})
        with self.assertRaises(InvalidOptionsError):
            analyze("cat cat", {"colour": "red"})
        with self.assertRaises(InvalidOptionsError):
            analyze("cat cat", 5)

    def test_validation_precedes_empty_check(self):
        with self.assertRaises(InvalidOptionsError):
            analyze("", {"groupSize": 6})

    def test_input_too_large(self):
        with self.assertRaises(InputTooLargeError) as ctx:
            analyze("x" * (MAX_TEXT_LENGTH + 1))
        self.assertEqual(ctx.exception.code, TEXT_ANALYSIS_ERROR)

    def test_input_at_limit_is_accepted(self):
        result = analyze("ab " * (MAX_TEXT_LENGTH // 3))
        self.assertEqual(result.total_words, MAX_TEXT_LENGTH // 3)

    def test_unexpected_failure_is_wrapped(self):
        with mock.patch(
            "wordlens.textanalysis.extract_ngrams",
            side_effect=RuntimeError("boom"),
        ):
            with self.assertRaises(AnalysisFailedError) as ctx:
                analyze("cat cat dog")
        self.assertEqual(str(ctx.exception), "Failed to analyze text: boom")
        self.assertIsInstance(ctx.exception.__cause__, RuntimeError)

    def test_on_event_observer(self):
        events = []
        analyze("cat cat dog cat", on_event=events.append)
        self.assertTrue(events)
        self.assertTrue(events[0].startswith("Detected language en"))
        self.assertTrue(any("Tokenized 4 words" in e for e in events))

    def test_no_events_for_empty_input(self):
        events = []
        analyze("", on_event=events.append)
        self.assertEqual(events, [])


if __name__ == "__main__":
    unittest.main()
