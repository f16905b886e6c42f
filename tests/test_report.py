#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# File: test_report.py
# Description: Tests for result views
# Created: 2026-10-17
# Modified: 2026-10-19 11:18:36

import csv
import io
import unittest
from datetime import datetime

from wordlens.errors import InvalidOptionsError
from wordlens.models import AnalysisResult, DensityRanges, WordCount
from wordlens.report import (
    OPTIMAL,
    OVER_OPTIMIZED,
    UNDER_OPTIMIZED,
    CSV_HEADER,
    density_category,
    export_filename,
    export_slug,
    filter_words,
    quick_metrics,
    sort_words,
    top_by_density,
    words_to_csv,
)

WORDS = [
    WordCount("keyword", 9, 4.5),
    WordCount("Density", 4, 2.0),
    WordCount("apple", 4, 0.4),
    WordCount("banana", 2, 1.0),
]


class DensityCategoryTest(unittest.TestCase):

    def test_default_bands(self):
        self.assertEqual(density_category(0.0), UNDER_OPTIMIZED)
        self.assertEqual(density_category(0.5), UNDER_OPTIMIZED)
        self.assertEqual(density_category(0.51), OPTIMAL)
        self.assertEqual(density_category(2.0), OPTIMAL)
        self.assertEqual(density_category(2.01), OVER_OPTIMIZED)

    def test_custom_bands(self):
        ranges = DensityRanges(under_optimized=1.0, optimal_max=3.0)
        self.assertEqual(density_category(0.8, ranges), UNDER_OPTIMIZED)
        self.assertEqual(density_category(2.5, ranges), OPTIMAL)
        self.assertEqual(density_category(3.5, ranges), OVER_OPTIMIZED)


class FilterWordsTest(unittest.TestCase):

    def test_no_term_returns_copy(self):
        filtered = filter_words(WORDS, None)
        self.assertEqual(filtered, WORDS)
        self.assertIsNot(filtered, WORDS)

    def test_case_insensitive_substring(self):
        self.assertEqual([w.text for w in filter_words(WORDS, "DEN")], ["Density"])
        self.assertEqual([w.text for w in filter_words(WORDS, "an")], ["banana"])

    def test_case_sensitive(self):
        self.assertEqual(filter_words(WORDS, "den", case_sensitive=True), [])


class SortWordsTest(unittest.TestCase):

    def test_count_desc_keeps_tie_order(self):
        self.assertEqual(
            [w.text for w in sort_words(WORDS)],
            ["keyword", "Density", "apple", "banana"],
        )

    def test_count_asc(self):
        self.assertEqual(
            [w.text for w in sort_words(WORDS, "count", "asc")],
            ["banana", "Density", "apple", "keyword"],
        )

    def test_text_ignores_case(self):
        self.assertEqual(
            [w.text for w in sort_words(WORDS, "text", "asc")],
            ["apple", "banana", "Density", "keyword"],
        )

    def test_density(self):
        self.assertEqual(
            [w.text for w in sort_words(WORDS, "density", "desc")],
            ["keyword", "Density", "banana", "apple"],
        )

    def test_invalid_arguments(self):
        with self.assertRaises(InvalidOptionsError):
            sort_words(WORDS, "length")
        with self.assertRaises(InvalidOptionsError):
            sort_words(WORDS, "count", "up")

    def test_top_by_density(self):
        self.assertEqual([w.text for w in top_by_density(WORDS, 2)], ["keyword", "Density"])
        self.assertEqual(len(top_by_density(WORDS)), 4)


class QuickMetricsTest(unittest.TestCase):

    def test_labels_and_formatting(self):
        result = AnalysisResult(
            total_words=1200,
            unique_words=340,
            avg_word_length=4.87,
            reading_time=6,
            text_html_ratio=23,
        )
        self.assertEqual(quick_metrics(result), {
            "Total Words": "1200",
            "Unique Words": "340",
            "Avg Word Length": "4.9",
            "Reading Time": "6 min",
            "Text/HTML Ratio": "23%",
        })


class CsvExportTest(unittest.TestCase):

    def test_header_and_rows(self):
        text = words_to_csv(WORDS[:2])
        self.assertEqual(text, "Word/Phrase,Count,Density\nkeyword,9,4.50\nDensity,4,2.00\n")

    def test_commas_and_quotes_are_quoted(self):
        text = words_to_csv([WordCount('say "hi", then', 2, 1.5)])
        self.assertEqual(text.splitlines()[1], '"say ""hi"", then",2,1.50')
        rows = list(csv.reader(io.StringIO(text)))
        self.assertEqual(rows[0], list(CSV_HEADER))
        self.assertEqual(rows[1], ['say "hi", then', "2", "1.50"])

    def test_empty(self):
        self.assertEqual(words_to_csv([]), "Word/Phrase,Count,Density\n")

    def test_slug_from_url(self):
        self.assertEqual(export_slug("https://Example.com/blog//Post_1/"), "example-com-blog-post-1")
        self.assertEqual(export_slug("https://example.com/"), "example-com")
        self.assertEqual(export_slug("https://example.com/a?b=c#d"), "example-com-a")

    def test_slug_from_file_and_stdin(self):
        self.assertEqual(export_slug("/tmp/My Notes.txt"), "my-notes")
        self.assertEqual(export_slug(None), "page")
        self.assertEqual(export_slug("-"), "page")
        self.assertEqual(export_slug("___.txt"), "page")

    def test_slug_reserved_names_and_length(self):
        self.assertEqual(export_slug("CON.txt"), "site-con")
        self.assertEqual(export_slug("lpt1"), "site-lpt1")
        self.assertEqual(len(export_slug("https://example.com/" + "a" * 80)), 50)

    def test_export_filename(self):
        now = datetime(2026, 3, 4, 5, 6, 7)
        self.assertEqual(
            export_filename("https://example.com/blog", now),
            "keywords-example-com-blog-2026-03-04-05-06-07.csv",
        )


if __name__ == "__main__":
    unittest.main()
