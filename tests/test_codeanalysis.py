#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# File: test_codeanalysis.py
# Description: Tests for the code metrics analyzer
# Created: 2026-10-16
# Modified: 2026-10-19 14:31:12

import unittest

from peerlens.codeanalysis import (
    analyze_code,
    analyze_code_complexity,
    analyze_code_quality,
    analyze_code_style,
    calculate_code_metrics,
    resolve_language,
)


class ComplexityTest(unittest.TestCase):

    def test_branch_and_loop_weights(self):
        code = "\n".join(["if (a) {"] * 8 + ["for (i = 0; i < n; i++) {"] * 7)
        result = analyze_code_complexity(code)
        self.assertEqual(result["score"], 8 * 1 + 7 * 2)
        self.assertEqual(result["level"], "High")
        self.assertEqual(analyze_code_complexity(code), result)

    def test_medium(self):
        result = analyze_code_complexity("\n".join(["while (x) {"] * 6))
        self.assertEqual(result["score"], 12)
        self.assertEqual(result["level"], "Medium")

    def test_each_group_counts_once_per_line(self):
        self.assertEqual(analyze_code_complexity("} else if (x) {")["score"], 1)
        self.assertEqual(analyze_code_complexity("try { switch (y) { case 1: } }")["score"], 3)

    def test_low(self):
        result = analyze_code_complexity("let x = 1;")
        self.assertEqual(result["score"], 0)
        self.assertEqual(result["level"], "Low")

    def test_keywords_are_case_sensitive(self):
        self.assertEqual(analyze_code_complexity("IF WHILE FOR")["score"], 0)

    def test_deep_nesting_and_long_lines(self):
        code = "x" * 130 + "\n" + " " * 10 + "y = 1"
        self.assertEqual(analyze_code_complexity(code)["issues"], [
            "Line 1: Line too long (130 characters)",
            "Line 2: Deep nesting detected",
        ])


class QualityTest(unittest.TestCase):

    def test_javascript_leftovers(self):
        code = "// old code\nconst a = 1; // TODO fix\nconsole.log(a);\n"
        result = analyze_code_quality(code)
        self.assertEqual(result["issues"], ["Line 2: TODO comment found"])
        self.assertEqual(result["suggestions"], [
            "Line 1: Consider removing commented code",
            "Line 3: Remove debug print statements (console.log)",
        ])
        self.assertEqual(result["score"], 100 - 5 - 2 * 2)

    def test_bare_comment_marker_is_ignored(self):
        self.assertEqual(analyze_code_quality("//")["suggestions"], [])

    def test_python_profile(self):
        result = analyze_code_quality("# note here\nprint(x)", "python")
        self.assertEqual(result["suggestions"], [
            "Line 1: Consider removing commented code",
            "Line 2: Remove debug print statements (print)",
        ])

    def test_score_floors_at_zero(self):
        code = "\n".join(["// todo"] * 20)
        self.assertEqual(analyze_code_quality(code)["score"], 0)


class StyleTest(unittest.TestCase):

    def test_single_space_indent_and_trailing_whitespace(self):
        result = analyze_code_style(" x = 1\n  y = 2\nz = 3 \n")
        self.assertEqual(result["issues"], [
            "Line 1: Inconsistent indentation",
            "Line 3: Trailing whitespace",
        ])
        self.assertEqual(result["score"], 90)


class MetricsTest(unittest.TestCase):

    def test_line_and_size_counts(self):
        code = "// c\nlet a = 1;\n\n/* b */"
        self.assertEqual(calculate_code_metrics(code), {
            "total_lines": 4,
            "non_empty_lines": 3,
            "comment_lines": 2,
            "comment_ratio": 0.5,
            "word_count": 9,
            "character_count": 24,
            "avg_line_length": 6,
        })

    def test_python_comment_markers(self):
        metrics = calculate_code_metrics("# one\nx = 1\n// not a comment", "python")
        self.assertEqual(metrics["comment_lines"], 1)
        self.assertEqual(metrics["comment_ratio"], 0.33)

    def test_halves_round_up(self):
        self.assertEqual(calculate_code_metrics("ab\nc ")["avg_line_length"], 3)
        code = "// x\n" + "a\n" * 6 + "b"
        self.assertEqual(calculate_code_metrics(code)["comment_ratio"], 0.13)


class AnalyzeCodeTest(unittest.TestCase):

    def test_language_resolution(self):
        self.assertEqual(resolve_language("py"), "python")
        self.assertEqual(resolve_language(" JS "), "javascript")
        self.assertEqual(resolve_language("Rust"), "javascript")
        self.assertEqual(resolve_language(None), "javascript")

    def test_sections(self):
        result = analyze_code("def f():\n    return 1\n", "python")
        self.assertEqual(set(result), {"complexity", "quality", "style", "metrics", "language"})
        self.assertEqual(result["language"], "python")

    def test_blank_code_is_marked(self):
        result = analyze_code("   ")
        self.assertEqual(result["error"], "Invalid code provided")
        self.assertEqual(result["complexity"]["score"], 0)
        self.assertEqual(result["metrics"]["total_lines"], 1)


if __name__ == "__main__":
    unittest.main()
