#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# File: test_engine.py
# Description: Tests for the combined analysis entry points
# Created: 2026-10-17
# Modified: 2026-10-19 08:47:20

import unittest

from peerlens.engine import analyze_batch, analyze_content, comprehensive_analysis

ESSAY = "Clear writing helps reviewers. Short sentences are easy to follow."
CODE = "function f(x) {\n  if (x) {\n    console.log(x);\n  }\n}\n"


class AnalyzeContentTest(unittest.TestCase):

    def test_kind_selects_analyzers(self):
        self.assertEqual(set(analyze_content(ESSAY, "text")), {"text"})
        self.assertEqual(set(analyze_content(CODE, "code")), {"code"})
        self.assertEqual(set(analyze_content(CODE, "mixed")), {"text", "code"})

    def test_default_kind_is_text(self):
        self.assertEqual(set(analyze_content(ESSAY)), {"text"})

    def test_unknown_kind(self):
        with self.assertRaises(ValueError):
            analyze_content(ESSAY, "video")

    def test_language_reaches_code_analysis(self):
        result = analyze_content("print(x)", "code", "python")
        self.assertEqual(result["code"]["language"], "python")
        self.assertEqual(result["code"]["quality"]["suggestions"],
                         ["Line 1: Remove debug print statements (print)"])

    def test_idempotent(self):
        self.assertEqual(analyze_content(CODE, "mixed"), analyze_content(CODE, "mixed"))


class ComprehensiveAnalysisTest(unittest.TestCase):

    def test_without_corpus(self):
        result = comprehensive_analysis(ESSAY)
        self.assertIsNone(result["plagiarism"])
        self.assertIn("text", result["analysis"])
        self.assertIn("overall_score", result["feedback"])

    def test_with_corpus(self):
        corpus = [{"id": "old", "title": "Old", "author": "lee", "content": ESSAY.upper()}]
        result = comprehensive_analysis(ESSAY, corpus=corpus)
        self.assertEqual(result["plagiarism"]["sources"][0]["document_id"], "old")
        self.assertGreater(result["plagiarism"]["score"], 90)

    def test_code_only_feedback(self):
        result = comprehensive_analysis(CODE, "code")
        self.assertEqual(result["feedback"]["overall_score"], 20)


class BatchTest(unittest.TestCase):

    def test_each_document_analyzed_by_kind(self):
        results = analyze_batch([
            {"id": "a", "title": "Essay", "content": ESSAY},
            {"id": "b", "title": "Script", "content": CODE, "kind": "code", "language": "js"},
        ])
        self.assertEqual([r["document_id"] for r in results], ["a", "b"])
        self.assertEqual(set(results[0]["analysis"]), {"text"})
        self.assertEqual(set(results[1]["analysis"]), {"code"})
        self.assertEqual(results[1]["title"], "Script")

    def test_missing_content_is_marked(self):
        results = analyze_batch([{"_id": "x"}])
        self.assertEqual(results[0]["document_id"], "x")
        self.assertEqual(results[0]["analysis"]["text"]["error"], "Invalid text provided")

    def test_unknown_kind_does_not_stop_batch(self):
        with self.assertLogs("peerlens.engine", level="WARNING"):
            results = analyze_batch([
                {"id": "v", "content": "frames", "kind": "video"},
                {"id": "a", "content": ESSAY},
            ])
        self.assertEqual(results[0]["analysis"], {})
        self.assertEqual(results[0]["error"], "Unknown content kind 'video'")
        self.assertEqual(set(results[1]["analysis"]), {"text"})
        self.assertNotIn("error", results[1])


if __name__ == "__main__":
    unittest.main()
