#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# File: engine.py
# Author: Wadih Khairallah
# Description: Entry points combining text, code, similarity and feedback
# Created: 2026-10-15 10:07:14
# Modified: 2026-10-19 14:22:47

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional

from .codeanalysis import analyze_code
from .config import SimilarityConfig
from .feedback import synthesize_feedback
from .similarity import detect_similarity
from .textanalysis import analyze_text

logger = logging.getLogger(__name__)

CONTENT_KINDS = ("text", "code", "mixed")


def analyze_content(
    content: str,
    kind: str = "text",
    language: Optional[str] = None
) -> Dict[str, Any]:
    """
    Analyze a submission according to its declared kind.

    Args:
        content (str): Raw submission content
        kind (str): "text", "code" or "mixed"
        language (str): Programming language for code analysis

    Returns:
        Dict: ``text`` metrics for text/mixed, ``code`` metrics for code/mixed

    Raises:
        ValueError: If ``kind`` is not a known content kind
    """
    if kind not in CONTENT_KINDS:
        raise ValueError(f"Unknown content kind '{kind}', expected one of {CONTENT_KINDS}")

    analysis = {}
    if kind in ("text", "mixed"):
        analysis["text"] = analyze_text(content)
    if kind in ("code", "mixed"):
        analysis["code"] = analyze_code(content, language)
    return analysis


def comprehensive_analysis(
    content: str,
    kind: str = "text",
    language: Optional[str] = None,
    corpus: Optional[Iterable[Mapping[str, Any]]] = None,
    config: Optional[SimilarityConfig] = None
) -> Dict[str, Any]:
    """
    Analysis, plagiarism report and feedback in one call.

    The plagiarism report is ``None`` when no corpus is supplied. Feedback
    is synthesized from the text metrics, or from nothing for code-only
    submissions.
    """
    analysis = analyze_content(content, kind, language)
    plagiarism = None
    if corpus is not None:
        plagiarism = detect_similarity(content, corpus, config)

    return {
        "analysis": analysis,
        "plagiarism": plagiarism,
        "feedback": synthesize_feedback(analysis.get("text")),
    }


def analyze_batch(documents: Iterable[Mapping[str, Any]]) -> List[Dict[str, Any]]:
    """
    Analyze several documents independently.

    Each document supplies ``content`` and optionally ``id``, ``title``,
    ``kind`` (default "text") and ``language``. A document of unknown kind
    gets an empty analysis and an ``error`` instead of stopping the batch.
    """
    results = []
    for document in documents:
        document_id = document.get("id", document.get("_id"))
        kind = document.get("kind") or "text"
        logger.debug(f"Batch analysis of document {document_id}")

        result = {
            "document_id": document_id,
            "title": document.get("title"),
            "analysis": {},
        }
        if kind in CONTENT_KINDS:
            result["analysis"] = analyze_content(document.get("content"), kind, document.get("language"))
        else:
            logger.warning(f"Skipping document {document_id}: Unknown content kind '{kind}'")
            result["error"] = f"Unknown content kind '{kind}'"

        results.append(result)
    return results
