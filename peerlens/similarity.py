#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# File: similarity.py
# Author: Wadih Khairallah
# Description: Composite similarity scoring and plagiarism reports
# Created: 2026-10-14 08:52:30
# Modified: 2026-10-19 09:41:03

"""
Similarity Module

Compares a candidate document against a corpus of earlier submissions.
Each pair is scored by a weighted blend of three measures over stemmed
tokens:

    jaccard   shared distinct tokens / all distinct tokens
    sequence  bigrams of the candidate found in the other document,
              over the larger bigram count
    overlap   shared distinct tokens / token count of the shorter document

Overlap is normalized by the shorter document on purpose, so a short
excerpt lifted from a long source still scores high. As a consequence the
composite is not symmetric.
"""

import math
import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from nltk.util import ngrams

from .config import DEFAULT_CONFIG, SimilarityConfig
from .textprep import chunk_words, collapse, normalize, round_half_up, stem_tokens, tokenize

logger = logging.getLogger(__name__)


def _bigrams(tokens: Sequence[str]) -> List[Tuple[str, str]]:
    return list(ngrams(tokens, 2))


def similarity_breakdown(
    tokens1: Sequence[str],
    tokens2: Sequence[str],
    config: Optional[SimilarityConfig] = None
) -> Dict[str, float]:
    """
    Compute each similarity measure and their weighted composite.

    Args:
        tokens1 (Sequence[str]): Tokens of the candidate
        tokens2 (Sequence[str]): Tokens of the document compared against
        config (SimilarityConfig): Weights to blend with

    Returns:
        Dict: jaccard, sequence, overlap and composite, all in [0, 1]
    """
    config = config or DEFAULT_CONFIG
    set1 = set(tokens1)
    set2 = set(tokens2)
    intersection = set1 & set2
    union = set1 | set2

    jaccard = len(intersection) / len(union) if union else 0

    bigrams1 = _bigrams(tokens1)
    bigrams2 = _bigrams(tokens2)
    sequence = 0
    if bigrams1 or bigrams2:
        lookup = set(bigrams2)
        shared = sum(1 for bigram in bigrams1 if bigram in lookup)
        sequence = shared / max(len(bigrams1), len(bigrams2), 1)

    shorter = min(len(tokens1), len(tokens2))
    overlap = len(intersection) / shorter if shorter else 0

    composite = (
        jaccard * config.jaccard_weight
        + sequence * config.sequence_weight
        + overlap * config.overlap_weight
    )

    return {
        "jaccard": jaccard,
        "sequence": sequence,
        "overlap": overlap,
        "composite": composite,
    }


def calculate_similarity(
    tokens1: Sequence[str],
    tokens2: Sequence[str],
    config: Optional[SimilarityConfig] = None
) -> float:
    """Weighted composite similarity of two token sequences."""
    details = similarity_breakdown(tokens1, tokens2, config)
    logger.debug(
        "Similarity details - Jaccard: %.2f, Sequence: %.2f, Overlap: %.2f, Final: %.2f",
        details["jaccard"], details["sequence"], details["overlap"], details["composite"],
    )
    return details["composite"]


def find_matching_text(
    text1: str,
    text2: str,
    config: Optional[SimilarityConfig] = None
) -> List[Dict[str, Any]]:
    """
    Localize the passages two documents have in common.

    Both raw texts are cut into fixed-size word chunks and every chunk pair
    is scored with the composite measure over lower-cased, unstemmed tokens.

    Args:
        text1 (str): Candidate text
        text2 (str): Text of the matched document
        config (SimilarityConfig): Chunk size, span threshold and span limit

    Returns:
        List[Dict]: Up to ``max_spans`` ``{"source_chunk", "target_chunk",
        "similarity"}`` entries, most similar first
    """
    config = config or DEFAULT_CONFIG
    if not isinstance(text1, str) or not isinstance(text2, str):
        return []

    chunks1 = chunk_words(text1, config.chunk_size)
    chunks2 = chunk_words(text2, config.chunk_size)
    tokens2 = [tokenize(collapse(chunk)) for chunk in chunks2]

    matches = []
    for chunk1 in chunks1:
        tokens1 = tokenize(collapse(chunk1))
        for chunk2, chunk_tokens in zip(chunks2, tokens2):
            similarity = similarity_breakdown(tokens1, chunk_tokens, config)["composite"]
            if similarity > config.span_threshold:
                matches.append({
                    "source_chunk": chunk1,
                    "target_chunk": chunk2,
                    "similarity": round_half_up(similarity, 2),
                })

    matches.sort(key=lambda match: match["similarity"], reverse=True)
    return matches[:config.max_spans]


def _field(document: Any, *names: str) -> Any:
    if not isinstance(document, Mapping):
        return None
    for name in names:
        if name in document:
            return document[name]
    return None


def _has_content(document: Any) -> bool:
    content = _field(document, "content")
    return isinstance(content, str) and len(content) > 0


def _report(score: int, sources: List[Dict[str, Any]], total: int, checked: int,
            error: Optional[str] = None) -> Dict[str, Any]:
    report = {
        "score": score,
        "sources": sources,
        "total_sources": total,
        "checked_sources": checked,
    }
    if error:
        report["error"] = error
    return report


def detect_similarity(
    text: str,
    corpus: Optional[Iterable[Mapping[str, Any]]] = None,
    config: Optional[SimilarityConfig] = None
) -> Dict[str, Any]:
    """
    Build a plagiarism report for a candidate text.

    Corpus documents with missing, non-string or blank content are skipped,
    as is any document whose normalized content equals the normalized
    candidate (the candidate itself, possibly stored under another id).

    Args:
        text (str): Candidate text
        corpus (Iterable[Mapping]): Documents with ``id``, ``title``,
            ``author`` and ``content`` keys
        config (SimilarityConfig): Weights and thresholds

    Returns:
        Dict: score (0-100), sources sorted by similarity, total_sources,
        checked_sources and, for unusable input, error
    """
    config = config or DEFAULT_CONFIG
    corpus = list(corpus or [])

    clean_text = normalize(text)
    if not clean_text:
        logger.error(f"Invalid text provided for plagiarism detection: {text!r}")
        return _report(0, [], 0, 0, "Invalid text provided")

    logger.info(f"Checking plagiarism for text of length {len(clean_text)} "
                f"against {len(corpus)} documents")

    text_tokens = tokenize(clean_text.lower())
    if not text_tokens:
        logger.error("No tokens extracted from text")
        return _report(0, [], len(corpus), 0, "No valid text content")

    text_stems = stem_tokens(text_tokens)

    similarities = []
    for document in corpus:
        document_id = _field(document, "id", "_id")
        content = _field(document, "content")

        clean_content = normalize(content)
        if not clean_content:
            logger.debug(f"Skipping document {document_id}: Invalid content")
            continue

        if clean_content == clean_text:
            logger.debug(f"Skipping self-comparison for document {document_id}")
            continue

        document_tokens = tokenize(clean_content.lower())
        if not document_tokens:
            logger.debug(f"Skipping document {document_id}: No valid tokens")
            continue

        similarity = calculate_similarity(text_stems, stem_tokens(document_tokens), config)
        logger.debug(f"Similarity score with document {document_id}: {similarity:.4f}")

        if similarity > config.match_threshold:
            similarities.append({
                "document_id": document_id,
                "title": _field(document, "title"),
                "author": _field(document, "author"),
                "similarity": round_half_up(similarity, 2),
                "matching_spans": find_matching_text(text, content, config),
            })

    valid = [s["similarity"] for s in similarities if math.isfinite(s["similarity"])]
    score = round_half_up(max(valid) * 100) if valid else 0

    similarities.sort(key=lambda match: match["similarity"], reverse=True)
    checked = sum(1 for document in corpus if _has_content(document))

    logger.info(f"Plagiarism score {score}% from {len(similarities)} similar documents "
                f"({checked}/{len(corpus)} checked)")

    return _report(score, similarities, len(corpus), checked)
