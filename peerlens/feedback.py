#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# File: feedback.py
# Author: Wadih Khairallah
# Description: Qualitative feedback from text metrics
# Created: 2026-10-14 15:18:26
# Modified: 2026-10-18 11:05:49

import math
from typing import Any, Dict, Mapping, Optional

from .textprep import round_half_up


def _score(metrics: Mapping[str, Any], section: str) -> float:
    value = (metrics.get(section) or {}).get("score", 0)
    if not isinstance(value, (int, float)) or not math.isfinite(value):
        return 0
    return value


def synthesize_feedback(text_metrics: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """
    Turn text metrics into strengths, weaknesses and suggestions.

    Sections missing from ``text_metrics`` count as zero, so code-only
    analyses still get a (low) overall score.

    Args:
        text_metrics (Mapping): Output of ``analyze_text``

    Returns:
        Dict: strengths, weaknesses, suggestions and overall_score
    """
    metrics = text_metrics or {}
    feedback = {
        "strengths": [],
        "weaknesses": [],
        "suggestions": [],
        "overall_score": 0,
    }

    sentiment = _score(metrics, "sentiment")
    readability = _score(metrics, "readability")
    complexity = _score(metrics, "complexity")
    complexity_level = (metrics.get("complexity") or {}).get("level")

    if sentiment > 0:
        feedback["strengths"].append("Positive tone and engagement")
    elif sentiment < -2:
        feedback["weaknesses"].append("Negative tone may affect readability")
        feedback["suggestions"].append("Consider using more neutral or positive language")

    if readability < 30:
        feedback["weaknesses"].append("Text is difficult to read")
        feedback["suggestions"].append("Simplify sentence structure and use shorter words")
    elif readability > 70:
        feedback["strengths"].append("Good readability level")

    if complexity_level == "High":
        feedback["strengths"].append("Rich vocabulary and complex ideas")
    elif complexity_level == "Low":
        feedback["suggestions"].append("Consider using more varied vocabulary")

    scores = [80 if sentiment > 0 else 60, readability, complexity]
    feedback["overall_score"] = round_half_up(sum(scores) / len(scores))

    return feedback
