#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# File: codeanalysis.py
# Author: Wadih Khairallah
# Description: Line based structural, quality and style checks for source code
# Created: 2026-10-13 09:31:08
# Modified: 2026-10-18 17:12:46

"""
Code Analysis Module

Heuristic, line oriented checks for submitted source code. Nothing here
parses the code; every rule is a substring or indentation test so that any
language can be scored.
"""

import re
import logging
from typing import Dict, List, Any, Optional

from .lexicons import CODE_PROFILES, DEFAULT_CODE_LANGUAGE, LANGUAGE_ALIASES
from .textprep import round_half_up

logger = logging.getLogger(__name__)

_LEADING_WHITESPACE = re.compile(r"^\s*")

# (keywords, weight) pairs; a line scores each group at most once
CONTROL_FLOW_WEIGHTS = (
    (("if", "else"), 1),
    (("for", "while"), 2),
    (("switch", "case"), 2),
    (("try", "catch"), 1),
)

MAX_INDENT = 8
MAX_LINE_LENGTH = 120


def resolve_language(language: Optional[str]) -> str:
    """Canonical profile name for a language, falling back to javascript."""
    if not language:
        return DEFAULT_CODE_LANGUAGE
    name = language.strip().lower()
    name = LANGUAGE_ALIASES.get(name, name)
    if name not in CODE_PROFILES:
        logger.info(f"No code profile for '{language}', using {DEFAULT_CODE_LANGUAGE}")
        return DEFAULT_CODE_LANGUAGE
    return name


def _lines(code: str) -> List[str]:
    return code.split("\n") if isinstance(code, str) else [""]


def analyze_code_complexity(code: str) -> Dict[str, Any]:
    """
    Estimate control-flow complexity and flag deep nesting and long lines.

    Args:
        code (str): Source code

    Returns:
        Dict: score, level (Low/Medium/High) and per-line issues
    """
    complexity = 0
    issues = []

    for index, line in enumerate(_lines(code), start=1):
        trimmed = line.strip()

        for keywords, weight in CONTROL_FLOW_WEIGHTS:
            if any(keyword in trimmed for keyword in keywords):
                complexity += weight

        indent = len(_LEADING_WHITESPACE.match(line).group(0))
        if indent > MAX_INDENT:
            issues.append(f"Line {index}: Deep nesting detected")

        if len(line) > MAX_LINE_LENGTH:
            issues.append(f"Line {index}: Line too long ({len(line)} characters)")

    if complexity > 20:
        level = "High"
    elif complexity > 10:
        level = "Medium"
    else:
        level = "Low"

    return {
        "score": complexity,
        "level": level,
        "issues": issues,
    }


def analyze_code_quality(code: str, language: str = DEFAULT_CODE_LANGUAGE) -> Dict[str, Any]:
    """
    Look for leftovers that should not ship: commented-out code, TODO
    markers and debug output.

    Args:
        code (str): Source code
        language (str): Language whose comment and debug conventions apply

    Returns:
        Dict: issues, suggestions and a score out of 100
    """
    profile = CODE_PROFILES[resolve_language(language)]
    issues = []
    suggestions = []

    for index, line in enumerate(_lines(code), start=1):
        trimmed = line.strip()

        if trimmed.startswith(profile["line_comments"]) and len(trimmed) > 2:
            suggestions.append(f"Line {index}: Consider removing commented code")

        if "todo" in trimmed.lower():
            issues.append(f"Line {index}: TODO comment found")

        for call in profile["debug_calls"]:
            if call in trimmed:
                suggestions.append(f"Line {index}: Remove debug print statements ({call.strip().rstrip('(')})")
                break

    return {
        "issues": issues,
        "suggestions": suggestions,
        "score": max(0, 100 - len(issues) * 5 - len(suggestions) * 2),
    }


def analyze_code_style(code: str) -> Dict[str, Any]:
    """Flag single-space indentation and trailing whitespace."""
    issues = []

    for index, line in enumerate(_lines(code), start=1):
        if line[:1] == " " and line[1:2] != " ":
            issues.append(f"Line {index}: Inconsistent indentation")

        if line.endswith(" "):
            issues.append(f"Line {index}: Trailing whitespace")

    return {
        "issues": issues,
        "score": max(0, 100 - len(issues) * 5),
    }


def calculate_code_metrics(code: str, language: str = DEFAULT_CODE_LANGUAGE) -> Dict[str, Any]:
    """
    Count lines, comments, words and characters.

    Args:
        code (str): Source code
        language (str): Language whose comment markers apply

    Returns:
        Dict: Line and size statistics
    """
    profile = CODE_PROFILES[resolve_language(language)]
    markers = profile["line_comments"] + profile["block_comments"]
    code = code if isinstance(code, str) else ""

    lines = _lines(code)
    non_empty = [line for line in lines if line.strip()]
    comments = [line for line in lines if line.strip().startswith(markers)]
    characters = len(code)

    return {
        "total_lines": len(lines),
        "non_empty_lines": len(non_empty),
        "comment_lines": len(comments),
        "comment_ratio": round_half_up(len(comments) / len(lines), 2),
        "word_count": len(code.split()),
        "character_count": characters,
        "avg_line_length": round_half_up(characters / len(lines)),
    }


def analyze_code(code: str, language: str = DEFAULT_CODE_LANGUAGE) -> Dict[str, Any]:
    """
    Run every code check.

    Blank input still produces a complete, zero-valued result, annotated
    with an ``error`` marker.

    Args:
        code (str): Source code
        language (str): Language name or alias (e.g. "python", "js")

    Returns:
        Dict: complexity, quality, style, metrics and the resolved language
    """
    language = resolve_language(language)
    analysis = {
        "complexity": analyze_code_complexity(code),
        "quality": analyze_code_quality(code, language),
        "style": analyze_code_style(code),
        "metrics": calculate_code_metrics(code, language),
        "language": language,
    }

    if not isinstance(code, str) or not code.strip():
        logger.error(f"Invalid code provided for analysis: {code!r}")
        analysis["error"] = "Invalid code provided"

    return analysis
