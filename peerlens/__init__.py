#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# File: __init__.py
# Author: Wadih Khairallah
# Description:
# Created: 2026-10-12 09:05:40
# Modified: 2026-10-19 10:15:21

from .__version__ import __version__
from .config import SimilarityConfig
from .engine import (
    analyze_content,
    analyze_batch,
    comprehensive_analysis,
)
from .textanalysis import (
    analyze_text,
    analyze_sentiment,
    analyze_readability,
    analyze_complexity,
    analyze_grammar,
    extract_keywords,
    extract_entities,
    detect_language,
)
from .codeanalysis import analyze_code
from .similarity import (
    detect_similarity,
    calculate_similarity,
    find_matching_text,
)
from .feedback import synthesize_feedback
from .textprep import (
    normalize,
    tokenize,
    stem,
)

__all__ = [
    "__version__",
    "SimilarityConfig",
    "analyze_content",
    "analyze_batch",
    "comprehensive_analysis",
    "analyze_text",
    "analyze_sentiment",
    "analyze_readability",
    "analyze_complexity",
    "analyze_grammar",
    "extract_keywords",
    "extract_entities",
    "detect_language",
    "analyze_code",
    "detect_similarity",
    "calculate_similarity",
    "find_matching_text",
    "synthesize_feedback",
    "normalize",
    "tokenize",
    "stem",
]
