#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# File: config.py
# Author: Wadih Khairallah
# Description: Tunable defaults for scoring and similarity
# Created: 2026-10-13 14:02:19
# Modified: 2026-10-18 10:47:55

import math
from dataclasses import dataclass

# Composite similarity weights
JACCARD_WEIGHT = 0.3
SEQUENCE_WEIGHT = 0.5
OVERLAP_WEIGHT = 0.2

# A corpus document is reported when its composite similarity exceeds this
MATCH_THRESHOLD = 0.05

# Chunk-level matching
SPAN_THRESHOLD = 0.3
CHUNK_SIZE = 25
MAX_SPANS = 5

KEYWORD_LIMIT = 10
SENTIMENT_SCALE = 5


@dataclass(frozen=True)
class SimilarityConfig:
    """Weights and thresholds used by the similarity engine."""
    jaccard_weight: float = JACCARD_WEIGHT
    sequence_weight: float = SEQUENCE_WEIGHT
    overlap_weight: float = OVERLAP_WEIGHT
    match_threshold: float = MATCH_THRESHOLD
    span_threshold: float = SPAN_THRESHOLD
    chunk_size: int = CHUNK_SIZE
    max_spans: int = MAX_SPANS

    def __post_init__(self):
        weights = (self.jaccard_weight, self.sequence_weight, self.overlap_weight)
        if any(w < 0 for w in weights):
            raise ValueError("similarity weights must be non-negative")
        if not math.isclose(sum(weights), 1.0, abs_tol=1e-9):
            raise ValueError(f"similarity weights must sum to 1, got {sum(weights)}")
        if not 0 <= self.match_threshold <= 1 or not 0 <= self.span_threshold <= 1:
            raise ValueError("thresholds must lie in [0, 1]")
        if self.chunk_size < 1:
            raise ValueError("chunk_size must be at least 1")
        if self.max_spans < 0:
            raise ValueError("max_spans must not be negative")


DEFAULT_CONFIG = SimilarityConfig()
