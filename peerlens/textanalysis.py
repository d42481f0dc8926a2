#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# File: textanalysis.py
# Author: Wadih Khairallah
# Description: Lexicon and rule based text metrics
# Created: 2026-10-12 10:21:44
# Modified: 2026-10-19 10:58:12

"""
Text Analysis Module

Explainable, lexicon and rule based metrics for prose submissions:
sentiment, readability, lexical complexity, grammar heuristics, keywords
and named entities.
"""

import math
import logging
from functools import lru_cache
from collections import Counter
from typing import Dict, List, Any

# Third-party imports
import nltk
from textblob import TextBlob
from langdetect import DetectorFactory, detect
from langdetect.lang_detect_exception import LangDetectException

from .config import KEYWORD_LIMIT, SENTIMENT_SCALE
from .lexicons import (
    DATE_PATTERNS,
    ENTITY_LABELS,
    MONEY_PATTERNS,
    NEGATIONS,
    PERCENTAGE_PATTERNS,
    STOP_WORDS,
)
from .textprep import count_syllables, normalize, round_half_up, split_sentences, tokenize

# Setup logger
logger = logging.getLogger(__name__)

# langdetect is probabilistic unless seeded
DetectorFactory.seed = 0

READABILITY_LEVELS = (
    (90, "Very Easy"),
    (80, "Easy"),
    (70, "Fairly Easy"),
    (60, "Standard"),
    (50, "Fairly Difficult"),
    (30, "Difficult"),
)

NER_RESOURCES = (
    ("taggers/averaged_perceptron_tagger_eng", "averaged_perceptron_tagger_eng"),
    ("chunkers/maxent_ne_chunker_tab", "maxent_ne_chunker_tab"),
    ("corpora/words", "words"),
)


def download_nltk_data() -> None:
    """Download the NLTK models used by entity extraction when missing."""
    for path, package in NER_RESOURCES:
        try:
            nltk.data.find(path)
        except LookupError:
            nltk.download(package, quiet=True)


def _finite(value: float) -> float:
    """Collapse NaN and infinities to 0."""
    if value is None or not math.isfinite(value):
        return 0
    return value


@lru_cache(maxsize=16384)
def _token_polarity(token: str) -> float:
    return TextBlob(token).sentiment.polarity


def readability_level(score: float) -> str:
    """Map a Flesch Reading Ease score onto the seven-level scale."""
    for floor, label in READABILITY_LEVELS:
        if score >= floor:
            return label
    return "Very Difficult"


def analyze_sentiment(text: str) -> Dict[str, Any]:
    """
    Score the polarity of a text.

    Every token is looked up in the TextBlob pattern lexicon and its
    polarity stretched onto a -5..+5 scale. A token directly preceded by a
    negation has its polarity flipped. The per-token scores are summed.

    Args:
        text (str): Input text

    Returns:
        Dict: score, magnitude, label and comparative (score per token)
    """
    tokens = tokenize(text.lower()) if isinstance(text, str) else []

    score = 0.0
    prev = None
    for token in tokens:
        polarity = _token_polarity(token) * SENTIMENT_SCALE
        if prev in NEGATIONS:
            polarity = -polarity
        score += polarity
        prev = token

    score = round_half_up(_finite(score), 2)
    if score > 0:
        label = "positive"
    elif score < 0:
        label = "negative"
    else:
        label = "neutral"

    return {
        "score": score,
        "magnitude": abs(score),
        "label": label,
        "comparative": round_half_up(score / len(tokens), 4) if tokens else 0,
    }


def analyze_readability(text: str) -> Dict[str, Any]:
    """
    Calculate the Flesch Reading Ease of a text.

    Sentence and word counts are floored at 1 so the ratios stay finite.

    Args:
        text (str): Input text

    Returns:
        Dict: Rounded score, level and the two averages it is built from
    """
    sentences = split_sentences(text)
    words = tokenize(text)
    syllables = count_syllables(text) if isinstance(text, str) else 0

    avg_words_per_sentence = len(words) / max(len(sentences), 1)
    avg_syllables_per_word = syllables / max(len(words), 1)

    # Flesch Reading Ease
    flesch = 206.835 - (1.015 * avg_words_per_sentence) - (84.6 * avg_syllables_per_word)
    score = round_half_up(_finite(flesch))

    return {
        "score": score,
        "level": readability_level(score),
        "avg_words_per_sentence": round_half_up(avg_words_per_sentence, 2),
        "avg_syllables_per_word": round_half_up(avg_syllables_per_word, 2),
    }


def analyze_complexity(text: str) -> Dict[str, Any]:
    """
    Measure vocabulary richness.

    Args:
        text (str): Input text

    Returns:
        Dict: score (lexical diversity as a percentage), level, lexical
        diversity, average word length and average words per sentence
    """
    words = tokenize(text.lower()) if isinstance(text, str) else []
    sentences = split_sentences(text)
    total = len(words)

    lexical_diversity = len(set(words)) / total if total else 0
    avg_word_length = sum(len(word) for word in words) / total if total else 0
    avg_words_per_sentence = total / max(len(sentences), 1)

    if lexical_diversity > 0.7 and avg_word_length > 5:
        level = "High"
    elif lexical_diversity > 0.5 and avg_word_length > 4:
        level = "Medium"
    else:
        level = "Low"

    return {
        "score": round_half_up(lexical_diversity * 100),
        "level": level,
        "lexical_diversity": round_half_up(lexical_diversity, 2),
        "avg_word_length": round_half_up(avg_word_length, 2),
        "avg_words_per_sentence": round_half_up(avg_words_per_sentence, 2),
    }


def analyze_grammar(text: str) -> Dict[str, Any]:
    """
    Flag simple mechanical problems sentence by sentence.

    Only two rules apply: a sentence should open with a capital letter, and
    should not contain double spaces.
    """
    issues = []
    suggestions = []
    needs_capital = False
    has_double_space = False

    for index, sentence in enumerate(split_sentences(text), start=1):
        trimmed = sentence.strip()

        first = trimmed[0]
        if first != first.upper():
            issues.append(f"Sentence {index}: Should start with capital letter")
            needs_capital = True

        if "  " in trimmed:
            issues.append(f"Sentence {index}: Contains double spaces")
            has_double_space = True

    if needs_capital:
        suggestions.append("Capitalize the first word of every sentence")
    if has_double_space:
        suggestions.append("Use a single space between words")

    return {
        "issues": issues,
        "suggestions": suggestions,
        "score": max(0, 100 - len(issues) * 10),
    }


def extract_keywords(text: str, limit: int = KEYWORD_LIMIT) -> List[Dict[str, Any]]:
    """
    Return the most frequent meaningful words.

    Stop words, words of three letters or fewer and anything that is not
    purely alphabetic are ignored. Ties keep first-seen order.

    Args:
        text (str): Input text
        limit (int): Maximum number of keywords

    Returns:
        List[Dict]: ``{"word", "frequency"}`` entries, most frequent first
    """
    words = tokenize(text.lower()) if isinstance(text, str) else []
    word_freq = Counter(
        word for word in words
        if len(word) > 3 and word not in STOP_WORDS and word.isascii() and word.isalpha()
    )

    ranked = sorted(word_freq.items(), key=lambda item: item[1], reverse=True)
    return [{"word": word, "frequency": freq} for word, freq in ranked[:limit]]


def _collect(patterns, text: str) -> List[str]:
    found = []
    for pattern in patterns:
        for match in pattern.finditer(text):
            value = match.group(0).strip()
            if value not in found:
                found.append(value)
    return found


def _named_entities(text: str) -> Dict[str, List[str]]:
    """
    Perform Named Entity Recognition with NLTK's chunker.

    Missing models degrade to empty buckets.
    """
    buckets = {"people": [], "places": [], "organizations": []}

    try:
        pos_tags = nltk.pos_tag(nltk.wordpunct_tokenize(text))
        for chunk in nltk.ne_chunk(pos_tags):
            if not hasattr(chunk, "label"):
                continue
            bucket = ENTITY_LABELS.get(chunk.label())
            if bucket is None:
                continue
            entity_text = " ".join(c[0] for c in chunk.leaves())
            if entity_text not in buckets[bucket]:
                buckets[bucket].append(entity_text)
    except Exception as ne_error:
        logger.warning(f"NER error: {ne_error}")
        buckets = {"people": [], "places": [], "organizations": []}

    return buckets


def extract_entities(text: str) -> Dict[str, List[str]]:
    """
    Best-effort entity extraction.

    Dates, amounts of money and percentages come from regular expressions;
    people, places and organizations from NLTK's named-entity chunker when
    its models are installed.

    Args:
        text (str): Input text

    Returns:
        Dict: people, places, organizations, dates, money and percentages,
        each a de-duplicated list in order of appearance
    """
    if not isinstance(text, str) or not text.strip():
        return {
            "people": [],
            "places": [],
            "organizations": [],
            "dates": [],
            "money": [],
            "percentages": [],
        }

    entities = _named_entities(text)
    entities["dates"] = _collect(DATE_PATTERNS, text)
    entities["money"] = _collect(MONEY_PATTERNS, text)
    entities["percentages"] = _collect(PERCENTAGE_PATTERNS, text)
    return entities


def detect_language(text: str) -> str:
    """
    Detect the language of the text.

    Args:
        text (str): Input text

    Returns:
        str: Detected language code, or "unknown"
    """
    try:
        return detect(text)
    except LangDetectException as lang_error:
        logger.debug(f"Language detection failed: {lang_error}")
        return "unknown"


def _empty_text_metrics(error: str) -> Dict[str, Any]:
    return {
        "sentiment": {"score": 0, "magnitude": 0, "label": "neutral", "comparative": 0},
        "readability": {
            "score": 0,
            "level": readability_level(0),
            "avg_words_per_sentence": 0,
            "avg_syllables_per_word": 0,
        },
        "complexity": {
            "score": 0,
            "level": "Low",
            "lexical_diversity": 0,
            "avg_word_length": 0,
            "avg_words_per_sentence": 0,
        },
        "grammar": {"issues": [], "suggestions": [], "score": 0},
        "keywords": [],
        "entities": extract_entities(""),
        "language": "unknown",
        "error": error,
    }


def analyze_text(text: str) -> Dict[str, Any]:
    """
    Compute every text metric for a piece of prose.

    Empty or whitespace-only input yields a zero-valued result carrying an
    ``error`` marker instead of raising.

    Args:
        text (str): Input text

    Returns:
        Dict: sentiment, readability, complexity, grammar, keywords,
        entities and language
    """
    if not normalize(text):
        logger.error(f"Invalid text provided for analysis: {text!r}")
        return _empty_text_metrics("Invalid text provided")

    return {
        "sentiment": analyze_sentiment(text),
        "readability": analyze_readability(text),
        "complexity": analyze_complexity(text),
        "grammar": analyze_grammar(text),
        "keywords": extract_keywords(text),
        "entities": extract_entities(text),
        "language": detect_language(text),
    }
