#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# File: lexicons.py
# Author: Wadih Khairallah
# Description: Fixed word lists and recognizer patterns
# Created: 2026-10-12 09:40:03
# Modified: 2026-10-18 16:25:10

import re

STOP_WORDS = frozenset([
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of",
    "with", "by", "is", "are", "was", "were", "be", "been", "being", "have",
    "has", "had", "do", "does", "did", "will", "would", "could", "should",
    "may", "might", "must", "can", "this", "that", "these", "those", "i",
    "you", "he", "she", "it", "we", "they", "me", "him", "her", "us", "them",
])

# Tokens that flip the polarity of the word that follows them
NEGATIONS = frozenset([
    "not", "no", "never", "none", "nobody", "nothing", "neither", "nor",
    "cannot", "dont", "doesnt", "didnt", "isnt", "wasnt", "arent", "werent",
    "wont", "wouldnt", "shouldnt", "couldnt", "cant", "without",
    # trailing half of an n't contraction once split by the tokenizer
    "t",
])

# nltk ne_chunk labels mapped onto the entity buckets we report
ENTITY_LABELS = {
    "PERSON": "people",
    "GPE": "places",
    "LOCATION": "places",
    "FACILITY": "places",
    "GSP": "places",
    "ORGANIZATION": "organizations",
}

_MONTHS = (
    r"(?:Jan(?:uary)?|Feb(?:ruary)?|Mar(?:ch)?|Apr(?:il)?|May|June?|July?|"
    r"Aug(?:ust)?|Sep(?:t(?:ember)?)?|Oct(?:ober)?|Nov(?:ember)?|Dec(?:ember)?)"
)
_WEEKDAYS = r"(?:Monday|Tuesday|Wednesday|Thursday|Friday|Saturday|Sunday)"

DATE_PATTERNS = (
    re.compile(r"\b\d{4}-\d{2}-\d{2}\b"),
    re.compile(r"\b\d{1,2}/\d{1,2}/\d{2,4}\b"),
    re.compile(r"\b" + _MONTHS + r"\.?\s+\d{1,2}(?:st|nd|rd|th)?(?:,?\s+\d{4})?\b"),
    re.compile(r"\b\d{1,2}(?:st|nd|rd|th)?\s+(?:of\s+)?" + _MONTHS + r"(?:,?\s+\d{4})?\b"),
    re.compile(r"\b" + _MONTHS + r"\s+\d{4}\b"),
    re.compile(r"\b" + _WEEKDAYS + r"\b"),
    re.compile(r"\b(?:today|tomorrow|yesterday)\b", re.IGNORECASE),
)

MONEY_PATTERNS = (
    re.compile(r"[$€£¥]\s?\d+(?:,\d{3})*(?:\.\d+)?(?:\s?(?:million|billion|thousand|[kKmMbB])\b)?"),
    re.compile(r"\b\d[\d,]*(?:\.\d+)?\s?(?:dollars|euros|pounds|yen|cents|USD|EUR|GBP)\b"),
)

PERCENTAGE_PATTERNS = (
    re.compile(r"\b\d+(?:\.\d+)?\s?%"),
    re.compile(r"\b\d+(?:\.\d+)?\s?(?:percent|per cent)\b", re.IGNORECASE),
)

# Per-language comment markers and debug output calls used by the code analyzer
CODE_PROFILES = {
    "javascript": {
        "line_comments": ("//",),
        "block_comments": ("/*",),
        "debug_calls": ("console.log",),
    },
    "typescript": {
        "line_comments": ("//",),
        "block_comments": ("/*",),
        "debug_calls": ("console.log",),
    },
    "java": {
        "line_comments": ("//",),
        "block_comments": ("/*",),
        "debug_calls": ("System.out.println", "System.err.println"),
    },
    "c": {
        "line_comments": ("//",),
        "block_comments": ("/*",),
        "debug_calls": ("printf(",),
    },
    "cpp": {
        "line_comments": ("//",),
        "block_comments": ("/*",),
        "debug_calls": ("printf(", "std::cout"),
    },
    "csharp": {
        "line_comments": ("//",),
        "block_comments": ("/*",),
        "debug_calls": ("Console.WriteLine",),
    },
    "go": {
        "line_comments": ("//",),
        "block_comments": ("/*",),
        "debug_calls": ("fmt.Println", "fmt.Printf"),
    },
    "python": {
        "line_comments": ("#",),
        "block_comments": ('"""', "'''"),
        "debug_calls": ("print(",),
    },
    "ruby": {
        "line_comments": ("#",),
        "block_comments": ("=begin",),
        "debug_calls": ("puts ",),
    },
    "shell": {
        "line_comments": ("#",),
        "block_comments": (),
        "debug_calls": ("echo ",),
    },
}

LANGUAGE_ALIASES = {
    "js": "javascript",
    "node": "javascript",
    "ts": "typescript",
    "py": "python",
    "python3": "python",
    "c++": "cpp",
    "cs": "csharp",
    "c#": "csharp",
    "golang": "go",
    "rb": "ruby",
    "sh": "shell",
    "bash": "shell",
}

DEFAULT_CODE_LANGUAGE = "javascript"
