#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# File: textprep.py
# Author: Wadih Khairallah
# Description: Normalization, tokenization, stemming and rounding helpers
# Created: 2026-10-12 09:14:51
# Modified: 2026-10-19 14:26:05

"""
Text preparation helpers shared by every analyzer.

Everything here is a pure function; the tokenizer and stemmer instances
are created once at import and hold no per-call state.
"""

import re
import math
from typing import List, Union

from nltk.stem import PorterStemmer
from nltk.tokenize import RegexpTokenizer

_BOLD_MARKUP = re.compile(r"\*\*([^*]+)\*\*")
_WHITESPACE = re.compile(r"\s+")
_SENTENCE_TERMINATORS = re.compile(r"[.!?]+")
_VOWEL = re.compile(r"[aeiouy]")

# letters and digits in any script; underscores separate tokens
_tokenizer = RegexpTokenizer(r"[^\W_]+")
_stemmer = PorterStemmer()


def normalize(
    text: str
) -> str:
    """
    Strip bold markup, collapse whitespace runs and trim the ends.

    Args:
        text (str): Raw input text. Anything that is not a string is
            treated as empty.

    Returns:
        str: Single-line normalized text.
    """
    if not isinstance(text, str) or not text:
        return ""
    text = _BOLD_MARKUP.sub(r"\1", text)
    text = _WHITESPACE.sub(" ", text)
    return text.strip()


def collapse(text: str) -> str:
    """Lower-case and collapse whitespace without touching markup."""
    if not isinstance(text, str):
        return ""
    return _WHITESPACE.sub(" ", text.lower()).strip()


def tokenize(text: str) -> List[str]:
    """
    Split text into alphanumeric word tokens.

    Case is preserved; callers lower-case first when they need to.
    """
    if not isinstance(text, str) or not text.strip():
        return []
    return _tokenizer.tokenize(text)


def stem(token: str) -> str:
    """Reduce a token to its Porter stem."""
    return _stemmer.stem(token)


def stem_tokens(tokens: List[str]) -> List[str]:
    return [_stemmer.stem(token) for token in tokens]


def split_sentences(text: str) -> List[str]:
    """
    Split on runs of sentence terminators and drop blank fragments.

    Fragments are returned untrimmed so callers can inspect spacing.
    """
    if not isinstance(text, str):
        return []
    return [s for s in _SENTENCE_TERMINATORS.split(text) if s.strip()]


def count_syllables(text: str) -> int:
    """
    Estimate the syllable count of a text.

    Each whitespace-separated word contributes the number of vowel groups
    it contains, minus one for a trailing "e", and never less than one.

    Args:
        text (str): Input text

    Returns:
        int: Estimated syllable count
    """
    syllables = 0
    for word in text.lower().split():
        count = 0
        prev_is_vowel = False
        for char in word:
            is_vowel = bool(_VOWEL.match(char))
            if is_vowel and not prev_is_vowel:
                count += 1
            prev_is_vowel = is_vowel

        if word.endswith("e"):
            count -= 1
        syllables += max(1, count)

    return syllables


def chunk_words(text: str, size: int) -> List[str]:
    """
    Cut text into contiguous chunks of ``size`` whitespace-separated words.

    The final chunk may be shorter. Empty text yields no chunks.
    """
    if size < 1:
        raise ValueError("chunk size must be at least 1")
    words = text.split() if isinstance(text, str) else []
    return [" ".join(words[i:i + size]) for i in range(0, len(words), size)]


def round_half_up(value: float, digits: int = 0) -> Union[int, float]:
    """
    Round to ``digits`` decimal places with halves going up, the way
    JavaScript's ``Math.round`` does (2.5 -> 3, -2.5 -> -2).

    Python's ``round`` sends exact halves to the even neighbour, which
    shifts scores that land on a tie.

    Args:
        value (float): A finite number
        digits (int): Decimal places to keep

    Returns:
        int when ``digits`` is 0, float otherwise
    """
    factor = 10 ** digits
    rounded = math.floor(value * factor + 0.5)
    return rounded if digits == 0 else rounded / factor
