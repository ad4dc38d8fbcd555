"""Instant, deterministic resume statistics computed without any model call."""

from __future__ import annotations

import math
import re

from cvpulse.schemas.analysis import LocalMetrics

_WORD_SPLIT_RE = re.compile(r"\s+")
_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")
# percentages, currency, abbreviated thousands/millions, "10+" style counts
_QUANTIFIER_RE = re.compile(r"\d+%|\$\d+|\d+k|\d+m|\d+\+", re.IGNORECASE | re.ASCII)

STRONG_VERBS = frozenset(
    {
        "spearheaded",
        "orchestrated",
        "developed",
        "engineered",
        "implemented",
        "generated",
        "increased",
        "reduced",
        "launched",
    }
)
WEAK_VERBS = frozenset({"helped", "worked", "responsible", "assisted", "participated"})

IMPACT_WEIGHT = 1.5
RUN_ON_SENTENCE_WORDS = 25
OPTIMAL_SENTENCE_WORDS = 15


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def split_words(text: str) -> list[str]:
    return [token for token in _WORD_SPLIT_RE.split(text) if token]


def split_sentences(text: str) -> list[str]:
    return [segment for segment in _SENTENCE_SPLIT_RE.split(text) if segment]


def impact_score(text: str, sentence_count: int) -> int:
    matches = _QUANTIFIER_RE.findall(text)
    ratio = len(matches) / max(sentence_count, 1)
    return min(100, _round_half_up(ratio * 100 * IMPACT_WEIGHT))


def verb_score(words: list[str]) -> int:
    strong = 0
    weak = 0
    for word in words:
        lowered = word.lower()
        if lowered in STRONG_VERBS:
            strong += 1
        elif lowered in WEAK_VERBS:
            weak += 1
    # the +1 keeps verb-free text at 0 instead of dividing by zero
    return min(100, _round_half_up(strong / (strong + weak + 1) * 100))


def brevity_score(word_count: int, sentence_count: int) -> int:
    avg_sentence_length = word_count / max(sentence_count, 1)
    if avg_sentence_length > RUN_ON_SENTENCE_WORDS:
        return 40
    if avg_sentence_length > OPTIMAL_SENTENCE_WORDS:
        return 100
    return 80


def compute_metrics(text: str) -> LocalMetrics | None:
    """Score resume text on quantified impact, verb strength and sentence length.

    Returns ``None`` for empty text so callers can render an empty state.
    """
    if not text:
        return None

    words = split_words(text)
    sentences = split_sentences(text)

    return LocalMetrics(
        word_count=len(words),
        impact_score=impact_score(text, len(sentences)),
        verb_score=verb_score(words),
        brevity_score=brevity_score(len(words), len(sentences)),
    )
