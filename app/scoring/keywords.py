from __future__ import annotations

import re
from collections import Counter

_ALPHA_TOKEN_RE = re.compile(r"[a-z]+")

STOP_WORDS = frozenset(
    {
        "the", "a", "an", "and", "or", "but", "in", "on", "at", "to",
        "for", "of", "with", "by", "as", "is", "was", "are", "were",
        "be", "been", "this", "that", "these", "those", "from", "into",
        "have", "has", "had", "will", "would", "could", "should", "your",
        "their", "they", "them", "what", "which", "while", "also", "about",
    }
)
MIN_KEYWORD_LENGTH = 4


def keyword_tokens(text: str) -> list[str]:
    return _ALPHA_TOKEN_RE.findall((text or "").lower())


def keyword_frequencies(text: str) -> Counter[str]:
    """Count qualifying keyword tokens; insertion order follows first occurrence."""
    counts: Counter[str] = Counter()
    for token in keyword_tokens(text):
        if len(token) < MIN_KEYWORD_LENGTH or token in STOP_WORDS:
            continue
        counts[token] += 1
    return counts


def extract_keywords(text: str, top_n: int = 10) -> list[str]:
    if top_n <= 0:
        return []
    counts = keyword_frequencies(text)
    # sorted() is stable, so equal counts keep first-seen order
    ranked = sorted(counts.items(), key=lambda item: -item[1])
    return [token for token, _ in ranked[:top_n]]


def overlap_ratio(text: str, target: str) -> float:
    """Share of distinct ``target`` tokens that also appear in ``text``.

    The ratio is denominated on the target, so pass the reference text (a job
    description, a search query) second. An empty target yields 0.0.
    """
    target_tokens = set(keyword_tokens(target))
    if not target_tokens:
        return 0.0
    text_tokens = set(keyword_tokens(text))
    return len(text_tokens & target_tokens) / len(target_tokens)
