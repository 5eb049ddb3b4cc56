"""Relevance scoring between two questions using keyword and length heuristics."""

import re

from progressive_quiz.models.quiz import Question, SimilarityWeights

STOP_WORDS = frozenset(
    {
        "what", "how", "why", "when", "where", "which", "who",
        "the", "a", "an", "and", "or", "but", "in", "on", "at",
        "to", "for", "of", "with", "by", "from", "is", "are",
        "was", "were", "be", "been", "being", "have", "has", "had",
        "do", "does", "did", "will", "would", "should", "could",
        "can", "may", "might", "must", "shall",
    }
)

MAX_KEYWORDS = 10
MIN_KEYWORD_LENGTH = 4

_NON_ALPHANUMERIC = re.compile(r"[^a-z0-9\s]")

DEFAULT_WEIGHTS = SimilarityWeights()


def extract_keywords(
    text: str,
    max_keywords: int = MAX_KEYWORDS,
    min_length: int = MIN_KEYWORD_LENGTH,
) -> list[str]:
    """
    Extract meaningful terms from question text.

    Args:
        text: Question text
        max_keywords: Keep at most this many keywords, in order of appearance
        min_length: Minimum keyword length

    Returns:
        Lowercased keywords with stop words and short words removed
    """
    normalized = _NON_ALPHANUMERIC.sub(" ", text.lower())
    words = [
        word
        for word in normalized.split()
        if len(word) >= min_length and word not in STOP_WORDS
    ]
    return words[:max_keywords]


def keyword_overlap(text_a: str, text_b: str) -> float:
    """Fraction of keywords of text_a also found in text_b (0.0 to 1.0)."""
    keywords_a = extract_keywords(text_a)
    keywords_b = extract_keywords(text_b)
    common = [keyword for keyword in keywords_a if keyword in keywords_b]
    return len(common) / max(len(keywords_a), len(keywords_b), 1)


def length_ratio(text_a: str, text_b: str) -> float:
    """Ratio of the shorter text length to the longer one."""
    longest = max(len(text_a), len(text_b))
    if longest == 0:
        return 1.0
    return min(len(text_a), len(text_b)) / longest


def calculate_similarity(
    q1: Question,
    q2: Question,
    weights: SimilarityWeights | None = None,
) -> float:
    """
    Score how related two questions are.

    The score combines a same-difficulty bonus, keyword overlap and a
    length ratio favouring questions of similar complexity.

    Args:
        q1: Reference question (usually the previous one)
        q2: Candidate question
        weights: Signal weights, defaults to 0.2 / 0.5 / 0.3

    Returns:
        Similarity score between 0.0 and 1.0
    """
    weights = weights or DEFAULT_WEIGHTS
    score = 0.0

    if q1.difficulty is not None and q1.difficulty == q2.difficulty:
        score += weights.difficulty

    score += keyword_overlap(q1.question, q2.question) * weights.keywords
    score += length_ratio(q1.question, q2.question) * weights.length

    return min(score, 1.0)
