"""Adaptive question selection."""

from .difficulty import determine_target_difficulty, recent_accuracy
from .practice import generate_practice_session, score_practice_session
from .selector import (
    filter_by_difficulty,
    rank_candidates,
    select_candidate,
    select_next_question,
)
from .sequence import (
    generate_progressive_sequence,
    initialize_quiz_session,
    update_session,
)
from .similarity import calculate_similarity, extract_keywords

__all__ = [
    "determine_target_difficulty",
    "recent_accuracy",
    "extract_keywords",
    "calculate_similarity",
    "filter_by_difficulty",
    "rank_candidates",
    "select_candidate",
    "select_next_question",
    "initialize_quiz_session",
    "update_session",
    "generate_progressive_sequence",
    "generate_practice_session",
    "score_practice_session",
]
