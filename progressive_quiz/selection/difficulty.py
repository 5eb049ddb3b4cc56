"""Adaptive Difficulty Controller - Picks the next target tier from recent performance."""

from collections.abc import Sequence

from progressive_quiz.models.quiz import DifficultyLevel

# Accuracy above this escalates, below DEESCALATE_THRESHOLD de-escalates
ESCALATE_THRESHOLD = 0.7
DEESCALATE_THRESHOLD = 0.4

# The first questions of a session are always beginner
COLD_START_ANSWERS = 2

RECENT_WINDOW = 3
NEUTRAL_ACCURACY = 0.5


def recent_accuracy(history: Sequence[bool], window: int = RECENT_WINDOW) -> float:
    """
    Compute accuracy over the most recent answers.

    Args:
        history: Answer outcomes in order, True for correct
        window: Number of most recent answers to consider

    Returns:
        Fraction of correct answers in the window, or 0.5 with no history
    """
    recent = list(history)[-window:] if window > 0 else []
    if not recent:
        return NEUTRAL_ACCURACY
    return sum(1 for outcome in recent if outcome) / len(recent)


def determine_target_difficulty(
    current_level: DifficultyLevel | str | None,
    recent_accuracy: float,
    total_answered: int,
    *,
    escalate_threshold: float = ESCALATE_THRESHOLD,
    deescalate_threshold: float = DEESCALATE_THRESHOLD,
    cold_start_answers: int = COLD_START_ANSWERS,
) -> DifficultyLevel:
    """
    Determine the tier of the next question.

    Cold start keeps the first questions at beginner. After that the tier
    moves at most one step: up when recent accuracy is high, down when it
    is low, otherwise it stays put.

    Args:
        current_level: Tier the session is currently targeting; unknown
            values are treated as beginner
        recent_accuracy: Accuracy over the last few answers (0.0 to 1.0)
        total_answered: Questions answered so far in the session

    Returns:
        Target DifficultyLevel for the next selection
    """
    if total_answered < cold_start_answers:
        return DifficultyLevel.BEGINNER

    try:
        current = DifficultyLevel(current_level)
    except ValueError:
        # Unknown tiers restart from the bottom
        current = DifficultyLevel.BEGINNER

    if recent_accuracy > escalate_threshold:
        return current.escalate()

    if recent_accuracy < deescalate_threshold:
        return current.deescalate()

    return current
