"""Session Deduplication Guard - Builds progressive question sequences without repeats."""

import logging
import random
from collections.abc import Callable, Sequence
from typing import TypeVar

from progressive_quiz.models.quiz import (
    DifficultyLevel,
    Question,
    QuizSession,
    SimilarityWeights,
)
from progressive_quiz.selection.difficulty import (
    determine_target_difficulty,
    recent_accuracy,
)
from progressive_quiz.selection.selector import TOP_CANDIDATES, select_candidate

logger = logging.getLogger(__name__)

# Simulated learners answer correctly this often when no outcome source is given
SIMULATED_SUCCESS_RATE = 0.6

QuestionT = TypeVar("QuestionT", bound=Question)

AnswerFn = Callable[[Question], bool]


def initialize_quiz_session() -> QuizSession:
    """Create an empty session targeting beginner questions."""
    return QuizSession()


def update_session(
    session: QuizSession, question: Question, is_correct: bool
) -> QuizSession:
    """
    Record an answered question and return the updated session.

    The given session is left untouched.

    Args:
        session: Current session
        question: Question that was answered
        is_correct: Whether the answer was correct

    Returns:
        New QuizSession with counters, history and tier updated

    Raises:
        ValueError: If the question is already part of the session
    """
    if question.id in session.answered_ids:
        raise ValueError(f"Question {question.id} already answered in this session")

    history = [*session.performance_history, is_correct]
    total_answered = session.total_answered + 1

    return session.model_copy(
        update={
            "questions": [*session.questions, question],
            "current_index": session.current_index + 1,
            "correct_count": session.correct_count + (1 if is_correct else 0),
            "total_answered": total_answered,
            "performance_history": history,
            "difficulty_level": determine_target_difficulty(
                session.difficulty_level,
                recent_accuracy(history),
                total_answered,
            ),
        }
    )


def simulated_answers(
    rng: random.Random, success_rate: float = SIMULATED_SUCCESS_RATE
) -> AnswerFn:
    """
    Build an outcome source that answers correctly with the given probability.

    Args:
        rng: Random source shared with the selection
        success_rate: Probability of a correct answer

    Returns:
        Callable taking a question and returning True/False
    """

    def answer(_question: Question) -> bool:
        return rng.random() < success_rate

    return answer


def generate_progressive_sequence(
    questions: Sequence[QuestionT],
    count: int = 20,
    rng: random.Random | None = None,
    answer_fn: AnswerFn | None = None,
    top_n: int = TOP_CANDIDATES,
    weights: SimilarityWeights | None = None,
) -> list[QuestionT]:
    """
    Order questions into a progressive sequence.

    Each step builds the pool of questions not yet selected, derives the
    target tier from the outcomes recorded so far and picks a candidate
    related to the previous selection. Outcomes come from ``answer_fn``
    (simulated when omitted) and only steer the tier.

    Args:
        questions: Input pool
        count: Maximum number of questions to return
        rng: Random source; seed it for reproducible sequences
        answer_fn: Outcome source for each selected question
        top_n: Number of best-ranked candidates to choose from
        weights: Similarity weights

    Returns:
        Up to ``count`` distinct questions from the pool; shorter when the
        pool runs out
    """
    max_count = min(count, len(questions))
    if max_count <= 0:
        return []

    if rng is None:
        rng = random.Random()
    if answer_fn is None:
        answer_fn = simulated_answers(rng)

    selected: list[QuestionT] = []
    selected_ids: set[str] = set()
    current_difficulty = DifficultyLevel.BEGINNER
    performance_history: list[bool] = []

    while len(selected) < max_count:
        available = [q for q in questions if q.id not in selected_ids]
        if not available:
            logger.info(
                "Question pool exhausted after %d of %d selections",
                len(selected),
                count,
            )
            break

        current_difficulty = determine_target_difficulty(
            current_difficulty,
            recent_accuracy(performance_history),
            len(selected),
        )
        previous = selected[-1] if selected else None

        next_question = select_candidate(
            previous, available, current_difficulty, rng, top_n, weights
        )
        if next_question is None:
            break

        selected.append(next_question)
        selected_ids.add(next_question.id)
        performance_history.append(bool(answer_fn(next_question)))

        logger.debug(
            "Step %d: %s (target=%s)",
            len(selected),
            next_question.id,
            current_difficulty.value,
        )

    logger.info("Generated progressive sequence of %d question(s)", len(selected))
    return selected
