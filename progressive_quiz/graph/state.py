"""State definition for the progressive quiz workflow."""

import random
from collections.abc import Callable, Sequence
from typing import TypedDict

from progressive_quiz.models.quiz import (
    PracticeTest,
    Question,
    QuestionWithContext,
    QuizSession,
)
from progressive_quiz.selection.sequence import (
    initialize_quiz_session,
    simulated_answers,
)


class ProgressiveQuizState(TypedDict):
    """State shared by the nodes of the progressive quiz workflow."""

    # Input
    tests: list[PracticeTest]
    max_questions: int

    # Collaborators
    rng: random.Random
    answer_fn: Callable[[Question], bool]

    # Running session
    session: QuizSession
    previous_question: Question | None
    current: QuestionWithContext | None
    selected: list[QuestionWithContext]


def create_initial_state(
    tests: Sequence[PracticeTest],
    max_questions: int = 10,
    rng: random.Random | None = None,
    answer_fn: Callable[[Question], bool] | None = None,
) -> ProgressiveQuizState:
    """
    Create the initial workflow state.

    Args:
        tests: Tests to draw questions from
        max_questions: Maximum number of questions to select
        rng: Random source; a fresh unseeded one when omitted
        answer_fn: Outcome source; simulated answers when omitted

    Returns:
        ProgressiveQuizState with an empty session
    """
    if rng is None:
        rng = random.Random()

    return {
        "tests": list(tests),
        "max_questions": max_questions,
        "rng": rng,
        "answer_fn": answer_fn or simulated_answers(rng),
        "session": initialize_quiz_session(),
        "previous_question": None,
        "current": None,
        "selected": [],
    }
