"""LangGraph workflow that runs a simulated progressive quiz."""

import logging
import random
from collections.abc import Callable, Sequence
from typing import Any, Literal

from langgraph.graph import END, StateGraph

from progressive_quiz.graph.state import ProgressiveQuizState, create_initial_state
from progressive_quiz.models.quiz import PracticeTest, Question
from progressive_quiz.selection.selector import select_next_question
from progressive_quiz.selection.sequence import update_session

logger = logging.getLogger(__name__)


def select_question(state: ProgressiveQuizState) -> dict[str, Any]:
    """
    Select node: pick the next question for the running session.

    Returns:
        Dictionary with ``current`` set to the pick, or None when the quiz
        is full or the tests are exhausted
    """
    if len(state["selected"]) >= state["max_questions"]:
        return {"current": None}

    current = select_next_question(
        state["tests"],
        state["session"],
        state["previous_question"],
        rng=state["rng"],
    )
    return {"current": current}


def record_answer(state: ProgressiveQuizState) -> dict[str, Any]:
    """
    Record node: answer the current question and update the session.

    Returns:
        Dictionary with the updated session, selections and previous question
    """
    current = state["current"]
    is_correct = bool(state["answer_fn"](current.question))
    session = update_session(state["session"], current.question, is_correct)

    logger.debug(
        "Answered %s (%s), next tier %s",
        current.question.id,
        "correct" if is_correct else "wrong",
        session.difficulty_level.value,
    )

    return {
        "session": session,
        "selected": [*state["selected"], current],
        "previous_question": current.question,
        "current": None,
    }


def should_record(state: ProgressiveQuizState) -> Literal["record", "end"]:
    """Record the pick if there is one, otherwise stop."""
    return "record" if state.get("current") is not None else "end"


def should_continue(state: ProgressiveQuizState) -> Literal["select", "end"]:
    """Keep selecting until the quiz is full."""
    if len(state["selected"]) >= state["max_questions"]:
        return "end"
    return "select"


def create_progressive_quiz_workflow() -> StateGraph:
    """
    Create the LangGraph workflow for a progressive quiz.

    The workflow loops:
    1. Select - picks the next question
    2. [Conditional] End when nothing was picked
    3. Record - answers it and updates the session
    4. [Conditional] End when the quiz is full, otherwise select again

    Returns:
        Uncompiled StateGraph
    """
    workflow = StateGraph(ProgressiveQuizState)

    workflow.add_node("select", select_question)
    workflow.add_node("record", record_answer)

    workflow.set_entry_point("select")

    workflow.add_conditional_edges(
        "select",
        should_record,
        {
            "record": "record",
            "end": END,
        },
    )

    workflow.add_conditional_edges(
        "record",
        should_continue,
        {
            "select": "select",
            "end": END,
        },
    )

    return workflow


def compile_workflow():
    """
    Compile the workflow and return it ready for execution.

    Returns:
        Compiled workflow
    """
    workflow = create_progressive_quiz_workflow()
    return workflow.compile()


def generate_progressive_quiz(
    tests: Sequence[PracticeTest],
    max_questions: int = 10,
    rng: random.Random | None = None,
    answer_fn: Callable[[Question], bool] | None = None,
) -> list[Question]:
    """
    Run a progressive quiz over a set of tests.

    Args:
        tests: Tests to draw questions from
        max_questions: Maximum number of questions
        rng: Random source
        answer_fn: Outcome source; simulated answers when omitted

    Returns:
        Selected questions in order, without repeats
    """
    state = create_initial_state(tests, max_questions, rng, answer_fn)
    workflow = compile_workflow()

    # Two node visits per question plus the final select
    recursion_limit = 2 * max(max_questions, 0) + 5
    final_state = workflow.invoke(state, config={"recursion_limit": recursion_limit})

    questions = [item.question for item in final_state["selected"]]
    logger.info("Progressive quiz finished with %d question(s)", len(questions))
    return questions
