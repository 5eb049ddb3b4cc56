"""Relevance-Scored Candidate Selector - Picks the next question of a progressive quiz."""

import logging
import random
from collections.abc import Sequence

from progressive_quiz.models.quiz import (
    DifficultyLevel,
    PracticeTest,
    Question,
    QuestionWithContext,
    QuizSession,
    SimilarityWeights,
)
from progressive_quiz.selection.similarity import calculate_similarity

logger = logging.getLogger(__name__)

TOP_CANDIDATES = 5


def filter_by_difficulty(
    pool: Sequence[Question], target: DifficultyLevel | str
) -> list[Question]:
    """
    Restrict a pool to the target tier.

    Tier match is a preference: when nothing matches, the whole pool is
    returned.

    Args:
        pool: Candidate questions
        target: Preferred difficulty tier

    Returns:
        Questions at the target tier, or the full pool
    """
    matching = [q for q in pool if q.difficulty == target]
    return matching if matching else list(pool)


def rank_candidates(
    previous: Question,
    candidates: Sequence[Question],
    weights: SimilarityWeights | None = None,
) -> list[QuestionWithContext]:
    """
    Score candidates against the previous question, best first.

    Ties keep the original pool order.
    """
    scored = [
        QuestionWithContext(
            question=candidate,
            relevance_score=calculate_similarity(previous, candidate, weights),
        )
        for candidate in candidates
    ]
    return sorted(scored, key=lambda item: item.relevance_score, reverse=True)


def select_candidate(
    previous: Question | None,
    pool: Sequence[Question],
    target: DifficultyLevel | str,
    rng: random.Random | None = None,
    top_n: int = TOP_CANDIDATES,
    weights: SimilarityWeights | None = None,
) -> Question | None:
    """
    Pick one question from a pool of unused candidates.

    Without a previous question the pick is uniform over the tier-filtered
    pool. Otherwise candidates are ranked by similarity to the previous
    question and the pick is uniform over the top ``top_n``.

    Args:
        previous: Last selected question, or None for the first pick
        pool: Questions not yet used in the session
        target: Preferred difficulty tier
        rng: Random source; a fresh unseeded one when omitted
        top_n: Number of best-ranked candidates to choose from
        weights: Similarity weights

    Returns:
        The selected question, or None when the pool is empty
    """
    candidates = filter_by_difficulty(pool, target)
    if not candidates:
        return None

    if rng is None:
        rng = random.Random()

    if previous is None:
        return rng.choice(candidates)

    top_candidates = rank_candidates(previous, candidates, weights)[: max(1, top_n)]
    return rng.choice(top_candidates).question


def select_next_question(
    available_tests: Sequence[PracticeTest],
    session: QuizSession,
    previous_question: Question | None = None,
    rng: random.Random | None = None,
    top_n: int = TOP_CANDIDATES,
    weights: SimilarityWeights | None = None,
) -> QuestionWithContext | None:
    """
    Select the next question across a set of tests for a running session.

    Questions already in the session are skipped. The target tier is the
    session's current difficulty level.

    Args:
        available_tests: Tests whose questions may be offered
        session: Current quiz session
        previous_question: Last question shown, if any
        rng: Random source
        top_n: Number of best-ranked candidates to choose from
        weights: Similarity weights

    Returns:
        QuestionWithContext with the owning test and relevance score,
        or None when every question has been used
    """
    answered = session.answered_ids
    owners: dict[str, PracticeTest] = {}
    pool: list[Question] = []
    for test in available_tests:
        for question in test.questions:
            if question.id in answered or question.id in owners:
                continue
            owners[question.id] = test
            pool.append(question)

    if not pool:
        logger.info("No unanswered questions left across %d test(s)", len(available_tests))
        return None

    # update_session already ran the controller for the last answer
    target = session.difficulty_level

    selected = select_candidate(previous_question, pool, target, rng, top_n, weights)
    if selected is None:
        return None

    score = (
        calculate_similarity(previous_question, selected, weights)
        if previous_question is not None
        else 0.0
    )
    logger.debug(
        "Selected %s (target=%s, score=%.2f)", selected.id, target.value, score
    )
    return QuestionWithContext(
        question=selected,
        test=owners[selected.id],
        relevance_score=score,
    )
