"""Certification practice sessions weighted by exam domain."""

import logging
import math
import random
from collections.abc import Mapping, Sequence

from progressive_quiz.models.certification import CertificationQuestion, DomainProgress
from progressive_quiz.repository.certification_catalog import (
    CertificationCatalog,
    summarize_domain,
)
from progressive_quiz.selection.sequence import generate_progressive_sequence

logger = logging.getLogger(__name__)


def domain_question_count(weight: float, question_count: int) -> int:
    """Questions allotted to a domain: its share of the session, at least one."""
    return max(1, math.floor(weight / 100 * question_count + 0.5))


def generate_practice_session(
    catalog: CertificationCatalog,
    certification_id: str,
    question_count: int = 10,
    rng: random.Random | None = None,
) -> list[CertificationQuestion]:
    """
    Generate a practice session for a certification.

    Questions are first drawn per exam domain in proportion to the domain
    weight, then the combined set is ordered progressively. Without an exam
    configuration the whole question set is ordered progressively.

    Args:
        catalog: Certification content
        certification_id: Certification to practise
        question_count: Maximum session length
        rng: Random source

    Returns:
        Up to ``question_count`` distinct questions
    """
    if rng is None:
        rng = random.Random()

    questions = catalog.get_questions_for_certification(certification_id)
    config = catalog.get_exam_config(certification_id)

    if config is None or not questions:
        logger.info("No exam config for %s, using unweighted selection", certification_id)
        return generate_progressive_sequence(questions, question_count, rng=rng)

    session: list[CertificationQuestion] = []
    for domain in config.domains:
        domain_questions = [q for q in questions if q.domain == domain.id]
        count = domain_question_count(domain.weight, question_count)
        selected = generate_progressive_sequence(domain_questions, count, rng=rng)
        logger.debug(
            "Domain %s: %d of %d requested question(s)", domain.id, len(selected), count
        )
        session.extend(selected)

    return generate_progressive_sequence(session, question_count, rng=rng)


def score_practice_session(
    questions: Sequence[CertificationQuestion],
    answers: Mapping[str, bool],
) -> dict[str, DomainProgress]:
    """
    Summarise a finished practice session per domain.

    Args:
        questions: Questions offered in the session
        answers: Question id -> whether it was answered correctly

    Returns:
        DomainProgress per domain present in the session
    """
    domains = dict.fromkeys(q.domain for q in questions)
    return {
        domain: summarize_domain([q for q in questions if q.domain == domain], answers)
        for domain in domains
    }
