"""Certification questions and exam layouts."""

import logging
import math
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path

from pydantic import ValidationError

from progressive_quiz.models.certification import (
    CertificationExamConfig,
    CertificationQuestion,
    DomainProgress,
)
from progressive_quiz.repository.question_bank import QuestionBankError, read_json_file

logger = logging.getLogger(__name__)


def summarize_domain(
    questions: Sequence[CertificationQuestion], answers: Mapping[str, bool]
) -> DomainProgress:
    """
    Summarise the answers given to the questions of one domain.

    Args:
        questions: Questions of the domain
        answers: Question id -> whether it was answered correctly

    Returns:
        DomainProgress; the percentage is of answered questions, rounded
        half up, and 0 when none was answered
    """
    answered = [q for q in questions if q.id in answers]
    correct = sum(1 for q in answered if answers[q.id] is True)

    return DomainProgress(
        total=len(questions),
        correct=correct,
        percentage=math.floor(correct / len(answered) * 100 + 0.5) if answered else 0,
    )


class CertificationCatalog:
    """Curated certification questions together with their exam configurations."""

    def __init__(
        self,
        questions: Iterable[CertificationQuestion],
        exam_configs: Iterable[CertificationExamConfig] = (),
    ):
        self._questions = list(questions)
        self._exam_configs = {config.certification_id: config for config in exam_configs}

        ids = [q.id for q in self._questions]
        if len(ids) != len(set(ids)):
            raise QuestionBankError("Duplicate certification question ids")

    @classmethod
    def from_file(cls, path: str | Path) -> "CertificationCatalog":
        """
        Load a catalog from a JSON file with ``exams`` and ``questions`` lists.

        Raises:
            QuestionBankError: If the file is missing or invalid
        """
        path = Path(path)
        data = read_json_file(path)
        if not isinstance(data, dict):
            raise QuestionBankError(f"Expected an object with exams and questions in {path}")

        try:
            exams = [CertificationExamConfig.model_validate(e) for e in data.get("exams", [])]
            questions = [
                CertificationQuestion.model_validate(q) for q in data.get("questions", [])
            ]
        except ValidationError as e:
            raise QuestionBankError(f"Invalid certification data in {path}: {e}") from e

        logger.info(
            "Loaded %d certification question(s) and %d exam(s) from %s",
            len(questions),
            len(exams),
            path,
        )
        return cls(questions, exams)

    def get_certification_ids(self) -> list[str]:
        """Get every certification with questions or an exam config, sorted."""
        ids = {q.certification_id for q in self._questions} | set(self._exam_configs)
        return sorted(ids)

    def get_questions_for_certification(self, certification_id: str) -> list[CertificationQuestion]:
        """Get all questions of a certification."""
        return [q for q in self._questions if q.certification_id == certification_id]

    def get_questions_by_domain(
        self, certification_id: str, domain: str
    ) -> list[CertificationQuestion]:
        """Get the questions of one exam domain."""
        return [
            q
            for q in self._questions
            if q.certification_id == certification_id and q.domain == domain
        ]

    def get_exam_config(self, certification_id: str) -> CertificationExamConfig | None:
        """Get the exam configuration of a certification, if known."""
        return self._exam_configs.get(certification_id)

    def get_domain_progress(
        self, certification_id: str, answered_questions: Mapping[str, bool]
    ) -> dict[str, DomainProgress]:
        """
        Summarise answers per exam domain.

        Args:
            certification_id: Certification to summarise
            answered_questions: Question id -> whether it was answered correctly

        Returns:
            DomainProgress per domain id; empty without an exam config
        """
        config = self.get_exam_config(certification_id)
        if config is None:
            return {}

        questions = self.get_questions_for_certification(certification_id)
        return {
            domain.id: summarize_domain(
                [q for q in questions if q.domain == domain.id], answered_questions
            )
            for domain in config.domains
        }
