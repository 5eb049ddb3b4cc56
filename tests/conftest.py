"""Shared test fixtures and configuration for pytest."""

import json
import random
from pathlib import Path

import pytest

from progressive_quiz.models.certification import (
    CertificationDomain,
    CertificationExamConfig,
    CertificationQuestion,
    QuestionOption,
)
from progressive_quiz.models.quiz import DifficultyLevel, PracticeTest, Question
from progressive_quiz.repository.certification_catalog import CertificationCatalog


def make_question(
    question_id: str,
    text: str,
    difficulty: DifficultyLevel | str | None = DifficultyLevel.BEGINNER,
    **kwargs,
) -> Question:
    """Build a Question with only the fields a test cares about."""
    return Question(id=question_id, question=text, difficulty=difficulty, **kwargs)


def make_certification_question(
    question_id: str, domain: str, difficulty: str = "beginner"
) -> CertificationQuestion:
    """Build a CertificationQuestion for the terraform exam."""
    return CertificationQuestion(
        id=question_id,
        certification_id="terraform",
        domain=domain,
        question=f"Terraform question about {domain} number {question_id}",
        options=[
            QuestionOption(id="a", text="Right", is_correct=True),
            QuestionOption(id="b", text="Wrong", is_correct=False),
        ],
        difficulty=difficulty,
    )


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for reproducible selections."""
    return random.Random(1234)


@pytest.fixture
def sample_question() -> Question:
    """Create a sample Question for testing."""
    return Question(
        id="sd-003",
        question="How would you design a rate limiter for a public API serving millions of clients?",
        answer="Token bucket per client key stored in Redis.",
        explanation="A distributed token bucket allows bursts while enforcing an average rate.",
        difficulty=DifficultyLevel.INTERMEDIATE,
        tags=["rate-limiting", "api"],
        channel="system-design",
        sub_channel="infrastructure",
    )


@pytest.fixture
def tiered_pool() -> list[Question]:
    """Two beginner questions and one advanced question."""
    return [
        make_question("A", "What is a database index used for?", "beginner"),
        make_question("B", "What is a primary key in a relational database?", "beginner"),
        make_question("C", "How would you shard a relational database across regions?", "advanced"),
    ]


@pytest.fixture
def mixed_pool() -> list[Question]:
    """A larger pool covering every tier and an unrated question."""
    return [
        make_question("k8s-1", "What is a Kubernetes pod?", "beginner"),
        make_question("k8s-2", "What does a Kubernetes deployment manage?", "beginner"),
        make_question("k8s-3", "What is a Kubernetes service and why is it needed?", "beginner"),
        make_question("k8s-4", "How do Kubernetes readiness probes affect traffic routing?", "intermediate"),
        make_question("k8s-5", "How does Kubernetes horizontal pod autoscaling decide replica counts?", "intermediate"),
        make_question("k8s-6", "Explain Kubernetes network policies and their default behaviour.", "intermediate"),
        make_question("k8s-7", "Design multi-cluster Kubernetes failover with global traffic management.", "advanced"),
        make_question("k8s-8", "How would you debug Kubernetes scheduler latency at large scale?", "advanced"),
        make_question("k8s-9", "Describe etcd compaction and defragmentation in Kubernetes clusters.", "advanced"),
        make_question("misc-1", "Explain eventual consistency.", None),
    ]


@pytest.fixture
def sample_tests(mixed_pool: list[Question]) -> list[PracticeTest]:
    """Split the mixed pool into two tests."""
    return [
        PracticeTest(id="basics", title="Basics", channel="kubernetes", questions=mixed_pool[:5]),
        PracticeTest(id="deep-dive", title="Deep Dive", channel="kubernetes", questions=mixed_pool[5:]),
    ]


@pytest.fixture
def questions_dir(tmp_path: Path) -> Path:
    """A directory with two small channel files."""
    directory = tmp_path / "questions"
    directory.mkdir()

    system_design = [
        {
            "id": "sd-1",
            "question": "What is horizontal scaling?",
            "difficulty": "beginner",
            "tags": ["scalability"],
            "subChannel": "fundamentals",
        },
        {
            "id": "sd-2",
            "question": "How would you design a URL shortener?",
            "difficulty": "intermediate",
            "subChannel": "design",
        },
        {
            "id": "sd-3",
            "question": "Design a distributed key-value store with tunable consistency.",
            "difficulty": "advanced",
            "subChannel": "design",
        },
    ]
    devops = [
        {"id": "do-1", "question": "What is continuous integration?", "difficulty": "beginner"},
        {"id": "do-2", "question": "Explain blue-green deployments.", "difficulty": "expert"},
    ]

    (directory / "system-design.json").write_text(json.dumps(system_design), encoding="utf-8")
    (directory / "devops.json").write_text(json.dumps(devops), encoding="utf-8")
    return directory


@pytest.fixture
def certification_questions() -> list[CertificationQuestion]:
    """Terraform questions across three domains."""
    return [
        make_certification_question("state-1", "state", "beginner"),
        make_certification_question("state-2", "state", "intermediate"),
        make_certification_question("state-3", "state", "advanced"),
        make_certification_question("modules-1", "modules", "beginner"),
        make_certification_question("modules-2", "modules", "intermediate"),
        make_certification_question("cloud-1", "cloud", "beginner"),
    ]


@pytest.fixture
def exam_config() -> CertificationExamConfig:
    """Terraform exam with three weighted domains."""
    return CertificationExamConfig(
        certification_id="terraform",
        domains=[
            CertificationDomain(id="state", name="State", weight=50),
            CertificationDomain(id="modules", name="Modules", weight=30),
            CertificationDomain(id="cloud", name="Cloud", weight=20),
        ],
        total_questions=57,
        passing_score=70,
        time_limit=60,
    )


@pytest.fixture
def catalog(
    certification_questions: list[CertificationQuestion],
    exam_config: CertificationExamConfig,
) -> CertificationCatalog:
    """Catalog with the terraform questions and exam config."""
    return CertificationCatalog(certification_questions, [exam_config])
