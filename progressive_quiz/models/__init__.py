"""Data models for progressive question selection."""

from .certification import (
    CertificationDomain,
    CertificationExamConfig,
    CertificationQuestion,
    DomainProgress,
    QuestionOption,
)
from .quiz import (
    ChannelStats,
    DifficultyLevel,
    PracticeTest,
    Question,
    QuestionWithContext,
    QuizSession,
    SequenceRequest,
    SimilarityWeights,
)

__all__ = [
    "DifficultyLevel",
    "Question",
    "PracticeTest",
    "QuizSession",
    "QuestionWithContext",
    "SimilarityWeights",
    "ChannelStats",
    "SequenceRequest",
    # Certification practice
    "QuestionOption",
    "CertificationQuestion",
    "CertificationDomain",
    "CertificationExamConfig",
    "DomainProgress",
]
