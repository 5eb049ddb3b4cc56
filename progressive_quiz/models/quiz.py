"""Pydantic models for interview questions and progressive quiz sessions."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator


class DifficultyLevel(str, Enum):
    """Question difficulty tiers, ordered from easiest to hardest."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"

    @classmethod
    def ordered(cls) -> list["DifficultyLevel"]:
        """Return the tiers in escalation order."""
        return [cls.BEGINNER, cls.INTERMEDIATE, cls.ADVANCED]

    def escalate(self) -> "DifficultyLevel":
        """Move up one tier, staying at ADVANCED."""
        tiers = DifficultyLevel.ordered()
        index = tiers.index(self)
        return tiers[min(index + 1, len(tiers) - 1)]

    def deescalate(self) -> "DifficultyLevel":
        """Move down one tier, staying at BEGINNER."""
        tiers = DifficultyLevel.ordered()
        index = tiers.index(self)
        return tiers[max(index - 1, 0)]


class Question(BaseModel):
    """A single interview question loaded from static content."""

    id: str = Field(..., min_length=1, description="Unique identifier for the question")
    question: str = Field(..., description="The question text")
    answer: str | None = Field(None, description="Short reference answer")
    explanation: str | None = Field(None, description="Longer explanation of the answer")
    difficulty: DifficultyLevel | None = Field(
        None,
        description="Difficulty tier; None when the source has no usable tier",
    )
    tags: list[str] = Field(default_factory=list, description="Topic tags")
    channel: str | None = Field(None, description="Channel the question belongs to")
    sub_channel: str | None = Field(
        None,
        description="Sub-channel within the channel",
        validation_alias="subChannel",
    )

    @field_validator("difficulty", mode="before")
    @classmethod
    def coerce_difficulty(cls, v: Any) -> Any:
        """Map unknown difficulty strings to None instead of rejecting them."""
        if v is None or isinstance(v, DifficultyLevel):
            return v
        if isinstance(v, str):
            value = v.strip().lower()
            if value in {d.value for d in DifficultyLevel}:
                return value
        return None

    @field_validator("tags")
    @classmethod
    def clean_tags(cls, v: list[str]) -> list[str]:
        """Drop blank tags."""
        return [tag.strip() for tag in v if tag and tag.strip()]

    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {
            "example": {
                "id": "sd-001",
                "question": "How would you design a rate limiter for a public API?",
                "answer": "Token bucket per client key stored in a shared cache.",
                "difficulty": "intermediate",
                "tags": ["rate-limiting", "api"],
                "channel": "system-design",
                "subChannel": "infrastructure",
            }
        },
    }


class PracticeTest(BaseModel):
    """A named group of questions offered together, usually one per channel."""

    id: str = Field(..., min_length=1, description="Test identifier")
    title: str = Field(..., min_length=1, description="Display title")
    channel: str | None = Field(None, description="Channel the test covers")
    questions: list[Question] = Field(
        default_factory=list,
        description="Questions in this test",
    )

    @property
    def question_count(self) -> int:
        """Get the number of questions in this test."""
        return len(self.questions)


class QuizSession(BaseModel):
    """State of one progressive quiz run."""

    questions: list[Question] = Field(
        default_factory=list,
        description="Questions answered so far, in order",
    )
    current_index: int = Field(default=0, ge=0)
    correct_count: int = Field(default=0, ge=0)
    total_answered: int = Field(default=0, ge=0)
    difficulty_level: DifficultyLevel = Field(
        default=DifficultyLevel.BEGINNER,
        description="Current target tier",
    )
    performance_history: list[bool] = Field(
        default_factory=list,
        description="One entry per answered question, True when correct",
    )

    @model_validator(mode="after")
    def validate_unique_questions(self) -> "QuizSession":
        """A question may appear only once in a session."""
        ids = [q.id for q in self.questions]
        if len(ids) != len(set(ids)):
            raise ValueError("Session contains duplicate question ids")
        if self.correct_count > self.total_answered:
            raise ValueError("correct_count cannot exceed total_answered")
        return self

    @property
    def answered_ids(self) -> set[str]:
        """Ids of every question already in the session."""
        return {q.id for q in self.questions}

    @property
    def accuracy(self) -> float:
        """Overall fraction of correct answers (0.0 before any answer)."""
        if self.total_answered == 0:
            return 0.0
        return self.correct_count / self.total_answered


class QuestionWithContext(BaseModel):
    """A candidate question together with its test and relevance score."""

    question: Question
    test: PracticeTest | None = None
    relevance_score: float = Field(default=0.0, ge=0.0, le=1.0)


class SimilarityWeights(BaseModel):
    """Weights of the three relevance signals between two questions."""

    difficulty: float = Field(default=0.2, ge=0.0, le=1.0)
    keywords: float = Field(default=0.5, ge=0.0, le=1.0)
    length: float = Field(default=0.3, ge=0.0, le=1.0)


class ChannelStats(BaseModel):
    """Question counts for one channel, broken down by tier."""

    id: str
    total: int = Field(default=0, ge=0)
    beginner: int = Field(default=0, ge=0)
    intermediate: int = Field(default=0, ge=0)
    advanced: int = Field(default=0, ge=0)


class SequenceRequest(BaseModel):
    """User input for generating a progressive question sequence."""

    channels: list[str] = Field(
        default_factory=list,
        description="Channels to draw from; empty means all channels",
    )
    count: int = Field(default=20, ge=0, le=500, description="Questions to select")
    sub_channel: str | None = Field(None, description="Optional sub-channel filter")
    difficulty: DifficultyLevel | None = Field(None, description="Optional tier filter")
    seed: int | None = Field(None, description="Seed for reproducible selection")

    @field_validator("channels")
    @classmethod
    def validate_channels(cls, v: list[str]) -> list[str]:
        """Clean channel names."""
        return [channel.strip() for channel in v if channel.strip()]

    model_config = {
        "json_schema_extra": {
            "example": {
                "channels": ["system-design", "devops"],
                "count": 10,
                "seed": 42,
            }
        }
    }
