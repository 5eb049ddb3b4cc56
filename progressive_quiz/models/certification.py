"""Pydantic models for certification exam practice."""

from pydantic import BaseModel, Field, field_validator

from .quiz import DifficultyLevel, Question


class QuestionOption(BaseModel):
    """One answer option of a certification question."""

    id: str = Field(..., min_length=1)
    text: str = Field(..., min_length=1)
    is_correct: bool = Field(default=False, validation_alias="isCorrect")

    model_config = {"populate_by_name": True}


class CertificationQuestion(Question):
    """A multiple-choice question aligned with a certification exam domain."""

    certification_id: str = Field(
        ...,
        min_length=1,
        validation_alias="certificationId",
    )
    domain: str = Field(..., min_length=1, description="Exam domain/objective id")
    domain_weight: float = Field(
        default=0.0,
        ge=0.0,
        le=100.0,
        description="Percentage weight of the domain in the real exam",
        validation_alias="domainWeight",
    )
    options: list[QuestionOption] = Field(..., min_length=2)
    difficulty: DifficultyLevel = Field(..., description="Difficulty tier")

    @field_validator("options")
    @classmethod
    def validate_options(cls, v: list[QuestionOption]) -> list[QuestionOption]:
        """Ensure exactly one option is correct and option ids are unique."""
        if sum(1 for option in v if option.is_correct) != 1:
            raise ValueError("Exactly one option must be marked correct")
        if len({option.id for option in v}) != len(v):
            raise ValueError("Option ids must be unique")
        return v

    @property
    def correct_option(self) -> QuestionOption:
        """The option marked correct."""
        return next(option for option in self.options if option.is_correct)


class CertificationDomain(BaseModel):
    """A weighted domain of a certification exam."""

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    weight: float = Field(..., ge=0.0, le=100.0, description="Percentage in exam")
    description: str = ""


class CertificationExamConfig(BaseModel):
    """Exam layout used to weight practice sessions."""

    certification_id: str = Field(..., min_length=1, validation_alias="certificationId")
    domains: list[CertificationDomain] = Field(default_factory=list)
    total_questions: int = Field(..., ge=1, validation_alias="totalQuestions")
    passing_score: float = Field(..., ge=0.0, le=100.0, validation_alias="passingScore")
    time_limit: int = Field(
        ...,
        ge=1,
        description="Time limit in minutes",
        validation_alias="timeLimit",
    )

    model_config = {"populate_by_name": True}


class DomainProgress(BaseModel):
    """Answer statistics for one exam domain."""

    total: int = Field(default=0, ge=0, description="Questions available in the domain")
    correct: int = Field(default=0, ge=0, description="Questions answered correctly")
    percentage: int = Field(
        default=0,
        ge=0,
        le=100,
        description="Correct answers as a percentage of answered questions",
    )
