"""Application settings and configuration."""

from functools import lru_cache

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from progressive_quiz.models.quiz import SimilarityWeights

# Load .env file if present
load_dotenv()

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Content locations
    questions_dir: str = Field(
        default="data/questions",
        description="Directory holding one JSON file per channel",
        validation_alias="QUESTIONS_DIR",
    )

    certifications_file: str = Field(
        default="data/certifications.json",
        description="JSON file with certification exams and questions",
        validation_alias="CERTIFICATIONS_FILE",
    )

    # Selection Settings
    default_question_count: int = Field(
        default=20,
        ge=1,
        le=500,
        description="Default length of a progressive sequence",
        validation_alias="DEFAULT_QUESTION_COUNT",
    )

    top_candidates: int = Field(
        default=5,
        ge=1,
        le=50,
        description="Best-ranked candidates the random pick chooses from",
        validation_alias="TOP_CANDIDATES",
    )

    simulated_success_rate: float = Field(
        default=0.6,
        ge=0.0,
        le=1.0,
        description="Probability of a correct simulated answer",
        validation_alias="SIMULATED_SUCCESS_RATE",
    )

    random_seed: int | None = Field(
        default=None,
        description="Seed for reproducible selection (random when unset)",
        validation_alias="RANDOM_SEED",
    )

    # Relevance weights
    difficulty_weight: float = Field(
        default=0.2,
        ge=0.0,
        le=1.0,
        description="Bonus for candidates at the previous question's tier",
        validation_alias="DIFFICULTY_WEIGHT",
    )

    keyword_weight: float = Field(
        default=0.5,
        ge=0.0,
        le=1.0,
        description="Weight of keyword overlap",
        validation_alias="KEYWORD_WEIGHT",
    )

    length_weight: float = Field(
        default=0.3,
        ge=0.0,
        le=1.0,
        description="Weight of question length similarity",
        validation_alias="LENGTH_WEIGHT",
    )

    # Output Settings
    default_output_path: str = Field(
        default="practice",
        description="Default output file path",
        validation_alias="DEFAULT_OUTPUT",
    )

    log_level: str = Field(
        default="WARNING",
        description="Logging level for the CLI",
        validation_alias="LOG_LEVEL",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalise the level name and reject unknown levels."""
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }

    def similarity_weights(self) -> SimilarityWeights:
        """Build the relevance weights from the configured values."""
        return SimilarityWeights(
            difficulty=self.difficulty_weight,
            keywords=self.keyword_weight,
            length=self.length_weight,
        )


# This is loaded the first time and then cached for further use by the CLI
@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings object with loaded configuration
    """
    return Settings()
