"""Tests for Pydantic models."""

import pytest
from pydantic import ValidationError

from progressive_quiz.models.certification import (
    CertificationExamConfig,
    CertificationQuestion,
    QuestionOption,
)
from progressive_quiz.models.quiz import (
    DifficultyLevel,
    PracticeTest,
    Question,
    QuizSession,
    SequenceRequest,
    SimilarityWeights,
)


class TestDifficultyLevel:
    """Test DifficultyLevel enum."""

    def test_difficulty_values(self):
        """Test difficulty enum values."""
        assert DifficultyLevel.BEGINNER.value == "beginner"
        assert DifficultyLevel.INTERMEDIATE.value == "intermediate"
        assert DifficultyLevel.ADVANCED.value == "advanced"

    def test_difficulty_from_string(self):
        """Test creating difficulty from string."""
        assert DifficultyLevel("beginner") == DifficultyLevel.BEGINNER
        assert DifficultyLevel("advanced") == DifficultyLevel.ADVANCED

    def test_escalate_moves_up_one_tier(self):
        """Test escalation with ceiling."""
        assert DifficultyLevel.BEGINNER.escalate() == DifficultyLevel.INTERMEDIATE
        assert DifficultyLevel.INTERMEDIATE.escalate() == DifficultyLevel.ADVANCED
        assert DifficultyLevel.ADVANCED.escalate() == DifficultyLevel.ADVANCED

    def test_deescalate_moves_down_one_tier(self):
        """Test de-escalation with floor."""
        assert DifficultyLevel.ADVANCED.deescalate() == DifficultyLevel.INTERMEDIATE
        assert DifficultyLevel.INTERMEDIATE.deescalate() == DifficultyLevel.BEGINNER
        assert DifficultyLevel.BEGINNER.deescalate() == DifficultyLevel.BEGINNER


class TestQuestion:
    """Test Question model."""

    def test_create_valid_question(self, sample_question: Question):
        """Test creating a valid question."""
        assert sample_question.id == "sd-003"
        assert sample_question.difficulty == DifficultyLevel.INTERMEDIATE
        assert sample_question.tags == ["rate-limiting", "api"]
        assert sample_question.sub_channel == "infrastructure"

    def test_accepts_camel_case_sub_channel(self):
        """Test that records using subChannel are accepted."""
        question = Question.model_validate(
            {"id": "q1", "question": "What is DNS?", "subChannel": "networking"}
        )
        assert question.sub_channel == "networking"

    def test_unknown_difficulty_becomes_none(self):
        """Test that unknown tiers are coerced instead of rejected."""
        question = Question(id="q1", question="What is DNS?", difficulty="expert")
        assert question.difficulty is None

    def test_difficulty_is_case_insensitive(self):
        """Test that tier strings are normalised."""
        question = Question(id="q1", question="What is DNS?", difficulty=" Advanced ")
        assert question.difficulty == DifficultyLevel.ADVANCED

    def test_difficulty_is_optional(self):
        """Test that difficulty defaults to None."""
        question = Question(id="q1", question="What is DNS?")
        assert question.difficulty is None

    def test_question_requires_id(self):
        """Test that an empty id is rejected."""
        with pytest.raises(ValidationError):
            Question(id="", question="What is DNS?")

    def test_blank_tags_are_dropped(self):
        """Test tag cleaning."""
        question = Question(id="q1", question="What is DNS?", tags=["dns", " ", ""])
        assert question.tags == ["dns"]


class TestPracticeTest:
    """Test PracticeTest model."""

    def test_question_count_property(self, tiered_pool: list[Question]):
        """Test the question_count property."""
        test = PracticeTest(id="t1", title="Databases", questions=tiered_pool)
        assert test.question_count == 3


class TestQuizSession:
    """Test QuizSession model."""

    def test_new_session_defaults(self):
        """Test that a new session is empty at beginner."""
        session = QuizSession()

        assert session.questions == []
        assert session.total_answered == 0
        assert session.correct_count == 0
        assert session.difficulty_level == DifficultyLevel.BEGINNER
        assert session.performance_history == []
        assert session.accuracy == 0.0

    def test_rejects_duplicate_questions(self, sample_question: Question):
        """Test that a session cannot hold the same question twice."""
        with pytest.raises(ValidationError):
            QuizSession(questions=[sample_question, sample_question], total_answered=2)

    def test_rejects_more_correct_than_answered(self):
        """Test counter consistency."""
        with pytest.raises(ValidationError):
            QuizSession(correct_count=2, total_answered=1)

    def test_answered_ids(self, tiered_pool: list[Question]):
        """Test the answered_ids property."""
        session = QuizSession(questions=tiered_pool[:2], total_answered=2)
        assert session.answered_ids == {"A", "B"}

    def test_accuracy(self):
        """Test the overall accuracy property."""
        session = QuizSession(correct_count=3, total_answered=4)
        assert session.accuracy == 0.75


class TestSimilarityWeights:
    """Test SimilarityWeights model."""

    def test_defaults(self):
        """Test default weights."""
        weights = SimilarityWeights()
        assert (weights.difficulty, weights.keywords, weights.length) == (0.2, 0.5, 0.3)

    def test_weights_must_be_in_range(self):
        """Test weight bounds."""
        with pytest.raises(ValidationError):
            SimilarityWeights(keywords=1.5)


class TestSequenceRequest:
    """Test SequenceRequest model."""

    def test_cleans_channels(self):
        """Test that blank channels are dropped and names stripped."""
        request = SequenceRequest(channels=[" devops ", "", "  "], count=5)
        assert request.channels == ["devops"]

    def test_count_bounds(self):
        """Test that count is validated."""
        with pytest.raises(ValidationError):
            SequenceRequest(count=-1)

        with pytest.raises(ValidationError):
            SequenceRequest(count=501)

    def test_optional_fields(self):
        """Test that filters and seed are optional."""
        request = SequenceRequest()
        assert request.channels == []
        assert request.sub_channel is None
        assert request.seed is None


class TestCertificationQuestion:
    """Test CertificationQuestion model."""

    def test_accepts_camel_case_record(self):
        """Test loading a record in the content format."""
        question = CertificationQuestion.model_validate(
            {
                "id": "tf-1",
                "certificationId": "terraform",
                "domain": "state",
                "domainWeight": 15,
                "question": "What is the purpose of Terraform state?",
                "options": [
                    {"id": "a", "text": "Track resources", "isCorrect": True},
                    {"id": "b", "text": "Store credentials", "isCorrect": False},
                ],
                "difficulty": "beginner",
            }
        )

        assert question.certification_id == "terraform"
        assert question.domain_weight == 15
        assert question.correct_option.id == "a"

    def test_requires_exactly_one_correct_option(self):
        """Test option validation."""
        with pytest.raises(ValidationError):
            CertificationQuestion(
                id="tf-1",
                certification_id="terraform",
                domain="state",
                question="Which are true?",
                options=[
                    QuestionOption(id="a", text="One", is_correct=True),
                    QuestionOption(id="b", text="Two", is_correct=True),
                ],
                difficulty="beginner",
            )

    def test_requires_difficulty(self):
        """Test that certification questions need a known tier."""
        with pytest.raises(ValidationError):
            CertificationQuestion(
                id="tf-1",
                certification_id="terraform",
                domain="state",
                question="What is state?",
                options=[
                    QuestionOption(id="a", text="One", is_correct=True),
                    QuestionOption(id="b", text="Two"),
                ],
                difficulty="expert",
            )


class TestCertificationExamConfig:
    """Test CertificationExamConfig model."""

    def test_domain_weight_bounds(self):
        """Test that domain weights are percentages."""
        with pytest.raises(ValidationError):
            CertificationExamConfig.model_validate(
                {
                    "certificationId": "cka",
                    "domains": [{"id": "x", "name": "X", "weight": 120}],
                    "totalQuestions": 17,
                    "passingScore": 66,
                    "timeLimit": 120,
                }
            )
