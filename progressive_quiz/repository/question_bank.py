"""Question bank loaded from per-channel JSON files."""

import json
import logging
from collections.abc import Iterable, Mapping
from pathlib import Path

from pydantic import ValidationError

from progressive_quiz.models.quiz import (
    ChannelStats,
    DifficultyLevel,
    PracticeTest,
    Question,
)

logger = logging.getLogger(__name__)

# Filter value meaning "no filter"
ALL = "all"


class QuestionBankError(ValueError):
    """Raised when question content cannot be loaded or is inconsistent."""


def read_json_file(path: Path) -> object:
    """
    Read and parse a JSON file.

    Args:
        path: File to read

    Returns:
        Parsed JSON content

    Raises:
        QuestionBankError: If the file is missing or not valid JSON
    """
    try:
        with open(path, encoding="utf-8") as file:
            return json.load(file)
    except FileNotFoundError as e:
        raise QuestionBankError(f"File not found: {path}") from e
    except json.JSONDecodeError as e:
        raise QuestionBankError(f"Invalid JSON in {path}: {e}") from e


class QuestionBank:
    """
    In-memory store of questions grouped by channel.

    Constructed explicitly and passed to whoever needs it, so selection code
    can be exercised with synthetic pools.
    """

    def __init__(self, questions_by_channel: Mapping[str, Iterable[Question]]):
        self._channels: dict[str, list[Question]] = {
            channel: list(questions) for channel, questions in questions_by_channel.items()
        }
        self._index: dict[str, Question] = {}
        for channel, questions in self._channels.items():
            for question in questions:
                if question.id in self._index:
                    raise QuestionBankError(
                        f"Duplicate question id '{question.id}' in channel '{channel}'"
                    )
                self._index[question.id] = question

    @classmethod
    def from_directory(cls, directory: str | Path) -> "QuestionBank":
        """
        Load every ``*.json`` file of a directory as one channel.

        Each file holds a list of question records; the file stem is used as
        the channel of records that do not name one.

        Args:
            directory: Directory containing channel files

        Returns:
            Loaded QuestionBank

        Raises:
            QuestionBankError: If the directory is missing or a file is invalid
        """
        directory = Path(directory)
        if not directory.is_dir():
            raise QuestionBankError(f"Question directory not found: {directory}")

        questions_by_channel: dict[str, list[Question]] = {}
        for path in sorted(directory.glob("*.json")):
            channel = path.stem
            records = read_json_file(path)
            if not isinstance(records, list):
                raise QuestionBankError(f"Expected a list of questions in {path}")

            questions = []
            for i, record in enumerate(records):
                if isinstance(record, dict):
                    record = {"channel": channel, **record}
                try:
                    questions.append(Question.model_validate(record))
                except ValidationError as e:
                    raise QuestionBankError(
                        f"Invalid question #{i + 1} in {path}: {e}"
                    ) from e

            questions_by_channel[channel] = questions
            logger.debug("Loaded %d question(s) from %s", len(questions), path)

        bank = cls(questions_by_channel)
        logger.info(
            "Loaded %d question(s) across %d channel(s) from %s",
            len(bank),
            len(questions_by_channel),
            directory,
        )
        return bank

    def __len__(self) -> int:
        return len(self._index)

    def get_all_questions(self) -> list[Question]:
        """Get every question of every channel."""
        return [q for questions in self._channels.values() for q in questions]

    def get_questions(
        self,
        channel_id: str,
        sub_channel: str | None = None,
        difficulty: DifficultyLevel | str | None = None,
    ) -> list[Question]:
        """
        Get the questions of a channel with optional filters.

        Args:
            channel_id: Channel to read
            sub_channel: Sub-channel filter; None or "all" disables it
            difficulty: Tier filter; None or "all" disables it

        Returns:
            Matching questions (empty for an unknown channel)
        """
        questions = self._channels.get(channel_id, [])

        if sub_channel and sub_channel != ALL:
            questions = [q for q in questions if q.sub_channel == sub_channel]

        if difficulty and difficulty != ALL:
            questions = [q for q in questions if q.difficulty == difficulty]

        return list(questions)

    def get_question_by_id(self, question_id: str) -> Question | None:
        """Get a single question by id."""
        return self._index.get(question_id)

    def get_question_ids(
        self,
        channel_id: str,
        sub_channel: str | None = None,
        difficulty: DifficultyLevel | str | None = None,
    ) -> list[str]:
        """Get the ids of the questions matching get_questions()."""
        return [q.id for q in self.get_questions(channel_id, sub_channel, difficulty)]

    def get_sub_channels(self, channel_id: str) -> list[str]:
        """Get the sorted sub-channels used in a channel."""
        questions = self._channels.get(channel_id, [])
        return sorted({q.sub_channel for q in questions if q.sub_channel})

    def get_channel_stats(self) -> list[ChannelStats]:
        """Count questions per channel and tier."""
        stats = []
        for channel_id, questions in self._channels.items():
            stats.append(
                ChannelStats(
                    id=channel_id,
                    total=len(questions),
                    beginner=sum(1 for q in questions if q.difficulty == DifficultyLevel.BEGINNER),
                    intermediate=sum(
                        1 for q in questions if q.difficulty == DifficultyLevel.INTERMEDIATE
                    ),
                    advanced=sum(1 for q in questions if q.difficulty == DifficultyLevel.ADVANCED),
                )
            )
        return stats

    def get_available_channel_ids(self) -> list[str]:
        """Get the ids of every loaded channel."""
        return list(self._channels.keys())

    def channel_has_questions(self, channel_id: str) -> bool:
        """Check whether a channel has at least one question."""
        return len(self._channels.get(channel_id, [])) > 0

    def as_tests(self, channel_ids: Iterable[str] | None = None) -> list[PracticeTest]:
        """
        Group questions into one PracticeTest per channel.

        Args:
            channel_ids: Channels to include; all channels when None

        Returns:
            Non-empty tests, in channel order
        """
        wanted = list(channel_ids) if channel_ids is not None else self.get_available_channel_ids()
        tests = []
        for channel_id in wanted:
            questions = self._channels.get(channel_id, [])
            if not questions:
                continue
            tests.append(
                PracticeTest(
                    id=f"{channel_id}-practice",
                    title=channel_id.replace("-", " ").title(),
                    channel=channel_id,
                    questions=questions,
                )
            )
        return tests
