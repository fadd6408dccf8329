from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from enum import Enum

from quizdeck.questions.errors import IncompleteQuestionError

TIMESTAMP_FORMAT = "%d-%m-%Y %H:%M"


class Difficulty(str, Enum):
    EASY = "EASY"
    NORMAL = "NORMAL"
    HARD = "HARD"

    @classmethod
    def from_token(cls, token: str | None) -> Difficulty | None:
        if not token:
            return None
        try:
            return cls(token.strip().upper())
        except ValueError:
            return None

    @property
    def label(self) -> str:
        return self.value.lower()


class QuestionKind(str, Enum):
    SHORT_ANSWER = "S"


class Question(ABC):
    """A quiz question owned by a QuestionList.

    Kind and creation time are fixed at construction; the remaining
    fields can be edited or marked. Concrete kinds supply
    ``canonical_answer`` and decide how a response is judged.
    """

    kind: QuestionKind

    __slots__ = ("description", "module", "difficulty", "done", "_created_at")

    def __init__(
        self,
        description: str,
        module: str,
        *,
        difficulty: Difficulty = Difficulty.NORMAL,
        done: bool = False,
        created_at: datetime | None = None,
    ) -> None:
        if not description.strip() or not module.strip():
            raise IncompleteQuestionError
        self.description = description
        self.module = module
        self.difficulty = difficulty
        self.done = done
        self._created_at = created_at if created_at is not None else datetime.now().astimezone()

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def timestamp_text(self) -> str:
        return self._created_at.strftime(TIMESTAMP_FORMAT)

    @property
    @abstractmethod
    def canonical_answer(self) -> str: ...

    @abstractmethod
    def is_correct(self, response: str) -> bool: ...

    def mark_done(self) -> bool:
        if self.done:
            return False
        self.done = True
        return True

    def mark_not_done(self) -> bool:
        if not self.done:
            return False
        self.done = False
        return True

    def set_difficulty(self, difficulty: Difficulty) -> bool:
        if self.difficulty is difficulty:
            return False
        self.difficulty = difficulty
        return True

    @abstractmethod
    def edit(self, *, description: str = "", answer: str = "") -> bool: ...

    def display_text(self) -> str:
        return (
            f"{self.description.strip()} / {self.canonical_answer.strip()} | "
            f"{self.module} | {self.difficulty.value}"
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(description={self.description!r}, "
            f"module={self.module!r}, difficulty={self.difficulty.value}, done={self.done})"
        )


class ShortAnswerQuestion(Question):
    kind = QuestionKind.SHORT_ANSWER

    __slots__ = ("answer",)

    def __init__(
        self,
        description: str,
        answer: str,
        module: str,
        *,
        difficulty: Difficulty = Difficulty.NORMAL,
        done: bool = False,
        created_at: datetime | None = None,
    ) -> None:
        if not answer.strip():
            raise IncompleteQuestionError
        super().__init__(
            description,
            module,
            difficulty=difficulty,
            done=done,
            created_at=created_at,
        )
        self.answer = answer

    @property
    def canonical_answer(self) -> str:
        return self.answer

    def is_correct(self, response: str) -> bool:
        return response.strip().lower() == self.answer.strip().lower()

    def edit(self, *, description: str = "", answer: str = "") -> bool:
        changed = False
        if description.strip():
            self.description = description.strip()
            changed = True
        if answer.strip():
            self.answer = answer.strip()
            changed = True
        return changed
