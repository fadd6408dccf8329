from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from quizdeck.core.messages import MessageKey
from quizdeck.questions.errors import QuizDeckError
from quizdeck.questions.types import Question


class ListOutcome(str, Enum):
    ADDED = "ADDED"
    LISTED = "LISTED"
    EMPTY = "EMPTY"
    VIEWED = "VIEWED"
    MARKED_DONE = "MARKED_DONE"
    MARKED_NOT_DONE = "MARKED_NOT_DONE"
    DIFFICULTY_SET = "DIFFICULTY_SET"
    NO_CHANGE = "NO_CHANGE"
    DELETED = "DELETED"
    EDITED = "EDITED"
    SKIPPED = "SKIPPED"
    FOUND = "FOUND"
    NO_RESULTS = "NO_RESULTS"
    SELECTED = "SELECTED"
    SHUFFLED = "SHUFFLED"
    FAILED = "FAILED"


@dataclass(frozen=True, slots=True)
class IndexedQuestion:
    index: int
    question: Question


@dataclass(frozen=True, slots=True)
class ListResult:
    outcome: ListOutcome
    size: int
    questions: tuple[IndexedQuestion, ...] = ()
    error: QuizDeckError | None = None
    notices: tuple[MessageKey, ...] = ()

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def question(self) -> Question | None:
        if not self.questions:
            return None
        return self.questions[0].question

    @property
    def index(self) -> int | None:
        if not self.questions:
            return None
        return self.questions[0].index
