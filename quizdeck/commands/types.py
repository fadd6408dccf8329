from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from quizdeck.questions.errors import QuizDeckError
from quizdeck.questions.types import Difficulty
from quizdeck.quiz.modes import QuestionOrder, QuizMode


class SearchCriterion(str, Enum):
    DESCRIPTION = "description"
    MODULE = "module"
    TIME = "time"


@dataclass(frozen=True, slots=True)
class AddQuestionCommand:
    description: str
    answer: str
    module: str
    difficulty: Difficulty | None


@dataclass(frozen=True, slots=True)
class StartQuizCommand:
    quiz_mode: QuizMode
    order: QuestionOrder
    module: str = ""


@dataclass(frozen=True, slots=True)
class FindCommand:
    criterion: SearchCriterion
    keyword: str


@dataclass(frozen=True, slots=True)
class MarkCommand:
    index: int
    done: bool


@dataclass(frozen=True, slots=True)
class MarkDifficultyCommand:
    index: int
    difficulty: Difficulty


@dataclass(frozen=True, slots=True)
class DeleteCommand:
    index: int


@dataclass(frozen=True, slots=True)
class EditCommand:
    index: int
    new_description: str = ""
    new_answer: str = ""


@dataclass(frozen=True, slots=True)
class ViewCommand:
    index: int


@dataclass(frozen=True, slots=True)
class ListCommand:
    pass


@dataclass(frozen=True, slots=True)
class ShuffleCommand:
    pass


@dataclass(frozen=True, slots=True)
class HelpCommand:
    pass


@dataclass(frozen=True, slots=True)
class ExitCommand:
    pass


Command = (
    AddQuestionCommand
    | StartQuizCommand
    | FindCommand
    | MarkCommand
    | MarkDifficultyCommand
    | DeleteCommand
    | EditCommand
    | ViewCommand
    | ListCommand
    | ShuffleCommand
    | HelpCommand
    | ExitCommand
)


@dataclass(frozen=True, slots=True)
class ParseResult:
    command: Command | None = None
    error: QuizDeckError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.command is not None
