from quizdeck.questions.errors import (
    EmptyListError,
    IncompleteQuestionError,
    InvalidFormatError,
    InvalidIndexError,
    InvalidModeError,
    MissingCriterionError,
    MissingKeywordError,
    MissingModeError,
    QuizDeckError,
    StorageError,
    UnknownCommandError,
)
from quizdeck.questions.types import Difficulty, Question, QuestionKind, ShortAnswerQuestion
from quizdeck.questions.results import IndexedQuestion, ListOutcome, ListResult
from quizdeck.questions.question_list import QuestionList

__all__ = [
    "Difficulty",
    "EmptyListError",
    "IncompleteQuestionError",
    "IndexedQuestion",
    "InvalidFormatError",
    "InvalidIndexError",
    "InvalidModeError",
    "ListOutcome",
    "ListResult",
    "MissingCriterionError",
    "MissingKeywordError",
    "MissingModeError",
    "Question",
    "QuestionKind",
    "QuestionList",
    "QuizDeckError",
    "ShortAnswerQuestion",
    "StorageError",
    "UnknownCommandError",
]
