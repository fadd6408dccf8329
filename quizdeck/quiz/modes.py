from __future__ import annotations

from enum import Enum


class QuizMode(str, Enum):
    ALL = "all"
    MODULE = "module"


class QuestionOrder(str, Enum):
    NORMAL = "normal"
    RANDOM = "random"


def parse_quiz_mode(token: str) -> QuizMode | None:
    try:
        return QuizMode(token.strip().lower())
    except ValueError:
        return None


def parse_question_order(token: str) -> QuestionOrder | None:
    try:
        return QuestionOrder(token.strip().lower())
    except ValueError:
        return None
