from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum

import structlog

from quizdeck.core.messages import MessageKey, render_message
from quizdeck.questions.types import Question
from quizdeck.quiz.ui import Ui

logger = structlog.get_logger("quizdeck.quiz.session")


class SessionState(str, Enum):
    NOT_STARTED = "NOT_STARTED"
    PRESENTING = "PRESENTING"
    SCORING = "SCORING"
    COMPLETED = "COMPLETED"


@dataclass(frozen=True, slots=True)
class AnswerRecord:
    position: int
    question: Question
    response: str
    is_correct: bool


@dataclass(slots=True)
class QuizReport:
    correct: int
    total: int
    answers: list[AnswerRecord] = field(default_factory=list)

    @property
    def score_text(self) -> str:
        return f"{self.correct}/{self.total}"


class QuizSession:
    """One pass over a selected, already ordered, set of questions.

    The session keeps its own list of references. The only blocking
    point is ``ui.get_user_input()``; there is no early exit once the
    first question is shown.
    """

    def __init__(self, questions: Iterable[Question]) -> None:
        self._questions: list[Question] = list(questions)
        self.state = SessionState.NOT_STARTED
        self.position = 0
        self.correct = 0
        self._answers: list[AnswerRecord] = []

    @property
    def total(self) -> int:
        return len(self._questions)

    def run(self, ui: Ui) -> QuizReport:
        if self.state is not SessionState.NOT_STARTED:
            raise RuntimeError("quiz session already ran")

        if not self._questions:
            ui.display_message(render_message(MessageKey.QUIZ_NO_QUESTIONS))
            self.state = SessionState.COMPLETED
            logger.info("quiz_skipped_empty_selection")
            return QuizReport(correct=0, total=0)

        ui.display_message(render_message(MessageKey.QUIZ_STARTING))
        logger.info("quiz_started", total=self.total)
        for question in self._questions:
            self.position += 1
            self.state = SessionState.PRESENTING
            ui.display_question(question, self.position, self.total)
            response = ui.get_user_input()

            self.state = SessionState.SCORING
            self._score(ui, question, response)

        self.state = SessionState.COMPLETED
        ui.display_message(
            render_message(MessageKey.QUIZ_SCORE, correct=self.correct, total=self.total)
        )
        logger.info("quiz_completed", correct=self.correct, total=self.total)
        return QuizReport(correct=self.correct, total=self.total, answers=list(self._answers))

    def _score(self, ui: Ui, question: Question, response: str) -> None:
        is_correct = question.is_correct(response)
        if is_correct:
            self.correct += 1
        self._answers.append(
            AnswerRecord(
                position=self.position,
                question=question,
                response=response,
                is_correct=is_correct,
            )
        )
        ui.display_message(
            render_message(MessageKey.QUIZ_CORRECT if is_correct else MessageKey.QUIZ_WRONG)
        )

        left = self.total - self.position
        if left > 0:
            ui.display_message(render_message(MessageKey.QUIZ_QUESTIONS_LEFT, left=left))
        else:
            ui.display_message(render_message(MessageKey.QUIZ_COMPLETED))
