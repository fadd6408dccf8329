from __future__ import annotations

import random
from collections.abc import Callable

import structlog

from quizdeck.cli.render import render_listing, render_result
from quizdeck.commands.parser import parse_command
from quizdeck.commands.types import (
    AddQuestionCommand,
    DeleteCommand,
    EditCommand,
    ExitCommand,
    FindCommand,
    HelpCommand,
    ListCommand,
    MarkCommand,
    MarkDifficultyCommand,
    SearchCriterion,
    ShuffleCommand,
    StartQuizCommand,
    ViewCommand,
)
from quizdeck.core.messages import MessageKey, render_message
from quizdeck.questions.question_list import QuestionList
from quizdeck.questions.results import ListOutcome, ListResult
from quizdeck.quiz.session import QuizReport, QuizSession
from quizdeck.quiz.ui import Ui

logger = structlog.get_logger("quizdeck.cli.dispatch")

_NO_RESULTS_MESSAGES = {
    SearchCriterion.DESCRIPTION: MessageKey.NO_RESULTS_DESCRIPTION,
    SearchCriterion.MODULE: MessageKey.NO_RESULTS_MODULE,
    SearchCriterion.TIME: MessageKey.NO_RESULTS_TIME,
}


class CommandDispatcher:
    """Routes parsed commands to the question list and reports back through the Ui."""

    def __init__(
        self,
        question_list: QuestionList,
        ui: Ui,
        *,
        rng: random.Random | None = None,
    ) -> None:
        self.question_list = question_list
        self.ui = ui
        self.rng = rng if rng is not None else random.Random()
        self.last_report: QuizReport | None = None
        self._handlers: dict[type, Callable[..., bool]] = {
            AddQuestionCommand: self._add,
            StartQuizCommand: self._start,
            FindCommand: self._find,
            MarkCommand: self._mark,
            MarkDifficultyCommand: self._mark_difficulty,
            DeleteCommand: self._delete,
            EditCommand: self._edit,
            ViewCommand: self._view,
            ListCommand: self._list,
            ShuffleCommand: self._shuffle,
            HelpCommand: self._help,
            ExitCommand: self._exit,
        }

    def handle(self, line: str) -> bool:
        """Process one input line. Returns False once the user asked to leave."""
        if not line.strip():
            return True
        parsed = parse_command(line)
        if parsed.error is not None:
            logger.info("command_rejected", error=type(parsed.error).__name__)
            self.ui.display_message(parsed.error.message)
            return True
        command = parsed.command
        return self._handlers[type(command)](command)

    def _report_error(self, result: ListResult) -> bool:
        if result.error is None:
            return False
        self.ui.display_message(result.error.message)
        return True

    def _add(self, command: AddQuestionCommand) -> bool:
        result = self.question_list.add(
            command.description,
            command.answer,
            command.module,
            command.difficulty,
        )
        if self._report_error(result):
            return True
        for notice in result.notices:
            self.ui.display_message(render_message(notice))
        self.ui.display_message(render_result(MessageKey.ADDED, result, show_size=True))
        return True

    def _list(self, command: ListCommand) -> bool:
        result = self.question_list.list_all()
        if result.outcome is ListOutcome.EMPTY:
            self.ui.display_message(render_message(MessageKey.NO_QUESTIONS))
        else:
            self.ui.display_message(render_listing(MessageKey.LISTED, result))
        return True

    def _view(self, command: ViewCommand) -> bool:
        result = self.question_list.view(command.index)
        if not self._report_error(result):
            self.ui.display_message(render_result(MessageKey.VIEWED, result, index=command.index))
        return True

    def _mark(self, command: MarkCommand) -> bool:
        if command.done:
            result = self.question_list.mark_done(command.index)
            changed, unchanged = MessageKey.MARKED_DONE, MessageKey.ALREADY_DONE
        else:
            result = self.question_list.mark_not_done(command.index)
            changed, unchanged = MessageKey.MARKED_NOT_DONE, MessageKey.ALREADY_NOT_DONE
        if self._report_error(result):
            return True
        if result.outcome is ListOutcome.NO_CHANGE:
            self.ui.display_message(render_message(unchanged))
        else:
            self.ui.display_message(render_result(changed, result))
        return True

    def _mark_difficulty(self, command: MarkDifficultyCommand) -> bool:
        result = self.question_list.mark_difficulty(command.index, command.difficulty)
        if self._report_error(result):
            return True
        label = command.difficulty.label
        if result.outcome is ListOutcome.NO_CHANGE:
            self.ui.display_message(render_message(MessageKey.DIFFICULTY_UNCHANGED, difficulty=label))
        else:
            self.ui.display_message(render_result(MessageKey.DIFFICULTY_SET, result, difficulty=label))
        return True

    def _delete(self, command: DeleteCommand) -> bool:
        result = self.question_list.delete(command.index)
        if not self._report_error(result):
            self.ui.display_message(render_result(MessageKey.DELETED, result, show_size=True))
        return True

    def _edit(self, command: EditCommand) -> bool:
        result = self.question_list.edit(command.index, command.new_description, command.new_answer)
        if self._report_error(result) or result.outcome is ListOutcome.SKIPPED:
            return True
        self.ui.display_message(render_result(MessageKey.EDITED, result))
        return True

    def _find(self, command: FindCommand) -> bool:
        search = {
            SearchCriterion.DESCRIPTION: self.question_list.search_by_description,
            SearchCriterion.MODULE: self.question_list.search_by_module,
            SearchCriterion.TIME: self.question_list.search_by_time,
        }[command.criterion]
        result = search(command.keyword)
        if self._report_error(result):
            return True
        if result.outcome is ListOutcome.NO_RESULTS:
            self.ui.display_message(render_message(_NO_RESULTS_MESSAGES[command.criterion]))
        else:
            self.ui.display_message(render_listing(MessageKey.SEARCH_HEADER, result))
        return True

    def _start(self, command: StartQuizCommand) -> bool:
        selection = self.question_list.select_for_quiz(
            command.quiz_mode,
            module=command.module,
            order=command.order,
            rng=self.rng,
        )
        self._report_error(selection)
        session = QuizSession(item.question for item in selection.questions)
        self.last_report = session.run(self.ui)
        return True

    def _shuffle(self, command: ShuffleCommand) -> bool:
        self.question_list.shuffle(self.rng)
        self.ui.display_message(render_message(MessageKey.SHUFFLED))
        return True

    def _help(self, command: HelpCommand) -> bool:
        self.ui.display_message(render_message(MessageKey.HELP))
        return True

    def _exit(self, command: ExitCommand) -> bool:
        return False
