from __future__ import annotations

import random
import re
from collections.abc import Callable, Iterable, Iterator

import structlog

from quizdeck.core.messages import MessageKey
from quizdeck.questions.errors import EmptyListError, IncompleteQuestionError, InvalidIndexError
from quizdeck.questions.results import IndexedQuestion, ListOutcome, ListResult
from quizdeck.questions.types import Difficulty, Question, ShortAnswerQuestion
from quizdeck.quiz.modes import QuestionOrder, QuizMode

logger = structlog.get_logger("quizdeck.questions.question_list")


def _module_matcher(module: str) -> Callable[[str], bool]:
    target = module.strip()
    try:
        pattern = re.compile(target, re.IGNORECASE)
    except re.error:
        lowered = target.lower()
        return lambda candidate: candidate.strip().lower() == lowered
    return lambda candidate: pattern.fullmatch(candidate.strip()) is not None


class QuestionList:
    """Ordered, 1-based collection of questions.

    Every public operation returns a ``ListResult``. A failed operation
    carries its error in the result and leaves the list untouched.
    Deletion shifts later questions down by one, so an index only means
    something against the current order.
    """

    def __init__(self, questions: Iterable[Question] = ()) -> None:
        self._questions: list[Question] = list(questions)

    def __len__(self) -> int:
        return len(self._questions)

    def __iter__(self) -> Iterator[Question]:
        return iter(self._questions)

    @property
    def size(self) -> int:
        return len(self._questions)

    def _resolve(self, index: int) -> Question | None:
        if 1 <= index <= len(self._questions):
            return self._questions[index - 1]
        return None

    def _invalid_index(self, operation: str, index: int) -> ListResult:
        logger.info("question_index_rejected", operation=operation, index=index, size=self.size)
        return ListResult(outcome=ListOutcome.FAILED, size=self.size, error=InvalidIndexError())

    def _single(self, outcome: ListOutcome, index: int, question: Question) -> ListResult:
        return ListResult(
            outcome=outcome,
            size=self.size,
            questions=(IndexedQuestion(index=index, question=question),),
        )

    def add(
        self,
        description: str,
        answer: str,
        module: str,
        difficulty: Difficulty | None = None,
    ) -> ListResult:
        description, answer, module = description.strip(), answer.strip(), module.strip()
        if not description or not answer or not module:
            return ListResult(
                outcome=ListOutcome.FAILED,
                size=self.size,
                error=IncompleteQuestionError(),
            )

        notices: tuple[MessageKey, ...] = ()
        if difficulty is None:
            difficulty = Difficulty.NORMAL
            notices = (MessageKey.DEFAULT_DIFFICULTY,)

        question = ShortAnswerQuestion(description, answer, module, difficulty=difficulty)
        self._questions.append(question)
        logger.info(
            "question_added",
            index=self.size,
            size=self.size,
            module=module,
            difficulty=difficulty.value,
        )
        return ListResult(
            outcome=ListOutcome.ADDED,
            size=self.size,
            questions=(IndexedQuestion(index=self.size, question=question),),
            notices=notices,
        )

    def list_all(self) -> ListResult:
        if not self._questions:
            return ListResult(outcome=ListOutcome.EMPTY, size=0)
        return ListResult(
            outcome=ListOutcome.LISTED,
            size=self.size,
            questions=self._indexed(self._questions),
        )

    def view(self, index: int) -> ListResult:
        question = self._resolve(index)
        if question is None:
            return self._invalid_index("view", index)
        return self._single(ListOutcome.VIEWED, index, question)

    def mark_done(self, index: int) -> ListResult:
        question = self._resolve(index)
        if question is None:
            return self._invalid_index("mark_done", index)
        if not question.mark_done():
            return self._single(ListOutcome.NO_CHANGE, index, question)
        logger.info("question_marked_done", index=index)
        return self._single(ListOutcome.MARKED_DONE, index, question)

    def mark_not_done(self, index: int) -> ListResult:
        question = self._resolve(index)
        if question is None:
            return self._invalid_index("mark_not_done", index)
        if not question.mark_not_done():
            return self._single(ListOutcome.NO_CHANGE, index, question)
        logger.info("question_marked_not_done", index=index)
        return self._single(ListOutcome.MARKED_NOT_DONE, index, question)

    def mark_difficulty(self, index: int, difficulty: Difficulty) -> ListResult:
        question = self._resolve(index)
        if question is None:
            return self._invalid_index("mark_difficulty", index)
        if not question.set_difficulty(difficulty):
            return self._single(ListOutcome.NO_CHANGE, index, question)
        logger.info("question_difficulty_set", index=index, difficulty=difficulty.value)
        return self._single(ListOutcome.DIFFICULTY_SET, index, question)

    def delete(self, index: int) -> ListResult:
        question = self._resolve(index)
        if question is None:
            return self._invalid_index("delete", index)
        del self._questions[index - 1]
        logger.info("question_deleted", index=index, size=self.size)
        return self._single(ListOutcome.DELETED, index, question)

    def edit(self, index: int, new_description: str = "", new_answer: str = "") -> ListResult:
        question = self._resolve(index)
        if question is None:
            # edit 0 is a silent no-op; other operations reject it.
            if index == 0:
                return ListResult(outcome=ListOutcome.SKIPPED, size=self.size)
            return self._invalid_index("edit", index)
        question.edit(description=new_description, answer=new_answer)
        logger.info("question_edited", index=index)
        return self._single(ListOutcome.EDITED, index, question)

    def search_by_description(self, keyword: str) -> ListResult:
        needle = keyword.strip().lower()
        return self._search(lambda question: needle in question.description.lower())

    def search_by_module(self, keyword: str) -> ListResult:
        needle = keyword.strip().lower()
        return self._search(lambda question: needle in question.module.lower())

    def search_by_time(self, fragment: str) -> ListResult:
        needle = fragment.strip()
        return self._search(lambda question: needle in question.timestamp_text)

    def categorise_by_module(self, module: str) -> ListResult:
        matches = _module_matcher(module)
        return self._search(lambda question: matches(question.module), found=ListOutcome.SELECTED)

    def get_all(self) -> list[Question]:
        return list(self._questions)

    def select_for_quiz(
        self,
        quiz_mode: QuizMode,
        *,
        module: str = "",
        order: QuestionOrder = QuestionOrder.NORMAL,
        rng: random.Random | None = None,
    ) -> ListResult:
        """Pick the questions for one quiz session.

        The selection is a fresh tuple of references, so shuffling it for
        ``random`` order never reorders the list itself.
        """
        if quiz_mode is QuizMode.MODULE:
            selected = self.categorise_by_module(module)
        else:
            selected = ListResult(
                outcome=ListOutcome.SELECTED,
                size=self.size,
                questions=self._indexed(self._questions),
            )

        if order is QuestionOrder.RANDOM and len(selected.questions) > 1:
            shuffled = list(selected.questions)
            (rng or random).shuffle(shuffled)
            selected = ListResult(
                outcome=selected.outcome,
                size=selected.size,
                questions=tuple(shuffled),
                error=selected.error,
            )

        logger.info(
            "quiz_questions_selected",
            quiz_mode=quiz_mode.value,
            module=module or None,
            order=order.value,
            selected=len(selected.questions),
        )
        return selected

    def shuffle(self, rng: random.Random | None = None) -> ListResult:
        (rng or random).shuffle(self._questions)
        logger.info("question_list_shuffled", size=self.size)
        return ListResult(outcome=ListOutcome.SHUFFLED, size=self.size)

    def _indexed(self, questions: Iterable[Question]) -> tuple[IndexedQuestion, ...]:
        return tuple(
            IndexedQuestion(index=position, question=question)
            for position, question in enumerate(questions, start=1)
        )

    def _search(
        self,
        predicate: Callable[[Question], bool],
        *,
        found: ListOutcome = ListOutcome.FOUND,
    ) -> ListResult:
        if not self._questions:
            return ListResult(outcome=ListOutcome.FAILED, size=0, error=EmptyListError())
        matched = tuple(
            item for item in self._indexed(self._questions) if predicate(item.question)
        )
        if not matched:
            return ListResult(outcome=ListOutcome.NO_RESULTS, size=self.size)
        return ListResult(outcome=found, size=self.size, questions=matched)
