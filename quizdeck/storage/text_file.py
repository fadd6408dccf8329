from __future__ import annotations

import csv
from collections.abc import Iterable
from datetime import datetime
from pathlib import Path
from typing import Protocol

import structlog

from quizdeck.questions.errors import QuizDeckError, StorageError
from quizdeck.questions.types import Difficulty, Question, QuestionKind, ShortAnswerQuestion

logger = structlog.get_logger("quizdeck.storage.text_file")

FIELD_DELIMITER = "|"
RECORD_FIELDS = ("kind", "description", "answer", "module", "difficulty", "done", "created_at")


class QuestionStorage(Protocol):
    def load_all(self) -> list[Question]: ...

    def save_all(self, questions: Iterable[Question]) -> None: ...


def question_to_record(question: Question) -> list[str]:
    return [
        question.kind.value,
        question.description,
        question.canonical_answer,
        question.module,
        question.difficulty.value,
        "1" if question.done else "0",
        question.created_at.isoformat(),
    ]


def record_to_question(record: list[str]) -> Question:
    if len(record) != len(RECORD_FIELDS):
        raise ValueError(f"expected {len(RECORD_FIELDS)} fields, got {len(record)}")
    kind, description, answer, module, difficulty, done, created_at = record
    if QuestionKind(kind) is not QuestionKind.SHORT_ANSWER:
        raise ValueError(f"unsupported question kind {kind!r}")
    if done not in {"0", "1"}:
        raise ValueError(f"invalid done flag {done!r}")
    return ShortAnswerQuestion(
        description,
        answer,
        module,
        difficulty=Difficulty(difficulty),
        done=done == "1",
        created_at=datetime.fromisoformat(created_at),
    )


class TextFileStorage:
    """One ``|``-delimited record per question, in list order.

    Records that fail to load are kept as read and written back after
    the questions on the next save, so a bad line is never dropped.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        self.skipped_records: list[list[str]] = []

    def load_all(self) -> list[Question]:
        if not self.path.exists():
            logger.info("storage_file_missing", path=str(self.path))
            return []

        questions: list[Question] = []
        skipped: list[list[str]] = []
        try:
            with self.path.open("r", encoding="utf-8", newline="") as handle:
                reader = csv.reader(handle, delimiter=FIELD_DELIMITER)
                for record_number, record in enumerate(reader, start=1):
                    if not record:
                        continue
                    try:
                        questions.append(record_to_question(record))
                    except (ValueError, QuizDeckError) as err:
                        skipped.append(record)
                        logger.warning(
                            "storage_record_skipped",
                            path=str(self.path),
                            record=record_number,
                            reason=str(err),
                        )
        except (OSError, csv.Error) as err:
            raise StorageError(detail=f"{self.path}: {err}") from err

        self.skipped_records = skipped
        logger.info(
            "storage_loaded",
            path=str(self.path),
            count=len(questions),
            skipped=len(skipped),
        )
        return questions

    def save_all(self, questions: Iterable[Question]) -> None:
        records = [question_to_record(question) for question in questions]
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("w", encoding="utf-8", newline="") as handle:
                writer = csv.writer(handle, delimiter=FIELD_DELIMITER, lineterminator="\n")
                writer.writerows(records)
                writer.writerows(self.skipped_records)
        except OSError as err:
            raise StorageError(detail=f"{self.path}: {err}") from err
        logger.info(
            "storage_saved",
            path=str(self.path),
            count=len(records),
            kept_skipped=len(self.skipped_records),
        )
