from __future__ import annotations

from datetime import datetime, timezone

from quizdeck.questions.types import Difficulty, ShortAnswerQuestion

FIXED_CREATED_AT = datetime(2024, 3, 5, 14, 30, tzinfo=timezone.utc)


def make_question(
    description: str,
    answer: str,
    module: str = "CS2113",
    *,
    difficulty: Difficulty = Difficulty.NORMAL,
    done: bool = False,
    created_at: datetime | None = None,
) -> ShortAnswerQuestion:
    return ShortAnswerQuestion(
        description,
        answer,
        module,
        difficulty=difficulty,
        done=done,
        created_at=created_at or FIXED_CREATED_AT,
    )


def snapshot(questions) -> list[tuple[str, str, str, str, bool]]:
    return [
        (q.description, q.canonical_answer, q.module, q.difficulty.value, q.done)
        for q in questions
    ]
