from __future__ import annotations

from quizdeck.core.messages import MessageKey, render_message
from quizdeck.questions.results import IndexedQuestion, ListResult
from quizdeck.questions.types import Question

DETAIL_INDENT = "    "


def format_question(question: Question, index: int | None = None) -> str:
    status = "X" if question.done else " "
    body = f"[{question.kind.value}][{status}] {question.display_text()}"
    if index is None:
        return f"{DETAIL_INDENT}{body}"
    return f"{index}: {body}"


def format_question_lines(items: tuple[IndexedQuestion, ...]) -> list[str]:
    return [format_question(item.question, item.index) for item in items]


def render_result(header: MessageKey, result: ListResult, *, show_size: bool = False, **fields: object) -> str:
    lines = [render_message(header, **fields)]
    if result.question is not None:
        lines.append(format_question(result.question))
    if show_size:
        lines.append(render_message(MessageKey.LIST_SIZE, size=result.size))
    return "\n".join(lines)


def render_listing(header: MessageKey, result: ListResult) -> str:
    return "\n".join([render_message(header), *format_question_lines(result.questions)])
