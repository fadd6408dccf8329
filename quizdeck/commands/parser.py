from __future__ import annotations

import re
from collections.abc import Callable

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
    ParseResult,
    SearchCriterion,
    ShuffleCommand,
    StartQuizCommand,
    ViewCommand,
)
from quizdeck.questions.errors import (
    IncompleteQuestionError,
    InvalidFormatError,
    InvalidIndexError,
    InvalidModeError,
    MissingCriterionError,
    MissingKeywordError,
    MissingModeError,
    UnknownCommandError,
)
from quizdeck.questions.types import Difficulty
from quizdeck.quiz.modes import QuizMode, parse_question_order, parse_quiz_mode

KEYWORD_RE = re.compile(r"^\s*([^\s/]+)(.*)$", re.DOTALL)
LEADING_TOKEN_RE = re.compile(r"^\s*([^\s/]*)(.*)$", re.DOTALL)
INDEX_TOKEN_RE = re.compile(r"^[+-]?\d+$")

ADD_FIELD_COUNT = 4
START_SEGMENT_LIMIT = 3

MARKDIFF_USAGE = "markdiff [index] /[easy|normal|hard]"
EDIT_USAGE = "edit [index] /description [text] or edit [index] /answer [text]"
START_USAGE = "start /[all|module] [module] /[random|normal]"

_EDIT_FIELDS = ("description", "answer")


def _split_head(text: str) -> tuple[str, str]:
    matched = LEADING_TOKEN_RE.match(text)
    if matched is None:
        return "", text
    return matched.group(1), matched.group(2)


def _parse_add(rest: str) -> ParseResult:
    fields = [field.strip() for field in rest.split("/")]
    if len(fields) != ADD_FIELD_COUNT or not all(fields):
        return ParseResult(error=IncompleteQuestionError())
    description, answer, module, difficulty_token = fields
    return ParseResult(
        command=AddQuestionCommand(
            description=description,
            answer=answer,
            module=module,
            difficulty=Difficulty.from_token(difficulty_token),
        )
    )


def _parse_start(rest: str) -> ParseResult:
    segments = rest.split("/")
    if len(segments) < 2 or not segments[1].strip():
        return ParseResult(error=MissingModeError())
    if segments[0].strip() or len(segments) > START_SEGMENT_LIMIT:
        return ParseResult(error=InvalidFormatError(usage=START_USAGE))

    mode_parts = segments[1].split(maxsplit=1)
    quiz_mode = parse_quiz_mode(mode_parts[0])
    if quiz_mode is None:
        return ParseResult(error=InvalidFormatError(usage=START_USAGE))
    module = mode_parts[1].strip() if len(mode_parts) > 1 else ""
    if quiz_mode is QuizMode.MODULE and not module:
        return ParseResult(error=InvalidFormatError(usage=START_USAGE))

    if len(segments) < START_SEGMENT_LIMIT or not segments[2].strip():
        return ParseResult(error=InvalidModeError())
    order = parse_question_order(segments[2].split()[0])
    if order is None:
        return ParseResult(error=InvalidModeError())

    if quiz_mode is QuizMode.ALL:
        module = ""
    return ParseResult(command=StartQuizCommand(quiz_mode=quiz_mode, order=order, module=module))


def _parse_find(rest: str) -> ParseResult:
    _, slash, criterion_text = rest.partition("/")
    parts = criterion_text.split(maxsplit=1)
    if not slash or not parts:
        return ParseResult(error=MissingCriterionError())
    try:
        criterion = SearchCriterion(parts[0].lower())
    except ValueError:
        return ParseResult(error=MissingCriterionError())
    keyword = parts[1].strip() if len(parts) > 1 else ""
    if not keyword:
        return ParseResult(error=MissingKeywordError())
    return ParseResult(command=FindCommand(criterion=criterion, keyword=keyword))


def _parse_index(rest: str) -> tuple[int | None, str]:
    token, tail = _split_head(rest)
    if not INDEX_TOKEN_RE.match(token):
        return None, tail
    return int(token), tail


def _index_command(build: Callable[[int], object]) -> Callable[[str], ParseResult]:
    def parse(rest: str) -> ParseResult:
        index, _ = _parse_index(rest)
        if index is None:
            return ParseResult(error=InvalidIndexError())
        return ParseResult(command=build(index))

    return parse


def _parse_mark_difficulty(rest: str) -> ParseResult:
    index, tail = _parse_index(rest)
    if index is None:
        return ParseResult(error=InvalidIndexError())
    tail = tail.strip()
    difficulty = Difficulty.from_token(tail[1:]) if tail.startswith("/") else None
    if difficulty is None:
        return ParseResult(error=InvalidFormatError(usage=MARKDIFF_USAGE))
    return ParseResult(command=MarkDifficultyCommand(index=index, difficulty=difficulty))


def _parse_edit(rest: str) -> ParseResult:
    index, tail = _parse_index(rest)
    if index is None:
        return ParseResult(error=InvalidIndexError())
    tail = tail.strip()
    parts = tail[1:].split(maxsplit=1) if tail.startswith("/") else []
    if len(parts) < 2 or parts[0].lower() not in _EDIT_FIELDS or not parts[1].strip():
        return ParseResult(error=InvalidFormatError(usage=EDIT_USAGE))
    value = parts[1].strip()
    if parts[0].lower() == "description":
        return ParseResult(command=EditCommand(index=index, new_description=value))
    return ParseResult(command=EditCommand(index=index, new_answer=value))


def _no_arguments(command: object) -> Callable[[str], ParseResult]:
    return lambda rest: ParseResult(command=command)


_PARSERS: dict[str, Callable[[str], ParseResult]] = {
    "short": _parse_add,
    "start": _parse_start,
    "find": _parse_find,
    "mark": _index_command(lambda index: MarkCommand(index=index, done=True)),
    "unmark": _index_command(lambda index: MarkCommand(index=index, done=False)),
    "markdiff": _parse_mark_difficulty,
    "delete": _index_command(lambda index: DeleteCommand(index=index)),
    "edit": _parse_edit,
    "view": _index_command(lambda index: ViewCommand(index=index)),
    "list": _no_arguments(ListCommand()),
    "shuffle": _no_arguments(ShuffleCommand()),
    "help": _no_arguments(HelpCommand()),
    "bye": _no_arguments(ExitCommand()),
    "exit": _no_arguments(ExitCommand()),
}


def parse_command(line: str) -> ParseResult:
    """Turn one raw input line into a typed command or a tagged error.

    Never raises for malformed input; the error travels in the result.
    The keyword is matched case-insensitively, everything after it is
    handed to the keyword's own parser.
    """
    matched = KEYWORD_RE.match(line)
    if matched is None:
        return ParseResult(error=UnknownCommandError(keyword=line.strip()))
    keyword, rest = matched.group(1), matched.group(2)
    parser = _PARSERS.get(keyword.lower())
    if parser is None:
        return ParseResult(error=UnknownCommandError(keyword=keyword))
    return parser(rest)
