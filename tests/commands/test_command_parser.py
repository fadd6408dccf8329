from __future__ import annotations

import pytest

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
from quizdeck.quiz.modes import QuestionOrder, QuizMode


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        (
            "short What is 6 x 7?/42/MA1101/easy",
            AddQuestionCommand("What is 6 x 7?", "42", "MA1101", Difficulty.EASY),
        ),
        (
            "short   Capital of France?  /  Paris / GEO1000 /  HARD ",
            AddQuestionCommand("Capital of France?", "Paris", "GEO1000", Difficulty.HARD),
        ),
        (
            "SHORT Capital of France?/Paris/GEO1000/impossible",
            AddQuestionCommand("Capital of France?", "Paris", "GEO1000", None),
        ),
    ],
)
def test_parse_add_command(line: str, expected: AddQuestionCommand) -> None:
    result = parse_command(line)
    assert result.ok
    assert result.command == expected


@pytest.mark.parametrize(
    "line",
    [
        "short",
        "short Capital of France?/Paris/GEO1000",
        "short Capital of France?/Paris/GEO1000/easy/extra",
        "short Capital of France?/ /GEO1000/easy",
        "short  /Paris/GEO1000/easy",
        "short Capital of France?/Paris/GEO1000/  ",
    ],
)
def test_parse_add_command_rejects_incomplete_question(line: str) -> None:
    result = parse_command(line)
    assert result.command is None
    assert isinstance(result.error, IncompleteQuestionError)


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("start /all /normal", StartQuizCommand(QuizMode.ALL, QuestionOrder.NORMAL)),
        ("start /all /random", StartQuizCommand(QuizMode.ALL, QuestionOrder.RANDOM)),
        ("start/ALL/Random", StartQuizCommand(QuizMode.ALL, QuestionOrder.RANDOM)),
        (
            "start /module CS2113 /normal",
            StartQuizCommand(QuizMode.MODULE, QuestionOrder.NORMAL, module="CS2113"),
        ),
        (
            "start   /  module   cs2113   /   random  ",
            StartQuizCommand(QuizMode.MODULE, QuestionOrder.RANDOM, module="cs2113"),
        ),
        ("start /all ignored /normal", StartQuizCommand(QuizMode.ALL, QuestionOrder.NORMAL)),
        ("start /all /random extra", StartQuizCommand(QuizMode.ALL, QuestionOrder.RANDOM)),
    ],
)
def test_parse_start_command(line: str, expected: StartQuizCommand) -> None:
    result = parse_command(line)
    assert result.ok
    assert result.command == expected


@pytest.mark.parametrize(
    ("line", "error_type"),
    [
        ("start", MissingModeError),
        ("start /", MissingModeError),
        ("start /   /normal", MissingModeError),
        ("start /all", InvalidModeError),
        ("start /all /", InvalidModeError),
        ("start /all /shuffled", InvalidModeError),
        ("start /module CS2113", InvalidModeError),
        ("start /module /normal", InvalidFormatError),
        ("start /everything /normal", InvalidFormatError),
        ("start /module CS/2113 /normal", InvalidFormatError),
        ("start now /all /normal", InvalidFormatError),
    ],
)
def test_parse_start_command_errors(line: str, error_type: type) -> None:
    result = parse_command(line)
    assert result.command is None
    assert isinstance(result.error, error_type)


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("find /description capital", FindCommand(SearchCriterion.DESCRIPTION, "capital")),
        ("find /module  cs2113 ", FindCommand(SearchCriterion.MODULE, "cs2113")),
        ("find /MODULE cs 2113", FindCommand(SearchCriterion.MODULE, "cs 2113")),
        ("find /time 05-03-2024 14:30", FindCommand(SearchCriterion.TIME, "05-03-2024 14:30")),
    ],
)
def test_parse_find_command(line: str, expected: FindCommand) -> None:
    result = parse_command(line)
    assert result.ok
    assert result.command == expected


@pytest.mark.parametrize(
    ("line", "error_type"),
    [
        ("find", MissingCriterionError),
        ("find capital", MissingCriterionError),
        ("find /", MissingCriterionError),
        ("find /answer Paris", MissingCriterionError),
        ("find /description", MissingKeywordError),
        ("find /module    ", MissingKeywordError),
    ],
)
def test_parse_find_command_errors(line: str, error_type: type) -> None:
    result = parse_command(line)
    assert isinstance(result.error, error_type)


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("mark 3", MarkCommand(index=3, done=True)),
        ("unmark 2", MarkCommand(index=2, done=False)),
        ("delete 1", DeleteCommand(index=1)),
        ("view 12", ViewCommand(index=12)),
        ("delete 0", DeleteCommand(index=0)),
        ("mark -4", MarkCommand(index=-4, done=True)),
        ("markdiff 2 /hard", MarkDifficultyCommand(index=2, difficulty=Difficulty.HARD)),
        ("markdiff 2/Easy", MarkDifficultyCommand(index=2, difficulty=Difficulty.EASY)),
        ("edit 1 /description New text here", EditCommand(index=1, new_description="New text here")),
        ("edit 4 /answer  Lyon ", EditCommand(index=4, new_answer="Lyon")),
        ("edit 0 /answer Lyon", EditCommand(index=0, new_answer="Lyon")),
    ],
)
def test_parse_index_commands(line: str, expected: object) -> None:
    result = parse_command(line)
    assert result.ok
    assert result.command == expected


@pytest.mark.parametrize(
    "line",
    ["mark", "mark two", "unmark 2x", "delete", "view /1", "markdiff /hard", "edit abc /answer x"],
)
def test_parse_index_commands_require_numeric_index(line: str) -> None:
    result = parse_command(line)
    assert isinstance(result.error, InvalidIndexError)


@pytest.mark.parametrize(
    "line",
    [
        "markdiff 2",
        "markdiff 2 /legendary",
        "markdiff 2 hard",
        "edit 1",
        "edit 1 /module CS2113",
        "edit 1 /answer   ",
        "edit 1 answer Lyon",
    ],
)
def test_parse_rejects_malformed_markdiff_and_edit(line: str) -> None:
    result = parse_command(line)
    assert isinstance(result.error, InvalidFormatError)


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("list", ListCommand()),
        ("  LIST  ", ListCommand()),
        ("shuffle", ShuffleCommand()),
        ("help", HelpCommand()),
        ("bye", ExitCommand()),
        ("exit", ExitCommand()),
    ],
)
def test_parse_commands_without_arguments(line: str, expected: object) -> None:
    assert parse_command(line).command == expected


@pytest.mark.parametrize("line", ["", "   ", "hello world", "/start /all /normal"])
def test_parse_unknown_command(line: str) -> None:
    result = parse_command(line)
    assert isinstance(result.error, UnknownCommandError)


def test_parse_error_messages_are_human_readable() -> None:
    result = parse_command("start /all")
    assert result.error is not None
    assert "random" in result.error.message
    assert "normal" in result.error.message
