from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import Protocol, TextIO

from quizdeck.questions.types import Question

LINE_PREFIX = "    "


class Ui(Protocol):
    def display_message(self, text: str) -> None: ...

    def display_question(self, question: Question, index: int, total: int) -> None: ...

    def get_user_input(self) -> str: ...


def format_question_prompt(question: Question, index: int, total: int) -> str:
    return f"Question {index}/{total} [{question.module} | {question.difficulty.label}]: {question.description}"


class TerminalUi:
    """Line-based terminal Ui; every output line gets a transcript prefix."""

    def __init__(
        self,
        *,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        prompt: str = "> ",
    ) -> None:
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._prompt = prompt

    def display_message(self, text: str) -> None:
        for line in text.splitlines() or [""]:
            self._stdout.write(f"{LINE_PREFIX}{line}\n")
        self._stdout.flush()

    def display_question(self, question: Question, index: int, total: int) -> None:
        self.display_message(format_question_prompt(question, index, total))

    def get_user_input(self) -> str:
        self._stdout.write(self._prompt)
        self._stdout.flush()
        line = self._stdin.readline()
        if not line:
            raise EOFError
        return line.rstrip("\n")


class ScriptedUi:
    """In-memory Ui fed from a fixed list of input lines."""

    def __init__(self, inputs: Iterable[str] = ()) -> None:
        self._inputs = list(inputs)
        self.messages: list[str] = []
        self.questions: list[tuple[Question, int, int]] = []
        self.reads = 0

    def display_message(self, text: str) -> None:
        self.messages.extend(text.splitlines() or [""])

    def display_question(self, question: Question, index: int, total: int) -> None:
        self.questions.append((question, index, total))
        self.messages.append(format_question_prompt(question, index, total))

    def get_user_input(self) -> str:
        self.reads += 1
        if not self._inputs:
            raise EOFError
        return self._inputs.pop(0)
