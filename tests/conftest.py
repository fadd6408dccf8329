from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from quizdeck.core.config import get_settings
from quizdeck.questions.question_list import QuestionList
from tests.helpers import make_question


@pytest.fixture
def sample_list() -> QuestionList:
    return QuestionList(
        [
            make_question("What is the capital of France?", "Paris", "GEO1000"),
            make_question("What is 6 x 7?", "42", "CS2113"),
            make_question("Name a Java build tool", "Gradle", "cs1010"),
            make_question("What does OOP stand for?", "Object Oriented Programming", "CS2113X"),
        ]
    )


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    for name in ("QUIZDECK_DATA_FILE", "QUIZDECK_LOG_LEVEL", "QUIZDECK_SHUFFLE_SEED"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
