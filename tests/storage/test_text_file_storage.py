from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

import pytest

from quizdeck.questions.errors import StorageError
from quizdeck.questions.types import Difficulty
from quizdeck.storage.text_file import TextFileStorage, question_to_record, record_to_question
from tests.helpers import make_question, snapshot


def test_load_all_returns_empty_list_when_file_is_missing(tmp_path: Path) -> None:
    storage = TextFileStorage(tmp_path / "missing.txt")
    assert storage.load_all() == []


def test_save_then_load_preserves_order_and_fields(tmp_path: Path) -> None:
    questions = [
        make_question("Capital of France?", "Paris", "GEO1000", difficulty=Difficulty.EASY),
        make_question("6 x 7?", "42", "MA1101", difficulty=Difficulty.HARD, done=True),
        make_question("Pipe | inside?", 'Quote " too', "CS2113"),
    ]
    storage = TextFileStorage(tmp_path / "nested" / "deck.txt")

    storage.save_all(questions)
    loaded = storage.load_all()

    assert snapshot(loaded) == snapshot(questions)
    assert [q.created_at for q in loaded] == [q.created_at for q in questions]


def test_saved_file_has_one_pipe_delimited_record_per_question(tmp_path: Path) -> None:
    path = tmp_path / "deck.txt"
    question = make_question(
        "Capital of France?",
        "Paris",
        "GEO1000",
        created_at=datetime(2024, 3, 5, 14, 30, tzinfo=timezone.utc),
    )

    TextFileStorage(path).save_all([question])

    assert path.read_text(encoding="utf-8") == (
        "S|Capital of France?|Paris|GEO1000|NORMAL|0|2024-03-05T14:30:00+00:00\n"
    )


def test_load_all_skips_malformed_records(tmp_path: Path) -> None:
    path = tmp_path / "deck.txt"
    path.write_text(
        "S|Capital of France?|Paris|GEO1000|EASY|0|2024-03-05T14:30:00+00:00\n"
        "S|Too few fields\n"
        "S|Bad difficulty|x|CS|LEGENDARY|0|2024-03-05T14:30:00+00:00\n"
        "S|Bad flag|x|CS|EASY|maybe|2024-03-05T14:30:00+00:00\n"
        "S||no description|CS|EASY|0|2024-03-05T14:30:00+00:00\n"
        "M|Unknown kind|x|CS|EASY|0|2024-03-05T14:30:00+00:00\n"
        "\n"
        "S|6 x 7?|42|MA1101|HARD|1|2024-03-06T09:00:00+00:00\n",
        encoding="utf-8",
    )

    loaded = TextFileStorage(path).load_all()

    assert snapshot(loaded) == [
        ("Capital of France?", "Paris", "GEO1000", "EASY", False),
        ("6 x 7?", "42", "MA1101", "HARD", True),
    ]


def test_record_round_trip_keeps_done_flag() -> None:
    question = make_question("Q", "A", done=True)
    restored = record_to_question(question_to_record(question))
    assert restored.done is True


def test_load_all_wraps_os_errors(tmp_path: Path) -> None:
    with pytest.raises(StorageError):
        TextFileStorage(tmp_path).load_all()


def test_save_all_wraps_os_errors(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")

    with pytest.raises(StorageError):
        TextFileStorage(blocker / "deck.txt").save_all([make_question("Q", "A")])


def test_save_all_writes_back_records_that_failed_to_load(tmp_path: Path) -> None:
    path = tmp_path / "deck.txt"
    bad_record = "S|Q2|A2|CS2113|MEDIUM|0|2024-03-05T14:30:00+00:00\n"
    path.write_text(
        "S|Q1|A1|CS2113|NORMAL|0|2024-03-05T14:30:00+00:00\n" + bad_record,
        encoding="utf-8",
    )
    storage = TextFileStorage(path)

    loaded = storage.load_all()
    storage.save_all(loaded)

    assert [q.description for q in loaded] == ["Q1"]
    assert storage.skipped_records == [["S", "Q2", "A2", "CS2113", "MEDIUM", "0", "2024-03-05T14:30:00+00:00"]]
    assert path.read_text(encoding="utf-8").endswith(bad_record)
