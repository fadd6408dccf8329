from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Sequence
from pathlib import Path

import structlog

from quizdeck.cli.dispatch import CommandDispatcher
from quizdeck.core.config import get_settings
from quizdeck.core.logging import configure_logging
from quizdeck.core.messages import MessageKey, render_message
from quizdeck.questions.errors import StorageError
from quizdeck.questions.question_list import QuestionList
from quizdeck.quiz.ui import TerminalUi, Ui
from quizdeck.storage.text_file import QuestionStorage, TextFileStorage

logger = structlog.get_logger("quizdeck.cli.main")


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quizdeck",
        description="Manage short-answer questions and quiz yourself on them.",
    )
    parser.add_argument(
        "--data-file",
        default=None,
        help="Question file to load at start and save on exit (default: QUIZDECK_DATA_FILE).",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level for stderr logs (default: QUIZDECK_LOG_LEVEL).",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for random quiz order and shuffle (default: QUIZDECK_SHUFFLE_SEED).",
    )
    return parser


def run_loop(dispatcher: CommandDispatcher, ui: Ui) -> None:
    while True:
        try:
            line = ui.get_user_input()
            if not dispatcher.handle(line):
                return
        except EOFError:
            logger.info("input_closed")
            return


def main(
    argv: Sequence[str] | None = None,
    *,
    ui: Ui | None = None,
    storage: QuestionStorage | None = None,
) -> int:
    args = build_arg_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(args.log_level or settings.log_level)

    seed = args.seed if args.seed is not None else settings.shuffle_seed
    data_file = Path(args.data_file) if args.data_file else settings.data_file
    storage = storage if storage is not None else TextFileStorage(data_file)
    ui = ui if ui is not None else TerminalUi()

    try:
        question_list = QuestionList(storage.load_all())
    except StorageError as err:
        logger.error("storage_load_failed", error=str(err))
        ui.display_message(err.message)
        return 1

    dispatcher = CommandDispatcher(question_list, ui, rng=random.Random(seed))
    ui.display_message(render_message(MessageKey.WELCOME, size=question_list.size))
    try:
        run_loop(dispatcher, ui)
    except KeyboardInterrupt:
        logger.info("interrupted")

    try:
        storage.save_all(question_list)
    except StorageError as err:
        logger.error("storage_save_failed", error=str(err))
        ui.display_message(err.message)
        return 1

    ui.display_message(render_message(MessageKey.GOODBYE))
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
