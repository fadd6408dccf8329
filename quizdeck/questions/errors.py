from __future__ import annotations

from quizdeck.core.messages import MessageKey, render_message


class QuizDeckError(Exception):
    message_key: MessageKey = MessageKey.INVALID_FORMAT

    def __init__(self, **fields: object) -> None:
        self.fields = fields
        super().__init__(self.message)

    @property
    def message(self) -> str:
        return render_message(self.message_key, **self.fields)


class MissingModeError(QuizDeckError):
    message_key = MessageKey.MISSING_MODE


class InvalidModeError(QuizDeckError):
    message_key = MessageKey.INVALID_MODE


class InvalidFormatError(QuizDeckError):
    message_key = MessageKey.INVALID_FORMAT


class IncompleteQuestionError(QuizDeckError):
    message_key = MessageKey.INCOMPLETE_QUESTION


class MissingCriterionError(QuizDeckError):
    message_key = MessageKey.MISSING_CRITERION


class MissingKeywordError(QuizDeckError):
    message_key = MessageKey.MISSING_KEYWORD


class InvalidIndexError(QuizDeckError):
    message_key = MessageKey.INVALID_INDEX


class EmptyListError(QuizDeckError):
    message_key = MessageKey.EMPTY_LIST


class UnknownCommandError(QuizDeckError):
    message_key = MessageKey.UNKNOWN_COMMAND


class StorageError(QuizDeckError):
    message_key = MessageKey.STORAGE_FAILURE
