from quizdeck.storage.text_file import QuestionStorage, TextFileStorage

__all__ = ["QuestionStorage", "TextFileStorage"]
