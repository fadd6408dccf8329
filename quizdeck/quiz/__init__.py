from quizdeck.quiz.modes import QuestionOrder, QuizMode

__all__ = ["QuestionOrder", "QuizMode"]
