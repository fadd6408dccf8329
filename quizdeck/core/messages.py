from __future__ import annotations

from enum import Enum


class MessageKey(str, Enum):
    # errors
    MISSING_MODE = "MISSING_MODE"
    INVALID_MODE = "INVALID_MODE"
    INVALID_FORMAT = "INVALID_FORMAT"
    INCOMPLETE_QUESTION = "INCOMPLETE_QUESTION"
    MISSING_CRITERION = "MISSING_CRITERION"
    MISSING_KEYWORD = "MISSING_KEYWORD"
    INVALID_INDEX = "INVALID_INDEX"
    EMPTY_LIST = "EMPTY_LIST"
    UNKNOWN_COMMAND = "UNKNOWN_COMMAND"
    STORAGE_FAILURE = "STORAGE_FAILURE"
    # outcomes
    WELCOME = "WELCOME"
    GOODBYE = "GOODBYE"
    HELP = "HELP"
    DEFAULT_DIFFICULTY = "DEFAULT_DIFFICULTY"
    ADDED = "ADDED"
    LIST_SIZE = "LIST_SIZE"
    LISTED = "LISTED"
    NO_QUESTIONS = "NO_QUESTIONS"
    VIEWED = "VIEWED"
    MARKED_DONE = "MARKED_DONE"
    MARKED_NOT_DONE = "MARKED_NOT_DONE"
    ALREADY_DONE = "ALREADY_DONE"
    ALREADY_NOT_DONE = "ALREADY_NOT_DONE"
    DIFFICULTY_SET = "DIFFICULTY_SET"
    DIFFICULTY_UNCHANGED = "DIFFICULTY_UNCHANGED"
    DELETED = "DELETED"
    EDITED = "EDITED"
    SEARCH_HEADER = "SEARCH_HEADER"
    NO_RESULTS_DESCRIPTION = "NO_RESULTS_DESCRIPTION"
    NO_RESULTS_MODULE = "NO_RESULTS_MODULE"
    NO_RESULTS_TIME = "NO_RESULTS_TIME"
    SHUFFLED = "SHUFFLED"
    # quiz
    QUIZ_NO_QUESTIONS = "QUIZ_NO_QUESTIONS"
    QUIZ_STARTING = "QUIZ_STARTING"
    QUIZ_CORRECT = "QUIZ_CORRECT"
    QUIZ_WRONG = "QUIZ_WRONG"
    QUIZ_QUESTIONS_LEFT = "QUIZ_QUESTIONS_LEFT"
    QUIZ_COMPLETED = "QUIZ_COMPLETED"
    QUIZ_SCORE = "QUIZ_SCORE"


ADD_FORMAT_HINT = "Please format your input as short [question]/[answer]/[module]/[difficulty]!"
START_FORMAT_HINT = "Please format your input as start /[quiz mode] [start details] /[qn mode]!"
FIND_FORMAT_HINT = (
    "Please format your input as find /description [description], "
    "find /module [module] or find /time [dd-mm-yyyy HH:MM]!"
)

MESSAGES: dict[MessageKey, str] = {
    MessageKey.MISSING_MODE: "Ono! You did not indicate mode of the quiz :<\n" + START_FORMAT_HINT,
    MessageKey.INVALID_MODE: "Question mode must be either 'random' or 'normal'\n" + START_FORMAT_HINT,
    MessageKey.INVALID_FORMAT: "Ono! I could not understand that command :<\nUsage: {usage}",
    MessageKey.INCOMPLETE_QUESTION: "Ono! You did not input a proper question!\n" + ADD_FORMAT_HINT,
    MessageKey.MISSING_CRITERION: (
        "Ono! You did not indicate if you are searching by description, module or time :<\n"
        + FIND_FORMAT_HINT
    ),
    MessageKey.MISSING_KEYWORD: (
        "Ono! You did not indicate the keywords you are searching by :<\n" + FIND_FORMAT_HINT
    ),
    MessageKey.INVALID_INDEX: "Ono! Please enter valid question number *sobs*",
    MessageKey.EMPTY_LIST: "Question list is empty! Time to add some OWO",
    MessageKey.UNKNOWN_COMMAND: "Ono! I do not know what '{keyword}' means :< Type 'help' to see commands.",
    MessageKey.STORAGE_FAILURE: "Ono! I could not access the question file: {detail}",
    MessageKey.WELCOME: "Hello! Your question deck has {size} questions. What shall we do today?",
    MessageKey.GOODBYE: "Bye! Your questions have been saved. See you again soon!",
    MessageKey.HELP: (
        "Commands:\n"
        "  short [question]/[answer]/[module]/[difficulty]\n"
        "  list | view [index] | delete [index]\n"
        "  mark [index] | unmark [index] | markdiff [index] /[easy|normal|hard]\n"
        "  edit [index] /description [text] | edit [index] /answer [text]\n"
        "  find /description [keyword] | find /module [keyword] | find /time [dd-mm-yyyy HH:MM]\n"
        "  start /all /[random|normal] | start /module [module] /[random|normal]\n"
        "  shuffle | help | bye"
    ),
    MessageKey.DEFAULT_DIFFICULTY: "Question created using default normal difficulty",
    MessageKey.ADDED: "I have added the following question OwO:",
    MessageKey.LIST_SIZE: "Now you have {size} questions in the list! UWU",
    MessageKey.LISTED: "Here are the questions in your list:",
    MessageKey.NO_QUESTIONS: "No questions found! Time to add some OWO",
    MessageKey.VIEWED: "Here is question {index}:",
    MessageKey.MARKED_DONE: "Roger that! I have marked the following question as done >w< !",
    MessageKey.MARKED_NOT_DONE: "Roger that! I have unmarked the following question as done >w< !",
    MessageKey.ALREADY_DONE: "Question originally done! No changes made!",
    MessageKey.ALREADY_NOT_DONE: "Question originally not done! No changes made!",
    MessageKey.DIFFICULTY_SET: "Roger that! I have marked the following question as {difficulty} >w< !",
    MessageKey.DIFFICULTY_UNCHANGED: "Question is already set as {difficulty}! No changes made!",
    MessageKey.DELETED: "Roger that! I have deleted the following question >w< !",
    MessageKey.EDITED: "Roger that! I have edited the following question >w< !",
    MessageKey.SEARCH_HEADER: "Here are questions that matched your search:",
    MessageKey.NO_RESULTS_DESCRIPTION: "No results found :< Check your keyword is correct?",
    MessageKey.NO_RESULTS_MODULE: "No results found :< Check your module is correct?",
    MessageKey.NO_RESULTS_TIME: "No results found :< Check your time format is in dd-mm-yyyy HH:MM?",
    MessageKey.SHUFFLED: "Roger that! I have shuffled your question list >w< !",
    MessageKey.QUIZ_NO_QUESTIONS: "No questions found! Add questions before starting the quiz.",
    MessageKey.QUIZ_STARTING: "Starting the quiz...",
    MessageKey.QUIZ_CORRECT: "Correct!",
    MessageKey.QUIZ_WRONG: "Wrong!",
    MessageKey.QUIZ_QUESTIONS_LEFT: "Questions left: {left}",
    MessageKey.QUIZ_COMPLETED: "Quiz completed!",
    MessageKey.QUIZ_SCORE: "Your score: {correct}/{total}",
}


def render_message(key: MessageKey, **fields: object) -> str:
    template = MESSAGES[key]
    if not fields:
        return template
    return template.format(**fields)
