from quizdeck.commands.parser import parse_command
from quizdeck.commands.types import Command, ParseResult, SearchCriterion

__all__ = ["Command", "ParseResult", "SearchCriterion", "parse_command"]
