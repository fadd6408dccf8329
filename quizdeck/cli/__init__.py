from quizdeck.cli.dispatch import CommandDispatcher
from quizdeck.cli.main import main, run

__all__ = ["CommandDispatcher", "main", "run"]
