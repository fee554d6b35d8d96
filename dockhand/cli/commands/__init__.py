from .complete import complete_command
from .completion import completion_command
from .container import create_command, run_command

__all__ = [
    "complete_command",
    "completion_command",
    "create_command",
    "run_command",
]
