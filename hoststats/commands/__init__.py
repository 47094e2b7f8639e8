from .canned import CannedCommandRunner
from .runner import CommandResult, CommandRunner

__all__ = [
    "CannedCommandRunner",
    "CommandResult",
    "CommandRunner",
]
