from application.commands.base import (
    ChainAdapter,
    Command,
    CommandResolver,
    ExecutableCommand,
    ProcessCommand,
)
from application.commands.chain import CommandChain

__all__ = [
    "Command",
    "CommandResolver",
    "ExecutableCommand",
    "ChainAdapter",
    "ProcessCommand",
    "CommandChain",
]
