# application/commands/base.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List, Optional, Protocol

from domain.context import Context
from domain.outcome import Outcome, to_chain_signal

if TYPE_CHECKING:
    from domain.process import Transition


class Command(ABC):
    """
    Single unit of work. Reads and writes the context, returns
    SUCCESS, FAILURE or ABORT.
    """

    @abstractmethod
    def execute_command(self, context: Context) -> Outcome: ...


class ExecutableCommand(Command):
    """Command that can also decide whether a chain should go on after it."""

    def execute_command_as_chain(self, context: Context) -> Outcome:
        """
        NEXT when `execute_command` returned SUCCESS, DONE otherwise.
        """
        return to_chain_signal(self.execute_command(context))

    def execute_only(self, context: Context) -> None:
        """Run without any outcome handling. Does nothing unless overridden."""


class ChainAdapter(ExecutableCommand):
    """Wraps a plain command with the chain-continuation decision."""

    def __init__(self, command: Command):
        self._command = command

    @property
    def command(self) -> Command:
        return self._command

    def execute_command(self, context: Context) -> Outcome:
        return self._command.execute_command(context)


class ProcessCommand(Command):
    """
    Optional capability: a command that owns a named process and can be
    walked step by step.
    """

    @property
    @abstractmethod
    def process_id(self) -> Optional[str]: ...

    @abstractmethod
    def set_process_id(self, process_id: str) -> None: ...

    @abstractmethod
    def execute_as_process(self, start, context: Optional[Context] = None) -> Optional[str]: ...

    def add_transition(self, transition: Transition) -> None:
        """Commands that keep their own transitions override this; ignored by default."""

    def get_transition_list(self) -> List[Transition]:
        return []

    def find_next(self, next_id: Optional[str]) -> Optional[str]:
        # no routing of its own: the proposed step stays the next one
        return next_id


class CommandResolver(Protocol):
    def resolve(self, reference: str) -> Command:
        ...
