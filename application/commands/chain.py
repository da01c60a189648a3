# application/commands/chain.py
from __future__ import annotations

from typing import List, Optional

from application.commands.base import Command, ExecutableCommand
from application.executor.chain_executor import ChainExecutor
from application.ports.logger import LoggerPort, NullLogger
from domain.context import Context
from domain.outcome import Outcome
from domain.process import ProcessGraph, ProcessStep


class CommandChain(ExecutableCommand):
    """
    Chain of commands wired in code.

    Commands run by ascending priority, in the order they were added within
    one priority. The chain is a command itself, so chains can be nested.
    """

    def __init__(self, logger: Optional[LoggerPort] = None):
        self._logger = logger or NullLogger()
        self._steps: List[ProcessStep] = []

    def add(self, command: Command, priority: int = 0) -> "CommandChain":
        step_id = f"{len(self._steps) + 1}:{type(command).__name__}"
        self._steps.append(ProcessStep(step_id=step_id, command=command, priority=priority))
        return self

    def __len__(self) -> int:
        return len(self._steps)

    def execute_command(self, context: Context) -> Outcome:
        graph = ProcessGraph(process_id=None, steps=self._steps)
        return ChainExecutor(self._logger).execute(graph, context)
