# application/builder/process_builder.py
from __future__ import annotations

from typing import List, Optional

from application.commands.base import Command, CommandResolver, ExecutableCommand, ProcessCommand
from application.executor.chain_executor import ChainExecutor
from application.executor.process_executor import ProcessExecutor
from application.ports.description_source import DescriptionSourcePort
from application.ports.logger import LoggerPort, NullLogger
from domain.context import Context
from domain.description import StepDescription
from domain.errors import (
    CommandResolutionError,
    DescriptionLoadError,
    ProcessConfigError,
    UnsupportedOperationError,
)
from domain.outcome import Outcome
from domain.process import ProcessGraph, ProcessStep, Transition


class UnresolvedCommand(Command):
    """Stands in for a command reference the resolver could not satisfy."""

    def __init__(self, reference: str, reason: str):
        self.reference = reference
        self.reason = reason

    def execute_command(self, context: Context) -> Outcome:
        raise CommandResolutionError(f"Command {self.reference} is not available: {self.reason}")


class ProcessBuilder(ExecutableCommand, ProcessCommand):
    """
    Builds a process graph from a description source and runs it.

    Chain mode (`execute_command`) runs every step once by priority and never
    raises for configuration problems: a missing or broken description yields
    FAILURE, and unresolvable commands count as failed steps.

    Process mode (`execute_as_process`) walks the transitions from an explicit
    start step. A missing or unparseable description yields None; other
    configuration errors propagate.
    """

    def __init__(
        self,
        source: str,
        resolver: CommandResolver,
        *,
        description_source: Optional[DescriptionSourcePort] = None,
        logger: Optional[LoggerPort] = None,
        max_steps: Optional[int] = None,
    ):
        if description_source is None:
            from infrastructure.description.file_source import FileDescriptionSource

            description_source = FileDescriptionSource()

        self._source = source
        self._resolver = resolver
        self._descriptions = description_source
        self._logger = (logger or NullLogger()).bind(process_source=source)
        self._max_steps = max_steps
        self._graph: Optional[ProcessGraph] = None
        self._unresolved: List[str] = []

    @property
    def source(self) -> str:
        return self._source

    @property
    def process_id(self) -> Optional[str]:
        return self._graph.process_id if self._graph is not None else None

    def set_process_id(self, process_id: str) -> None:
        raise UnsupportedOperationError("Chainbuilder has no process id.")

    def build(self, strict: bool = True) -> ProcessGraph:
        """
        Load the description and assemble the graph. The result is cached.

        With `strict=False` unresolvable command references are replaced by
        `UnresolvedCommand` placeholders instead of failing the build.
        """
        if self._graph is not None and (not strict or not self._unresolved):
            return self._graph

        description = self._descriptions.load(self._source)
        unresolved: List[str] = []
        steps = [self._build_step(step, strict, unresolved) for step in description.steps]
        graph = ProcessGraph(
            process_id=description.id,
            steps=steps,
            start_step_id=description.start,
        )

        self._graph = graph
        self._unresolved = unresolved
        self._logger.info(
            "process.built",
            process_id=graph.process_id,
            steps=len(graph),
            unresolved=len(unresolved),
        )
        return graph

    def _build_step(self, step: StepDescription, strict: bool, unresolved: List[str]) -> ProcessStep:
        try:
            command = self._resolver.resolve(step.command)
        except CommandResolutionError as exc:
            if strict:
                raise
            self._logger.warning(
                "command.unresolved",
                step_id=step.id,
                command=step.command,
                error=str(exc),
            )
            unresolved.append(step.id)
            command = UnresolvedCommand(step.command, str(exc))

        transitions = sorted(
            (Transition(outcome=t.outcome, target=t.to, priority=t.priority) for t in step.transitions),
            key=lambda t: t.priority,
        )
        return ProcessStep(
            step_id=step.id,
            command=command,
            priority=step.priority,
            transitions=tuple(transitions),
        )

    def execute_command(self, context: Context) -> Outcome:
        try:
            graph = self.build(strict=False)
        except ProcessConfigError as exc:
            self._logger.error(
                "process.build_failed",
                mode="chain",
                error_type=type(exc).__name__,
                error=str(exc),
            )
            return Outcome.FAILURE

        logger = self._logger.bind(process_id=graph.process_id)
        return ChainExecutor(logger).execute(graph, context)

    def execute_as_process(self, start, context: Optional[Context] = None) -> Optional[str]:
        """
        Walk the process from `start` until no transition matches.

        Returns the terminal resolution (None), also when the description
        cannot be located or parsed.
        """
        if not isinstance(start, str):
            raise UnsupportedOperationError("Use execute_as_process(start, context)")
        if context is None:
            context = Context()

        try:
            graph = self.build(strict=True)
        except DescriptionLoadError as exc:
            self._logger.error(
                "process.build_failed",
                mode="process",
                error_type=type(exc).__name__,
                error=str(exc),
            )
            return None

        logger = self._logger.bind(process_id=graph.process_id)
        return ProcessExecutor(logger, max_steps=self._max_steps).run(graph, start, context)
