# application/executor/process_executor.py
from __future__ import annotations

from typing import Optional

from application.executor.step_runner import StepRunner
from application.ports.logger import LoggerPort
from domain.context import Context
from domain.errors import StepBudgetExceededError
from domain.process import ProcessGraph


class ProcessExecutor:
    """
    Walks a process graph along its outcome-keyed transitions.

    Graphs are expected to be acyclic. A cycle loops forever unless
    `max_steps` is set, in which case the run fails once the budget is spent.
    """

    def __init__(self, logger: LoggerPort, max_steps: Optional[int] = None):
        self._logger = logger
        self._runner = StepRunner(logger)
        self._max_steps = max_steps

    def execute_step(self, graph: ProcessGraph, step_id: str, context: Context) -> Optional[str]:
        """
        Run one step and return the id of the step to run next, or None when
        no transition matches the step's outcome.
        """
        step = graph.get_step(step_id)
        outcome = self._runner.run(step, context)
        transition = step.find_transition(outcome)

        if transition is None:
            self._logger.debug("process.no_transition", step_id=step_id, outcome=outcome.value)
            return None

        self._logger.info(
            "process.transition",
            from_step=step_id,
            outcome=outcome.value,
            to_step=transition.target,
        )
        return transition.target

    def run(self, graph: ProcessGraph, start: str, context: Context) -> Optional[str]:
        # unknown start fails before anything runs
        graph.get_step(start)
        self._logger.info("process.start", process_id=graph.process_id, start=start)

        executed = 0
        next_step_id: Optional[str] = start
        while next_step_id is not None:
            if self._max_steps is not None and executed >= self._max_steps:
                self._logger.error("process.budget_exceeded", max_steps=self._max_steps, step_id=next_step_id)
                raise StepBudgetExceededError(self._max_steps, next_step_id)
            next_step_id = self.execute_step(graph, next_step_id, context)
            executed += 1

        self._logger.info("process.end", process_id=graph.process_id, steps=executed)
        return next_step_id
