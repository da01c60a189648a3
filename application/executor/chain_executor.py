# application/executor/chain_executor.py
from __future__ import annotations

from application.executor.step_runner import StepRunner
from application.ports.logger import LoggerPort
from domain.context import Context
from domain.outcome import Outcome, combine
from domain.process import ProcessGraph


class ChainExecutor:
    """
    Runs every step of a graph once, priority group by priority group, and
    folds the outcomes into one.

    All steps of a group run even when one of them fails. Once the aggregate
    is ABORT the remaining groups are skipped.
    """

    def __init__(self, logger: LoggerPort):
        self._logger = logger
        self._runner = StepRunner(logger)

    def execute(self, graph: ProcessGraph, context: Context) -> Outcome:
        aggregate = Outcome.SUCCESS

        for priority, steps in graph.priority_groups():
            if aggregate is Outcome.ABORT:
                self._logger.info("chain.aborted", skipped_priority=priority)
                break

            for step in steps:
                aggregate = combine(aggregate, self._runner.run(step, context))

        self._logger.info("chain.end", outcome=aggregate.value, steps=len(graph))
        return aggregate
