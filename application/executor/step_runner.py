# application/executor/step_runner.py
from __future__ import annotations

import time

from application.ports.logger import LoggerPort
from domain.context import Context
from domain.outcome import Outcome
from domain.process import ProcessStep


class StepRunner:
    """
    Runs one step's command and normalises the result to a leaf outcome.

    A command that raises, or that returns anything other than SUCCESS,
    FAILURE or ABORT, counts as FAILURE.
    """

    def __init__(self, logger: LoggerPort):
        self._logger = logger

    def run(self, step: ProcessStep, context: Context) -> Outcome:
        self._logger.info(
            "step.start",
            step_id=step.step_id,
            command=type(step.command).__name__,
            priority=step.priority,
        )
        t0 = time.perf_counter()

        try:
            result = step.command.execute_command(context)
        except Exception as exc:
            self._logger.error(
                "step.failed",
                step_id=step.step_id,
                error_type=type(exc).__name__,
                error=str(exc),
            )
            result = Outcome.FAILURE

        if not isinstance(result, Outcome) or not result.is_leaf:
            self._logger.error("step.invalid_outcome", step_id=step.step_id, outcome=repr(result))
            result = Outcome.FAILURE

        self._logger.info(
            "step.end",
            step_id=step.step_id,
            outcome=result.value,
            elapsed_ms=int((time.perf_counter() - t0) * 1000),
        )
        return result
