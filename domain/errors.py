# domain/errors.py
from __future__ import annotations


class ProcessError(Exception):
    pass


class ProcessConfigError(ProcessError):
    """The description or the assembled graph is not usable."""


class DescriptionLoadError(ProcessConfigError):
    pass


class DescriptionNotFoundError(DescriptionLoadError):
    pass


class CommandResolutionError(ProcessConfigError):
    pass


class UnknownStepError(ProcessError):
    def __init__(self, step_id: str, process_id: str | None = None):
        self.step_id = step_id
        self.process_id = process_id
        where = f" in process {process_id!r}" if process_id else ""
        super().__init__(f"Unknown step: {step_id!r}{where}")


class StepBudgetExceededError(ProcessError):
    def __init__(self, max_steps: int, step_id: str):
        self.max_steps = max_steps
        self.step_id = step_id
        super().__init__(f"Process exceeded {max_steps} steps (next step: {step_id!r})")


class UnsupportedOperationError(ProcessError, NotImplementedError):
    pass
