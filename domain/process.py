# domain/process.py
"""
Process graph domain model: named steps, each wrapping a command and the
outcome-keyed transitions leaving it.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, List, Optional, Sequence, Tuple

from domain.errors import ProcessConfigError, UnknownStepError
from domain.outcome import Outcome

if TYPE_CHECKING:
    from application.commands.base import Command


@dataclass(frozen=True)
class Transition:
    outcome: Outcome
    target: str
    priority: int = 0


@dataclass(frozen=True)
class ProcessStep:
    step_id: str
    command: "Command"
    priority: int = 0
    transitions: Tuple[Transition, ...] = field(default_factory=tuple)

    def find_transition(self, outcome: Outcome) -> Optional[Transition]:
        for transition in self.transitions:
            if transition.outcome is outcome:
                return transition
        return None


class ProcessGraph:
    """
    Immutable set of steps owned by one process.

    Steps keep their declaration order; `priority_groups` buckets them by
    ascending priority for chain execution.
    """

    def __init__(
        self,
        process_id: Optional[str],
        steps: Sequence[ProcessStep],
        start_step_id: Optional[str] = None,
    ) -> None:
        self._process_id = process_id
        self._steps: Tuple[ProcessStep, ...] = tuple(steps)
        self._start_step_id = start_step_id
        self._by_id: Dict[str, ProcessStep] = {}

        for step in self._steps:
            if step.step_id in self._by_id:
                raise ProcessConfigError(f"Duplicate step id: {step.step_id!r}")
            self._by_id[step.step_id] = step

        for step in self._steps:
            seen: set[Outcome] = set()
            for transition in step.transitions:
                if transition.outcome in seen:
                    raise ProcessConfigError(
                        f"Duplicate transition for step {step.step_id!r} on {transition.outcome.value}"
                    )
                seen.add(transition.outcome)
                if transition.target not in self._by_id:
                    raise ProcessConfigError(
                        f"Transition target not found: {step.step_id!r} -> {transition.target!r}"
                    )

        if start_step_id is not None and start_step_id not in self._by_id:
            raise ProcessConfigError(f"Start step not found: {start_step_id!r}")

    @property
    def process_id(self) -> Optional[str]:
        return self._process_id

    @property
    def start_step_id(self) -> Optional[str]:
        return self._start_step_id

    @property
    def steps(self) -> Tuple[ProcessStep, ...]:
        return self._steps

    def __len__(self) -> int:
        return len(self._steps)

    def has_step(self, step_id: str) -> bool:
        return step_id in self._by_id

    def get_step(self, step_id: str) -> ProcessStep:
        step = self._by_id.get(step_id)
        if step is None:
            raise UnknownStepError(step_id, self._process_id)
        return step

    def priority_groups(self) -> List[Tuple[int, List[ProcessStep]]]:
        groups: Dict[int, List[ProcessStep]] = {}
        for step in self._steps:
            groups.setdefault(step.priority, []).append(step)
        return sorted(groups.items(), key=lambda item: item[0])

    def next_step_id(self, step_id: str, outcome: Outcome) -> Optional[str]:
        transition = self.get_step(step_id).find_transition(outcome)
        return transition.target if transition is not None else None
