# domain/outcome.py
from __future__ import annotations

from enum import Enum

from domain.errors import ProcessConfigError


class Outcome(str, Enum):
    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"
    ABORT = "ABORT"
    # produced by the chain layer only
    NEXT = "NEXT"
    DONE = "DONE"

    @classmethod
    def parse(cls, value: str) -> "Outcome":
        try:
            return cls[str(value).strip().upper()]
        except KeyError:
            raise ProcessConfigError(f"Unknown outcome: {value!r}") from None

    @property
    def is_leaf(self) -> bool:
        return self in LEAF_OUTCOMES


LEAF_OUTCOMES = frozenset({Outcome.SUCCESS, Outcome.FAILURE, Outcome.ABORT})

_PRECEDENCE = {
    Outcome.SUCCESS: 0,
    Outcome.FAILURE: 1,
    Outcome.ABORT: 2,
}


def combine(aggregate: Outcome, outcome: Outcome) -> Outcome:
    """Fold a step outcome into the running chain outcome (ABORT > FAILURE > SUCCESS)."""
    if _PRECEDENCE[outcome] > _PRECEDENCE[aggregate]:
        return outcome
    return aggregate


def to_chain_signal(outcome: Outcome) -> Outcome:
    return Outcome.NEXT if outcome is Outcome.SUCCESS else Outcome.DONE
