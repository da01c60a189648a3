# domain/description.py
"""
Parsed process description, before command references are resolved.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from domain.outcome import Outcome


@dataclass(frozen=True)
class TransitionDescription:
    outcome: Outcome
    to: str
    priority: int = 0


@dataclass(frozen=True)
class StepDescription:
    id: str
    command: str
    priority: int = 0
    transitions: List[TransitionDescription] = field(default_factory=list)


@dataclass(frozen=True)
class ProcessDescription:
    """
    Process description aggregate root
    """
    steps: List[StepDescription]
    id: Optional[str] = None
    start: Optional[str] = None
    source: str = ""
