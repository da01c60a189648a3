# infrastructure/description/base_loader.py
"""
Shared mapping from a parsed document (dict) to a ProcessDescription.
Format-specific loaders only turn a file into that dict.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional

from domain.description import ProcessDescription, StepDescription, TransitionDescription
from domain.errors import DescriptionLoadError, DescriptionNotFoundError, ProcessConfigError
from domain.outcome import Outcome

__all__ = ["DescriptionLoaderBase", "DescriptionLoadError", "DescriptionNotFoundError"]


class DescriptionLoaderBase(ABC):
    def load_from_file(self, path: str | Path) -> ProcessDescription:
        p = Path(path)
        if not p.is_file():
            raise DescriptionNotFoundError(f"Process description not found: {path}")

        try:
            data = self._load_file(p)
        except DescriptionLoadError:
            raise
        except Exception as exc:
            raise DescriptionLoadError(f"Process description is malformed: {path}: {exc}") from exc

        if data is None:
            raise DescriptionLoadError(f"Process description is empty: {path}")
        if not isinstance(data, dict):
            raise DescriptionLoadError(f"Process description is invalid: {path}")

        return self.load_from_dict(data, source=str(p))

    @abstractmethod
    def _load_file(self, path: Path) -> Any: ...

    def load_from_dict(self, data: Dict[str, Any], source: str = "") -> ProcessDescription:
        process = data.get("process") or {}
        if not isinstance(process, dict):
            raise DescriptionLoadError(f"'process' must be a mapping: {source}")

        steps_data = data.get("steps") or []
        if not isinstance(steps_data, list):
            raise DescriptionLoadError(f"'steps' must be a list: {source}")

        return ProcessDescription(
            id=self._optional_str(process.get("id")),
            start=self._optional_str(process.get("start")),
            steps=[self._load_step(step_data, source) for step_data in steps_data],
            source=source,
        )

    def _load_step(self, data: Any, source: str) -> StepDescription:
        if not isinstance(data, dict):
            raise DescriptionLoadError(f"Step entry must be a mapping: {source}")

        step_id = self._optional_str(data.get("id"))
        command = self._optional_str(data.get("command"))
        if not step_id:
            raise DescriptionLoadError(f"Step without id: {source}")
        if not command:
            raise DescriptionLoadError(f"Step {step_id!r} has no command: {source}")

        return StepDescription(
            id=step_id,
            command=command,
            priority=self._load_int(data.get("priority"), 0, f"priority of step {step_id!r}"),
            transitions=self._load_transitions(data.get("transitions"), step_id),
        )

    def _load_transitions(self, data: Any, step_id: str) -> List[TransitionDescription]:
        if not data:
            return []

        # shorthand: {SUCCESS: next, FAILURE: error}
        if isinstance(data, dict):
            data = [{"outcome": outcome, "to": to} for outcome, to in data.items()]
        if not isinstance(data, list):
            raise DescriptionLoadError(f"Transitions of step {step_id!r} must be a list or mapping")

        transitions: List[TransitionDescription] = []
        for index, item in enumerate(data):
            if not isinstance(item, dict) or not item.get("outcome") or not item.get("to"):
                raise DescriptionLoadError(f"Transition of step {step_id!r} needs 'outcome' and 'to'")
            try:
                outcome = Outcome.parse(item["outcome"])
            except ProcessConfigError as exc:
                raise DescriptionLoadError(f"Step {step_id!r}: {exc}") from exc
            transitions.append(
                TransitionDescription(
                    outcome=outcome,
                    to=str(item["to"]),
                    priority=self._load_int(item.get("priority"), index, f"transition priority of step {step_id!r}"),
                )
            )
        return transitions

    def _load_int(self, value: Any, default: int, label: str) -> int:
        if value is None or value == "":
            return default
        if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
            raise DescriptionLoadError(f"Invalid {label}: {value!r}")
        try:
            return int(value)
        except (TypeError, ValueError):
            raise DescriptionLoadError(f"Invalid {label}: {value!r}") from None

    def _optional_str(self, value: Any) -> Optional[str]:
        if value is None:
            return None
        return str(value)
