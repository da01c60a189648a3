# application/ports/description_source.py
from __future__ import annotations

from abc import ABC, abstractmethod

from domain.description import ProcessDescription


class DescriptionSourcePort(ABC):
    @abstractmethod
    def load(self, name: str) -> ProcessDescription:
        """
        Load the process description called `name`.
        Raises DescriptionNotFoundError / DescriptionLoadError.
        """
        ...
