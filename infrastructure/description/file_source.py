# infrastructure/description/file_source.py
from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

from application.ports.description_source import DescriptionSourcePort
from domain.description import ProcessDescription
from domain.errors import DescriptionNotFoundError
from infrastructure.description.file_finder import DescriptionFileFinder
from infrastructure.description.loader_registry import DescriptionLoaderRegistry


class FileDescriptionSource(DescriptionSourcePort):
    def __init__(
        self,
        search_paths: Sequence[Path] = (),
        finder: Optional[DescriptionFileFinder] = None,
        loaders: Optional[DescriptionLoaderRegistry] = None,
    ):
        self._finder = finder or DescriptionFileFinder(search_paths)
        self._loaders = loaders or DescriptionLoaderRegistry()

    def load(self, name: str) -> ProcessDescription:
        path = self._finder.resolve(name)
        if path is None:
            raise DescriptionNotFoundError(f"Process description not found: {name}")
        return self._loaders.get_loader(path).load_from_file(path)
