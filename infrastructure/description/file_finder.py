"""Locate process description files."""
from pathlib import Path
from typing import Optional, Sequence

PRIORITY = [".xml", ".json", ".yaml", ".yml"]


class DescriptionFileFinder:
    """Resolve description names against a list of search directories."""

    def __init__(self, search_paths: Sequence[Path] = ()):
        self.search_paths = [Path(p) for p in search_paths]

    def resolve(self, name: str | Path) -> Optional[Path]:
        """
        Resolve a description source.

        Args:
            name: A file path, or a resource-style name such as
                "/orderProcess.xml" looked up under each search path.

        Returns:
            The Path if found, otherwise None.
        """
        name = str(name)
        if not name:
            return None

        direct = Path(name)
        if direct.is_file():
            return direct

        relative = name.lstrip("/\\")
        for base_dir in self.search_paths:
            candidate = base_dir / relative
            if candidate.is_file():
                return candidate
        return None

    def find_by_id(self, process_id: str) -> Optional[Path]:
        """
        Find a description file by process ID, searching recursively.

        Returns:
            The Path if found, otherwise None.
        """
        candidates: list[Path] = []

        # .xml wins over the other formats for the same process id
        for base_dir in self.search_paths:
            for ext in PRIORITY:
                for file_path in base_dir.rglob(f"{process_id}{ext}"):
                    if file_path.is_file():
                        candidates.append(file_path)

        if not candidates:
            return None

        candidates.sort(key=lambda path: (PRIORITY.index(path.suffix), str(path)))
        return candidates[0]
