# infrastructure/description/loader_registry.py
from __future__ import annotations

from pathlib import Path
from typing import Dict

from infrastructure.description.base_loader import DescriptionLoaderBase, DescriptionLoadError
from infrastructure.description.json_loader import JsonDescriptionLoader
from infrastructure.description.xml_loader import XmlDescriptionLoader
from infrastructure.description.yaml_loader import YamlDescriptionLoader


class DescriptionLoaderRegistry:
    def __init__(self) -> None:
        self._loaders: Dict[str, DescriptionLoaderBase] = {
            ".xml": XmlDescriptionLoader(),
            ".yaml": YamlDescriptionLoader(),
            ".yml": YamlDescriptionLoader(),
            ".json": JsonDescriptionLoader(),
        }

    def get_loader(self, path: Path) -> DescriptionLoaderBase:
        ext = path.suffix.lower()
        loader = self._loaders.get(ext)
        if loader is None:
            raise DescriptionLoadError(f"Unsupported description format: {ext}")
        return loader
