# infrastructure/description/yaml_loader.py
from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from infrastructure.description.base_loader import DescriptionLoaderBase


class YamlDescriptionLoader(DescriptionLoaderBase):
    """YAMLファイルからプロセス記述をロード"""

    def _load_file(self, path: Path) -> Any:
        with path.open("r", encoding="utf-8") as f:
            return yaml.safe_load(f)
