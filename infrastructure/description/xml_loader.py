# infrastructure/description/xml_loader.py
"""
XML process descriptions:

    <process id="order" start="Start">
      <step id="Start" command="validate" priority="1">
        <transition outcome="SUCCESS" to="Ship"/>
        <transition outcome="FAILURE" to="Reject"/>
      </step>
      ...
    </process>
"""
from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Any, Dict, List

from domain.errors import DescriptionLoadError
from infrastructure.description.base_loader import DescriptionLoaderBase


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


class XmlDescriptionLoader(DescriptionLoaderBase):
    def _load_file(self, path: Path) -> Any:
        try:
            root = ET.parse(path).getroot()
        except ET.ParseError as exc:
            raise DescriptionLoadError(f"Unable to parse process XML: {path}: {exc}") from exc
        return self._element_to_dict(root, path)

    def _element_to_dict(self, root: ET.Element, path: Path) -> Dict[str, Any]:
        if _local_name(root.tag) != "process":
            raise DescriptionLoadError(f"Root element must be <process>: {path}")

        steps: List[Dict[str, Any]] = []
        for element in root:
            if _local_name(element.tag) != "step":
                continue
            transitions = [
                dict(child.attrib)
                for child in element
                if _local_name(child.tag) == "transition"
            ]
            step = dict(element.attrib)
            step["transitions"] = transitions
            steps.append(step)

        return {
            "process": {"id": root.get("id"), "start": root.get("start")},
            "steps": steps,
        }
