# infrastructure/description/__init__.py
from infrastructure.description.base_loader import DescriptionLoadError, DescriptionLoaderBase
from infrastructure.description.file_finder import DescriptionFileFinder
from infrastructure.description.file_source import FileDescriptionSource
from infrastructure.description.json_loader import JsonDescriptionLoader
from infrastructure.description.loader_registry import DescriptionLoaderRegistry
from infrastructure.description.xml_loader import XmlDescriptionLoader
from infrastructure.description.yaml_loader import YamlDescriptionLoader

__all__ = [
    "DescriptionLoadError",
    "DescriptionLoaderBase",
    "DescriptionLoaderRegistry",
    "DescriptionFileFinder",
    "FileDescriptionSource",
    "XmlDescriptionLoader",
    "YamlDescriptionLoader",
    "JsonDescriptionLoader",
]
