"""Loaders for XML and CFG locale files."""

from localetable.loaders.base_loader import BaseLoader, get_loader_for_path
from localetable.loaders.cfg_loader import CfgLoader
from localetable.loaders.cfg_parser import CfgParser
from localetable.loaders.xml_loader import XmlLoader

__all__ = [
    "BaseLoader",
    "CfgLoader",
    "CfgParser",
    "XmlLoader",
    "get_loader_for_path",
]
