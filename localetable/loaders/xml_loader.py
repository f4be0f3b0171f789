"""Loader for XML locale files.

Layout::

    <locale>
      <string key="Hello">
        <trans lang="de" value="Hallo"/>
      </string>
    </locale>
"""

import xml.etree.ElementTree as ET
from pathlib import Path

from localetable.errors import ParseError
from localetable.loaders.base_loader import BaseLoader
from localetable.models import LoadResult, LocaleFormat, TranslationSet


class XmlLoader(BaseLoader):
    """Loader for .xml locale files."""

    format = LocaleFormat.XML
    supported_suffixes = (".xml",)

    def __init__(self):
        super().__init__("XmlLoader")

    def load(self, path: str | Path) -> LoadResult:
        """Read ``<string>``/``<trans>`` elements into entries.

        Values come from the ``value`` attribute; element text is not read.
        Other tags are ignored and a repeated key replaces the earlier one.

        Raises:
            ParseError: If the file cannot be opened or is not well-formed.
        """
        source = str(path)
        self._trace_start(source)
        try:
            root = ET.parse(path).getroot()
        except ET.ParseError as e:
            raise ParseError(f"Malformed XML in {source}: {e}") from e
        except OSError as e:
            raise ParseError(f"Cannot open {source}: {e}") from e

        result = LoadResult(source=source, format=self.format)
        for node in root:
            if node.tag != "string":
                continue
            translations: TranslationSet = {}
            for trans in node:
                if trans.tag == "trans":
                    translations[trans.get("lang", "")] = trans.get("value", "")
            result.entries[node.get("key", "")] = translations

        self._trace_complete(result)
        return result
